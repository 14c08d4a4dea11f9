class DomainError(Exception):
    pass


class ConfigurationError(DomainError):
    pass


class ObjectStoreError(DomainError):
    pass


class ImageFetchError(DomainError):
    def __init__(self, store_name: str, reason: str):
        self.store_name = store_name
        self.reason = reason or "Unknown error"
        super().__init__(f"Failed to fetch images from {store_name}: {self.reason}")
