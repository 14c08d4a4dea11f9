from urllib.parse import quote

from event_gallery.domain.models.gallery_config import GalleryConfig


class PublicUrlService:
    def __init__(self, config: GalleryConfig):
        self.config = config

    @property
    def base_url(self) -> str:
        if self.config.cdn_url:
            return self.config.cdn_url
        return f"https://{self.config.bucket_name}.s3.{self.config.region}.amazonaws.com"

    @staticmethod
    def encode_key(key: str) -> str:
        return "/".join(quote(segment, safe="!'()*") for segment in key.split("/"))

    def url_for(self, key: str) -> str:
        return f"{self.base_url}/{self.encode_key(key)}"
