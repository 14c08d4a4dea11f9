import logging
from typing import Any, Dict, Optional

from event_gallery.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    def __init__(self, name: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        self._logger = logging.getLogger(name)
        self._context = dict(context or {})

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def bind(self, **context) -> "StdLoggerAdapter":
        return StdLoggerAdapter(self._logger.name, {**self._context, **context})

    def _tag(self, msg: str) -> str:
        if not self._context:
            return msg
        tags = " ".join(f"{key}={value}" for key, value in self._context.items())
        return f"[{tags}] {msg}"

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(self._tag(msg), *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(self._tag(msg), *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(self._tag(msg), *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(self._tag(msg), *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        self._logger.exception(self._tag(msg), *args, **kwargs)
