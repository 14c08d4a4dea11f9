from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from event_gallery.applications.interfaces.dtos.message import Message
from event_gallery.domain.exceptions import ConfigurationError
from event_gallery.infrastructure.config.dependencies import get_app_settings
from event_gallery.infrastructure.logging.logger import setup_logging
from event_gallery.presentation.routers import images

METHOD_NOT_ALLOWED_DETAIL = "Only GET requests are supported"

setup_logging()

settings = get_app_settings()

app = FastAPI(title=settings.title)

app.include_router(images.router, prefix=settings.api_prefix)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == HTTPStatus.METHOD_NOT_ALLOWED:
        exc = StarletteHTTPException(
            status_code=HTTPStatus.METHOD_NOT_ALLOWED, detail=METHOD_NOT_ALLOWED_DETAIL, headers=exc.headers
        )
    return await http_exception_handler(request, exc)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    return JSONResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "ok"}
