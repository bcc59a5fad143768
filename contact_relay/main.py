from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse, Response
from jinja2 import Environment, FileSystemLoader
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .endpoints import DEBUG_ROUTERS, ROUTERS
from .exceptions.api_exception import APIException
from .logger import get_logger
from .settings import settings
from .utils.email import SMTPConfig
from .utils.static import StaticSite


logger = get_logger(__name__)

METHOD_NOT_ALLOWED = "Method not allowed"


def create_app() -> FastAPI:
    app = FastAPI(title="contact-relay", version=__version__, docs_url=None, redoc_url=None, openapi_url=None)

    app.state.smtp_config = SMTPConfig.from_settings(settings)
    app.state.templates = Environment(loader=FileSystemLoader(Path(settings.templates_dir)), autoescape=True)

    app.mount("/static", StaticSite(directory=settings.static_dir, check_dir=False), name="static")

    for router, _ in ROUTERS.values():
        app.include_router(router)
    if settings.debug_endpoints:
        logger.warning("Debug endpoints are enabled")
        for router in DEBUG_ROUTERS:
            app.include_router(router)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> Response:
        detail = exc.detail
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and not isinstance(exc, APIException):
            detail = METHOD_NOT_ALLOWED
        return PlainTextResponse(str(detail), status_code=exc.status_code, headers=exc.headers)

    return app


app = create_app()
