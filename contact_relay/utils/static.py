from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from ..logger import get_logger


logger = get_logger(__name__)


class StaticSite(StaticFiles):
    """Static file app that logs every request and forces a utf-8 content type on style sheets."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        logger.info(f"Static request: {path}")
        response = await super().get_response(path, scope)
        if path.endswith(".css"):
            response.headers["content-type"] = "text/css; charset=utf-8"
        return response
