import uvicorn

from .logger import get_logger
from .settings import settings


logger = get_logger(__name__)


if __name__ == "__main__":
    logger.info(f"Server running on http://localhost:{settings.port}")
    uvicorn.run("contact_relay.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
