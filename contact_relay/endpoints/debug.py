"""Diagnostic endpoints (disable with DEBUG_ENDPOINTS=false)"""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..settings import settings
from ..utils.smtp_probe import probe_smtp


router = APIRouter(tags=["debug"])


@router.get("/_debug/smtp", response_class=PlainTextResponse, include_in_schema=False)
async def debug_smtp() -> Any:
    """Resolve the configured mail server and try to open a TCP connection to it."""

    return PlainTextResponse(await probe_smtp(settings))
