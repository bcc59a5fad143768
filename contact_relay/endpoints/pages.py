"""Endpoints for the rendered site pages"""

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from jinja2 import Environment, TemplateError

from ..exceptions.pages import TemplateLoadError
from ..settings import settings


router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request) -> Any:
    templates: Environment = request.app.state.templates
    try:
        content = templates.get_template(settings.index_template).render()
    except TemplateError as err:
        raise TemplateLoadError(f"{type(err).__name__}: {err}")

    return HTMLResponse(content)
