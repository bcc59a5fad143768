from fastapi import APIRouter

from . import contact, debug, pages


ROUTERS: dict[str, tuple[APIRouter, str | None]] = {
    module.router.tags[0]: (module.router, module.__doc__) for module in [pages, contact]
}

DEBUG_ROUTERS: list[APIRouter] = [module.router for module in [debug]]
