from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from .errors import BadRequestError, error_response
from .middleware import BodySizeLimitMiddleware
from .observability import RequestContextMiddleware
from .routes import GROCERIES_PATH, greeting_router, router
from .settings import GroceryListSettings, get_settings
from .store import GroceryStore, InMemoryGroceryStore

log = logging.getLogger("grocerylist.app")


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(e.get("loc", ())), "type": e.get("type"), "msg": e.get("msg")}
        for e in exc.errors()
    ]
    log.info("request_rejected path=%s errors=%d", request.url.path, len(errors))
    return error_response(BadRequestError(details={"errors": errors}))


def create_app(
    store: Optional[GroceryStore] = None,
    settings: Optional[GroceryListSettings] = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

    # One store per app, alive for as long as the app is.
    app.state.store = store if store is not None else InMemoryGroceryStore()
    app.state.settings = settings

    # Last added runs first: request context wraps the size check.
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.BODY_MAX_BYTES, paths=[GROCERIES_PATH])
    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Routers
    app.include_router(router)
    app.include_router(greeting_router)

    return app


_app: Optional[FastAPI] = None


def get_app(settings: Optional[GroceryListSettings] = None) -> FastAPI:
    """Return the process-wide app, creating it (and its store) on first use."""
    global _app
    if _app is None:
        _app = create_app(settings=settings)
    return _app


def __getattr__(name: str):
    # Lets ASGI servers import "components.grocerylist.app:app" without
    # building a store at import time.
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
