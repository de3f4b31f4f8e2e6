from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from .errors import LengthRequiredError, PayloadTooLargeError, error_response

log = logging.getLogger("grocerylist.http")

BODY_METHODS = ("POST", "PUT", "DELETE")


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects body-carrying requests to guarded paths before routing.

    A missing Content-Length yields 411, a declared length above max_bytes
    yields 413. Other paths and methods pass through untouched.
    """

    def __init__(
        self,
        app,
        max_bytes: int,
        paths: Optional[Iterable[str]] = None,
        methods: Iterable[str] = BODY_METHODS,
    ):
        super().__init__(app)
        self.max_bytes = max_bytes
        self.paths: Optional[List[str]] = [p.rstrip("/") for p in paths] if paths is not None else None
        self.methods = {m.upper() for m in methods}

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self._guarded(request):
            return await call_next(request)

        raw = request.headers.get("content-length")
        if raw is None:
            log.info("body_rejected reason=length_required path=%s", request.url.path)
            return error_response(LengthRequiredError())

        try:
            length = int(raw)
        except ValueError:
            length = -1
        if length < 0:
            return error_response(LengthRequiredError("Content-Length header is not a valid length"))

        if length > self.max_bytes:
            log.info("body_rejected reason=too_large path=%s length=%d limit=%d",
                     request.url.path, length, self.max_bytes)
            return error_response(PayloadTooLargeError(details={"limit": self.max_bytes, "length": length}))

        return await call_next(request)

    def _guarded(self, request: Request) -> bool:
        if request.method.upper() not in self.methods:
            return False
        if self.paths is None:
            return True
        return request.url.path.rstrip("/") in self.paths
