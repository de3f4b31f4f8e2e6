from __future__ import annotations

from typing import Dict, Optional

from starlette.responses import JSONResponse


class GroceryListError(Exception):
    """Base error for transport-level rejections.

    The store and handlers never raise; these only describe requests that are
    turned away before reaching them.
    """
    type: str = "INTERNAL"
    code: str = "internal_error"
    message: str = "Internal server error"
    status_code: int = 500

    def __init__(self, message: Optional[str] = None, *, details: Optional[Dict] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.details = details

    def to_payload(self) -> Dict:
        return {
            "type": self.type,
            "code": self.code,
            "message": self.message,
            "details": self.details or {},
        }


class BadRequestError(GroceryListError):
    type = "VALIDATION"
    code = "bad_request"
    message = "Request body is not valid JSON for this route"
    status_code = 400


class LengthRequiredError(GroceryListError):
    type = "VALIDATION"
    code = "length_required"
    message = "Content-Length header is required"
    status_code = 411


class PayloadTooLargeError(GroceryListError):
    type = "VALIDATION"
    code = "payload_too_large"
    message = "Request body exceeds the size limit"
    status_code = 413


def error_response(err: GroceryListError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content={"error": err.to_payload()})
