"""
Domain exceptions and their HTTP mapping.

The data layer raises ``ItemNotFoundError``; services and controllers
let it propagate.  ``register_exception_handlers`` installs the
application-wide handlers that turn these exceptions, and request
validation failures, into JSON error responses.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ItemsAPIException(Exception):
    """Base exception for the Items API.

    Carries the HTTP status code and a machine-readable error code so
    that a single handler can render every domain error.
    """

    def __init__(
        self,
        message: str,
        code: str = "ITEMS_API_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response dict."""
        result: Dict[str, Any] = {
            "detail": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


class ItemNotFoundError(ItemsAPIException):
    """Raised when no item matches an id, or the collection is empty."""

    def __init__(self, item_id: Optional[str] = None):
        if item_id is None:
            message = "No items found"
            details = None
        else:
            message = f"Item not found: {item_id}"
            details = {"item_id": item_id}
        super().__init__(
            message=message,
            code="ITEM_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )
        self.item_id = item_id


async def items_api_exception_handler(request: Request, exc: ItemsAPIException) -> JSONResponse:
    """Render an ``ItemsAPIException`` as JSON with its own status code."""
    logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer schema violations with 400 instead of FastAPI's default 422."""
    logger.info("%s %s -> 400 validation error", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ItemsAPIException, items_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
