"""Service errors and their HTTP rendering."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .models import ErrorCategory, ErrorResponse

logger = logging.getLogger(__name__)


class ItemServiceError(Exception):
    """Base error for item service failures with categorization."""

    status_code: int = 500

    def __init__(self, message: str, category: ErrorCategory):
        super().__init__(message)
        self.message = message
        self.category = category

    def to_response(self) -> ErrorResponse:
        """Build the error body returned to the client."""
        return ErrorResponse(error=self.message)


class ItemValidationError(ItemServiceError):
    """Required input was missing or empty."""

    status_code = 400

    def __init__(self, field: str, reason: str = "required", message: Optional[str] = None):
        if message is None:
            message = f"{field.capitalize()} is {reason}"
        super().__init__(message, ErrorCategory.VALIDATION_ERROR)
        self.field = field
        self.reason = reason


class ItemNotFoundError(ItemServiceError):
    """No item exists with the requested identifier."""

    status_code = 404

    def __init__(self, item_id: int):
        super().__init__("Item not found", ErrorCategory.NOT_FOUND)
        self.item_id = item_id


async def item_service_error_handler(request: Request, exc: ItemServiceError) -> JSONResponse:
    """Render an ItemServiceError as ``{"error": message}``."""
    logger.warning(
        f"{request.method} {request.url.path} failed ({exc.category.value}): {exc.message}"
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_response().model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the service error handlers on an application."""
    app.add_exception_handler(ItemServiceError, item_service_error_handler)
