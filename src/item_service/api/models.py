"""Pydantic request/response models for the item service API."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorCategory(str, Enum):
    """Error categorization for service errors."""

    VALIDATION_ERROR = "validation_error"  # Required input missing
    NOT_FOUND = "not_found"  # Referenced item does not exist


class IdStrategy(str, Enum):
    """How the registry assigns identifiers to new items."""

    MONOTONIC = "monotonic"  # Counter never decreases, deleted ids are never reused
    LAST_PLUS_ONE = "last_plus_one"  # Last item's id + 1, or 1 when empty


class Item(BaseModel):
    """A managed item."""

    id: int = Field(..., gt=0, description="Auto-generated ID")
    name: str = Field(..., description="Item name")
    description: str = Field("", description="Item description")

    model_config = {
        "json_schema_extra": {
            "example": {"id": 1, "name": "Sample Item", "description": "A simple item"}
        }
    }


class ItemCreate(BaseModel):
    """Request body for creating an item."""

    name: Optional[str] = Field(None, description="Item name (required)")
    description: Optional[str] = Field(None, description="Item description")


class ItemUpdate(BaseModel):
    """Request body for updating an item. Omitted or null fields keep their value."""

    name: Optional[str] = Field(None, description="New item name")
    description: Optional[str] = Field(None, description="New item description")


class ItemDeleteResponse(BaseModel):
    """Response returned after an item is deleted."""

    message: str = Field("Item deleted", description="Confirmation message")
    deleted_item: Item = Field(..., alias="deletedItem", description="The removed item")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str = Field(..., description="Error message")


class GreetingResponse(BaseModel):
    """Greeting response model."""

    message: str = Field(..., description="Greeting message", examples=["Hello, world!"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Service health status")
    service: str = Field(..., description="Title of the answering service")
    version: str = Field(..., description="Service version")
    uptime: str = Field(..., description="Service uptime in human readable format")
    timestamp: datetime = Field(..., description="Current timestamp")
    item_count: Optional[int] = Field(None, description="Items held by the registry")
    id_strategy: Optional[IdStrategy] = Field(None, description="Identifier assignment strategy")


class MetricsResponse(BaseModel):
    """Metrics summary response model."""

    api_metrics: Dict[str, Any] = Field(default_factory=dict, description="HTTP request metrics")
    item_metrics: Dict[str, Any] = Field(default_factory=dict, description="Item operation metrics")
