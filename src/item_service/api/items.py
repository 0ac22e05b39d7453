"""Item CRUD endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status

from .metrics import MetricsCollector
from .models import ErrorResponse, Item, ItemCreate, ItemDeleteResponse, ItemUpdate
from .registry import ItemRegistry

router = APIRouter()

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Item not found"}}


def get_registry(request: Request) -> ItemRegistry:
    """Get the item registry owned by the application."""
    return request.app.state.registry


def get_metrics_collector(request: Request) -> MetricsCollector:
    """Get the metrics collector owned by the application."""
    return request.app.state.metrics_collector


@router.get("/items", response_model=List[Item], summary="Get all items")
def list_items(
    registry: ItemRegistry = Depends(get_registry),
    metrics: MetricsCollector = Depends(get_metrics_collector),
) -> List[Item]:
    """Return every item in insertion order."""
    items = registry.list_all()
    metrics.record_item_operation("list")
    return items


@router.get(
    "/items/{item_id}",
    response_model=Item,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a single item by ID",
)
def get_item(
    item_id: int,
    registry: ItemRegistry = Depends(get_registry),
    metrics: MetricsCollector = Depends(get_metrics_collector),
) -> Item:
    item = registry.get_by_id(item_id)
    metrics.record_item_operation("get")
    return item


@router.post(
    "/items",
    response_model=Item,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Name is required"}},
    summary="Create a new item",
)
def create_item(
    payload: Optional[ItemCreate] = None,
    registry: ItemRegistry = Depends(get_registry),
    metrics: MetricsCollector = Depends(get_metrics_collector),
) -> Item:
    """
    Create a new item.

    The name is required and must not be empty. A missing description is
    stored as an empty string. A request without a body is treated as an
    empty payload.
    """
    payload = payload or ItemCreate()
    item = registry.create(payload.name, payload.description)
    metrics.record_item_operation("create")
    return item


@router.put(
    "/items/{item_id}",
    response_model=Item,
    responses=NOT_FOUND_RESPONSE,
    summary="Update an item by ID",
)
def update_item(
    item_id: int,
    payload: Optional[ItemUpdate] = None,
    registry: ItemRegistry = Depends(get_registry),
    metrics: MetricsCollector = Depends(get_metrics_collector),
) -> Item:
    """
    Update an item.

    Only fields present and non-null in the body are changed; the rest keep
    their current values.
    """
    payload = payload or ItemUpdate()
    item = registry.update(item_id, name=payload.name, description=payload.description)
    metrics.record_item_operation("update")
    return item


@router.delete(
    "/items/{item_id}",
    response_model=ItemDeleteResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete an item by ID",
)
def delete_item(
    item_id: int,
    registry: ItemRegistry = Depends(get_registry),
    metrics: MetricsCollector = Depends(get_metrics_collector),
) -> ItemDeleteResponse:
    """Delete an item and echo it back."""
    deleted = registry.delete(item_id)
    metrics.record_item_operation("delete")
    return ItemDeleteResponse(deleted_item=deleted)
