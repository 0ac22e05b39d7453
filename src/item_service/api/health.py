"""Health check endpoint shared by the item and greeting services."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from .. import __version__
from .models import HealthResponse

router = APIRouter()


def format_uptime(start_time: float) -> str:
    """Format uptime as human readable string."""
    uptime_seconds = int(time.time() - start_time)
    days, remainder = divmod(uptime_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    return f"{days}d {hours}h {minutes}m {seconds}s"


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Report which service is answering and how long it has been up.

    The item service also reports how many items its registry holds and
    which identifier strategy it uses; the greeting service leaves both unset.
    """
    state = request.app.state
    registry = getattr(state, "registry", None)

    return HealthResponse(
        status="healthy",
        service=request.app.title,
        version=__version__,
        uptime=format_uptime(state.started_at),
        timestamp=datetime.now(timezone.utc),
        item_count=len(registry) if registry is not None else None,
        id_strategy=registry.id_strategy if registry is not None else None,
    )
