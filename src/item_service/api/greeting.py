"""Greeting endpoints."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from .models import GreetingResponse

GREETING_TEXT = "Hello from the API server!"

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, summary="Basic test route")
async def root() -> str:
    return GREETING_TEXT


@router.get("/hello", response_model=GreetingResponse, summary="Returns a greeting message")
async def hello() -> GreetingResponse:
    """Return a JSON greeting."""
    return GreetingResponse(message="Hello, world!")
