"""
Item Service HTTP API

This package provides the HTTP layer for the item service and the
greeting service, both self-documented through the generated OpenAPI UI.

Architecture:
- server.py: FastAPI application factories and uvicorn entry point
- models.py: Pydantic request/response models
- config.py: Service configuration management
- registry.py: In-memory item registry
- items.py: Item CRUD endpoints
- greeting.py: Greeting endpoints
- errors.py: Service errors and exception handlers
- health.py: Health check endpoint
- metrics.py: Request and item operation metrics
"""

__version__ = "1.0.0"
