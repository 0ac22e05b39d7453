"""
Item Service - minimal HTTP services built on FastAPI.

This package provides:
- A CRUD API over an in-memory collection of items
- A greeting API
- A command line launcher for both servers
"""

__version__ = "1.0.0"
