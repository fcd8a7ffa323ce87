"""
HTTP layer for the record service.

``app`` is the FastAPI application; run it with
``uvicorn recordkeeper.api:app``.
"""
from recordkeeper.api.main import app

__all__ = ["app"]
