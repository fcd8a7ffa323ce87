"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- records.py : Listing, search and update
- chat.py    : Conversational endpoint
- health.py  : Health check endpoints
"""
from recordkeeper.api.routes.records import router as records_router
from recordkeeper.api.routes.chat import router as chat_router
from recordkeeper.api.routes.health import router as health_router

__all__ = [
    "records_router",
    "chat_router",
    "health_router",
]
