"""
Record Keeper root package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, and cross-cutting utilities
- services/  : Business logic and orchestration
- analytics/ : Intent classification and chart building
- llm/       : Language-model fallback client and prompts
- database/  : Record storage and seeding
- models/    : Pydantic models for request/response schemas
"""

__version__ = "1.0.0"
