"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration
4. Exception handlers
5. Startup/shutdown events

Run with: uvicorn recordkeeper.api.main:app --reload
"""
from contextlib import asynccontextmanager
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recordkeeper import __version__
from recordkeeper.analytics.intent_classifier import get_intent_classifier
from recordkeeper.api.routes import chat_router, health_router, records_router
from recordkeeper.core.audit import AuditMiddleware
from recordkeeper.core.config import get_settings
from recordkeeper.core.exceptions import RecordKeeperException
from recordkeeper.core.logging_config import get_logger, setup_logging
from recordkeeper.database.connection import get_database
from recordkeeper.database.init_db import init_record_tables, initialize_sample_data


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    - Startup: wait for the database, create tables, insert sample
      data, train the intent classifier
    - Shutdown: close database connections
    """
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info(f"LLM endpoint: {settings.llm_base_url} (model={settings.llm_model})")

    db = get_database()
    db.wait_until_available(settings.db_connect_retries, settings.db_retry_delay_seconds)
    init_record_tables(db)
    if settings.seed_sample_data:
        initialize_sample_data(db)

    get_intent_classifier()

    yield  # Application runs here

    logger.info(f"Shutting down {settings.app_name}")
    try:
        get_database().close()
    except Exception as e:
        logger.error(f"Error closing database connections: {e}")


app = FastAPI(
    title="Record Keeper API",
    description="""
    Record management service with a conversational assistant.

    ## Features

    - **Records**: list, search and update `{id, name, value}` records
    - **Assistant**: ask for help, list, search or sector analysis in plain English
    - **Fallback**: other record questions are answered by a language model
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration
# ============================================================

if settings.enable_audit_logging:
    app.add_middleware(AuditMiddleware)
    logger.info("Audit logging middleware enabled")

if settings.is_development():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.warning("CORS configured for development (all origins allowed)")


# ============================================================
# Exception Handlers
# ============================================================

def _field_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into ``{field, message}`` pairs."""
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
        message = str(error.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append({
            "field": ".".join(location) or None,
            "message": message,
        })
    return errors


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Schema validation failures are client errors (400, not 422)."""
    errors = _field_errors(exc)
    logger.warning(f"Validation failed on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "validation_error",
            "message": errors[0]["message"] if errors else "Invalid request",
            "details": None,
            "errors": errors,
        },
    )


@app.exception_handler(RecordKeeperException)
async def record_keeper_exception_handler(request: Request, exc: RecordKeeperException):
    """Handle all application exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Detailed error information is only included in development mode.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_error",
            "message": "An internal server error occurred",
            "details": str(exc) if settings.is_development() else None,
        },
    )


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(records_router)
app.include_router(chat_router)


@app.get("/", include_in_schema=False)
async def root():
    """Service index."""
    return {
        "message": "Record Keeper API",
        "version": __version__,
        "documentation": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "recordkeeper.api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development(),
    )
