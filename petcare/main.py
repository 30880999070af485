"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from petcare.config import Settings
from petcare.database import init_models
from petcare.errors import PetCareError, StoreError, ValidationError
from petcare.routers import (
    analytics,
    auth,
    notifications,
    pet_care_tips,
    pets,
    task_logs,
    tasks,
    user,
)


# Create settings instance for the application
settings = Settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all requests and responses."""

    async def dispatch(self, request: Request, call_next):
        """Log request and response details."""
        # Generate request ID for tracing
        request_id = id(request)

        start_time = time.time()
        logger.info(
            f"Request started: {request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client": request.client.host if request.client else None
            }
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            duration = time.time() - start_time
            logger.error(
                f"Request failed: {request.method} {request.url.path}",
                exc_info=True,
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round(duration * 1000, 2),
                    "error_type": type(exc).__name__,
                }
            )
            # Re-raise to let exception handlers deal with it
            raise

        duration = time.time() - start_time
        logger.info(
            f"Request completed: {request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 2)
            }
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events."""
    if settings.create_tables_on_startup:
        await init_models()
        logger.info("Database tables created/verified")

    logger.info(f"Application started: {settings.app_name} (debug={settings.debug})")

    yield

    logger.info(f"Application shutdown: {settings.app_name}")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="""
    Pet Care API

    Track pets, schedule their care tasks and review how consistently the
    tasks get done.

    * **Authentication**: Registration and login returning JWT tokens
    * **Pets**: Pet profiles, history records and sharing with other users
    * **Tasks**: Scheduled care tasks, completion and task logs
    * **Analytics**: Completion rates per task type and per pet
    * **User**: Profile, password and preferences
    * **Notifications**: In-app notifications and pet care tips

    ## Authentication

    1. Register at `/api/auth/register` or login at `/api/auth/login`
    2. Include the returned token in the `Authorization` header as `Bearer <token>`

    ## Error Handling

    Errors return `{"error": message, "error_code": code}`. Validation
    failures return 400 with `{"errors": [{"field", "msg", "type"}]}`.
    """,
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "auth", "description": "Registration, login and token verification."},
        {"name": "pets", "description": "Pet profiles, history records and sharing."},
        {"name": "tasks", "description": "Care tasks, completion, attachments and comments."},
        {"name": "task-logs", "description": "History of completed tasks."},
        {"name": "analytics", "description": "Completion statistics."},
        {"name": "user", "description": "Profile, password and preferences."},
        {"name": "notifications", "description": "In-app notifications."},
        {"name": "pet-care-tips", "description": "Care tips by pet type and category."},
    ],
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)


@app.get("/")
async def root() -> dict:
    """Root endpoint returning API information."""
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "status": "operational",
        "docs": "/api/docs"
    }


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app_name": settings.app_name
    }


# Include routers
app.include_router(auth.router)
app.include_router(pets.router)
app.include_router(tasks.router)
app.include_router(task_logs.router)
app.include_router(analytics.router)
app.include_router(user.router)
app.include_router(notifications.router)
app.include_router(pet_care_tips.router)


# Global exception handlers

def _validation_response(errors: list) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "errors": errors,
            "error_code": ValidationError.error_code,
        }
    )


@app.exception_handler(PetCareError)
async def petcare_error_handler(request: Request, exc: PetCareError) -> JSONResponse:
    """Map domain errors to their status code and error code."""
    if isinstance(exc, ValidationError):
        logger.info(f"Validation failed: {request.url.path} - {exc.message}")
        return _validation_response(exc.errors)

    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {request.url.path} - {exc.message}")
    else:
        logger.info(f"HTTP {exc.status_code}: {request.url.path} - {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "error_code": exc.error_code
        }
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Reshape request validation failures into the 400 ``errors`` form."""
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append({
            "field": ".".join(location) or None,
            "msg": error.get("msg"),
            "type": error.get("type"),
        })
    logger.info(f"Request validation failed: {request.url.path}")
    return _validation_response(errors)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle HTTP exceptions, including 401s from the auth dependency."""
    if exc.status_code >= 500:
        logger.error(f"HTTP error {exc.status_code}: {request.url.path} - {exc.detail}")
    else:
        logger.info(f"HTTP {exc.status_code}: {request.url.path}")

    # Map status codes to error codes
    error_code_map = {
        404: "NOT_FOUND",
        403: "FORBIDDEN",
        401: "UNAUTHORIZED",
        405: "METHOD_NOT_ALLOWED",
        400: "BAD_REQUEST",
    }

    error_code = error_code_map.get(exc.status_code, f"HTTP_{exc.status_code}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "error_code": error_code
        },
        headers=getattr(exc, "headers", None),
    )


def _internal_error_response(exc: Exception, error: PetCareError) -> JSONResponse:
    content = {
        "error": error.message,
        "error_code": error.error_code
    }
    if settings.debug:
        # In debug mode, return detailed error information
        content["error_type"] = type(exc).__name__
        content["error_message"] = str(exc)
    return JSONResponse(status_code=500, content=content)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle database failures that escaped the services."""
    logger.error(f"Database error: {request.url.path}", exc_info=True)
    return _internal_error_response(exc, StoreError())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    # Log the full exception with stack trace
    logger.error(
        f"Unhandled exception: {request.url.path}",
        exc_info=True,
        extra={
            "method": request.method,
            "url": str(request.url),
            "client": request.client.host if request.client else None
        }
    )
    return _internal_error_response(exc, PetCareError())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "petcare.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
