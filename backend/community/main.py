import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from community.api import api_v1_router, info_router
from community.core.config import settings
from community.core.db import init_db
from community.core.errors import DomainError
from community.core.logger import logger
from community.core.sessions import init_redis


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}")
    # Initialize database on startup
    init_db()

    # Initialize Redis (sessions and live push)
    try:
        init_redis()
    except Exception as e:
        logger.critical(f"Could not connect to Redis at {settings.REDIS_URL}: {e}")
        sys.exit(1)

    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    lifespan=lifespan,
)


@app.exception_handler(DomainError)
async def handle_domain_error(request: Request, exc: DomainError):
    """Map service failures to their HTTP status with a readable message."""
    logger.info(
        f"{type(exc).__name__}: {exc.message}", extra={"path": str(request.url)}
    )
    return JSONResponse({"detail": exc.message}, status_code=exc.status_code)


@app.middleware("http")
async def log_exceptions(request: Request, call_next):
    """Log unhandled exceptions with request context."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled exception", extra={"path": str(request.url)})
        raise


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS.split(","),
    allow_credentials=settings.ALLOW_CREDENTIALS,
    allow_methods=settings.ALLOW_METHODS,
    allow_headers=settings.ALLOW_HEADERS,
    max_age=600,
)

app.include_router(api_v1_router)
app.include_router(info_router)
