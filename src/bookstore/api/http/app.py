"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.exceptions import HTTPException
from starlette.responses import JSONResponse

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.api.http.routers import (
    auth,
    authors,
    books,
    cart,
    categories,
    orders,
    publishers,
    users,
)
from src.bookstore.api.utils.app_startup import configure_logging
from src.bookstore.core.exceptions import BookStoreError
from src.bookstore.core.services.database import DbSessionService
from src.bookstore.core.services.jwt import JwtGeneratorService, JwtVerificationService
from src.bookstore.core.services.notifications import EmailService
from src.bookstore.core.services.storage import PhotoStorageService
from src.bookstore.runtime.context import get_config

# Load configuration
main_config = get_config()


# Initialize logging
configure_logging()


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title="Book Store API",
    lifespan=lifespan,
    docs_url=None if main_config.app.environment == "production" else "/docs",
    redoc_url=None if main_config.app.environment == "production" else "/redoc",
)

# expose startup for tests
__all__ = ["app", "startup", "shutdown"]

# --- CORS configuration ---
if main_config.app.environment == "production" and "*" in main_config.app.cors.origins:
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=main_config.app.cors.origins,
    allow_credentials=main_config.app.cors.allow_credentials,
    allow_methods=main_config.app.cors.allow_methods,
    allow_headers=main_config.app.cors.allow_headers,
)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or "-"


# --- Domain error translation ---
@app.exception_handler(BookStoreError)
async def handle_domain_error(request: Request, exc: BookStoreError) -> JSONResponse:
    log = logger.bind(status_code=exc.status_code, error_type=type(exc).__name__)
    if exc.status_code >= 500:
        log.error("request.domain_error: {}", exc.message)
    else:
        log.warning("request.domain_error: {}", exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "request_id": _request_id(request)},
    )


@app.exception_handler(HTTPException)
async def handle_http_error(request: Request, exc: HTTPException) -> JSONResponse:
    logger.bind(status_code=exc.status_code).info("request.rejected: {}", exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "request_id": _request_id(request)},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.bind(status_code=422).info("request.validation_error")
    return JSONResponse(
        status_code=422,
        content={
            "detail": jsonable_encoder(exc.errors()),
            "request_id": _request_id(request),
        },
    )


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    # Correlation / tracing
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Router registration ---
api_prefix = main_config.app.api_prefix
app.include_router(auth.router, prefix=f"{api_prefix}/auth", tags=["auth"])
app.include_router(books.router, prefix=f"{api_prefix}/books", tags=["books"])
app.include_router(
    categories.router, prefix=f"{api_prefix}/categories", tags=["categories"]
)
app.include_router(authors.router, prefix=f"{api_prefix}/authors", tags=["authors"])
app.include_router(
    publishers.router, prefix=f"{api_prefix}/publishers", tags=["publishers"]
)
app.include_router(cart.router, prefix=f"{api_prefix}/cart", tags=["cart"])
app.include_router(orders.router, prefix=f"{api_prefix}/orders", tags=["orders"])
app.include_router(users.router, prefix=f"{api_prefix}/users", tags=["users"])


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    deps = ApplicationDependencies(
        database_service=DbSessionService(),
        jwt_generation_service=JwtGeneratorService(),
        jwt_verify_service=JwtVerificationService(),
        email_service=EmailService(),
        photo_storage_service=PhotoStorageService(),
    )
    app.state.app_dependencies = deps

    if not config.jwt.secret:
        logger.warning("jwt.secret is not set; logins will fail")
    if not config.photo.configured:
        logger.warning("Image hosting is not configured; photo uploads will fail")
    if config.email.enabled and not (config.email.api_url and config.email.api_key):
        logger.warning("Email is enabled but the provider is not configured")


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.engine.dispose()


# --- Route handlers ---


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/ready")
def readiness(request: Request) -> JSONResponse:
    """Readiness check endpoint; verifies the database connection."""
    app_dependencies: ApplicationDependencies = request.app.state.app_dependencies
    if not app_dependencies.database_service.health_check():
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return JSONResponse(content={"status": "ready"})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=main_config.app.host,
        port=main_config.app.port,
        access_log=False,  # We handle access logging in middleware
    )
