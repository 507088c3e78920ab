"""
Xport Navigation Access Service - Main FastAPI Application
"""
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from contextlib import asynccontextmanager
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

import logging

from navaccess.config import settings
from navaccess.errors import ConfigurationError
from navaccess.services.access_policy import get_access_policy
from navaccess.services.menu_filter import get_menu_definition

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)
from navaccess.api.v1 import navigation

# Rate limiter instance; default limits apply to every route through SlowAPIMiddleware
limiter = Limiter(key_func=get_remote_address, default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup: build static config once, refusing to serve a broken policy or menu
    logger.info("Starting up Xport Navigation Access Service...")
    try:
        policy = get_access_policy()
        definition = get_menu_definition()
    except ConfigurationError as e:
        logger.error(f"Refusing to start: {e}")
        raise
    logger.info(f"Loaded access policy for {len(policy.roles())} roles and {len(definition)} menu lists")
    yield
    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title="Xport Navigation Access API",
    description="Role-based sidebar visibility for the logistics operations dashboard",
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan
)

# Attach limiter to app state (required by slowapi)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Trusted Host Middleware — reject requests with spoofed Host headers
app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response: Response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# Include routers
app.include_router(navigation.router, prefix="/api/v1/navigation", tags=["Navigation"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}
