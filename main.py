"""
AllReview FastAPI Backend
Campaign management platform connecting advertisers with delivery partners
"""

import time
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import DatabaseManager
from app.routes import (
    auth, campaigns, applications, samples, shipping,
    performance, payments, partners, admin
)
from app.middleware.performance import PerformanceMiddleware
from app.utils.exceptions import AllReviewError, AggregationFailed

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.APP_NAME} backend starting (version {settings.APP_VERSION})")

    if settings.SKIP_DB_TABLE_CREATION:
        logger.info("SKIP_DB_TABLE_CREATION is set; tables are managed by alembic")
    else:
        DatabaseManager.create_all_tables()

    if not DatabaseManager.check_connection():
        logger.error("Database connection failed at startup")

    yield

    logger.info(f"{settings.APP_NAME} backend shutting down")


# Create FastAPI app
app = FastAPI(
    title="AllReview API",
    description="Campaign management for advertisers, delivery partners and administrators",
    version=settings.APP_VERSION,
    docs_url="/api/docs" if settings.DEBUG else None,
    redoc_url="/api/redoc" if settings.DEBUG else None,
    lifespan=lifespan
)

app.add_middleware(PerformanceMiddleware, slow_request_threshold=settings.SLOW_REQUEST_THRESHOLD)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    allow_headers=["*"],
)

# Trusted host middleware
app.add_middleware(
    TrustedHostMiddleware,
    allowed_hosts=settings.ALLOWED_HOSTS
)


@app.exception_handler(AllReviewError)
async def domain_exception_handler(request: Request, exc: AllReviewError):
    """Render domain errors as {"message": ...} with their status code"""
    if isinstance(exc, AggregationFailed):
        # Database details stay in the log
        return JSONResponse(status_code=exc.status_code, content={"message": AggregationFailed.default_message})

    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")

    content = {"message": exc.message}
    if exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(content))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed input is a 400, not FastAPI's default 422"""
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({
            "message": "Invalid request data",
            "errors": exc.errors()
        })
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.exception(f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}")

    if settings.DEBUG:
        raise exc

    return JSONResponse(
        status_code=500,
        content={
            "message": "An unexpected error occurred. Please try again later."
        }
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    """System health check"""
    health_status = {
        "status": "healthy",
        "timestamp": time.time(),
        "services": {}
    }

    if DatabaseManager.check_connection():
        health_status["services"]["database"] = "healthy"
    else:
        health_status["services"]["database"] = "unhealthy"
        health_status["status"] = "degraded"

    return health_status


# Root endpoint
@app.get("/")
async def root():
    """Welcome message and API information"""
    return {
        "message": f"Welcome to {settings.APP_NAME} API",
        "description": "Campaign management for advertisers, delivery partners and administrators",
        "status": "running",
        "documentation": "/api/docs",
        "health_check": "/health"
    }

# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(campaigns.router, prefix="/api/campaigns", tags=["Campaigns"])
app.include_router(applications.router, prefix="/api/applications", tags=["Applications"])
app.include_router(samples.router, prefix="/api/sample-products", tags=["Samples"])
app.include_router(shipping.router, prefix="/api/shipping-records", tags=["Shipping"])
app.include_router(performance.router, prefix="/api/performance-metrics", tags=["Performance"])
app.include_router(payments.router, prefix="/api/payments", tags=["Payments"])
app.include_router(partners.earnings_router, prefix="/api/partner-earnings", tags=["Partners"])
app.include_router(partners.router, prefix="/api/partners", tags=["Partners"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=5000,
        reload=settings.DEBUG,
        access_log=settings.DEBUG
    )
