"""
Visitor Management System API
Main application file
"""

from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from app.core.config import settings
from app.core.database import engine, Base, test_database_connection
from app.core.init_db import seed_initial_data
from app.routers import resident, security
from app.models import Visitor, VisitorTemplate  # noqa: F401

# ============================================================================
# Logging Configuration
# ============================================================================

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format=settings.log_format
)
logger = logging.getLogger(__name__)

# ============================================================================
# FastAPI Application
# ============================================================================

docs_url = "/docs" if settings.ENVIRONMENT != "production" else None
redoc_url = "/redoc" if settings.ENVIRONMENT != "production" else None

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Residents register visitors; security checks them in by QR token, OTP or name search",
    docs_url=docs_url,
    redoc_url=redoc_url,
)

# ============================================================================
# CORS Configuration
# ============================================================================

if settings.API_CORS_ORIGINS and settings.API_CORS_ORIGINS.strip() == "*":
    # Allow all origins (credentials must be False)
    origins = ["*"]
    allow_credentials = False
else:
    origins = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    if settings.API_CORS_ORIGINS:
        additional_origins = [o.strip() for o in settings.API_CORS_ORIGINS.split(",") if o.strip()]
        origins.extend(additional_origins)

    allow_credentials = True

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# Root & Health Endpoints
# ============================================================================

@app.get("/", tags=["Root"])
def root():
    """Root endpoint - API information"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "documentation": docs_url,
        "endpoints": {
            "health": "/health",
            "resident": "/api/resident",
            "security": "/api/security"
        }
    }


@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint for API monitoring"""
    return {
        "status": "ok",
        "message": "Visitor Management System API is running",
        "version": settings.app_version,
        "environment": settings.ENVIRONMENT,
        "database": "connected" if test_database_connection() else "unavailable",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/api/health", tags=["Health"])
def api_health():
    """Health check endpoint (alternative path)"""
    return {
        "status": "ok",
        "message": "Visitor Management System API is running",
        "version": settings.app_version,
        "environment": settings.ENVIRONMENT
    }

# ============================================================================
# Event Handlers
# ============================================================================

@app.on_event("startup")
async def startup_event():
    """Actions to perform on application startup"""
    logger.info("=" * 60)
    logger.info("Starting Visitor Management System API")
    logger.info("=" * 60)
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Database: {engine.url.render_as_string(hide_password=True)}")
    logger.info(f"CORS Origins: {settings.API_CORS_ORIGINS or 'Default'}")
    logger.info("=" * 60)

    try:
        logger.info("Ensuring database tables exist...")
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ready")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        logger.warning("Application will continue, but database operations may fail")
        return

    if settings.seed_database:
        seed_initial_data()


@app.on_event("shutdown")
async def shutdown_event():
    """Actions to perform on application shutdown"""
    logger.info("=" * 60)
    logger.info("Shutting down Visitor Management System API")
    logger.info("=" * 60)

# ============================================================================
# Router Registration
# ============================================================================

logger.info("Registering API routers...")
app.include_router(resident.router)  # Visitor registration and listing
app.include_router(security.router)  # Gate lookups and arrival confirmation
logger.info("All routers registered successfully")
