"""
Visitor Management System API
Development server entry point
"""

import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    is_dev = settings.ENVIRONMENT != "production"
    uvicorn.run(
        # Use import string so reload/workers work correctly
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=is_dev and settings.reload,
        log_level=settings.LOG_LEVEL.lower()
    )
