"""
Main FastAPI application entry point.
"""

import logging

from fastapi import FastAPI

from investcalc import __version__
from investcalc.config import get_settings
from investcalc.api import router as api_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Personal-finance projections: growth, loans, tax and ROI",
    version=__version__,
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": __version__}


def run():
    """Serve the API with uvicorn using configured host and port."""
    import uvicorn

    uvicorn.run(
        "investcalc.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
