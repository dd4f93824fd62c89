"""
API routes for the projection service.
"""

from fastapi import APIRouter

from investcalc.api import projections

router = APIRouter()

# Include sub-routers
router.include_router(projections.router, prefix="/projections", tags=["projections"])
