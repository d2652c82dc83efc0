"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from cleanroom.api.hvac import router as hvac_router
from cleanroom.api.design_conditions import router as design_conditions_router
from cleanroom.api.air_changes import router as air_changes_router

router = APIRouter()
router.include_router(hvac_router)
router.include_router(design_conditions_router)
router.include_router(air_changes_router)
