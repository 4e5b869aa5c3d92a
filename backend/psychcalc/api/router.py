"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from psychcalc.api.convert import router as convert_router
from psychcalc.api.state_point import router as state_point_router

router = APIRouter()
router.include_router(convert_router)
router.include_router(state_point_router)
