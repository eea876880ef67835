from fastapi import APIRouter

from .features.admin_dashboard.router import router as admin_dashboard_router
from .features.list_rsvps.router import router as list_rsvps_router
from .features.submit_rsvp.router import router as submit_rsvp_router

router = APIRouter()

router.include_router(list_rsvps_router)
router.include_router(submit_rsvp_router)
router.include_router(admin_dashboard_router)
