import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from src.config.database import STORAGE_ERRORS
from src.rsvps.dependencies import get_rsvp_read_model
from src.rsvps.dtos import RSVPStatsDTO
from src.rsvps.export import CSV_FILENAME, rsvps_to_csv
from src.rsvps.repository.read_models import RSVPReadModel
from src.rsvps.templating import LOAD_ERROR_MESSAGE, templates
from src.rsvps.urls import ADMIN_DASHBOARD_URL, ADMIN_SUMMARY_API_URL

logger = logging.getLogger(__name__)

router = APIRouter()


class RSVPResponse(BaseModel):
    id: int
    name: str
    email: str
    attending: bool
    guests: int
    dietary_restrictions: str | None = None
    message: str | None = None
    created_at: datetime


class RSVPStatsResponse(BaseModel):
    total: int
    attending: int
    total_guests: int


class AdminSummaryResponse(BaseModel):
    """All responses plus the aggregate shown on the dashboard."""

    rsvps: list[RSVPResponse]
    stats: RSVPStatsResponse


@router.get(ADMIN_DASHBOARD_URL, include_in_schema=False)
async def admin_dashboard(
    request: Request,
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
):
    """
    Render every response, split by attendance, with the aggregate and a CSV download.
    """
    status_code = 200
    error = None
    try:
        rsvps = await read_model.list_all()
        stats = await read_model.get_stats()
    except STORAGE_ERRORS:
        logger.exception("Error loading admin data")
        rsvps, stats = [], RSVPStatsDTO()
        status_code, error = 500, LOAD_ERROR_MESSAGE

    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "stats": stats,
            "attending_rsvps": [rsvp for rsvp in rsvps if rsvp.attending],
            "not_attending_rsvps": [rsvp for rsvp in rsvps if not rsvp.attending],
            "csv_data": rsvps_to_csv(rsvps),
            "csv_filename": CSV_FILENAME,
            "error": error,
        },
        status_code=status_code,
    )


@router.get(ADMIN_SUMMARY_API_URL, response_model=AdminSummaryResponse)
async def admin_summary(
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> AdminSummaryResponse:
    """
    Get every RSVP, newest first, with total responses, attending count and guest headcount.
    """
    try:
        rsvps = await read_model.list_all()
        stats = await read_model.get_stats()
    except STORAGE_ERRORS:
        logger.exception("Error loading admin data")
        raise HTTPException(status_code=500, detail=LOAD_ERROR_MESSAGE)

    return AdminSummaryResponse(
        rsvps=[
            RSVPResponse(
                id=rsvp.id,
                name=rsvp.name,
                email=rsvp.email,
                attending=rsvp.attending,
                guests=rsvp.guests,
                dietary_restrictions=rsvp.dietary_restrictions,
                message=rsvp.message,
                created_at=rsvp.created_at,
            )
            for rsvp in rsvps
        ],
        stats=RSVPStatsResponse(
            total=stats.total,
            attending=stats.attending,
            total_guests=stats.total_guests,
        ),
    )
