import logging

from fastapi import APIRouter, Depends, Request

from src.config.database import STORAGE_ERRORS
from src.config.settings import settings
from src.rsvps.dependencies import get_rsvp_read_model
from src.rsvps.repository.read_models import RSVPReadModel
from src.rsvps.templating import LOAD_ERROR_MESSAGE, render_rsvp_page
from src.rsvps.urls import RSVP_FORM_URL

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(RSVP_FORM_URL, include_in_schema=False)
async def rsvp_page(
    request: Request,
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
):
    """
    Render the RSVP form with the most recent responses, newest first.
    """
    try:
        rsvps = await read_model.list_recent(settings.recent_rsvps_limit)
    except STORAGE_ERRORS:
        logger.exception("Error loading RSVPs")
        return render_rsvp_page(request, [], status_code=500, error=LOAD_ERROR_MESSAGE)

    return render_rsvp_page(request, rsvps)
