import logging

from fastapi import APIRouter, Depends, Form, Request

from src.config.database import STORAGE_ERRORS
from src.config.settings import settings
from src.rsvps.dependencies import get_rsvp_read_model, get_rsvp_write_model
from src.rsvps.dtos import RSVPValidationError
from src.rsvps.features.submit_rsvp.form import parse_submission
from src.rsvps.repository.read_models import RSVPReadModel
from src.rsvps.repository.write_models import RSVPWriteModel
from src.rsvps.templating import render_rsvp_page
from src.rsvps.urls import RSVP_FORM_URL

logger = logging.getLogger(__name__)

router = APIRouter()

SAVE_ERROR_MESSAGE = "Failed to save RSVP. Please try again."


@router.post(RSVP_FORM_URL, include_in_schema=False)
async def submit_rsvp(
    request: Request,
    name: str | None = Form(None),
    email: str | None = Form(None),
    attending: str | None = Form(None),
    guests: str | None = Form(None),
    dietary_restrictions: str | None = Form(None),
    message: str | None = Form(None),
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
):
    """
    Store an RSVP from the public form and re-render the page.
    400 when name or email is missing, 500 when the response cannot be stored.
    """
    submitted = {
        "name": name or "",
        "email": email or "",
        "attending": attending == "true",
        "guests": guests,
        "dietary_restrictions": dietary_restrictions or "",
        "message": message or "",
    }
    try:
        submission = parse_submission(
            name=name,
            email=email,
            attending=attending,
            guests=guests,
            dietary_restrictions=dietary_restrictions,
            message=message,
        )
    except RSVPValidationError as e:
        return await _render(request, read_model, status_code=400, error=e.message, form=submitted)

    try:
        await write_model.create_rsvp(submission)
    except STORAGE_ERRORS:
        logger.exception("Error saving RSVP")
        return await _render(
            request, read_model, status_code=500, error=SAVE_ERROR_MESSAGE, form=submitted
        )

    return await _render(request, read_model, success=True)


async def _render(request: Request, read_model: RSVPReadModel, **kwargs):
    # The recent list is best effort here; the submission outcome is what gets reported
    try:
        rsvps = await read_model.list_recent(settings.recent_rsvps_limit)
    except STORAGE_ERRORS:
        logger.exception("Error loading RSVPs")
        rsvps = []
    return render_rsvp_page(request, rsvps, **kwargs)
