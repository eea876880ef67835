from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from src.config.settings import settings
from src.rsvps.dtos import RSVPDTO

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.globals["wedding_title"] = settings.wedding_title
templates.env.globals["wedding_date"] = settings.wedding_date
templates.env.globals["wedding_location"] = settings.wedding_location
templates.env.globals["max_guests"] = settings.max_guests_per_rsvp

SUCCESS_MESSAGE = "Thank you! Your RSVP has been submitted successfully."
LOAD_ERROR_MESSAGE = "Unable to load RSVPs right now."


def render_rsvp_page(
    request: Request,
    rsvps: list[RSVPDTO],
    status_code: int = 200,
    success: bool = False,
    error: str | None = None,
    form: dict | None = None,
):
    """Render the public RSVP page: form, banners and the recent responses."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "rsvps": rsvps,
            "success_message": SUCCESS_MESSAGE if success else None,
            "error": error,
            "form": form or {},
        },
        status_code=status_code,
    )
