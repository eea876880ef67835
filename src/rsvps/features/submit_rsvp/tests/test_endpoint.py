import pytest

from src.rsvps.dependencies import get_rsvp_read_model, get_rsvp_write_model
from src.rsvps.repository.tests.inmemory_models import (
    FailingRSVPReadModel,
    FailingRSVPWriteModel,
    InMemoryRSVPReadModel,
    InMemoryRSVPWriteModel,
    STORAGE_ERROR_FACTORIES,
    create_test_store,
)
from src.rsvps.urls import RSVP_FORM_URL


@pytest.fixture
def store():
    return create_test_store()


@pytest.fixture
def overrides(store):
    return {
        get_rsvp_read_model: lambda: InMemoryRSVPReadModel(store),
        get_rsvp_write_model: lambda: InMemoryRSVPWriteModel(store),
    }


@pytest.mark.asyncio
async def test_submit_rsvp_attending(client_factory, store, overrides):
    """Test a valid submission stores one row and shows the success banner."""
    form_data = {
        "name": "Jane Smith",
        "email": "jane@example.com",
        "attending": "true",
        "guests": "2",
        "dietary_restrictions": "Vegetarian",
        "message": "So happy for you!",
    }

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_FORM_URL, data=form_data)

    assert response.status_code == 200
    assert "Your RSVP has been submitted successfully" in response.text
    assert len(store.rsvps) == 1
    rsvp = store.rsvps[0]
    assert rsvp.name == "Jane Smith"
    assert rsvp.attending is True
    assert rsvp.guests == 2
    assert rsvp.dietary_restrictions == "Vegetarian"
    assert rsvp.message == "So happy for you!"


@pytest.mark.asyncio
async def test_submit_rsvp_shows_new_entry_in_recent_list(client_factory, overrides):
    """Test the re-rendered page lists the new response."""
    form_data = {"name": "Jane Smith", "email": "jane@example.com", "attending": "true"}

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_FORM_URL, data=form_data)

    assert "Recent RSVPs" in response.text
    assert "Attending with 1 guest" in response.text


@pytest.mark.asyncio
async def test_submit_rsvp_not_attending(client_factory, store, overrides):
    """Test a submission without attending=true is stored as not attending."""
    form_data = {"name": "Bob", "email": "bob@example.com", "attending": "false"}

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_FORM_URL, data=form_data)

    assert response.status_code == 200
    assert store.rsvps[0].attending is False
    assert "Cannot attend" in response.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "form_data",
    [
        {"email": "jane@example.com", "attending": "true"},
        {"name": "Jane Smith", "attending": "true"},
        {"name": "  ", "email": "jane@example.com"},
    ],
)
async def test_submit_rsvp_missing_required_fields(client_factory, store, overrides, form_data):
    """Test missing name or email is a 400 and nothing is stored."""
    async with client_factory(overrides) as client:
        response = await client.post(RSVP_FORM_URL, data=form_data)

    assert response.status_code == 400
    assert "Name and email are required" in response.text
    assert store.rsvps == []


@pytest.mark.asyncio
async def test_submit_rsvp_invalid_guests(client_factory, store, overrides):
    """Test an out-of-range guest count is a 400 and nothing is stored."""
    form_data = {"name": "Jane", "email": "jane@example.com", "attending": "true", "guests": "12"}

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_FORM_URL, data=form_data)

    assert response.status_code == 400
    assert "Number of guests must be between 1 and 5" in response.text
    assert store.rsvps == []


@pytest.mark.asyncio
async def test_submit_rsvp_decline_ignores_guest_count(client_factory, store, overrides):
    """Test a decline with guests=0 is stored instead of rejected."""
    form_data = {"name": "Bob", "email": "bob@example.com", "attending": "false", "guests": "0"}

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_FORM_URL, data=form_data)

    assert response.status_code == 200
    assert len(store.rsvps) == 1
    assert store.rsvps[0].attending is False
    assert store.rsvps[0].guests == 1


@pytest.mark.asyncio
async def test_rejected_submission_keeps_entered_values(client_factory, overrides):
    """Test the form is filled back in after a validation error."""
    form_data = {"name": "Jane Smith", "attending": "true", "message": "Hello there"}

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_FORM_URL, data=form_data)

    assert response.status_code == 400
    assert 'value="Jane Smith"' in response.text
    assert "Hello there</textarea>" in response.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error_factory", list(STORAGE_ERROR_FACTORIES.values()), ids=list(STORAGE_ERROR_FACTORIES)
)
async def test_submit_rsvp_storage_failure(client_factory, store, error_factory):
    """Test a database error is a 500 with a generic message."""
    overrides = {
        get_rsvp_read_model: lambda: InMemoryRSVPReadModel(store),
        get_rsvp_write_model: lambda: FailingRSVPWriteModel(error_factory),
    }
    form_data = {"name": "Jane Smith", "email": "jane@example.com", "attending": "true"}

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_FORM_URL, data=form_data)

    assert response.status_code == 500
    assert "Failed to save RSVP. Please try again." in response.text
    assert "database is unavailable" not in response.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error_factory", list(STORAGE_ERROR_FACTORIES.values()), ids=list(STORAGE_ERROR_FACTORIES)
)
async def test_submit_rsvp_succeeds_when_recent_list_fails(client_factory, store, error_factory):
    """Test a stored RSVP is reported as a success even if the list cannot be loaded."""
    overrides = {
        get_rsvp_read_model: lambda: FailingRSVPReadModel(error_factory),
        get_rsvp_write_model: lambda: InMemoryRSVPWriteModel(store),
    }
    form_data = {"name": "Jane Smith", "email": "jane@example.com", "attending": "true"}

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_FORM_URL, data=form_data)

    assert response.status_code == 200
    assert "Your RSVP has been submitted successfully" in response.text
    assert len(store.rsvps) == 1
