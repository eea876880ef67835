"""RSVP write model - inserts responses and returns DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.rsvps.dtos import RSVPDTO, NewRSVPDTO
from src.rsvps.repository.orm_models import RSVP

logger = logging.getLogger(__name__)


class RSVPWriteModel(ABC):
    @abstractmethod
    async def create_rsvp(self, submission: NewRSVPDTO) -> RSVPDTO:
        """
        Store a new RSVP.
        Returns DTO instead of ORM model.
        """
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    """SQL implementation of RSVP write model."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def create_rsvp(self, submission: NewRSVPDTO) -> RSVPDTO:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            rsvp = RSVP(
                name=submission.name,
                email=submission.email,
                attending=submission.attending,
                guests=submission.guests,
                dietary_restrictions=submission.dietary_restrictions,
                message=submission.message,
            )
            session.add(rsvp)
            await session.flush()
            # created_at is assigned by the database
            await session.refresh(rsvp)

            logger.info("Stored RSVP %s (attending=%s)", rsvp.id, rsvp.attending)
            return RSVPDTO.from_orm(rsvp)
