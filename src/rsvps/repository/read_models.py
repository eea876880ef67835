import abc

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.rsvps.dtos import RSVPDTO, RSVPStatsDTO
from src.rsvps.repository.orm_models import RSVP


class RSVPReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_recent(self, limit: int) -> list[RSVPDTO]:
        """
        Get the most recent RSVPs, newest first.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def list_all(self) -> list[RSVPDTO]:
        """
        Get every RSVP, newest first.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_stats(self) -> RSVPStatsDTO:
        """
        Get total responses, attending count and headcount of attending guests.
        """
        raise NotImplementedError


class SqlRSVPReadModel(RSVPReadModel):
    """SQL implementation of RSVP read model."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    @staticmethod
    def _newest_first():
        return select(RSVP).order_by(RSVP.created_at.desc(), RSVP.id.desc())

    async def list_recent(self, limit: int) -> list[RSVPDTO]:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(self._newest_first().limit(limit))
            return [RSVPDTO.from_orm(rsvp) for rsvp in result.scalars().all()]

    async def list_all(self) -> list[RSVPDTO]:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(self._newest_first())
            return [RSVPDTO.from_orm(rsvp) for rsvp in result.scalars().all()]

    async def get_stats(self) -> RSVPStatsDTO:
        """
        Aggregate in a single query. SUM over an empty table is NULL, hence the coalesce.
        """
        is_attending = RSVP.attending.is_(True)
        stmt = select(
            func.count(RSVP.id),
            func.coalesce(func.sum(case((is_attending, 1), else_=0)), 0),
            func.coalesce(func.sum(case((is_attending, RSVP.guests), else_=0)), 0),
        )
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(stmt)
            total, attending, total_guests = result.one()

        return RSVPStatsDTO(
            total=int(total),
            attending=int(attending),
            total_guests=int(total_guests),
        )
