from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, CreatedAt


class RSVP(Base, CreatedAt):
    __tablename__ = TableNames.RSVPS.value
    __table_args__ = (Index("ix_rsvps_created_at", "created_at"),)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    attending: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Only counted towards the headcount when attending
    guests: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default="1")
    dietary_restrictions: Mapped[str | None] = mapped_column(Text, nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<RSVP {self.name} attending={self.attending}>"
