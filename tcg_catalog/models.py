"""Database models."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tcg_catalog.database import Base


class Serie(Base):
    """Serie model: one row per Pokémon TCG release series."""

    __tablename__ = "series"
    __table_args__ = (
        UniqueConstraint("code", name="uq_series_code"),
        UniqueConstraint("name", name="uq_series_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    code: Mapped[str] = mapped_column(String(10), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    release_year: Mapped[int] = mapped_column(nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Expansion codes joined with "," in order
    expansions: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        """String representation of Serie."""
        return f"<Serie(id={self.id}, code='{self.code}', name='{self.name}')>"
