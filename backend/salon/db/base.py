from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from .session import Base


class CollectionEntry(Base):
    """One durable entry per collection: the serialized record sequence."""

    __tablename__ = "collections"

    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    # Raw JSON text, parsed by the record store so corruption can be detected
    payload: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<CollectionEntry name={self.name!r}>"
