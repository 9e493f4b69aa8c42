"""User ORM — a person who owns plants or guards them.

Invariants:
    - id is an autoincrement integer primary key
    - email is unique

Design Decisions:
    - Deleting a user cascades to owned plants and to guardianships where the user is guardian
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from arosaje.db.base import Base


class User(Base):
    """Application user — plant owner, guardian, or both."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False,
    )
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    plants: Mapped[list["Plant"]] = relationship(
        "Plant", back_populates="owner", cascade="all, delete-orphan",
    )
    guardianships: Mapped[list["Guardianship"]] = relationship(
        "Guardianship", back_populates="guardian",
        cascade="all, delete-orphan",
    )
