"""Guardianship ORM — a guardian caring for another user's plant over a period.

Invariants:
    - id is assigned by the database and never changes
    - The owner is not stored: it is plant.owner_user_id
    - end_date >= start_date (enforced by the service and a CHECK constraint)

Design Decisions:
    - plant relationship loaded with selectin: every read needs the owner id,
      and lazy loads are not allowed under AsyncSession
"""

from datetime import date, datetime, timezone

from sqlalchemy import (
    CheckConstraint, Date, DateTime, ForeignKey, Integer,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from arosaje.db.base import Base


class Guardianship(Base):
    __tablename__ = "guardianships"
    __table_args__ = (
        CheckConstraint(
            "end_date >= start_date", name="ck_guardianships_care_period",
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    plant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("plants.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    guardian_user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    plant: Mapped["Plant"] = relationship(
        "Plant", back_populates="guardianships", lazy="selectin",
    )
    guardian: Mapped["User"] = relationship(
        "User", back_populates="guardianships",
    )

    @property
    def owner_user_id(self) -> int:
        return self.plant.owner_user_id
