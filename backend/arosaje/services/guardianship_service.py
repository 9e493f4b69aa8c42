"""Guardianship Service — lookups, referential checks and persistence for guardianships.

Invariants:
    - Every referenced user/plant is checked before a write (typed 404, not an IntegrityError)
    - A guardian never owns the plant it guards
    - Updates merge present fields only; validation runs on the merged record
      before anything is written to the ORM object
    - Returns GuardianshipDTO, never ORM instances

Design Decisions:
    - Commits per operation: one request, one unit of work
    - Owner lookups join through plants: owner is derived, not stored
"""

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from arosaje.core.domain_types import GuardianshipId, PlantId, UserId
from arosaje.core.errors import (
    GuardianshipIdMismatchError,
    GuardianshipNotFoundError,
    InvalidCarePeriodError,
    PlantNotFoundError,
    SelfGuardianshipError,
    UserNotFoundError,
)
from arosaje.models.guardianship import Guardianship
from arosaje.models.plant import Plant
from arosaje.models.user import User
from arosaje.schemas.guardianship import (
    GuardianshipCreateRequest, GuardianshipDTO, GuardianshipUpdateRequest,
)

logger = logging.getLogger(__name__)


class GuardianshipService:
    """Guardianship CRUD over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[GuardianshipDTO]:
        result = await self.db.execute(
            select(Guardianship).order_by(Guardianship.id),
        )
        return [_to_dto(g) for g in result.scalars().all()]

    async def find_all_by_owner_user_id(
        self, owner_user_id: UserId,
    ) -> list[GuardianshipDTO]:
        """Guardianships of every plant the user owns."""
        await self._get_user_or_raise(owner_user_id)
        result = await self.db.execute(
            select(Guardianship)
            .join(Guardianship.plant)
            .where(Plant.owner_user_id == owner_user_id)
            .order_by(Guardianship.id)
        )
        return [_to_dto(g) for g in result.scalars().all()]

    async def find_all_by_guardian_user_id(
        self, guardian_user_id: UserId,
    ) -> list[GuardianshipDTO]:
        """Guardianships where the user is the guardian."""
        await self._get_user_or_raise(guardian_user_id)
        result = await self.db.execute(
            select(Guardianship)
            .where(Guardianship.guardian_user_id == guardian_user_id)
            .order_by(Guardianship.id)
        )
        return [_to_dto(g) for g in result.scalars().all()]

    async def find_by_id(
        self, guardianship_id: GuardianshipId,
    ) -> GuardianshipDTO:
        return _to_dto(await self._get_or_raise(guardianship_id))

    async def create(
        self, request: GuardianshipCreateRequest,
    ) -> GuardianshipDTO:
        """Persist a new guardianship. The id is assigned by the database."""
        plant = await self._get_plant_or_raise(request.plant_id)
        await self._get_user_or_raise(request.guardian_user_id)
        _check_not_owner(request.guardian_user_id, plant)
        _check_care_period(request.start_date, request.end_date)

        guardianship = Guardianship(
            plant=plant,
            guardian_user_id=request.guardian_user_id,
            start_date=request.start_date,
            end_date=request.end_date,
        )
        self.db.add(guardianship)
        await self.db.commit()
        await self.db.refresh(guardianship)
        logger.info(
            f"Guardianship {guardianship.id} created",
            extra={
                "guardianship_id": guardianship.id,
                "plant_id": plant.id,
                "user_id": request.guardian_user_id,
            },
        )
        return _to_dto(guardianship)

    async def update(
        self,
        guardianship_id: GuardianshipId,
        request: GuardianshipUpdateRequest,
    ) -> GuardianshipDTO:
        """Merge the fields present in the request into the stored guardianship."""
        if request.id != guardianship_id:
            raise GuardianshipIdMismatchError(guardianship_id, request.id)
        guardianship = await self._get_or_raise(guardianship_id)
        changes = request.model_dump(exclude_none=True, exclude={"id"})

        plant = guardianship.plant
        if changes.get("plant_id", plant.id) != plant.id:
            plant = await self._get_plant_or_raise(changes["plant_id"])
        guardian_user_id = changes.get(
            "guardian_user_id", guardianship.guardian_user_id,
        )
        if guardian_user_id != guardianship.guardian_user_id:
            await self._get_user_or_raise(guardian_user_id)
        start_date = changes.get("start_date", guardianship.start_date)
        end_date = changes.get("end_date", guardianship.end_date)

        _check_not_owner(guardian_user_id, plant)
        _check_care_period(start_date, end_date)

        guardianship.plant = plant
        guardianship.plant_id = plant.id
        guardianship.guardian_user_id = guardian_user_id
        guardianship.start_date = start_date
        guardianship.end_date = end_date
        await self.db.commit()
        logger.info(
            f"Guardianship {guardianship_id} updated ({', '.join(sorted(changes)) or 'no fields'})",
            extra={"guardianship_id": guardianship_id},
        )
        return _to_dto(guardianship)

    async def delete(self, guardianship_id: GuardianshipId) -> None:
        guardianship = await self._get_or_raise(guardianship_id)
        await self.db.delete(guardianship)
        await self.db.commit()
        logger.info(
            f"Guardianship {guardianship_id} deleted",
            extra={"guardianship_id": guardianship_id},
        )

    # ─── Lookups ────────────────────────────────────────────────

    async def _get_or_raise(
        self, guardianship_id: GuardianshipId,
    ) -> Guardianship:
        guardianship = await self.db.get(Guardianship, guardianship_id)
        if guardianship is None:
            raise GuardianshipNotFoundError(guardianship_id)
        return guardianship

    async def _get_user_or_raise(self, user_id: UserId) -> User:
        user = await self.db.get(User, user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def _get_plant_or_raise(self, plant_id: PlantId) -> Plant:
        plant = await self.db.get(Plant, plant_id)
        if plant is None:
            raise PlantNotFoundError(plant_id)
        return plant


def _check_not_owner(guardian_user_id: int, plant: Plant) -> None:
    if guardian_user_id == plant.owner_user_id:
        raise SelfGuardianshipError(guardian_user_id, plant.id)


def _check_care_period(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise InvalidCarePeriodError(
            f"Care period ends ({end_date.isoformat()}) "
            f"before it starts ({start_date.isoformat()})",
        )


def _to_dto(guardianship: Guardianship) -> GuardianshipDTO:
    return GuardianshipDTO.model_validate(guardianship)
