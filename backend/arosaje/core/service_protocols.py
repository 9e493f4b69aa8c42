"""Boundary Protocols — contracts between the HTTP layer and the services behind it.

Invariants:
    - Routes depend on these Protocols, never on a concrete service class
    - Implementations provided via FastAPI dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async methods: implementations do IO
"""

from typing import Protocol, TYPE_CHECKING

from arosaje.core.domain_types import GuardianshipId, UserId

if TYPE_CHECKING:
    from arosaje.schemas.guardianship import (
        GuardianshipCreateRequest, GuardianshipDTO, GuardianshipUpdateRequest,
    )


class GuardianshipOperations(Protocol):
    """Contract for guardianship lookup and persistence."""
    async def find_all(self) -> list["GuardianshipDTO"]: ...
    async def find_all_by_owner_user_id(
        self, owner_user_id: UserId,
    ) -> list["GuardianshipDTO"]: ...
    async def find_all_by_guardian_user_id(
        self, guardian_user_id: UserId,
    ) -> list["GuardianshipDTO"]: ...
    async def find_by_id(
        self, guardianship_id: GuardianshipId,
    ) -> "GuardianshipDTO": ...
    async def update(
        self, guardianship_id: GuardianshipId, request: "GuardianshipUpdateRequest",
    ) -> "GuardianshipDTO": ...
    async def create(
        self, request: "GuardianshipCreateRequest",
    ) -> "GuardianshipDTO": ...
    async def delete(self, guardianship_id: GuardianshipId) -> None: ...
