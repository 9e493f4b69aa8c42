"""Guardianship Resource — REST routes over guardianships, each a pass-through to the service.

Invariants:
    - Request bodies are validated by Pydantic before the handler runs
      (create: id absent; update: id present)
    - Handlers contain no logic beyond delegating and returning the DTO
    - Not-found and rule violations surface as ArosajeError, mapped in error_handlers.py

Design Decisions:
    - Service obtained through get_guardianship_service: tests swap it via dependency_overrides
    - Static segments (/user, /guardian) declared before /{guardianship_id}
    - Collection routes answer with and without the trailing slash (no 307 redirect)
    - Ids bounded to the INTEGER column range: out-of-range ids are a 400, never a driver error
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from arosaje.core.domain_types import MAX_ID, GuardianshipId, UserId
from arosaje.core.service_protocols import GuardianshipOperations
from arosaje.infrastructure.database import get_db
from arosaje.schemas.guardianship import (
    GuardianshipCreateRequest, GuardianshipDTO, GuardianshipUpdateRequest,
)
from arosaje.services.guardianship_service import GuardianshipService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/guardianships", tags=["guardianships"])


def get_guardianship_service(
    db: AsyncSession = Depends(get_db),
) -> GuardianshipOperations:
    return GuardianshipService(db)


@router.get("", response_model=list[GuardianshipDTO])
@router.get("/", response_model=list[GuardianshipDTO], include_in_schema=False)
async def get_all_guardianships(
    service: GuardianshipOperations = Depends(get_guardianship_service),
):
    """List every guardianship."""
    return await service.find_all()


@router.get("/user/{owner_user_id}", response_model=list[GuardianshipDTO])
async def get_all_guardianships_by_owner_user_id(
    owner_user_id: int = Path(gt=0, le=MAX_ID),
    service: GuardianshipOperations = Depends(get_guardianship_service),
):
    """List guardianships of the plants owned by a user. 404 if the user is unknown."""
    return await service.find_all_by_owner_user_id(UserId(owner_user_id))


@router.get(
    "/guardian/{guardian_user_id}", response_model=list[GuardianshipDTO],
)
async def get_all_guardianships_by_guardian_user_id(
    guardian_user_id: int = Path(gt=0, le=MAX_ID),
    service: GuardianshipOperations = Depends(get_guardianship_service),
):
    """List guardianships where a user is the guardian. 404 if the user is unknown."""
    return await service.find_all_by_guardian_user_id(UserId(guardian_user_id))


@router.get("/{guardianship_id}", response_model=GuardianshipDTO)
async def get_guardianship_by_id(
    guardianship_id: int = Path(gt=0, le=MAX_ID),
    service: GuardianshipOperations = Depends(get_guardianship_service),
):
    return await service.find_by_id(GuardianshipId(guardianship_id))


@router.patch("/{guardianship_id}", response_model=GuardianshipDTO)
async def update_guardianship(
    body: GuardianshipUpdateRequest,
    guardianship_id: int = Path(gt=0, le=MAX_ID),
    service: GuardianshipOperations = Depends(get_guardianship_service),
):
    """Merge the body into an existing guardianship. Body id must equal the path id."""
    return await service.update(GuardianshipId(guardianship_id), body)


@router.post(
    "", response_model=GuardianshipDTO,
    status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/", response_model=GuardianshipDTO,
    status_code=status.HTTP_201_CREATED, include_in_schema=False,
)
async def create_guardianship(
    body: GuardianshipCreateRequest,
    service: GuardianshipOperations = Depends(get_guardianship_service),
):
    """Create a guardianship. 404 if the plant or guardian does not exist."""
    return await service.create(body)


@router.delete(
    "/{guardianship_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_guardianship(
    guardianship_id: int = Path(gt=0, le=MAX_ID),
    service: GuardianshipOperations = Depends(get_guardianship_service),
):
    await service.delete(GuardianshipId(guardianship_id))
