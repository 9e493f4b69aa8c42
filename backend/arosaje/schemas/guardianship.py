"""Guardianship Schemas — read DTO and the write-side save request in its two validation modes.

Invariants:
    - GuardianshipCreateRequest: id absent; plant_id, guardian_user_id, start_date, end_date required
    - GuardianshipUpdateRequest: id required; every other field optional (absent = unchanged)
    - Whenever both dates are present, end_date >= start_date
    - Ids are positive integers no larger than MAX_ID

Design Decisions:
    - One subclass per validation mode over a single model with a mode flag:
      FastAPI validates the body before the handler runs, so the mode must be the type
    - camelCase aliases accepted on input (mobile client), snake_case emitted on output
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from arosaje.core.domain_types import MAX_ID


class GuardianshipDTO(BaseModel):
    """Guardianship as returned to API callers."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    plant_id: int
    owner_user_id: int
    guardian_user_id: int
    start_date: date
    end_date: date
    created_at: datetime


class GuardianshipSaveRequest(BaseModel):
    """Write representation shared by create and update."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )

    id: int | None = Field(None, gt=0, le=MAX_ID)
    plant_id: int | None = Field(None, gt=0, le=MAX_ID)
    guardian_user_id: int | None = Field(None, gt=0, le=MAX_ID)
    start_date: date | None = None
    end_date: date | None = None

    @model_validator(mode="after")
    def check_care_period(self):
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.end_date < self.start_date
        ):
            raise ValueError("end_date must be on or after start_date")
        return self


class GuardianshipCreateRequest(GuardianshipSaveRequest):
    """Optional-id mode: the database assigns the id."""
    plant_id: int = Field(gt=0, le=MAX_ID)
    guardian_user_id: int = Field(gt=0, le=MAX_ID)
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_id_absent(self):
        if self.id is not None:
            raise ValueError("id must not be provided when creating a guardianship")
        return self


class GuardianshipUpdateRequest(GuardianshipSaveRequest):
    """Mandatory-id mode: identifies the guardianship being updated."""
    id: int = Field(gt=0, le=MAX_ID)
