"""ORM Models — SQLAlchemy declarative models for users, plants and guardianships.

Invariants:
    - All models inherit from Base (db/base.py)
    - Primary keys are database-assigned integers

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from arosaje.models.user import User  # noqa: F401
from arosaje.models.plant import Plant  # noqa: F401
from arosaje.models.guardianship import Guardianship  # noqa: F401
