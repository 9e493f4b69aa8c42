"""Domain Types — identity types that replace bare integers in signatures.

Invariants:
    - UserId, PlantId, GuardianshipId wrap database-assigned integers
    - Ids accepted from callers lie in 1..MAX_ID (the INTEGER column range)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


UserId = NewType("UserId", int)
PlantId = NewType("PlantId", int)
GuardianshipId = NewType("GuardianshipId", int)

# Largest value an INTEGER id column holds
MAX_ID = 2**31 - 1
