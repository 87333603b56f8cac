"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DocumentId wraps str — generated ids are typed at the point of creation
    - Search dimensions encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: dimension names serialize to JSON log fields without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DocumentId = NewType("DocumentId", str)


# ─── Enums ───────────────────────────────────────────────────────

class MatchDimension(str, Enum):
    """The 4 independent search dimensions. AND across, OR within."""
    TITLE_PREFIX = "title_prefix"
    CONTENT = "content"
    AUTHOR = "author"
    CREATED_RANGE = "created_range"
