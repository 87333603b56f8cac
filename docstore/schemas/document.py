"""Document Schemas — immutable pydantic value objects for the store's API.

Invariants:
    - All models are frozen: the store copies, never mutates, what callers pass
    - Every datetime is timezone-aware; naive values are read as UTC
    - Only identity is optional-until-saved: id and created are filled by save()

Design Decisions:
    - frozen BaseModel over builder objects: construction by keyword, updates via model_copy
    - Naive → UTC in a field_validator so search comparisons never mix aware and naive
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: datetime | None) -> datetime | None:
    """Read a naive datetime as UTC; aware values pass through."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Embedded author reference — not stored separately."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """Stored record. id and created are resolved by DocumentStore.save()."""
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class SearchRequest(BaseModel):
    """Search criteria — every field optional, None or empty means unconstrained."""
    model_config = ConfigDict(frozen=True)

    title_prefixes: list[str] | None = None
    contains_contents: list[str] | None = None
    author_ids: list[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)
