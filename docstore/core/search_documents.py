"""Document Search — predicate-based filtering of stored documents.

Invariants:
    - Pure functions: no IO, no logging, no state
    - Each predicate is vacuously true when its criterion is None or empty
    - OR logic within a dimension, AND logic across dimensions
    - Created range bounds are inclusive on both ends
    - Output preserves input order (no sorting)

Design Decisions:
    - One predicate per dimension: each is testable on its own and
      filter_documents stays a one-line conjunction
    - Null title / content / author never satisfy a non-empty criterion
"""

from collections.abc import Iterable
from datetime import datetime

from docstore.core.domain_types import MatchDimension
from docstore.schemas.document import Document, SearchRequest


def matches_title_prefixes(doc: Document, prefixes: list[str] | None) -> bool:
    """True if the title starts with any prefix."""
    if not prefixes:
        return True
    if doc.title is None:
        return False
    return any(doc.title.startswith(prefix) for prefix in prefixes)


def matches_contents(doc: Document, contents: list[str] | None) -> bool:
    """True if the content is present and contains any substring."""
    if not contents:
        return True
    if doc.content is None:
        return False
    return any(fragment in doc.content for fragment in contents)


def matches_author_ids(doc: Document, author_ids: list[str] | None) -> bool:
    """True if the author's id is one of author_ids."""
    if not author_ids:
        return True
    if doc.author is None:
        return False
    return doc.author.id in author_ids


def matches_created_range(
    doc: Document,
    created_from: datetime | None,
    created_to: datetime | None,
) -> bool:
    """True if created falls within [created_from, created_to]."""
    if created_from is None and created_to is None:
        return True
    if doc.created is None:
        return False
    if created_from is not None and doc.created < created_from:
        return False
    return created_to is None or doc.created <= created_to


def matches_request(doc: Document, request: SearchRequest) -> bool:
    return (
        matches_title_prefixes(doc, request.title_prefixes)
        and matches_contents(doc, request.contains_contents)
        and matches_author_ids(doc, request.author_ids)
        and matches_created_range(doc, request.created_from, request.created_to)
    )


def filter_documents(
    documents: Iterable[Document], request: SearchRequest,
) -> list[Document]:
    """Return the documents satisfying every criterion in request, in input order."""
    return [doc for doc in documents if matches_request(doc, request)]


def active_dimensions(request: SearchRequest) -> list[MatchDimension]:
    """Dimensions that actually constrain the result."""
    active = []
    if request.title_prefixes:
        active.append(MatchDimension.TITLE_PREFIX)
    if request.contains_contents:
        active.append(MatchDimension.CONTENT)
    if request.author_ids:
        active.append(MatchDimension.AUTHOR)
    if request.created_from is not None or request.created_to is not None:
        active.append(MatchDimension.CREATED_RANGE)
    return active
