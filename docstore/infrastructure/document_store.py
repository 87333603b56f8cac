"""In-Memory Document Store — upsert, point lookup, and filtered search.

Invariants:
    - Every stored Document has a non-null, unique id
    - created is assigned once, on first save of an id; later saves keep it
    - A save under an existing id replaces every other field
    - find_by_id returns None for unknown ids, never raises
    - save(None) / search(None) raise MissingArgumentError

Design Decisions:
    - dict keyed by id: insertion order doubles as search result order
    - Single Lock around the map: upsert is lookup-then-insert and must not tear
    - id_factory and clock injectable: deterministic tests without patching uuid/datetime
    - Clock output goes through as_utc: model_copy skips validators
"""

import logging
import threading
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from typing import NoReturn

from docstore.core.domain_types import DocumentId
from docstore.core.errors import MissingArgumentError
from docstore.core.search_documents import active_dimensions, filter_documents
from docstore.schemas.document import Document, SearchRequest, as_utc

logger = logging.getLogger(__name__)


def _new_document_id() -> DocumentId:
    return DocumentId(str(uuid.uuid4()))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _fail(error: MissingArgumentError) -> NoReturn:
    logger.error(
        error.message,
        extra={"error_code": error.code, "operation": error.context.operation},
    )
    raise error


class DocumentStore:
    """Process-lifetime document storage. Satisfies DocumentRepository."""

    def __init__(
        self,
        id_factory: Callable[[], str] = _new_document_id,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()
        self._id_factory = id_factory
        self._clock = clock

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def save(self, document: Document) -> Document:
        """Upsert document, assigning an id if absent and resolving created.

        The caller's instance is left untouched; the returned Document is the
        stored one.
        """
        if document is None:
            _fail(MissingArgumentError("document", "save"))

        document_id = document.id if document.id is not None else self._id_factory()
        with self._lock:
            existing = self._documents.get(document_id)
            created = (
                existing.created if existing is not None else as_utc(self._clock())
            )
            stored = document.model_copy(
                update={"id": document_id, "created": created},
            )
            self._documents[document_id] = stored

        logger.debug(
            "Document %s", "updated" if existing is not None else "inserted",
            extra={"document_id": document_id, "operation": "save"},
        )
        return stored

    def find_by_id(self, document_id: str) -> Document | None:
        return self._documents.get(document_id)

    def search(self, request: SearchRequest) -> list[Document]:
        """Documents matching every criterion in request, in insertion order."""
        if request is None:
            _fail(MissingArgumentError("request", "search"))

        with self._lock:
            snapshot = list(self._documents.values())
        matches = filter_documents(snapshot, request)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Search on [%s] matched %d/%d",
                ", ".join(d.value for d in active_dimensions(request)) or "all",
                len(matches), len(snapshot),
                extra={"operation": "search", "match_count": len(matches)},
            )
        return matches
