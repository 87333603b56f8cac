"""docstore — in-memory document store with upsert, point lookup and filtered search."""

from docstore.infrastructure.document_store import DocumentStore
from docstore.schemas.document import Author, Document, SearchRequest

__all__ = ["Author", "Document", "DocumentStore", "SearchRequest"]
