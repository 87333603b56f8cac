"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - Storage accessed through Protocol types

Design Decisions:
    - Protocol over ABC: structural subtyping, DocumentStore needs no base class
    - Sync methods: the store does no IO, so there is nothing to await
"""

from typing import Protocol

from docstore.schemas.document import Document, SearchRequest


class DocumentRepository(Protocol):
    """Contract for document storage — implemented by DocumentStore."""
    def save(self, document: Document) -> Document: ...
    def find_by_id(self, document_id: str) -> Document | None: ...
    def search(self, request: SearchRequest) -> list[Document]: ...
