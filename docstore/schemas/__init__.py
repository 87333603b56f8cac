"""Schemas — pydantic value objects passed in and out of the store."""

from docstore.schemas.document import Author, Document, SearchRequest

__all__ = ["Author", "Document", "SearchRequest"]
