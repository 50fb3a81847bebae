"""Domain interfaces for the book recommender."""

from .book_catalog import BookCatalog
from .entity_store import EntityStore

__all__ = ["BookCatalog", "EntityStore"]
