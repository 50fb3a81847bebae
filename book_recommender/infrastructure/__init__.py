"""Infrastructure layer components."""

from .codecs import (
    BOOK_CODEC,
    LIBRARY_CODEC,
    REVIEW_CODEC,
    SUGGESTION_CODEC,
    USER_CODEC,
    normalize_authors,
)
from .csv_dataset import read_books_dataset
from .local_catalog_store import CatalogNotFoundError, LocalCatalogStore
from .local_entity_store import LocalEntityStore
from .record_codec import DecodeResult, DelimitedRecordCodec

__all__ = [
    "BOOK_CODEC",
    "LIBRARY_CODEC",
    "REVIEW_CODEC",
    "SUGGESTION_CODEC",
    "USER_CODEC",
    "CatalogNotFoundError",
    "DecodeResult",
    "DelimitedRecordCodec",
    "LocalCatalogStore",
    "LocalEntityStore",
    "normalize_authors",
    "read_books_dataset",
]
