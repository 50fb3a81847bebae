"""Catalog search by title, author and year."""

import unicodedata
from typing import Optional

from ..entities.book import Book
from ..interfaces.book_catalog import BookCatalog


def normalize_text(text: Optional[str]) -> str:
    """Case-fold ``text`` and strip accents and other combining marks."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


class SearchService:
    """Linear substring search over the in-memory catalog."""

    def __init__(self, catalog: BookCatalog):
        self._catalog = catalog

    def search_by_title(self, query: str) -> list[Book]:
        needle = normalize_text(query)
        if not needle:
            return []
        return [book for book in self._catalog.all() if needle in normalize_text(book.title)]

    def search_by_author(self, query: str) -> list[Book]:
        needle = normalize_text(query)
        if not needle:
            return []
        return [book for book in self._catalog.all() if self._has_author(book, needle)]

    def search_by_author_and_year(self, query: str, year: int) -> list[Book]:
        needle = normalize_text(query)
        return [book for book in self._catalog.all() if book.year == year and self._has_author(book, needle)]

    @staticmethod
    def _has_author(book: Book, needle: str) -> bool:
        return any(needle in normalize_text(author) for author in book.authors)
