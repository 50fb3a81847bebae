"""Book catalog protocol."""

from typing import Optional, Protocol, runtime_checkable

from ..entities.book import Book


@runtime_checkable
class BookCatalog(Protocol):
    """Protocol for read access to the in-memory book catalog."""

    def find_by_id(self, book_id: int) -> Optional[Book]:
        """Retrieve a book by id.

        Args:
            book_id: The unique identifier of the book.

        Returns:
            Optional[Book]: The book, or None if the catalog has no such id.
        """
        ...

    def all(self) -> tuple[Book, ...]:
        """Return every book of the catalog, in catalog order."""
        ...

    def size(self) -> int:
        """Return the number of books in the catalog."""
        ...
