"""Local file system implementation of BookCatalog."""

import logging
from pathlib import Path
from typing import Optional, Union

from ..domain.entities.book import Book
from ..domain.interfaces.book_catalog import BookCatalog
from .codecs import BOOK_CODEC
from .csv_dataset import read_books_dataset
from .local_entity_store import LocalEntityStore

logger = logging.getLogger(__name__)

DEFAULT_DATASET_NAME = "BooksDatasetClean.csv"


class CatalogNotFoundError(FileNotFoundError):
    """Raised when neither the catalog file nor the CSV dataset exists."""

    def __init__(self, catalog_path: Path, dataset_path: Path):
        self.catalog_path = catalog_path
        self.dataset_path = dataset_path
        super().__init__(
            f"No book data found: neither {catalog_path.absolute()} nor {dataset_path.absolute()} exists"
        )


class LocalCatalogStore(BookCatalog):
    """The whole book catalog, held in memory for the life of the process.

    On first run the catalog file does not exist yet; it is then built from
    the CSV dataset next to it and written out for the following runs.
    """

    def __init__(self, path: Union[str, Path], dataset_path: Optional[Union[str, Path]] = None):
        """Initialize the catalog store.

        Args:
            path: Location of the catalog file.
            dataset_path: CSV dataset used when the catalog file is missing.
                Defaults to ``BooksDatasetClean.csv`` in the same directory.
        """
        self.path = Path(path)
        self.dataset_path = Path(dataset_path) if dataset_path else self.path.parent / DEFAULT_DATASET_NAME
        self._store = LocalEntityStore(self.path, BOOK_CODEC)
        self._books: list[Book] = []
        self._by_id: dict[int, Book] = {}
        self._next_id = 1

    @property
    def next_id(self) -> int:
        """Id the next book added to the catalog would receive."""
        return self._next_id

    @property
    def last_skipped(self) -> int:
        return self._store.last_skipped

    def load(self) -> None:
        """Populate the catalog from the catalog file or the CSV dataset.

        Raises:
            CatalogNotFoundError: If neither source exists.
            OSError: If a source exists but cannot be read, or the catalog
                file cannot be written after a dataset import.
        """
        if self.path.exists():
            self._replace(self._store.load_all())
            logger.info(f"Loaded {len(self._books)} book(s) from {self.path}")
        elif self.dataset_path.exists():
            logger.info(f"{self.path} not found, building catalog from {self.dataset_path}")
            self._replace(read_books_dataset(self.dataset_path, first_id=1))
            self.save()
        else:
            raise CatalogNotFoundError(self.path, self.dataset_path)

    def save(self) -> None:
        """Write the in-memory catalog to the catalog file."""
        self._store.save_all(self._books)

    def find_by_id(self, book_id: int) -> Optional[Book]:
        return self._by_id.get(book_id)

    def all(self) -> tuple[Book, ...]:
        return tuple(self._books)

    def size(self) -> int:
        return len(self._books)

    def _replace(self, books: list[Book]) -> None:
        self._books = []
        self._by_id = {}
        self._next_id = 1
        for book in books:
            if book.id is None:
                # unusable id in the file: take the next one in reading order
                book = book.model_copy(update={"id": self._next_id})
                logger.debug(f"Assigned id {book.id} to {book.title!r} in {self.path}")
            if book.id in self._by_id:
                logger.warning(f"Duplicate book id {book.id} in {self.path}, keeping the first")
                continue
            self._books.append(book)
            self._by_id[book.id] = book
            self._next_id = max(self._next_id, book.id + 1)
