"""Reader for the one-time CSV book dataset used to seed the catalog."""

import csv
import logging
from pathlib import Path
from typing import Iterator, Union

from ..domain.entities.book import Book
from .codecs import normalize_authors, parse_optional_int

logger = logging.getLogger(__name__)

# Column positions in the dataset export
TITLE_COLUMN = 0
AUTHORS_COLUMN = 1
CATEGORY_COLUMN = 3
PUBLISHER_COLUMN = 4
YEAR_COLUMN = 7
MIN_COLUMNS = 8


def iter_dataset_rows(path: Union[str, Path]) -> Iterator[list[str]]:
    """Yield the data rows of the dataset, header excluded.

    Fields are split on commas outside double quotes.

    Raises:
        OSError: If the file cannot be read.
    """
    with Path(path).open("r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.reader(handle)
        next(reader, None)
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            yield row


def read_books_dataset(path: Union[str, Path], first_id: int = 1) -> list[Book]:
    """Convert the dataset into books with sequential ids.

    Rows with fewer than eight columns are skipped. An unparsable year becomes
    None, empty publisher and category become None.

    Args:
        path: Location of the CSV dataset.
        first_id: Id given to the first accepted row.

    Returns:
        list[Book]: The books in dataset order.
    """
    books: list[Book] = []
    skipped = 0
    next_id = first_id
    for row in iter_dataset_rows(path):
        if len(row) < MIN_COLUMNS:
            skipped += 1
            continue
        publisher = row[PUBLISHER_COLUMN].strip()
        category = row[CATEGORY_COLUMN].strip()
        books.append(
            Book(
                id=next_id,
                title=row[TITLE_COLUMN].strip(),
                authors=normalize_authors(row[AUTHORS_COLUMN]),
                year=parse_optional_int(row[YEAR_COLUMN]),
                publisher=publisher or None,
                category=category or None,
            )
        )
        next_id += 1

    if skipped:
        logger.warning(f"Skipped {skipped} short row(s) in dataset {path}")
    logger.info(f"Read {len(books)} book(s) from dataset {path}")
    return books
