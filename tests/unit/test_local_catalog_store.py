"""Tests for LocalCatalogStore and the CSV dataset bootstrap."""

import pytest
from pydantic import ValidationError

from book_recommender.domain.entities import Book
from book_recommender.domain.interfaces import BookCatalog
from book_recommender.infrastructure import CatalogNotFoundError, LocalCatalogStore, read_books_dataset

DATASET = (
    "Title,Authors,Description,Category,Publisher,Price Starting With ($),Publish Date (Month),Publish Date (Year)\n"
    '"Goat Brothers","By Colton, Larry",,"History , General",Doubleday,8.79,January,1993\n'
    "Too Short,By Nobody\n"
    '"The Missing Person","By Grumbach, Doris",,,Norton,4.99,March,unknown\n'
    "\n"
    '"Poems","By Ann Author",,Poetry,,5.00,May,2001\n'
)


@pytest.fixture
def dataset_path(tmp_path):
    """Write a small dataset export."""
    path = tmp_path / "BooksDatasetClean.csv"
    path.write_text(DATASET, encoding="utf-8")
    return path


@pytest.fixture
def catalog(tmp_path):
    """Create a catalog store in an empty directory."""
    return LocalCatalogStore(tmp_path / "Libri.dati")


def test_catalog_implements_protocol(catalog):
    """Test that LocalCatalogStore conforms to the BookCatalog protocol."""
    assert isinstance(catalog, BookCatalog)


def test_read_dataset_handles_quotes_and_short_rows(dataset_path):
    """Test the CSV conversion rules."""
    books = read_books_dataset(dataset_path)

    assert [book.id for book in books] == [1, 2, 3]
    goat = books[0]
    assert goat.title == "Goat Brothers"
    assert goat.authors == ("Colton", "Larry")
    assert goat.category == "History , General"
    assert goat.publisher == "Doubleday"
    assert goat.year == 1993

    assert books[1].year is None
    assert books[1].category is None
    assert books[2].publisher is None


def test_load_bootstraps_from_dataset(catalog, dataset_path):
    """Test that a missing catalog is built from the dataset and written out."""
    catalog.load()

    assert catalog.size() == 3
    assert catalog.path.exists()
    assert catalog.path.read_text(encoding="utf-8").startswith("idLibro;Titolo;Autori;Anno;Editore;Categoria\n")
    assert catalog.next_id == 4

    reloaded = LocalCatalogStore(catalog.path)
    reloaded.load()
    assert reloaded.all() == catalog.all()
    assert reloaded.find_by_id(1).year == 1993


def test_load_prefers_catalog_file(tmp_path, dataset_path):
    """Test that an existing catalog file wins over the dataset."""
    path = tmp_path / "Libri.dati"
    path.write_text("idLibro;Titolo;Autori;Anno;Editore;Categoria\n10;Only;Someone;2000;;\n", encoding="utf-8")
    catalog = LocalCatalogStore(path)

    catalog.load()

    assert catalog.size() == 1
    assert catalog.find_by_id(10).title == "Only"
    assert catalog.find_by_id(1) is None
    assert catalog.next_id == 11


def test_load_without_sources_raises(catalog):
    """Test the error naming both missing paths."""
    with pytest.raises(CatalogNotFoundError) as excinfo:
        catalog.load()

    message = str(excinfo.value)
    assert "Libri.dati" in message
    assert "BooksDatasetClean.csv" in message
    assert isinstance(excinfo.value, FileNotFoundError)


def test_duplicate_ids_keep_first(tmp_path):
    """Test that a repeated id in the catalog file keeps the first book."""
    path = tmp_path / "Libri.dati"
    path.write_text("1;First;A;;;\n1;Second;B;;;\n", encoding="utf-8")
    catalog = LocalCatalogStore(path)

    catalog.load()

    assert catalog.size() == 1
    assert catalog.find_by_id(1).title == "First"
    assert catalog.next_id == 2


def test_unusable_id_gets_next_id(tmp_path):
    """Test that a book with a non-numeric id is kept under the next free id."""
    path = tmp_path / "Libri.dati"
    path.write_text("1;First;A;;;\nx;Bad;C;;;\n7;Seventh;D;;;\n;NoId;E;;;\n", encoding="utf-8")
    catalog = LocalCatalogStore(path)

    catalog.load()

    assert [book.id for book in catalog.all()] == [1, 2, 7, 8]
    assert catalog.find_by_id(2).title == "Bad"
    assert catalog.find_by_id(8).title == "NoId"
    assert catalog.next_id == 9
    assert catalog.last_skipped == 0


def test_all_returns_immutable_books(tmp_path):
    """Test that callers cannot change the catalog through all()."""
    path = tmp_path / "Libri.dati"
    path.write_text("1;First;A;;;\n", encoding="utf-8")
    catalog = LocalCatalogStore(path)
    catalog.load()

    books = catalog.all()

    assert isinstance(books, tuple)
    with pytest.raises(ValidationError):
        books[0].title = "Changed"
    assert books[0] == Book(id=1, title="whatever")
