"""
End-to-end test for the book recommender user journey.

This test covers the complete flow through the application facade:
1. Catalog bootstrap from the CSV dataset
2. Registration and login
3. Library creation
4. Review insertion and the one-review-per-book rule
5. Suggestions and the per-book aggregates
6. Persistence across a fresh application instance
"""

import logging

import pytest

from book_recommender.application import BookRecommender, Settings
from book_recommender.domain.entities import Library, Review, Suggestion

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

TEST_USER_ID = "alice"
TEST_PASSWORD = "Passw0rd1"


def write_dataset(path, rows=50):
    """Write a dataset export with ``rows`` books."""
    lines = ["Title,Authors,Description,Category,Publisher,Price,Publish Date (Month),Publish Date (Year)"]
    for n in range(1, rows + 1):
        lines.append(f'"Book {n}","By Author {n}",,Fiction,"Publisher, Inc.",1.00,May,{1950 + n}')
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def config(tmp_path):
    write_dataset(tmp_path / "BooksDatasetClean.csv")
    return Settings(_env_file=None, data_dir=tmp_path)


@pytest.fixture
def app(config):
    recommender = BookRecommender(config)
    assert recommender.load_catalog() == 50
    return recommender


def test_complete_user_journey(app, config):
    """Register, build a library, review and suggest, then reload everything."""
    logger.info("Step 1: catalog")
    assert config.books_path.exists()
    book = app.catalog.find_by_id(42)
    assert book.title == "Book 42"
    assert book.publisher == "Publisher, Inc."
    assert book.year == 1992

    logger.info("Step 2: registration and login")
    assert app.auth.register_account(
        TEST_USER_ID, TEST_PASSWORD, "Alice", "Rossi", "RSSLCA80A01H501U", "alice@example.com"
    )
    assert app.auth.login(TEST_USER_ID, TEST_PASSWORD)

    logger.info("Step 3: library")
    assert app.libraries.save_library(Library(userid=TEST_USER_ID, nome="Favs", book_ids=[42]))
    assert app.libraries.user_has_book(TEST_USER_ID, 42)

    logger.info("Step 4: reviews")
    first = Review(
        userid=TEST_USER_ID, book_id=42, stile=4, contenuto=4, gradevolezza=5, originalita=5, edizione=4
    )
    assert first.voto_finale == 4
    assert app.reviews.insert(first) is True
    second = Review(
        userid=TEST_USER_ID, book_id=42, stile=1, contenuto=1, gradevolezza=1, originalita=1, edizione=1
    )
    assert app.reviews.insert(second) is False

    stats = app.aggregation.review_stats(42)
    assert stats.count == 1
    assert stats.voto_finale_mean == 4.0
    assert stats.distribution == {4: 1}

    logger.info("Step 5: suggestions")
    assert app.libraries.add_book(TEST_USER_ID, "Favs", 7)
    assert app.libraries.add_book(TEST_USER_ID, "Favs", 8)
    assert app.suggestions.insert(Suggestion(userid=TEST_USER_ID, book_id=42, suggested_ids=[7, 8, 42]))
    assert app.aggregation.suggestion_stats(42).counts == {7: 1, 8: 1}

    logger.info("Step 6: reload from disk")
    reloaded = BookRecommender(config)
    assert reloaded.load_catalog() == 50
    assert reloaded.auth.current_userid is None
    assert reloaded.auth.login(TEST_USER_ID, TEST_PASSWORD)
    assert reloaded.libraries.get_library(TEST_USER_ID, "Favs").book_ids == [42, 7, 8]
    assert reloaded.reviews.get(TEST_USER_ID, 42).voto_finale == 4
    assert reloaded.suggestions.list_by_book(42)[0].suggested_ids == [7, 8]


def test_search_journey(app):
    """Search the bootstrapped catalog by title, author and year."""
    assert [b.id for b in app.search.search_by_title("book 4")][:2] == [4, 40]
    assert [b.id for b in app.search.search_by_author("author 42")] == [42]
    assert [b.id for b in app.search.search_by_author_and_year("author", 1992)] == [42]
    assert app.search.search_by_title("") == []


def test_review_requires_library_membership(app):
    """A user cannot review a book they have not collected."""
    app.auth.register_account("bob", TEST_PASSWORD, "Bob", "Bianchi", "BNCBBB80A01H501U", "bob@example.com")
    review = Review(userid="bob", book_id=1, stile=3, contenuto=3, gradevolezza=3, originalita=3, edizione=3)

    assert app.reviews.insert(review) is False
    assert app.libraries.add_book("bob", "Reading", 1)
    assert app.reviews.insert(review) is True
    assert app.aggregation.review_stats(1).count == 1
