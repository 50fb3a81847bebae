"""Tests for the domain entities."""

import pytest
from pydantic import ValidationError

from book_recommender.domain.entities import (
    MAX_COMMENT_LENGTH,
    Book,
    Library,
    Review,
    ReviewStats,
    Suggestion,
    SuggestionStats,
)


def make_review(*scores, **kwargs):
    stile, contenuto, gradevolezza, originalita, edizione = scores
    return Review(
        userid=kwargs.pop("userid", "alice"),
        book_id=kwargs.pop("book_id", 1),
        stile=stile,
        contenuto=contenuto,
        gradevolezza=gradevolezza,
        originalita=originalita,
        edizione=edizione,
        **kwargs,
    )


@pytest.mark.parametrize(
    "scores,expected",
    [
        ((1, 1, 1, 1, 2), 1),
        ((5, 5, 5, 5, 4), 5),
        ((3, 3, 3, 3, 3), 3),
        ((4, 4, 5, 5, 4), 4),
        ((2, 2, 3, 3, 3), 3),
    ],
)
def test_voto_finale_rounds_half_up(scores, expected):
    """Test the final score computation at its boundaries."""
    assert Review.compute_voto_finale(*scores) == expected
    assert make_review(*scores).voto_finale == expected


def test_voto_finale_supplied_is_kept():
    """Test that an explicit final score is not overwritten."""
    assert make_review(1, 1, 1, 1, 1, voto_finale=3).voto_finale == 3


@pytest.mark.parametrize("bad", [0, 6])
def test_score_out_of_range_is_rejected(bad):
    """Test that scores outside 1..5 do not validate."""
    with pytest.raises(ValidationError):
        make_review(bad, 3, 3, 3, 3)


def test_comment_newlines_become_spaces():
    """Test that a comment is stored on a single line."""
    review = make_review(3, 3, 3, 3, 3, commento="  first\r\nsecond\nthird\rfourth  ")
    assert review.commento == "first second third fourth"


def test_comment_length_limit():
    """Test the comment length limit."""
    assert len(make_review(3, 3, 3, 3, 3, commento="x" * MAX_COMMENT_LENGTH).commento) == MAX_COMMENT_LENGTH
    with pytest.raises(ValidationError):
        make_review(3, 3, 3, 3, 3, commento="x" * (MAX_COMMENT_LENGTH + 1))


def test_book_identity_is_the_id():
    """Test that books compare and hash by id."""
    first = Book(id=1, title="A")
    same_id = Book(id=1, title="B")
    assert first == same_id
    assert len({first, same_id}) == 1
    assert first != Book(id=2, title="A")


def test_book_defaults_and_validation():
    """Test book defaults and the positive id constraint."""
    book = Book(id=5, title=None, authors=None)
    assert book.title == ""
    assert book.authors == ()
    with pytest.raises(ValidationError):
        Book(id=0)


def test_library_drops_duplicate_ids():
    """Test that library ids keep first occurrence order."""
    library = Library(userid="alice", nome="Favs", book_ids=[3, 1, 3, 2, 1])
    assert library.book_ids == [3, 1, 2]
    assert library.key == ("alice", "Favs")
    assert library.contains(2)
    assert not library.contains(9)


def test_suggestion_key():
    """Test the suggestion identity."""
    assert Suggestion(userid="bob", book_id=4, suggested_ids=[5]).key == ("bob", 4)


def test_stats_defaults():
    """Test the zero state of the aggregate views."""
    stats = ReviewStats(book_id=1)
    assert stats.count == 0
    assert stats.voto_finale_mean == 0.0
    assert stats.distribution == {}
    assert SuggestionStats(book_id=1).is_empty
