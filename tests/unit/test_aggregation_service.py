"""Tests for AggregationService."""

import pytest

from book_recommender.domain.entities import Review, Suggestion
from book_recommender.domain.services import AggregationService
from book_recommender.infrastructure import REVIEW_CODEC, SUGGESTION_CODEC, LocalEntityStore


@pytest.fixture
def review_store(tmp_path):
    return LocalEntityStore(tmp_path / "ValutazioniLibri.dati", REVIEW_CODEC)


@pytest.fixture
def suggestion_store(tmp_path):
    return LocalEntityStore(tmp_path / "ConsigliLibri.dati", SUGGESTION_CODEC)


@pytest.fixture
def service(review_store, suggestion_store):
    return AggregationService(review_store, suggestion_store)


def test_review_stats_without_reviews(service):
    """Test the zero state when a book has no reviews."""
    stats = service.review_stats(42)
    assert stats.book_id == 42
    assert stats.count == 0
    assert stats.stile_mean == 0.0
    assert stats.distribution == {}


def test_review_stats_means_and_distribution(service, review_store):
    """Test the per-criterion means and the final score histogram."""
    review_store.append(Review(userid="a", book_id=42, stile=4, contenuto=4, gradevolezza=5, originalita=5, edizione=4))
    review_store.append(Review(userid="b", book_id=42, stile=2, contenuto=2, gradevolezza=2, originalita=2, edizione=2))
    review_store.append(Review(userid="c", book_id=42, stile=5, contenuto=5, gradevolezza=5, originalita=5, edizione=5))
    review_store.append(Review(userid="a", book_id=7, stile=1, contenuto=1, gradevolezza=1, originalita=1, edizione=1))

    stats = service.review_stats(42)

    assert stats.count == 3
    assert stats.stile_mean == pytest.approx(11 / 3)
    assert stats.edizione_mean == pytest.approx(11 / 3)
    assert stats.gradevolezza_mean == pytest.approx(4.0)
    assert stats.voto_finale_mean == pytest.approx((4 + 2 + 5) / 3)
    assert list(stats.distribution.items()) == [(2, 1), (4, 1), (5, 1)]


def test_suggestion_stats_without_suggestions(service):
    """Test the empty suggestion aggregate."""
    assert service.suggestion_stats(1).is_empty


def test_suggestion_stats_counts_records(service, suggestion_store):
    """Test counting and ordering of suggested books."""
    suggestion_store.append(Suggestion(userid="a", book_id=1, suggested_ids=[3, 2]))
    suggestion_store.append(Suggestion(userid="b", book_id=1, suggested_ids=[2, 4]))
    suggestion_store.append(Suggestion(userid="c", book_id=1, suggested_ids=[4, 2, 5]))
    suggestion_store.append(Suggestion(userid="a", book_id=9, suggested_ids=[5]))

    stats = service.suggestion_stats(1)

    assert list(stats.counts.items()) == [(2, 3), (4, 2), (3, 1), (5, 1)]


def test_suggestion_stats_ignore_extra_stored_ids(service, suggestion_store):
    """Test that a stored row with more than three ids counts only the first three."""
    suggestion_store.path.write_text("alice;1;2;3;4;5\n", encoding="utf-8")

    stats = service.suggestion_stats(1)

    assert list(stats.counts) == [2, 3, 4]
