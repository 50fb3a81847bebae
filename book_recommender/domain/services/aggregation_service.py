"""Read-only statistics over the reviews and suggestions of a book."""

from collections import Counter

from ..entities.review import Review
from ..entities.stats import ReviewStats, SuggestionStats
from ..entities.suggestion import Suggestion
from ..interfaces.entity_store import EntityStore


class AggregationService:
    """Computes per-book aggregates straight from the review and suggestion stores."""

    def __init__(self, reviews: EntityStore[Review], suggestions: EntityStore[Suggestion]):
        self._reviews = reviews
        self._suggestions = suggestions

    def review_stats(self, book_id: int) -> ReviewStats:
        """Mean of each criterion and of the final score, plus its histogram."""
        reviews = [review for review in self._reviews.load_all() if review.book_id == book_id]
        if not reviews:
            return ReviewStats(book_id=book_id)

        count = len(reviews)
        distribution = Counter(review.voto_finale for review in reviews)
        return ReviewStats(
            book_id=book_id,
            count=count,
            stile_mean=sum(r.stile for r in reviews) / count,
            contenuto_mean=sum(r.contenuto for r in reviews) / count,
            gradevolezza_mean=sum(r.gradevolezza for r in reviews) / count,
            originalita_mean=sum(r.originalita for r in reviews) / count,
            edizione_mean=sum(r.edizione for r in reviews) / count,
            voto_finale_mean=sum(r.voto_finale for r in reviews) / count,
            distribution=dict(sorted(distribution.items())),
        )

    def suggestion_stats(self, book_id: int) -> SuggestionStats:
        """Count, for each suggested book, the suggestion records naming it."""
        counts: Counter[int] = Counter()
        for suggestion in self._suggestions.load_all():
            if suggestion.book_id == book_id:
                counts.update(dict.fromkeys(suggestion.suggested_ids, 1))
        # most_common keeps first-seen order among equal counts
        return SuggestionStats(book_id=book_id, counts=dict(counts.most_common()))
