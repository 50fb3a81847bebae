"""Review service for rating books owned by the reviewer."""

import logging
from typing import Optional

from ..entities.review import Review
from ..interfaces.entity_store import EntityStore
from .library_service import LibraryService

logger = logging.getLogger(__name__)


class ReviewService:
    """Insert, update and query reviews.

    A user may review a book only if it is in one of their libraries, and
    only once. The check runs at insertion time; later changes to the
    libraries do not affect stored reviews.
    """

    def __init__(self, reviews: EntityStore[Review], libraries: LibraryService):
        self._reviews = reviews
        self._libraries = libraries

    def insert(self, review: Review) -> bool:
        """Append ``review`` if the rules allow it.

        Returns:
            bool: False if the book is in none of the user's libraries or the
            user already reviewed it.
        """
        if not self._libraries.user_has_book(review.userid, review.book_id):
            logger.info(f"Review rejected: book {review.book_id} is not in a library of {review.userid}")
            return False

        with self._reviews.edit() as reviews:
            if any(existing.key == review.key for existing in reviews):
                logger.info(f"Review rejected: {review.userid} already reviewed book {review.book_id}")
                return False
            self._reviews.append(review)

        logger.info(f"Review of book {review.book_id} by {review.userid} saved (voto {review.voto_finale})")
        return True

    def update(self, updated: Review) -> bool:
        """Replace the existing review with the same ``(userid, book_id)``."""
        with self._reviews.edit() as reviews:
            for index, review in enumerate(reviews):
                if review.key == updated.key:
                    reviews[index] = updated
                    break
            else:
                logger.info(f"Review update rejected: no review of book {updated.book_id} by {updated.userid}")
                return False
        return True

    def delete(self, userid: str, book_id: int) -> bool:
        with self._reviews.edit() as reviews:
            remaining = [review for review in reviews if review.key != (userid, book_id)]
            removed = len(remaining) != len(reviews)
            reviews[:] = remaining
        return removed

    def get(self, userid: str, book_id: int) -> Optional[Review]:
        for review in self._reviews.load_all():
            if review.key == (userid, book_id):
                return review
        return None

    def list_by_user(self, userid: str) -> list[Review]:
        return [review for review in self._reviews.load_all() if review.userid == userid]

    def list_by_book(self, book_id: int) -> list[Review]:
        return [review for review in self._reviews.load_all() if review.book_id == book_id]
