"""Suggestion service: users recommend related books to other readers."""

import logging

from ..entities.suggestion import MAX_SUGGESTED_BOOKS, Suggestion
from ..interfaces.entity_store import EntityStore
from .library_service import LibraryService

logger = logging.getLogger(__name__)


class SuggestionService:
    """Insert and query book suggestions.

    Each user holds at most one suggestion set per base book, made of one to
    three distinct books taken from the user's own libraries.
    """

    def __init__(self, suggestions: EntityStore[Suggestion], libraries: LibraryService):
        self._suggestions = suggestions
        self._libraries = libraries

    def insert(self, suggestion: Suggestion) -> bool:
        """Store ``suggestion`` with duplicates and the base book removed.

        Returns:
            bool: False if no id or more than three ids remain, if a
            suggested book is in none of the user's libraries, or if the user
            already made suggestions for this base book.
        """
        ids = [i for i in dict.fromkeys(suggestion.suggested_ids) if i != suggestion.book_id]
        if not ids or len(ids) > MAX_SUGGESTED_BOOKS:
            logger.info(f"Suggestion rejected: {len(ids)} distinct book(s), expected 1 to {MAX_SUGGESTED_BOOKS}")
            return False

        missing = [i for i in ids if not self._libraries.user_has_book(suggestion.userid, i)]
        if missing:
            logger.info(f"Suggestion rejected: books {missing} are not in a library of {suggestion.userid}")
            return False

        with self._suggestions.edit() as suggestions:
            if any(existing.key == suggestion.key for existing in suggestions):
                logger.info(
                    f"Suggestion rejected: {suggestion.userid} already suggested books for {suggestion.book_id}"
                )
                return False
            self._suggestions.append(suggestion.model_copy(update={"suggested_ids": ids}))

        logger.info(f"Suggestion for book {suggestion.book_id} by {suggestion.userid} saved: {ids}")
        return True

    def delete(self, userid: str, book_id: int) -> bool:
        with self._suggestions.edit() as suggestions:
            remaining = [s for s in suggestions if s.key != (userid, book_id)]
            removed = len(remaining) != len(suggestions)
            suggestions[:] = remaining
        return removed

    def list_by_user(self, userid: str) -> list[Suggestion]:
        return [s for s in self._suggestions.load_all() if s.userid == userid]

    def list_by_book(self, book_id: int) -> list[Suggestion]:
        return [s for s in self._suggestions.load_all() if s.book_id == book_id]
