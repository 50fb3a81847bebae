"""Domain entities for the book recommender."""

from .book import Book
from .library import Library
from .review import CRITERIA, MAX_COMMENT_LENGTH, Review
from .stats import ReviewStats, SuggestionStats
from .suggestion import MAX_SUGGESTED_BOOKS, Suggestion
from .user import User

__all__ = [
    # Catalog
    "Book",
    # Users
    "User",
    # Personal collections
    "Library",
    # Ratings
    "Review",
    "CRITERIA",
    "MAX_COMMENT_LENGTH",
    # Recommendations
    "Suggestion",
    "MAX_SUGGESTED_BOOKS",
    # Aggregates
    "ReviewStats",
    "SuggestionStats",
]
