"""Domain services for the book recommender."""

from .aggregation_service import AggregationService
from .auth_service import AuthService, hash_password, is_strong_password
from .library_service import LibraryService
from .review_service import ReviewService
from .search_service import SearchService, normalize_text
from .suggestion_service import SuggestionService

__all__ = [
    "AggregationService",
    "AuthService",
    "LibraryService",
    "ReviewService",
    "SearchService",
    "SuggestionService",
    "hash_password",
    "is_strong_password",
    "normalize_text",
]
