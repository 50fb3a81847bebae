"""Application facade wiring stores and services together."""

import logging
from typing import Optional, Union

from ..domain.entities import Library, Review, Suggestion, User
from ..domain.services import (
    AggregationService,
    AuthService,
    LibraryService,
    ReviewService,
    SearchService,
    SuggestionService,
)
from ..infrastructure import (
    LIBRARY_CODEC,
    REVIEW_CODEC,
    SUGGESTION_CODEC,
    USER_CODEC,
    LocalCatalogStore,
    LocalEntityStore,
)
from .config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: Union[int, str] = "INFO") -> None:
    """Configure root logging for the application."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


class BookRecommender:
    """
    Wires the file stores and domain services for one data directory.

    The presentation layers (CLI, tests) talk only to the services exposed
    here. The book catalog is loaded lazily by ``load_catalog``; everything
    else reads its file on demand.
    """

    def __init__(self, config: Optional[Settings] = None):
        """
        Initialize stores and services.

        Args:
            config: Settings to use; defaults to the environment-driven
                module settings.
        """
        self.settings = config or default_settings

        # stores
        self.catalog = LocalCatalogStore(self.settings.books_path, self.settings.books_csv_path)
        self.user_store: LocalEntityStore[User] = LocalEntityStore(self.settings.users_path, USER_CODEC)
        self.library_store: LocalEntityStore[Library] = LocalEntityStore(
            self.settings.libraries_path, LIBRARY_CODEC
        )
        self.review_store: LocalEntityStore[Review] = LocalEntityStore(self.settings.reviews_path, REVIEW_CODEC)
        self.suggestion_store: LocalEntityStore[Suggestion] = LocalEntityStore(
            self.settings.suggestions_path, SUGGESTION_CODEC
        )

        # services
        self.auth = AuthService(self.user_store)
        self.libraries = LibraryService(self.library_store)
        self.reviews = ReviewService(self.review_store, self.libraries)
        self.suggestions = SuggestionService(self.suggestion_store, self.libraries)
        self.aggregation = AggregationService(self.review_store, self.suggestion_store)
        self.search = SearchService(self.catalog)

        logger.info(f"BookRecommender initialized with data directory {self.settings.data_dir}")

    def load_catalog(self) -> int:
        """Load the book catalog and return the number of books.

        Raises:
            CatalogNotFoundError: If neither the catalog nor the dataset exists.
        """
        self.catalog.load()
        return self.catalog.size()
