"""Book recommender: file-backed book catalog, personal libraries, reviews and suggestions."""

__version__ = "0.1.0"
