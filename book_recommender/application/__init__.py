"""Application layer: configuration, service wiring and the text interface."""

from .app import BookRecommender, configure_logging
from .config import Settings, settings

__all__ = ["BookRecommender", "Settings", "configure_logging", "settings"]
