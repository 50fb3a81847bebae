"""Run the Book Recommender text interface."""

import sys

from book_recommender.application.cli import main

if __name__ == "__main__":
    sys.exit(main())
