"""Interactive text menu over the book recommender services."""

import argparse
import logging
from pathlib import Path
from typing import Callable, Optional

from ..domain.entities import MAX_COMMENT_LENGTH, MAX_SUGGESTED_BOOKS, Book, Library, Review, Suggestion
from ..infrastructure import CatalogNotFoundError
from .app import BookRecommender, configure_logging
from .config import Settings

logger = logging.getLogger(__name__)

MENU = """
Menu:
1) Search by title
2) Search by author
3) Search by author and year
4) Register
5) Login
6) Create/update library (login required)
7) Review a book (login required)
8) Suggest books (login required)
9) Book details (aggregates)
L) Logout
0) Exit"""


class InvalidInput(ValueError):
    """Console input that cannot be turned into a service argument."""


def parse_id_list(raw: str) -> list[int]:
    """Parse ``"10, 25,31"`` into ``[10, 25, 31]``.

    Raises:
        InvalidInput: If a token is not a positive integer.
    """
    ids = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        if not token.isdigit() or int(token) < 1:
            raise InvalidInput(f"Invalid book id: {token!r}")
        ids.append(int(token))
    return ids


def parse_int(raw: str, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise InvalidInput(f"Not a number: {raw.strip()!r}")
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        raise InvalidInput(f"Out of range: {value}")
    return value


class BookRecommenderCli:
    """Menu loop mapping each choice to one service call."""

    def __init__(
        self,
        app: BookRecommender,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.app = app
        self._input = input_fn
        self._output = output
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.search_by_title,
            "2": self.search_by_author,
            "3": self.search_by_author_and_year,
            "4": self.register,
            "5": self.login,
            "6": self.save_library,
            "7": self.review,
            "8": self.suggest,
            "9": self.book_details,
            "l": self.logout,
        }

    def ask(self, prompt: str) -> str:
        return self._input(prompt)

    def say(self, message: str = "") -> None:
        self._output(message)

    def run(self) -> None:
        self.say("=== Book Recommender ===")
        self.say(f"Books loaded: {self.app.catalog.size()}")
        while True:
            self.say(MENU)
            try:
                choice = self.ask("Choice: ").strip().lower()
            except EOFError:
                return
            if choice == "0":
                return
            action = self._actions.get(choice)
            if action is None:
                self.say("Invalid choice.")
                continue
            try:
                action()
            except InvalidInput as e:
                self.say(str(e))
            except EOFError:
                return
            except OSError as e:
                logger.error(f"Action {choice} failed: {e}", exc_info=True)
                self.say(f"Error: {e}")

    # Search

    def search_by_title(self) -> None:
        self.print_books(self.app.search.search_by_title(self.ask("Title (substring): ")))

    def search_by_author(self) -> None:
        self.print_books(self.app.search.search_by_author(self.ask("Author (substring): ")))

    def search_by_author_and_year(self) -> None:
        author = self.ask("Author: ")
        year = parse_int(self.ask("Year (e.g. 1999): "))
        self.print_books(self.app.search.search_by_author_and_year(author, year))

    # Account

    def register(self) -> None:
        self.say("=== Registration ===")
        userid = self.ask("Userid: ").strip()
        password = self.ask("Password: ")
        nome = self.ask("First name: ").strip()
        cognome = self.ask("Last name: ").strip()
        codice_fiscale = self.ask("Fiscal code: ").strip()
        email = self.ask("Email: ").strip()
        if not userid or not password:
            self.say("Userid and password are required.")
            return
        ok = self.app.auth.register_account(userid, password, nome, cognome, codice_fiscale, email)
        self.say(
            "Registration completed."
            if ok
            else "Registration failed (userid taken, invalid email or fiscal code, "
            "or password shorter than 8 characters without letters and digits)."
        )

    def login(self) -> None:
        userid = self.ask("Userid: ").strip()
        password = self.ask("Password: ")
        if not userid or not password:
            self.say("Userid and password are required.")
            return
        self.say("Login OK." if self.app.auth.login(userid, password) else "Wrong credentials.")

    def logout(self) -> None:
        self.app.auth.logout()
        self.say("Logged out.")

    # Libraries, reviews, suggestions

    def save_library(self) -> None:
        me = self._require_login()
        if me is None:
            return
        libraries = self.app.libraries.list_user_libraries(me)
        self.say(f"=== Libraries of {me} ===")
        if not libraries:
            self.say("(no libraries)")
        for library in libraries:
            self.say(f"- {library.nome} -> {len(library.book_ids)} books")
        nome = self.ask("Library to create/update: ").strip()
        if not nome:
            raise InvalidInput("Library name is required.")
        ids = parse_id_list(self.ask("Book ids, comma separated (e.g. 10,25,31): "))
        self.app.libraries.save_library(Library(userid=me, nome=nome, book_ids=ids))
        self.say("Library saved.")

    def review(self) -> None:
        me = self._require_login()
        if me is None:
            return
        book_id = parse_int(self.ask("Book id to review: "), minimum=1)
        scores = {
            criterion: parse_int(self.ask(f"{label} (1..5): "), minimum=1, maximum=5)
            for criterion, label in (
                ("stile", "Style"),
                ("contenuto", "Content"),
                ("gradevolezza", "Pleasantness"),
                ("originalita", "Originality"),
                ("edizione", "Edition"),
            )
        }
        comment = self.ask(f"Comment (max {MAX_COMMENT_LENGTH}, optional): ")
        if len(comment) > MAX_COMMENT_LENGTH:
            raise InvalidInput("Comment too long.")
        review = Review(userid=me, book_id=book_id, commento=comment, **scores)
        if self.app.reviews.insert(review):
            self.say(f"Review saved (final score {review.voto_finale}).")
        else:
            self.say("Review not saved (the book must be in one of your libraries, one review per book).")

    def suggest(self) -> None:
        me = self._require_login()
        if me is None:
            return
        book_id = parse_int(self.ask("Base book id: "), minimum=1)
        ids = parse_id_list(self.ask(f"Up to {MAX_SUGGESTED_BOOKS} suggested book ids (e.g. 101,202,303): "))
        if self.app.suggestions.insert(Suggestion(userid=me, book_id=book_id, suggested_ids=ids)):
            self.say("Suggestion saved.")
        else:
            self.say(
                f"Suggestion not saved (1 to {MAX_SUGGESTED_BOOKS} distinct books other than the base one, "
                "all in your libraries, one suggestion per base book)."
            )

    # Details

    def book_details(self) -> None:
        results = self.app.search.search_by_title(self.ask("Search a title to pick the book: "))
        if not results:
            self.say("No results.")
            return
        self.print_books(results)
        book_id = parse_int(self.ask("Book id to show: "), minimum=1)
        book = self.app.catalog.find_by_id(book_id)
        if book is None:
            self.say("Book id not found.")
            return

        self.say("\n=== Book details ===")
        self.say(f"[{book.id}] {book.title}")
        self.say(f"Authors: {', '.join(book.authors)}")
        self.say(f"Year: {book.year or ''}")
        self.say(f"Publisher: {book.publisher or ''}")
        self.say(f"Category: {book.category or ''}")

        stats = self.app.aggregation.review_stats(book.id)
        self.say("\n-- Reviews --")
        self.say(f"Number of reviews: {stats.count}")
        if stats.count:
            self.say(
                f"Means -> Style: {stats.stile_mean:.2f}, Content: {stats.contenuto_mean:.2f}, "
                f"Pleasantness: {stats.gradevolezza_mean:.2f}, Originality: {stats.originalita_mean:.2f}, "
                f"Edition: {stats.edizione_mean:.2f}, Final: {stats.voto_finale_mean:.2f}"
            )
            self.say(f"Final score distribution: {stats.distribution}")

        suggestion_stats = self.app.aggregation.suggestion_stats(book.id)
        self.say("\n-- Suggestions (book id -> users) --")
        if suggestion_stats.is_empty:
            self.say("(none)")
        else:
            self.say(", ".join(f"{i}->{n}" for i, n in suggestion_stats.counts.items()))

    # Helpers

    def print_books(self, books: list[Book]) -> None:
        if not books:
            self.say("No results.")
            return
        limit = self.app.settings.search_result_limit
        self.say(f"Found {len(books)} result(s):")
        for book in books[:limit]:
            self.say(f"- [{book.id}] {book.title} ({book.year or ''}) | Authors: {', '.join(book.authors)}")
        if len(books) > limit:
            self.say(f"... (showing the first {limit})")

    def _require_login(self) -> Optional[str]:
        me = self.app.auth.current_userid
        if me is None:
            self.say("Please log in first.")
        return me


def run_cli(
    app: BookRecommender,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> None:
    """Run the menu loop until the user exits or input ends."""
    BookRecommenderCli(app, input_fn=input_fn, output=output).run()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Book recommender text interface")
    parser.add_argument("--data-dir", type=Path, help="Directory holding the data files")
    parser.add_argument("--log-level", help="Logging level (default from settings)")
    args = parser.parse_args(argv)

    config = Settings()
    if args.data_dir is not None:
        config = config.model_copy(update={"data_dir": args.data_dir})
    configure_logging(args.log_level or config.log_level)

    app = BookRecommender(config)
    try:
        app.load_catalog()
    except (CatalogNotFoundError, OSError) as e:
        logger.error(f"Cannot load the book catalog: {e}")
        return 1

    run_cli(app)
    return 0
