"""Library service for managing users' personal book collections."""

import logging
from typing import Optional

from ..entities.library import Library
from ..interfaces.entity_store import EntityStore

logger = logging.getLogger(__name__)


class LibraryService:
    """Create, change and query personal libraries.

    A library is keyed by ``(userid, nome)``. Changing a library always
    rewrites it whole: read it, build the new id list, upsert it.
    """

    def __init__(self, libraries: EntityStore[Library]):
        self._libraries = libraries

    def list_user_libraries(self, userid: str) -> list[Library]:
        return [library for library in self._libraries.load_all() if library.userid == userid]

    def get_library(self, userid: str, nome: str) -> Optional[Library]:
        for library in self._libraries.load_all():
            if library.key == (userid.strip(), nome.strip()):
                return library
        return None

    def save_library(self, library: Library) -> bool:
        """Insert ``library`` or replace the one with the same key.

        Returns:
            bool: Always True; failures to write raise ``OSError``.
        """
        with self._libraries.edit() as libraries:
            for index, existing in enumerate(libraries):
                if existing.key == library.key:
                    libraries[index] = library
                    break
            else:
                libraries.append(library)
        logger.info(f"Saved library {library.nome!r} of {library.userid} ({len(library.book_ids)} books)")
        return True

    def delete_library(self, userid: str, nome: str) -> bool:
        with self._libraries.edit() as libraries:
            key = (userid.strip(), nome.strip())
            remaining = [library for library in libraries if library.key != key]
            removed = len(remaining) != len(libraries)
            libraries[:] = remaining
        if not removed:
            logger.info(f"Library {nome!r} of {userid} not found")
        return removed

    def add_book(self, userid: str, nome: str, book_id: int) -> bool:
        """Add a book to a library, creating the library if needed.

        Returns:
            bool: False if the book is already in that library.
        """
        library = self.get_library(userid, nome) or Library(userid=userid, nome=nome)
        if library.contains(book_id):
            return False
        return self.save_library(library.model_copy(update={"book_ids": [*library.book_ids, book_id]}))

    def remove_book(self, userid: str, nome: str, book_id: int) -> bool:
        """Remove a book from a library.

        Returns:
            bool: False if the library does not exist or lacks the book.
        """
        library = self.get_library(userid, nome)
        if library is None or not library.contains(book_id):
            return False
        remaining = [i for i in library.book_ids if i != book_id]
        return self.save_library(library.model_copy(update={"book_ids": remaining}))

    def user_has_book(self, userid: str, book_id: int) -> bool:
        """Tell whether ``book_id`` is in any library of ``userid``."""
        return any(library.contains(book_id) for library in self.list_user_libraries(userid))
