"""Entity store interface."""

from contextlib import AbstractContextManager
from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class EntityStore(Protocol[T]):
    """Protocol for whole-file stores of one entity type.

    Stores never update a single record in place: callers load every record,
    change the list in memory and save the whole list back.
    """

    def load_all(self) -> list[T]:
        """Load every record.

        Returns:
            list: All decodable records in file order; empty if the file
            does not exist.

        Raises:
            OSError: If the file exists but cannot be read.
        """
        ...

    def save_all(self, entities: Sequence[T]) -> None:
        """Replace the stored records with ``entities``, in order.

        Args:
            entities: The complete new content of the store.

        Raises:
            OSError: If the file cannot be written.
        """
        ...

    def append(self, entity: T) -> None:
        """Add one record at the end of the store.

        Args:
            entity: The record to add.

        Raises:
            OSError: If the file cannot be written.
        """
        ...

    def edit(self) -> AbstractContextManager[list[T]]:
        """Load all records for a read-modify-write cycle.

        The yielded list may be changed in place; it is saved back on exit
        only if it differs from what was loaded.
        """
        ...
