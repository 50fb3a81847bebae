"""Local file system implementation of EntityStore."""

import copy
import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence, TypeVar, Union

from ..domain.interfaces.entity_store import EntityStore
from .record_codec import DelimitedRecordCodec

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LocalEntityStore(EntityStore[T]):
    """Stores one entity type in a ``;`` delimited UTF-8 text file.

    Every write goes through the whole file: ``save_all`` rewrites it through
    a temporary file renamed over the original, ``append`` adds one line.
    A re-entrant lock serialises load/modify/save cycles within the process;
    nothing guards against another process writing the same file.
    """

    def __init__(self, path: Union[str, Path], codec: DelimitedRecordCodec[T]):
        """Initialize the store.

        Args:
            path: Location of the data file. It need not exist yet.
            codec: Codec for the entity type kept in the file.
        """
        self.path = Path(path)
        self.codec = codec
        self.last_skipped = 0
        self._lock = threading.RLock()

    def load_all(self) -> list[T]:
        """Load every decodable record from the file.

        Returns:
            list: Records in file order, empty if the file does not exist.

        Raises:
            OSError: If the file exists but cannot be read.
        """
        with self._lock:
            if not self.path.exists():
                self.last_skipped = 0
                return []

            with self.path.open("r", encoding="utf-8") as handle:
                result = self.codec.decode_lines(handle)

            self.last_skipped = result.skipped
            if result.skipped:
                logger.warning(f"Skipped {result.skipped} malformed {self.codec.name} line(s) in {self.path}")
            logger.debug(f"Loaded {len(result.records)} {self.codec.name} record(s) from {self.path}")
            return result.records

    def save_all(self, entities: Sequence[T]) -> None:
        """Rewrite the file with ``entities``, header first.

        Args:
            entities: The complete new content of the file, in order.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_name(self.path.name + ".tmp")
            try:
                with tmp.open("w", encoding="utf-8", newline="\n") as handle:
                    handle.write(self.codec.header_line + "\n")
                    for entity in entities:
                        handle.write(self.codec.encode(entity) + "\n")
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp, self.path)
            except OSError:
                tmp.unlink(missing_ok=True)
                raise
            logger.debug(f"Saved {len(entities)} {self.codec.name} record(s) to {self.path}")

    def append(self, entity: T) -> None:
        """Append one record, creating the file with its header if needed.

        Args:
            entity: The record to add at the end of the file.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        line = self.codec.encode(entity) + "\n"
        with self._lock:
            if not self.path.exists() or self.path.stat().st_size == 0:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with self.path.open("w", encoding="utf-8", newline="\n") as handle:
                    handle.write(self.codec.header_line + "\n")
                    handle.write(line)
                return

            prefix = "" if self._ends_with_newline() else "\n"
            with self.path.open("a", encoding="utf-8", newline="\n") as handle:
                handle.write(prefix + line)

    @contextmanager
    def edit(self) -> Iterator[list[T]]:
        """Load all records for a read-modify-write cycle.

        The yielded list may be changed in place. It is saved back when the
        block exits normally and the content differs from what was loaded.
        """
        with self._lock:
            records = self.load_all()
            original = copy.deepcopy(records)
            yield records
            if records != original:
                self.save_all(records)

    def _ends_with_newline(self) -> bool:
        with self.path.open("rb") as handle:
            handle.seek(-1, os.SEEK_END)
            return handle.read(1) == b"\n"
