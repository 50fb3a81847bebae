"""Generic codec between entities and ``;`` delimited text lines."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

FIELD_SEPARATOR = ";"
BOM = "\ufeff"


@dataclass
class DecodeResult(Generic[T]):
    """Records decoded from a file plus the number of lines that were dropped."""

    records: list[T] = field(default_factory=list)
    skipped: int = 0
    had_header: bool = False


class DelimitedRecordCodec(Generic[T]):
    """Line <-> entity mapping for one entity type.

    The codec is parameterised by the header tokens, the minimum number of
    fields a line needs and a pair of functions converting between the split
    fields and the entity. A line that is too short or whose fields the
    decode function rejects (``ValueError``, which includes pydantic's
    ``ValidationError``) is skipped and counted, never raised.
    """

    def __init__(
        self,
        name: str,
        header: Sequence[str],
        min_fields: int,
        decode_fields: Callable[[list[str]], T],
        encode_fields: Callable[[T], list[str]],
        separator: str = FIELD_SEPARATOR,
    ):
        """Initialize the codec.

        Args:
            name: Entity name used in log messages.
            header: Column names written as the first line of new files.
            min_fields: Lines with fewer fields are discarded.
            decode_fields: Builds an entity from the split fields.
            encode_fields: Returns the fields of an entity, in column order.
            separator: Primary field separator.
        """
        self.name = name
        self.header = tuple(header)
        self.min_fields = min_fields
        self.separator = separator
        self._decode_fields = decode_fields
        self._encode_fields = encode_fields
        self._header_tokens = [token.lower() for token in self.header]

    @property
    def header_line(self) -> str:
        return self.separator.join(self.header)

    def is_header(self, line: str) -> bool:
        """Tell whether ``line`` is this format's header, ignoring case."""
        tokens = [token.strip().lower() for token in line.lstrip(BOM).rstrip("\r\n").split(self.separator)]
        return tokens == self._header_tokens

    def decode(self, line: str) -> Optional[T]:
        """Decode one line, returning None if it is blank or malformed."""
        line = line.rstrip("\r\n")
        if not line.strip():
            return None
        fields = line.split(self.separator)
        if len(fields) < self.min_fields:
            return None
        try:
            return self._decode_fields(fields)
        except ValueError:
            return None

    def encode(self, entity: T) -> str:
        """Encode one entity; ``None`` fields become empty strings."""
        return self.separator.join("" if value is None else str(value) for value in self._encode_fields(entity))

    def decode_lines(self, lines: Iterable[str]) -> DecodeResult[T]:
        """Decode an iterable of lines, skipping the header if present."""
        result: DecodeResult[T] = DecodeResult()
        for index, line in enumerate(lines):
            if index == 0:
                line = line.lstrip(BOM)
                if self.is_header(line):
                    result.had_header = True
                    continue
            if not line.strip():
                continue
            record = self.decode(line)
            if record is None:
                result.skipped += 1
                logger.debug(f"Skipping malformed {self.name} line {index + 1}: {line.rstrip()!r}")
                continue
            result.records.append(record)
        return result
