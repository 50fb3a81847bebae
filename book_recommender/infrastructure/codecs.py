"""Record codecs for each persisted entity type.

On-disk layout, one record per line after the header:

    Books        idLibro;Titolo;Autori;Anno;Editore;Categoria      authors joined with '|'
    Users        userid;passwordHash;nome;cognome;codiceFiscale;email
    Libraries    userid;nome;idLibri                                ids joined with ','
    Reviews      userid;idLibro;stile;...;votoFinale;commento
    Suggestions  userid;idLibro;suggerito1;suggerito2;suggerito3

Readers also accept the legacy variants: '|' separated library ids and
suggestion rows holding a ',' separated list in the third column. A book
id that is not a number is left for the catalog to assign. Stored comments
and suggestion lists longer than the input limits are cut on read.
"""

import re
from typing import Optional

from ..domain.entities import MAX_COMMENT_LENGTH, MAX_SUGGESTED_BOOKS, Book, Library, Review, Suggestion, User
from .record_codec import DelimitedRecordCodec

AUTHOR_SEPARATOR = "|"
LIBRARY_ID_SEPARATOR = ","
SUGGESTION_COLUMNS = 3

_AUTHOR_SPLIT_RX = re.compile(r"\s*[;,|]\s*")
_LIBRARY_ID_SPLIT_RX = re.compile(r"[|,]")


def normalize_authors(raw: Optional[str]) -> list[str]:
    """Split a raw author field into names.

    Strips a leading "By " prefix and splits on comma, semicolon or pipe.
    """
    if raw is None:
        return []
    text = raw.strip()
    if text.lower().startswith("by "):
        text = text[3:]
    return [name.strip() for name in _AUTHOR_SPLIT_RX.split(text) if name.strip()]


def parse_optional_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer column, returning None when empty or not a number."""
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_id_tokens(tokens: list[str]) -> list[int]:
    """Parse book ids, dropping empty and non-numeric tokens."""
    ids = []
    for token in tokens:
        book_id = parse_optional_int(token)
        if book_id is not None:
            ids.append(book_id)
    return ids


def _empty_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


# Books


def _decode_book(fields: list[str]) -> Book:
    return Book(
        id=parse_optional_int(fields[0]),
        title=fields[1].strip(),
        authors=normalize_authors(fields[2]),
        year=parse_optional_int(fields[3]) if len(fields) > 3 else None,
        publisher=_empty_to_none(fields[4]) if len(fields) > 4 else None,
        category=_empty_to_none(fields[5]) if len(fields) > 5 else None,
    )


def _encode_book(book: Book) -> list:
    return [
        book.id,
        book.title,
        AUTHOR_SEPARATOR.join(book.authors),
        book.year,
        book.publisher,
        book.category,
    ]


BOOK_CODEC: DelimitedRecordCodec[Book] = DelimitedRecordCodec(
    name="book",
    header=("idLibro", "Titolo", "Autori", "Anno", "Editore", "Categoria"),
    min_fields=3,
    decode_fields=_decode_book,
    encode_fields=_encode_book,
)


# Users


def _decode_user(fields: list[str]) -> User:
    return User(
        userid=fields[0],
        password_hash=fields[1],
        nome=fields[2],
        cognome=fields[3],
        codice_fiscale=fields[4],
        email=fields[5],
    )


def _encode_user(user: User) -> list:
    return [user.userid, user.password_hash, user.nome, user.cognome, user.codice_fiscale, user.email]


USER_CODEC: DelimitedRecordCodec[User] = DelimitedRecordCodec(
    name="user",
    header=("userid", "passwordHash", "nome", "cognome", "codiceFiscale", "email"),
    min_fields=6,
    decode_fields=_decode_user,
    encode_fields=_encode_user,
)


# Libraries


def _decode_library(fields: list[str]) -> Library:
    ids_column = LIBRARY_ID_SEPARATOR.join(fields[2:])
    return Library(
        userid=fields[0].strip(),
        nome=fields[1].strip(),
        book_ids=parse_id_tokens(_LIBRARY_ID_SPLIT_RX.split(ids_column)),
    )


def _encode_library(library: Library) -> list:
    return [library.userid, library.nome, LIBRARY_ID_SEPARATOR.join(str(i) for i in library.book_ids)]


LIBRARY_CODEC: DelimitedRecordCodec[Library] = DelimitedRecordCodec(
    name="library",
    header=("userid", "nome", "idLibri"),
    min_fields=2,
    decode_fields=_decode_library,
    encode_fields=_encode_library,
)


# Reviews


def _decode_review(fields: list[str]) -> Review:
    return Review(
        userid=fields[0].strip(),
        book_id=int(fields[1]),
        stile=int(fields[2]),
        contenuto=int(fields[3]),
        gradevolezza=int(fields[4]),
        originalita=int(fields[5]),
        edizione=int(fields[6]),
        voto_finale=int(fields[7]),
        # a stray separator inside the comment spills into extra columns;
        # overlong stored comments are cut to the limit
        commento=";".join(fields[8:]).strip()[:MAX_COMMENT_LENGTH],
    )


def _encode_review(review: Review) -> list:
    return [
        review.userid,
        review.book_id,
        *review.scores,
        review.voto_finale,
        review.commento,
    ]


REVIEW_CODEC: DelimitedRecordCodec[Review] = DelimitedRecordCodec(
    name="review",
    header=(
        "userid",
        "idLibro",
        "stile",
        "contenuto",
        "gradevolezza",
        "originalita",
        "edizione",
        "votoFinale",
        "commento",
    ),
    min_fields=9,
    decode_fields=_decode_review,
    encode_fields=_encode_review,
)


# Suggestions


def _decode_suggestion(fields: list[str]) -> Suggestion:
    tokens = [token for column in fields[2:] for token in column.split(",")]
    return Suggestion(
        userid=fields[0].strip(),
        book_id=int(fields[1]),
        suggested_ids=list(dict.fromkeys(parse_id_tokens(tokens)))[:MAX_SUGGESTED_BOOKS],
    )


def _encode_suggestion(suggestion: Suggestion) -> list:
    columns: list = list(suggestion.suggested_ids)
    columns += [None] * (SUGGESTION_COLUMNS - len(columns))
    return [suggestion.userid, suggestion.book_id, *columns]


SUGGESTION_CODEC: DelimitedRecordCodec[Suggestion] = DelimitedRecordCodec(
    name="suggestion",
    header=("userid", "idLibro", "suggerito1", "suggerito2", "suggerito3"),
    min_fields=3,
    decode_fields=_decode_suggestion,
    encode_fields=_encode_suggestion,
)
