"""Suggestion entity: books a user recommends alongside a base book."""

from pydantic import BaseModel, Field

MAX_SUGGESTED_BOOKS = 3


class Suggestion(BaseModel):
    """Books suggested by ``userid`` to readers of ``book_id``.

    The list is kept as given; the suggestion service removes duplicates and
    the base book and enforces the limit of three before storing it.
    """

    userid: str = Field(min_length=1, description="Author of the suggestion")
    book_id: int = Field(description="Base book the suggestion refers to")
    suggested_ids: list[int] = Field(default_factory=list, description="Suggested book ids")

    @property
    def key(self) -> tuple[str, int]:
        return (self.userid, self.book_id)
