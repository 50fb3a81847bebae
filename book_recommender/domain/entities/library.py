"""Personal library entity."""

from pydantic import BaseModel, Field, field_validator


class Library(BaseModel):
    """A named collection of book ids owned by one user.

    A library is identified by the ``(userid, nome)`` pair, both stored
    without surrounding whitespace. Book ids keep
    their insertion order and duplicates are dropped on construction.
    """

    userid: str = Field(min_length=1, description="Owner of the library")
    nome: str = Field(description="Library name chosen by the owner")
    book_ids: list[int] = Field(default_factory=list, description="Ids of the books in the library")

    @field_validator("userid", "nome", mode="before")
    @classmethod
    def _strip_key(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("book_ids", mode="before")
    @classmethod
    def _dedupe_book_ids(cls, value):
        if value is None:
            return []
        return list(dict.fromkeys(value))

    @property
    def key(self) -> tuple[str, str]:
        """Composite identity of the library."""
        return (self.userid, self.nome)

    def contains(self, book_id: int) -> bool:
        return book_id in self.book_ids
