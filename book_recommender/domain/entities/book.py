"""Book entity for the book recommender catalog."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Book(BaseModel):
    """A book of the catalog.

    Books are created when the catalog is loaded and never change afterwards,
    so the model is frozen. Two books are the same book when their ids match.
    A book read with an unusable id has none until the catalog assigns the
    next free one.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = Field(None, ge=1, description="Unique identifier; None until the catalog assigns one")
    title: str = Field(default="", description="Title of the book")
    authors: tuple[str, ...] = Field(default=(), description="Authors, in catalog order")
    year: Optional[int] = Field(None, description="Publication year, if known")
    publisher: Optional[str] = Field(None, description="Publisher name")
    category: Optional[str] = Field(None, description="Category or genre")

    @field_validator("title", mode="before")
    @classmethod
    def _none_title_is_empty(cls, value):
        return "" if value is None else value

    @field_validator("authors", mode="before")
    @classmethod
    def _none_authors_is_empty(cls, value):
        return () if value is None else tuple(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Book) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)
