"""Review entity: a five criteria rating of a book."""

import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

MAX_COMMENT_LENGTH = 256

CRITERIA = ("stile", "contenuto", "gradevolezza", "originalita", "edizione")


class Review(BaseModel):
    """Rating given by a user to a book.

    Each criterion is scored 1 to 5. ``voto_finale`` is the mean of the five
    scores rounded half up; it is computed when not supplied and kept as read
    when loaded from storage.
    """

    userid: str = Field(min_length=1, description="Author of the review")
    book_id: int = Field(description="Reviewed book")
    stile: int = Field(ge=1, le=5)
    contenuto: int = Field(ge=1, le=5)
    gradevolezza: int = Field(ge=1, le=5)
    originalita: int = Field(ge=1, le=5)
    edizione: int = Field(ge=1, le=5)
    voto_finale: Optional[int] = Field(None, description="Rounded overall score")
    commento: str = Field(default="", max_length=MAX_COMMENT_LENGTH)

    @field_validator("commento", mode="before")
    @classmethod
    def _single_line_comment(cls, value):
        if value is None:
            return ""
        text = str(value).replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
        return text.strip()

    @model_validator(mode="after")
    def _fill_voto_finale(self):
        if self.voto_finale is None:
            self.voto_finale = self.compute_voto_finale(*self.scores)
        return self

    @property
    def scores(self) -> tuple[int, int, int, int, int]:
        return (self.stile, self.contenuto, self.gradevolezza, self.originalita, self.edizione)

    @property
    def key(self) -> tuple[str, int]:
        return (self.userid, self.book_id)

    @staticmethod
    def compute_voto_finale(
        stile: int, contenuto: int, gradevolezza: int, originalita: int, edizione: int
    ) -> int:
        """Mean of the five scores rounded to the nearest integer, ties up."""
        total = stile + contenuto + gradevolezza + originalita + edizione
        return math.floor(total / 5.0 + 0.5)
