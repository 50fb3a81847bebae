"""Read-only aggregate views over reviews and suggestions of a book."""

from pydantic import BaseModel, Field


class ReviewStats(BaseModel):
    """Averages of the review criteria for one book.

    With no reviews every mean is ``0.0`` and the distribution is empty.
    """

    book_id: int
    count: int = 0
    stile_mean: float = 0.0
    contenuto_mean: float = 0.0
    gradevolezza_mean: float = 0.0
    originalita_mean: float = 0.0
    edizione_mean: float = 0.0
    voto_finale_mean: float = 0.0
    distribution: dict[int, int] = Field(
        default_factory=dict, description="voto_finale -> number of reviews"
    )


class SuggestionStats(BaseModel):
    """How many suggestion records name each book, most suggested first."""

    book_id: int
    counts: dict[int, int] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.counts
