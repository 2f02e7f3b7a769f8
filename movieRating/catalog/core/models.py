# Movie dataclass
from __future__ import annotations
from dataclasses import dataclass, field

from movieRating.settings import MIN_YEAR, RATING_MIN, RATING_MAX, UNRATED
from movieRating.catalog.core.errors import MovieInputError, OutOfRangeError


@dataclass(slots=True, eq=False)
class Movie:
    """
    One catalog entry.

    Title and director are never empty. `rating` is 0.0 until the movie is
    rated, then a whole number between 1 and 5.
    """
    title: str
    director: str
    year: int
    rating: float = field(default=UNRATED, init=False)

    def __post_init__(self) -> None:
        if not self.title or not self.director:
            raise MovieInputError("Title and director cannot be blank.")
        if self.year <= MIN_YEAR:
            raise MovieInputError(f"Year must be after {MIN_YEAR}, got {self.year}.")

    # ── mutators ────────────────────────────────────────────────────
    def update(self, title: str, director: str, year: int) -> None:
        """Replace title, director and year together, or nothing at all."""
        if not title or not director:
            raise MovieInputError("Title and director cannot be blank.")
        if year <= 0:
            raise MovieInputError(f"Year must be positive, got {year}.")
        self.title, self.director, self.year = title, director, year

    def set_rating(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise OutOfRangeError(f"Rating must be a whole number, got {value!r}.")
        if not RATING_MIN <= value <= RATING_MAX:
            raise OutOfRangeError(
                f"Rating must be between {RATING_MIN} and {RATING_MAX}, got {value}."
            )
        self.rating = float(value)

    # ── display ─────────────────────────────────────────────────────
    @property
    def is_rated(self) -> bool:
        return self.rating != UNRATED

    def format(self) -> str:
        return f"Title: {self.title}, Director: {self.director}, Year: {self.year}"

    def __str__(self) -> str:
        return self.format()
