from __future__ import annotations
from pathlib import Path
from typing import List, Optional

from movieRating.settings import CATALOG_PATH, INITIAL_CAPACITY, MIN_YEAR
from movieRating.utils import current_year, is_storable, log_debug, parse_year
from movieRating.catalog import Movie, MovieCatalog, MovieInputError, load_catalog, save_catalog


class Session:
    """
    One run of the catalog: load on open, mutate, always save on close.

    This is the flow a front-end drives; it does no prompting or printing
    itself. Confirmation dialogs and key handling stay with the caller.

    Parameters
    ----------
    catalog
        The catalog this session owns.
    path
        File the catalog is saved back to.
    """

    def __init__(self, catalog: MovieCatalog, path: Path) -> None:
        self.catalog = catalog
        self.path = Path(path)
        self.dirty = False

    @classmethod
    def open(cls, path: Path | str = CATALOG_PATH, capacity: int = INITIAL_CAPACITY) -> "Session":
        return cls(load_catalog(path, capacity), Path(path))

    # ── input-form checks ───────────────────────────────────────────
    @staticmethod
    def _validate(title: str, director: str, year: str | int) -> int:
        if not title.strip():
            raise MovieInputError("Title cannot be blank.")
        if not director.strip():
            raise MovieInputError("Director cannot be blank.")
        if not (is_storable(title) and is_storable(director)):
            raise MovieInputError("Title and director cannot contain '|' or line breaks.")
        year = parse_year(year)
        if year <= MIN_YEAR or year > current_year():
            raise MovieInputError(f"Please enter a valid year (after {MIN_YEAR}).")
        return year

    # ── mutations ───────────────────────────────────────────────────
    def add_movie(self, title: str, director: str, year: str | int) -> int:
        """Validate the form values, add the movie and return its slot index."""
        year = self._validate(title, director, year)
        index = self.catalog.add(Movie(title, director, year))
        self.dirty = True
        log_debug(f"Added '{title}' at slot {index}")
        return index

    def update_movie(self, index: int, title: str, director: str, year: str | int) -> None:
        year = self._validate(title, director, year)
        self.catalog[index].update(title, director, year)
        self.dirty = True

    def rate_movie(self, index: int, value: int) -> None:
        movie = self.catalog[index]
        movie.set_rating(value)
        self.dirty = True
        log_debug(f"Rated '{movie.title}' {value}")

    def delete_movie(self, index: int) -> None:
        """Remove the movie at *index*; the caller has already confirmed."""
        title = self.catalog[index].title
        self.catalog.remove(index)
        self.dirty = True
        log_debug(f"Deleted '{title}' from slot {index}")

    def sort(self, key: str = "title", reverse: bool = False) -> None:
        self.catalog.sort(key, reverse=reverse)
        self.dirty = True

    # ── look-ups ────────────────────────────────────────────────────
    def search(self, title: str) -> Optional[int]:
        return self.catalog.search(title)

    def listing(self) -> List[str]:
        """Numbered display lines, e.g. ``"1. Title: Heat, Director: Mann, Year: 1995"``."""
        return [f"{n}. {movie.format()}" for n, movie in enumerate(self.catalog, start=1)]

    # ── persistence ─────────────────────────────────────────────────
    def save(self) -> None:
        save_catalog(self.catalog, self.path)
        self.dirty = False

    def close(self) -> None:
        """Save the catalog and release every movie."""
        self.save()
        self.catalog.clear()
