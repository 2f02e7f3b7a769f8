"""catalog.core.catalog
Slot-based collection that owns every `Movie` of a session.

Slots ``[0, count)`` hold movies and ``[count, capacity)`` are empty. Storage
doubles when an append finds no free slot, and removal shifts the tail left so
the occupied region stays contiguous.
"""

from __future__ import annotations
from operator import attrgetter
from typing import Any, Callable, Iterator, List, Optional

from movieRating.settings import SORT_FIELDS
from movieRating.catalog.core.errors import (
    CatalogAllocationError,
    EmptySlotError,
    MovieInputError,
    MovieNotFoundError,
    OutOfRangeError,
)
from movieRating.catalog.core.models import Movie

SortKey = Callable[[Movie], Any]


class MovieCatalog:
    """Dynamic array of movie slots with gap reuse and compacting removal."""

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise MovieInputError(f"Capacity must be a positive integer, got {capacity!r}.")
        self._slots: List[Optional[Movie]] = [None] * capacity
        self._count = 0

    # ───────────────────────────── state ─────────────────────────────
    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Movie]:
        """Occupied slots in index order; gaps are skipped."""
        for movie in self._slots[: self._count]:
            if movie is not None:
                yield movie

    def __getitem__(self, index: int) -> Movie:
        self._check_index(index)
        return self._slots[index]

    def slots(self) -> List[Optional[Movie]]:
        """Copy of the raw slot list, empty slots included."""
        return list(self._slots)

    # ───────────────────────────── writers ──────────────────────────
    def add(self, movie: Movie) -> int:
        """Place *movie* in the catalog and return the slot index used.

        The lowest empty slot below `count` is reused first. Otherwise the
        movie is appended at `count`, growing the storage when it is full.

        Raises
        ------
        CatalogAllocationError
            Storage was full and could not be grown; nothing was placed.
        """
        if not isinstance(movie, Movie):
            raise TypeError(f"Expected Movie, got {type(movie).__name__}")

        for i in range(self._count):
            if self._slots[i] is None:
                self._slots[i] = movie
                return i

        if self._count == self.capacity:
            self.grow()

        index = self._count
        self._slots[index] = movie
        self._count += 1
        return index

    def grow(self) -> None:
        """Double the capacity, keeping every slot where it is."""
        extra = self.capacity
        try:
            slots = self._new_storage(extra)
        except MemoryError as exc:
            raise CatalogAllocationError(
                f"Could not grow catalog from {extra} to {extra * 2} slots."
            ) from exc
        self._slots = slots

    def _new_storage(self, extra: int) -> List[Optional[Movie]]:
        return self._slots + [None] * extra

    def remove(self, index: int) -> None:
        """Drop the movie at *index* and close the gap it leaves."""
        self._check_index(index)
        slots = self._slots
        slots[index] = None
        for i in range(index, self._count - 1):
            slots[i] = slots[i + 1]
        slots[self._count - 1] = None
        self._count -= 1

    def vacate(self, index: int) -> Movie:
        """Take the movie out of *index* without compacting.

        The empty slot stays below `count` until the next `add` fills it or
        `compact` closes it.
        """
        movie = self[index]
        self._slots[index] = None
        return movie

    def compact(self) -> None:
        """Shift movies to the front so no empty slot sits below `count`."""
        movies = [m for m in self._slots[: self._count] if m is not None]
        self._slots[: self._count] = movies + [None] * (self._count - len(movies))
        self._count = len(movies)

    def clear(self) -> None:
        """Release every movie; capacity is kept."""
        self._slots = [None] * self.capacity
        self._count = 0

    def sort(self, key: str | SortKey = "title", reverse: bool = False) -> None:
        """Reorder the occupied slots in place.

        *key* is a field name from `SORT_FIELDS` or a callable taking a
        `Movie`. Empty slots keep their position; movies are sorted into the
        remaining ones.
        """
        if isinstance(key, str):
            if key not in SORT_FIELDS:
                raise MovieInputError(f"Unknown sort field: {key}")
            key = attrgetter(key)

        positions = [i for i in range(self._count) if self._slots[i] is not None]
        ordered = sorted((self._slots[i] for i in positions), key=key, reverse=reverse)
        for i, movie in zip(positions, ordered):
            self._slots[i] = movie

    # ───────────────────────────── look-ups ──────────────────────────
    def search(self, title: str) -> Optional[int]:
        """Index of the first movie titled exactly *title*, or **None**."""
        for i in range(self._count):
            movie = self._slots[i]
            if movie is not None and movie.title == title:
                return i
        return None

    def find(self, title: str) -> Movie:
        index = self.search(title)
        if index is None:
            raise MovieNotFoundError(f"No movie titled {title!r}.")
        return self._slots[index]

    # ───────────────────────────── helpers ──────────────────────────
    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise OutOfRangeError(
                f"Index {index} outside occupied range [0, {self._count})."
            )
        if self._slots[index] is None:
            raise EmptySlotError(f"Slot {index} is already empty.")

    def __repr__(self) -> str:
        return f"MovieCatalog(count={self._count}, capacity={self.capacity})"
