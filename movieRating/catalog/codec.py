"""catalog.codec
Read / write a `MovieCatalog` as a pipe-delimited text file.

One movie per line::

    title|director|year|rating

`rating` is written with one decimal but is not read back: loaded movies
always start unrated.
"""

from __future__ import annotations
from pathlib import Path

from movieRating.settings import FIELD_SEPARATOR, FILE_ENCODING, INITIAL_CAPACITY
from movieRating.utils import log_debug, parse_year, is_storable
from movieRating.catalog.core.catalog import MovieCatalog
from movieRating.catalog.core.errors import CatalogFormatError, CatalogIOError, MovieInputError
from movieRating.catalog.core.models import Movie


def format_line(movie: Movie) -> str:
    """Serialise *movie* to one newline-terminated line."""
    for field in (movie.title, movie.director):
        if not is_storable(field):
            raise CatalogFormatError(
                f"Field {field!r} contains {FIELD_SEPARATOR!r} or a line break."
            )
    return (
        f"{movie.title}{FIELD_SEPARATOR}{movie.director}{FIELD_SEPARATOR}"
        f"{movie.year}{FIELD_SEPARATOR}{movie.rating:.1f}\n"
    )


def parse_line(line: str) -> Movie | None:
    """
    Build a `Movie` from one file line, or return **None** if it is unusable.

    Empty tokens are dropped before the first three are taken, so
    ``"a||b|2000"`` reads as title ``a``, director ``b``.
    """
    line = line.rstrip("\r\n")
    tokens = [t for t in line.split(FIELD_SEPARATOR) if t]
    if len(tokens) < 3:
        log_debug(f"Error parsing line: {line!r}")
        return None

    title, director, year_str = tokens[:3]
    try:
        return Movie(title, director, parse_year(year_str))
    except MovieInputError as exc:
        log_debug(f"Skipping line {line!r}: {exc}")
        return None


def save_catalog(catalog: MovieCatalog, path: Path | str) -> None:
    """
    Overwrite *path* with every occupied slot of *catalog*, in slot order.

    All lines are formatted before the file is opened, so a
    `CatalogFormatError` leaves *path* untouched. An `OSError` during the
    write is raised as `CatalogIOError`; whatever was written stays.
    """
    path = Path(path)
    lines = [format_line(movie) for movie in catalog]
    try:
        with path.open("w", encoding=FILE_ENCODING, newline="\n") as fh:
            for line in lines:
                fh.write(line)
    except OSError as exc:
        raise CatalogIOError(f"Could not write catalog to {path}: {exc}") from exc
    log_debug(f"Saved {len(lines)} movies to {path}")


def load_catalog(path: Path | str, capacity: int = INITIAL_CAPACITY) -> MovieCatalog:
    """
    Read *path* into a new catalog with initial *capacity*.

    A missing file yields an empty catalog. Malformed lines are logged and
    skipped.
    """
    path = Path(path)
    catalog = MovieCatalog(capacity)
    try:
        with path.open("r", encoding=FILE_ENCODING) as fh:
            for line in fh:
                if movie := parse_line(line):
                    catalog.add(movie)
    except FileNotFoundError:
        log_debug(f"No catalog at {path}; starting empty")
        return catalog
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogIOError(f"Could not read catalog from {path}: {exc}") from exc

    log_debug(f"Loaded {catalog.count} movies from {path}")
    return catalog
