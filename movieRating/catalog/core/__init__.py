"""
catalog.core
~~~~~~~~~~~~
Domain layer – the Movie record, the slot catalog and their errors.
"""

from .models  import Movie
from .catalog import MovieCatalog
from .errors  import (
    CatalogAllocationError,
    CatalogError,
    CatalogFormatError,
    CatalogIOError,
    EmptySlotError,
    MovieInputError,
    MovieNotFoundError,
    OutOfRangeError,
)

__all__ = [
    "Movie",
    "MovieCatalog",
    "CatalogError",
    "MovieInputError",
    "CatalogFormatError",
    "OutOfRangeError",
    "EmptySlotError",
    "CatalogAllocationError",
    "MovieNotFoundError",
    "CatalogIOError",
]
