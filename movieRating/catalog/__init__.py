"""
catalog
~~~~~~~
Bundles:

* core  – Movie dataclass, MovieCatalog slots, error types
* codec – pipe-delimited file load / save
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieRating.catalog.core import (
    Movie,
    MovieCatalog,
    CatalogError,
    MovieInputError,
    CatalogFormatError,
    OutOfRangeError,
    EmptySlotError,
    CatalogAllocationError,
    MovieNotFoundError,
    CatalogIOError,
)

# ── persistence ───────────────────────────────────────────────────────────
from movieRating.catalog.codec import load_catalog, save_catalog

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
    "load_catalog",
    "save_catalog",
]
