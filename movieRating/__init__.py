"""
movieRating
~~~~~~~~~~~

Top-level package for the movie rating catalog.

Exports:
  - CATALOG_PATH, INITIAL_CAPACITY
  - Domain: Movie, MovieCatalog, load_catalog, save_catalog
  - Session: the add / rate / delete flow a front-end drives
"""

# settings
from movieRating.settings import CATALOG_PATH, INITIAL_CAPACITY

# utils
from movieRating.utils import log_debug

# domain
from movieRating.catalog import Movie, MovieCatalog, load_catalog, save_catalog

# caller flow
from movieRating.controller import Session

__all__ = [
    # settings
    "CATALOG_PATH",
    "INITIAL_CAPACITY",
    # utils
    "log_debug",
    # domain
    "Movie",
    "MovieCatalog",
    "load_catalog",
    "save_catalog",
    # caller flow
    "Session",
]
