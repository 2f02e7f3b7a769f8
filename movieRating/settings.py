from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "movie_rating.env")

CATALOG_PATH = Path(os.getenv("MOVIE_CATALOG_PATH", BASE_DIR / "movies.txt"))
LOG_PATH     = Path(os.getenv("MOVIE_LOG_PATH", BASE_DIR / "movie_rating_debug.log"))

_capacity_raw = os.getenv("MOVIE_CATALOG_CAPACITY", "10")
try:
    INITIAL_CAPACITY = int(_capacity_raw)
except ValueError:
    raise EnvironmentError(f"MOVIE_CATALOG_CAPACITY must be an integer, got {_capacity_raw!r}")
if INITIAL_CAPACITY <= 0:
    raise EnvironmentError("MOVIE_CATALOG_CAPACITY must be positive")

# Record constraints
MIN_YEAR   = 1800          # exclusive
RATING_MIN = 1
RATING_MAX = 5
UNRATED    = 0.0

# On-disk format
FIELD_SEPARATOR = "|"
FILE_ENCODING   = "utf-8"

SORT_FIELDS = ("title", "director", "year", "rating")
