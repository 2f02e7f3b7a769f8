"""catalog.core.errors
Exception hierarchy for the movie catalog.

Every error derives from `CatalogError` and from the builtin that best describes
it, so callers can catch either.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for everything the catalog raises."""


class MovieInputError(CatalogError, ValueError):
    """Empty required field or a year outside the accepted domain."""


class CatalogFormatError(MovieInputError):
    """A field value cannot be represented in the pipe-delimited file."""


class OutOfRangeError(CatalogError, ValueError):
    """Slot index or rating outside its valid domain."""


class EmptySlotError(CatalogError, LookupError):
    """The addressed slot holds no movie."""


class CatalogAllocationError(CatalogError, MemoryError):
    """Slot storage could not be grown."""


class MovieNotFoundError(CatalogError, LookupError):
    """No movie with the requested title."""


class CatalogIOError(CatalogError, OSError):
    """Catalog file could not be opened, read or written."""
