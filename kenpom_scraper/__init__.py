"""Scrape and normalize kenpom.com tables."""

from .client import KenPomClient
from .errors import KenPomAuthError, KenPomError, TableIndexError, TableLocatorError, TableNotFoundError
from .normalize import extract_seed, strip_seed

__version__ = "0.1.0"

__all__ = [
    "KenPomAuthError",
    "KenPomClient",
    "KenPomError",
    "TableIndexError",
    "TableLocatorError",
    "TableNotFoundError",
    "extract_seed",
    "strip_seed",
]
