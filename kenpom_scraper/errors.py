"""Exception types raised by the KenPom parsers and client."""

from __future__ import annotations


class KenPomError(Exception):
    """Base class for errors raised by this package."""


class TableLocatorError(KenPomError, LookupError):
    """The expected table could not be located in a document.

    Carries the number of tables that did match so the caller can tell a
    changed page layout apart from a wrong document.
    """

    def __init__(self, message: str, selector: str, found: int):
        super().__init__(message)
        self.selector = selector
        self.found = found


class TableNotFoundError(TableLocatorError):
    """No table matched the selector."""

    def __init__(self, selector: str = "table"):
        super().__init__(f"No tables found matching selector: {selector}", selector, 0)


class TableIndexError(TableLocatorError, IndexError):
    """Fewer tables matched than the requested index requires."""

    def __init__(self, index: int, found: int, selector: str = "table"):
        super().__init__(
            f"Table index {index} out of bounds. Found {found} tables.",
            selector,
            found,
        )
        self.index = index


class KenPomAuthError(KenPomError):
    """Login to kenpom.com failed or the session is not authenticated."""
