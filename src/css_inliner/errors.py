"""Error hierarchy for css_inliner."""
from __future__ import annotations


class InlinerError(Exception):
    """Base error for all css_inliner errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InputError(InlinerError):
    """A required input (tree, stylesheet text, html, filename) was missing."""


class DeclarationParseError(InlinerError):
    """An inline ``style`` attribute did not have the ``name: value`` shape."""

    def __init__(
        self,
        message: str,
        *,
        style: str = "",
        segment: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.style = style
        self.segment = segment


# ---------------------------------------------------------------------------
# Retrieval errors
# ---------------------------------------------------------------------------


class FetchError(InlinerError):
    """A remote document could not be retrieved."""

    def __init__(
        self,
        message: str,
        *,
        url: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.url = url
        self.status_code = status_code


class FetchTimeoutError(FetchError):
    """The remote server did not answer in time."""
