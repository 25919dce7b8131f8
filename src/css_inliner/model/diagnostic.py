"""Diagnostic model: recoverable warnings recorded during an inlining pass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WarningKind(Enum):
    """Category of a recoverable problem."""

    INVALID_SELECTOR = "invalid-selector"
    NO_MATCH = "no-match"
    CSS_SYNTAX = "css-syntax"
    INVALID_STYLE = "invalid-style"


@dataclass(frozen=True)
class Diagnostic:
    """A single recoverable finding about the stylesheet or the document.

    Attributes:
        kind: What went wrong.
        message: Human-readable description of the problem.
        selector: The selector involved, if applicable.
    """

    kind: WarningKind
    message: str
    selector: str | None = None

    def __str__(self) -> str:
        location = f" [selector={self.selector}]" if self.selector else ""
        return f"WARNING {self.kind.value}{location}: {self.message}"
