"""Match model: per-element cascade records and the per-call inlining context."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from css_inliner.model.diagnostic import Diagnostic, WarningKind


@dataclass(frozen=True)
class MatchRecord:
    """One rule matching one element.

    ``position`` is the global discovery order of the match within a pass
    and breaks ties between records of equal specificity.
    """

    selector: str
    specificity: int
    position: int
    declarations: Mapping[str, str]


@dataclass
class ElementMatches:
    """An element handle and every rule that matched it, in discovery order."""

    element: Any
    records: list[MatchRecord] = field(default_factory=list)


# address -> matches, insertion ordered
ElementMatchSet = dict[str, ElementMatches]


class InlineContext:
    """Mutable state for a single inlining pass.

    Holds the sequence counter handing out match positions and the list of
    recoverable warnings. A fresh context is created for every pass so that
    nothing leaks from one document (or one run) into the next.
    """

    def __init__(self) -> None:
        self._position = 0
        self._warnings: list[Diagnostic] = []

    # --- sequence -------------------------------------------------------------

    def next_position(self) -> int:
        """Return the next unused match position."""
        position = self._position
        self._position += 1
        return position

    # --- warnings -------------------------------------------------------------

    def warn(self, kind: WarningKind, message: str, selector: str | None = None) -> None:
        self._warnings.append(Diagnostic(kind=kind, message=message, selector=selector))

    @property
    def warnings(self) -> list[Diagnostic]:
        """Return a copy of the warnings recorded so far."""
        return list(self._warnings)

    def __repr__(self) -> str:
        return f"InlineContext(position={self._position}, warnings={len(self._warnings)})"
