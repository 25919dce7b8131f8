"""Stylesheet model: StyleRule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StyleRule:
    """A single selector paired with its declaration block.

    At-rules keep their raw ``@keyword prelude`` text as the selector and an
    empty declaration block.
    """

    selector: str
    declarations: dict[str, str]  # lower-cased property -> raw value

    @property
    def is_at_rule(self) -> bool:
        return self.selector.startswith("@")


@dataclass(frozen=True)
class Stylesheet:
    """The rules of a stylesheet in source order, plus syntax errors met."""

    rules: list[StyleRule]
    errors: list[str] = field(default_factory=list)

    @property
    def selectors(self) -> list[str]:
        return [rule.selector for rule in self.rules]
