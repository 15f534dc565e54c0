"""
================================================================================
Selector Expressions
================================================================================

Tagged selector variant used by the locator registry.

Two dialects are supported and rendered by a single function
(`Selector.query`), so callers never branch on the dialect:

    SHORT       CSS-like selectors, including Playwright pseudo-classes
                such as :has-text() and :text-is()
    STRUCTURAL  XPath expressions

Dynamic selectors are templates with a `{value}` placeholder. The run-time
value is embedded as a quoted literal valid for the template's dialect.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SelectorKind(str, Enum):
    """Selector dialect. The value is the Playwright selector engine name."""
    SHORT = "css"
    STRUCTURAL = "xpath"

    @classmethod
    def parse(cls, name: str) -> "SelectorKind":
        """
        Parse a dialect name from configuration.

        Accepts the member name ("short"/"structural") or the engine
        name ("css"/"xpath"), case-insensitive.
        """
        normalized = (name or "").strip().lower()
        for kind in cls:
            if normalized in (kind.name.lower(), kind.value):
                return kind
        raise ValueError(
            f"Unknown selector dialect: {name!r}. "
            f"Expected one of: short, structural"
        )


@dataclass(frozen=True)
class Selector:
    """A single selector expression tagged with its dialect."""
    kind: SelectorKind
    value: str

    @property
    def query(self) -> str:
        """Engine-prefixed selector accepted by `page.locator()`."""
        return f"{self.kind.value}={self.value}"

    def __str__(self) -> str:
        return self.query


def quote_css_literal(value: str) -> str:
    """Quote a value as a CSS string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def quote_xpath_literal(value: str) -> str:
    """
    Quote a value as an XPath 1.0 string literal.

    XPath has no escape sequences, so a value holding both quote
    characters is assembled with concat().
    """
    if '"' not in value:
        return f'"{value}"'
    if "'" not in value:
        return f"'{value}'"
    parts = value.split('"')
    pieces = []
    for i, part in enumerate(parts):
        if part:
            pieces.append(f'"{part}"')
        if i < len(parts) - 1:
            pieces.append("'\"'")
    return f"concat({', '.join(pieces)})"


def quote_literal(kind: SelectorKind, value: str) -> str:
    """Quote a run-time value for the given dialect."""
    if kind is SelectorKind.STRUCTURAL:
        return quote_xpath_literal(value)
    return quote_css_literal(value)


def render_template(kind: SelectorKind, template: str, value: str) -> Selector:
    """
    Build a selector from a dynamic template.

    Args:
        kind: Dialect of the template
        template: Selector text containing a `{value}` placeholder
        value: Run-time parameter (e.g. a product name)

    Returns:
        Selector with the parameter embedded as a quoted literal
    """
    return Selector(kind, template.replace("{value}", quote_literal(kind, value)))


__all__ = [
    "SelectorKind",
    "Selector",
    "quote_css_literal",
    "quote_xpath_literal",
    "quote_literal",
    "render_template",
]
