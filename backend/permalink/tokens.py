"""Permalink format compiler and renderer.

A permalink format such as ``%year%/%monthnum%/%postname%`` compiles into a
flat list of tokens.  Each ``%name%`` placeholder swallows the single
character that follows it in the format (its *terminator*), because that is
the character the path matcher waits for to end the capture.  Everything
else becomes one ``Literal`` token per character.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

# A placeholder is "%", one or more non-"%" characters, "%", and an optional
# non-"%" terminator; anything else is a single literal character.
_TOKEN_RE = re.compile(r"%(?P<name>[^%]+)%(?P<terminator>[^%]?)|(?P<literal>.)", re.DOTALL)


@dataclass(frozen=True)
class Literal:
    """A single literal character that must appear verbatim in the path."""

    text: str


@dataclass(frozen=True)
class Placeholder:
    """A named slot, optionally ended by a terminator character."""

    name: str
    terminator: str | None = None

    @property
    def source(self) -> str:
        """The placeholder as written in the format, without its terminator."""
        return f"%{self.name}%"


Token = Literal | Placeholder
PermalinkFormat = tuple[Token, ...]


def compile_format(fmt: str) -> PermalinkFormat:
    """Compile a permalink format string into tokens.

    Never fails: unknown placeholder names are accepted and a format with no
    placeholders compiles into a sequence of literals.
    """
    tokens: list[Token] = []
    for m in _TOKEN_RE.finditer(fmt):
        name = m.group("name")
        if name is None:
            tokens.append(Literal(m.group("literal")))
        else:
            tokens.append(Placeholder(name, m.group("terminator") or None))
    return tuple(tokens)


def placeholder_names(tokens: PermalinkFormat) -> list[str]:
    """Names of the placeholders in format order (duplicates kept once)."""
    names: list[str] = []
    for token in tokens:
        if isinstance(token, Placeholder) and token.name not in names:
            names.append(token.name)
    return names


def render(tokens: PermalinkFormat, fields: Mapping[str, str]) -> str:
    """Render tokens back into a path, substituting ``fields`` by name.

    Placeholders without a value are emitted verbatim (``%name%``), matching
    what plain ``%name%`` text substitution would leave behind.
    """
    parts: list[str] = []
    for token in tokens:
        if isinstance(token, Literal):
            parts.append(token.text)
            continue
        value = fields.get(token.name)
        parts.append(token.source if value is None else value)
        if token.terminator is not None:
            parts.append(token.terminator)
    return "".join(parts)


def render_format(fmt: str, fields: Mapping[str, str]) -> str:
    """Compile ``fmt`` and render it with ``fields``."""
    return render(compile_format(fmt), fields)
