"""Single-pass path matcher for compiled permalink formats."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from backend.permalink.tokens import Literal, Placeholder, compile_format

if TYPE_CHECKING:
    from backend.permalink.tokens import PermalinkFormat

logger = logging.getLogger(__name__)

CaptureSet = dict[str, str]


class MatchState(StrEnum):
    SCANNING = "scanning"
    CAPTURING = "capturing"
    DONE = "done"
    FAILED = "failed"


class PathMatcher:
    """Consume a path against a token sequence, one character at a time.

    The input cursor only moves forward.  A placeholder captures greedily
    until its terminator or the end of input, so a path that runs out early
    still matches; only a literal mismatch fails the whole match.
    """

    def __init__(self, tokens: PermalinkFormat) -> None:
        self.tokens = tokens
        self.state = MatchState.SCANNING

    def match(self, path: str) -> CaptureSet | None:
        """Return the captures, or None when the path does not match."""
        chars = iter(path)
        tokens = iter(self.tokens)
        result: CaptureSet = {}
        captured: list[str] = []
        token = next(tokens, None)
        state = MatchState.SCANNING

        while state is MatchState.SCANNING or state is MatchState.CAPTURING:
            if state is MatchState.CAPTURING:
                assert isinstance(token, Placeholder)
                c = next(chars, None)
                if c is not None and c != token.terminator:
                    captured.append(c)
                    continue
                # Empty captures leave no key behind.
                if captured:
                    result[token.name] = result.get(token.name, "") + "".join(captured)
                token = next(tokens, None)
                state = MatchState.SCANNING
            elif token is None:
                state = MatchState.DONE
            elif isinstance(token, Literal):
                if next(chars, None) != token.text:
                    state = MatchState.FAILED
                else:
                    token = next(tokens, None)
            else:
                captured = []
                state = MatchState.CAPTURING

        self.state = state
        if state is MatchState.FAILED:
            logger.debug("Path %r does not match permalink format", path)
            return None
        return result


def match(tokens: PermalinkFormat, path: str) -> CaptureSet | None:
    """Match ``path`` against compiled ``tokens``; None means no match."""
    return PathMatcher(tokens).match(path)


def parse_path(fmt: str, path: str) -> CaptureSet | None:
    """Compile ``fmt`` and match ``path`` against it."""
    return match(compile_format(fmt), path)
