"""Canonical widths for date components and path correction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from backend.exceptions import NoMatchError, PermalinkErrorKind
from backend.permalink.matcher import match
from backend.permalink.tokens import compile_format, render

if TYPE_CHECKING:
    from collections.abc import Mapping

    from backend.permalink.matcher import CaptureSet

logger = logging.getLogger(__name__)

CANONICAL_WIDTHS: dict[str, int] = {
    "year": 4,
    "month": 2,
    "monthnum": 2,
    "day": 2,
    "hour": 2,
    "minute": 2,
    "second": 2,
}


class FixStatus(StrEnum):
    CHANGED = "changed"
    UNCHANGED = "unchanged"
    FAILED = "failed"


@dataclass(frozen=True)
class CanonicalFix:
    """Outcome of a canonicalization attempt.

    ``path`` is set only when ``status`` is CHANGED; ``error`` only when it
    is FAILED.
    """

    status: FixStatus
    path: str | None = None
    error: Exception | None = None

    @property
    def changed(self) -> bool:
        return self.status is FixStatus.CHANGED

    @property
    def error_kind(self) -> PermalinkErrorKind | None:
        return getattr(self.error, "kind", None)


def pad_captures(captures: Mapping[str, str]) -> tuple[CaptureSet, bool]:
    """Zero-pad short date components; return (captures, changed).

    Values already at or above their canonical width are left alone.
    """
    padded = dict(captures)
    changed = False
    for key, width in CANONICAL_WIDTHS.items():
        value = padded.get(key)
        if value is not None and len(value) < width:
            padded[key] = value.rjust(width, "0")
            changed = True
    return padded, changed


def canonicalize(fmt: str, captures: Mapping[str, str]) -> CanonicalFix:
    """Re-render ``fmt`` with padded date components if any were short."""
    try:
        padded, changed = pad_captures(captures)
        if not changed:
            return CanonicalFix(FixStatus.UNCHANGED)
        return CanonicalFix(FixStatus.CHANGED, path=render(compile_format(fmt), padded))
    except Exception as exc:
        logger.warning("Permalink canonicalization failed for format %r: %s", fmt, exc)
        return CanonicalFix(FixStatus.FAILED, error=exc)


def fix_path(fmt: str, path: str) -> CanonicalFix:
    """Match ``path`` against ``fmt`` and propose its canonical form."""
    captures = match(compile_format(fmt), path)
    if captures is None:
        return CanonicalFix(FixStatus.FAILED, error=NoMatchError(path))
    return canonicalize(fmt, captures)
