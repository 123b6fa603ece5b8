"""Turn permalink captures into entry lookup conditions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from datetime import datetime

import pendulum

from backend.exceptions import CategoryNotFoundError, InvalidCaptureError

TIME_ORDER = ("year", "month", "day", "hour", "minute", "second")
_LOWER_DEFAULTS = (0, 1, 1, 0, 0, 0)

# Placeholder name -> classified field. Synonyms share a target; the later
# capture wins.
FIELD_RULES: dict[str, str] = {
    "year": "year",
    "month": "month",
    "monthnum": "month",
    "day": "day",
    "hour": "hour",
    "minute": "minute",
    "second": "second",
    "post_id": "id",
    "id": "id",
    "postname": "slug",
    "slug": "slug",
    "category": "category",
}

CategoryLookup = Callable[[str], Awaitable[int | None]]

# Largest value a numeric capture may take; the entry store keys are signed
# 64-bit integers.
MAX_NUMERIC = 2**63 - 1
_MAX_DIGITS = len(str(MAX_NUMERIC))


@dataclass(frozen=True)
class TimeRange:
    """Half-open creation-time range ``[start, end)``."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class ConditionSpec:
    """Query intent derived from a permalink."""

    entry_id: int | None = None
    slug: str | None = None
    category_id: int | None = None
    time_range: TimeRange | None = None

    @property
    def has_identity(self) -> bool:
        """True when the entry can be looked up by id or slug alone."""
        return self.entry_id is not None or self.slug is not None

    @property
    def is_empty(self) -> bool:
        return not self.has_identity and self.category_id is None and self.time_range is None


@dataclass
class ClassifiedCaptures:
    time_parts: dict[str, int]
    entry_id: int | None = None
    slug: str | None = None
    category: str | None = None


def parse_numeric(field: str, value: str) -> int:
    """Parse an ASCII digit string that fits a signed 64-bit integer."""
    if not (value.isascii() and value.isdigit()):
        raise InvalidCaptureError(field, value, "expected digits")
    digits = value.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS or int(digits) > MAX_NUMERIC:
        raise InvalidCaptureError(field, value, "out of range")
    return int(digits)


def classify_captures(captures: Mapping[str, str]) -> ClassifiedCaptures:
    """Apply the placeholder rule table; unknown names are ignored.

    Raises InvalidCaptureError when a numeric field is not a number
    or does not fit in the entry store.
    """
    classified = ClassifiedCaptures(time_parts={})
    for name, value in captures.items():
        target = FIELD_RULES.get(name)
        if target is None:
            continue
        if target in TIME_ORDER:
            classified.time_parts[target] = parse_numeric(name, value)
        elif target == "id":
            classified.entry_id = parse_numeric(name, value)
        elif target == "slug":
            classified.slug = value
        else:
            classified.category = value
    return classified


def build_time_range(time_parts: Mapping[str, int], tz: str = "UTC") -> TimeRange:
    """Build the creation-time range for the captured date components.

    Components are taken in ``TIME_ORDER`` up to the first missing one;
    everything from there on falls back to its default, so ``year`` and
    ``month`` without ``day`` select the first day of that month.  The
    upper bound is the same date at 23:59:59.
    """
    args: list[int] = []
    for key in TIME_ORDER:
        if key not in time_parts:
            break
        args.append(time_parts[key])
    args.extend(_LOWER_DEFAULTS[len(args) :])

    try:
        start = pendulum.datetime(*args, tz=tz)
        end = start.set(hour=23, minute=59, second=59)
    except (ValueError, OverflowError) as exc:
        stamp = "-".join(str(a) for a in args)
        raise InvalidCaptureError("date", stamp, str(exc)) from exc
    return TimeRange(start=start, end=end)


async def resolve(
    captures: Mapping[str, str],
    category_lookup: CategoryLookup,
    *,
    tz: str = "UTC",
) -> ConditionSpec:
    """Resolve captures into a ConditionSpec.

    Raises InvalidCaptureError or CategoryNotFoundError; callers that must
    not fail convert these into a not-found result.
    """
    classified = classify_captures(captures)

    category_id: int | None = None
    if classified.category is not None:
        category_id = await category_lookup(classified.category)
        if category_id is None:
            raise CategoryNotFoundError(classified.category)

    time_range = build_time_range(classified.time_parts, tz) if classified.time_parts else None

    return ConditionSpec(
        entry_id=classified.entry_id,
        slug=classified.slug,
        category_id=category_id,
        time_range=time_range,
    )
