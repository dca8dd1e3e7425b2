"""Duration formatting and small text helpers."""

from __future__ import annotations

from datetime import timedelta

_MILLI = timedelta(milliseconds=1)

# (milliseconds, singular, plural, short), largest first
_UNITS = (
    (365 * 24 * 60 * 60 * 1000, "year", "years", "y"),
    (7 * 24 * 60 * 60 * 1000, "week", "weeks", "w"),
    (24 * 60 * 60 * 1000, "day", "days", "d"),
    (60 * 60 * 1000, "hour", "hours", "h"),
    (60 * 1000, "minute", "minutes", "m"),
    (1000, "second", "seconds", "s"),
    (1, "milli", "millis", "ms"),
)


def human_duration(elapsed: timedelta, alternate: bool = False) -> str:
    """Render *elapsed* in its largest whole unit: '2 minutes', or '2m' when *alternate*."""
    millis = elapsed // _MILLI
    for size, singular, plural, short in _UNITS:
        count = millis // size
        if count >= 1:
            if alternate:
                return f"{count}{short}"
            return f"{count} {singular if count == 1 else plural}"
    return "0s" if alternate else "0 seconds"


def decode_output(data: bytes) -> str:
    """Decode captured process output, replacing invalid bytes."""
    return data.decode("utf-8", errors="replace")
