"""Glob patterns for include / exclude filters.

Dialect:

- ``*`` matches any run of characters, ``/`` included
- ``?`` matches one character, ``/`` included
- ``[abc]``, ``[a-z]`` and ``[!abc]`` are character classes
- ``**`` must be a whole path component: ``**/`` matches zero or more
  leading directories, a trailing ``/**`` matches everything below a
  directory and a lone ``**`` matches anything

Matching is case-sensitive and anchored at both ends.
"""

from __future__ import annotations

import re


class PatternError(ValueError):
    """A glob pattern could not be compiled."""


def _class_end(source: str, start: int) -> int:
    """Index of the ``]`` closing the class opened at *start*."""
    i = start + 1
    if i < len(source) and source[i] == "!":
        i += 1
    if i < len(source) and source[i] == "]":
        i += 1
    end = source.find("]", i)
    if end == -1:
        raise PatternError(f"invalid pattern {source!r}: unterminated character class")
    return end


def _translate_class(body: str) -> str:
    negate = body.startswith("!")
    if negate:
        body = body[1:]
    escaped = "".join("\\" + c if c in "\\[&~|^" else c for c in body)
    return "[" + ("^" if negate else "") + escaped + "]"


def _translate(source: str) -> str:
    parts: list[str] = []
    i, n = 0, len(source)
    while i < n:
        c = source[i]
        if c == "*":
            j = i
            while j < n and source[j] == "*":
                j += 1
            stars = j - i
            if stars > 2:
                raise PatternError(
                    f"invalid pattern {source!r}: wildcards are either `*` or `**`"
                )
            if stars == 1:
                parts.append(".*")
            else:
                if (i > 0 and source[i - 1] != "/") or (j < n and source[j] != "/"):
                    raise PatternError(
                        f"invalid pattern {source!r}: `**` must form a single path component"
                    )
                if j < n:
                    # "**/" also matches no directory at all
                    parts.append("(?:.*/)?")
                    j += 1
                else:
                    parts.append(".*")
            i = j
        elif c == "?":
            parts.append(".")
            i += 1
        elif c == "[":
            end = _class_end(source, i)
            parts.append(_translate_class(source[i + 1 : end]))
            i = end + 1
        else:
            parts.append(re.escape(c))
            i += 1
    return "(?s:" + "".join(parts) + r")\Z"


class Pattern:
    """A compiled glob pattern."""

    __slots__ = ("source", "_regex")

    def __init__(self, source: str):
        self.source = source
        try:
            self._regex = re.compile(_translate(source))
        except re.error as e:
            raise PatternError(f"invalid pattern {source!r}: {e}") from e

    def matches(self, path: str) -> bool:
        return self._regex.match(path) is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Pattern):
            return self.source == other.source
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.source)

    def __repr__(self) -> str:
        return f"Pattern({self.source!r})"

    def __str__(self) -> str:
        return self.source


def compile_pattern(source: str | Pattern) -> Pattern:
    """Compile *source*, raising PatternError if it is not a valid glob."""
    if isinstance(source, Pattern):
        return source
    return Pattern(source)


def matches(pattern: str | Pattern, path: str) -> bool:
    return compile_pattern(pattern).matches(path)
