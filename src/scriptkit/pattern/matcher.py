"""Regex convenience layer on top of the host pattern primitives.

Positions are 1-based and inclusive on this side (`find` returns `(start, end, matched)` like a slice `s[start-1:end]`),
while the host works with 0-based exclusive offsets. Nothing here matches anything by itself.
"""
from __future__ import annotations

from typing import Iterator

from scriptkit.core.errors import PatternError
from scriptkit.core.host import Host, get_host
from scriptkit.core.typecheck import Tag, assert_type, assertf


def _normalize_init(init: int | None) -> int:
    """Unlike str.find(), a missing, zero or negative init means 1."""
    assert_type(init, Tag.INTEGER, True)
    if init is None or init < 1:
        return 1
    return int(init)


def find(s: str, pattern: str, init: int | None = None, host: Host | None = None) -> tuple[int, int, str] | None:
    """Finds the first match at or after `init`.
    Returns the 1-based start, the inclusive end and the matched string, or None.
    An empty match at position p yields (p, p - 1, '').
    """
    assert_type(s, Tag.STRING)
    assert_type(pattern, Tag.STRING)
    offset = _normalize_init(init) - 1
    m = (host or get_host()).match_at(s, pattern, offset)
    if m is None:
        return None
    return m.start + 1, m.end, m.text


def match(s: str, pattern: str, init: int | None = None, host: Host | None = None) -> str | None:
    """Returns the matched string, or None if nothing (or only the empty string) matched."""
    found = find(s, pattern, init, host)
    if found is None or found[2] == '':
        return None
    return found[2]


def gmatch(s: str, pattern: str, host: Host | None = None) -> Iterator[str]:
    """Yields every successive match. Zero-width matches advance by one character so the scan always terminates."""
    assert_type(s, Tag.STRING)
    assert_type(pattern, Tag.STRING)
    return _gmatch(s, pattern, host)


def _gmatch(s: str, pattern: str, host: Host | None) -> Iterator[str]:
    pos = 1
    while (found := find(s, pattern, pos, host)) is not None:
        start, end, matched = found
        yield matched
        pos = max(end, start) + 1


def gsub(s: str, pattern: str, repl: str, flags: str | None = None, host: Host | None = None) -> str:
    """Replaces the first match, or every match if `flags` contains 'g'.
    Only a string is accepted as `repl`, and it is expanded by the host (e.g. `\\1` group references).
    """
    assert_type(s, Tag.STRING)
    assert_type(pattern, Tag.STRING)
    assert_type(repl, Tag.STRING)
    assert_type(flags, Tag.STRING, True)
    return (host or get_host()).substitute(s, pattern, repl, flags or '')


def gsplit(s: str, pattern: str, host: Host | None = None) -> Iterator[str]:
    """Yields the pieces of `s` between matches of `pattern`, then the remainder.

    - An empty subject with an empty pattern yields nothing.
    - An empty pattern splits into single characters.
    - A match that would not advance raises PatternError.
    """
    assert_type(s, Tag.STRING)
    assert_type(pattern, Tag.STRING)
    return _gsplit(s, pattern, host)


def _gsplit(s: str, pattern: str, host: Host | None) -> Iterator[str]:
    if pattern == '':
        yield from s
        return

    init = 1
    while (found := find(s, pattern, init, host)) is not None:
        start, end, _ = found
        assertf(end + 1 > init, 'Infinite loop detected', error=PatternError)
        yield s[init - 1:start - 1]
        init = end + 1
    yield s[init - 1:]


def split(s: str, pattern: str, host: Host | None = None) -> list[str]:
    return list(gsplit(s, pattern, host))


# ================================ Pattern Handle ================================
class Regex:
    """An immutable pattern handle. Every method is the module function of the same name with this pattern."""
    __slots__ = ('_pattern', '_host')

    def __init__(self, pattern: str, host: Host | None = None):
        assert_type(pattern, Tag.STRING)
        object.__setattr__(self, '_pattern', pattern)
        object.__setattr__(self, '_host', host)

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    @property
    def pattern(self) -> str:
        return self._pattern

    def __repr__(self) -> str:
        return f'Regex({self._pattern!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Regex):
            return NotImplemented
        return self._pattern == other._pattern and self._host is other._host

    def __hash__(self) -> int:
        return hash(self._pattern)

    def find(self, s: str, init: int | None = None) -> tuple[int, int, str] | None:
        return find(s, self._pattern, init, self._host)

    def match(self, s: str, init: int | None = None) -> str | None:
        return match(s, self._pattern, init, self._host)

    def gmatch(self, s: str) -> Iterator[str]:
        return gmatch(s, self._pattern, self._host)

    def gsub(self, s: str, repl: str, flags: str | None = None) -> str:
        return gsub(s, self._pattern, repl, flags, self._host)

    def gsplit(self, s: str) -> Iterator[str]:
        return gsplit(s, self._pattern, self._host)

    def split(self, s: str) -> list[str]:
        return split(s, self._pattern, self._host)
