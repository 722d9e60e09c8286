"""The host capability: value inspection and the two pattern primitives everything else is built on.

`Regex`, the formatted assertions and `Seq.__repr__` never touch a regex engine or a pretty-printer directly,
they go through the current `Host`. Swap it with `set_host` (e.g. a fake in tests, or an editor bridge).

==== Policy ====
- Host offsets are 0-based with an exclusive end. Translating to 1-based inclusive positions is the caller's job.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Literal, NamedTuple

import regex

from scriptkit.utils.logging import get_logger

logger = get_logger('host')


class HostMatch(NamedTuple):
    start: int  # 0-based
    end: int  # exclusive
    text: str


class Host(ABC):
    @abstractmethod
    def inspect(self, value: Any) -> str:
        """Human-readable rendering of `value` for diagnostics."""

    @abstractmethod
    def match_at(self, subject: str, pattern: str, offset: int) -> HostMatch | None:
        """First match of `pattern` in `subject` starting at or after the 0-based `offset`."""

    @abstractmethod
    def substitute(self, subject: str, pattern: str, repl: str, flags: str = '') -> str:
        """Replace the first match (every match if `flags` contains 'g') of `pattern` with `repl`."""


# ================================ Compiled Pattern Cache ================================
__pattern_cache_size__: int = 0
__pattern_cache__: dict[tuple[str, str], Any] = {  # FIFO cache
    # keyed by (backend name, pattern string), the value is the compiled pattern of that backend
}
def _compile_pattern(backend: Any, pattern: str) -> Any:
    """Used to compile patterns, possibly through the global cache (see `enable_pattern_cache`)."""
    pass
def enable_pattern_cache(b: bool, cache_size: int = 512):
    """Enable the global compiled-pattern cache. Disabling it also drops every cached pattern."""
    if b:
        if cache_size < 1:
            raise ValueError(f'cache_size must be positive, got {cache_size}')
        global __pattern_cache_size__
        __pattern_cache_size__ = cache_size
        def compile_pattern(backend: Any, pattern: str) -> Any:
            key = (backend.__name__, pattern)
            try:
                return __pattern_cache__[key]
            except KeyError:
                while len(__pattern_cache__) >= __pattern_cache_size__:
                    del __pattern_cache__[next(iter(__pattern_cache__))]  # dicts keep insertion order, so this is FIFO
                __pattern_cache__[key] = (p := backend.compile(pattern))
                return p
    else:
        __pattern_cache__.clear()
        def compile_pattern(backend: Any, pattern: str) -> Any:
            return backend.compile(pattern)
    logger.debug('pattern cache %s (size=%s)', 'enabled' if b else 'disabled', cache_size)
    globals()['_compile_pattern'] = compile_pattern
enable_pattern_cache(True)


# ================================ Regex Backend ================================
_BACKENDS = {'regex': regex, 're': re}
_regex_backend: Literal['re', 'regex'] = 'regex'  # the default (can be changed with `set_regex_backend` below)
def set_regex_backend(m: Literal['re', 'regex']):
    """Set the regex backend of `RegexHost` to either the builtin `re` or the more versatile `regex` (default)."""
    if m not in _BACKENDS:
        raise ValueError(f"Unknown regex backend `{m}`, expected 're' or 'regex'")
    global _regex_backend
    _regex_backend = m
    logger.debug('regex backend set to %s', m)


class RegexHost(Host):
    """Default host: Python regex syntax, `repr` inspection.

    If `backend` is omitted, the module-wide backend (see `set_regex_backend`) is used at call time.
    """
    __slots__ = ('backend',)

    def __init__(self, backend: Literal['re', 'regex'] | None = None):
        if backend is not None and backend not in _BACKENDS:
            raise ValueError(f"Unknown regex backend `{backend}`, expected 're' or 'regex'")
        self.backend: Literal['re', 'regex'] | None = backend

    def compile(self, pattern: str) -> Any:
        return _compile_pattern(_BACKENDS[self.backend or _regex_backend], pattern)

    def inspect(self, value: Any) -> str:
        return repr(value)

    def match_at(self, subject: str, pattern: str, offset: int) -> HostMatch | None:
        if offset > len(subject):  # the engines clamp pos, which would re-match the end forever
            return None
        m = self.compile(pattern).search(subject, max(offset, 0))
        if m is None:
            return None
        return HostMatch(m.start(), m.end(), m.group(0))

    def substitute(self, subject: str, pattern: str, repl: str, flags: str = '') -> str:
        return self.compile(pattern).sub(repl, subject, count=0 if 'g' in flags else 1)


# ================================ Current Host ================================
_host: Host = RegexHost()
def get_host() -> Host:
    return _host


def set_host(host: Host | None) -> Host:
    """Install `host` (None restores the default `RegexHost`). Returns the previous host."""
    global _host
    previous = _host
    _host = RegexHost() if host is None else host
    logger.debug('host set to %s', type(_host).__name__)
    return previous
