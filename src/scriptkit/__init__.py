"""Helpers for editor scripting: typed 1-indexed sequences, a regex convenience layer and runtime type checks."""
from scriptkit.core import (
    Host,
    HostMatch,
    IndexOutOfRangeError,
    PatternError,
    RegexHost,
    Seq,
    Tag,
    TrieSeq,
    TypeMismatchError,
    Vector,
    assert_type,
    assert_type_name,
    assertf,
    classify,
    deep_equal,
    enable_pattern_cache,
    errorf,
    get_host,
    is_type,
    set_host,
    set_regex_backend,
)
from scriptkit.pattern import Regex, find, gmatch, gsplit, gsub, match, split

__version__ = '0.1.0'

__all__ = [
    'IndexOutOfRangeError', 'PatternError', 'TypeMismatchError',
    'Host', 'HostMatch', 'RegexHost', 'enable_pattern_cache', 'get_host', 'set_host', 'set_regex_backend',
    'Tag', 'assert_type', 'assert_type_name', 'assertf', 'classify', 'deep_equal', 'errorf', 'is_type',
    'Seq', 'TrieSeq', 'Vector',
    'Regex', 'find', 'match', 'gmatch', 'gsub', 'gsplit', 'split',
]
