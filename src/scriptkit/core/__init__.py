from scriptkit.core.errors import IndexOutOfRangeError, PatternError, TypeMismatchError
from scriptkit.core.host import Host, HostMatch, RegexHost, enable_pattern_cache, get_host, set_host, set_regex_backend
from scriptkit.core.typecheck import Tag, assert_type, assert_type_name, assertf, classify, deep_equal, errorf, is_type
from scriptkit.core.seq import Seq
from scriptkit.core.trie_seq import TrieSeq
from scriptkit.core.vector import Vector

__all__ = [
    'IndexOutOfRangeError', 'PatternError', 'TypeMismatchError',
    'Host', 'HostMatch', 'RegexHost', 'enable_pattern_cache', 'get_host', 'set_host', 'set_regex_backend',
    'Tag', 'assert_type', 'assert_type_name', 'assertf', 'classify', 'deep_equal', 'errorf', 'is_type',
    'Seq', 'TrieSeq', 'Vector',
]
