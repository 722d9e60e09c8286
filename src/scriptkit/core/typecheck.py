"""Runtime type tags and assertions shared by every scriptkit module.

`classify` narrows Python values into a small closed set of tags (it tells an
integer-valued float from a fractional one, and an array-shaped container from
a plain table). `assert_type` checks a value against a tag, including a handful
of refined integer tags that `classify` itself never returns.
"""
from __future__ import annotations

import inspect
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, NoReturn

from scriptkit.core.errors import TypeMismatchError
from scriptkit.core.host import get_host


class Tag(str, Enum):
    NIL = 'nil'
    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    FLOAT = 'float'
    STRING = 'string'
    FUNCTION = 'function'
    USERDATA = 'userdata'  # opaque handle
    THREAD = 'thread'  # generator / coroutine
    TABLE = 'table'
    ARRAY = 'array'

    # ==== refined tags (only valid as an expectation) ====
    NUMBER = 'number'
    NATURAL = 'natural'
    ZERO = 'zero'
    NON_NEGATIVE_INTEGER = 'non_negative_integer'
    NEGATIVE_INTEGER = 'negative_integer'

    def __str__(self) -> str:
        return self.value


NUMERIC_TAGS: frozenset[Tag] = frozenset({
    Tag.NUMBER, Tag.INTEGER, Tag.FLOAT,
    Tag.NATURAL, Tag.ZERO, Tag.NON_NEGATIVE_INTEGER, Tag.NEGATIVE_INTEGER,
})


# ================================ Formatted Assertions ================================
def _format(msg: str, args: tuple) -> str:
    if not args:
        return msg
    inspector = get_host().inspect
    return msg % tuple(inspector(a) for a in args)


def assertf(v: Any, msg: str, *args: Any, error: type[Exception] = AssertionError) -> None:
    """Raise `error` with `msg % args` (each arg rendered by the host inspector) if `v` is falsy."""
    if not v:
        raise error(_format(msg, args))


def errorf(msg: str, *args: Any, error: type[Exception] = AssertionError) -> NoReturn:
    raise error(_format(msg, args))


def assert_type_name(tn: Tag | str) -> Tag:
    """Check that `tn` names a known tag and return it as a `Tag`."""
    if isinstance(tn, Tag):
        return tn
    try:
        return Tag(tn)
    except ValueError:
        errorf('Invalid type name: %s', tn, error=ValueError)


# ================================ Classification ================================
def _is_array_mapping(obj: Mapping) -> bool:
    """An array-shaped mapping is non-empty and keyed by exactly 1..n."""
    n = len(obj)
    if n == 0:
        return False
    for k in obj:
        if isinstance(k, bool) or not isinstance(k, int) or not 1 <= k <= n:
            return False
    return True  # n distinct keys all inside 1..n means no gaps


def classify(obj: Any) -> Tag:
    """Similar to the built-in type(), but returns one of the base tags.

    - `integer` / `float` are decided by the value, so `3.0` is an integer.
    - `array` is a non-empty list/tuple, or a mapping keyed 1..n. Empty containers are `table`.
    - `number` and the refined integer tags are never returned.
    """
    if obj is None:
        return Tag.NIL
    if isinstance(obj, bool):
        return Tag.BOOLEAN
    if isinstance(obj, int):
        return Tag.INTEGER
    if isinstance(obj, float):
        return Tag.INTEGER if math.isfinite(obj) and obj.is_integer() else Tag.FLOAT
    if isinstance(obj, str):
        return Tag.STRING
    if isinstance(obj, (list, tuple)):
        return Tag.ARRAY if obj else Tag.TABLE
    if isinstance(obj, Mapping):
        return Tag.ARRAY if _is_array_mapping(obj) else Tag.TABLE
    if inspect.isgenerator(obj) or inspect.iscoroutine(obj) or inspect.isasyncgen(obj):
        return Tag.THREAD
    if callable(obj):
        return Tag.FUNCTION
    return Tag.USERDATA


def _refine_integer(obj: int | float, expect: Tag) -> Tag:
    if expect in (Tag.NATURAL, Tag.ZERO):
        if obj > 0:
            return Tag.NATURAL
        return Tag.ZERO if obj == 0 else Tag.NEGATIVE_INTEGER
    if expect in (Tag.NON_NEGATIVE_INTEGER, Tag.NEGATIVE_INTEGER):
        return Tag.NON_NEGATIVE_INTEGER if obj >= 0 else Tag.NEGATIVE_INTEGER
    if expect is Tag.FLOAT:  # integers are acceptable floats
        return Tag.FLOAT
    return Tag.INTEGER


def actual_type(obj: Any, expect: Tag) -> Tag:
    """The tag of `obj` as seen when checking it against `expect`."""
    if expect is Tag.NUMBER:
        if isinstance(obj, (int, float)) and not isinstance(obj, bool):
            return Tag.NUMBER
        return classify(obj)
    actual = classify(obj)
    if actual is Tag.INTEGER:
        return _refine_integer(obj, expect)
    return actual


def is_type(obj: Any, expect_type: Tag | str) -> bool:
    expect = assert_type_name(expect_type)
    return actual_type(obj, expect) is expect


def assert_type(obj: Any, expect_type: Tag | str | type, optional: bool = False) -> None:
    """Check that `obj` has tag (or class) `expect_type`.

    If `optional` is set, `None` is accepted for tag checks.
    Raises TypeMismatchError on mismatch and ValueError on an unknown tag name.
    """
    if isinstance(expect_type, type):  # class check
        assertf(isinstance(obj, expect_type), 'Wrong class, expect %s, but %s',
                expect_type, type(obj), error=TypeMismatchError)
        return

    expect = assert_type_name(expect_type)
    if optional and obj is None:
        return

    actual = actual_type(obj, expect)
    assertf(actual is expect, 'Wrong type of `%s`, expected %s, but %s',
            obj, expect.value, actual.value, error=TypeMismatchError)


# ================================ Structural Equality ================================
def deep_equal(a: Any, b: Any) -> bool:
    """Recursive structural comparison of nested lists/tuples/mappings."""
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(v, b[k]) for k, v in a.items())
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (list, tuple, Mapping)) or isinstance(b, (list, tuple, Mapping)):
        return False
    if isinstance(a, bool) != isinstance(b, bool):  # True is not 1 here
        return False
    return a == b
