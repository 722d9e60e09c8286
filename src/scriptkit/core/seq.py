"""Seq: a 1-indexed, bounds-checked dynamic array whose elements all share one type tag.

==== Policy ====
- Positions are 1-based and validated on every access. Python's 0-based `[]` protocol is not provided.
- Every check runs before any mutation, so a failed call leaves the Seq untouched.
- All reads and writes of the backing storage go through the storage primitives (`_raw`, `_put`, `_splice`) so that
other backends (see `trie_seq.TrieSeq`) only need to override those.
"""
from __future__ import annotations

from collections.abc import Mapping
from copy import copy, deepcopy
from functools import update_wrapper, wraps
from typing import Any, Callable, Generic, Iterator, Sequence, TypeVar

from scriptkit.core.errors import IndexOutOfRangeError, TypeMismatchError
from scriptkit.core.host import get_host
from scriptkit.core.typecheck import Tag, assert_type, assert_type_name, assertf, classify, deep_equal

T = TypeVar('T')
S = TypeVar('S')


# per-tag default values (factories, so containers are never shared between Seqs)
_ZERO_VALUES: dict[Tag, Callable[[], Any]] = {
    Tag.NIL: lambda: None,
    Tag.BOOLEAN: lambda: False,
    Tag.NUMBER: lambda: 0,
    Tag.INTEGER: lambda: 0,
    Tag.ZERO: lambda: 0,
    Tag.NON_NEGATIVE_INTEGER: lambda: 0,
    Tag.FLOAT: lambda: 0.0,
    Tag.STRING: lambda: '',
    Tag.TABLE: dict,
    Tag.ARRAY: list,
}


def _assert_index(length: int, i: Any) -> int:
    """Validates a 1-based position and returns it as an int."""
    assert_type(i, Tag.INTEGER)
    assertf(1 <= i <= length, 'Index (%s) out of bounds', i, error=IndexOutOfRangeError)
    return int(i)


def _assert_range(length: int, i: Any, j: Any) -> tuple[int, int]:
    i = _assert_index(length, i)
    j = i if j is None else _assert_index(length, j)
    assertf(i <= j, 'i (%s) must be less than or equal to j (%s)', i, j, error=IndexOutOfRangeError)
    return i, j


def _infer_tag(value: Any) -> Tag:
    """Tag of a Seq whose first item is `value`. Any int or float makes it a `number` Seq."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Tag.NUMBER
    return classify(value)


class _array_method:
    """A method that can also be called on the class with a plain array, e.g. `Seq.all([1, 2], pred)`.
    The array is coerced with `new` of the class it was looked up on.
    """

    def __init__(self, func: Callable):
        self.func = func
        update_wrapper(self, func)

    def __get__(self, instance: Any, owner: type) -> Callable:
        if instance is not None:
            return self.func.__get__(instance, owner)
        func = self.func

        @wraps(func)
        def coerced(s: Any, *args: Any, **kwargs: Any) -> Any:
            return func(owner.new(s), *args, **kwargs)
        return coerced


class Seq(Generic[T]):
    """A wrapped array whose elements are all of the same type tag."""
    __slots__ = ('_data', '_type')

    def __init__(self, arr: Seq[T] | Sequence[T] | Mapping[int, T], typename: Tag | str | None = None):
        if isinstance(arr, Seq):
            items: list[T] = list(arr)
            if typename is None:
                typename = arr._type
        else:
            if not (isinstance(arr, (list, tuple, Mapping)) and len(arr) == 0):  # an empty container is a `table`
                assert_type(arr, Tag.ARRAY)
            assertf(not (typename is None and len(arr) == 0), 'Ambiguous type', error=ValueError)
            if isinstance(arr, Mapping):
                items = [arr[k] for k in range(1, len(arr) + 1)]
            else:
                items = list(arr)

        tag = _infer_tag(items[0]) if typename is None else assert_type_name(typename)
        self._check_tag(tag)
        for v in items:
            assert_type(v, tag)

        self._type: Tag = tag
        self._from_list(items)

    # ================ Constructors ================
    @classmethod
    def new(cls, arr: Seq[T] | Sequence[T] | Mapping[int, T], typename: Tag | str | None = None) -> Seq[T]:
        """Generates a Seq from an array. An existing instance of `cls` is returned as is.
        If `typename` is omitted it is inferred from the first item (`number` for any int or float).
        """
        if isinstance(arr, cls):
            return arr
        return cls(arr, typename)

    @classmethod
    def filled(cls, typename: Tag | str, length: int, init: T | None = None) -> Seq[T]:
        """Generates a Seq from type, length, and initial value.
        If the initial value is omitted, it is set according to type (False, 0, 0.0, '', {} or []).

        Example:
        >>> Seq.filled('string', 4, 'hi')
        Seq<string>['hi', 'hi', 'hi', 'hi']#4
        """
        tag = assert_type_name(typename)
        cls._check_tag(tag)
        if init is None:
            factory = _ZERO_VALUES.get(tag)
            assertf(factory is not None, 'No default value for type %s, an initial value is required', tag.value,
                    error=ValueError)
            init = factory()
        else:
            assert_type(init, tag)
        assert_type(length, Tag.NON_NEGATIVE_INTEGER)

        # containers are copied per slot, otherwise every slot would be the same object
        if isinstance(init, (list, dict, set)):
            items = [copy(init) for _ in range(int(length))]
        else:
            items = [init] * int(length)
        return cls._wrap(items, tag)

    @classmethod
    def _wrap(cls, items: list, tag: Tag) -> Seq:
        """Builds an instance around already validated items."""
        nv = object.__new__(cls)
        nv._type = tag
        nv._from_list(items)
        return nv

    @classmethod
    def _check_tag(cls, tag: Tag) -> None:
        """Hook for subclasses that restrict the element type."""

    # ================ Storage Primitives ================ (0-based, exclusive stop)
    def _from_list(self, items: list) -> None:
        self._data: list = items

    def _raw(self) -> Sequence[T]:
        return self._data

    def _put(self, k: int, value: T) -> None:
        self._data[k] = value

    def _splice(self, start: int, stop: int, items: Sequence[T]) -> None:
        self._data[start:stop] = items

    # ================ Viewer Methods ================
    def unpack(self) -> list[T]:
        """Returns the items as a new list."""
        return list(self._raw())

    @property
    def tag(self) -> Tag:
        """The type tag of the items."""
        return self._type

    def __len__(self) -> int:
        return len(self._raw())

    def __iter__(self) -> Iterator[T]:
        return iter(self._raw())

    def __contains__(self, x: Any) -> bool:
        return any(deep_equal(v, x) for v in self._raw())

    def __repr__(self) -> str:
        inspector = get_host().inspect
        data = ', '.join(inspector(v) for v in self._raw())
        return f'{type(self).__name__}<{self._type.value}>[{data}]#{len(self)}'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        return len(self) == len(other) and deep_equal(self.unpack(), other.unpack())

    __hash__ = None  # mutable

    def __add__(self, other: Seq[T]) -> Seq[T]:
        if not isinstance(other, Seq):
            return NotImplemented
        assertf(self._type == other._type, 'Attempted to combine different types of Seq', error=TypeMismatchError)
        return self._wrap(self.unpack() + other.unpack(), self._type)

    def get(self, pos: int) -> T:
        """Returns the item at position `pos`."""
        return self._raw()[_assert_index(len(self), pos) - 1]

    @_array_method
    def slice(self, i: int, j: int | None = None) -> Seq[T]:
        """New Seq of the items from i-th to j-th (including both ends). `j` defaults to `i`."""
        i, j = _assert_range(len(self), i, j)
        return self._wrap(list(self._raw()[i - 1:j]), self._type)

    def copy(self) -> Seq[T]:
        return self._wrap(self.unpack(), self._type)

    def __copy__(self) -> Seq[T]:
        return self.copy()

    def __deepcopy__(self, memo) -> Seq[T]:
        return self._wrap(deepcopy(self.unpack(), memo), self._type)

    # ================ Modifiers ================ (all *destructive*)
    def set(self, pos: int, value: T) -> None:
        """Sets the item at position `pos`. The last position cannot be set, growth goes through `add`."""
        k = _assert_index(len(self), pos)
        assertf(k != len(self), "To append item, use 'add' method", error=IndexOutOfRangeError)
        assert_type(value, self._type)
        self._put(k - 1, value)

    def add(self, x: T, pos: int | None = None) -> None:
        """Adds `x` before position `pos`, or at the end if `pos` is omitted."""
        assert_type(x, self._type)
        k = len(self) + 1 if pos is None else _assert_index(len(self), pos)
        self._splice(k - 1, k - 1, (x,))

    def insert(self, src: Seq[T] | Sequence[T], pos: int | None = None) -> None:
        """Inserts the items of `src` before position `pos`, or at the end if `pos` is omitted."""
        src = Seq.new(src, self._type)
        assertf(self._type == src._type, 'Attempted to insert different types of Seq', error=TypeMismatchError)
        k = len(self) + 1 if pos is None else _assert_index(len(self), pos)
        self._splice(k - 1, k - 1, src.unpack())

    def delete(self, i: int, j: int | None = None) -> None:
        """Deletes the items from i-th to j-th (including both ends). `j` defaults to `i`."""
        i, j = _assert_range(len(self), i, j)
        self._splice(i - 1, j, ())

    def pop(self, pos: int | None = None) -> T:
        """Removes and returns the item at `pos` (default: the last one)."""
        k = _assert_index(len(self), len(self) if pos is None else pos)
        value = self._raw()[k - 1]
        self._splice(k - 1, k, ())
        return value

    def keep_if(self, pred: Callable[[T], bool]) -> None:
        """Keeps only the items that fulfill `pred`."""
        assert_type(pred, Tag.FUNCTION)
        kept = [v for v in self._raw() if pred(v)]
        self._splice(0, len(self), kept)

    def apply(self, op: Callable[[T], T]) -> None:
        """Replaces every item with `op(item)`. The results are validated (and re-tagged) before anything changes."""
        assert_type(op, Tag.FUNCTION)
        results = [op(v) for v in self._raw()]
        tag = _infer_tag(results[0]) if results else self._type
        self._check_tag(tag)
        for v in results:
            assert_type(v, tag)
        self._splice(0, len(self), results)
        self._type = tag

    # ================ Utilities ================
    @_array_method
    def all(self, pred: Callable[[T], bool]) -> bool:
        """Checks if every item fulfills `pred`."""
        assert_type(pred, Tag.FUNCTION)
        for v in self._raw():
            if not pred(v):
                return False
        return True

    @_array_method
    def any(self, pred: Callable[[T], bool]) -> bool:
        """Checks if at least one item fulfills `pred`."""
        assert_type(pred, Tag.FUNCTION)
        for v in self._raw():
            if pred(v):
                return True
        return False

    @_array_method
    def count(self, x: T) -> int:
        """Returns the number of occurrences of `x`."""
        assert_type(x, self._type)
        return sum(1 for v in self._raw() if deep_equal(v, x))

    @_array_method
    def deduplicate(self) -> Seq[T]:
        """Returns a new Seq without duplicates, keeping first occurrences in order."""
        kept: list[T] = []
        for v in self._raw():
            if not any(deep_equal(v, u) for u in kept):
                kept.append(v)
        return self._wrap(kept, self._type)

    @_array_method
    def filter(self, pred: Callable[[T], bool]) -> Seq[T]:
        """Returns a new Seq with the items that fulfill `pred`."""
        assert_type(pred, Tag.FUNCTION)
        return self._wrap([v for v in self._raw() if pred(v)], self._type)

    @_array_method
    def map(self, op: Callable[[T], S]) -> Seq[S]:
        """Returns a new (plain) Seq of `op(item)`. The type is inferred from the results (kept if there are none)."""
        assert_type(op, Tag.FUNCTION)
        results = [op(v) for v in self._raw()]
        return Seq(results, None if results else self._type)
