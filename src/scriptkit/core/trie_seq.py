"""Persistent (trie-based) backend for Seq.

The API is the same as `Seq`, only the storage differs: items live in a `pyrsistent` PVector, so `copy()` is O(1)
and shares structure with the original.

==== Policy ====
- Point updates and appends are batched in an evolver (`edit()`); any read or structural change commits first.
"""
from __future__ import annotations

from typing import Sequence, TypeVar

from pyrsistent import PVector, pvector
from pyrsistent.typing import PVectorEvolver

from scriptkit.core.seq import Seq

T = TypeVar('T')


class TrieSeq(Seq[T]):
    __slots__ = ('evolver',)

    # ================ Persistence Methods ================
    def edit(self) -> None:  # we use this rather than .is_dirty() to avoid keeping an idle evolver around
        """Enter edit mode."""
        if self.evolver is None:
            self.evolver = self._data.evolver()

    def commit(self) -> None:
        """Commit changes made while in edit mode."""
        if self.evolver is not None:
            self._data = self.evolver.persistent()
            self.evolver = None

    def copy(self) -> TrieSeq[T]:
        """New TrieSeq sharing the committed vector (edits on either side never leak to the other)."""
        self.commit()
        nv: TrieSeq[T] = object.__new__(type(self))
        nv._type = self._type
        nv._data = self._data
        nv.evolver = None
        return nv

    # ================ Storage Primitives ================
    def _from_list(self, items: list) -> None:
        self._data: PVector[T] = pvector(items)
        self.evolver: PVectorEvolver[T] | None = None

    def _raw(self) -> PVector[T]:
        self.commit()
        return self._data

    def __len__(self) -> int:  # no commit, so consecutive point edits share one evolver
        return len(self.evolver) if self.evolver is not None else len(self._data)

    def _put(self, k: int, value: T) -> None:
        self.edit()
        self.evolver[k] = value

    def _splice(self, start: int, stop: int, items: Sequence[T]) -> None:
        if start == stop == len(self):  # plain append, the evolver can handle it
            self.edit()
            self.evolver.extend(items)
            return
        # Structural change: the evolver cannot handle insertions or deletions
        self.commit()
        self._data = self._data[:start] + pvector(items) + self._data[stop:]
