"""Vector: a Seq consisting of numbers only."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Sequence, Union

from scriptkit.core.errors import TypeMismatchError
from scriptkit.core.seq import Seq
from scriptkit.core.typecheck import NUMERIC_TAGS, Tag, assertf
from scriptkit.utils.logging import get_logger

logger = get_logger('vector')

Number = Union[int, float]


class Vector(Seq[Number]):
    __slots__ = ()

    @classmethod
    def _check_tag(cls, tag: Tag) -> None:
        assertf(tag in NUMERIC_TAGS, 'Vector requires a numeric type, but %s', tag.value, error=TypeMismatchError)

    @classmethod
    def try_new(cls, arr: Seq | Sequence[Number] | Mapping[int, Number],
                typename: Tag | str | None = None) -> tuple[Vector, Exception | None]:
        """Like `new`, but a construction failure yields an empty `Vector<number>` and the error instead of raising."""
        try:
            return cls.new(arr, typename), None
        except (TypeError, ValueError) as err:  # TypeMismatchError is a TypeError, 'Ambiguous type' a ValueError
            logger.warning('Vector construction failed, falling back to an empty vector: %s', err)
            return cls._wrap([], Tag.NUMBER), err
