"""Reference wrappers around 32-bit integers.

An :class:`IntegerBox` is a heap object holding an ``int32``. Two boxes with
the same value are equal (``==``) but only identical (``is``) when they are
the same object. :meth:`IntegerBox.value_of` hands out shared instances for
-128..127, so identity holds inside that window and fails outside it.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Optional

import numpy as np

from .exceptions import NullReferenceError
from .numeric import Number, wrap

logger = logging.getLogger(__name__)


class IntegerBox:
    CACHE_LOW: ClassVar[int] = -128
    CACHE_HIGH: ClassVar[int] = 127
    _cache: ClassVar[dict[int, "IntegerBox"]] = {}

    __slots__ = ("_value",)

    def __init__(self, value: Number) -> None:
        self._value = wrap(value, 32)

    @classmethod
    def value_of(cls, value: Number) -> "IntegerBox":
        """Box ``value``, reusing the cached instance for small values."""
        key = int(wrap(value, 32))
        if not cls.CACHE_LOW <= key <= cls.CACHE_HIGH:
            return cls(key)
        box = cls._cache.get(key)
        if box is None:
            logger.debug("caching box for %d", key)
            box = cls._cache[key] = cls(key)
        return box

    def int_value(self) -> np.int32:
        return self._value

    def __int__(self) -> int:
        return int(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegerBox):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash(int(self._value))

    def __repr__(self) -> str:
        return f"IntegerBox({int(self._value)})"

    def __str__(self) -> str:
        return str(int(self._value))


def unbox(box: Optional[IntegerBox]) -> np.int32:
    """Return the primitive value of ``box``; an absent box has none."""
    if box is None:
        raise NullReferenceError("Cannot unbox an absent IntegerBox.")
    return box.int_value()
