from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Union

import numpy as np


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundedIntKind:
    """Fixed-width integer kind used for synthesized x axes."""

    name: str
    bits: int
    signed: bool
    dtype: np.dtype | None = None

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError("bits must be > 0")

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    def narrow(self, value: int) -> int:
        """Two's-complement wrap of ``value`` into this kind's range."""
        wrapped = int(value) & ((1 << self.bits) - 1)
        if self.signed and wrapped > self.max_value:
            wrapped -= 1 << self.bits
        return wrapped

    def fits(self, value: int) -> bool:
        return self.narrow(value) == value

    def axis_dtype(self) -> np.dtype:
        # numpy has no 128-bit integers; those axes are held as Python ints.
        return self.dtype if self.dtype is not None else np.dtype(object)


_POINTER_BITS = np.dtype(np.intp).itemsize * 8

U8 = BoundedIntKind("u8", 8, False, np.dtype(np.uint8))
U16 = BoundedIntKind("u16", 16, False, np.dtype(np.uint16))
U32 = BoundedIntKind("u32", 32, False, np.dtype(np.uint32))
U64 = BoundedIntKind("u64", 64, False, np.dtype(np.uint64))
U128 = BoundedIntKind("u128", 128, False)
USIZE = BoundedIntKind("usize", _POINTER_BITS, False, np.dtype(np.uintp))
I8 = BoundedIntKind("i8", 8, True, np.dtype(np.int8))
I16 = BoundedIntKind("i16", 16, True, np.dtype(np.int16))
I32 = BoundedIntKind("i32", 32, True, np.dtype(np.int32))
I64 = BoundedIntKind("i64", 64, True, np.dtype(np.int64))
I128 = BoundedIntKind("i128", 128, True)
ISIZE = BoundedIntKind("isize", _POINTER_BITS, True, np.dtype(np.intp))

INDEX_KINDS: dict[str, BoundedIntKind] = {
    kind.name: kind for kind in (U8, U16, U32, U64, U128, USIZE, I8, I16, I32, I64, I128, ISIZE)
}

DEFAULT_INDEX_KIND = USIZE

IndexKindLike = Union[BoundedIntKind, str, np.dtype, type]


def resolve_index_kind(kind: IndexKindLike) -> BoundedIntKind:
    if isinstance(kind, BoundedIntKind):
        return kind
    if isinstance(kind, str):
        found = INDEX_KINDS.get(kind.lower())
        if found is not None:
            return found
    try:
        dtype = np.dtype(kind)
    except TypeError as exc:
        raise ValueError(f"unknown index kind: {kind!r}") from exc
    if dtype.kind not in {"i", "u"}:
        raise ValueError(f"index kind must be an integer type, got {dtype}")
    prefix = "i" if dtype.kind == "i" else "u"
    return INDEX_KINDS[f"{prefix}{dtype.itemsize * 8}"]


def index_axis(count: int, kind: IndexKindLike = DEFAULT_INDEX_KIND) -> np.ndarray:
    """Return ``count`` ascending indices in ``kind``, saturating at its maximum.

    When ``count`` does not survive narrowing into ``kind`` the axis becomes
    ``0, 1, ..., MAX`` followed by ``MAX`` for every remaining element.
    """

    if count < 0:
        raise ValueError("count must be >= 0")
    kind = resolve_index_kind(kind)
    dtype = kind.axis_dtype()
    if kind.fits(count):
        return _arange(count, dtype)

    head = _arange(min(count, kind.max_value + 1), dtype)
    tail = np.full(count - head.size, kind.max_value, dtype=dtype)
    LOGGER.debug(
        "index axis saturated: count=%d kind=%s max=%d repeated=%d",
        count,
        kind.name,
        kind.max_value,
        tail.size,
    )
    return np.concatenate([head, tail])


def _arange(count: int, dtype: np.dtype) -> np.ndarray:
    if dtype == np.dtype(object):
        out: Any = np.empty(count, dtype=object)
        out[:] = list(range(count))
        return out
    # Build in intp and narrow afterwards; every value is <= count - 1 <= MAX.
    return np.arange(count, dtype=np.intp).astype(dtype, copy=False)
