from __future__ import annotations
import logging
from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

from slicemath.config import settings
from slicemath.ops.validation import common_length, ensure_sequence

log = logging.getLogger("slicemath")


class SupportsMulAdd(Protocol):
    def __mul__(self, other: Any) -> Any: ...
    def __add__(self, other: Any) -> Any: ...


T = TypeVar("T", bound=SupportsMulAdd)


def _shared_length(op: str, a: Sequence[T], b: Sequence[T]) -> int:
    ensure_sequence(a, "a")
    ensure_sequence(b, "b")
    n = common_length(a, b)
    if settings.log_truncation and len(a) != len(b):
        log.debug("[truncate] %s len(a)=%d len(b)=%d -> %d", op, len(a), len(b), n)
    return n


def multiply(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Element-wise product over the common prefix of ``a`` and ``b``.

    Excess elements of the longer operand are ignored; either operand empty
    gives ``[]``. The result is always a new list.
    """
    n = _shared_length("multiply", a, b)
    return [a[i] * b[i] for i in range(n)]


def dot(a: Sequence[T], b: Sequence[T], start: Any = 0) -> T:
    """Sum of ``a[i] * b[i]`` over the common prefix, accumulated left to right.

    Returns ``start`` (the additive identity, ``0`` by default) when the
    common prefix is empty.
    """
    n = _shared_length("dot", a, b)
    total = start
    for i in range(n):
        total = total + a[i] * b[i]
    return total
