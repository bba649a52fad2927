from __future__ import annotations
from collections.abc import Mapping, Set, Sized
from typing import Any

from slicemath.errors import OperandError


def ensure_sequence(value: Any, name: str) -> Any:
    """Ensure ``value`` is an ordered, indexable operand and return it unchanged."""
    if isinstance(value, str):
        raise OperandError(f"Operand {name!r} must be a numeric sequence, got text", name)
    if isinstance(value, (Set, Mapping)):
        raise OperandError(
            f"Operand {name!r} must be an ordered sequence, got {type(value).__name__}", name
        )
    if not (hasattr(value, "__len__") and hasattr(value, "__getitem__")):
        raise OperandError(
            f"Operand {name!r} must be sized and indexable, got {type(value).__name__}", name
        )
    return value


def common_length(a: Sized, b: Sized) -> int:
    """Length of the shared prefix; longer operands are truncated to it."""
    return min(len(a), len(b))
