from __future__ import annotations

from array import array

import pytest

from slicemath import OperandError, dot, multiply
from slicemath.ops.validation import common_length, ensure_sequence


def test_common_length_is_the_shorter_length():
    assert common_length([1, 2, 3], [1]) == 1
    assert common_length([], [1, 2]) == 0
    assert common_length((1, 2), (3, 4)) == 2


@pytest.mark.parametrize(
    "value", [[1, 2], (1, 2), range(3), array("d", [1.0, 2.0]), b"\x01\x02", bytearray(2), []]
)
def test_ordered_indexable_operands_pass_through(value):
    assert ensure_sequence(value, "a") is value


@pytest.mark.parametrize(
    "value",
    [
        {1, 2},
        frozenset([1, 2]),
        {0: 1, 1: 2},
        (x for x in [1, 2]),
        iter([1, 2]),
        "12",
        3,
    ],
)
def test_unordered_or_unindexable_operands_are_rejected(value):
    with pytest.raises(OperandError) as exc:
        ensure_sequence(value, "b")
    assert exc.value.name == "b"
    assert "'b'" in exc.value.detail


def test_operations_reject_bad_operand_before_computing():
    with pytest.raises(OperandError) as exc:
        multiply({1, 2}, [1, 2])
    assert exc.value.name == "a"

    with pytest.raises(OperandError):
        dot([1, 2], (x for x in [1, 2]))


def test_operand_error_is_a_type_error():
    with pytest.raises(TypeError):
        dot("abc", [1, 2, 3])


def test_length_mismatch_is_never_an_error():
    assert multiply([1] * 10, [2]) == [2]
    assert dot([2], [1] * 10) == 2


def test_byte_strings_are_sequences_of_ints():
    assert multiply(bytes([2, 3]), [4, 5, 6]) == [8, 15]
    assert dot(bytearray([1, 2, 3]), b"\x04\x05") == 14
