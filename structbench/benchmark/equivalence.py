"""
Equivalence checks between strategies that must agree.

Every check raises EquivalenceError, an AssertionError, so a disagreement
surfaces as an ordinary test failure with the mismatched values in the message.
"""

from typing import Mapping, Sequence

MAX_REPORTED_MISMATCHES = 5


class EquivalenceError(AssertionError):
    """Two strategies that should be equivalent produced different results."""


def assert_same_verdict(expected: bool, actual: bool) -> None:
    """Both duplicate checks must return the same boolean."""
    if bool(expected) != bool(actual):
        raise EquivalenceError(
            f"Duplicate verdicts differ: {bool(expected)} != {bool(actual)}"
        )


def assert_same_frequencies(
    expected: Mapping[int, int], actual: Mapping[int, int]
) -> None:
    """Both frequency tables must hold the same (key, count) pairs."""
    expected_dict = dict(expected.items())
    actual_dict = dict(actual.items())
    if expected_dict == actual_dict:
        return

    mismatches = []
    for key in sorted(expected_dict.keys() | actual_dict.keys()):
        left = expected_dict.get(key)
        right = actual_dict.get(key)
        if left != right:
            mismatches.append(f"{key}: {left} != {right}")
            if len(mismatches) >= MAX_REPORTED_MISMATCHES:
                break

    raise EquivalenceError(
        f"Frequency tables differ ({len(expected_dict)} vs {len(actual_dict)} keys); "
        f"first mismatches: {', '.join(mismatches)}"
    )


def assert_non_decreasing(numbers: Sequence[int]) -> None:
    for i in range(len(numbers) - 1):
        if numbers[i] > numbers[i + 1]:
            raise EquivalenceError(
                f"Output is not sorted at index {i}: {numbers[i]} > {numbers[i + 1]}"
            )


def assert_same_sorted(expected: Sequence[int], actual: Sequence[int]) -> None:
    """Both sorts must produce the same non-decreasing sequence."""
    if len(expected) != len(actual):
        raise EquivalenceError(
            f"Sorted outputs differ in length: {len(expected)} != {len(actual)}"
        )

    for i, (left, right) in enumerate(zip(expected, actual)):
        if left != right:
            raise EquivalenceError(
                f"Sorted outputs differ at index {i}: {left} != {right}"
            )

    assert_non_decreasing(expected)
