"""
Digit-Pair Classifier.

Classifies which complement technique a single-digit addition or subtraction
requires. The 10x10 table per operation is derived from the rules below and
built once.

Addition (first match wins):
    bigFriend    a + b >= 10
    smallFriend  a < 5, b < 5, a + b >= 5
    family       a >= 5, b > 5, a + b < 15
    none         otherwise

Subtraction, minuend a and subtrahend b (first match wins):
    bigFriend    a - b < 0, b > 0
    smallFriend  a >= 5, b < 5, a - b < 5
    family       a < 5, b > 5, a - b >= -5
    none         otherwise
"""

from __future__ import annotations

from functools import lru_cache

from sempoa.core.constants import BASE_OPERATIONS, Operation, Technique

DIGITS = range(10)

TechniqueMatrix = tuple[tuple[Technique, ...], ...]


def _check_digit(value: int) -> int:
    if not 0 <= value <= 9:
        raise ValueError(f"Digit must be between 0 and 9, got {value}")
    return value


def _base_operation(operation: Operation | str) -> Operation:
    resolved = Operation(operation)
    if resolved not in BASE_OPERATIONS:
        raise ValueError(f"Classification needs addition or subtraction, got '{resolved.value}'")
    return resolved


def _classify_addition(a: int, b: int) -> Technique:
    total = a + b
    if total >= 10:
        return Technique.BIG_FRIEND
    if a < 5 and b < 5 and total >= 5:
        return Technique.SMALL_FRIEND
    if a >= 5 and b > 5 and total < 15:
        return Technique.FAMILY
    return Technique.NONE


def _classify_subtraction(a: int, b: int) -> Technique:
    diff = a - b
    if diff < 0 and b > 0:
        return Technique.BIG_FRIEND
    if a >= 5 and b < 5 and diff < 5:
        return Technique.SMALL_FRIEND
    if a < 5 and b > 5 and diff >= -5:
        return Technique.FAMILY
    return Technique.NONE


_RULES = {
    Operation.ADDITION: _classify_addition,
    Operation.SUBTRACTION: _classify_subtraction,
}


@lru_cache(maxsize=1)
def build_matrix() -> dict[Operation, TechniqueMatrix]:
    """
    Build the classification table for both operations.

    Returns:
        Mapping of operation to a 10x10 tuple indexed [first digit][second digit].
        The same object is returned on every call.
    """
    return {
        operation: tuple(tuple(rule(a, b) for b in DIGITS) for a in DIGITS)
        for operation, rule in _RULES.items()
    }


def classify(operation: Operation | str, a: int, b: int) -> Technique:
    """
    Classify the technique needed for a single-digit pair.

    Args:
        operation: addition or subtraction
        a: First operand digit (minuend for subtraction)
        b: Second operand digit (subtrahend for subtraction)

    Returns:
        Exactly one Technique
    """
    matrix = build_matrix()[_base_operation(operation)]
    return matrix[_check_digit(a)][_check_digit(b)]


def friends_of(digit: int, operation: Operation | str, technique: Technique | str) -> list[int]:
    """Partner digits d, ascending, such that classify(operation, digit, d) == technique."""
    row = build_matrix()[_base_operation(operation)][_check_digit(digit)]
    wanted = Technique(technique)
    return [partner for partner, category in enumerate(row) if category is wanted]


def first_digits_with(operation: Operation | str, technique: Technique | str) -> list[int]:
    """First operands, ascending, that have at least one partner classified as technique."""
    matrix = build_matrix()[_base_operation(operation)]
    wanted = Technique(technique)
    return [digit for digit, row in enumerate(matrix) if wanted in row]
