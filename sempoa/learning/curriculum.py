"""
Curriculum Graph.

The fixed set of 60 levels, generated in nested order
operation -> complement -> digit length. Adjacency is positional: the level
after L is the element following L in this sequence, across section
boundaries.
"""

from __future__ import annotations

from collections.abc import Sequence

from sempoa.core.constants import ComplementRequirement, DigitLevel, Operation
from sempoa.learning.models import Level

OPERATION_ORDER = (Operation.ADDITION, Operation.SUBTRACTION, Operation.MIXED)
COMPLEMENT_ORDER = (
    ComplementRequirement.SIMPLE,
    ComplementRequirement.SMALL_FRIEND,
    ComplementRequirement.BIG_FRIEND,
    ComplementRequirement.BOTH,
)
DIGIT_ORDER = (
    DigitLevel.SINGLE,
    DigitLevel.DOUBLE,
    DigitLevel.TRIPLE,
    DigitLevel.FOUR,
    DigitLevel.FIVE,
)


def level_id(
    operation: Operation | str,
    complement: ComplementRequirement | str,
    digit_level: DigitLevel | str,
) -> str:
    """Derive a level id from its natural key, e.g. "addition-smallFriend-double"."""
    return (
        f"{Operation(operation).value}-"
        f"{ComplementRequirement(complement).value}-"
        f"{DigitLevel(digit_level).value}"
    )


def build_all_levels() -> list[Level]:
    """
    Build every curriculum level, all locked and untouched.

    Returns:
        New list of Level objects in generation order (same order every call)
    """
    return [
        Level(
            id=level_id(operation, complement, digit),
            operation_type=operation,
            complement_type=complement,
            digit_level=digit,
        )
        for operation in OPERATION_ORDER
        for complement in COMPLEMENT_ORDER
        for digit in DIGIT_ORDER
    ]


def next_level(all_levels: Sequence[Level], current: Level) -> Level | None:
    """
    Level following `current` by position.

    Returns:
        The next Level, or None when current is last or not in the sequence
    """
    for index, level in enumerate(all_levels):
        if level.id == current.id:
            if index + 1 < len(all_levels):
                return all_levels[index + 1]
            return None
    return None


def section_levels(
    all_levels: Sequence[Level],
    operation: Operation | str,
    complement: ComplementRequirement | str,
) -> list[Level]:
    """Levels of one operation+complement section, across all digit lengths."""
    operation = Operation(operation)
    complement = ComplementRequirement(complement)
    return [
        level
        for level in all_levels
        if level.operation_type is operation and level.complement_type is complement
    ]
