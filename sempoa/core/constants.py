"""
Shared curriculum vocabulary.

Design:
- Operation: what a level practises (mixed resolves per question)
- ComplementRequirement: which complement technique a level's questions exercise
- DigitLevel: operand length, with the operand range for each length
- Technique: classification of a single-digit pair (see core.classifier)
"""

from __future__ import annotations

from enum import Enum


class Operation(str, Enum):
    """Arithmetic operation of a level or question."""

    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    MIXED = "mixed"  # Resolved to addition/subtraction per question

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value.title()

    @property
    def icon(self) -> str:
        """Icon shown next to the operation section."""
        return {
            Operation.ADDITION: "➕",
            Operation.SUBTRACTION: "➖",
            Operation.MIXED: "🔄",
        }[self]

    @property
    def symbol(self) -> str:
        """Infix symbol for question prompts (mixed has none)."""
        return {
            Operation.ADDITION: "+",
            Operation.SUBTRACTION: "-",
            Operation.MIXED: "±",
        }[self]


BASE_OPERATIONS = (Operation.ADDITION, Operation.SUBTRACTION)


class ComplementRequirement(str, Enum):
    """Technique a curriculum level's questions must exercise."""

    SIMPLE = "simple"
    SMALL_FRIEND = "smallFriend"
    BIG_FRIEND = "bigFriend"
    BOTH = "both"

    @property
    def display_name(self) -> str:
        return {
            ComplementRequirement.SIMPLE: "Simple",
            ComplementRequirement.SMALL_FRIEND: "Small Friend",
            ComplementRequirement.BIG_FRIEND: "Big Friend",
            ComplementRequirement.BOTH: "Both Friends",
        }[self]

    @property
    def requires_small_friend(self) -> bool:
        return self in (ComplementRequirement.SMALL_FRIEND, ComplementRequirement.BOTH)

    @property
    def requires_big_friend(self) -> bool:
        return self in (ComplementRequirement.BIG_FRIEND, ComplementRequirement.BOTH)


class DigitLevel(str, Enum):
    """Operand length of a level."""

    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    FOUR = "four"
    FIVE = "five"

    @property
    def display_name(self) -> str:
        return {
            DigitLevel.SINGLE: "Single Digit",
            DigitLevel.DOUBLE: "Double Digit",
            DigitLevel.TRIPLE: "Triple Digit",
            DigitLevel.FOUR: "Four Digit",
            DigitLevel.FIVE: "Five Digit",
        }[self]

    @property
    def digit_count(self) -> int:
        return list(DigitLevel).index(self) + 1

    @property
    def operand_range(self) -> tuple[int, int]:
        """Inclusive operand range for this length."""
        return DIFFICULTY_RANGES[self]


DIFFICULTY_RANGES: dict[DigitLevel, tuple[int, int]] = {
    DigitLevel.SINGLE: (1, 9),
    DigitLevel.DOUBLE: (10, 99),
    DigitLevel.TRIPLE: (100, 999),
    DigitLevel.FOUR: (1000, 9999),
    DigitLevel.FIVE: (10000, 99999),
}


class Technique(str, Enum):
    """Technique required by a single-digit addition or subtraction."""

    NONE = "none"
    SMALL_FRIEND = "smallFriend"
    BIG_FRIEND = "bigFriend"
    FAMILY = "family"  # Near-ten grouping; classified but never requested by generation

    @property
    def display_name(self) -> str:
        return {
            Technique.NONE: "Direct",
            Technique.SMALL_FRIEND: "Small Friend",
            Technique.BIG_FRIEND: "Big Friend",
            Technique.FAMILY: "Family",
        }[self]

    @property
    def color(self) -> str:
        """Rich color for CLI display."""
        return {
            Technique.NONE: "dim",
            Technique.SMALL_FRIEND: "cyan",
            Technique.BIG_FRIEND: "magenta",
            Technique.FAMILY: "yellow",
        }[self]


def section_label(complement: ComplementRequirement, operation: Operation) -> str:
    """
    Heading for one operation+complement section of the curriculum.

    Simple sections are named after their operation ("Simple Addition");
    the others use the complement label.
    """
    complement = ComplementRequirement(complement)
    operation = Operation(operation)
    if complement is ComplementRequirement.SIMPLE:
        return f"Simple {operation.display_name}"
    return complement.display_name
