"""
Core Module - Shared domain vocabulary and pure utilities.

Components:
- constants: Operation, ComplementRequirement, DigitLevel, Technique
- classifier: Digit-pair technique classification
- beads: Bead-value codec for the board
"""

from sempoa.core.beads import (
    BeadPosition,
    BoardConfig,
    bead_keys_to_value,
    can_represent_value,
    value_to_bead_keys,
)
from sempoa.core.classifier import build_matrix, classify, first_digits_with, friends_of
from sempoa.core.constants import ComplementRequirement, DigitLevel, Operation, Technique

__all__ = [
    # Vocabulary
    "Operation",
    "ComplementRequirement",
    "DigitLevel",
    "Technique",
    # Classifier
    "build_matrix",
    "classify",
    "friends_of",
    "first_digits_with",
    # Beads
    "BoardConfig",
    "BeadPosition",
    "value_to_bead_keys",
    "bead_keys_to_value",
    "can_represent_value",
]
