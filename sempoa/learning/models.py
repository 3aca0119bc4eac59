"""
Learning domain models.

- Level / UserProgress: persisted learner state (pydantic, JSON round-trip)
- Question: ephemeral practice question (dataclass)
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field, model_validator

from sempoa.core.constants import ComplementRequirement, DigitLevel, Operation


class Level(BaseModel):
    """
    One curriculum node: operation x complement requirement x digit length.

    The triple is the natural key; `id` is derived from it.
    """

    id: str
    operation_type: Operation
    complement_type: ComplementRequirement
    digit_level: DigitLevel
    questions_completed: int = Field(default=0, ge=0)
    correct_answers: int = Field(default=0, ge=0)
    is_unlocked: bool = False
    is_completed: bool = False

    @model_validator(mode="after")
    def _completed_implies_unlocked(self) -> Level:
        if self.is_completed and not self.is_unlocked:
            raise ValueError(f"Level '{self.id}' is completed but locked")
        return self

    @property
    def title(self) -> str:
        """Button-style title, e.g. "Addition Single Digit Small Friend"."""
        return (
            f"{self.operation_type.display_name} "
            f"{self.digit_level.display_name} "
            f"{self.complement_type.display_name}"
        )

    @property
    def accuracy(self) -> float:
        """Share of attempts answered correctly (0-1)."""
        if self.questions_completed == 0:
            return 0.0
        return self.correct_answers / self.questions_completed


class UserProgress(BaseModel):
    """
    Learner state over the whole curriculum.

    `all_levels` order defines adjacency: the next level is the next element.
    `current_level_id` is None before starting or after finishing the curriculum.
    """

    current_level_id: str | None = None
    all_levels: list[Level]
    total_score: int = Field(default=0, ge=0)

    def get_level(self, level_id: str | None) -> Level | None:
        """Find a level by id."""
        if level_id is None:
            return None
        for level in self.all_levels:
            if level.id == level_id:
                return level
        return None

    def index_of(self, level_id: str) -> int:
        """Position of a level in the curriculum, -1 if absent."""
        for index, level in enumerate(self.all_levels):
            if level.id == level_id:
                return index
        return -1

    @property
    def completed_count(self) -> int:
        return sum(1 for level in self.all_levels if level.is_completed)


@dataclass(frozen=True)
class Question:
    """A generated practice question; operation is already resolved from mixed."""

    operands: tuple[int, int]
    operation: Operation
    answer: int
    difficulty: DigitLevel = DigitLevel.SINGLE
    use_small_friend: bool = False
    use_big_friend: bool = False

    @property
    def prompt(self) -> str:
        """Display text, e.g. "12 + 7"."""
        first, second = self.operands
        return f"{first} {self.operation.symbol} {second}"

    def is_correct(self, value: int) -> bool:
        return value == self.answer

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary."""
        return {
            "operands": list(self.operands),
            "operation": self.operation.value,
            "answer": self.answer,
            "difficulty": self.difficulty.value,
            "use_small_friend": self.use_small_friend,
            "use_big_friend": self.use_big_friend,
        }
