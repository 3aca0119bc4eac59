"""
Question Generator.

Draws random operand pairs for a digit length and operation, redrawing within
a bounded retry budget until the requested techniques are exercised.

Constraint checks:
- Addition, small friend: last-digit sum > 9; only the second operand is
  redrawn, capped so the sum stays within the board capacity.
- Addition, big friend: full sum >= 10 or last-digit sum > 9; both operands
  are redrawn.
- Subtraction, small friend: minuend last digit < subtrahend last digit
  (forces a borrow); the subtrahend is redrawn and the pair re-ordered.
- Subtraction, big friend: not enforced.

When the budget runs out the last drawn pair is returned as is.
"""

from __future__ import annotations

import random

from loguru import logger

from sempoa.config import get_settings
from sempoa.core.beads import BoardConfig
from sempoa.core.constants import BASE_OPERATIONS, DigitLevel, Operation
from sempoa.learning.models import Level, Question


def last_digit_sum(a: int, b: int) -> int:
    """Sum of the ones digits of two operands."""
    return a % 10 + b % 10


class QuestionGenerator:
    """
    Generate practice questions for a digit length and operation.

    Randomness comes from an injectable random.Random so tests can seed it.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        retry_budget: int | None = None,
        max_sum: int | None = None,
    ):
        """
        Initialize generator.

        Args:
            seed: Seed for a private random.Random (ignored when rng is given)
            rng: Random source to use
            retry_budget: Redraw attempts per constraint (default from settings)
            max_sum: Largest allowed addition result (default: board capacity)
        """
        self.rng = rng if rng is not None else random.Random(seed)
        settings = get_settings()
        self.retry_budget = retry_budget if retry_budget is not None else settings.generator_retry_budget
        self.max_sum = max_sum if max_sum is not None else BoardConfig.from_settings().max_value

    # --------------------------------------------------------------------- #
    # Public API
    # --------------------------------------------------------------------- #

    def generate(
        self,
        difficulty: DigitLevel | str,
        operation: Operation | str,
        require_small_friend: bool = False,
        require_big_friend: bool = False,
    ) -> Question:
        """
        Generate one question.

        Args:
            difficulty: Digit length of the operands
            operation: addition, subtraction or mixed (resolved uniformly at random)
            require_small_friend: Force the small-friend constraint
            require_big_friend: Force the big-friend constraint

        Returns:
            Question with the exact answer; subtraction answers are never negative
        """
        difficulty = DigitLevel(difficulty)
        operation = Operation(operation)
        if operation is Operation.MIXED:
            operation = self.rng.choice(BASE_OPERATIONS)

        if operation is Operation.ADDITION:
            a, b = self._addition_operands(difficulty, require_small_friend, require_big_friend)
            answer = a + b
        else:
            a, b = self._subtraction_operands(difficulty, require_small_friend)
            answer = a - b

        question = Question(
            operands=(a, b),
            operation=operation,
            answer=answer,
            difficulty=difficulty,
            use_small_friend=require_small_friend,
            use_big_friend=require_big_friend,
        )
        logger.debug(f"Generated {question.prompt} = {answer} ({difficulty.value})")
        return question

    def generate_for_level(self, level: Level | None) -> Question | None:
        """Generate a question matching a level's configuration, None without a level."""
        if level is None:
            return None
        return self.generate(
            difficulty=level.digit_level,
            operation=level.operation_type,
            require_small_friend=level.complement_type.requires_small_friend,
            require_big_friend=level.complement_type.requires_big_friend,
        )

    # --------------------------------------------------------------------- #
    # Internal helpers
    # --------------------------------------------------------------------- #

    def _draw(self, difficulty: DigitLevel) -> int:
        low, high = difficulty.operand_range
        return self.rng.randint(low, high)

    def _addition_operands(
        self,
        difficulty: DigitLevel,
        require_small_friend: bool,
        require_big_friend: bool,
    ) -> tuple[int, int]:
        a, b = self._draw(difficulty), self._draw(difficulty)

        if require_small_friend:
            low, high = difficulty.operand_range
            ceiling = min(high, self.max_sum - a)
            attempts = 0
            while (
                (last_digit_sum(a, b) <= 9 or a + b > self.max_sum)
                and ceiling >= low
                and attempts < self.retry_budget
            ):
                b = self.rng.randint(low, ceiling)
                attempts += 1
            if last_digit_sum(a, b) <= 9:
                logger.debug(f"Small-friend addition fell back to {a} + {b}")

        if require_big_friend:
            attempts = 0
            while a + b < 10 and last_digit_sum(a, b) <= 9 and attempts < self.retry_budget:
                a, b = self._draw(difficulty), self._draw(difficulty)
                attempts += 1
            if a + b < 10 and last_digit_sum(a, b) <= 9:
                logger.debug(f"Big-friend addition fell back to {a} + {b}")

        return a, b

    def _subtraction_operands(
        self,
        difficulty: DigitLevel,
        require_small_friend: bool,
    ) -> tuple[int, int]:
        a, b = _ordered(self._draw(difficulty), self._draw(difficulty))

        if require_small_friend:
            attempts = 0
            while a % 10 >= b % 10 and attempts < self.retry_budget:
                a, b = _ordered(a, self._draw(difficulty))
                attempts += 1
            if a % 10 >= b % 10:
                logger.debug(f"Small-friend subtraction fell back to {a} - {b}")

        return a, b


def _ordered(a: int, b: int) -> tuple[int, int]:
    """Minuend first so the difference is never negative."""
    return (a, b) if a >= b else (b, a)


_default_generator: QuestionGenerator | None = None


def generate_question(
    difficulty: DigitLevel | str,
    operation: Operation | str,
    require_small_friend: bool = False,
    require_big_friend: bool = False,
) -> Question:
    """Generate a question with a shared, unseeded generator."""
    global _default_generator
    if _default_generator is None:
        _default_generator = QuestionGenerator()
    return _default_generator.generate(difficulty, operation, require_small_friend, require_big_friend)
