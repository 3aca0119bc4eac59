"""
Practice Session.

Ties the progression engine to a bead board: the learner sets beads, the
session checks the board value against the current question, records the
outcome and moves on to the next question.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from loguru import logger

from sempoa.core.beads import BoardConfig, bead_keys_to_value, parse_bead_key, value_to_bead_keys
from sempoa.learning.models import Level, Question, UserProgress
from sempoa.learning.progression import ProgressionService
from sempoa.learning.question_generator import QuestionGenerator


@dataclass
class CompletionTime:
    """Time taken for one correctly answered question."""

    time: float  # seconds
    question: str
    timestamp: datetime
    answer: int


@dataclass
class AnswerResult:
    """Outcome of checking the board against the current question."""

    is_correct: bool
    expected: int
    given: int
    level_completed: bool
    current_level_id: str | None

    @property
    def feedback(self) -> str:
        if self.is_correct:
            return "Correct!"
        return f"Not quite: the answer is {self.expected}"


@dataclass
class PracticeSession:
    """
    One sitting of practice over a learner's progress.

    Score and mistakes count this session only; the persisted totals live in
    UserProgress.
    """

    service: ProgressionService
    progress: UserProgress
    generator: QuestionGenerator = field(default_factory=QuestionGenerator)
    board: BoardConfig = field(default_factory=BoardConfig.from_settings)
    clock: Callable[[], float] = time.monotonic

    score: int = 0
    mistakes: int = 0
    active_beads: set[str] = field(default_factory=set)
    completion_times: list[CompletionTime] = field(default_factory=list)
    current_question: Question | None = field(default=None, init=False)
    _question_started: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        self._next_question()

    @property
    def current_level(self) -> Level | None:
        return self.service.get_current_level(self.progress)

    @property
    def current_value(self) -> int:
        return bead_keys_to_value(self.active_beads, self.board)

    # ========================================
    # Board
    # ========================================

    def set_value(self, value: int) -> None:
        """Replace the board with the beads showing `value`."""
        self.active_beads = value_to_bead_keys(value, self.board)

    def toggle_bead(self, key: str) -> None:
        """Flip one bead on or off."""
        bead = parse_bead_key(key)
        if bead.column >= self.board.columns:
            raise ValueError(f"Bead key '{key}' is outside a {self.board.columns}-column board")
        limit = self.board.upper_beads if bead.is_upper else self.board.lower_beads
        if bead.row >= limit:
            raise ValueError(f"Bead key '{key}' has no such row")

        if key in self.active_beads:
            self.active_beads.discard(key)
        else:
            self.active_beads.add(key)

    def clear_board(self) -> None:
        self.active_beads = set()

    # ========================================
    # Flow
    # ========================================

    def select_level(self, level: Level | str) -> None:
        previous = self.progress.current_level_id
        self.progress = self.service.select_level(self.progress, level)
        if self.progress.current_level_id != previous or self.current_question is None:
            self._next_question()

    def check_answer(self) -> AnswerResult | None:
        """
        Check the board value against the current question.

        Returns:
            AnswerResult, or None when there is no current level or question
        """
        question = self.current_question
        level = self.current_level
        if question is None or level is None:
            return None

        given = self.current_value
        is_correct = question.is_correct(given)
        was_completed = level.is_completed

        if is_correct:
            self.score += 1
            self.completion_times.append(
                CompletionTime(
                    time=self.clock() - self._question_started,
                    question=question.prompt,
                    timestamp=datetime.now(),
                    answer=question.answer,
                )
            )
            self.progress = self.service.record_correct_answer(self.progress)
        else:
            self.mistakes += 1
            self.progress = self.service.record_incorrect_answer(self.progress)

        completed = self.progress.get_level(level.id)
        result = AnswerResult(
            is_correct=is_correct,
            expected=question.answer,
            given=given,
            level_completed=not was_completed and completed is not None and completed.is_completed,
            current_level_id=self.progress.current_level_id,
        )
        logger.debug(f"{question.prompt} answered {given}: {'correct' if is_correct else 'wrong'}")

        self.clear_board()
        self._next_question()
        return result

    def _next_question(self) -> None:
        self.current_question = self.generator.generate_for_level(self.current_level)
        self._question_started = self.clock()
