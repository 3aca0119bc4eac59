"""
Progression Engine.

Stateless service over an explicit UserProgress value. Every mutating call
works on a deep copy, persists it through the injected store and returns it;
calls that cannot apply (no current level, locked or unknown level) return the
given progress object unchanged.

Unlock chain:
    locked -> unlocked -> (answers accumulate) -> completed
A level completes when its correct answers reach the mastery threshold; the
level after it by curriculum position is unlocked and becomes current. After
the last level the current level is cleared.

Callers must serialize mutating calls: each one is a read-modify-write
against the store with no locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger
from pydantic import ValidationError

from sempoa.config import get_settings
from sempoa.core.constants import ComplementRequirement, Operation
from sempoa.learning.curriculum import build_all_levels, next_level, section_levels
from sempoa.learning.models import Level, UserProgress

if TYPE_CHECKING:
    from sempoa.db.progress_store import ProgressStore


@dataclass
class SectionProgress:
    """Completed vs total levels of one operation+complement section."""

    completed: int
    total: int

    @property
    def percentage(self) -> int:
        return _round_percentage(self.completed, self.total)


def _round_percentage(completed: int, total: int) -> int:
    # Half rounds up
    if total == 0:
        return 0
    return int(100 * completed / total + 0.5)


class ProgressionService:
    """Curriculum progression over explicit learner state."""

    def __init__(
        self,
        store: ProgressStore | None = None,
        *,
        storage_key: str | None = None,
        mastery_threshold: int | None = None,
    ):
        """
        Initialize service.

        Args:
            store: Persistence backend (default: in-memory)
            storage_key: Key progress is saved under (default from settings)
            mastery_threshold: Correct answers that complete a level (default from settings)
        """
        settings = get_settings()
        if store is None:
            from sempoa.db.progress_store import InMemoryProgressStore

            store = InMemoryProgressStore()
        self.store = store
        self.storage_key = storage_key or settings.progress_key
        self.mastery_threshold = mastery_threshold or settings.mastery_threshold

    # ========================================
    # Lifecycle
    # ========================================

    def initialize_progress(self) -> UserProgress:
        """Fresh progress: only the first level unlocked and current."""
        levels = build_all_levels()
        first = levels[0]
        first.is_unlocked = True
        return UserProgress(current_level_id=first.id, all_levels=levels, total_score=0)

    def load_progress(self) -> UserProgress:
        """
        Load stored progress.

        Returns:
            Stored progress, or fresh progress when nothing (or nothing valid) is stored
        """
        try:
            progress = self.store.load(self.storage_key)
        except ValidationError as e:
            logger.warning(f"Stored progress '{self.storage_key}' is invalid, starting fresh: {e}")
            return self.initialize_progress()
        except ValueError as e:
            logger.warning(f"Stored progress '{self.storage_key}' is unreadable, starting fresh: {e}")
            return self.initialize_progress()

        if progress is None:
            return self.initialize_progress()
        return progress

    def save_progress(self, progress: UserProgress) -> None:
        self.store.save(self.storage_key, progress)

    def reset_progress(self) -> UserProgress:
        """Discard all progress and persist a fresh start."""
        progress = self.initialize_progress()
        self.save_progress(progress)
        logger.info("Progress reset")
        return progress

    # ========================================
    # Transitions
    # ========================================

    def select_level(self, progress: UserProgress, level: Level | str) -> UserProgress:
        """
        Make an unlocked level current.

        The unlock state is read from `progress`, not from the passed Level,
        so a stale Level object cannot bypass the lock.
        """
        level_id = level if isinstance(level, str) else level.id
        target = progress.get_level(level_id)
        if target is None:
            logger.warning(f"Cannot select unknown level '{level_id}'")
            return progress
        if not target.is_unlocked:
            logger.warning(f"Cannot select locked level '{level_id}'")
            return progress

        updated = progress.model_copy(deep=True)
        updated.current_level_id = target.id
        self.save_progress(updated)
        logger.info(f"Selected level {target.id}")
        return updated

    def record_correct_answer(self, progress: UserProgress) -> UserProgress:
        """Count a correct answer for the current level, completing it at the threshold."""
        if progress.get_level(progress.current_level_id) is None:
            return progress

        updated = progress.model_copy(deep=True)
        level = updated.get_level(updated.current_level_id)
        level.questions_completed += 1
        level.correct_answers += 1
        updated.total_score += 1

        # Replaying a completed level advances again on its next correct answer
        if level.correct_answers >= self.mastery_threshold:
            if not level.is_completed:
                logger.info(f"Level completed: {level.id}")
            level.is_completed = True

            following = next_level(updated.all_levels, level)
            if following is not None:
                following.is_unlocked = True
                updated.current_level_id = following.id
                logger.info(f"Level unlocked: {following.id}")
            else:
                updated.current_level_id = None
                logger.info("Curriculum completed")

        self.save_progress(updated)
        return updated

    def record_incorrect_answer(self, progress: UserProgress) -> UserProgress:
        """Count an attempt without credit; mistakes never lock or regress."""
        if progress.get_level(progress.current_level_id) is None:
            return progress

        updated = progress.model_copy(deep=True)
        updated.get_level(updated.current_level_id).questions_completed += 1
        self.save_progress(updated)
        return updated

    # ========================================
    # Queries
    # ========================================

    def get_completion_percentage(self, progress: UserProgress) -> int:
        """Completed levels as a whole percentage (0-100)."""
        return _round_percentage(progress.completed_count, len(progress.all_levels))

    def get_section_progress(
        self,
        progress: UserProgress,
        operation: Operation | str,
        complement: ComplementRequirement | str,
    ) -> SectionProgress:
        levels = section_levels(progress.all_levels, operation, complement)
        return SectionProgress(
            completed=sum(1 for level in levels if level.is_completed),
            total=len(levels),
        )

    def get_current_level(self, progress: UserProgress) -> Level | None:
        return progress.get_level(progress.current_level_id)
