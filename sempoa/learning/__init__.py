"""
Learning Module - Curriculum, questions and learner progression.

Components:
- models: Level, UserProgress, Question
- curriculum: The 60-level curriculum graph
- question_generator: Constraint-driven random questions
- progression: Unlock chain and mastery tracking
- session: Practice flow against a bead board
"""

from sempoa.learning.curriculum import build_all_levels, level_id, next_level, section_levels
from sempoa.learning.models import Level, Question, UserProgress
from sempoa.learning.progression import ProgressionService, SectionProgress
from sempoa.learning.question_generator import QuestionGenerator, generate_question
from sempoa.learning.session import AnswerResult, CompletionTime, PracticeSession

__all__ = [
    # Models
    "Level",
    "UserProgress",
    "Question",
    # Curriculum
    "build_all_levels",
    "level_id",
    "next_level",
    "section_levels",
    # Questions
    "QuestionGenerator",
    "generate_question",
    # Progression
    "ProgressionService",
    "SectionProgress",
    # Practice
    "PracticeSession",
    "AnswerResult",
    "CompletionTime",
]
