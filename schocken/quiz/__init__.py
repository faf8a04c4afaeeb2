"""
Schocken Learning Quiz.

Round setup, display formatting and answer grading for the quiz.
"""

from schocken.quiz.grading import (
    PENALTY_CHOICES,
    QuizAnswer,
    QuizResult,
    format_dice_display,
    grade_answer,
    new_round,
)

__all__ = [
    "PENALTY_CHOICES",
    "QuizAnswer",
    "QuizResult",
    "format_dice_display",
    "grade_answer",
    "new_round",
]
