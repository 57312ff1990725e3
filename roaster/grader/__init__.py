"""Grader package — heuristic scoring and report prose."""

from roaster.grader.report import GradeReport, grade
from roaster.grader.rules import Style
from roaster.grader.scoring import letter_grade, score_breakdown, score_signals

__all__ = [
    "grade",
    "GradeReport",
    "Style",
    "score_signals",
    "score_breakdown",
    "letter_grade",
]
