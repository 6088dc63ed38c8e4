"""
Data models for the quiz.

This module contains core data models:
- Question: a single catalog entry (choice or numeric input)
- QuestionCatalog: the fixed, ordered list of questions
- QuizSession: one quiz attempt with navigation and answers
"""

from .question import AnswerOption, InputWarning, NumericValidation, Question, QuestionKind
from .catalog import CatalogError, QuestionCatalog, default_catalog, load_catalog
from .quiz_session import AnswerMap, NavigationOutcome, QuizSession

__all__ = [
    "AnswerOption",
    "InputWarning",
    "NumericValidation",
    "Question",
    "QuestionKind",
    "CatalogError",
    "QuestionCatalog",
    "default_catalog",
    "load_catalog",
    "AnswerMap",
    "NavigationOutcome",
    "QuizSession",
]
