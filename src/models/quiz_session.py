"""
Quiz Session - position tracking, navigation gating and answer recording.

The session is a small state machine over catalog positions 0..N-1 plus a
terminal "completed" state reached by advancing from the last question.
"""

from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import Any, Dict, Optional

from .catalog import QuestionCatalog, default_catalog
from .question import QuestionKind

try:
    from ..utils.validation import ValidationFailure, validate_numeric_input
except ImportError:
    from src.utils.validation import ValidationFailure, validate_numeric_input


logger = logging.getLogger(__name__)

# Question index -> answer value (option value or raw numeric text)
AnswerMap = Dict[int, str]


class NavigationOutcome(str, Enum):
    """Result of a navigation request."""

    MOVED = "moved"
    COMPLETED = "completed"
    REJECTED = "rejected"


class QuizSession:
    """
    One quiz attempt.

    Features:
    - Tracks the current question and the answers given so far
    - Records choice answers only when they match an offered option
    - Validates numeric answers and reports failures without raising
    - Refuses navigation while a UI transition is in progress

    Navigation requests that fail their guard (``can_go_next`` /
    ``can_go_previous``) are no-ops returning ``NavigationOutcome.REJECTED``.
    """

    def __init__(self, catalog: Optional[QuestionCatalog] = None, session_id: Optional[str] = None):
        """
        Initialize quiz session.

        Args:
            catalog: Questions to ask (default: built-in catalog)
            session_id: Session ID (auto-generated if None)
        """
        self.catalog = catalog or default_catalog()
        self.session_id = session_id or f"qs-{uuid.uuid4()}"

        self.current_index = 0
        self.answers: AnswerMap = {}
        self.is_transitioning = False
        self.completed = False

    def reset(self) -> None:
        """Start a fresh attempt at the first question."""
        self.current_index = 0
        self.answers = {}
        self.is_transitioning = False
        self.completed = False
        logger.info("Quiz session %s started (%d questions)", self.session_id, len(self.catalog))

    def current_question(self):
        """Question at the current position."""
        return self.catalog.get(self.current_index)

    def answer_for(self, index: int) -> Optional[str]:
        return self.answers.get(index)

    def is_last_question(self) -> bool:
        return self.current_index == len(self.catalog) - 1

    # ==================== Answers ====================

    def record_choice_answer(self, index: int, value: str) -> bool:
        """
        Store a choice answer.

        Args:
            index: Question index
            value: Selected option value

        Returns:
            True if stored; False if the index is not a choice question or
            the value is not one of its options
        """
        question = self.catalog.get(index)
        if question is None or question.kind != QuestionKind.CHOICE:
            logger.debug("Ignored choice answer for index %r: not a choice question", index)
            return False

        if not question.has_option(value):
            logger.debug("Ignored unknown option %r for question %d", value, question.id)
            return False

        self.answers[index] = value
        return True

    def record_numeric_answer(self, index: int, raw_input: Optional[str]) -> Optional[ValidationFailure]:
        """
        Validate and store a numeric answer.

        Valid input is stored stripped of surrounding whitespace. Blank input
        on an optional question is valid but stores nothing. Invalid input
        leaves any previous answer untouched.

        Args:
            index: Question index
            raw_input: Text typed by the user

        Returns:
            None if accepted (or ignored), otherwise the ValidationFailure
        """
        question = self.catalog.get(index)
        if question is None or question.kind != QuestionKind.NUMERIC_INPUT:
            logger.debug("Ignored numeric answer for index %r: not a numeric question", index)
            return None

        failure = validate_numeric_input(raw_input, question.validation, field=f"question-{question.id}")
        if failure is not None:
            logger.debug("Rejected answer for question %d: %s", question.id, failure.reason.value)
            return failure

        text = (raw_input or "").strip()
        if text:
            self.answers[index] = text
        return None

    # ==================== Navigation ====================

    def can_go_next(self) -> bool:
        return (
            not self.completed
            and not self.is_transitioning
            and self.current_index in self.answers
        )

    def can_go_previous(self) -> bool:
        return not self.completed and not self.is_transitioning and self.current_index > 0

    def advance(self) -> NavigationOutcome:
        """
        Move to the next question, or complete the quiz from the last one.

        Returns:
            MOVED, COMPLETED, or REJECTED if ``can_go_next()`` is false
        """
        if not self.can_go_next():
            logger.debug("Advance rejected at index %d", self.current_index)
            return NavigationOutcome.REJECTED

        if self.is_last_question():
            self.completed = True
            logger.info("Quiz session %s completed", self.session_id)
            return NavigationOutcome.COMPLETED

        self.current_index += 1
        return NavigationOutcome.MOVED

    def retreat(self) -> NavigationOutcome:
        """
        Move to the previous question.

        Returns:
            MOVED, or REJECTED if ``can_go_previous()`` is false
        """
        if not self.can_go_previous():
            logger.debug("Retreat rejected at index %d", self.current_index)
            return NavigationOutcome.REJECTED

        self.current_index -= 1
        return NavigationOutcome.MOVED

    def progress_fraction(self) -> float:
        """Share of the quiz reached, in (0, 1]."""
        return (self.current_index + 1) / len(self.catalog)

    # ==================== Transition guard ====================

    def begin_transition(self) -> None:
        self.is_transitioning = True

    def end_transition(self) -> None:
        self.is_transitioning = False

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the session state."""
        return {
            "session_id": self.session_id,
            "current_index": self.current_index,
            "total_questions": len(self.catalog),
            "answers": dict(self.answers),
            "is_transitioning": self.is_transitioning,
            "completed": self.completed,
        }
