"""
Quiz Flow Orchestrator

Drives the three pages of the quiz around a QuizSession:
1. Landing page, until the user starts the quiz
2. Question pages, with guarded navigation and answer recording
3. Results page, once the last question is confirmed

It also owns the page-level conveniences of the quiz: keyboard shortcuts,
the label of the next button and the progress percentage. Rendering is left
to the front end (see ``src/run.py``).
"""

import logging
from enum import Enum
from typing import Callable, Optional

from .config import config
from .models.catalog import QuestionCatalog
from .models.question import QuestionKind
from .models.quiz_session import AnswerMap, NavigationOutcome, QuizSession
from .scoring.engine import Result, compute_result
from .utils.presenter import FINISH_LABEL, NEXT_LABEL, progress_percent
from .utils.validation import ValidationFailure


logger = logging.getLogger(__name__)

# Keys "1".."4" pick the option at that position
OPTION_KEYS = ("1", "2", "3", "4")


class Page(str, Enum):
    """Page currently shown."""

    LANDING = "landing"
    QUIZ = "quiz"
    RESULTS = "results"


class QuizFlow:
    """
    Page-level controller for one visitor.

    Manages:
    - Landing -> quiz -> results page changes
    - The transition guard around question changes
    - Keyboard navigation
    - Result computation when the quiz completes

    When ``auto_finish_transitions`` is True the guard is cleared as soon as
    a question change is applied. The Gradio UI in ``src/run.py`` uses this
    mode: it re-renders the whole page per event and has no animation
    window. Otherwise the front end must call ``finish_transition()`` when
    its animation ends (``transition_duration_ms`` after the change), and
    every navigation request before that is rejected.
    """

    def __init__(
        self,
        catalog: Optional[QuestionCatalog] = None,
        scorer: Callable[[AnswerMap], Result] = compute_result,
        auto_finish_transitions: bool = True,
    ):
        """
        Initialize the quiz flow.

        Args:
            catalog: Questions to ask (default: built-in catalog)
            scorer: Function turning the answers into a Result
            auto_finish_transitions: Clear the transition guard immediately
        """
        self.session = QuizSession(catalog=catalog)
        self.scorer = scorer
        self.auto_finish_transitions = auto_finish_transitions

        self.page = Page.LANDING
        self.result: Optional[Result] = None
        self.last_failure: Optional[ValidationFailure] = None

    @property
    def catalog(self) -> QuestionCatalog:
        return self.session.catalog

    @property
    def transition_duration_ms(self) -> int:
        """How long the front end keeps the guard set for one question change."""
        return config.ui.transition_total_ms

    # ==================== Page changes ====================

    def start_quiz(self) -> None:
        """Start a new attempt (from the landing page or after the results)."""
        self.session.reset()
        self.result = None
        self.last_failure = None
        self.page = Page.QUIZ

    def restart(self) -> None:
        """Go back to the landing page, discarding the attempt."""
        self.session.reset()
        self.result = None
        self.last_failure = None
        self.page = Page.LANDING

    # ==================== Answers ====================

    def select_option(self, value: str) -> bool:
        """Record a choice for the current question."""
        if self.page != Page.QUIZ:
            return False
        return self.session.record_choice_answer(self.session.current_index, value)

    def submit_input(self, raw_input: Optional[str]) -> Optional[ValidationFailure]:
        """Validate and record numeric input for the current question."""
        if self.page != Page.QUIZ:
            return None
        self.last_failure = self.session.record_numeric_answer(self.session.current_index, raw_input)
        return self.last_failure

    # ==================== Navigation ====================

    def next(self) -> NavigationOutcome:
        """
        Go to the next question, or to the results page after the last one.

        Returns:
            The session's NavigationOutcome (REJECTED outside the quiz page)
        """
        if self.page != Page.QUIZ:
            return NavigationOutcome.REJECTED

        outcome = self.session.advance()

        if outcome == NavigationOutcome.MOVED:
            self._start_transition("next")
        elif outcome == NavigationOutcome.COMPLETED:
            self.result = self.scorer(self.session.answers)
            self.page = Page.RESULTS
            logger.info(
                "Session %s result: +%d cm (%s -> %s)",
                self.session.session_id,
                self.result.potential_increase,
                self.result.current_size,
                self.result.potential_size,
            )

        return outcome

    def previous(self) -> NavigationOutcome:
        """Go back one question."""
        if self.page != Page.QUIZ:
            return NavigationOutcome.REJECTED

        outcome = self.session.retreat()
        if outcome == NavigationOutcome.MOVED:
            self._start_transition("prev")
        return outcome

    def finish_transition(self) -> None:
        """Called by the front end when the question animation has ended."""
        self.session.end_transition()

    def _start_transition(self, direction: str) -> None:
        self.last_failure = None
        self.session.begin_transition()
        logger.debug("Transition %s to question %d", direction, self.session.current_index + 1)
        if self.auto_finish_transitions:
            self.session.end_transition()

    def handle_key(self, key: str) -> bool:
        """
        Apply a keyboard shortcut on the quiz page.

        ArrowLeft/ArrowRight navigate; "1".."4" select the option at that
        position of a choice question.

        Returns:
            True if the key changed the state
        """
        if self.page != Page.QUIZ:
            return False

        if key == "ArrowLeft":
            return self.previous() == NavigationOutcome.MOVED
        if key == "ArrowRight":
            return self.next() != NavigationOutcome.REJECTED

        if key in OPTION_KEYS:
            question = self.session.current_question()
            if question is None or question.kind != QuestionKind.CHOICE:
                return False
            position = int(key) - 1
            if position >= len(question.options):
                return False
            return self.select_option(question.options[position].value)

        return False

    # ==================== Display state ====================

    def next_label(self) -> str:
        return FINISH_LABEL if self.session.is_last_question() else NEXT_LABEL

    def progress_percent(self) -> int:
        return progress_percent(self.session.progress_fraction())
