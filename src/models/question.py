"""
Question definitions for the quiz catalog.

A question is either a discrete choice between options or a free numeric
entry checked against validation rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class QuestionKind(str, Enum):
    """Kind of answer a question expects."""

    CHOICE = "choice"
    NUMERIC_INPUT = "numericInput"


@dataclass(frozen=True)
class AnswerOption:
    """One selectable answer of a choice question."""

    value: str
    label: str


@dataclass(frozen=True)
class NumericValidation:
    """
    Rules for a numeric input question.

    Attributes:
        required: Whether blank input is rejected
        min: Inclusive lower bound (None = unbounded)
        max: Inclusive upper bound (None = unbounded)
    """

    required: bool = False
    min: Optional[float] = None
    max: Optional[float] = None

    def __post_init__(self):
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")


@dataclass(frozen=True)
class InputWarning:
    """Notice shown above a numeric input."""

    title: str
    text: str


@dataclass(frozen=True)
class Question:
    """
    A single quiz question.

    Attributes:
        id: 1-based position in the catalog
        prompt: Question text
        kind: Choice or numeric input
        options: Options for choice questions
        validation: Rules for numeric input questions
        placeholder: Input placeholder text
        help_text: Hint shown under a numeric input
        warning: Notice shown above a numeric input
    """

    id: int
    prompt: str
    kind: QuestionKind
    options: Optional[Tuple[AnswerOption, ...]] = None
    validation: Optional[NumericValidation] = None
    placeholder: Optional[str] = None
    help_text: Optional[str] = None
    warning: Optional[InputWarning] = None

    def __post_init__(self):
        """
        Validate question integrity.

        Raises:
            ValueError: If options/validation do not match the question kind
        """
        if self.id < 1:
            raise ValueError(f"Question id must be >= 1, got {self.id}")

        if self.kind == QuestionKind.CHOICE:
            if not self.options:
                raise ValueError(f"Choice question {self.id} must have options")
            if self.validation is not None:
                raise ValueError(f"Choice question {self.id} cannot have validation rules")

            values = [opt.value for opt in self.options]
            if len(set(values)) != len(values):
                raise ValueError(f"Choice question {self.id} has duplicate option values")

        elif self.kind == QuestionKind.NUMERIC_INPUT:
            if self.validation is None:
                raise ValueError(f"Numeric question {self.id} must have validation rules")
            if self.options:
                raise ValueError(f"Numeric question {self.id} cannot have options")

    @property
    def is_choice(self) -> bool:
        return self.kind == QuestionKind.CHOICE

    def option_values(self) -> Tuple[str, ...]:
        """Option values in display order (empty for numeric questions)."""
        return tuple(opt.value for opt in self.options or ())

    def has_option(self, value: str) -> bool:
        return value in self.option_values()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        """Build a question from a catalog document entry."""
        options = None
        if data.get("options") is not None:
            options = tuple(
                AnswerOption(value=opt["value"], label=opt["label"])
                for opt in data["options"]
            )

        validation = None
        if data.get("validation") is not None:
            rules = data["validation"]
            validation = NumericValidation(
                required=rules.get("required", False),
                min=rules.get("min"),
                max=rules.get("max"),
            )

        warning = None
        if data.get("warning") is not None:
            warning = InputWarning(title=data["warning"]["title"], text=data["warning"]["text"])

        return cls(
            id=data["id"],
            prompt=data["prompt"],
            kind=QuestionKind(data["kind"]),
            options=options,
            validation=validation,
            placeholder=data.get("placeholder"),
            help_text=data.get("help_text"),
            warning=warning,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (catalog document format)."""
        data: Dict[str, Any] = {
            "id": self.id,
            "prompt": self.prompt,
            "kind": self.kind.value,
        }
        if self.options is not None:
            data["options"] = [{"value": o.value, "label": o.label} for o in self.options]
        if self.validation is not None:
            rules: Dict[str, Any] = {"required": self.validation.required}
            if self.validation.min is not None:
                rules["min"] = self.validation.min
            if self.validation.max is not None:
                rules["max"] = self.validation.max
            data["validation"] = rules
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        if self.help_text is not None:
            data["help_text"] = self.help_text
        if self.warning is not None:
            data["warning"] = {"title": self.warning.title, "text": self.warning.text}
        return data
