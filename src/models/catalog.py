"""
Question catalog - the fixed, ordered list of quiz questions.

The built-in catalog holds the nine questions of the published quiz. A
catalog can also be loaded from a JSON document that passes
``schemas/question_catalog.schema.json``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple

from .question import AnswerOption, InputWarning, NumericValidation, Question, QuestionKind

try:
    from ..utils.validation import CatalogValidator
except ImportError:
    from src.utils.validation import CatalogValidator


logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """A catalog document failed validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            f"Invalid question catalog ({len(errors)} error(s)):\n"
            + "\n".join(f"  - {error}" for error in errors)
        )


class QuestionCatalog:
    """
    Immutable ordered sequence of questions.

    Indices are 0-based; question ids are 1-based and equal ``index + 1``.
    Out-of-range lookups return None rather than raising.
    """

    def __init__(self, questions: Sequence[Question]):
        """
        Initialize catalog.

        Args:
            questions: Questions in display order

        Raises:
            ValueError: If the sequence is empty or ids do not follow order
        """
        if not questions:
            raise ValueError("Catalog must contain at least one question")

        for index, question in enumerate(questions):
            if question.id != index + 1:
                raise ValueError(
                    f"Question at index {index} has id {question.id}, expected {index + 1}"
                )

        self._questions: Tuple[Question, ...] = tuple(questions)

    def length(self) -> int:
        """Number of questions."""
        return len(self._questions)

    def get(self, index: Any) -> Optional[Question]:
        """Question at ``index``, or None when out of range."""
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if 0 <= index < len(self._questions):
            return self._questions[index]
        return None

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __repr__(self) -> str:
        return f"QuestionCatalog({len(self._questions)} questions)"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a catalog document."""
        return {
            "meta": {"schema_version": 1},
            "questions": [q.to_dict() for q in self._questions],
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        validator: Optional[CatalogValidator] = None,
        auto_repair: bool = False,
    ) -> "QuestionCatalog":
        """
        Build a catalog from a validated document.

        Args:
            data: Catalog document
            validator: Validator to use (default: CatalogValidator())
            auto_repair: Whether to let the validator repair common issues

        Returns:
            QuestionCatalog

        Raises:
            CatalogError: If the document fails validation
        """
        validator = validator or CatalogValidator()
        result = validator.validate(data, auto_repair=auto_repair)
        if not result.valid:
            raise CatalogError(result.errors)

        for repair in result.repairs:
            logger.info("Catalog repair: %s", repair)

        return cls([Question.from_dict(q) for q in result.data["questions"]])

    @classmethod
    def from_json(cls, path: Path | str, **kwargs) -> "QuestionCatalog":
        """
        Load a catalog from a JSON file.

        Raises:
            CatalogError: If the document fails validation
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        catalog = cls.from_dict(data, **kwargs)
        logger.info("Loaded %d questions from %s", len(catalog), path)
        return catalog


def _choice(question_id: int, prompt: str, *options: Tuple[str, str]) -> Question:
    return Question(
        id=question_id,
        prompt=prompt,
        kind=QuestionKind.CHOICE,
        options=tuple(AnswerOption(value=value, label=label) for value, label in options),
    )


DEFAULT_QUESTIONS: Tuple[Question, ...] = (
    _choice(
        1,
        "Qual é o tamanho aproximado do seu cajado ereto?",
        ("menos-12", "Menos de 12 cm"),
        ("12-14", "De 12 a 14 cm"),
        ("14-16", "De 14 a 16 cm"),
        ("mais-16", "Mais de 16 cm"),
    ),
    _choice(
        2,
        "Com que frequência você se masturba?",
        ("mais-uma-vez", "Mais de uma vez por dia"),
        ("todos-dias", "Todos os dias"),
        ("2-4-semana", "De 2 a 4 vezes por semana"),
        ("raramente", "Raramente"),
    ),
    _choice(
        3,
        "Você costuma acordar com o cajado ereto?",
        ("quase-nunca", "Quase nunca"),
        ("raramente", "Raramente"),
        ("as-vezes", "Às vezes"),
        ("quase-sempre", "Quase sempre"),
    ),
    _choice(
        4,
        "Você já tentou algum método natural para aumentar o cajado?",
        ("nunca-ouvi", "Nunca ouvi falar"),
        ("ouvi-nunca-tentei", "Já ouvi falar, mas nunca tentei"),
        ("tentei-sem-constancia", "Já tentei, mas sem constância"),
        ("sim-disciplina", "Sim, fiz com disciplina"),
    ),
    _choice(
        5,
        "Como é sua dieta diária?",
        ("processada", "Apenas comida processada (refrigerantes, fast food, doces)"),
        ("50-50", "50% comida processada, 50% saudável"),
        ("bem-maioria", "Tento comer bem na maioria das refeições"),
        ("natural-equilibrada", "Dieta natural e equilibrada"),
    ),
    _choice(
        6,
        "Quantas horas você dorme por noite?",
        ("menos-5", "Menos de 5 horas"),
        ("5-6", "De 5 a 6 horas"),
        ("6-7", "De 6 a 7 horas"),
        ("8-mais", "8 horas ou mais"),
    ),
    _choice(
        7,
        "Você pratica atividade física?",
        ("nunca", "Nunca"),
        ("uma-semana", "Uma vez por semana ou menos"),
        ("2-3-semana", "De 2 a 3 vezes por semana"),
        ("4-mais", "4 vezes por semana ou mais"),
    ),
    _choice(
        8,
        "Qual é a sua idade?",
        ("12-18", "Entre 12 e 18 anos"),
        ("19-27", "Entre 19 e 27 anos"),
        ("28-36", "Entre 28 e 36 anos"),
        ("mais-36", "Mais de 36 anos"),
    ),
    Question(
        id=9,
        prompt="Qual é o tamanho atual do seu cajado em ereção?",
        kind=QuestionKind.NUMERIC_INPUT,
        validation=NumericValidation(required=True, min=1, max=50),
        placeholder="Digite o tamanho em cm",
        help_text="Digite um valor entre 1 e 50 centímetros",
        warning=InputWarning(
            title="Importante:",
            text=(
                "Esta informação é completamente confidencial e é utilizada "
                "apenas para criar seu protocolo personalizado."
            ),
        ),
    ),
)


def default_catalog() -> QuestionCatalog:
    """Catalog with the built-in questions."""
    return QuestionCatalog(DEFAULT_QUESTIONS)


def load_catalog(path: Optional[Path | str] = None) -> QuestionCatalog:
    """
    Load the configured catalog.

    Args:
        path: Catalog document (default: config.paths.catalog_file)

    Returns:
        Catalog from the document, or the built-in catalog if none is configured
    """
    if path is None:
        try:
            from ..config import config
        except ImportError:
            from src.config import config

        path = config.paths.catalog_file

    if path is None:
        return default_catalog()
    return QuestionCatalog.from_json(path)
