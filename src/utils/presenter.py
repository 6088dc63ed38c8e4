"""
Display text for the quiz pages.

Turns questions, validation failures and results into the Portuguese copy
of the published quiz, formatted as Markdown for the front end.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Optional

from .validation import FailureReason, ValidationFailure

if TYPE_CHECKING:
    from ..models.question import NumericValidation, Question
    from ..scoring.engine import Result


NEXT_LABEL = "Próximo"
FINISH_LABEL = "Analisar Resultados"


def _format_number(value: float) -> str:
    """13.0 -> "13", 12.5 -> "12.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(float(value))


def progress_percent(fraction: float) -> int:
    """Fraction in (0, 1] as a whole percentage, rounded half-up."""
    return int(Decimal(str(fraction * 100)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_size(value: float) -> str:
    return f"{_format_number(value)}cm"


def validation_message(failure: Optional[ValidationFailure], rules: Optional["NumericValidation"] = None) -> str:
    """
    User-facing message for a rejected numeric answer.

    Args:
        failure: The failure (None gives an empty message)
        rules: Rules of the question, used to quote the bounds

    Returns:
        Message text
    """
    if failure is None:
        return ""

    if failure.reason == FailureReason.REQUIRED:
        return "Este campo é obrigatório"
    if failure.reason == FailureReason.NOT_A_NUMBER:
        return "Por favor, digite um número válido"
    if failure.reason == FailureReason.BELOW_MINIMUM:
        bound = _format_number(rules.min) if rules and rules.min is not None else ""
        return f"O valor deve ser maior que {bound}".rstrip()
    if failure.reason == FailureReason.ABOVE_MAXIMUM:
        bound = _format_number(rules.max) if rules and rules.max is not None else ""
        return f"O valor deve ser menor que {bound}".rstrip()
    return ""


def format_question(question: "Question", index: int, total: int, answer: Optional[str] = None) -> str:
    """Format a question for display with the progress header at top."""
    if question is None:
        return "Nenhuma pergunta disponível"

    progress_pct = progress_percent((index + 1) / total)

    output = (
        f"## Pergunta {index + 1} de {total}\n"
        f"**Progresso**: {progress_pct}%\n\n"
        "---\n\n"
        f"### {question.prompt}\n\n"
    )

    if question.options:
        for position, opt in enumerate(question.options, start=1):
            marker = "●" if opt.value == answer else "○"
            output += f"{marker} **{position}**. {opt.label}\n"
        return output

    if question.warning:
        output += f"> **{question.warning.title}** {question.warning.text}\n\n"
    if question.help_text:
        output += f"*{question.help_text}*\n"
    return output


def format_result(result: "Result") -> str:
    """Markdown for the results card."""
    return (
        "## Seu Resultado Personalizado\n\n"
        f"### Aumento potencial: +{format_size(result.potential_increase)}\n\n"
        f"- **Tamanho atual**: {format_size(result.current_size)}\n"
        f"- **Tamanho potencial**: {format_size(result.potential_size)}\n"
        f"- **Taxa de sucesso**: {result.success_rate}%\n"
        f"- **Tempo necessário**: {result.time_required} minutos por dia\n"
        f"- **Duração do programa**: {result.program_duration} dias\n"
    )
