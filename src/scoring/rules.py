"""
Scoring rules - the declarative tables behind the result formula.

Keys are answer indices of the built-in catalog and option values of the
matching questions.
"""

from typing import Dict, Tuple

# Answer index of the size category question ("Qual é o tamanho aproximado...")
SIZE_CATEGORY_INDEX = 0

# Answer index of the numeric size question ("Qual é o tamanho atual...")
CURRENT_SIZE_INDEX = 8

# Starting increase per size category
SIZE_CATEGORY_BASE: Dict[str, float] = {
    "menos-12": 8,
    "12-14": 7,
    "14-16": 6,
    "mais-16": 5,
}

# (answer index, factor name, option value -> delta), applied in this order.
# Options missing from a table contribute zero.
ADJUSTMENT_TABLE: Tuple[Tuple[int, str, Dict[str, float]], ...] = (
    (1, "masturbation_frequency", {"mais-uma-vez": -1, "raramente": +1}),
    (2, "morning_erections", {"quase-nunca": -1, "quase-sempre": +1}),
    # "ouvi-nunca-tentei" and "tentei-sem-constancia" carry no adjustment
    (3, "previous_attempts", {"sim-disciplina": +1, "nunca-ouvi": +0.5}),
    (4, "diet", {"processada": -1, "natural-equilibrada": +1}),
    (5, "sleep", {"menos-5": -1, "8-mais": +1}),
    (6, "physical_activity", {"nunca": -1, "4-mais": +1}),
    (7, "age", {"12-18": +1, "mais-36": -0.5}),
)
