"""
Shared pytest fixtures and configuration for the quiz engine tests.

This file is automatically discovered by pytest and provides
fixtures available to all tests.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def catalog():
    """
    Fixture providing the built-in catalog.

    Returns:
        QuestionCatalog: the nine published questions
    """
    from src.models.catalog import default_catalog

    return default_catalog()


@pytest.fixture
def session(catalog):
    """
    Fixture providing a freshly reset session.

    Returns:
        QuizSession: positioned at the first question, no answers
    """
    from src.models.quiz_session import QuizSession

    quiz = QuizSession(catalog=catalog)
    quiz.reset()
    return quiz


@pytest.fixture
def best_case_answers():
    """
    Fixture providing answers that trigger every positive adjustment.

    Returns:
        dict: complete answer map (base 8 + 7 = 15 before clamping)
    """
    return {
        0: "menos-12",
        1: "raramente",
        2: "quase-sempre",
        3: "sim-disciplina",
        4: "natural-equilibrada",
        5: "8-mais",
        6: "4-mais",
        7: "12-18",
        8: "13",
    }


@pytest.fixture
def worst_case_answers():
    """
    Fixture providing answers that trigger every negative adjustment.

    Returns:
        dict: answer map without the size answer (index 8)
    """
    return {
        0: "mais-16",
        1: "mais-uma-vez",
        2: "quase-nunca",
        3: "ouvi-nunca-tentei",
        4: "processada",
        5: "menos-5",
        6: "nunca",
        7: "mais-36",
    }


@pytest.fixture
def catalog_document():
    """
    Fixture providing a small valid catalog document.

    Returns:
        dict: two questions, one of each kind
    """
    return {
        "meta": {"schema_version": 1, "title": "pytest"},
        "questions": [
            {
                "id": 1,
                "prompt": "Pick one",
                "kind": "choice",
                "options": [
                    {"value": "a", "label": "Option A"},
                    {"value": "b", "label": "Option B"},
                ],
            },
            {
                "id": 2,
                "prompt": "How many?",
                "kind": "numericInput",
                "validation": {"min": 1, "max": 50, "required": True},
                "help_text": "Between 1 and 50",
            },
        ],
    }


# Pytest hooks for better test output


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
