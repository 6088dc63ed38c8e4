"""
Unit tests for questions and the question catalog.

Tests:
- Question kind invariants
- Catalog bounds and lookups
- Built-in catalog content
- Loading catalogs from documents
"""

import json

import pytest

from src.models.catalog import CatalogError, QuestionCatalog, default_catalog, load_catalog
from src.models.question import AnswerOption, NumericValidation, Question, QuestionKind


class TestQuestion:
    """Test suite for Question."""

    def test_choice_question_requires_options(self):
        with pytest.raises(ValueError, match="must have options"):
            Question(id=1, prompt="?", kind=QuestionKind.CHOICE)

    def test_choice_question_rejects_validation(self):
        with pytest.raises(ValueError, match="cannot have validation"):
            Question(
                id=1,
                prompt="?",
                kind=QuestionKind.CHOICE,
                options=(AnswerOption("a", "A"),),
                validation=NumericValidation(required=True),
            )

    def test_choice_question_rejects_duplicate_values(self):
        with pytest.raises(ValueError, match="duplicate"):
            Question(
                id=1,
                prompt="?",
                kind=QuestionKind.CHOICE,
                options=(AnswerOption("a", "A"), AnswerOption("a", "Again")),
            )

    def test_numeric_question_requires_validation(self):
        with pytest.raises(ValueError, match="must have validation"):
            Question(id=1, prompt="?", kind=QuestionKind.NUMERIC_INPUT)

    def test_numeric_question_rejects_options(self):
        with pytest.raises(ValueError, match="cannot have options"):
            Question(
                id=1,
                prompt="?",
                kind=QuestionKind.NUMERIC_INPUT,
                options=(AnswerOption("a", "A"),),
                validation=NumericValidation(),
            )

    def test_validation_bounds_must_be_ordered(self):
        with pytest.raises(ValueError):
            NumericValidation(min=10, max=1)

    def test_has_option(self):
        question = default_catalog().get(0)
        assert question.has_option("menos-12")
        assert not question.has_option("menos-10")

    def test_dict_conversion_keeps_fields(self):
        question = default_catalog().get(8)
        rebuilt = Question.from_dict(question.to_dict())
        assert rebuilt == question


class TestQuestionCatalog:
    """Test suite for QuestionCatalog."""

    def test_length(self, catalog):
        assert catalog.length() == 9
        assert len(catalog) == 9

    def test_get_returns_question_with_matching_id(self, catalog):
        for index in range(catalog.length()):
            assert catalog.get(index).id == index + 1

    @pytest.mark.parametrize("index", [-1, 9, 100, None, "0", 1.0, True])
    def test_get_out_of_range_returns_none(self, catalog, index):
        assert catalog.get(index) is None

    def test_iteration_follows_order(self, catalog):
        assert [q.id for q in catalog] == list(range(1, 10))

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError, match="at least one"):
            QuestionCatalog([])

    def test_ids_must_follow_order(self):
        question = Question(id=2, prompt="?", kind=QuestionKind.NUMERIC_INPUT, validation=NumericValidation())
        with pytest.raises(ValueError, match="expected 1"):
            QuestionCatalog([question])

    def test_builtin_kinds(self, catalog):
        kinds = [q.kind for q in catalog]
        assert kinds[:8] == [QuestionKind.CHOICE] * 8
        assert kinds[8] == QuestionKind.NUMERIC_INPUT

    def test_builtin_size_question_rules(self, catalog):
        rules = catalog.get(8).validation
        assert rules.required is True
        assert rules.min == 1
        assert rules.max == 50

    def test_builtin_choice_questions_have_four_options(self, catalog):
        for question in list(catalog)[:8]:
            assert len(question.options) == 4


class TestCatalogLoading:
    """Test suite for loading catalogs from documents."""

    def test_from_dict(self, catalog_document):
        catalog = QuestionCatalog.from_dict(catalog_document)
        assert catalog.length() == 2
        assert catalog.get(0).option_values() == ("a", "b")
        assert catalog.get(1).validation.max == 50
        assert catalog.get(1).help_text == "Between 1 and 50"

    def test_from_dict_rejects_invalid_document(self, catalog_document):
        catalog_document["questions"][0]["kind"] = "essay"
        with pytest.raises(CatalogError) as exc_info:
            QuestionCatalog.from_dict(catalog_document)
        assert exc_info.value.errors

    def test_from_dict_rejects_out_of_order_ids(self, catalog_document):
        catalog_document["questions"][1]["id"] = 5
        with pytest.raises(CatalogError, match="catalog order"):
            QuestionCatalog.from_dict(catalog_document)

    def test_from_dict_auto_repair_strips_unknown_keys(self, catalog_document):
        catalog_document["questions"][0]["color"] = "red"
        catalog = QuestionCatalog.from_dict(catalog_document, auto_repair=True)
        assert catalog.length() == 2

    def test_round_trip_of_builtin_catalog(self):
        catalog = QuestionCatalog.from_dict(default_catalog().to_dict())
        assert list(catalog) == list(default_catalog())

    def test_from_json(self, tmp_path, catalog_document):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(catalog_document), encoding="utf-8")
        catalog = QuestionCatalog.from_json(path)
        assert catalog.get(0).prompt == "Pick one"

    def test_load_catalog_with_path(self, tmp_path, catalog_document):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(catalog_document), encoding="utf-8")
        assert load_catalog(path).length() == 2

    def test_load_catalog_defaults_to_builtin(self, monkeypatch):
        from src.config import config

        monkeypatch.setattr(config.paths, "catalog_file", None)
        assert load_catalog().length() == 9
