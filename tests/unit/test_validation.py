"""
Unit tests for validation utilities.

Tests numeric answer rules (precedence, parsing) and catalog schema
validation with repairs.
"""

import pytest

from src.models.question import NumericValidation
from src.utils.validation import (
    CatalogValidator,
    FailureReason,
    ValidationResult,
    parse_number,
    validate_catalog,
    validate_numeric_input,
)


SIZE_RULES = NumericValidation(required=True, min=1, max=50)


class TestParseNumber:
    """Test suite for parse_number."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("12", 12.0),
            ("12.5", 12.5),
            (" 7 ", 7.0),
            (".5", 0.5),
            ("-3", -3.0),
            ("+4", 4.0),
            ("0", 0.0),
        ],
    )
    def test_valid_numbers(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "12abc", "1e3", "nan", "inf", "1,5", "--1", "１３", "١٣", None])
    def test_invalid_numbers(self, raw):
        assert parse_number(raw) is None


class TestValidateNumericInput:
    """Test suite for validate_numeric_input."""

    def test_empty_required(self):
        failure = validate_numeric_input("", SIZE_RULES, field="size")
        assert failure.reason == FailureReason.REQUIRED
        assert failure.field == "size"

    def test_blank_required(self):
        assert validate_numeric_input("   ", SIZE_RULES).reason == FailureReason.REQUIRED

    def test_none_required(self):
        assert validate_numeric_input(None, SIZE_RULES).reason == FailureReason.REQUIRED

    def test_empty_optional_is_valid(self):
        assert validate_numeric_input("", NumericValidation(required=False, min=1)) is None

    def test_not_a_number(self):
        assert validate_numeric_input("abc", SIZE_RULES).reason == FailureReason.NOT_A_NUMBER

    def test_below_minimum(self):
        assert validate_numeric_input("0", SIZE_RULES).reason == FailureReason.BELOW_MINIMUM

    def test_above_maximum(self):
        assert validate_numeric_input("999", NumericValidation(required=True, max=50)).reason == (
            FailureReason.ABOVE_MAXIMUM
        )

    def test_within_bounds(self):
        assert validate_numeric_input("25", SIZE_RULES) is None

    def test_bounds_are_inclusive(self):
        assert validate_numeric_input("1", SIZE_RULES) is None
        assert validate_numeric_input("50", SIZE_RULES) is None

    def test_not_a_number_wins_over_bounds(self):
        # "-abc" is neither a number nor comparable to min
        assert validate_numeric_input("-abc", SIZE_RULES).reason == FailureReason.NOT_A_NUMBER

    def test_unbounded_rules(self):
        assert validate_numeric_input("-1000", NumericValidation(required=True)) is None


class TestValidationResult:
    """Test suite for ValidationResult."""

    def test_bool(self):
        assert ValidationResult(valid=True, errors=[])
        assert not ValidationResult(valid=False, errors=["bad"])

    def test_str_lists_errors(self):
        text = str(ValidationResult(valid=False, errors=["first", "second"]))
        assert "2 error(s)" in text
        assert "first" in text


class TestCatalogValidator:
    """Test suite for CatalogValidator."""

    def test_valid_document(self, catalog_document):
        result = CatalogValidator().validate(catalog_document)
        assert result.valid
        assert result.errors == []

    def test_missing_questions(self):
        result = validate_catalog({"meta": {"schema_version": 1}})
        assert not result.valid
        assert any("questions" in error for error in result.errors)

    def test_choice_without_options(self, catalog_document):
        del catalog_document["questions"][0]["options"]
        assert not validate_catalog(catalog_document).valid

    def test_numeric_with_options(self, catalog_document):
        catalog_document["questions"][1]["options"] = [{"value": "x", "label": "X"}]
        assert not validate_catalog(catalog_document).valid

    def test_duplicate_option_values(self, catalog_document):
        catalog_document["questions"][0]["options"][1]["value"] = "a"
        result = validate_catalog(catalog_document)
        assert not result.valid
        assert any("duplicate option values" in error for error in result.errors)

    def test_min_greater_than_max(self, catalog_document):
        catalog_document["questions"][1]["validation"] = {"min": 60, "max": 50, "required": True}
        result = validate_catalog(catalog_document)
        assert not result.valid
        assert any("min (60) > max (50)" in error for error in result.errors)

    def test_repair_coerces_string_bounds(self, catalog_document):
        catalog_document["questions"][1]["validation"]["min"] = "1"
        result = validate_catalog(catalog_document, auto_repair=True)
        assert result.valid
        assert result.data["questions"][1]["validation"]["min"] == 1.0
        assert any("Coerced" in repair for repair in result.repairs)

    def test_repair_does_not_mutate_input(self, catalog_document):
        catalog_document["extra"] = True
        result = validate_catalog(catalog_document, auto_repair=True)
        assert result.valid
        assert "extra" in catalog_document
        assert "extra" not in result.data
