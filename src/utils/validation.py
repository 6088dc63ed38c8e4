"""
Validation utilities for the quiz engine.

Two kinds of validation live here:
- Numeric answer validation: recoverable failures returned to the caller
  (never raised) so the UI can show feedback and let the user retry.
- Catalog document validation: JSON Schema validation with clear error
  messages, light auto-repair and catalog-specific integrity checks.
"""

import json
import re
from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from jsonschema import Draft7Validator, FormatChecker, ValidationError

if TYPE_CHECKING:
    from ..models.question import NumericValidation


# ASCII base-10 integer or decimal with optional sign ("12", "12.5", ".5", "-3")
_NUMBER_PATTERN = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)$")


class FailureReason(str, Enum):
    """Why a numeric answer was rejected."""

    REQUIRED = "required"
    NOT_A_NUMBER = "not_a_number"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"


@dataclass(frozen=True)
class ValidationFailure:
    """
    A rejected numeric answer.

    Attributes:
        field: Name of the rejected field (e.g. "question-9")
        reason: Which rule rejected it
    """

    field: str
    reason: FailureReason


def parse_number(raw: Optional[str]) -> Optional[float]:
    """
    Parse a base-10 integer or decimal string.

    Args:
        raw: Input text (surrounding whitespace is ignored)

    Returns:
        The parsed value, or None if the text is not a plain decimal number
    """
    if raw is None:
        return None
    text = raw.strip()
    if not _NUMBER_PATTERN.match(text):
        return None
    return float(text)


def validate_numeric_input(
    raw: Optional[str],
    rules: "NumericValidation",
    field: str = "value",
) -> Optional[ValidationFailure]:
    """
    Check raw numeric input against validation rules.

    Rules are evaluated in order and the first match wins: blank input on a
    required field, text that is not a number, value below ``min``, value
    above ``max``. Blank input on an optional field is valid.

    Args:
        raw: Raw input text
        rules: Validation rules of the question
        field: Field name reported in the failure

    Returns:
        None if valid, otherwise a ValidationFailure
    """
    text = (raw or "").strip()

    if not text:
        if rules.required:
            return ValidationFailure(field=field, reason=FailureReason.REQUIRED)
        return None

    value = parse_number(text)
    if value is None:
        return ValidationFailure(field=field, reason=FailureReason.NOT_A_NUMBER)

    if rules.min is not None and value < rules.min:
        return ValidationFailure(field=field, reason=FailureReason.BELOW_MINIMUM)

    if rules.max is not None and value > rules.max:
        return ValidationFailure(field=field, reason=FailureReason.ABOVE_MAXIMUM)

    return None


class ValidationResult:
    """
    Result of a document validation attempt.

    Attributes:
        valid: Whether data passed validation
        errors: List of error messages
        data: The validated data (may be modified if repair was attempted)
        repairs: List of repairs applied (for transparency)
    """

    def __init__(
        self,
        valid: bool,
        errors: list[str],
        data: Any = None,
        repairs: Optional[list[str]] = None,
    ):
        self.valid = valid
        self.errors = errors
        self.data = data
        self.repairs = repairs or []

    def __bool__(self) -> bool:
        """Allow using result in boolean context."""
        return self.valid

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.valid:
            msg = "✓ Validation passed"
            if self.repairs:
                msg += f" (with {len(self.repairs)} repair(s))"
            return msg
        return f"✗ Validation failed with {len(self.errors)} error(s):\n" + "\n".join(
            f"  - {error}" for error in self.errors
        )


class SchemaValidator:
    """
    JSON Schema validator with auto-repair capabilities.

    Usage:
        validator = SchemaValidator("path/to/schema.json")
        result = validator.validate(data)
        if result:
            print("Repairs applied:", result.repairs)
        else:
            print(result.errors)
    """

    def __init__(self, schema_path: Path | str):
        """
        Initialize validator with a schema file.

        Args:
            schema_path: Path to JSON Schema file
        """
        self.schema_path = Path(schema_path)
        with open(self.schema_path, "r", encoding="utf-8") as f:
            self.schema = json.load(f)
        self.validator = Draft7Validator(self.schema, format_checker=FormatChecker())

    def validate(self, data: dict, auto_repair: bool = False) -> ValidationResult:
        """
        Validate data against schema.

        Args:
            data: Data to validate
            auto_repair: If True, attempt to fix common validation errors

        Returns:
            ValidationResult with validation status and any errors
        """
        errors = [self._format_error(error) for error in self.validator.iter_errors(data)]

        if errors:
            if auto_repair:
                repaired_data, repairs = self._attempt_repair(data)
                result = self.validate(repaired_data, auto_repair=False)
                result.repairs = repairs
                return result
            return ValidationResult(valid=False, errors=errors, data=data)

        return ValidationResult(valid=True, errors=[], data=data)

    def _format_error(self, error: ValidationError) -> str:
        """
        Convert ValidationError to human-readable message with details.

        Args:
            error: jsonschema ValidationError

        Returns:
            Formatted error message with validator and schema path
        """
        path = " -> ".join(str(p) for p in error.path) if error.path else "root"
        validator_name = getattr(error, "validator", "unknown")
        schema_path = "/".join(str(p) for p in error.schema_path)
        return (
            f"At '{path}': {error.message} "
            f"[validator={validator_name}, schema_path=/{schema_path}]"
        )

    def _attempt_repair(self, data: dict) -> tuple[dict, list[str]]:
        """
        Attempt to automatically fix common validation errors.

        Args:
            data: Original data

        Returns:
            Tuple of (repaired data, list of repairs applied)
        """
        # Deep copy to prevent mutation of original
        repaired = deepcopy(data)
        repairs: list[str] = []

        self._strip_additional_props(repaired, self.schema, repairs)
        return repaired, repairs

    def _resolve(self, schema: dict) -> dict:
        """Follow a local "#/definitions/..." reference."""
        ref = schema.get("$ref") if isinstance(schema, dict) else None
        if not ref or not ref.startswith("#/"):
            return schema
        node: Any = self.schema
        for part in ref[2:].split("/"):
            node = node[part]
        return node

    def _strip_additional_props(
        self, obj: Any, schema: dict, repairs: list[str], path: str = "root"
    ):
        """
        Recursively remove keys not allowed by schema (additionalProperties: false).

        Args:
            obj: Object to strip (dict or list)
            schema: Schema definition
            repairs: List to append repair messages
            path: Current path (for repair messages)
        """
        schema = self._resolve(schema)
        if not isinstance(schema, dict):
            return

        if isinstance(obj, dict) and "properties" in schema:
            allowed = set(schema.get("properties", {}).keys())
            if schema.get("additionalProperties") is False:
                extra_keys = [k for k in list(obj.keys()) if k not in allowed]
                for k in extra_keys:
                    obj.pop(k, None)
                    repairs.append(f"Removed unknown key '{k}' at {path}")

            for k, subschema in schema.get("properties", {}).items():
                if k in obj:
                    self._strip_additional_props(obj[k], subschema, repairs, f"{path}.{k}")

        if isinstance(obj, list) and "items" in schema:
            for i, item in enumerate(obj):
                self._strip_additional_props(item, schema["items"], repairs, f"{path}[{i}]")


class CatalogValidator(SchemaValidator):
    """
    Validator for question catalog documents.

    Adds catalog checks beyond JSON Schema:
    - Question ids follow catalog order (1, 2, 3, ...)
    - Option values are unique within a question
    - Numeric bounds are ordered (min <= max)
    - String bounds are coerced to numbers during repair
    """

    def __init__(self, schema_path: Optional[Path] = None):
        """
        Initialize catalog validator.

        Args:
            schema_path: Path to schema (uses configured default if None)
        """
        if schema_path is None:
            try:
                from ..config import config
            except ImportError:
                from src.config import config

            schema_path = config.paths.catalog_schema

        super().__init__(schema_path)

    def validate(self, data: dict, auto_repair: bool = False) -> ValidationResult:
        """
        Validate a catalog document with catalog-specific checks.

        Args:
            data: Catalog document
            auto_repair: Whether to attempt automatic repairs

        Returns:
            ValidationResult
        """
        result = super().validate(data, auto_repair=auto_repair)

        if not result.valid:
            return result

        errors = []
        questions = result.data.get("questions", [])

        for position, question in enumerate(questions, start=1):
            if question["id"] != position:
                errors.append(
                    f"Question at position {position} has id {question['id']} "
                    f"(ids must follow catalog order)"
                )

            values = [opt["value"] for opt in question.get("options", []) or []]
            duplicates = sorted({v for v in values if values.count(v) > 1})
            if duplicates:
                errors.append(
                    f"Question {question['id']} has duplicate option values: "
                    f"{', '.join(duplicates)}"
                )

            rules = question.get("validation") or {}
            low, high = rules.get("min"), rules.get("max")
            if low is not None and high is not None and low > high:
                errors.append(f"Question {question['id']} has min ({low}) > max ({high})")

        if errors:
            return ValidationResult(
                valid=False, errors=errors, data=result.data, repairs=result.repairs
            )

        return ValidationResult(valid=True, errors=[], data=result.data, repairs=result.repairs)

    def _attempt_repair(self, data: dict) -> tuple[dict, list[str]]:
        """Strip unknown keys and coerce numeric bounds given as strings."""
        repaired, repairs = super()._attempt_repair(data)

        for question in repaired.get("questions", []) or []:
            if not isinstance(question, dict):
                continue
            rules = question.get("validation")
            if not isinstance(rules, dict):
                continue
            for bound in ("min", "max"):
                value = rules.get(bound)
                if isinstance(value, str):
                    coerced = parse_number(value)
                    if coerced is not None:
                        rules[bound] = coerced
                        repairs.append(
                            f"Coerced question {question.get('id')} {bound}: '{value}' → {coerced}"
                        )

        return repaired, repairs


def validate_catalog(data: dict, auto_repair: bool = False) -> ValidationResult:
    """
    Quick validation of a catalog document.

    Args:
        data: Catalog dictionary to validate
        auto_repair: Whether to attempt automatic repairs

    Returns:
        ValidationResult

    Example:
        result = validate_catalog(document)
        if result:
            print("Valid catalog!")
        else:
            print("Errors:", result.errors)
    """
    validator = CatalogValidator()
    return validator.validate(data, auto_repair=auto_repair)
