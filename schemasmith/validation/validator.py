"""
Meta-schema checks for built JSON Schema documents.

The builder never validates its own inputs: pattern() on an integer node or a
negative min() on a string happily end up in the output. This module checks a
materialized document against the JSON Schema Draft 7 meta-schema so such
mistakes can be caught before the document is shipped.

Usage:
    ```python
    from schemasmith import schema
    from schemasmith.validation import check_schema

    doc = schema.string().min(-1)

    result = check_schema(doc)
    if not result.is_valid:
        for error in result.errors:
            print(f"Error at {error.path}: {error.message}")
    ```
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """
    Represents a single meta-schema violation.

    Attributes:
        path: Path to the offending keyword in the document (e.g., ".properties.age.minimum")
        message: Human-readable error message
        schema_path: Path in the meta-schema that failed
        validator: Meta-schema keyword that failed (e.g., "type", "minimum")
        expected: What was expected
        actual: What was found
    """
    path: str
    message: str
    schema_path: str
    validator: str
    expected: Any
    actual: Any


@dataclass
class ValidationResult:
    """
    Result of checking a document against the meta-schema.

    Attributes:
        is_valid: Whether the document is a valid Draft 7 schema
        errors: List of violations (empty if valid)
        document: The checked document (None if the input could not be parsed)
    """
    is_valid: bool
    errors: List[ValidationError]
    document: Optional[Any]


def check_schema(document: Any) -> ValidationResult:
    """
    Check a schema document against the Draft 7 meta-schema.

    Args:
        document: A plain schema dict, or a SchemaNode/SchemaJoin (materialized first)

    Returns:
        ValidationResult: Result with every violation found

    Example:
        ```python
        result = check_schema({"type": "string", "minLength": 3})
        assert result.is_valid

        result = check_schema({"type": "strnig"})
        assert not result.is_valid
        ```
    """
    if hasattr(document, "materialize"):
        document = document.materialize()

    try:
        from jsonschema import Draft7Validator
    except ImportError:
        raise ImportError(
            "jsonschema is required. Install with: pip install jsonschema"
        )

    meta_validator = Draft7Validator(Draft7Validator.META_SCHEMA)

    errors = [
        _convert_jsonschema_error(error, document)
        for error in meta_validator.iter_errors(document)
    ]

    logger.debug(f"Meta-schema check found {len(errors)} error(s)")

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        document=document
    )


def check_schema_json(text: str) -> ValidationResult:
    """
    Parse a JSON string and check it against the Draft 7 meta-schema.

    Args:
        text: JSON text of a schema document

    Returns:
        ValidationResult: Parse failures are reported as a single "json" error
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        return ValidationResult(
            is_valid=False,
            errors=[
                ValidationError(
                    path="",
                    message=f"Invalid JSON: {e.msg}",
                    schema_path="",
                    validator="json",
                    expected="valid JSON",
                    actual=f"parse error at position {e.pos}"
                )
            ],
            document=None
        )

    return check_schema(document)


def _convert_jsonschema_error(error: Any, data: Any) -> ValidationError:
    """
    Convert a jsonschema error to our ValidationError.

    Args:
        error: jsonschema ValidationError
        data: The document being checked

    Returns:
        ValidationError: Our error representation
    """
    path = "." + ".".join(str(p) for p in error.path) if error.path else "root"

    actual = data
    for key in error.path:
        if isinstance(actual, dict):
            actual = actual.get(key, "MISSING")
        elif isinstance(actual, list):
            try:
                actual = actual[int(key)]
            except (IndexError, ValueError):
                actual = "INVALID_INDEX"
        else:
            actual = "UNKNOWN"

    schema_path = "." + ".".join(str(p) for p in error.schema_path) if error.schema_path else "root"

    expected = error.schema.get(error.validator, "see meta-schema") if isinstance(error.schema, dict) else "see meta-schema"

    return ValidationError(
        path=path,
        message=error.message,
        schema_path=schema_path,
        validator=error.validator,
        expected=expected,
        actual=actual
    )


def format_validation_errors(errors: List[ValidationError]) -> str:
    """
    Format meta-schema violations as a human-readable string.

    Args:
        errors: List of validation errors

    Returns:
        str: Formatted error message

    Example:
        ```python
        result = check_schema({"type": "string", "minLength": -1})
        print(format_validation_errors(result.errors))
        # Schema check failed with 1 error(s):
        #   1. At .minLength: -1 is less than the minimum of 0
        #      Expected: 0
        #      Got: -1
        ```
    """
    if not errors:
        return "No validation errors"

    lines = [f"Schema check failed with {len(errors)} error(s):"]

    for i, error in enumerate(errors, 1):
        lines.append(f"\n  {i}. At {error.path}: {error.message}")
        lines.append(f"     Expected: {error.expected}")
        lines.append(f"     Got: {error.actual}")

    return "\n".join(lines)


def is_valid_schema(document: Any) -> bool:
    """
    Quick check - just returns True/False.

    Args:
        document: Schema dict, SchemaNode or SchemaJoin

    Returns:
        bool: True if the document is a valid Draft 7 schema
    """
    return check_schema(document).is_valid
