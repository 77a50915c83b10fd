"""
Validation layer module.

This module checks built schema documents against the JSON Schema Draft 7
meta-schema, providing detailed error reporting for debugging. It does not
validate data instances against the built schemas.

Components:
    - validator: Meta-schema check using the jsonschema library

Check Flow:
    1. Materialize the builder (or parse JSON text)
    2. Check against the Draft 7 meta-schema using jsonschema
    3. Collect all violations (not just the first one)
    4. Format violations with context (path, expected, actual value)

Example:
    ```python
    from schemasmith import schema
    from schemasmith.validation import check_schema, format_validation_errors

    result = check_schema(schema.integer().attr("type", "int"))
    if not result.is_valid:
        print(format_validation_errors(result.errors))
    ```
"""

from schemasmith.validation.validator import (
    check_schema,
    check_schema_json,
    is_valid_schema,
    ValidationResult,
    ValidationError,
    format_validation_errors
)

__all__ = [
    "check_schema",
    "check_schema_json",
    "is_valid_schema",
    "ValidationResult",
    "ValidationError",
    "format_validation_errors",
]
