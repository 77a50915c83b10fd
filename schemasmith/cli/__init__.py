"""
Command-line interface module.

This module provides a rich terminal interface for SchemaSmith using Typer and Rich.

Commands:
    - render: Materialize a builder defined in a Python module
    - check: Check a JSON schema file against the Draft 7 meta-schema

Features:
    - Syntax-highlighted JSON output
    - Property summary table
    - Colored error messages with paths

Example Usage:
    ```bash
    # Print a schema built in models/user.py
    schemasmith render models.user:user_schema

    # Save it and check it
    schemasmith render models.user:build_user \\
        --output user.schema.json \\
        --indent 4 \\
        --check

    # Check an existing file
    schemasmith check --schema user.schema.json
    ```
"""

from .main import app

__all__ = ["app"]
