"""
CLI command implementations.

This module contains the business logic for each CLI command:
- render: Materialize a builder defined in a Python module
- check: Check a JSON schema file against the Draft 7 meta-schema
"""

import importlib
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from schemasmith.builder import SchemaJoin, SchemaNode
from schemasmith.validation import check_schema, check_schema_json

from .display import (
    print_header,
    print_success,
    print_info,
    print_json,
    print_schema,
    print_validation_errors,
    print_property_table,
)

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2


def load_schema_file(schema_path: Path) -> str:
    """
    Read a JSON schema file.

    Args:
        schema_path: Path to schema JSON file

    Returns:
        The file contents

    Raises:
        ValueError: If file doesn't exist or can't be read
    """
    if not schema_path.exists():
        raise ValueError(f"Schema file not found: {schema_path}")

    try:
        return schema_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Could not read schema file {schema_path}: {e}")


def load_builder(target: str, app_dir: Optional[Path] = None) -> Union[SchemaNode, SchemaJoin]:
    """
    Import a builder from a 'package.module:attribute' location.

    The attribute may be a SchemaNode, a SchemaJoin, or a zero-argument
    callable returning one.

    Args:
        target: Location of the builder
        app_dir: Directory to put on sys.path before importing

    Returns:
        The builder found at target

    Raises:
        ValueError: If the target is malformed, missing, or not a builder
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Target must look like 'package.module:attribute', got: {target}")

    if app_dir is not None:
        app_path = str(app_dir.resolve())
        if app_path not in sys.path:
            sys.path.insert(0, app_path)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Could not import module '{module_name}': {e}")

    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ValueError(f"Module '{module_name}' has no attribute '{attribute}'")

    if callable(obj):
        obj = obj()

    if not isinstance(obj, (SchemaNode, SchemaJoin)):
        raise ValueError(
            f"'{target}' is a {type(obj).__name__}, expected a SchemaNode or SchemaJoin"
        )

    logger.debug(f"Loaded {type(obj).__name__} from {target}")
    return obj


def render_command(
    target: str,
    output_path: Optional[Path],
    indent: int,
    check: bool,
    show_properties: bool,
    app_dir: Optional[Path] = None,
) -> bool:
    """
    Materialize a builder and print or save the document.

    Args:
        target: Builder location ('package.module:attribute')
        output_path: Optional file to write the JSON document to
        indent: JSON indentation
        check: Run the meta-schema check on the document
        show_properties: Print a table of the top-level properties
        app_dir: Directory to import the target module from

    Returns:
        True on success, False if the meta-schema check failed
    """
    builder = load_builder(target, app_dir=app_dir)
    document: Dict[str, Any] = builder.materialize()

    if output_path:
        output_path.write_text(json.dumps(document, indent=indent) + "\n", encoding="utf-8")
        print_success(f"Schema written to {output_path}")
        logger.info(f"Wrote schema for {target} to {output_path}")
    else:
        print_json(document, indent=indent)

    if show_properties:
        print_property_table(document)

    if check:
        result = check_schema(document)
        if not result.is_valid:
            print_validation_errors(result.errors)
            return False
        print_success("Schema is a valid Draft 7 document")

    return True


def check_command(schema_path: Path, show_schema: bool) -> bool:
    """
    Check a JSON schema file against the Draft 7 meta-schema.

    Args:
        schema_path: Path to the schema file
        show_schema: Print the schema before the result

    Returns:
        True if the document is valid
    """
    print_header("Schema Check")
    print_info(f"Checking: {schema_path}")

    result = check_schema_json(load_schema_file(schema_path))

    if show_schema and result.document is not None:
        print_schema(result.document, indent=DEFAULT_INDENT)

    if result.is_valid:
        print_success("Schema is a valid Draft 7 document")
        return True

    print_validation_errors(result.errors)
    return False
