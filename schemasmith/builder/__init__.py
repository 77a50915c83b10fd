"""
Schema builder module.

This module holds the builder nodes, the shorthand conversion table and the
factory used to assemble JSON Schema documents.

Components:
    - types: Builder node types (SchemaNode, SchemaJoin) and the Marker shorthands
    - conversions: Canned required nodes for each Marker
    - factory: The Schema factory and its module-level instance

Example:
    ```python
    from schemasmith.builder import schema

    tags = schema.array(schema.STRING).min(1)
    doc = schema.object({"tags": tags.required()}).materialize()
    ```
"""

from schemasmith.builder.types import BuilderMeta, Marker, SchemaJoin, SchemaNode, to_plain
from schemasmith.builder.conversions import COMMON_CONVERSIONS, convert, resolve_shorthand
from schemasmith.builder.factory import NUMERIC_PATTERN, Schema, schema

__all__ = [
    "BuilderMeta",
    "Marker",
    "SchemaJoin",
    "SchemaNode",
    "to_plain",
    "COMMON_CONVERSIONS",
    "convert",
    "resolve_shorthand",
    "NUMERIC_PATTERN",
    "Schema",
    "schema",
]
