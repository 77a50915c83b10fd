"""
SchemaSmith: Declarative JSON Schema Builder

SchemaSmith lets you assemble a JSON Schema document through chained, type-aware
calls and hands back a plain dict ready for json.dumps().

Key Features:
    - Copy-on-write builder nodes: every call returns a new node
    - Type-aware bounds: min()/max() pick minLength, minItems, minimum, ...
    - Shorthand markers (schema.NUMBER, schema.STRING, ...) for required leaf fields
    - Required-field propagation from properties into the owning object
    - anyOf/oneOf/allOf combinators
    - Draft 7 meta-schema check of the generated document

Quick Start:
    ```python
    import json
    from schemasmith import schema

    user = schema.object({
        "name": schema.STRING,
        "age": schema.integer().min(0).required(),
        "email": schema.string().pattern("^.+@.+$"),
        "tags": schema.array(schema.STRING).max(10),
    })

    print(json.dumps(user.materialize(), indent=2))
    ```

Architecture:
    1. Conversion Table: Marker → canned required leaf node
    2. Schema Node / Schema Join: copy-on-write builders with parent back-references
    3. Materializer: recursive conversion of the builder tree into plain dicts
    4. Factory: one constructor per base type plus combinators
    5. Validation: optional Draft 7 meta-schema check of the output

For more information, see DESIGN.md
"""

__version__ = "0.1.0"

# Main API exports - these are the primary user-facing names
from schemasmith.api import Marker, Schema, SchemaJoin, SchemaNode, schema  # noqa: F401

__all__ = [
    "schema",
    "Schema",
    "SchemaNode",
    "SchemaJoin",
    "Marker",
]
