"""
Schema factory - the stateless entry point for building schemas.

Usage:
    ```python
    from schemasmith import schema

    person = schema.object({
        "name": schema.STRING,
        "age": schema.integer().min(0).required(),
        "nickname": schema.string().max(20),
    })

    person.materialize()
    # {
    #     "type": "object",
    #     "properties": {
    #         "name": {"type": "string", "title": "name"},
    #         "age": {"type": "integer", "minimum": 0},
    #         "nickname": {"type": "string", "maxLength": 20}
    #     },
    #     "additionalProperties": False,
    #     "required": ["name", "age"]
    # }
    ```
"""

from typing import Any, Dict, List, Optional

from schemasmith.builder import conversions
from schemasmith.builder.types import Marker, SchemaJoin, SchemaNode

# Digits-only strings accepted by permissive_number()
NUMERIC_PATTERN = "^[0-9]+$"


class Schema:
    """
    Factory with one constructor per base type plus the combinators.

    The markers are exposed as attributes so callers can write
    ``schema.object({"id": schema.NUMBER})``.
    """

    NUMBER = Marker.NUMBER
    STRING = Marker.STRING
    BOOLEAN = Marker.BOOLEAN
    OBJECT = Marker.OBJECT

    def number(self) -> SchemaNode:
        return SchemaNode.create("number")

    def string(self) -> SchemaNode:
        return SchemaNode.create("string")

    def boolean(self) -> SchemaNode:
        return SchemaNode.create("boolean")

    def integer(self) -> SchemaNode:
        return SchemaNode.create("integer")

    def object(self, properties: Optional[Dict[str, Any]] = None) -> SchemaNode:
        """
        Create an object schema.

        Args:
            properties: Optional mapping of property name to node, join or Marker.
                Markers and nodes flagged required() are listed in "required".

        Returns:
            SchemaNode: Object node with additionalProperties=False
        """
        return SchemaNode.create("object", properties)

    def array(self, items: Any = None) -> SchemaNode:
        """
        Create an array schema.

        Args:
            items: Optional single item schema, or a list for tuple-style items

        Returns:
            SchemaNode: Array node
        """
        node = SchemaNode.create("array")
        if items is not None:
            return node.items(items)
        return node

    def any_of(self, members: List[Any]) -> SchemaJoin:
        return SchemaJoin.create("anyOf", members)

    def one_of(self, members: List[Any]) -> SchemaJoin:
        return SchemaJoin.create("oneOf", members)

    def all_of(self, members: List[Any]) -> SchemaJoin:
        return SchemaJoin.create("allOf", members)

    def convert(self, value: Any) -> Optional[SchemaNode]:
        """Return a fresh canned node for a marker, or None."""
        return conversions.convert(value)

    def permissive_number(self) -> SchemaJoin:
        """Accept either a JSON number or a string of digits."""
        return self.any_of([self.number(), self.string().pattern(NUMERIC_PATTERN)])


schema = Schema()
