"""
Unit tests for the schema factory.
"""

import pytest
from schemasmith import Marker, Schema, SchemaJoin, SchemaNode, schema
from schemasmith.builder import NUMERIC_PATTERN


class TestFactory:
    """Test the factory constructors."""

    @pytest.mark.parametrize("name", ["number", "string", "boolean", "integer"])
    def test_leaf_constructors(self, name):
        """Test each leaf constructor produces a bare typed node."""
        node = getattr(schema, name)()

        assert isinstance(node, SchemaNode)
        assert node.node_type == name
        assert node.materialize() == {"type": name}

    def test_object_without_properties(self):
        """Test object() with no mapping."""
        assert schema.object().materialize() == {"type": "object", "additionalProperties": False}

    def test_object_does_not_keep_caller_mapping(self):
        """Test the caller's mapping is not modified or shared."""
        properties = {"a": Marker.NUMBER}
        node = schema.object(properties)
        properties["b"] = Marker.STRING

        assert properties["a"] is Marker.NUMBER
        assert list(node.attributes["properties"]) == ["a"]

    def test_array_without_items(self):
        """Test array() with no items."""
        assert schema.array().materialize() == {"type": "array"}

    def test_array_with_empty_list(self):
        """Test an empty list is still tuple-style items."""
        doc = schema.array([]).materialize()

        assert doc == {"type": "array", "items": [], "additionalItems": False}

    def test_permissive_number(self):
        """Test permissive_number accepts numbers or digit strings."""
        join = schema.permissive_number()

        assert isinstance(join, SchemaJoin)
        assert join.materialize() == {
            "anyOf": [{"type": "number"}, {"type": "string", "pattern": NUMERIC_PATTERN}]
        }
        assert NUMERIC_PATTERN == "^[0-9]+$"

    @pytest.mark.parametrize("method,keyword", [
        ("any_of", "anyOf"),
        ("one_of", "oneOf"),
        ("all_of", "allOf"),
    ])
    def test_combinators(self, method, keyword):
        """Test each combinator emits its keyword."""
        doc = getattr(schema, method)([schema.string(), schema.integer()]).materialize()

        assert doc == {keyword: [{"type": "string"}, {"type": "integer"}]}

    def test_convert(self):
        """Test convert() looks up the conversion table."""
        assert schema.convert(Marker.OBJECT).materialize() == {
            "type": "object", "additionalProperties": True
        }
        assert schema.convert("object") is None

    def test_markers_on_factory(self):
        """Test the markers are reachable from the factory."""
        assert schema.NUMBER is Marker.NUMBER
        assert schema.STRING is Marker.STRING
        assert schema.BOOLEAN is Marker.BOOLEAN
        assert schema.OBJECT is Marker.OBJECT

    def test_factory_is_stateless(self):
        """Test separate factory instances build equal nodes."""
        assert Schema().object({"a": Marker.NUMBER}) == schema.object({"a": Marker.NUMBER})
