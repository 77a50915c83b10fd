"""
Unit tests for the shorthand conversion table.
"""

import pytest
from schemasmith.builder import COMMON_CONVERSIONS, Marker, SchemaNode, convert, resolve_shorthand


class TestConversionTable:
    """Test marker lookups."""

    @pytest.mark.parametrize("marker,expected", [
        (Marker.NUMBER, {"type": "number"}),
        (Marker.STRING, {"type": "string"}),
        (Marker.BOOLEAN, {"type": "boolean"}),
        (Marker.OBJECT, {"type": "object", "additionalProperties": True}),
    ])
    def test_canned_nodes(self, marker, expected):
        """Test each marker maps to its canned required node."""
        node = convert(marker)

        assert isinstance(node, SchemaNode)
        assert node.materialize() == expected
        assert node.builder_meta.is_required is True

    def test_convert_returns_fresh_copies(self):
        """Test lookups never hand out the canned instance."""
        first = convert(Marker.NUMBER)
        second = convert(Marker.NUMBER)

        assert first is not second
        assert first is not COMMON_CONVERSIONS[Marker.NUMBER]

    def test_editing_a_copy_leaves_table_intact(self):
        """Test mutating a converted node does not leak into the table."""
        node = convert(Marker.STRING)
        node.attributes["minLength"] = 3

        assert COMMON_CONVERSIONS[Marker.STRING].attributes == {"type": "string"}

    @pytest.mark.parametrize("value", ["number", 42, None, {"type": "number"}, [Marker.NUMBER], float])
    def test_non_markers_have_no_conversion(self, value):
        """Test values that are not markers convert to None."""
        assert convert(value) is None


class TestResolveShorthand:
    """Test call-site conversion helper."""

    def test_marker_with_slot_name_is_titled(self):
        """Test the slot name becomes the title."""
        node = resolve_shorthand(Marker.BOOLEAN, slot_name="active")

        assert node.materialize() == {"type": "boolean", "title": "active"}
        assert node.builder_meta.is_required is True

    def test_marker_without_slot_name(self):
        """Test no title is set without a slot name."""
        assert resolve_shorthand(Marker.NUMBER).materialize() == {"type": "number"}

    def test_other_values_returned_unchanged(self):
        """Test nodes and raw values pass through as the same object."""
        node = SchemaNode.create("string")
        raw = {"type": "null"}

        assert resolve_shorthand(node, slot_name="x") is node
        assert resolve_shorthand(raw) is raw
