"""
Builder node types for JSON Schema construction.

This module defines the two cooperating builder types used to assemble a JSON
Schema document through chained, copy-on-write calls, plus the shorthand
markers that stand in for canned leaf nodes.

Type Hierarchy:
    Marker: Shorthand values (NUMBER, STRING, BOOLEAN, OBJECT)
    SchemaNode: Plain schema types (number, string, boolean, integer, object, array)
    SchemaJoin: Combinator schemas (anyOf, oneOf, allOf) over member schemas

Each builder knows how to:
    - Derive a new, updated copy of itself (the receiver is never changed)
    - Report required-ness to the node that holds it as a property
    - Materialize itself into a plain dict ready for json.dumps()

Required-field propagation:
    SchemaNode populates its "required" list once, when an object is created
    with an initial property mapping. A SchemaJoin attached to an object pushes
    its property name into the owner's "required" list when required() is called.
    SchemaNode.required() on an already attached node does not touch the owner.
"""

import copy
import logging
import weakref
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)


# Attribute names used by min/max/length, keyed by node type
_RANGE_ATTRIBUTES: Dict[str, Tuple[str, str]] = {
    "array": ("minItems", "maxItems"),
    "string": ("minLength", "maxLength"),
    "object": ("minProperties", "maxProperties"),
}
_NUMERIC_RANGE = ("minimum", "maximum")


class Marker(Enum):
    """
    Shorthand markers accepted wherever a schema node is expected.

    A marker placed in an object's property mapping, in array items, or in a
    join's members is replaced with a fresh copy of a canned, required node
    (see schemasmith.builder.conversions).
    """

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    OBJECT = "object"


@dataclass
class BuilderMeta:
    """
    Builder-only metadata, never emitted in the materialized document.

    Attributes:
        is_required: True/False once required()/optional() was called, None if unset
    """

    is_required: Optional[bool] = None


def to_plain(value: Any) -> Any:
    """
    Convert a builder value into plain dicts, lists and scalars.

    Nodes and joins are materialized, containers are rebuilt member-wise and
    every other value is passed through unchanged.

    Args:
        value: A SchemaNode, SchemaJoin, container or scalar

    Returns:
        Any: A value made only of dicts, lists and scalars (for builder input)
    """
    if isinstance(value, (SchemaNode, SchemaJoin)):
        return value.materialize()
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


def _is_builder(value: Any) -> bool:
    return isinstance(value, (SchemaNode, SchemaJoin))


@dataclass
class SchemaNode:
    """
    Builder for plain schema types.

    Example:
        ```python
        node = SchemaNode.create("string").min(3).max(50)
        node.materialize()
        # {"type": "string", "minLength": 3, "maxLength": 50}
        ```

    Attributes:
        node_type: One of number, string, boolean, integer, object, array
        attributes: Ordered mapping of the fields emitted by materialize()
        builder_meta: Builder-only metadata (required flag)
        parent_ref: Weak reference to the node holding this one, or None
        slot_name: Property name under which this node is held, or None
    """

    node_type: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    builder_meta: BuilderMeta = field(default_factory=BuilderMeta)
    parent_ref: Optional["weakref.ReferenceType"] = field(default=None, compare=False, repr=False)
    slot_name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        self._attach_children()

    @classmethod
    def create(
        cls,
        node_type: str,
        properties: Optional[Dict[str, Any]] = None
    ) -> "SchemaNode":
        """
        Create a new node, scanning the initial properties for required fields.

        Objects get additionalProperties=False. Every property given as a Marker
        is replaced with a titled copy of its canned node and listed as required;
        every property node already flagged required() is listed as required too.
        The scan only happens here, never on later derivations.

        Args:
            node_type: JSON Schema type name
            properties: Optional mapping of property name to node, join or Marker

        Returns:
            SchemaNode: The new node
        """
        attributes: Dict[str, Any] = {"type": node_type}

        if properties is not None:
            # Our own copy, so attaching never touches the caller's nodes
            attributes["properties"] = copy.deepcopy(dict(properties))

        if node_type == "object":
            attributes["additionalProperties"] = False

        if properties:
            from schemasmith.builder.conversions import resolve_shorthand

            required: List[str] = []
            owned = attributes["properties"]
            for name, value in owned.items():
                if isinstance(value, Marker):
                    owned[name] = resolve_shorthand(value, slot_name=name)
                    required.append(name)
                elif _is_builder(value) and value.builder_meta.is_required:
                    required.append(name)

            if required:
                attributes["required"] = required
                logger.debug(f"Object created with required properties: {required}")

        return cls(node_type=node_type, attributes=attributes)

    def _attach_children(self) -> None:
        """Point every property and items node held by this node back at it."""
        owner = weakref.ref(self)

        properties = self.attributes.get("properties")
        if isinstance(properties, dict):
            for name, child in properties.items():
                if _is_builder(child):
                    child.parent_ref = owner
                    child.slot_name = name
                    child._attach_children()

        items = self.attributes.get("items")
        for child in items if isinstance(items, list) else [items]:
            if _is_builder(child):
                child.parent_ref = owner
                child.slot_name = None
                child._attach_children()

    def _derive(self, attributes: Dict[str, Any], builder_meta: Optional[BuilderMeta] = None) -> "SchemaNode":
        return replace(
            self,
            attributes=attributes,
            builder_meta=copy.deepcopy(builder_meta if builder_meta is not None else self.builder_meta),
        )

    def _override_attribute(self, name: str, value: Any) -> "SchemaNode":
        attributes = copy.deepcopy(self.attributes)
        attributes[name] = copy.deepcopy(value)
        return self._derive(attributes)

    def add_required(self, field_name: str) -> "SchemaNode":
        """
        Add a field to the object's required list.

        Args:
            field_name: Property name

        Returns:
            SchemaNode: New node with the name appended to "required"
        """
        return self._override_attribute("required", [*self.attributes.get("required", []), field_name])

    def allow_additional(self, value: Any) -> "SchemaNode":
        """
        Allow or forbid unknown properties (objects) or extra items (arrays).

        Args:
            value: Boolean, or a schema the extra entries must match

        Returns:
            SchemaNode: New node with additionalProperties or additionalItems set
        """
        if self.node_type == "object":
            return self._override_attribute("additionalProperties", value)
        return self._override_attribute("additionalItems", value)

    def description(self, text: str) -> "SchemaNode":
        """Set a description for the property."""
        return self._override_attribute("description", text)

    def optional(self) -> "SchemaNode":
        """
        Mark this node as optional for whichever object consumes it.

        Note:
            This does not remove the name from an owner that already listed it
            as required.
        """
        return self._derive(copy.deepcopy(self.attributes), BuilderMeta(is_required=False))

    def required(self) -> "SchemaNode":
        """
        Mark this node as required in whichever object consumes it.

        The flag is picked up when the node is passed to an object's initial
        property mapping. Calling this on a node that is already attached does
        not update the owner's "required" list.
        """
        return self._derive(copy.deepcopy(self.attributes), BuilderMeta(is_required=True))

    def min(self, value: Union[int, float]) -> "SchemaNode":
        """
        Set the lower bound for this node's type.

        array: minItems, string: minLength, object: minProperties,
        anything else: minimum.

        Args:
            value: Lower bound

        Returns:
            SchemaNode: New node with the bound set
        """
        name = _RANGE_ATTRIBUTES.get(self.node_type, _NUMERIC_RANGE)[0]
        return self._override_attribute(name, value)

    def max(self, value: Union[int, float]) -> "SchemaNode":
        """
        Set the upper bound for this node's type.

        array: maxItems, string: maxLength, object: maxProperties,
        anything else: maximum.

        Args:
            value: Upper bound

        Returns:
            SchemaNode: New node with the bound set
        """
        name = _RANGE_ATTRIBUTES.get(self.node_type, _NUMERIC_RANGE)[1]
        return self._override_attribute(name, value)

    def pattern(self, regex: str) -> "SchemaNode":
        """Set a regex pattern for a string."""
        return self._override_attribute("pattern", regex)

    def length(self, value: int) -> "SchemaNode":
        """
        Set the exact size of an array, length of a string or number of properties.

        Both halves of the min/max pair are set to value. Other types get a
        generic "length" attribute.

        Args:
            value: Exact size

        Returns:
            SchemaNode: An independent clone carrying the new attributes
        """
        clone = self.clone()

        if self.node_type in _RANGE_ATTRIBUTES:
            lower, upper = _RANGE_ATTRIBUTES[self.node_type]
            clone.attributes[lower] = value
            clone.attributes[upper] = value
        else:
            clone.attributes["length"] = value

        return clone

    def title(self, name: str) -> "SchemaNode":
        """Give the node a title."""
        return self._override_attribute("title", name)

    def definitions(self, value: Any) -> "SchemaNode":
        """Set the definitions block. Nodes inside it are materialized too."""
        return self._override_attribute("definitions", value)

    def attr(self, name: str, value: Any) -> "SchemaNode":
        """
        Set a custom attribute on the schema.

        Args:
            name: Attribute name, emitted as-is
            value: Any value; nodes and joins are materialized

        Returns:
            SchemaNode: New node with the attribute set
        """
        return self._override_attribute(name, value)

    def items(self, schema: Any) -> "SchemaNode":
        """
        Set the items contained within an array.

        A list (or tuple) describes tuple-style items and sets
        additionalItems=False; a single value sets additionalItems=True. Markers
        are converted through the conversion table.

        Args:
            schema: A node, join, Marker, or a list of them

        Returns:
            SchemaNode: New node with items and additionalItems set
        """
        from schemasmith.builder.conversions import resolve_shorthand

        attributes = copy.deepcopy(self.attributes)
        value = copy.deepcopy(schema)

        if isinstance(value, (list, tuple)):
            attributes["items"] = [resolve_shorthand(item) for item in value]
            attributes["additionalItems"] = False
        else:
            attributes["items"] = resolve_shorthand(value)
            attributes["additionalItems"] = True

        return self._derive(attributes)

    def child(self, name: str) -> Optional[Union["SchemaNode", "SchemaJoin"]]:
        """
        Return the property node held by this node under name.

        This is the attached copy (its parent_ref points here), not the
        object originally passed to create().
        """
        properties = self.attributes.get("properties") or {}
        return properties.get(name)

    def clone(self) -> "SchemaNode":
        """
        Return a structurally independent deep copy of this node.

        Returns:
            SchemaNode: Copy whose children point back at the copy
        """
        duplicate = copy.deepcopy(self)
        duplicate._attach_children()
        return duplicate

    def materialize(self, cloned: bool = False) -> Dict[str, Any]:
        """
        Return the generated JSON Schema as a plain dict.

        Nodes with nested properties or items are first cloned so the builder
        tree is never modified; the clone is then materialized in place. An
        empty properties mapping is dropped from the output.

        Args:
            cloned: True when called on a defensive copy

        Returns:
            Dict: Plain JSON Schema document
        """
        data = self.attributes

        if data.get("properties") is not None or data.get("items") is not None:
            if not cloned:
                return self.clone().materialize(cloned=True)

            properties = data.get("properties")
            if properties is not None:
                for name, value in properties.items():
                    properties[name] = to_plain(value)
                if not properties:
                    del data["properties"]

            items = data.get("items")
            if isinstance(items, list):
                for index, value in enumerate(items):
                    items[index] = to_plain(value)
            elif items is not None:
                data["items"] = to_plain(items)

        return {
            name: to_plain(value)
            for name, value in data.items()
            if not (name == "properties" and value is None)
        }


@dataclass
class SchemaJoin:
    """
    Builder for combinator schemas such as anyOf.

    Example:
        ```python
        join = SchemaJoin.create("anyOf", [number_node, string_node])
        join.materialize()
        # {"anyOf": [{"type": "number"}, {"type": "string"}]}
        ```

    Attributes:
        join_type: Combinator keyword (anyOf, oneOf, allOf)
        members: Ordered member nodes, joins or raw values
        attributes: Extra sibling fields emitted next to the combinator
        builder_meta: Builder-only metadata (required flag)
        parent_ref: Weak reference to the object holding this join, or None
        slot_name: Property name under which this join is held, or None
    """

    join_type: str
    members: List[Any] = field(default_factory=list)
    attributes: Dict[str, Any] = field(default_factory=dict)
    builder_meta: BuilderMeta = field(default_factory=BuilderMeta)
    parent_ref: Optional["weakref.ReferenceType"] = field(default=None, compare=False, repr=False)
    slot_name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        self._attach_children()

    @classmethod
    def create(cls, join_type: str, members: List[Any]) -> "SchemaJoin":
        """
        Create a join over copies of members, converting any Marker.

        Args:
            join_type: Combinator keyword
            members: Member nodes, joins, markers or raw values

        Returns:
            SchemaJoin: The new join
        """
        from schemasmith.builder.conversions import resolve_shorthand

        owned = [resolve_shorthand(member) for member in copy.deepcopy(list(members))]
        return cls(join_type=join_type, members=owned)

    def _attach_children(self) -> None:
        # Members are not attached; only their own children are re-pointed
        for member in self.members:
            if _is_builder(member):
                member._attach_children()

    def _override_attribute(self, name: str, value: Any) -> "SchemaJoin":
        attributes = copy.deepcopy(self.attributes)
        attributes[name] = copy.deepcopy(value)
        return replace(
            self,
            members=copy.deepcopy(self.members),
            attributes=attributes,
            builder_meta=copy.deepcopy(self.builder_meta),
        )

    def optional(self) -> "SchemaJoin":
        """No-op: a join's optionality is decided where it is constructed."""
        return self

    def required(self) -> "SchemaJoin":
        """
        Mark the join required and list it in the owning object's "required".

        Unlike every other builder call this changes state in place: the owner
        found through parent_ref gets slot_name appended to its "required" list
        (once), and the join's own flag is set.

        Returns:
            SchemaJoin: self
        """
        parent = self.parent_ref() if self.parent_ref is not None else None

        if parent is not None and self.slot_name is not None:
            required = parent.attributes.setdefault("required", [])
            if self.slot_name not in required:
                required.append(self.slot_name)
            logger.debug(f"Join '{self.slot_name}' added to owner's required list")
        elif self.parent_ref is not None:
            logger.warning(f"Owner of join '{self.slot_name}' no longer exists; required list not updated")

        self.builder_meta.is_required = True
        return self

    def attr(self, name: str, value: Any) -> "SchemaJoin":
        """Set a custom attribute emitted next to the combinator."""
        return self._override_attribute(name, value)

    def title(self, name: str) -> "SchemaJoin":
        """Give the join a title."""
        return self._override_attribute("title", name)

    def description(self, text: str) -> "SchemaJoin":
        """Set a description for the join."""
        return self._override_attribute("description", text)

    def clone(self) -> "SchemaJoin":
        """Return a structurally independent deep copy of this join."""
        duplicate = copy.deepcopy(self)
        duplicate._attach_children()
        return duplicate

    def materialize(self) -> Dict[str, Any]:
        """
        Return the combinator as a plain dict.

        Returns:
            Dict: {join_type: [materialized members], **attributes}
        """
        return {
            self.join_type: [to_plain(member) for member in self.members],
            **to_plain(self.attributes),
        }
