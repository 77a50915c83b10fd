"""
Conversion table for shorthand markers.

Maps each Marker to a canned, required leaf node. Call sites never hand out the
canned instance itself: every lookup returns a fresh clone so no state is shared
between uses.

Table:
    Marker.NUMBER  → {"type": "number"} (required)
    Marker.STRING  → {"type": "string"} (required)
    Marker.BOOLEAN → {"type": "boolean"} (required)
    Marker.OBJECT  → {"type": "object", "additionalProperties": true} (required)
"""

import logging
from typing import Any, Dict, Optional

from schemasmith.builder.types import Marker, SchemaNode

logger = logging.getLogger(__name__)


COMMON_CONVERSIONS: Dict[Marker, SchemaNode] = {
    Marker.NUMBER: SchemaNode.create("number").required(),
    Marker.STRING: SchemaNode.create("string").required(),
    Marker.BOOLEAN: SchemaNode.create("boolean").required(),
    Marker.OBJECT: SchemaNode.create("object").required().allow_additional(True),
}


def convert(value: Any) -> Optional[SchemaNode]:
    """
    Look up the canned node for a shorthand marker.

    Args:
        value: Candidate marker

    Returns:
        SchemaNode: Fresh copy of the canned node, or None if value is not a marker
    """
    if not isinstance(value, Marker):
        return None

    canned = COMMON_CONVERSIONS.get(value)
    if canned is None:
        return None
    return canned.clone()


def resolve_shorthand(value: Any, slot_name: Optional[str] = None) -> Any:
    """
    Replace a marker with its canned node, or return value unchanged.

    Args:
        value: Marker, node, join or raw value
        slot_name: Property name the value is stored under; used as the title

    Returns:
        Any: A required SchemaNode for markers, otherwise value itself

    Example:
        ```python
        resolve_shorthand(Marker.NUMBER, slot_name="age").materialize()
        # {"type": "number", "title": "age"}
        ```
    """
    replacement = convert(value)
    if replacement is None:
        return value

    if slot_name is not None:
        replacement = replacement.title(slot_name)

    logger.debug(f"Converted {value} shorthand for slot {slot_name!r}")
    return replacement.required()
