"""
High-level Python API for SchemaSmith.

This module provides the main user-facing API for building JSON Schema documents.
"""

from schemasmith.builder import Marker, Schema, SchemaJoin, SchemaNode, schema

# Re-export for convenience
__all__ = ["schema", "Schema", "SchemaNode", "SchemaJoin", "Marker"]
