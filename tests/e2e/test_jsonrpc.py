"""
End-to-end test: JSON-RPC request with a required anyOf id.

The id property is a join attached without being flagged required; calling
required() on the attached join afterwards must list it in the request's
"required" array.
"""

import json
import pytest
from pathlib import Path

from schemasmith import schema
from schemasmith.validation import check_schema


FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
with open(FIXTURES_DIR / "schemas" / "jsonrpc.json") as f:
    JSONRPC_SCHEMA = json.load(f)


def build_request():
    request = schema.object({
        "jsonrpc": schema.string().attr("const", "2.0").required(),
        "method": schema.string().min(1).required(),
        "params": schema.object().allow_additional(True),
        "id": schema.permissive_number(),
    }).title("JSON-RPC request")

    request.child("id").required()
    return request


@pytest.mark.e2e
class TestJsonRpc:
    """Test building the JSON-RPC request schema."""

    def test_matches_fixture(self):
        """Test the materialized document equals the fixture."""
        assert build_request().materialize() == JSONRPC_SCHEMA

    def test_id_only_required_after_join_call(self):
        """Test the id join is not required until required() is called."""
        request = schema.object({"id": schema.permissive_number()})

        assert "required" not in request.materialize()
        request.child("id").required()
        assert request.materialize()["required"] == ["id"]

    def test_is_valid_draft7(self):
        """Test the document passes the meta-schema check."""
        assert check_schema(build_request()).is_valid
