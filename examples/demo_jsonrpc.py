#!/usr/bin/env python3
"""
Demo: JSON-RPC request with a combinator id.

This demonstrates:
- Custom attribute: jsonrpc must be the constant "2.0"
- Required fields: jsonrpc, method, id
- Optional free-form params object
- anyOf: id may be a number or a string of digits
- Marking an attached anyOf as required after the object is built
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from schemasmith import schema


def build_request():
    request = schema.object({
        "jsonrpc": schema.string().attr("const", "2.0").required(),
        "method": schema.string().min(1).required(),
        "params": schema.object().allow_additional(True),
        "id": schema.permissive_number(),
    }).title("JSON-RPC request")

    # The attached join pushes "id" into the request's required list
    request.child("id").required()
    return request


def main():
    print("=" * 60)
    print("SchemaSmith Demo: JSON-RPC Request")
    print("=" * 60)

    document = build_request().materialize()

    print("\nSchema:")
    print(json.dumps(document, indent=2))
    print(f"\nRequired: {document['required']}")

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
