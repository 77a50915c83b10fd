#!/usr/bin/env python3
"""
Demo: Person record with nested fields.

This demonstrates building a person profile schema with:
- Required fields: name, age
- Nested object: address with city (required via shorthand)
- Array: hobbies
- Bounds: minLength, maxLength, minimum, maximum, maxItems

Render it from the command line with:
    schemasmith render demo_person:build_person --app-dir examples --check
"""

import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from schemasmith import schema
from schemasmith.validation import check_schema, format_validation_errors


def build_person():
    address = schema.object({
        "street": schema.string(),
        "city": schema.STRING,
        "zipcode": schema.string().min(5).max(10),
    })

    return schema.object({
        "name": schema.string().min(2).max(50).required(),
        "age": schema.integer().min(0).max(150).required(),
        "address": address,
        "hobbies": schema.array(schema.string()).max(10),
    }).title("Person")


def main():
    print("=" * 60)
    print("SchemaSmith Demo: Person Record with Nested Fields")
    print("=" * 60)

    person = build_person()
    document = person.materialize()

    print("\nSchema:")
    print(json.dumps(document, indent=2))

    print(f"\nRequired: {', '.join(document['required'])}")
    print(f"Address required: {', '.join(document['properties']['address']['required'])}")

    # Variants never change the base builder
    strict = person.add_required("address").attr("$id", "https://example.com/person.json")
    print(f"\nStrict variant required: {', '.join(strict.materialize()['required'])}")
    print(f"Base still requires: {', '.join(person.materialize()['required'])}")

    result = check_schema(person)
    print(f"\nDraft 7 check: {'✓ valid' if result.is_valid else '✗ invalid'}")
    if not result.is_valid:
        print(format_validation_errors(result.errors))

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
