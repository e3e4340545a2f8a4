"""Render response property maps as TypeScript interfaces.

Every function here is a pure transform: nested object shapes become
auxiliary Declarations attached to the one being rendered, and the caller
collects the results in the order operations are discovered.
"""

import re

from swagger_interfaces.generator.naming import format_interface_name, nested_interface_name
from swagger_interfaces.parser.base import Declaration, unique_by_name
from swagger_interfaces.parser.swagger import extract_properties, iter_operations

IMPORT_HEADER = "import {Map, List} from 'immutable'\n\n"

PRIMITIVE_TYPES = {
    "string": "string",
    "number": "number",
    "integer": "number",
    "boolean": "boolean",
    "file": "File",
    "object": "Map<string, any>",
}
FALLBACK_TYPE = "any"
IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def render(interface_name: str, properties: dict) -> Declaration:
    """Render a property map as one interface plus its nested interfaces."""
    name = format_interface_name(interface_name)
    fields = []
    auxiliaries: list[Declaration] = []
    for key, schema in properties.items():
        field_type = render_type(name, str(key), schema, auxiliaries)
        fields.append(f"{_field_name(str(key))}: {field_type}")
    return Declaration(name=name, fields=tuple(fields), auxiliaries=tuple(auxiliaries))


def render_type(owner: str, key: str, schema, auxiliaries: list[Declaration]) -> str:
    """Return the type expression for one field, appending nested interfaces."""
    if not isinstance(schema, dict):
        return FALLBACK_TYPE

    if schema.get("enum"):
        return render_enum(schema["enum"])

    field_type = schema.get("type")

    if field_type == "array":
        items = schema.get("items")
        if not isinstance(items, dict):
            return f"List<{FALLBACK_TYPE}>"
        if isinstance(items.get("properties"), dict):
            nested = render(nested_interface_name(owner, key), items["properties"])
            auxiliaries.append(nested)
            return f"List<{nested.name}>"
        return f"List<{render_type(owner, key, items, auxiliaries)}>"

    if field_type == "object" and isinstance(schema.get("properties"), dict):
        nested = render(nested_interface_name(owner, key), schema["properties"])
        auxiliaries.append(nested)
        return nested.name

    if isinstance(field_type, str):
        return PRIMITIVE_TYPES.get(field_type, FALLBACK_TYPE)
    return FALLBACK_TYPE


def render_enum(values: list) -> str:
    """Render enum values as a closed union: ['A', 'B'] -> "'A' | 'B'"."""
    literals: list[str] = []
    for value in values:
        literal = _literal(value)
        if literal not in literals:
            literals.append(literal)
    return " | ".join(literals)


def _field_name(key: str) -> str:
    if IDENTIFIER_RE.match(key):
        return key
    return _literal(key)


def _literal(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if value is None:
        return "null"
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def generate_declarations(document: dict) -> list[Declaration]:
    """Render one Declaration per operation with a describable 200 response."""
    declarations = []
    for operation in iter_operations(document):
        properties = extract_properties(operation)
        if properties is None:
            continue
        declarations.append(render(operation.operation_id, properties))
    return declarations


def compose(declarations: list[Declaration]) -> str:
    """Concatenate declarations (auxiliaries included) into one source text.

    A later declaration with an already-used name replaces the earlier one
    in its original position.
    """
    flattened = [item for declaration in declarations for item in declaration.flatten()]
    return "\n".join(d.body for d in unique_by_name(flattened))
