"""Classify Swagger path items and extract their response shapes.

Supports Swagger 2.0 response schemas (``responses.200.schema``) and the
OpenAPI 3 ``content`` form. Nothing here raises for a missing shape: an
unclassifiable path or undescribable response yields None / False.
"""

import re

from .base import VERBS, Operation, ShapeKind

JSON_CONTENT_TYPES = ("application/json", "text/json")


def classify_verb(path_item: dict) -> str | None:
    """Return the path item's verb, honouring get > post > patch > delete > put.

    An empty operation object still counts as present.
    """
    for verb in VERBS:
        if isinstance(path_item.get(verb), dict):
            return verb
    return None


def get_operation(path: str, path_item: dict) -> Operation | None:
    """Build the Operation for a path item, or None if it has no supported verb."""
    verb = classify_verb(path_item)
    if verb is None:
        return None
    definition = path_item[verb]
    return Operation(
        path=path,
        verb=verb,
        operation_id=definition.get("operationId") or _fallback_operation_id(verb, path),
        responses=definition.get("responses") or {},
    )


def iter_operations(document: dict) -> list[Operation]:
    """Return one Operation per classifiable path, in document order."""
    operations = []
    for path, path_item in (document.get("paths") or {}).items():
        if not isinstance(path_item, dict):
            continue
        operation = get_operation(str(path), path_item)
        if operation is not None:
            operations.append(operation)
    return operations


def get_success_schema(operation: Operation) -> dict | None:
    """Return the status-200 response schema, if any."""
    response = operation.responses.get("200", operation.responses.get(200))
    if not isinstance(response, dict):
        return None

    schema = response.get("schema")
    if isinstance(schema, dict):
        return schema

    content = response.get("content")
    if not isinstance(content, dict):
        return None
    for content_type in JSON_CONTENT_TYPES:
        if content_type in content:
            schema = (content[content_type] or {}).get("schema")
            return schema if isinstance(schema, dict) else None
    # Fallback: first available schema
    for media in content.values():
        if isinstance(media, dict) and isinstance(media.get("schema"), dict):
            return media["schema"]
    return None


def classify_shape(schema: dict | None) -> ShapeKind:
    """Decide where a response schema keeps its property map.

    Direct properties win over ``items.properties``. An ``items`` that is a
    list rather than a schema object is never guessed at.
    """
    if not isinstance(schema, dict):
        return ShapeKind.NONE
    if isinstance(schema.get("properties"), dict):
        return ShapeKind.OBJECT
    items = schema.get("items")
    if isinstance(items, dict) and isinstance(items.get("properties"), dict):
        return ShapeKind.COLLECTION
    return ShapeKind.NONE


def extract_properties(operation: Operation) -> dict | None:
    """Return the property map describing the operation's 200 response body."""
    schema = get_success_schema(operation)
    kind = classify_shape(schema)
    if kind is ShapeKind.OBJECT:
        return schema["properties"]
    if kind is ShapeKind.COLLECTION:
        return schema["items"]["properties"]
    return None


def has_describable_response(path_item: dict) -> bool:
    """Check whether the classified verb's 200 response has a property map."""
    operation = get_operation("", path_item)
    if operation is None:
        return False
    return classify_shape(get_success_schema(operation)) is not ShapeKind.NONE


def _fallback_operation_id(verb: str, path: str) -> str:
    """Derive an identifier like 'get /users/{id}' -> 'get users id'."""
    words = re.findall(r"[A-Za-z0-9]+", path)
    return " ".join([verb, *words])
