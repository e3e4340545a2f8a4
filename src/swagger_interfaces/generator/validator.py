"""Validates generated declarations before they are written.

Each check returns a dict of {interface_name: error_message}; an empty dict
means the declarations passed.
"""

import re

from swagger_interfaces.parser.base import Declaration

TS_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def find_collisions(declarations: list[Declaration]) -> dict[str, str]:
    """Report interface names produced more than once.

    Returns dict of {name: message}. Auxiliary declarations are included.
    """
    counts: dict[str, int] = {}
    for declaration in declarations:
        for item in declaration.flatten():
            counts[item.name] = counts.get(item.name, 0) + 1
    return {
        name: f"Duplicate interface name ({count} declarations); the last one is kept"
        for name, count in counts.items()
        if count > 1
    }


def validate_identifiers(declarations: list[Declaration]) -> dict[str, str]:
    """Check that interface names are valid TypeScript identifiers."""
    errors = {}
    for declaration in declarations:
        for item in declaration.flatten():
            if not TS_IDENTIFIER_RE.match(item.name):
                errors[item.name] = f"Invalid interface name {item.name!r}"
    return errors


def validate_declarations(declarations: list[Declaration]) -> dict[str, str]:
    """Run all validations on generated declarations.

    Returns dict of {name: error_message} for all declarations with problems.
    """
    errors = {}
    errors.update(find_collisions(declarations))
    errors.update(validate_identifiers(declarations))
    return errors
