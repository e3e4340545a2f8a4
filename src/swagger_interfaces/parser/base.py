"""Data models for a parsed Swagger document and the declarations built from it.

The parser produces Operation models; the generator turns their response
shapes into Declaration models that are later composed into one file.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

VERBS = ("get", "post", "patch", "delete", "put")


class ShapeKind(str, Enum):
    """How a response schema exposes its property map."""

    OBJECT = "object"  # schema.properties
    COLLECTION = "collection"  # schema.items.properties
    NONE = "none"


class Operation(BaseModel):
    """The single classified operation of one path item."""

    path: str
    verb: str  # get / post / patch / delete / put
    operation_id: str
    responses: dict = {}


class Declaration(BaseModel):
    """One rendered interface plus the interfaces found while rendering it."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[str, ...] = ()
    auxiliaries: tuple["Declaration", ...] = ()

    def flatten(self) -> list["Declaration"]:
        """Return this declaration followed by its auxiliaries, depth-first."""
        result = [self]
        for aux in self.auxiliaries:
            result.extend(aux.flatten())
        return result

    @property
    def body(self) -> str:
        lines = "".join(f"  {field}\n" for field in self.fields)
        return f"export interface {self.name} {{\n{lines}}}\n"

    @property
    def text(self) -> str:
        """Primary declaration text followed by every auxiliary declaration.

        Names repeated among the auxiliaries are emitted once, as in compose.
        """
        return "\n".join(d.body for d in unique_by_name(self.flatten()))


def unique_by_name(declarations: list[Declaration]) -> list[Declaration]:
    """Keep one declaration per name: the last one, in the first one's position."""
    by_name: dict[str, Declaration] = {}
    for declaration in declarations:
        by_name[declaration.name] = declaration
    return list(by_name.values())
