"""Define classes to represent the physical objects of the blocks world."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union, get_args

Form = Literal["ball", "box", "table", "brick", "plank", "pyramid"]
"""Shape of a physical object in the blocks world."""

Size = Literal["small", "large"]
"""Size of a physical object (the size of a definition may also be unspecified)."""

FORMS: tuple[str, ...] = get_args(Form)
SIZES: tuple[str, ...] = get_args(Size)

ANY_FORM = "anyform"
"""Wildcard form used in object descriptions to match objects of any form."""

FLOOR_ID = "floor"
"""Identifier of the floor, which lies implicitly beneath every stack."""

FLOOR_COLUMN_PREFIX = f"{FLOOR_ID}-"
"""Prefix of identifiers naming the floor beneath a particular column, e.g. "floor-2"."""

FLOOR_FORM = "floor"


@dataclass(frozen=True)
class ObjectDefinition:
    """The immutable physical description of an object in the world."""

    form: Form
    size: Size | None
    """Size of the object (None if unspecified)."""

    color: str | None = None

    def __post_init__(self) -> None:
        """Verify that the object's form and size are recognized."""
        if self.form not in FORMS:
            raise ValueError(f"Unknown object form '{self.form}'; expected one of {FORMS}.")
        if self.size is not None and self.size not in SIZES:
            raise ValueError(f"Unknown object size '{self.size}'; expected one of {SIZES}.")

    def __str__(self) -> str:
        """Return a readable description of the object, e.g. 'small red ball'."""
        words = [w for w in (self.size, self.color, self.form) if w is not None]
        return " ".join(words)


@dataclass(frozen=True)
class Floor:
    """The floor supports every stack and can never be moved or held."""

    form: str = FLOOR_FORM
    size: None = None
    color: None = None

    def __str__(self) -> str:
        """Return a readable description of the floor."""
        return "floor"


FLOOR = Floor()

Supportable = Union[ObjectDefinition, Floor]
"""An object definition or the floor, as considered by the physical laws."""


def is_floor(obj: str) -> bool:
    """Check whether the identifier names the floor (anywhere, or beneath some column)."""
    return obj == FLOOR_ID or obj.startswith(FLOOR_COLUMN_PREFIX)


def floor_of_column(column: int) -> str:
    """Construct the identifier of the floor beneath the given column."""
    return f"{FLOOR_COLUMN_PREFIX}{column}"


def floor_column(obj: str) -> int | None:
    """Retrieve the column named by a column-specific floor identifier (None otherwise)."""
    if not obj.startswith(FLOOR_COLUMN_PREFIX):
        return None
    suffix = obj[len(FLOOR_COLUMN_PREFIX) :]
    return int(suffix) if suffix.isdigit() else None
