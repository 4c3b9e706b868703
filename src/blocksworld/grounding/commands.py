"""Define classes representing parsed natural-language commands about the blocks world.

The grammar producing these command trees is external; this module only describes the
trees that it yields, e.g. "put the white ball in a box on the floor" parses into:

    MoveCommand(
        entity=Entity(ObjectDescription(form="ball", color="white")),
        location=Location(
            "inside",
            Entity(
                ObjectDescription("box", location=Location("ontop", Entity(FLOOR_DESCRIPTION))),
                quantifier="any",
            ),
        ),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union, get_args

from blocksworld.world.objects import ANY_FORM, FLOOR_FORM, FORMS, SIZES
from blocksworld.world.relations import SPATIAL_RELATIONS

Quantifier = Literal["the", "any", "all"]
"""Quantifier of an entity; "the" and "any" both admit every matching object."""

QUANTIFIERS: tuple[str, ...] = get_args(Quantifier)


@dataclass(frozen=True)
class ObjectDescription:
    """A description of objects by color, size, and form, optionally qualified by location.

    Attributes left as None act as wildcards, as does the form "anyform".
    """

    form: str | None = None
    size: str | None = None
    color: str | None = None
    location: Location | None = None
    """Optional relation to another entity that matching objects must satisfy."""

    def __post_init__(self) -> None:
        """Verify that the described form and size are recognized."""
        if self.form is not None and self.form not in (*FORMS, ANY_FORM, FLOOR_FORM):
            raise ValueError(f"Cannot describe objects of unknown form '{self.form}'.")
        if self.size is not None and self.size not in SIZES:
            raise ValueError(f"Cannot describe objects of unknown size '{self.size}'.")

    def __str__(self) -> str:
        """Return a readable rendering of the description, e.g. 'large box inside the floor'."""
        noun = "object" if self.form in (None, ANY_FORM) else self.form
        words = " ".join(w for w in (self.size, self.color, noun) if w is not None)
        return words if self.location is None else f"{words} {self.location}"

    @property
    def is_floor(self) -> bool:
        """Check whether the description refers to the floor."""
        return self.form == FLOOR_FORM


FLOOR_DESCRIPTION = ObjectDescription(form=FLOOR_FORM)


@dataclass(frozen=True)
class Entity:
    """A quantified object description, e.g. 'the red box' or 'any ball'."""

    description: ObjectDescription
    quantifier: Quantifier = "the"

    def __post_init__(self) -> None:
        """Verify that the entity's quantifier is recognized."""
        if self.quantifier not in QUANTIFIERS:
            raise ValueError(f"Unknown quantifier '{self.quantifier}'; expected {QUANTIFIERS}.")

    def __str__(self) -> str:
        """Return a readable rendering of the entity."""
        return f"{self.quantifier} {self.description}"


@dataclass(frozen=True)
class Location:
    """A spatial relation to an entity, e.g. 'on top of the table'."""

    relation: str
    entity: Entity

    def __post_init__(self) -> None:
        """Verify that the location uses a spatial relation."""
        if self.relation not in SPATIAL_RELATIONS:
            raise ValueError(f"Unknown spatial relation '{self.relation}' in location.")

    def __str__(self) -> str:
        """Return a readable rendering of the location."""
        return f"{self.relation} {self.entity}"


@dataclass(frozen=True)
class TakeCommand:
    """A command to pick up and hold an object, e.g. 'take the blue box'."""

    entity: Entity

    def __str__(self) -> str:
        """Return a readable rendering of the command."""
        return f"take {self.entity}"


@dataclass(frozen=True)
class MoveCommand:
    """A command to move an object to a location, e.g. 'put the ball in a box'."""

    entity: Entity
    location: Location

    def __str__(self) -> str:
        """Return a readable rendering of the command."""
        return f"move {self.entity} {self.location}"


@dataclass(frozen=True)
class PutCommand:
    """A command to put the currently held object at a location, e.g. 'put it on the floor'."""

    location: Location

    def __str__(self) -> str:
        """Return a readable rendering of the command."""
        return f"put it {self.location}"


Command = Union[TakeCommand, MoveCommand, PutCommand]
"""A parsed command about the blocks world."""
