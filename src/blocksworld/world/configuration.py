"""Define classes to represent snapshots of the blocks world during search."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Iterator, Mapping, Sequence

from blocksworld.world.objects import FLOOR, floor_column, is_floor

if TYPE_CHECKING:
    from blocksworld.world.objects import ObjectDefinition, Supportable

Stack = tuple[str, ...]
"""A column of object identifiers, ordered from bottom to top."""


@dataclass(frozen=True)
class Configuration:
    """A snapshot of the stacks, the held object, and the arm column.

    Configurations are values: equality and hashing consider only the stacks and the
    held object, so that two independently constructed but structurally identical
    configurations are interchangeable during search. The arm column is carried along
    for plan synthesis but never distinguishes two configurations.
    """

    stacks: tuple[Stack, ...]
    holding: str | None = None
    arm: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        """Verify that every object occupies at most one place in the configuration."""
        counts = Counter(obj for stack in self.stacks for obj in stack)
        if self.holding is not None:
            counts[self.holding] += 1

        duplicated = sorted(obj for obj, count in counts.items() if count > 1)
        if duplicated:
            raise ValueError(f"Objects appear in more than one place: {duplicated}.")

        floors = sorted(obj for obj in counts if is_floor(obj))
        if floors:
            raise ValueError(f"The floor cannot be stacked or held: {floors}.")

        if self.stacks and not 0 <= self.arm < len(self.stacks):
            raise ValueError(f"Arm column {self.arm} is outside of {len(self.stacks)} stacks.")

    @classmethod
    def from_stacks(
        cls,
        stacks: Sequence[Sequence[str]],
        holding: str | None = None,
        arm: int = 0,
    ) -> Configuration:
        """Construct a configuration from (possibly mutable) nested sequences of identifiers.

        :param stacks: Columns of object identifiers, each ordered from bottom to top
        :param holding: Identifier of the held object (defaults to None = empty hand)
        :param arm: Column index of the arm (defaults to 0)
        :return: Constructed immutable configuration
        """
        return cls(tuple(tuple(stack) for stack in stacks), holding, arm)

    def __str__(self) -> str:
        """Return a compact readable representation of the configuration."""
        columns = " | ".join(" ".join(stack) if stack else "_" for stack in self.stacks)
        held = self.holding if self.holding is not None else "-"
        return f"[{columns}] holding: {held} arm: {self.arm}"

    @property
    def key(self) -> tuple[tuple[Stack, ...], str | None]:
        """Retrieve a canonical hashable key identifying the configuration's structure."""
        return (self.stacks, self.holding)

    @property
    def num_stacks(self) -> int:
        """Retrieve the number of columns in the configuration."""
        return len(self.stacks)

    def placed_objects(self) -> Iterator[str]:
        """Iterate over all objects currently in some stack (bottom to top, left to right)."""
        for stack in self.stacks:
            yield from stack

    def is_reachable(self, obj: str) -> bool:
        """Evaluate whether the object is currently placed in a stack or held by the arm."""
        return obj == self.holding or self.locate(obj) is not None

    def locate(self, obj: str) -> tuple[int, int] | None:
        """Find the (stack index, height index) of the given object.

        The floor beneath column N (e.g. "floor-2") is located at height -1 of stack N.

        :param obj: Identifier of an object, or of the floor beneath some column
        :return: Position of the object, or None if it isn't placed in any stack
        """
        column = floor_column(obj)
        if column is not None:
            return (column, -1) if column < self.num_stacks else None

        for stack_idx, stack in enumerate(self.stacks):
            if obj in stack:
                return (stack_idx, stack.index(obj))
        return None

    def top_of(self, stack_idx: int) -> str | None:
        """Retrieve the topmost object of the given stack (None if the stack is empty)."""
        stack = self.stacks[stack_idx]
        return stack[-1] if stack else None

    def objects_above(self, obj: str) -> Stack:
        """Retrieve the objects stacked above the given object (empty if it isn't placed)."""
        position = self.locate(obj)
        if position is None:
            return ()
        stack_idx, height = position
        return self.stacks[stack_idx][height + 1 :]

    def with_pick(self, source: int) -> Configuration:
        """Create a new configuration in which the top of the source stack is held."""
        if self.holding is not None:
            raise ValueError(f"Cannot pick from stack {source} while holding '{self.holding}'.")
        top = self.top_of(source)
        if top is None:
            raise ValueError(f"Cannot pick from empty stack {source}.")

        stacks = list(self.stacks)
        stacks[source] = stacks[source][:-1]
        return replace(self, stacks=tuple(stacks), holding=top, arm=source)

    def with_drop(self, destination: int) -> Configuration:
        """Create a new configuration in which the held object is placed atop a stack."""
        if self.holding is None:
            raise ValueError(f"Cannot drop onto stack {destination} with an empty hand.")

        stacks = list(self.stacks)
        stacks[destination] = (*stacks[destination], self.holding)
        return replace(self, stacks=tuple(stacks), holding=None, arm=destination)

    def with_arm(self, arm: int) -> Configuration:
        """Create a new configuration with the arm moved to the given column."""
        return replace(self, arm=arm)


@dataclass(frozen=True)
class WorldState:
    """The static object definitions of a world together with its current configuration."""

    objects: Mapping[str, ObjectDefinition]
    """Maps each object identifier to its physical definition."""

    configuration: Configuration

    def __post_init__(self) -> None:
        """Verify that the configuration only refers to defined objects."""
        floors = sorted(obj for obj in self.objects if is_floor(obj))
        if floors:
            raise ValueError(f"Object identifiers are reserved for the floor: {floors}.")

        unknown = set(self.configuration.placed_objects())
        if self.configuration.holding is not None:
            unknown.add(self.configuration.holding)
        unknown -= set(self.objects)
        if unknown:
            raise KeyError(f"Configuration refers to undefined objects: {sorted(unknown)}.")

    def definition_of(self, obj: str) -> Supportable:
        """Retrieve the physical definition of the identified object (or the floor)."""
        if is_floor(obj):
            return FLOOR
        if obj not in self.objects:
            raise KeyError(f"Cannot retrieve the definition of unknown object: '{obj}'.")
        return self.objects[obj]

    def with_configuration(self, configuration: Configuration) -> WorldState:
        """Create a world state sharing these object definitions with another configuration."""
        return replace(self, configuration=configuration)
