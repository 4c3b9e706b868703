"""Define the graph of configurations reachable through the arm's pick and place cycles."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blocksworld.world.objects import FLOOR_ID
from blocksworld.world.physical_laws import can_place

if TYPE_CHECKING:
    from blocksworld.world.configuration import Configuration, WorldState

TRANSITION_COST = 1.0
"""Cost of every edge: one pick, one place, or one combined pick-and-place cycle."""


class WorldStateGraph:
    """A directed graph whose nodes are configurations and whose edges are arm operations.

    With an empty hand, each edge picks the top of one stack and places it atop another
    (one pick/place cycle), or only picks it up so that holding goals can be reached.
    With a full hand, each edge places the held object atop some stack. Arm travel is
    free, so every edge has unit cost. Edges leading into configurations that violate the
    physical laws are never generated.
    """

    def __init__(self, world: WorldState) -> None:
        """Initialize the graph using the object definitions of the given world."""
        self.world = world

    def supports(self, configuration: Configuration, obj: str, stack_idx: int) -> bool:
        """Evaluate whether the given stack's top (or the floor) may support the object."""
        base = configuration.top_of(stack_idx)
        return can_place(self.world, obj, FLOOR_ID if base is None else base)

    def successors(self, configuration: Configuration) -> list[tuple[Configuration, float]]:
        """Generate the configurations reachable from the given one via a single edge.

        Every successor is a freshly constructed configuration; the given configuration
        is never modified.

        :param configuration: Configuration being expanded
        :return: List of (successor configuration, transition cost) pairs
        """
        held = configuration.holding
        if held is not None:
            return [
                (configuration.with_drop(j), TRANSITION_COST)
                for j in range(configuration.num_stacks)
                if self.supports(configuration, held, j)
            ]

        edges: list[tuple[Configuration, float]] = []
        for i in range(configuration.num_stacks):
            top = configuration.top_of(i)
            if top is None:
                continue

            picked = configuration.with_pick(i)
            for j in range(configuration.num_stacks):
                if j != i and self.supports(picked, top, j):
                    edges.append((picked.with_drop(j), TRANSITION_COST))

            edges.append((picked, TRANSITION_COST))

        return edges


def same_configuration(a: Configuration, b: Configuration) -> bool:
    """Evaluate whether two configurations have identical stacks and held objects."""
    return a.key == b.key
