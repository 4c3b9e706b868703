"""Define the spatial relations that may hold between placed objects in a configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, get_args

from blocksworld.world.objects import FLOOR_ID, is_floor

if TYPE_CHECKING:
    from blocksworld.world.configuration import Configuration

SpatialRelation = Literal["ontop", "inside", "above", "below", "leftof", "rightof", "beside"]
"""A spatial relation between two objects, evaluated using their stack positions."""

Relation = Literal["ontop", "inside", "above", "below", "leftof", "rightof", "beside", "holding"]
"""Any relation that may appear in a goal literal."""

SPATIAL_RELATIONS: tuple[str, ...] = get_args(SpatialRelation)
RELATIONS: tuple[str, ...] = get_args(Relation)

SUPPORT_RELATIONS = frozenset({"ontop", "inside"})
"""Relations in which the second argument directly supports the first."""


def holds(relation: str, parent: str, child: str, configuration: Configuration) -> bool:
    """Evaluate whether a spatial relation currently holds between two objects.

    The parent is the relation's first argument, e.g. `holds("leftof", a, b, c)` asks
    whether `a` is left of `b`. Objects that aren't placed in a stack (e.g. the held
    object) take part in no relation. The floor may only appear as the child: the floor
    "floor" lies beneath every stack, while e.g. "floor-2" lies beneath stack 2 alone.

    :param relation: Name of a spatial relation
    :param parent: Identifier of the relation's first argument
    :param child: Identifier of the relation's second argument (may be the floor)
    :param configuration: Configuration in which the relation is evaluated
    :return: True if the relation holds in the configuration, else False
    """
    if relation not in SPATIAL_RELATIONS:
        raise ValueError(f"Cannot evaluate unknown spatial relation: '{relation}'.")

    if is_floor(parent):
        return False

    parent_pos = configuration.locate(parent)
    if parent_pos is None:
        return False
    parent_stack, parent_height = parent_pos

    if child == FLOOR_ID:
        if relation in SUPPORT_RELATIONS:
            return parent_height == 0
        return relation == "above"  # The floor lies beneath every stack

    child_pos = configuration.locate(child)
    if child_pos is None:
        return False
    child_stack, child_height = child_pos

    if relation in SUPPORT_RELATIONS:
        return parent_stack == child_stack and parent_height == child_height + 1
    if relation == "above":
        return parent_stack == child_stack and parent_height > child_height
    if relation == "below":
        return parent_stack == child_stack and parent_height < child_height
    if relation == "leftof":
        return parent_stack == child_stack - 1
    if relation == "rightof":
        return parent_stack == child_stack + 1

    return abs(parent_stack - child_stack) == 1  # beside
