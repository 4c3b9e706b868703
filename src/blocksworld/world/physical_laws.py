"""Define the static physical laws deciding which objects may support which others."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blocksworld.world.objects import Floor

if TYPE_CHECKING:
    from blocksworld.world.configuration import WorldState
    from blocksworld.world.objects import Supportable


def can_support(top: Supportable, base: Supportable) -> bool:
    """Evaluate whether the top object may rest directly on (or inside) the base object.

    Definitions are values shared freely between objects, so this judges the stacking
    rules alone; an object resting on itself is ruled out by `can_place`.

    :param top: Definition of the object being placed (the floor is never placed)
    :param base: Definition of the supporting object, or the floor
    :return: True if the placement obeys the physical laws, else False
    """
    if isinstance(base, Floor):
        return True
    if isinstance(top, Floor):
        return False

    if top.size == "large" and base.size == "small":
        return False  # Small objects cannot support large objects

    if base.form == "ball":
        return False  # Balls support nothing

    if top.form == "ball" and base.form == "table":
        return False

    if base.form == "box" and base.size == top.size and top.form in ("pyramid", "plank", "box"):
        return False  # A box cannot contain a same-size pyramid, plank, or box

    if top.form == "box" and top.size == "small":
        if base.form == "pyramid" or (base.form == "brick" and base.size == "small"):
            return False

    if top.form == "box" and top.size == "large":
        if base.form == "pyramid" and base.size == "large":
            return False

    return True


def can_place(world: WorldState, top_id: str, base_id: str) -> bool:
    """Evaluate whether the identified object may rest directly on the identified base.

    :param world: World providing the objects' definitions
    :param top_id: Identifier of the object being placed
    :param base_id: Identifier of the supporting object (or the floor)
    :return: True if the objects are distinct and the placement obeys the physical laws
    """
    if top_id == base_id:
        return False
    return can_support(world.definition_of(top_id), world.definition_of(base_id))


def is_physically_valid(world: WorldState) -> bool:
    """Evaluate whether every stack in the world's configuration obeys the physical laws."""
    for stack in world.configuration.stacks:
        for base_id, top_id in zip(stack, stack[1:]):
            if not can_place(world, top_id, base_id):
                return False
    return True
