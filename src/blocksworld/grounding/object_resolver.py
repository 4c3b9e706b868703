"""Define functions resolving object descriptions into the identifiers of matching objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blocksworld.world.objects import ANY_FORM, FLOOR_ID
from blocksworld.world.relations import holds

if TYPE_CHECKING:
    from blocksworld.grounding.commands import Location, ObjectDescription
    from blocksworld.world.configuration import WorldState
    from blocksworld.world.objects import ObjectDefinition


def matches(description: ObjectDescription, definition: ObjectDefinition) -> bool:
    """Evaluate whether an object definition matches every attribute given by a description.

    The description's location (if any) is ignored; see `resolve` for location filtering.
    """
    if description.color is not None and description.color != definition.color:
        return False
    if description.size is not None and description.size != definition.size:
        return False
    if description.form is not None and description.form != ANY_FORM:
        return description.form == definition.form
    return True


def resolve(description: ObjectDescription, world: WorldState) -> frozenset[str]:
    """Resolve an object description into the identifiers of all objects it may refer to.

    Only objects currently placed in a stack or held by the arm can be referred to. If
    the description carries a location, the location's entity is resolved recursively
    and only the candidates related to at least one of its matches are kept.

    An ambiguous description resolves into several identifiers; all are kept so that
    later stages can treat them as alternatives.

    :param description: Description of the object(s) being referred to
    :param world: World in which the description is resolved
    :return: Identifiers of the matching objects (empty if nothing matches)
    """
    if description.is_floor:
        return frozenset({FLOOR_ID})

    config = world.configuration
    candidates = {
        obj_id
        for obj_id, definition in world.objects.items()
        if matches(description, definition) and config.is_reachable(obj_id)
    }

    if description.location is not None:
        candidates = filter_by_location(candidates, description.location, world)

    return frozenset(candidates)


def filter_by_location(
    candidates: set[str],
    location: Location,
    world: WorldState,
) -> set[str]:
    """Keep the candidates standing in the location's relation to some matching entity.

    :param candidates: Identifiers of the objects being filtered
    :param location: Relation to an entity that kept candidates must satisfy
    :param world: World in which the location is resolved
    :return: Subset of the candidates satisfying the location
    """
    anchors = resolve(location.entity.description, world)

    return {
        obj_id
        for obj_id in candidates
        if any(holds(location.relation, obj_id, anchor, world.configuration) for anchor in anchors)
    }
