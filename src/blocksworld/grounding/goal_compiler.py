"""Define functions compiling grounded commands into goal formulas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from blocksworld.errors import NoInterpretationError, UnresolvedReferenceError
from blocksworld.grounding.commands import MoveCommand, PutCommand, TakeCommand
from blocksworld.grounding.object_resolver import resolve
from blocksworld.io.logging import log_info
from blocksworld.logic.formulas import DNFFormula, GoalLiteral
from blocksworld.world.objects import FLOOR_ID
from blocksworld.world.physical_laws import can_place
from blocksworld.world.relations import SUPPORT_RELATIONS

if TYPE_CHECKING:
    from blocksworld.grounding.commands import Command, Entity
    from blocksworld.world.configuration import WorldState


@dataclass(frozen=True)
class ResolvedArguments:
    """The identifiers that each argument of a command may refer to."""

    targets: frozenset[str]
    """Objects that the command acts upon (e.g. the object to be moved)."""

    destinations: frozenset[str] | None = None
    """Objects related to the command's location (None for commands without a location)."""


def resolve_entity(entity: Entity, world: WorldState) -> frozenset[str]:
    """Resolve an entity into its matching identifiers.

    :raises UnresolvedReferenceError: If no object in the world matches the entity
    :raises NoInterpretationError: If the entity is universally quantified
    """
    if entity.quantifier == "all":
        raise NoInterpretationError(f"Cannot interpret '{entity}': 'all' is not supported.")

    matches = resolve(entity.description, world)
    if not matches:
        raise UnresolvedReferenceError(f"There is no {entity.description} in the world.")
    return matches


def resolve_arguments(command: Command, world: WorldState) -> ResolvedArguments:
    """Resolve every argument of a command into the identifiers it may refer to.

    :param command: Parsed command whose arguments are resolved
    :param world: World in which the arguments are resolved
    :return: Resolved identifiers of the command's target(s) and destination(s)
    :raises UnresolvedReferenceError: If some argument matches no object
    """
    if isinstance(command, TakeCommand):
        return ResolvedArguments(targets=resolve_entity(command.entity, world))

    if isinstance(command, MoveCommand):
        targets = resolve_entity(command.entity, world)
    else:
        held = world.configuration.holding
        if held is None:
            raise UnresolvedReferenceError("Cannot put 'it' anywhere: the arm holds nothing.")
        targets = frozenset({held})

    destinations = resolve_entity(command.location.entity, world)
    return ResolvedArguments(targets=targets, destinations=destinations)


def compile_goal(command: Command, arguments: ResolvedArguments, world: WorldState) -> DNFFormula:
    """Compile a command and its resolved arguments into a goal formula.

    Every combination of resolved arguments becomes one disjunct of the goal, unless it
    describes a physically impossible placement (which is silently discarded).

    :param command: Parsed command being interpreted
    :param arguments: Identifiers resolved for each of the command's arguments
    :param world: World providing object definitions for the physical laws
    :return: Goal formula in disjunctive normal form
    :raises NoInterpretationError: If no combination of arguments is feasible
    """
    literals: list[GoalLiteral] = []

    if isinstance(command, TakeCommand):
        literals = [GoalLiteral.holding(obj) for obj in sorted(arguments.targets - {FLOOR_ID})]

    elif isinstance(command, (MoveCommand, PutCommand)):
        if arguments.destinations is None:
            raise ValueError(f"Command '{command}' requires resolved destinations.")

        relation = command.location.relation
        for obj in sorted(arguments.targets - {FLOOR_ID}):
            for dest in sorted(arguments.destinations):
                if obj == dest:
                    continue  # Objects have no spatial relation to themselves
                if relation in SUPPORT_RELATIONS and not can_place(world, obj, dest):
                    continue
                literals.append(GoalLiteral(relation, (obj, dest)))

    else:
        raise TypeError(f"Cannot compile a goal for unknown command type: {type(command)}.")

    if not literals:
        raise NoInterpretationError(f"No physically possible interpretation of '{command}'.")

    return DNFFormula.of_literals(literals)


def interpret_command(command: Command, world: WorldState) -> DNFFormula:
    """Ground a parsed command in the world, producing the goal formula it describes.

    :param command: Parsed command to be interpreted
    :param world: Current state of the world
    :return: Goal formula whose satisfaction achieves the command
    :raises UnresolvedReferenceError: If some description in the command matches nothing
    :raises NoInterpretationError: If the command has no physically feasible goal
    """
    arguments = resolve_arguments(command, world)
    goal = compile_goal(command, arguments, world)
    log_info(f"Interpreted '{command}' as goal: {goal}")
    return goal
