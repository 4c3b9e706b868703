"""Unit tests for compiling parsed commands into goal formulas."""

import pytest

from blocksworld.errors import NoInterpretationError, UnresolvedReferenceError
from blocksworld.grounding import (
    FLOOR_DESCRIPTION,
    Entity,
    Location,
    MoveCommand,
    ObjectDescription,
    PutCommand,
    ResolvedArguments,
    TakeCommand,
    compile_goal,
    interpret_command,
    resolve_arguments,
)
from blocksworld.world import Configuration, ObjectDefinition, WorldState

from ..fixtures.world_fixtures import make_world


def test_take_ambiguous_object(small_world: WorldState) -> None:
    """Verify that taking an ambiguous object yields one holding disjunct per match."""
    # Arrange - "take a ball"
    command = TakeCommand(Entity(ObjectDescription(form="ball"), "any"))

    # Act
    goal = interpret_command(command, small_world)

    # Assert
    assert str(goal) == "holding(e) | holding(f)"


def test_take_excludes_the_floor(small_world: WorldState) -> None:
    """Verify that the floor can never be taken."""
    command = TakeCommand(Entity(FLOOR_DESCRIPTION))

    with pytest.raises(NoInterpretationError):
        interpret_command(command, small_world)


def test_move_discards_physically_impossible_placements(small_world: WorldState) -> None:
    """Verify that 'put the white ball in a box' excludes the small box that cannot contain it."""
    command = MoveCommand(
        Entity(ObjectDescription(form="ball", color="white")),
        Location("inside", Entity(ObjectDescription(form="box"), "any")),
    )

    goal = interpret_command(command, small_world)

    assert str(goal) == "inside(e,k) | inside(e,l)"


def test_move_onto_the_floor(small_world: WorldState) -> None:
    """Verify that any object may be moved onto the floor."""
    command = MoveCommand(
        Entity(ObjectDescription(form="ball")),
        Location("ontop", Entity(FLOOR_DESCRIPTION)),
    )

    goal = interpret_command(command, small_world)

    assert str(goal) == "ontop(e,floor) | ontop(f,floor)"


def test_move_with_non_support_relation(small_world: WorldState) -> None:
    """Verify that relations other than ontop/inside are accepted without physical checks."""
    # Arrange - "put a box beside the white ball"
    command = MoveCommand(
        Entity(ObjectDescription(form="box"), "any"),
        Location("beside", Entity(ObjectDescription(form="ball", color="white"))),
    )

    # Act
    goal = interpret_command(command, small_world)

    # Assert
    assert str(goal) == "beside(k,e) | beside(l,e) | beside(m,e)"


def test_move_skips_relations_of_an_object_to_itself(small_world: WorldState) -> None:
    """Verify that 'put a ball beside a ball' never relates a ball to itself."""
    command = MoveCommand(
        Entity(ObjectDescription(form="ball"), "any"),
        Location("beside", Entity(ObjectDescription(form="ball"), "any")),
    )

    goal = interpret_command(command, small_world)

    assert str(goal) == "beside(e,f) | beside(f,e)"


def test_ball_on_table_has_no_interpretation() -> None:
    """Verify that putting a ball on a table is rejected by the physical laws."""
    # Arrange - A small red ball and a large blue table in separate columns
    objects = {"a": ("ball", "small", "red"), "b": ("table", "large", "blue")}
    world = make_world(objects, [["a"], ["b"]])
    command = MoveCommand(
        Entity(ObjectDescription(form="ball")),
        Location("ontop", Entity(ObjectDescription(form="table"))),
    )

    # Act/Assert
    with pytest.raises(NoInterpretationError):
        interpret_command(command, world)


def test_unmatched_description_is_unresolved(small_world: WorldState) -> None:
    """Verify that a description matching no object raises an UnresolvedReferenceError."""
    command = TakeCommand(Entity(ObjectDescription(form="pyramid", color="purple")))

    with pytest.raises(UnresolvedReferenceError, match="no purple pyramid"):
        interpret_command(command, small_world)


def test_unmatched_destination_is_unresolved(small_world: WorldState) -> None:
    """Verify that a location relative to no object raises an UnresolvedReferenceError."""
    command = MoveCommand(
        Entity(ObjectDescription(form="ball", color="white")),
        Location("ontop", Entity(ObjectDescription(form="brick"))),
    )

    with pytest.raises(UnresolvedReferenceError):
        interpret_command(command, small_world)


def test_universal_quantifier_is_not_interpreted(small_world: WorldState) -> None:
    """Verify that commands about 'all' objects are rejected."""
    command = TakeCommand(Entity(ObjectDescription(form="ball"), "all"))

    with pytest.raises(NoInterpretationError, match="all"):
        interpret_command(command, small_world)


def test_put_the_held_object(small_world: WorldState) -> None:
    """Verify that 'put it in the red box' refers to the held object."""
    # Arrange - Hold the black ball
    world = small_world.with_configuration(small_world.configuration.with_pick(3))
    command = PutCommand(Location("inside", Entity(ObjectDescription(form="box", color="red"))))

    # Act
    arguments = resolve_arguments(command, world)
    goal = compile_goal(command, arguments, world)

    # Assert
    assert arguments == ResolvedArguments(targets=frozenset({"f"}), destinations=frozenset({"l"}))
    assert str(goal) == "inside(f,l)"


def test_put_with_empty_hand_is_unresolved(small_world: WorldState) -> None:
    """Verify that 'put it ...' cannot be resolved while the arm holds nothing."""
    command = PutCommand(Location("ontop", Entity(FLOOR_DESCRIPTION)))

    with pytest.raises(UnresolvedReferenceError, match="holds nothing"):
        interpret_command(command, small_world)


def test_move_between_objects_sharing_a_definition() -> None:
    """Verify that two bricks described by one definition instance may be stacked either way."""
    # Arrange - "put a brick on the brick", with both bricks sharing a definition
    brick = ObjectDefinition(form="brick", size="small", color="red")
    world = WorldState({"a": brick, "b": brick}, Configuration.from_stacks([["a"], ["b"]]))
    command = MoveCommand(
        Entity(ObjectDescription(form="brick"), "any"),
        Location("ontop", Entity(ObjectDescription(form="brick"))),
    )

    # Act
    goal = interpret_command(command, world)

    # Assert
    assert str(goal) == "ontop(a,b) | ontop(b,a)"
