"""Unit tests for the physical laws of the blocks world."""

import pytest
from hypothesis import given

from blocksworld.world import (
    FLOOR,
    Configuration,
    ObjectDefinition,
    WorldState,
    can_place,
    can_support,
    is_physically_valid,
)

from ..fixtures.world_fixtures import make_world
from ..strategies.world_strategies import object_definitions, worlds


@given(object_definitions())
def test_floor_supports_everything(definition: ObjectDefinition) -> None:
    """Verify that any object may rest directly on the floor."""
    assert can_support(definition, FLOOR)


@given(object_definitions())
def test_floor_is_never_supported(definition: ObjectDefinition) -> None:
    """Verify that the floor itself can never be placed on an object."""
    assert not can_support(FLOOR, definition)


@given(worlds())
def test_object_cannot_be_placed_on_itself(world: WorldState) -> None:
    """Verify that no object of a world may rest on itself, whatever its definition."""
    for obj in world.objects:
        assert not can_place(world, obj, obj)


@pytest.mark.parametrize(
    ("top", "base", "expected"),
    [
        # Small objects cannot support large objects
        (("brick", "large"), ("brick", "small"), False),
        (("brick", "small"), ("brick", "large"), True),
        # Balls support nothing
        (("ball", "small"), ("ball", "large"), False),
        (("brick", "small"), ("ball", "large"), False),
        # Balls cannot rest on tables
        (("ball", "small"), ("table", "large"), False),
        (("ball", "small"), ("box", "large"), True),
        # Boxes cannot contain pyramids, planks, or boxes of the same size
        (("pyramid", "large"), ("box", "large"), False),
        (("plank", "small"), ("box", "small"), False),
        (("box", "large"), ("box", "large"), False),
        (("brick", "large"), ("box", "large"), True),
        (("plank", "small"), ("box", "large"), True),
        # Small boxes cannot rest on pyramids or small bricks
        (("box", "small"), ("pyramid", "small"), False),
        (("box", "small"), ("pyramid", "large"), False),
        (("box", "small"), ("brick", "small"), False),
        (("box", "small"), ("brick", "large"), True),
        # Large boxes cannot rest on large pyramids
        (("box", "large"), ("pyramid", "large"), False),
        (("box", "large"), ("table", "large"), True),
    ],
)
def test_can_support_rules(top: tuple, base: tuple, expected: bool) -> None:
    """Verify each of the stacking rules against pairs of object definitions."""
    # Arrange - Construct distinct definitions for the top and base objects
    top_definition = ObjectDefinition(form=top[0], size=top[1], color="red")
    base_definition = ObjectDefinition(form=base[0], size=base[1], color="blue")

    # Act/Assert - Verify that the rules agree with the expected outcome
    assert can_support(top_definition, base_definition) == expected


def test_can_place_rejects_identical_ids(small_world: WorldState) -> None:
    """Verify that an object can never be placed on itself, even when identified by id."""
    assert not can_place(small_world, "k", "k")
    assert can_place(small_world, "k", "floor")
    assert can_place(small_world, "k", "floor-2")


def test_equal_definitions_of_distinct_objects_may_stack() -> None:
    """Verify that two distinct objects with equal definitions are judged by the rules alone."""
    # Arrange - Two large green bricks, one atop the other
    world = make_world(
        {"x": ("brick", "large", "green"), "y": ("brick", "large", "green")},
        [["x", "y"]],
    )

    # Act/Assert
    assert can_place(world, "y", "x")
    assert is_physically_valid(world)


def test_is_physically_valid_detects_violations() -> None:
    """Verify that a stack with a ball supporting a brick is judged physically invalid."""
    objects = {"b": ("ball", "large", "red"), "r": ("brick", "small", "red")}
    world = make_world(objects, [["b", "r"]])
    assert not is_physically_valid(world)


@given(worlds())
def test_generated_worlds_are_physically_valid(world: WorldState) -> None:
    """Verify that the world strategy only generates physically valid worlds."""
    assert is_physically_valid(world)


def test_objects_sharing_a_definition_may_stack() -> None:
    """Verify that distinct objects sharing one definition instance may rest on each other."""
    # Arrange - Two small red bricks described by the same definition instance
    brick = ObjectDefinition(form="brick", size="small", color="red")
    world = WorldState({"a": brick, "b": brick}, Configuration.from_stacks([["a", "b"], []]))

    # Act/Assert
    assert can_support(brick, brick)
    assert can_place(world, "b", "a")
    assert not can_place(world, "a", "a")
    assert is_physically_valid(world)
