"""Define test fixtures providing example blocks worlds."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

import pytest

from blocksworld.world import Configuration, ObjectDefinition, WorldState


def data_path() -> Path:
    """Retrieve the path to the `test_data` folder."""
    path = Path(__file__).parent.parent / "test_data"
    assert path.exists()
    return path


def make_world(
    objects: Mapping[str, tuple[str, str | None, str | None]],
    stacks: Sequence[Sequence[str]],
    holding: str | None = None,
    arm: int = 0,
) -> WorldState:
    """Construct a world from (form, size, color) triples and nested stacks of identifiers."""
    definitions = {
        obj_id: ObjectDefinition(form=form, size=size, color=color)  # type: ignore[arg-type]
        for obj_id, (form, size, color) in objects.items()
    }
    return WorldState(definitions, Configuration.from_stacks(stacks, holding, arm))


SMALL_WORLD_OBJECTS = {
    "a": ("brick", "large", "green"),
    "b": ("brick", "small", "white"),
    "c": ("plank", "large", "red"),
    "d": ("plank", "small", "green"),
    "e": ("ball", "large", "white"),
    "f": ("ball", "small", "black"),
    "g": ("table", "large", "blue"),
    "h": ("table", "small", "red"),
    "i": ("pyramid", "large", "yellow"),
    "j": ("pyramid", "small", "red"),
    "k": ("box", "large", "yellow"),
    "l": ("box", "large", "red"),
    "m": ("box", "small", "blue"),
}


@pytest.fixture
def small_world() -> WorldState:
    """Return a five-column world in which only some of the defined objects are placed.

    Column 0 holds the large white ball, column 1 the red box on the blue table, and
    column 3 the black ball inside the small blue box inside the yellow box.
    """
    stacks = [["e"], ["g", "l"], [], ["k", "m", "f"], []]
    return make_world(SMALL_WORLD_OBJECTS, stacks)


@pytest.fixture
def ball_and_table_world() -> WorldState:
    """Return a world holding only a large white ball and a small blue table."""
    objects = {"e": ("ball", "large", "white"), "t": ("table", "small", "blue")}
    return make_world(objects, [["e"], ["t"]])


@pytest.fixture
def single_box_world() -> WorldState:
    """Return a world with one small box in the left column and an empty right column."""
    return make_world({"a": ("box", "small", "red")}, [["a"], []])
