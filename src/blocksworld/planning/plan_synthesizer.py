"""Define functions translating paths of configurations into executable arm actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from blocksworld.world.actions import ArmAction

if TYPE_CHECKING:
    from blocksworld.world.configuration import Configuration, WorldState


@dataclass(frozen=True)
class Plan:
    """A sequence of arm actions with a parallel, human-readable narration."""

    actions: list[ArmAction] = field(default_factory=list)
    narration: list[str] = field(default_factory=list)
    """Narration of each action (aligned index-by-index with the actions)."""

    def __post_init__(self) -> None:
        """Verify that the narration annotates every action exactly once."""
        if len(self.actions) != len(self.narration):
            raise ValueError(
                f"Plan has {len(self.actions)} actions but {len(self.narration)} annotations.",
            )

    def __len__(self) -> int:
        """Retrieve the number of actions in the plan."""
        return len(self.actions)

    @property
    def symbols(self) -> str:
        """Retrieve the plan encoded as a string of single-letter action symbols."""
        return "".join(action.value for action in self.actions)


def transition_columns(
    before: Configuration,
    after: Configuration,
) -> tuple[int | None, int | None]:
    """Identify the stacks that lost and gained an object along a single graph edge.

    :param before: Configuration at the start of the edge
    :param after: Configuration at the end of the edge
    :return: Tuple of (source column, destination column); the source is None if the
        object was already held, and the destination is None if the object ends up held
    :raises ValueError: If the configurations aren't connected by a single edge
    """
    if before.num_stacks != after.num_stacks:
        raise ValueError(f"Configurations differ in number of stacks: {before} vs. {after}.")

    source: int | None = None
    destination: int | None = None
    for idx, (stack_before, stack_after) in enumerate(zip(before.stacks, after.stacks)):
        if len(stack_before) == len(stack_after) + 1 and source is None:
            source = idx
        elif len(stack_before) + 1 == len(stack_after) and destination is None:
            destination = idx
        elif stack_before != stack_after:
            raise ValueError(f"Stack {idx} changed by more than one object: {before} -> {after}.")

    if source is None and before.holding is None:
        raise ValueError(f"No object was picked up between {before} and {after}.")
    if destination is None and after.holding is None:
        raise ValueError(f"No object was placed or held between {before} and {after}.")

    return (source, destination)


def arm_steps(start: int, end: int) -> list[ArmAction]:
    """Compute the single-column steps moving the arm from one column to another."""
    step = ArmAction.STEP_RIGHT if end > start else ArmAction.STEP_LEFT
    return [step] * abs(end - start)


def synthesize(path: Sequence[Configuration], start_arm: int, world: WorldState) -> Plan:
    """Translate a path of configurations into the arm actions realizing it.

    For each edge, the arm travels to the source column and picks up its top object (unless
    the object is already held), then travels to the destination column and drops it
    (unless the edge ends with the object held).

    :param path: Configurations along a path of the world-state graph (start included)
    :param start_arm: Column index of the arm in the first configuration
    :param world: World providing object definitions used to narrate the plan
    :return: Plan of arm actions (empty if the path contains a single configuration)
    """
    actions: list[ArmAction] = []
    narration: list[str] = []
    arm = start_arm

    def travel(column: int) -> None:
        nonlocal arm
        for step in arm_steps(arm, column):
            actions.append(step)
            narration.append("Moving right" if step is ArmAction.STEP_RIGHT else "Moving left")
        arm = column

    for before, after in zip(path, path[1:]):
        source, destination = transition_columns(before, after)

        if source is not None:
            travel(source)
            picked = before.top_of(source)
            actions.append(ArmAction.PICK)
            narration.append(f"Picking up the {world.definition_of(picked)}")

        if destination is not None:
            travel(destination)
            dropped = after.top_of(destination)
            base = after.stacks[destination][-2] if len(after.stacks[destination]) > 1 else None
            base_text = "the floor" if base is None else f"the {world.definition_of(base)}"
            actions.append(ArmAction.DROP)
            narration.append(f"Dropping the {world.definition_of(dropped)} on {base_text}")

    return Plan(actions, narration)
