"""Define a simulator that executes arm actions against a world state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from blocksworld.errors import InvalidActionError
from blocksworld.world.actions import ArmAction
from blocksworld.world.objects import FLOOR_ID
from blocksworld.world.physical_laws import can_place

if TYPE_CHECKING:
    from blocksworld.world.configuration import WorldState


class ArmSimulator:
    """A simulator tracking the world as the arm executes a sequence of actions."""

    def __init__(self, world: WorldState) -> None:
        """Initialize the simulator from the given initial world state."""
        self.world = world

    def step(self, action: ArmAction) -> WorldState:
        """Execute a single arm action, updating the simulated world.

        :param action: Arm action to be executed
        :return: World state resulting from the action
        :raises InvalidActionError: If the action cannot be executed in the current world
        """
        config = self.world.configuration

        if action is ArmAction.STEP_LEFT:
            if config.arm == 0:
                raise InvalidActionError("Cannot step left from the leftmost column.")
            config = config.with_arm(config.arm - 1)

        elif action is ArmAction.STEP_RIGHT:
            if config.arm >= config.num_stacks - 1:
                raise InvalidActionError("Cannot step right from the rightmost column.")
            config = config.with_arm(config.arm + 1)

        elif action is ArmAction.PICK:
            if config.holding is not None:
                raise InvalidActionError(f"Cannot pick while holding '{config.holding}'.")
            if config.top_of(config.arm) is None:
                raise InvalidActionError(f"Cannot pick from empty column {config.arm}.")
            config = config.with_pick(config.arm)

        elif action is ArmAction.DROP:
            if config.holding is None:
                raise InvalidActionError("Cannot drop with an empty hand.")
            base = config.top_of(config.arm) or FLOOR_ID
            if not can_place(self.world, config.holding, base):
                raise InvalidActionError(f"'{config.holding}' cannot rest on '{base}'.")
            config = config.with_drop(config.arm)

        self.world = self.world.with_configuration(config)
        return self.world

    def run(self, actions: Iterable[ArmAction]) -> WorldState:
        """Execute a sequence of arm actions and return the resulting world state."""
        for action in actions:
            self.step(action)
        return self.world
