"""Unit tests for the ArmSimulator class."""

import pytest

from blocksworld.errors import InvalidActionError
from blocksworld.world import ArmAction, ArmSimulator, WorldState


def actions_of(symbols: str) -> list[ArmAction]:
    """Convert a string of action symbols (e.g. "prd") into a list of arm actions."""
    return [ArmAction(symbol) for symbol in symbols]


def test_action_symbols() -> None:
    """Verify that arm actions are identified by their single-letter symbols."""
    actions = actions_of("lrpd")

    assert actions == [ArmAction.STEP_LEFT, ArmAction.STEP_RIGHT, ArmAction.PICK, ArmAction.DROP]
    assert "".join(str(action) for action in actions) == "lrpd"

    with pytest.raises(ValueError, match="x"):
        ArmAction("x")


def test_simulator_moves_an_object(single_box_world: WorldState) -> None:
    """Verify that picking, stepping right, and dropping moves the box to the right column."""
    # Arrange
    simulator = ArmSimulator(single_box_world)

    # Act
    final_world = simulator.run(actions_of("prd"))

    # Assert
    assert final_world.configuration.stacks == ((), ("a",))
    assert final_world.configuration.holding is None
    assert final_world.configuration.arm == 1
    assert single_box_world.configuration.stacks == (("a",), ())


def test_simulator_rejects_stepping_past_the_edges(single_box_world: WorldState) -> None:
    """Verify that the arm cannot leave the columns of the world."""
    with pytest.raises(InvalidActionError, match="leftmost"):
        ArmSimulator(single_box_world).step(ArmAction.STEP_LEFT)

    with pytest.raises(InvalidActionError, match="rightmost"):
        ArmSimulator(single_box_world).run(actions_of("rr"))


def test_simulator_rejects_invalid_picks_and_drops(single_box_world: WorldState) -> None:
    """Verify the preconditions of picking up and dropping objects."""
    with pytest.raises(InvalidActionError, match="empty hand"):
        ArmSimulator(single_box_world).step(ArmAction.DROP)

    with pytest.raises(InvalidActionError, match="while holding"):
        ArmSimulator(single_box_world).run(actions_of("pp"))

    with pytest.raises(InvalidActionError, match="empty column"):
        ArmSimulator(single_box_world).run(actions_of("rp"))


def test_simulator_enforces_the_physical_laws(ball_and_table_world: WorldState) -> None:
    """Verify that the ball cannot be dropped onto the table."""
    simulator = ArmSimulator(ball_and_table_world)

    with pytest.raises(InvalidActionError, match="cannot rest on"):
        simulator.run(actions_of("prd"))
