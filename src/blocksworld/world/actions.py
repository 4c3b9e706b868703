"""Define the closed alphabet of executable arm actions."""

from __future__ import annotations

from enum import Enum


class ArmAction(Enum):
    """An executable action of the robot arm, encoded by its single-letter symbol."""

    STEP_LEFT = "l"
    STEP_RIGHT = "r"
    PICK = "p"
    DROP = "d"

    def __str__(self) -> str:
        """Return the single-letter symbol of the action."""
        return self.value

