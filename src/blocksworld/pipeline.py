"""Define the top-level loop grounding and planning every candidate parse of a command.

Each candidate is grounded and planned independently against the same immutable world
state. If any candidate succeeds, the errors of the others are discarded; if every
candidate fails, only the first error (in input order) is raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Sequence, TypeVar

from blocksworld.errors import BlocksWorldError
from blocksworld.grounding.goal_compiler import interpret_command
from blocksworld.io.logging import log_info
from blocksworld.io.pydantic_schemata import PlannerSettings
from blocksworld.planning.configuration_planner import plan_goal

if TYPE_CHECKING:
    from blocksworld.grounding.commands import Command
    from blocksworld.logic.formulas import DNFFormula
    from blocksworld.planning.configuration_planner import PlanningResult
    from blocksworld.world.configuration import WorldState

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")

ALREADY_TRUE_MESSAGE = "That is already true!"


@dataclass(frozen=True)
class Interpretation:
    """A candidate command together with the goal formula it was grounded into."""

    command: Command
    goal: DNFFormula


@dataclass(frozen=True)
class CandidatePlan:
    """An interpretation of a candidate command together with the plan achieving it."""

    interpretation: Interpretation
    result: PlanningResult

    @property
    def message(self) -> str:
        """Summarize the plan for a user (its narration, or that it is already true)."""
        if self.result.already_satisfied:
            return ALREADY_TRUE_MESSAGE
        return ", ".join(self.result.plan.narration)


def first_successes(
    candidates: Sequence[InputT],
    process: Callable[[InputT], OutputT],
) -> list[OutputT]:
    """Process every candidate, keeping successes and surfacing only the first error.

    :param candidates: Candidates processed independently, in order
    :param process: Function processing a single candidate (may raise a BlocksWorldError)
    :return: Outputs of all successfully processed candidates, in input order
    :raises BlocksWorldError: The first error encountered, if no candidate succeeds
    """
    if not candidates:
        raise ValueError("Cannot process an empty sequence of candidates.")

    outputs: list[OutputT] = []
    errors: list[BlocksWorldError] = []

    for candidate in candidates:
        try:
            outputs.append(process(candidate))
        except BlocksWorldError as err:
            errors.append(err)

    if outputs:
        if errors:
            log_info(f"Discarding {len(errors)} failed candidate(s); first error: {errors[0]}")
        return outputs

    raise errors[0]


def interpret(commands: Sequence[Command], world: WorldState) -> list[Interpretation]:
    """Ground every candidate command into a goal formula.

    :param commands: Candidate parses of the user's command
    :param world: Current state of the world
    :return: Interpretations of all candidates that could be grounded
    :raises GroundingError: The first grounding error, if no candidate could be grounded
    """
    return first_successes(
        commands,
        lambda command: Interpretation(command, interpret_command(command, world)),
    )


def plan(
    interpretations: Sequence[Interpretation],
    world: WorldState,
    settings: PlannerSettings | None = None,
) -> list[CandidatePlan]:
    """Plan arm actions achieving each interpretation's goal.

    :param interpretations: Grounded interpretations of candidate commands
    :param world: Current state of the world
    :param settings: Optional search settings (defaults to None = default settings)
    :return: Plans for all interpretations whose goals could be reached
    :raises SearchError: The first search error, if no goal could be reached
    """
    settings = settings or PlannerSettings()

    def plan_interpretation(interpretation: Interpretation) -> CandidatePlan:
        result = plan_goal(
            interpretation.goal,
            world,
            timeout_s=settings.timeout_s,
            log_every_n_steps=settings.log_every_n_steps,
        )
        return CandidatePlan(interpretation, result)

    return first_successes(interpretations, plan_interpretation)


def interpret_and_plan(
    commands: Sequence[Command],
    world: WorldState,
    settings: PlannerSettings | None = None,
) -> list[CandidatePlan]:
    """Ground and plan every candidate command, each candidate independently of the others.

    :param commands: Candidate parses of the user's command
    :param world: Current state of the world
    :param settings: Optional search settings (defaults to None = default settings)
    :return: Plans for all candidates that could be both grounded and planned
    :raises BlocksWorldError: The first error encountered, if no candidate succeeds
    """
    settings = settings or PlannerSettings()

    def ground_and_plan(command: Command) -> CandidatePlan:
        interpretation = Interpretation(command, interpret_command(command, world))
        return plan([interpretation], world, settings)[0]

    return first_successes(commands, ground_and_plan)
