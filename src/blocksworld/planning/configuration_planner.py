"""Define an A* planner searching the configurations of the blocks world for a goal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Hashable

from blocksworld.io.logging import log_info
from blocksworld.logic.formulas import DNFFormula
from blocksworld.logic.goal_evaluator import satisfies
from blocksworld.planning.abstract_a_star import AStarPlanner
from blocksworld.planning.heuristics import goal_heuristic
from blocksworld.planning.plan_synthesizer import synthesize
from blocksworld.planning.world_state_graph import WorldStateGraph
from blocksworld.world.configuration import Configuration

if TYPE_CHECKING:
    from blocksworld.planning.plan_synthesizer import Plan
    from blocksworld.world.configuration import WorldState

DEFAULT_TIMEOUT_S = 10.0
"""Default wall-clock time (seconds) allowed for a single search."""


class ConfigurationPlanner(AStarPlanner[Configuration, DNFFormula]):
    """An A* planner over the world-state graph toward configurations satisfying a goal."""

    def __init__(self, world: WorldState, goal: DNFFormula, log_every_n_steps: int = 1000) -> None:
        """Initialize the planner to search from the world's current configuration.

        :param world: World whose configuration is the start of search
        :param goal: Goal formula that an acceptable final configuration must satisfy
        :param log_every_n_steps: Number of search steps between progress logs (defaults to 1000)
        """
        self.graph = WorldStateGraph(world)
        super().__init__(world.configuration, goal, log_every_n_steps)

    def get_successors(self, state: Configuration) -> list[tuple[Configuration, float]]:
        """Return the configurations reachable from the given one by a single arm operation."""
        return self.graph.successors(state)

    def heuristic(self, state: Configuration, goal: DNFFormula) -> float:
        """Estimate the remaining pick/place cycles via the goal's cheapest conjunction."""
        return goal_heuristic(goal, state)

    def is_goal(self, state: Configuration, goal: DNFFormula) -> bool:
        """Check whether the configuration satisfies the goal formula."""
        return satisfies(goal, state)

    def state_key(self, state: Configuration) -> Hashable:
        """Return the structural key of the configuration (its stacks and held object)."""
        return state.key


@dataclass(frozen=True)
class PlanningResult:
    """A goal formula together with the plan found to achieve it."""

    goal: DNFFormula
    plan: Plan
    cost: float
    """Number of pick/place cycles used by the plan."""

    path: list[Configuration]
    """Configurations visited by the plan, beginning with the initial configuration."""

    @property
    def already_satisfied(self) -> bool:
        """Check whether the goal already held in the initial configuration."""
        return len(self.path) == 1


def plan_goal(
    goal: DNFFormula,
    world: WorldState,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    log_every_n_steps: int = 1000,
) -> PlanningResult:
    """Plan a minimal-cost sequence of arm actions putting the world into a goal configuration.

    :param goal: Goal formula to be achieved
    :param world: Current state of the world
    :param timeout_s: Wall-clock time (seconds) allowed for search (defaults to 10 seconds)
    :param log_every_n_steps: Number of search steps between progress logs (defaults to 1000)
    :return: Planning result containing the synthesized plan and its cost
    :raises NoPlanFoundError: If no reachable configuration satisfies the goal
    :raises TimeoutExceededError: If search passes its deadline first
    """
    planner = ConfigurationPlanner(world, goal, log_every_n_steps)
    result = planner.search(timeout_s)

    log_info(
        f"Found plan for goal {goal} with cost {result.cost} "
        f"after expanding {planner.nodes_expanded} nodes.",
    )

    plan = synthesize(result.path, world.configuration.arm, world)
    return PlanningResult(goal=goal, plan=plan, cost=result.cost, path=result.path)
