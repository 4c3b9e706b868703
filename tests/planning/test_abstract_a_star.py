"""Unit tests for the generic A* planner, using a small weighted integer graph."""

from __future__ import annotations

import time
from typing import Hashable

import pytest

from blocksworld.errors import NoPlanFoundError, TimeoutExceededError
from blocksworld.planning import AStarPlanner

GRAPH: dict[int, list[tuple[int, float]]] = {
    0: [(1, 1.0), (2, 4.0)],
    1: [(2, 1.0), (3, 5.0)],
    2: [(3, 1.0)],
    3: [],
    4: [(0, 1.0)],
}
"""A directed graph in which the cheapest path 0 -> 3 is 0, 1, 2, 3 (with cost 3)."""


class IntegerGraphPlanner(AStarPlanner[int, int]):
    """An A* planner over a weighted integer graph, with a zero heuristic."""

    def __init__(
        self,
        start: int,
        goal: int,
        graph: dict[int, list[tuple[int, float]]] = GRAPH,
    ) -> None:
        """Initialize the planner to search the graph from the start node to the goal node."""
        self.graph = graph
        self.expanded: list[int] = []
        super().__init__(start, goal, log_every_n_steps=1)

    def get_successors(self, state: int) -> list[tuple[int, float]]:
        """Return the neighbors of a node, recording that the node was expanded."""
        self.expanded.append(state)
        return self.graph[state]

    def heuristic(self, state: int, goal: int) -> float:
        """Return zero, which is trivially admissible."""
        return 0.0

    def is_goal(self, state: int, goal: int) -> bool:
        """Check whether the state is the goal node."""
        return state == goal

    def state_key(self, state: int) -> Hashable:
        """Return the node itself as its key."""
        return state


def test_search_finds_the_cheapest_path() -> None:
    """Verify that A* prefers the cheapest path over the one with fewest transitions."""
    # Arrange
    planner = IntegerGraphPlanner(start=0, goal=3)

    # Act
    result = planner.search(timeout_s=10.0)

    # Assert
    assert result.path == [0, 1, 2, 3]
    assert result.cost == 3.0
    assert result.num_transitions == 3
    assert planner.nodes_expanded == 3


def test_start_satisfying_the_goal_returns_immediately() -> None:
    """Verify that a goal start state is returned before the deadline is ever consulted."""
    planner = IntegerGraphPlanner(start=3, goal=3)

    result = planner.search(timeout_s=0.0)

    assert result.path == [3]
    assert result.cost == 0.0
    assert result.num_transitions == 0
    assert planner.expanded == []


def test_exhausted_frontier_raises_no_plan_found() -> None:
    """Verify that search raises a NoPlanFoundError when the goal is unreachable."""
    planner = IntegerGraphPlanner(start=0, goal=4)

    with pytest.raises(NoPlanFoundError):
        planner.search(timeout_s=10.0)

    assert sorted(planner.expanded) == [0, 1, 2, 3]


def test_passed_deadline_raises_timeout() -> None:
    """Verify that search raises a TimeoutExceededError (not NoPlanFoundError) once time is up."""
    planner = IntegerGraphPlanner(start=0, goal=4)

    with pytest.raises(TimeoutExceededError):
        planner.search(timeout_s=0.0)

    assert planner.expanded == []


def test_ties_are_broken_by_insertion_order() -> None:
    """Verify that nodes with equal f-values are expanded in the order they were reached."""
    # Arrange - Node 1 is reached before node 2, both with f = g = 1 after relaxing costs
    planner = IntegerGraphPlanner(start=0, goal=-1, graph={0: [(1, 1.0), (2, 1.0)], 1: [], 2: []})

    # Act
    with pytest.raises(NoPlanFoundError):
        planner.search(timeout_s=10.0)

    # Assert
    assert planner.expanded == [0, 1, 2]


class SlowIntegerGraphPlanner(IntegerGraphPlanner):
    """An integer graph planner whose every search step outlasts a short deadline."""

    def step(self) -> bool:
        """Expand the node at the top of the frontier, then stall."""
        done = super().step()
        time.sleep(0.3)
        return done


def test_exhausted_frontier_after_the_deadline_raises_no_plan_found() -> None:
    """Verify that emptying the frontier is reported as no plan even once the deadline passes."""
    # Arrange - The only node is expanded in one step, which ends after the deadline
    planner = SlowIntegerGraphPlanner(start=0, goal=1, graph={0: []})

    # Act/Assert
    with pytest.raises(NoPlanFoundError):
        planner.search(timeout_s=0.2)

    assert planner.expanded == [0]
