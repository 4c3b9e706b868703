"""Define an abstract A* planner over a generic state space.

Reference: Section 3.5.2 (pg. 85-86) of AIMA (4th Ed.) by Russell and Norvig.
"""

from __future__ import annotations

import heapq
import itertools
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Hashable, TypeVar

from blocksworld.errors import NoPlanFoundError, TimeoutExceededError
from blocksworld.io.logging import log_info

StateT = TypeVar("StateT")
GoalT = TypeVar("GoalT")


@dataclass(order=True)
class AStarNode(Generic[StateT]):
    """A node in the A* search tree (represents a particular path to a state).

    Nodes are ordered by f-value (estimated total cost) for use in the priority queue,
    with ties broken in favor of the earliest inserted node.
    """

    f: float
    """Estimated cost of the best path continuing from the node to the goal."""

    order: int
    """Insertion index of the node into the frontier."""

    g: float = field(compare=False)
    """Path cost from the initial node to this node."""

    state: StateT = field(compare=False)
    parent: AStarNode[StateT] | None = field(default=None, compare=False)


@dataclass(frozen=True)
class SearchResult(Generic[StateT]):
    """The path found by A* search, from the start state to a goal state."""

    path: list[StateT]
    """States along the path, beginning with the start state."""

    cost: float

    @property
    def num_transitions(self) -> int:
        """Retrieve the number of transitions along the path (zero if the start is a goal)."""
        return len(self.path) - 1


class AStarPlanner(ABC, Generic[StateT, GoalT]):
    """Abstract A* planner over a generic state space.

    Subclasses implement domain-specific methods for successors, heuristic, goal checking,
    and state keys. The A* algorithm itself is provided by this base class.
    """

    @abstractmethod
    def get_successors(self, state: StateT) -> list[tuple[StateT, float]]:
        """Return valid successor states reachable from the given state, with their costs.

        This method should only return states that pass validity checks, paired with the
        non-negative cost of transitioning into them.
        """

    @abstractmethod
    def heuristic(self, state: StateT, goal: GoalT) -> float:
        """Compute an admissible heuristic estimate of cost-to-go.

        Must be optimistic (i.e., never overestimate the true cost) for A* to be cost-optimal.
        """

    @abstractmethod
    def is_goal(self, state: StateT, goal: GoalT) -> bool:
        """Check whether the given state satisfies the goal condition."""

    @abstractmethod
    def state_key(self, state: StateT) -> Hashable:
        """Return a hashable key for the given state.

        Used for efficient lookup in the reached set. States with the same key
        are considered equivalent by the A* planner.
        """

    def __init__(self, start: StateT, goal: GoalT, log_every_n_steps: int = 1000) -> None:
        """Initialize the A* planner with a start state and a goal condition.

        :param start: Initial state during search
        :param goal: Goal condition targeted during search
        :param log_every_n_steps: Number of search steps between progress logs (defaults to 1000)
        """
        self.start = start
        self.goal = goal
        self.log_every_n_steps = log_every_n_steps

        self.frontier: list[AStarNode[StateT]] = []
        """Heap of nodes to be expanded."""

        self.reached: dict[Hashable, float] = {}
        """A map from state keys to the best g-value seen for states with that key."""

        self._insertion_counter = itertools.count()

        # Initialize the search process using the start state
        start_key = self.state_key(state=self.start)
        self.reached[start_key] = 0.0

        start_h = self.heuristic(self.start, self.goal)
        start_node = AStarNode(f=start_h, order=next(self._insertion_counter), g=0.0, state=start)
        heapq.heappush(self.frontier, start_node)

        self._num_step_calls: int = 0
        """Number of times the `step()` method has been called."""

        self._nodes_expanded: int = 0
        """Number of nodes whose successors have been enumerated and added to the frontier."""

        self._solution_node: AStarNode[StateT] | None = None

    @property
    def steps_taken(self) -> int:
        """Retrieve the number of search steps that the planner has taken."""
        return self._num_step_calls

    @property
    def nodes_expanded(self) -> int:
        """Retrieve the number of nodes expanded so far."""
        return self._nodes_expanded

    def update_frontier(self, state: StateT, cost: float, parent_node: AStarNode[StateT]) -> None:
        """Update the frontier with a node for the given parent-state pair, if worthwhile.

        :param state: State encountered during A* search
        :param cost: Cost of the transition from the parent's state into the state
        :param parent_node: Parent node of the given state
        """
        state_key = self.state_key(state=state)
        g = parent_node.g + cost

        # Eager filter: only add nodes with new or better paths
        if state_key not in self.reached or g < self.reached[state_key]:
            self.reached[state_key] = g  # Mark this state as reached via this parent
            h = self.heuristic(state=state, goal=self.goal)
            order = next(self._insertion_counter)
            new_node = AStarNode(f=g + h, order=order, g=g, state=state, parent=parent_node)
            heapq.heappush(self.frontier, new_node)

    def step(self) -> bool:
        """Expand the node at the top of the frontier.

        :return: True if search is complete, otherwise False
        """
        self._num_step_calls += 1

        if not self.frontier:
            return True

        current_node = heapq.heappop(self.frontier)
        current_key = self.state_key(current_node.state)

        # Skip stale entries (we found a better path since this was queued)
        if current_node.g > self.reached[current_key]:
            return False

        if self.is_goal(current_node.state, self.goal):
            self._solution_node = current_node
            return True

        for successor, cost in self.get_successors(current_node.state):
            self.update_frontier(state=successor, cost=cost, parent_node=current_node)

        self._nodes_expanded += 1

        return False

    def search(self, timeout_s: float) -> SearchResult[StateT]:
        """Run A* search until a goal is reached, the frontier empties, or time runs out.

        A start state that already satisfies the goal is returned before the deadline is
        ever consulted. Otherwise the deadline is polled before each search step that has a
        node left to expand, so an exhausted frontier is never reported as a timeout.

        :param timeout_s: Wall-clock time (seconds) allowed for search
        :return: Lowest-cost path found from the start state to a goal state
        :raises NoPlanFoundError: If the frontier empties without reaching a goal
        :raises TimeoutExceededError: If the deadline passes before a goal is reached
        """
        if self.is_goal(self.start, self.goal):
            return SearchResult(path=[self.start], cost=0.0)

        deadline = time.monotonic() + timeout_s
        done = False

        while not done:
            if self.frontier and time.monotonic() >= deadline:
                self.log_progress()
                raise TimeoutExceededError(f"A* search timed out after {timeout_s} seconds.")

            done = self.step()

            if not (self.steps_taken % self.log_every_n_steps):
                self.log_progress()

        path = self.reconstruct_path()
        if path is None or self._solution_node is None:
            self.log_progress()
            raise NoPlanFoundError(f"No plan found after expanding {self._nodes_expanded} nodes.")

        return SearchResult(path=path, cost=self._solution_node.g)

    def reconstruct_path(self) -> list[StateT] | None:
        """Reconstruct the path represented by the stored solution node.

        :return: List of states in the solution plan, or None if no solution was found
        """
        if self._solution_node is None:
            return None

        path: list[StateT] = []
        current: AStarNode[StateT] | None = self._solution_node
        while current is not None:
            path.append(current.state)
            current = current.parent
        path.reverse()
        return path

    def log_progress(self) -> None:
        """Log the current state of A* search."""
        log_info(
            f"A* frontier size: {len(self.frontier)}, reached: {len(self.reached)}, "
            f"steps: {self._num_step_calls}, expanded: {self._nodes_expanded}.",
        )
