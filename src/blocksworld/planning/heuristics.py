"""Define admissible heuristics estimating the pick/place cycles remaining to reach a goal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blocksworld.logic.goal_evaluator import literal_holds
from blocksworld.world.objects import FLOOR_ID
from blocksworld.world.relations import SUPPORT_RELATIONS

if TYPE_CHECKING:
    from blocksworld.logic.formulas import Conjunction, DNFFormula, GoalLiteral
    from blocksworld.world.configuration import Configuration


def literal_estimate(literal: GoalLiteral, configuration: Configuration) -> float:
    """Estimate the number of edges needed to make a single literal true.

    Every object stacked above an object that must move has to be moved away first, and
    each edge moves at most one object, so counting those objects never overestimates.

    :param literal: Goal literal being estimated
    :param configuration: Configuration from which the literal must be achieved
    :return: Non-negative lower bound on the remaining cost
    """
    if literal_holds(literal, configuration):
        return 0.0
    if not literal.polarity:
        return 1.0  # Some object has to move to break the relation

    if literal.relation == "holding":
        (obj,) = literal.args
        return 1.0 + len(configuration.objects_above(obj))

    if literal.relation in SUPPORT_RELATIONS:
        obj, base = literal.args
        blockers = set(configuration.objects_above(obj))
        if base != FLOOR_ID:
            blockers.update(configuration.objects_above(base))
        blockers.discard(obj)
        return 1.0 + len(blockers)

    return 1.0


def conjunction_estimate(conjunction: Conjunction, configuration: Configuration) -> float:
    """Estimate the cost of achieving a conjunction as the largest of its literals' estimates.

    A single edge may make several literals true at once, so only the largest estimate
    (rather than their sum) is guaranteed not to overestimate.
    """
    return max(literal_estimate(lit, configuration) for lit in conjunction.literals)


def goal_heuristic(goal: DNFFormula, configuration: Configuration) -> float:
    """Estimate the cost-to-go as the estimate of the goal's cheapest conjunction.

    :param goal: Goal formula in disjunctive normal form
    :param configuration: Configuration being evaluated during search
    :return: Optimistic estimate of the number of remaining edges
    """
    return min(conjunction_estimate(conj, configuration) for conj in goal.conjunctions)
