"""Define functions evaluating goal formulas in configurations of the blocks world."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blocksworld.world.relations import holds

if TYPE_CHECKING:
    from blocksworld.logic.formulas import Conjunction, DNFFormula, GoalLiteral
    from blocksworld.world.configuration import Configuration


def literal_holds(literal: GoalLiteral, configuration: Configuration) -> bool:
    """Evaluate the truth value of a goal literal in a configuration.

    :param literal: Polarity-qualified relation over object identifiers
    :param configuration: Configuration in which the literal is evaluated
    :return: True if the literal is true in the configuration, else False
    """
    if literal.relation == "holding":
        truth = configuration.holding == literal.args[0]
    else:
        parent, child = literal.args
        truth = holds(literal.relation, parent, child, configuration)

    return truth if literal.polarity else not truth


def conjunction_holds(conjunction: Conjunction, configuration: Configuration) -> bool:
    """Evaluate whether every literal of the conjunction is true in the configuration."""
    return all(literal_holds(lit, configuration) for lit in conjunction.literals)


def satisfies(goal: DNFFormula, configuration: Configuration) -> bool:
    """Evaluate whether the configuration satisfies some conjunction of the goal formula."""
    return any(conjunction_holds(conj, configuration) for conj in goal.conjunctions)


def satisfied_conjunctions(goal: DNFFormula, configuration: Configuration) -> list[Conjunction]:
    """Find the conjunctions of the goal that hold in the configuration (in sorted order)."""
    return [conj for conj in goal.sorted_conjunctions() if conjunction_holds(conj, configuration)]
