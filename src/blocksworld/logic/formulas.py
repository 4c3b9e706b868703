"""Define classes to represent goal formulas in disjunctive normal form (DNF)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from blocksworld.logic.goal_evaluator import conjunction_holds, literal_holds, satisfies
from blocksworld.world.relations import RELATIONS

if TYPE_CHECKING:
    from blocksworld.world.configuration import Configuration


@dataclass(frozen=True)
class GoalLiteral:
    """A literal asserts that a relation should (or should not) hold among some objects.

    For example, `GoalLiteral("ontop", ("a", "b"), polarity=False)` specifies that
    object "a" should *not* be on top of object "b".
    """

    relation: str
    args: tuple[str, ...]
    """Identifiers of the related objects (the floor may be a second argument)."""

    polarity: bool = True
    """True if the relation should hold, False if it should not."""

    def __post_init__(self) -> None:
        """Verify that the literal's relation is known and has the right number of arguments."""
        if self.relation not in RELATIONS:
            raise ValueError(f"Unknown relation '{self.relation}'; expected one of {RELATIONS}.")

        arity = 1 if self.relation == "holding" else 2
        if len(self.args) != arity:
            raise ValueError(f"Relation '{self.relation}' expects {arity} args, got {self.args}.")

    def __str__(self) -> str:
        """Return a readable representation of the literal, e.g. '-ontop(a,b)'."""
        return f"{'' if self.polarity else '-'}{self.relation}({','.join(self.args)})"

    def __call__(self, configuration: Configuration) -> bool:
        """Evaluate the truth value of the literal in a configuration."""
        return literal_holds(self, configuration)

    @classmethod
    def holding(cls, obj: str) -> GoalLiteral:
        """Construct a literal asserting that the arm holds the given object."""
        return cls("holding", (obj,))


@dataclass(frozen=True)
class Conjunction:
    """A conjunction (i.e., AND) of literals, true only if all of its literals are true."""

    literals: frozenset[GoalLiteral]

    def __post_init__(self) -> None:
        """Verify that the conjunction constrains the world with at least one literal."""
        if not self.literals:
            raise ValueError("A conjunction requires at least one literal.")

    def __str__(self) -> str:
        """Return a readable representation of the conjunction, e.g. 'ontop(a,b) & holding(c)'."""
        return " & ".join(sorted(str(lit) for lit in self.literals))

    def __call__(self, configuration: Configuration) -> bool:
        """Evaluate whether all literals of the conjunction hold in a configuration."""
        return conjunction_holds(self, configuration)

    @classmethod
    def of(cls, *literals: GoalLiteral) -> Conjunction:
        """Construct a conjunction of the given literals."""
        return cls(frozenset(literals))


@dataclass(frozen=True)
class DNFFormula:
    """A disjunction (i.e., OR) of conjunctions describing the acceptable end states.

    An empty formula is never a valid interpretation of a command, so construction fails
    unless at least one conjunction is given.
    """

    conjunctions: frozenset[Conjunction]

    def __post_init__(self) -> None:
        """Verify that the formula contains at least one conjunction."""
        if not self.conjunctions:
            raise ValueError("A DNF formula requires at least one conjunction.")

    def __str__(self) -> str:
        """Return a readable representation of the formula, e.g. 'ontop(a,b) | ontop(a,c)'."""
        return " | ".join(str(conj) for conj in self.sorted_conjunctions())

    def __call__(self, configuration: Configuration) -> bool:
        """Evaluate whether some conjunction of the formula holds in a configuration."""
        return satisfies(self, configuration)

    def __len__(self) -> int:
        """Retrieve the number of disjuncts in the formula."""
        return len(self.conjunctions)

    @classmethod
    def of(cls, conjunctions: Iterable[Conjunction]) -> DNFFormula:
        """Construct a DNF formula from the given conjunctions."""
        return cls(frozenset(conjunctions))

    @classmethod
    def of_literals(cls, literals: Iterable[GoalLiteral]) -> DNFFormula:
        """Construct a formula whose disjuncts are each a single literal."""
        return cls(frozenset(Conjunction.of(lit) for lit in literals))

    def sorted_conjunctions(self) -> list[Conjunction]:
        """Retrieve the formula's conjunctions in a deterministic (lexicographic) order."""
        return sorted(self.conjunctions, key=str)
