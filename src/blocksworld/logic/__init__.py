"""Import classes and functions representing and evaluating goal formulas."""

from .formulas import Conjunction as Conjunction
from .formulas import DNFFormula as DNFFormula
from .formulas import GoalLiteral as GoalLiteral
from .goal_evaluator import satisfied_conjunctions as satisfied_conjunctions
from .goal_evaluator import satisfies as satisfies
