"""Import classes and functions used to plan arm actions achieving goal formulas."""

from .abstract_a_star import AStarPlanner as AStarPlanner
from .abstract_a_star import SearchResult as SearchResult
from .configuration_planner import ConfigurationPlanner as ConfigurationPlanner
from .configuration_planner import PlanningResult as PlanningResult
from .configuration_planner import plan_goal as plan_goal
from .plan_synthesizer import Plan as Plan
from .plan_synthesizer import synthesize as synthesize
from .world_state_graph import WorldStateGraph as WorldStateGraph
from .world_state_graph import same_configuration as same_configuration
