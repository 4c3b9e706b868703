"""Import classes and functions grounding parsed commands into goal formulas."""

from .commands import FLOOR_DESCRIPTION as FLOOR_DESCRIPTION
from .commands import Command as Command
from .commands import Entity as Entity
from .commands import Location as Location
from .commands import MoveCommand as MoveCommand
from .commands import ObjectDescription as ObjectDescription
from .commands import PutCommand as PutCommand
from .commands import TakeCommand as TakeCommand
from .goal_compiler import ResolvedArguments as ResolvedArguments
from .goal_compiler import compile_goal as compile_goal
from .goal_compiler import interpret_command as interpret_command
from .goal_compiler import resolve_arguments as resolve_arguments
from .object_resolver import resolve as resolve
