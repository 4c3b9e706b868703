"""Import classes and functions describing the physical blocks world."""

from .actions import ArmAction as ArmAction
from .configuration import Configuration as Configuration
from .configuration import WorldState as WorldState
from .objects import FLOOR as FLOOR
from .objects import FLOOR_ID as FLOOR_ID
from .objects import ObjectDefinition as ObjectDefinition
from .objects import floor_of_column as floor_of_column
from .objects import is_floor as is_floor
from .physical_laws import can_place as can_place
from .physical_laws import can_support as can_support
from .physical_laws import is_physically_valid as is_physically_valid
from .relations import holds as holds
from .simulator import ArmSimulator as ArmSimulator
