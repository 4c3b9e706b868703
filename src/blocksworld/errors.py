"""Define the exceptions raised while grounding commands and searching for plans."""


class BlocksWorldError(Exception):
    """Base class for all errors raised by the blocks-world planner."""


class GroundingError(BlocksWorldError):
    """An error raised while grounding a parsed command in the current world."""


class UnresolvedReferenceError(GroundingError):
    """An error raised when an object description matches zero objects in the world."""


class NoInterpretationError(GroundingError):
    """An error raised when a command has no physically feasible goal interpretation."""


class SearchError(BlocksWorldError):
    """An error raised while searching for a plan achieving a goal."""


class NoPlanFoundError(SearchError):
    """An error raised when search exhausts its frontier without reaching a goal."""


class TimeoutExceededError(SearchError):
    """An error raised when search passes its deadline before reaching a goal."""


class InvalidActionError(BlocksWorldError):
    """An error raised when an arm action cannot be executed in the current world."""
