from enum import Enum


class InsufficientNodesPolicy(Enum):
    """What the first cycle does when there are too few nodes for max_neighbors."""

    CLAMP = "clamp"
    FAIL = "fail"


class LogLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
