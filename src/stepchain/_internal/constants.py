from enum import Enum, unique


@unique
class Position(str, Enum):
    BEFORE = "before"
    AFTER = "after"


@unique
class ProcessMode(str, Enum):
    PROCESS = "process"
    PROCESS_WITH_STOP = "process_with_stop"
