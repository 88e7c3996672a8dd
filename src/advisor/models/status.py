"""Status enums for the OS update advisor."""

from enum import Enum


class ComparisonResult(str, Enum):
    """Result of comparing two semantic versions (left vs. right)."""

    LEFT_IS_GREATER = "left_is_greater"
    RIGHT_IS_GREATER = "right_is_greater"
    EQUAL = "equal"


class UpdateButtonState(str, Enum):
    """OS update button states.

    Recomputed from current inputs on every evaluation:
    UNKNOWN → (installed known) → UP_TO_DATE | TOO_OLD | NEEDS_UPDATE | NEEDS_DOWNGRADE
    """

    UP_TO_DATE = "up_to_date"
    NEEDS_UPDATE = "needs_update"
    NEEDS_DOWNGRADE = "needs_downgrade"
    # SD card re-flash required
    TOO_OLD = "too_old"
    # Can't connect to device
    UNKNOWN = "unknown"


class ButtonColor(str, Enum):
    GREEN = "green"
    GRAY = "gray"
    YELLOW = "yellow"


class JobStatus(str, Enum):
    """Transfer job lifecycle, owned by the external job tracker."""

    QUEUED = "queued"
    WORKING = "working"
    COMPLETE = "complete"
    ERROR = "error"


class JobUnit(str, Enum):
    BYTES = "bytes"
    PERCENT = "percent"
