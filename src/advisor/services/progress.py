"""Transfer job progress formatting."""

import math
from typing import Optional

from advisor.models.device import TransferJob
from advisor.models.status import JobStatus, JobUnit


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def is_working(job: Optional[TransferJob]) -> bool:
    """Is an OS download currently in progress?"""
    return job is not None and job.status == JobStatus.WORKING


def format_progress(job: Optional[TransferJob]) -> Optional[str]:
    """Short progress label for a working job, None otherwise.

    Examples:
        500 bytes     -> "500B"
        500.7 bytes   -> "500.7B"
        2048 bytes    -> "2kB"
        2097152 bytes -> "2MB"
        42.6 percent  -> "43%"
    """
    if not is_working(job):
        return None

    if job.unit == JobUnit.BYTES:
        kilobytes = _round_half_up(job.value / 1024)
        megabytes = _round_half_up(job.value / 1048576)
        if megabytes >= 1:
            return f"{megabytes}MB"
        if kilobytes >= 1:
            return f"{kilobytes}kB"
        if float(job.value).is_integer():
            return f"{int(job.value)}B"
        return f"{job.value}B"

    return f"{_round_half_up(job.value)}%"
