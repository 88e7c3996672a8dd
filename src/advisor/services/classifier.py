"""Update state classification."""

from typing import Optional

from advisor.models.config import AdvisorConfig, DEFAULT_CONFIG
from advisor.models.status import ComparisonResult, UpdateButtonState
from advisor.utils.semver import compare


def classify(
    candidate: Optional[str],
    installed_version: Optional[str],
    config: AdvisorConfig = DEFAULT_CONFIG,
) -> UpdateButtonState:
    """Determine the OS update button state.

    Checks run in order and the first match wins:
    1. No installed version (device offline)   -> UNKNOWN
    2. No candidate (releases API says current) -> UP_TO_DATE
    3. Installed below the OTA-able floor       -> TOO_OLD
    4. Candidate not newer than installed       -> NEEDS_DOWNGRADE
    5. Otherwise                                -> NEEDS_UPDATE

    Args:
        candidate: Resolved candidate version
        installed_version: Version installed on the device
        config: Provides minimum_supportable_version

    Returns:
        UpdateButtonState
    """
    if installed_version is None:
        return UpdateButtonState.UNKNOWN
    if candidate is None:
        return UpdateButtonState.UP_TO_DATE

    floor = config.minimum_supportable_version
    if compare(floor, installed_version) == ComparisonResult.LEFT_IS_GREATER:
        return UpdateButtonState.TOO_OLD

    # EQUAL offers a reinstall of the same version as a downgrade
    if compare(candidate, installed_version) in (
        ComparisonResult.RIGHT_IS_GREATER,
        ComparisonResult.EQUAL,
    ):
        return UpdateButtonState.NEEDS_DOWNGRADE
    return UpdateButtonState.NEEDS_UPDATE
