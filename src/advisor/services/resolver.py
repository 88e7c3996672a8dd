"""Candidate version resolution, including the upgrade path step."""

import logging
from typing import Optional

from advisor.models.config import AdvisorConfig, DEFAULT_CONFIG
from advisor.models.status import ComparisonResult
from advisor.utils.semver import compare

logger = logging.getLogger("advisor.resolver")


def feature_minimum(
    feature: str,
    feature_data: Optional[dict[str, str]] = None,
    config: AdvisorConfig = DEFAULT_CONFIG,
) -> Optional[str]:
    """Minimum version for a feature.

    Looks in the device's own table first, then in the fallback table.
    """
    if feature_data and feature in feature_data:
        return feature_data[feature]
    return config.fallback_feature_data.get(feature)


def feature_available(
    feature: str,
    installed_version: Optional[str],
    feature_data: Optional[dict[str, str]] = None,
    config: AdvisorConfig = DEFAULT_CONFIG,
) -> bool:
    """Is a feature available for a device's installed version?

    Args:
        feature: Feature key (e.g., "api_ota_releases")
        installed_version: Installed OS version, None if unknown
        feature_data: Feature minimum versions reported by the device
        config: Provides the fallback feature table

    Returns:
        True if the installed version is known and not below the feature minimum
    """
    if installed_version is None:
        return False
    minimum = feature_minimum(feature, feature_data, config)
    if minimum is None:
        return False
    return compare(minimum, installed_version) != ComparisonResult.LEFT_IS_GREATER


def upgrade_path_threshold(
    feature_data: Optional[dict[str, str]] = None,
    config: AdvisorConfig = DEFAULT_CONFIG,
) -> str:
    """Version old devices must update through to reach the new release system."""
    return feature_minimum(config.upgrade_path_feature, feature_data, config)


def requires_upgrade_path_step(
    installed_version: Optional[str],
    feature_data: Optional[dict[str, str]] = None,
    config: AdvisorConfig = DEFAULT_CONFIG,
) -> bool:
    """Does the installed version still use the old OTA update system?"""
    return not feature_available(
        config.upgrade_path_feature, installed_version, feature_data, config
    )


def resolve_candidate(
    latest_available: Optional[str],
    requires_step: bool,
    threshold: str,
) -> Optional[str]:
    """Get the version a device should be offered next.

    Args:
        latest_available: Latest release for target and channel (from releases API)
        requires_step: Does the device need the intermediate upgrade path step?
        threshold: Upgrade path step version

    Returns:
        Candidate version, or None if nothing is available
    """
    if not requires_step:
        return latest_available

    if compare(threshold, latest_available or "") == ComparisonResult.LEFT_IS_GREATER:
        logger.debug(f"Upgrade path step {threshold} precedes {latest_available}")
        return threshold
    return latest_available
