"""Composes the decision functions into the OS update button."""

import logging

from advisor.models.config import AdvisorConfig, DEFAULT_CONFIG
from advisor.models.device import (
    DeviceSnapshot,
    FetchReleaseInfo,
    NavigateToReflash,
    RequestUpdateCheck,
    UpdateButton,
)
from advisor.models.status import UpdateButtonState
from advisor.services.classifier import classify
from advisor.services.presenter import present
from advisor.services.progress import format_progress, is_working
from advisor.services.resolver import (
    requires_upgrade_path_step,
    resolve_candidate,
    upgrade_path_threshold,
)

logger = logging.getLogger("advisor.button")


def build_update_button(
    device: DeviceSnapshot,
    config: AdvisorConfig = DEFAULT_CONFIG,
) -> UpdateButton:
    """Show update availability or download progress for a device.

    Args:
        device: Current device snapshot
        config: Thresholds, job id, and re-flash navigation targets

    Returns:
        UpdateButton with labels, disabled flag, and click/hover intents
    """
    installed = device.installed_version

    # Latest release the device can update to from its installed version
    candidate = resolve_candidate(
        device.os_update_version,
        requires_upgrade_path_step(installed, device.min_os_feature_data, config),
        upgrade_path_threshold(device.min_os_feature_data, config),
    )
    state = classify(candidate, installed, config)
    descriptor = present(state, candidate)

    job = device.jobs.get(config.os_update_job_id)

    if state == UpdateButtonState.TOO_OLD:
        on_click = NavigateToReflash(panel=config.reflash_panel, link=config.hard_reset_link)
    else:
        on_click = RequestUpdateCheck()

    logger.debug(
        f"Update button: installed={installed}, candidate={candidate}, state={state.value}"
    )

    return UpdateButton(
        text=format_progress(job) or descriptor.text,
        color=descriptor.color,
        hover_text=descriptor.hover_text,
        disabled=is_working(job) or not device.online,
        state=state,
        candidate_version=candidate,
        on_click=on_click,
        on_hover=FetchReleaseInfo(target=device.target),
    )
