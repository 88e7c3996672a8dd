"""Unit tests for services/button.py."""

import pytest

from advisor.models.config import AdvisorConfig
from advisor.models.device import (
    FetchReleaseInfo,
    NavigateToReflash,
    RequestUpdateCheck,
    TransferJob,
)
from advisor.models.status import ButtonColor, UpdateButtonState
from advisor.services.button import build_update_button
from advisor.services.presenter import CANNOT_CONNECT, TOO_OLD_TO_UPDATE


@pytest.mark.unit
class TestBuildUpdateButton:
    """Test composition of resolver, classifier, presenter, and progress."""

    def test_needs_update(self, make_device):
        button = build_update_button(make_device(os_update_version="15.1.0"))

        assert button.state == UpdateButtonState.NEEDS_UPDATE
        assert button.text == "UPDATE TO 15.1.0"
        assert button.color == ButtonColor.GREEN
        assert button.candidate_version == "15.1.0"
        assert button.disabled is False
        assert button.on_click == RequestUpdateCheck()
        assert button.on_hover == FetchReleaseInfo(target="rpi3")

    def test_up_to_date_without_release(self, make_device):
        button = build_update_button(make_device(os_update_version=None))

        assert button.state == UpdateButtonState.UP_TO_DATE
        assert button.text == "UP TO DATE"
        assert button.hover_text is None

    def test_offline_device_is_disabled_and_unknown(self, make_device):
        button = build_update_button(
            make_device(installed_version=None, online=False, os_update_version="15.1.0")
        )

        assert button.state == UpdateButtonState.UNKNOWN
        assert button.text == CANNOT_CONNECT
        assert button.disabled is True

    def test_offline_with_known_version_is_still_disabled(self, make_device):
        button = build_update_button(make_device(online=False, os_update_version="15.1.0"))

        assert button.state == UpdateButtonState.NEEDS_UPDATE
        assert button.disabled is True

    def test_too_old_navigates_to_reflash(self, make_device):
        button = build_update_button(
            make_device(installed_version="5.0.0", os_update_version="15.1.0")
        )

        assert button.state == UpdateButtonState.TOO_OLD
        assert button.text == TOO_OLD_TO_UPDATE
        assert button.color == ButtonColor.YELLOW
        assert button.on_click == NavigateToReflash(
            panel="power_and_reset", link="/app/settings?highlight=hard_reset"
        )

    def test_old_update_system_steps_through_threshold(self, make_device):
        """Test device below the upgrade path feature is offered the threshold."""
        button = build_update_button(make_device(
            installed_version="12.0.0",
            os_update_version="13.0.0",
            min_os_feature_data=None,
        ))

        assert button.candidate_version == "14.0.0"
        assert button.text == "UPDATE TO 14.0.0"

    def test_old_update_system_keeps_newer_latest(self, make_device):
        button = build_update_button(make_device(
            installed_version="12.0.0",
            os_update_version="15.0.0",
            min_os_feature_data=None,
        ))

        assert button.candidate_version == "15.0.0"

    def test_device_table_without_upgrade_key_is_up_to_date(self, make_device):
        """Test a reported table lacking the upgrade path key uses the fallback minimum."""
        button = build_update_button(make_device(
            installed_version="15.0.0",
            os_update_version=None,
            min_os_feature_data={"other_feature": "1.0.0"},
        ))

        assert button.state == UpdateButtonState.UP_TO_DATE
        assert button.candidate_version is None
        assert button.text == "UP TO DATE"

    def test_progress_text_overrides_label(self, make_device, working_job):
        button = build_update_button(make_device(
            os_update_version="15.1.0", jobs={"OS_OTA": working_job}
        ))

        assert button.text == "43%"
        assert button.hover_text == "UPDATE TO 15.1.0"
        assert button.disabled is True

    def test_finished_job_does_not_override(self, make_device):
        job = TransferJob(status="complete", unit="bytes", value=2097152)
        button = build_update_button(make_device(
            os_update_version="15.1.0", jobs={"OS_OTA": job}
        ))

        assert button.text == "UPDATE TO 15.1.0"
        assert button.disabled is False

    def test_other_jobs_ignored(self, make_device, working_job):
        button = build_update_button(make_device(
            os_update_version="15.1.0", jobs={"FIRMWARE": working_job}
        ))

        assert button.text == "UPDATE TO 15.1.0"
        assert button.disabled is False

    def test_custom_job_id(self, make_device, working_job):
        config = AdvisorConfig(os_update_job_id="FBOS_OTA")
        button = build_update_button(
            make_device(os_update_version="15.1.0", jobs={"FBOS_OTA": working_job}),
            config,
        )

        assert button.text == "43%"
