"""Immutable advisor configuration."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AdvisorConfig(BaseModel):
    """Fixed thresholds and endpoints for the update decision engine.

    Passed explicitly into the resolver and classifier so the decision
    functions stay pure functions of their arguments.
    """

    model_config = ConfigDict(frozen=True)

    minimum_supportable_version: str = Field(
        "6.0.0",
        pattern=r"^\d+\.\d+\.\d+$",
        description="Installed versions strictly below this must re-flash the SD card",
    )
    upgrade_path_feature: str = Field(
        "api_ota_releases",
        description="Feature key whose minimum version is the upgrade path step",
    )
    fallback_feature_data: dict[str, str] = Field(
        default_factory=lambda: {"api_ota_releases": "14.0.0"},
        description="Feature minimum versions used when the device reported none",
    )
    releases_base_path: str = Field(
        "http://localhost:3000/api/releases?platform=",
        pattern=r"^https?://.+",
        description="Release lookup URL prefix; the platform is appended",
    )
    os_update_job_id: str = Field("OS_OTA", description="Job tracker key of the OS download")
    unknown_target: str = Field("---", description="Target value meaning 'not reported'")
    request_timeout: float = Field(5.0, gt=0, description="Release lookup timeout (seconds)")
    reflash_panel: str = Field("power_and_reset", description="Panel holding re-flash steps")
    hard_reset_link: str = Field(
        "/app/settings?highlight=hard_reset",
        description="Navigation target with manual re-flash instructions",
    )

    @model_validator(mode="after")
    def fallback_has_upgrade_path(self) -> "AdvisorConfig":
        """Ensure the fallback table defines the upgrade path step."""
        if self.upgrade_path_feature not in self.fallback_feature_data:
            raise ValueError(
                f"fallback_feature_data must define '{self.upgrade_path_feature}'"
            )
        return self


DEFAULT_CONFIG = AdvisorConfig()
