"""Device snapshot, transfer job, and decision output models."""

from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from advisor.models.status import ButtonColor, JobStatus, JobUnit, UpdateButtonState


class TransferJob(BaseModel):
    """Read-only snapshot of an in-flight download/install job.

    Example:
        {"status": "working", "unit": "bytes", "value": 2048}
    """

    model_config = ConfigDict(frozen=True)

    status: JobStatus = Field(..., description="Job lifecycle status")
    unit: JobUnit = Field(..., description="Unit of value (bytes or percent)")
    value: float = Field(..., ge=0, description="Byte count or percent complete")


class DeviceSnapshot(BaseModel):
    """Everything the advisor needs to know about one device.

    Example:
        {
            "installed_version": "7.2.0",
            "target": "rpi3",
            "online": true,
            "os_update_version": "8.0.0",
            "min_os_feature_data": {"api_ota_releases": "14.0.0"},
            "jobs": {"OS_OTA": {"status": "working", "unit": "percent", "value": 42}}
        }
    """

    installed_version: Optional[str] = Field(
        None, description="Installed OS version (None when never reported)"
    )
    target: Optional[str] = Field(None, description="Hardware target identifier")
    online: bool = Field(True, description="Is the device currently reachable?")
    os_update_version: Optional[str] = Field(
        None, description="Latest available release for target and channel"
    )
    min_os_feature_data: Optional[dict[str, str]] = Field(
        None, description="Feature minimum versions reported by the device"
    )
    jobs: dict[str, TransferJob] = Field(
        default_factory=dict, description="Job tracker snapshot keyed by job id"
    )


class DisplayDescriptor(BaseModel):
    """Indicator color plus primary and hover labels."""

    model_config = ConfigDict(frozen=True)

    color: ButtonColor
    text: str
    hover_text: Optional[str] = None


class NavigateToReflash(BaseModel):
    """Close other panels, open the re-flash panel, and navigate to instructions."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["navigate_to_reflash"] = "navigate_to_reflash"
    panel: str
    link: str


class RequestUpdateCheck(BaseModel):
    """Ask the device to check for controller updates."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["request_update_check"] = "request_update_check"


class FetchReleaseInfo(BaseModel):
    """Prefetch the latest release version for a hardware target."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fetch_release_info"] = "fetch_release_info"
    target: Optional[str] = None


Intent = Union[NavigateToReflash, RequestUpdateCheck, FetchReleaseInfo]


class UpdateButton(BaseModel):
    """Complete description of the OS update control."""

    text: str = Field(..., description="Progress text while downloading, else the state label")
    color: ButtonColor
    hover_text: Optional[str] = None
    disabled: bool = Field(..., description="True while downloading or when offline")
    state: UpdateButtonState
    candidate_version: Optional[str] = None
    on_click: Union[NavigateToReflash, RequestUpdateCheck] = Field(..., discriminator="kind")
    on_hover: FetchReleaseInfo
