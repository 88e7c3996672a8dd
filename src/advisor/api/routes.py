"""API route handlers for the OS update advisor."""

import logging

from fastapi import APIRouter, Request

from advisor.api.models import ButtonResponse, FetchRequest, ReleaseData, ReleaseResponse
from advisor.models.config import AdvisorConfig, DEFAULT_CONFIG
from advisor.models.device import DeviceSnapshot
from advisor.services.button import build_update_button
from advisor.services.releases import ReleaseService, ReleaseStore

router = APIRouter(prefix="/api/v1.0/os-update")
logger = logging.getLogger("advisor.api")


def _config(request: Request) -> AdvisorConfig:
    return getattr(request.app.state, "config", DEFAULT_CONFIG)


@router.post("/button", response_model=ButtonResponse)
async def post_button(device: DeviceSnapshot, request: Request):
    """POST /api/v1.0/os-update/button - Evaluate the update button for a device.

    When the body omits os_update_version, the latest stored release lookup
    result is used.

    Response format:
        {
            "code": 200,
            "msg": "success",
            "data": {
                "text": "UPDATE TO 8.0.0",
                "color": "green",
                "hover_text": "UPDATE TO 8.0.0",
                "disabled": false,
                "state": "needs_update",
                "candidate_version": "8.0.0",
                "on_click": {"kind": "request_update_check"},
                "on_hover": {"kind": "fetch_release_info", "target": "rpi3"}
            }
        }
    """
    if "os_update_version" not in device.model_fields_set:
        device = device.model_copy(update={"os_update_version": ReleaseStore().version})

    button = build_update_button(device, _config(request))
    return ButtonResponse(data=button)


@router.post("/fetch", response_model=ReleaseResponse)
async def post_fetch(body: FetchRequest, request: Request):
    """POST /api/v1.0/os-update/fetch - Look up the latest release for a target.

    Lookup failures are reported as data.version == null, never as errors.
    """
    service = ReleaseService(config=_config(request))
    version = await service.fetch_os_update_version(body.target)
    return ReleaseResponse(data=ReleaseData(version=version))


@router.get("/release", response_model=ReleaseResponse)
async def get_release():
    """GET /api/v1.0/os-update/release - Latest stored release lookup result."""
    return ReleaseResponse(data=ReleaseData(version=ReleaseStore().version))
