"""Update button state to display descriptor mapping."""

from typing import Optional

from advisor.models.device import DisplayDescriptor
from advisor.models.status import ButtonColor, UpdateButtonState

TOO_OLD_TO_UPDATE = (
    "Too old to update. Your device's OS version can no longer be updated "
    "over the air. Please re-flash the SD card with the latest release."
)
CANNOT_CONNECT = "Can't connect to device"


def present(state: UpdateButtonState, candidate_text: Optional[str]) -> DisplayDescriptor:
    """Map a button state to color, label, and hover text.

    UP_TO_DATE and UNKNOWN surface the raw candidate text (possibly None)
    as hover text.
    """
    if state == UpdateButtonState.NEEDS_UPDATE:
        upgrade = f"UPDATE TO {candidate_text}"
        return DisplayDescriptor(color=ButtonColor.GREEN, text=upgrade, hover_text=upgrade)
    if state == UpdateButtonState.NEEDS_DOWNGRADE:
        downgrade = f"DOWNGRADE TO {candidate_text}"
        return DisplayDescriptor(color=ButtonColor.GREEN, text=downgrade, hover_text=downgrade)
    if state == UpdateButtonState.UP_TO_DATE:
        return DisplayDescriptor(color=ButtonColor.GRAY, text="UP TO DATE", hover_text=candidate_text)
    if state == UpdateButtonState.TOO_OLD:
        return DisplayDescriptor(
            color=ButtonColor.YELLOW, text=TOO_OLD_TO_UPDATE, hover_text=TOO_OLD_TO_UPDATE
        )
    return DisplayDescriptor(color=ButtonColor.YELLOW, text=CANNOT_CONNECT, hover_text=candidate_text)
