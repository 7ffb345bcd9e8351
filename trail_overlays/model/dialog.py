"""Dialog types - which modal is active and what info dialogs show.

ActiveDialog replaces three independent visibility flags, so at most one
dialog can be open at a time.
"""

from dataclasses import dataclass
from enum import Enum

from trail_overlays.constants import DialogConfig


class ActiveDialog(Enum):
    """The modal currently presented over the map."""

    NONE = "none"
    TRAIL_INFO = "trail_info"
    PARK_INFO = "park_info"
    CUSTOMIZATION = "customization"

    @property
    def is_open(self) -> bool:
        return self is not ActiveDialog.NONE

    @property
    def is_info(self) -> bool:
        return self in (ActiveDialog.TRAIL_INFO, ActiveDialog.PARK_INFO)


@dataclass(frozen=True)
class InfoContent:
    """Title and body of an informational dialog."""

    title: str
    body: str


INFO_CONTENT = {
    ActiveDialog.TRAIL_INFO: InfoContent(title=DialogConfig.TRAIL_TITLE, body=DialogConfig.TRAIL_INFO),
    ActiveDialog.PARK_INFO: InfoContent(title=DialogConfig.PARK_TITLE, body=DialogConfig.PARK_INFO),
}
