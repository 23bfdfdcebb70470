"""Region settings: room tags, acronym entry and acronym-based naming."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from floodforge.popups import Popup
from floodforge.shapes import Rect

FLOODFORGE_VERSION = "v1.5.5"

LAYER_HIDDEN = 5
LAYER_COUNT = 3

ROOM_SNAP_NONE = 0
ROOM_SNAP_TILE = 1

CANON_POSITION = 2
DEV_POSITION = 3

ROOM_TAGS: Tuple[str, ...] = (
    "SHELTER",
    "ANCIENTSHELTER",
    "GATE",
    "SWARMROOM",
    "PERF_HEAVY",
    "SCAVOUTPOST",
    "SCAVTRADER",
    "NOTRACKERS",
    "ARENA",
)
ROOM_TAG_NAMES: Tuple[str, ...] = (
    "Shelter",
    "Ancient Shelter",
    "Gate",
    "Swarm Room",
    "Performance Heavy",
    "Scavenger Outpost",
    "Scavenger Trader",
    "No Trackers",
    "Arena (MSC)",
)

_FORBIDDEN = frozenset("/\\_")

AcceptListener = Callable[[str], None]


def offscreen_den_names(acronym: str) -> Tuple[str, str]:
    """Room name and display name of a region's offscreen den."""
    return "offscreenden" + acronym.lower(), "OffscreenDen" + acronym


def rename_room(room_name: str, acronym: str) -> str:
    """Replace the acronym prefix (everything before the first ``_``) of a room name."""
    index = room_name.find("_")
    if index < 0:
        raise ValueError(f"room name {room_name!r} has no acronym prefix")
    return acronym.lower() + room_name[index:]


class AcronymInput(Popup):
    """A popup collecting a region acronym of at least two characters."""

    name = "AcronymPopup"

    def __init__(self, on_accept: Optional[AcceptListener] = None) -> None:
        super().__init__(Rect(-0.25, -0.08, 0.25, 0.25))
        self.text = ""
        self._listeners: List[AcceptListener] = [on_accept] if on_accept else []

    def type_character(self, character: str, shift: bool) -> None:
        """Append a printable character, upper case with shift, lower case without."""
        if self.minimized or len(character) != 1 or not 33 <= ord(character) <= 126:
            return
        character = character.upper() if shift else character.lower()
        if character in _FORBIDDEN:
            return
        self.text += character

    def paste(self, text: str) -> None:
        """Append pasted text in upper case, dropping slashes and underscores."""
        if self.minimized:
            return
        self.text += "".join(c for c in text.upper() if c not in _FORBIDDEN)

    def backspace(self) -> None:
        if self.minimized:
            return
        self.text = self.text[:-1]

    def is_valid(self) -> bool:
        return len(self.text) >= 2

    def _buttons(self) -> Tuple[Rect, Rect]:
        centre = (self.rect.x0 + self.rect.x1) * 0.5
        top = self.rect.y1
        cancel = Rect(centre - 0.2, top - 0.28, centre - 0.05, top - 0.22)
        confirm = Rect(centre + 0.05, top - 0.28, centre + 0.2, top - 0.22)
        return cancel, confirm

    def click(self, x: float, y: float) -> None:
        super().click(x, y)
        cancel, confirm = self._buttons()
        if cancel.inside(x, y):
            self.reject()
        if confirm.inside(x, y):
            self.accept()

    def accept(self) -> None:
        """Close and hand the acronym to the listeners, if it is long enough."""
        if not self.is_valid():
            return
        self.close()
        for listener in self._listeners:
            listener(self.text)