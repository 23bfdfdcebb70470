"""Floating popup windows and the stack that holds them."""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from floodforge.shapes import Rect
from floodforge.vector import Vector2

HEADER_HEIGHT = 0.05
BUTTON_WIDTH = 0.05

Listener = Callable[[], None]


class Popup:
    """A rectangular popup with a header bar holding close and minimise buttons."""

    name = "Popup"

    def __init__(self, rect: Optional[Rect] = None) -> None:
        self.rect = rect if rect is not None else Rect(-0.5, -0.5, 0.5, 0.5)
        self.minimized = False
        self.hovered = False
        self.stack: Optional[PopupStack] = None

    @property
    def bounds(self) -> Rect:
        """The area the popup covers: only the header while minimised."""
        if self.minimized:
            return Rect(self.rect.x0, self.rect.y1 - HEADER_HEIGHT, self.rect.x1, self.rect.y1)
        return Rect(self.rect.x0, self.rect.y0, self.rect.x1, self.rect.y1)

    def click(self, x: float, y: float) -> None:
        """Handle a mouse click on the header buttons."""
        if x >= self.rect.x1 - BUTTON_WIDTH and y >= self.rect.y1 - HEADER_HEIGHT:
            self.close()
        elif x >= self.rect.x1 - 2 * BUTTON_WIDTH and y >= self.rect.y1 - HEADER_HEIGHT:
            self.minimized = not self.minimized

    def close(self) -> None:
        """Ask the owning stack to discard this popup."""
        if self.stack is not None:
            self.stack.remove(self)

    def final_cleanup(self) -> None:
        """Called once the stack finally discards the popup."""

    def accept(self) -> None:
        self.close()

    def reject(self) -> None:
        self.close()

    def can_stack(self, popup_name: str) -> bool:
        """Whether a popup of ``popup_name`` may be opened while this one is open."""
        return False

    def drag(self, x: float, y: float) -> bool:
        """Whether a press at (x, y) grabs the header for dragging."""
        if x >= self.rect.x1 - 2 * BUTTON_WIDTH and y >= self.rect.y1 - HEADER_HEIGHT:
            return False
        return y >= self.rect.y1 - HEADER_HEIGHT

    def offset(self, delta: Vector2) -> None:
        self.rect.offset(delta)


class PopupStack:
    """Open popups, plus those closed this frame awaiting cleanup."""

    def __init__(self) -> None:
        self.popups: List[Popup] = []
        self.trash: List[Popup] = []

    def __iter__(self) -> Iterator[Popup]:
        return iter(list(self.popups))

    def __len__(self) -> int:
        return len(self.popups)

    def add(self, popup: Popup) -> bool:
        """Open ``popup`` if every open popup allows it; otherwise close it at once."""
        popup.stack = self
        if all(other.can_stack(popup.name) for other in self.popups):
            self.popups.append(popup)
            return True
        popup.close()
        return False

    def remove(self, popup: Popup) -> None:
        """Mark ``popup`` for removal at the next :meth:`cleanup`."""
        if popup not in self.trash:
            self.trash.append(popup)

    def cleanup(self) -> None:
        """Discard every popup marked for removal."""
        for popup in self.trash:
            popup.final_cleanup()
            self.popups = [other for other in self.popups if other is not popup]
        self.trash.clear()

    def has_popup(self, popup_name: str) -> bool:
        return any(popup.name == popup_name for popup in self.popups)

    def popup_at(self, x: float, y: float) -> Optional[Popup]:
        """The first open popup whose bounds contain (x, y)."""
        for popup in self.popups:
            if popup.bounds.inside(x, y):
                return popup
        return None


_CANCEL_BUTTON = Rect(-0.25, -0.09, -0.05, -0.03)
_OKAY_BUTTON = Rect(0.05, -0.09, 0.25, -0.03)


class ConfirmPopup(Popup):
    """A yes/no question with Cancel and Okay buttons."""

    name = "ConfirmPopup"

    def __init__(self, question: str, okay_text: str = "Okay", cancel_text: str = "Cancel") -> None:
        super().__init__(Rect(-0.3, -0.15, 0.3, 0.15))
        self.question = question
        self.okay_text = okay_text
        self.cancel_text = cancel_text
        self._okay_listeners: List[Listener] = []
        self._cancel_listeners: List[Listener] = []

    def on_okay(self, listener: Listener) -> ConfirmPopup:
        self._okay_listeners.append(listener)
        return self

    def on_cancel(self, listener: Listener) -> ConfirmPopup:
        self._cancel_listeners.append(listener)
        return self

    def accept(self) -> None:
        self.close()
        for listener in self._okay_listeners:
            listener()

    def reject(self) -> None:
        self.close()
        for listener in self._cancel_listeners:
            listener()

    def click(self, x: float, y: float) -> None:
        super().click(x, y)
        local_x = x - (self.rect.x0 + 0.3)
        local_y = y - (self.rect.y0 + 0.15)
        if _CANCEL_BUTTON.inside(local_x, local_y):
            self.reject()
        if _OKAY_BUTTON.inside(local_x, local_y):
            self.accept()

    def can_stack(self, popup_name: str) -> bool:
        return popup_name in ("InfoPopup", "ConfirmPopup")


class InfoPopup(Popup):
    """A wide popup showing one or more lines of text."""

    name = "InfoPopup"

    def __init__(self, text: Optional[str] = None) -> None:
        if text is None:
            super().__init__(Rect(-0.9, -0.1, 0.9, 0.1))
            self.lines: List[str] = []
            return
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        height = max(0.2, len(lines) * 0.05 + 0.07)
        super().__init__(Rect(-0.9, -height * 0.5, 0.9, height * 0.5))
        self.lines = lines