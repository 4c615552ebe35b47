"""Observer and surface protocol definitions.

- Cycle observers: React to color session lifecycle events
- Surfaces: Anything a session can paint a background color and label onto
"""

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from huecycle.core.session import CycleSession
    from huecycle.models import Color

from .events import CycleEvent


@runtime_checkable
class CycleObserver(Protocol):
    """
    Observer that receives cycle session events.

    Sessions run on their own thread when started with `start()`, so
    implementations should be thread-safe and avoid blocking operations.
    """

    def on_cycle_event(
        self, event: CycleEvent, session: "CycleSession", color: Optional["Color"] = None
    ) -> None:
        """
        Handle a session event.

        Args:
            event: The type of cycle event
            session: The session that emitted the event
            color: The applied color (COLOR_APPLIED only)
        """
        ...


@runtime_checkable
class Surface(Protocol):
    """
    A renderable target whose background color is cycled.

    A session calls `set_background` on every tick and `set_label` only when
    labels are enabled. Creating the label on first use is the surface's job.
    """

    def set_background(self, hex_value: str) -> None:
        """
        Apply a background color.

        Args:
            hex_value: Color as '#rrggbb'
        """
        ...

    def set_label(self, text: str, color: str) -> None:
        """
        Show (or update) the label.

        Args:
            text: Label text (the color's hex value)
            color: Label color as an 'rgba(r, g, b, a)' string
        """
        ...
