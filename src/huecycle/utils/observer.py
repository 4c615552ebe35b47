"""Observer list shared by sessions and other event sources."""

import logging
from threading import Lock
from typing import Any

logger = logging.getLogger(__name__)


class ObserverManager[T: object]:
    """
    Ordered, duplicate-free list of observers guarded by its own lock.

    Callbacks run on a snapshot taken outside the lock, so an observer may
    register or unregister while it is being notified. A failing observer is
    logged and skipped; the remaining observers still receive the event.

    Example:
        ```python
        self._observers = ObserverManager[CycleObserver](observer_type_name="cycle")
        self._observers.notify("on_cycle_event", CycleEvent.COLOR_APPLIED, self, color)
        ```
    """

    def __init__(self, observer_type_name: str = "observer"):
        """
        Args:
            observer_type_name: Label used in log messages (e.g. "cycle")
        """
        self._observers: list[T] = []
        self._lock = Lock()
        self._kind = observer_type_name

    def register(self, observer: T) -> None:
        """Add an observer; registering the same one twice is a no-op."""
        with self._lock:
            if observer in self._observers:
                return
            self._observers.append(observer)
        logger.debug(f"{self._kind} observer added: {observer!r}")

    def unregister(self, observer: T) -> None:
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                logger.warning(f"Cannot remove {self._kind} observer {observer!r}: not registered")
                return
        logger.debug(f"{self._kind} observer removed: {observer!r}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Call `callback_name(*args, **kwargs)` on every registered observer."""
        with self._lock:
            snapshot = tuple(self._observers)

        for observer in snapshot:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._kind} observer {observer!r} lacks '{callback_name}'")
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{self._kind} observer {observer!r} failed in {callback_name}: {e}",
                    exc_info=True,
                )

    def __contains__(self, observer: T) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)
