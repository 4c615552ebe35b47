"""Color cycling session: the timer-driven driver around ColorSpace."""

import logging
import random
import threading
from typing import Optional

from huecycle.colors import ColorHistory
from huecycle.exceptions import ColorSpaceExhaustedError, HueCycleError, SessionError
from huecycle.models import Color, CycleConfig
from huecycle.protocols import CycleEvent, CycleObserver, Surface
from huecycle.utils import ObserverManager

from .color_space import ColorSpace

logger = logging.getLogger(__name__)


class CycleSession:
    """
    One bounded run of color cycling against one surface.

    The session exclusively owns its ColorHistory. Every tick asks the color
    space for a color that has not been shown yet, paints it onto the
    surface and optionally updates the label. After `config.cycles` ticks
    the session finishes and clears its history.

    Ticks can be driven three ways:
    - `run()`: blocking loop in the calling thread
    - `start()` / `stop()`: the same loop on a daemon thread
    - `tick()`: called by a host timer (e.g. Textual's set_interval)
    """

    def __init__(
        self,
        surface: Optional[Surface] = None,
        config: Optional[CycleConfig] = None,
        color_space: Optional[ColorSpace] = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            surface: Target to paint (defaults to a ConsoleSurface on stdout)
            config: Session settings (defaults to CycleConfig())
            color_space: Color generator (defaults to one built from config)
        """
        self.config = config or CycleConfig()

        if surface is None:
            from huecycle.surfaces import ConsoleSurface

            surface = ConsoleSurface()
        self.surface = surface

        if color_space is None:
            rng = random.Random(self.config.seed) if self.config.seed is not None else None
            color_space = ColorSpace(rng=rng, max_retries=self.config.max_retries)
        self.color_space = color_space

        self.history = ColorHistory()

        self._ticks = 0
        self._started = False
        self._finished = False
        self._last_color: Optional[Color] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.error: Optional[HueCycleError] = None

        self._observers = ObserverManager[CycleObserver](observer_type_name="cycle")
        if isinstance(surface, CycleObserver):
            self._observers.register(surface)

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: CycleObserver) -> None:
        """Register an observer to receive cycle events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: CycleObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    # =================================================================
    # State
    # =================================================================

    @property
    def ticks(self) -> int:
        """Number of colors applied so far in this session."""
        return self._ticks

    @property
    def remaining(self) -> int:
        """Number of ticks left before the session finishes."""
        return max(self.config.cycles - self._ticks, 0)

    @property
    def last_color(self) -> Optional[Color]:
        """Most recently applied color, if any."""
        return self._last_color

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def is_running(self) -> bool:
        """True while the session loop thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    # =================================================================
    # Driving
    # =================================================================

    def tick(self) -> Optional[Color]:
        """
        Apply the next unique color to the surface.

        Returns:
            The applied color, or None if the session already finished

        Raises:
            ColorSpaceExhaustedError: If no unique color could be drawn
                (the session is finished before raising)
        """
        if self._finished:
            logger.warning("Tick on a finished session ignored")
            return None

        if not self._started:
            self._started = True
            logger.info(
                f"Session started: cycles={self.config.cycles}, "
                f"interval={self.config.interval}s, label={self.config.include_label}"
            )
            self._observers.notify("on_cycle_event", CycleEvent.SESSION_STARTED, self, None)

        try:
            color = self.color_space.next_unique(self.history)
        except ColorSpaceExhaustedError:
            self._finish()
            raise

        self.surface.set_background(color.hex)
        if self.config.include_label:
            self.surface.set_label(color.hex, color.label)

        self._ticks += 1
        self._last_color = color
        logger.debug(f"Tick {self._ticks}/{self.config.cycles}: {color.hex}")
        self._observers.notify("on_cycle_event", CycleEvent.COLOR_APPLIED, self, color)

        if self._ticks >= self.config.cycles:
            self._finish()

        return color

    def run(self) -> None:
        """
        Run the session to completion in the calling thread.

        The first color is applied immediately; each following one after
        `config.interval` seconds. Returns early when `stop()` is called.
        """
        if self.is_running and threading.current_thread() is not self._thread:
            raise SessionError(
                "Session is already running",
                recovery_hint="Call stop() before running the session again",
            )

        try:
            while not self._finished:
                self.tick()
                if self._finished:
                    break
                if self._stop_event.wait(self.config.interval):
                    logger.info(f"Session stopped after {self._ticks} cycles")
                    break
        finally:
            if not self._finished:
                self._finish()

    def start(self) -> None:
        """Run the session on a background daemon thread."""
        if self.is_running:
            raise SessionError(
                "Session is already running",
                recovery_hint="Call stop() before starting the session again",
            )
        if self._finished:
            raise SessionError(
                "Session has already finished",
                recovery_hint="Call restart() to begin a new session",
            )

        self._thread = threading.Thread(target=self._run_in_thread, daemon=True, name="huecycle-session")
        self._thread.start()

    def stop(self) -> None:
        """Stop the session early and clear its history."""
        self._stop_event.set()

        if self._thread and self._thread.is_alive() and threading.current_thread() is not self._thread:
            self._thread.join(timeout=1.0)

        if not self._finished and not self.is_running:
            self._finish()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the background loop exits.

        Returns:
            True if the session has finished
        """
        if self._thread is not None:
            self._thread.join(timeout=timeout)
        return self._finished

    def restart(self) -> None:
        """Begin a new session on the same surface with a fresh history."""
        if self.is_running:
            raise SessionError(
                "Cannot restart a running session",
                recovery_hint="Call stop() first",
            )

        self.history = ColorHistory()
        self._ticks = 0
        self._started = False
        self._finished = False
        self._last_color = None
        self.error = None
        self._stop_event.clear()
        self._thread = None
        logger.info("Session restarted")

    def _run_in_thread(self) -> None:
        """Thread target: run the loop and keep errors on the session."""
        try:
            self.run()
        except HueCycleError as e:
            logger.error(f"Session failed: {e.technical_message}")
            self.error = e

    def _finish(self) -> None:
        """Mark the session finished and discard its history."""
        self._finished = True
        self.history.reset()
        logger.info(f"Session finished after {self._ticks} cycles")
        self._observers.notify("on_cycle_event", CycleEvent.SESSION_FINISHED, self, None)
