"""Domain events for observer pattern."""

from enum import Enum


class CycleEvent(Enum):
    """Events from a color cycling session."""

    SESSION_STARTED = "session_started"    # Fresh history created, first tick pending
    COLOR_APPLIED = "color_applied"        # A unique color was applied to the surface
    SESSION_FINISHED = "session_finished"  # Last cycle ran (or stopped), history reset
