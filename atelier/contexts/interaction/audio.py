"""
Shared audio element.

Models the single audio resource of the session: source, position, duration,
volume, paused/ended flags and the events the player listens to. The host
drives playback time through ``tick`` and reports metadata through
``load_metadata``. When a clock is attached, ``tick`` also advances it so
timers and the progress-save throttle see the same elapsed time.
"""

import math
from typing import Callable, Dict, List, Optional

from atelier.contexts.interaction.scheduler import CooperativeScheduler

AUDIO_EVENTS = ("timeupdate", "ended", "loadedmetadata")


class PlaybackDeniedError(Exception):
    """Raised by ``play`` when the platform refuses to start playback."""

    pass


class AudioElement:
    """
    Single audio resource.

    Attributes:
        autoplay_allowed: When False, ``play`` raises PlaybackDeniedError
            (browser autoplay policy before a user gesture)
        clock: Scheduler advanced by ``tick``; a playlist attaches the
            session scheduler when none is given
    """

    def __init__(self, autoplay_allowed: bool = True, clock: Optional[CooperativeScheduler] = None):
        self.autoplay_allowed = autoplay_allowed
        self.clock = clock
        self._src = ""
        self._current_time = 0.0
        self.duration = math.nan
        self.volume = 1.0
        self.paused = True
        self.ended = False
        self._listeners: Dict[str, List[Callable[[], None]]] = {name: [] for name in AUDIO_EVENTS}

    # Events

    def add_event_listener(self, event: str, callback: Callable[[], None]) -> None:
        self._listeners.setdefault(event, []).append(callback)

    def _emit(self, event: str) -> None:
        for callback in list(self._listeners.get(event, [])):
            callback()

    # Source and position

    @property
    def src(self) -> str:
        return self._src

    @src.setter
    def src(self, value: str) -> None:
        """Swapping the source resets position, duration and pauses."""
        self._src = value or ""
        self._current_time = 0.0
        self.duration = math.nan
        self.paused = True
        self.ended = False

    @property
    def current_time(self) -> float:
        return self._current_time

    @current_time.setter
    def current_time(self, value: float) -> None:
        value = max(0.0, float(value))
        if math.isfinite(self.duration):
            value = min(value, self.duration)
        self._current_time = value
        self.ended = False

    def load_metadata(self, duration: float) -> None:
        self.duration = float(duration)
        if self._current_time > self.duration:
            self._current_time = self.duration
        self._emit("loadedmetadata")

    # Transport

    def play(self) -> None:
        """
        Start playback.

        Raises:
            PlaybackDeniedError: No source, or the autoplay policy refuses
        """
        if not self._src:
            raise PlaybackDeniedError("No source loaded")
        if not self.autoplay_allowed:
            raise PlaybackDeniedError("Playback requires a user gesture")
        if self.ended:
            self._current_time = 0.0
            self.ended = False
        self.paused = False

    def pause(self) -> None:
        self.paused = True

    def tick(self, seconds: float) -> None:
        """Advance playback (and the attached clock) by ``seconds`` of wall time."""
        if self.clock is not None:
            self.clock.advance(seconds)
        if self.paused:
            return
        self._current_time += seconds
        if math.isfinite(self.duration) and self._current_time >= self.duration:
            self._current_time = self.duration
            self.paused = True
            self.ended = True
            self._emit("timeupdate")
            self._emit("ended")
            return
        self._emit("timeupdate")
