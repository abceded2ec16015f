"""
Playlist/Audio Controller

Drives the shared audio element over the playable tracks of the musician
section (tracks with a file and no legacy driveId).

States:
- IDLE: no source loaded (empty playlist)
- LOADED: source loaded, not started since the last track change
- PLAYING: audio running
- PAUSED: started, then paused

The ``{index, time}`` position is persisted at most once per configured
interval during playback and on every track change. A saved index outside
the current playlist falls back to track 0 silently.
"""

import math
from enum import Enum
from typing import List, Optional, Tuple

from atelier.contexts.content.content_document import Track
from atelier.contexts.interaction.audio import AudioElement, PlaybackDeniedError
from atelier.contexts.interaction.logger import log_playback_denied
from atelier.contexts.interaction.modal import KeyEvent
from atelier.contexts.interaction.state import UIState
from atelier.contexts.interaction.storage import AUDIO_STATE_KEY
from atelier.utils.text_processing import format_time

PLAY_GLYPH = "▶"
PAUSE_GLYPH = "⏸"
NO_TITLE = "—"


class PlaybackState(Enum):
    IDLE = "idle"
    LOADED = "loaded"
    PLAYING = "playing"
    PAUSED = "paused"


class PlaylistController:
    """
    Transport, seek, volume and persistence for the musician playlist.

    Args:
        ui: Shared UI state (store, scheduler clock, settings)
        tracks: Playable tracks only
        audio: The session's audio element (created if not given)
    """

    def __init__(self, ui: UIState, tracks: List[Track], audio: Optional[AudioElement] = None):
        self.ui = ui
        self.tracks = list(tracks)
        self.audio = audio or AudioElement()
        if self.audio.clock is None:
            self.audio.clock = ui.scheduler
        self.index = 0
        self._started = False
        self._last_save: Optional[float] = None

        self.audio.add_event_listener("timeupdate", self._on_time_update)
        self.audio.add_event_listener("ended", self._on_ended)

    @property
    def _settings(self):
        return self.ui.settings.audio

    @property
    def _storage_key(self) -> str:
        return self.ui.storage_key(AUDIO_STATE_KEY)

    # Persistence

    def save_state(self) -> None:
        if not self.tracks:
            return
        self.ui.store.set_json(
            self._storage_key, {"index": self.index, "time": self.audio.current_time or 0}
        )

    def load_saved_state(self) -> Optional[dict]:
        saved = self.ui.store.get_json(self._storage_key)
        if not isinstance(saved, dict):
            return None
        index, time = saved.get("index"), saved.get("time")
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            return None
        if isinstance(time, bool) or not isinstance(time, (int, float)):
            return None
        return {"index": index, "time": float(time)}

    def restore(self) -> None:
        """Load the saved track paused at the saved time, else track 0."""
        saved = self.load_saved_state()
        if saved and saved["index"] < len(self.tracks):
            self.load_track(saved["index"], autoplay=False, start_time=saved["time"])
        else:
            self.load_track(0, autoplay=False, start_time=0)

    # State

    @property
    def state(self) -> PlaybackState:
        if not self.audio.src:
            return PlaybackState.IDLE
        if not self.audio.paused:
            return PlaybackState.PLAYING
        if self._started:
            return PlaybackState.PAUSED
        return PlaybackState.LOADED

    @property
    def is_playing(self) -> bool:
        return not self.audio.paused and not self.audio.ended

    @property
    def current_track(self) -> Optional[Track]:
        if 0 <= self.index < len(self.tracks):
            return self.tracks[self.index]
        return None

    # Transport

    def _set_source(self, index: int) -> None:
        track = self.tracks[index] if 0 <= index < len(self.tracks) else None
        if track is None:
            return
        self.audio.src = track.file
        self._started = False

    def _start(self) -> None:
        try:
            self.audio.play()
        except PlaybackDeniedError as e:
            track = self.current_track
            log_playback_denied(track.title if track else "", e)
            return
        self._started = True

    def load_track(self, index: int, autoplay: bool = False, start_time: float = 0) -> None:
        self.index = max(0, min(index, len(self.tracks) - 1))
        self._set_source(self.index)
        if not self.audio.src:
            return
        self.audio.current_time = max(0.0, start_time or 0)
        self.save_state()
        if autoplay:
            self._start()

    def select_track(self, index: int) -> None:
        """Make ``index`` current without starting playback."""
        if not 0 <= index < len(self.tracks):
            return
        self.index = index
        self._set_source(index)
        self.save_state()

    def play_by_index(self, index: int) -> None:
        self.load_track(index, autoplay=True, start_time=0)

    def toggle_play(self) -> None:
        if not self.audio.src:
            return
        if self.audio.paused:
            self._start()
        else:
            self.audio.pause()

    def toggle_for_index(self, index: int) -> None:
        """Play a different track, or toggle pause on the current one."""
        if index != self.index or not self.audio.src:
            self.play_by_index(index)
            return
        self.toggle_play()

    def next(self, autoplay: bool = True) -> None:
        if not self.tracks:
            return
        self.load_track((self.index + 1) % len(self.tracks), autoplay=autoplay)

    def previous(self, autoplay: bool = True) -> None:
        if not self.tracks:
            return
        self.load_track((self.index - 1) % len(self.tracks), autoplay=autoplay)

    # Seek and volume

    def seek_to(self, fraction: float) -> None:
        """
        Seek to a fraction of the track.

        The target is clamped to ``[0, duration - seek_end_guard_s]`` so seeking
        to the very end does not fire end-of-track.
        """
        duration = self.audio.duration
        if not math.isfinite(duration):
            return
        target = duration * float(fraction)
        self.audio.current_time = max(0.0, min(target, duration - self._settings.seek_end_guard_s))

    def seek_by(self, delta: float) -> None:
        duration = self.audio.duration
        if not math.isfinite(duration):
            return
        target = self.audio.current_time + delta
        guard = self._settings.keyboard_seek_end_guard_s
        self.audio.current_time = max(0.0, min(target, duration - guard))

    def set_volume(self, volume: float) -> None:
        self.audio.volume = max(0.0, min(1.0, float(volume)))

    def handle_key(self, event: KeyEvent) -> None:
        """Keyboard control while the player has focus."""
        step = self._settings.keyboard_seek_step_s
        if event.key in (" ", "Space"):
            event.prevent_default()
            self.toggle_play()
        elif event.key == "ArrowLeft":
            event.prevent_default()
            self.seek_by(-step)
        elif event.key == "ArrowRight":
            event.prevent_default()
            self.seek_by(step)

    # Audio events

    def _on_time_update(self) -> None:
        now = self.ui.scheduler.now()
        interval = self._settings.progress_save_interval_s
        if self._last_save is None or now - self._last_save >= interval:
            self.save_state()
            self._last_save = now

    def _on_ended(self) -> None:
        self.next(autoplay=True)

    # View helpers

    @property
    def title(self) -> str:
        track = self.current_track
        return (track.title or NO_TITLE) if track else NO_TITLE

    @property
    def link_options(self) -> List[Tuple[str, str]]:
        """(value, label) pairs for the link selector, placeholder first."""
        track = self.current_track
        links = track.links if track else []
        options = [("", "Select link…" if links else "No links")]
        options += [(link.url or "#", link.label or "Link") for link in links]
        return options

    @property
    def open_link_disabled(self) -> bool:
        return len(self.link_options) == 1

    @property
    def play_glyph(self) -> str:
        return PAUSE_GLYPH if self.is_playing else PLAY_GLYPH

    def list_glyph(self, index: int) -> str:
        return PAUSE_GLYPH if self.is_playing and index == self.index else PLAY_GLYPH

    def is_current(self, index: int) -> bool:
        return index == self.index

    @property
    def elapsed_label(self) -> str:
        return format_time(self.audio.current_time)

    @property
    def duration_label(self) -> str:
        return format_time(self.audio.duration)

    @property
    def seek_fraction(self) -> float:
        if not math.isfinite(self.audio.duration) or self.audio.duration <= 0:
            return 0.0
        return self.audio.current_time / self.audio.duration
