"""
UI Settings Resolution

Loads interaction tunables (debounce delay, persistence cadence, swipe
thresholds, storage key prefix) from YAML and merges them over the structured
defaults below.

Examples:
    >>> settings = load_ui_settings()
    >>> settings.search.debounce_s
    0.12
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_UI_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "config" / "ui_settings.yaml"
UI_SETTINGS_PATH = Path(os.getenv("ATELIER_UI_SETTINGS_PATH", str(DEFAULT_UI_SETTINGS_PATH)))


@dataclass
class SearchSettings:
    debounce_s: float = 0.12


@dataclass
class AudioSettings:
    progress_save_interval_s: float = 1.0
    seek_end_guard_s: float = 0.25
    keyboard_seek_step_s: float = 5.0
    keyboard_seek_end_guard_s: float = 0.1


@dataclass
class LightboxSettings:
    swipe_min_dx: float = 40
    swipe_max_dy: float = 60


@dataclass
class RenderingSettings:
    excerpt_chars: int = 200


@dataclass
class ToastSettings:
    duration_s: float = 1.4


@dataclass
class StorageSettings:
    key_prefix: str = "portfolio."


@dataclass
class UISettings:
    search: SearchSettings = field(default_factory=SearchSettings)
    audio: AudioSettings = field(default_factory=AudioSettings)
    lightbox: LightboxSettings = field(default_factory=LightboxSettings)
    rendering: RenderingSettings = field(default_factory=RenderingSettings)
    toast: ToastSettings = field(default_factory=ToastSettings)
    storage: StorageSettings = field(default_factory=StorageSettings)


def load_ui_settings(config_path: Path = None) -> UISettings:
    """
    Load ui_settings.yaml merged over the structured defaults.

    Args:
        config_path: Optional path to settings file (defaults to ATELIER_UI_SETTINGS_PATH).
            A missing file yields the defaults.

    Returns:
        UISettings instance

    Raises:
        omegaconf.errors.ValidationError: If a value has the wrong type
    """
    if config_path is None:
        config_path = UI_SETTINGS_PATH

    schema = OmegaConf.structured(UISettings)
    if not Path(config_path).exists():
        return OmegaConf.to_object(schema)

    merged = OmegaConf.merge(schema, OmegaConf.load(config_path))
    return OmegaConf.to_object(merged)
