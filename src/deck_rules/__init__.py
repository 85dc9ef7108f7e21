from .defaults import DEFAULTS, DeckDefaults, clamp
from .deck_config import DeckConfig
from .presets import PRESETS, Preset, PresetName, get_preset, preset_config

__all__ = [
    "DEFAULTS",
    "DeckDefaults",
    "clamp",
    "DeckConfig",
    "PRESETS",
    "Preset",
    "PresetName",
    "get_preset",
    "preset_config",
]
