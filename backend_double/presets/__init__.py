"""Result presets for StubBackend."""

from .result_preset import ResultPreset
from .builtin import BUILTIN_PRESETS, build_default_preset
from .preset_manager import PresetManager

__all__ = [
    "BUILTIN_PRESETS",
    "PresetManager",
    "ResultPreset",
    "build_default_preset",
]
