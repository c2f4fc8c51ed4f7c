"""Declarative grid presets (YAML)."""

from .preset_loader import GridPreset, GridPresetLoader

__all__ = [
    'GridPreset',
    'GridPresetLoader',
]
