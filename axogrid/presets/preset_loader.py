"""Preset loader - reads and validates grid preset files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from axogrid.layout.grid_schema import GridParameters, coerce_enum, ENUM_FIELDS
from axogrid.utils.flow_log import log_flow

DEFAULT_PRESET_DIR = Path(__file__).parent / 'defaults'

_NUMERIC_FIELDS = (
    'columns', 'rows', 'angle_x', 'angle_y', 'spacing_x', 'spacing_y',
    'item_scale', 'transition_duration',
)
_BOOL_FIELDS = ('include_hidden', 'debug_overlay')


@dataclass(frozen=True)
class GridPreset:
    name: str
    parameters: GridParameters
    author: str = "Unknown"
    version: str = "1.0"
    path: Optional[Path] = None


class GridPresetLoader:
    """Loads and validates preset files."""

    REQUIRED_FIELDS = ('name', 'version', 'grid')

    def __init__(self):
        self.loaded_presets: Dict[str, GridPreset] = {}

    @classmethod
    def validate_structure(cls, data: Any) -> tuple[bool, str]:
        """Validate preset data structure.

        Returns:
            (valid, error_message) tuple
        """
        if not isinstance(data, dict):
            return False, "Preset must be a mapping"

        for field_name in cls.REQUIRED_FIELDS:
            if field_name not in data:
                return False, f"Missing required field: {field_name}"

        grid = data['grid']
        if not isinstance(grid, dict):
            return False, "grid must be a mapping"

        known = set(GridParameters.field_names())
        for key, value in grid.items():
            if key not in known:
                return False, f"Unknown grid option: {key}"
            if key in ENUM_FIELDS:
                valid_values = [member.value for member in ENUM_FIELDS[key]]
                try:
                    coerce_enum(ENUM_FIELDS[key], value)
                except ValueError:
                    return False, f"{key} must be one of {valid_values}"
            elif key in _NUMERIC_FIELDS:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    return False, f"{key} must be a number"
            elif key in _BOOL_FIELDS and not isinstance(value, bool):
                return False, f"{key} must be true or false"

        return True, ""

    def load_preset(self, preset_path: Path) -> Optional[GridPreset]:
        """Load and validate a preset file.

        Args:
            preset_path: Path to YAML preset file

        Returns:
            GridPreset or None if invalid
        """
        preset_path = Path(preset_path)
        try:
            with open(preset_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            log_flow("PRESETS", f"YAML parse error in {preset_path.name}: {e}", level="ERROR")
            return None
        except OSError as e:
            log_flow("PRESETS", f"Cannot read preset {preset_path}: {e}", level="ERROR")
            return None

        if not data:
            log_flow("PRESETS", f"Empty preset file: {preset_path}", level="WARNING")
            return None

        valid, error = self.validate_structure(data)
        if not valid:
            log_flow("PRESETS", f"Invalid preset {preset_path.name}: {error}", level="WARNING")
            return None

        preset = GridPreset(
            name=str(data['name']),
            parameters=GridParameters.create(**data['grid']),
            author=str(data.get('author', 'Unknown')),
            version=str(data['version']),
            path=preset_path,
        )
        self.loaded_presets[preset_path.stem] = preset
        return preset

    def list_available_presets(self, preset_dirs: Optional[list[Path]] = None) -> list[GridPreset]:
        """Load every valid `*.yaml` preset found in `preset_dirs`."""
        if preset_dirs is None:
            preset_dirs = [DEFAULT_PRESET_DIR]

        presets = []
        for preset_dir in preset_dirs:
            preset_dir = Path(preset_dir)
            if not preset_dir.exists():
                continue
            for preset_file in sorted(preset_dir.glob('*.yaml')):
                preset = self.load_preset(preset_file)
                if preset:
                    presets.append(preset)
        return presets
