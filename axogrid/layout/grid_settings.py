"""Reads and writes GridParameters through the application settings."""

from __future__ import annotations

from axogrid.layout.grid_schema import GridParameters
from axogrid.utils.settings import DEFAULT_SETTINGS

SETTINGS_PREFIX = 'grid_'


def settings_key(field_name: str) -> str:
    return SETTINGS_PREFIX + field_name


def parameters_from_settings(source) -> GridParameters:
    """`source` is anything with QSettings-style `value(key, defaultValue, type)`."""
    values = {}
    for name in GridParameters.field_names():
        key = settings_key(name)
        default = DEFAULT_SETTINGS[key]
        values[name] = source.value(key, defaultValue=default,
                                    type=type(default))
    return GridParameters.create(**values)


def parameters_to_settings(params: GridParameters, target):
    for name, value in params.to_dict().items():
        target.setValue(settings_key(name), value)
