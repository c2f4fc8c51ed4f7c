import os

from PySide6.QtCore import QSettings, Signal

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    'grid_grid_type': 'orthogonal',
    'grid_stagger_parity': 'odd',
    'grid_include_hidden': False,
    'grid_ordering': 'standard',
    'grid_columns': 3,
    'grid_rows': 0,  # 0 = derive from item count and columns
    'grid_angle_x': 0.0,
    'grid_angle_y': 90.0,  # Screen convention: 90 degrees points down
    'grid_contain_mode': 'centered',
    'grid_spacing_x': 1.0,
    'grid_spacing_y': 1.0,
    'grid_item_scale': 1.0,
    'grid_debug_overlay': False,
    'grid_transition_duration': 0.3,  # Seconds
    'design_time': False,
    'layout_trace_logs': False,
}


class Settings(QSettings):
    # Signal that shows that the setting with the given string was changes
    change = Signal(str, object, name='settingsChanged')

    def __init__(self):
        super().__init__('axogrid', 'axogrid')

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()


def is_design_time(source=None) -> bool:
    """Whether editor-only drawing (the debug overlay) may run."""
    if os.getenv('AXOGRID_ENVIRONMENT') == 'development':
        return True
    source = settings if source is None else source
    return bool(source.value(
        'design_time', defaultValue=DEFAULT_SETTINGS['design_time'],
        type=bool))
