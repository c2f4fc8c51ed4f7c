"""Form bound to every GridParameters option, plus a preset selector."""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDoubleSpinBox,
    QFormLayout,
    QSpinBox,
    QWidget,
)

from axogrid.layout.grid_schema import (
    ContainMode,
    GridParameters,
    GridType,
    SlotOrdering,
    StaggerParity,
)
from axogrid.presets.preset_loader import GridPreset


class GridControlsPanel(QWidget):
    parametersChanged = Signal(object)

    def __init__(self, parameters: GridParameters, presets: list[GridPreset] | None = None,
                 parent: QWidget | None = None):
        super().__init__(parent)
        self._presets = list(presets or [])
        self._syncing = False
        layout = QFormLayout(self)

        self.preset_combo_box = QComboBox()
        self.preset_combo_box.addItem('(custom)')
        for preset in self._presets:
            self.preset_combo_box.addItem(preset.name)
        self.preset_combo_box.currentIndexChanged.connect(self._apply_preset)
        layout.addRow('Preset', self.preset_combo_box)

        self.grid_type_combo_box = self._enum_combo_box(GridType)
        self.stagger_parity_combo_box = self._enum_combo_box(StaggerParity)
        self.ordering_combo_box = self._enum_combo_box(SlotOrdering)
        self.contain_mode_combo_box = self._enum_combo_box(ContainMode)
        self.include_hidden_check_box = QCheckBox()
        self.debug_overlay_check_box = QCheckBox()
        self.columns_spin_box = self._int_spin_box(1, 64)
        self.rows_spin_box = self._int_spin_box(0, 64)
        self.rows_spin_box.setSpecialValueText('auto')
        self.angle_x_spin_box = self._double_spin_box(-360.0, 360.0, 5.0)
        self.angle_y_spin_box = self._double_spin_box(-360.0, 360.0, 5.0)
        self.spacing_x_spin_box = self._double_spin_box(0.1, 5.0, 0.05)
        self.spacing_y_spin_box = self._double_spin_box(0.1, 5.0, 0.05)
        self.item_scale_spin_box = self._double_spin_box(0.1, 3.0, 0.05)
        self.transition_duration_spin_box = self._double_spin_box(0.0, 5.0, 0.05)

        layout.addRow('Grid type', self.grid_type_combo_box)
        layout.addRow('Staggered rows', self.stagger_parity_combo_box)
        layout.addRow('Ordering', self.ordering_combo_box)
        layout.addRow('Containment', self.contain_mode_combo_box)
        layout.addRow('Columns', self.columns_spin_box)
        layout.addRow('Rows', self.rows_spin_box)
        layout.addRow('Angle X', self.angle_x_spin_box)
        layout.addRow('Angle Y', self.angle_y_spin_box)
        layout.addRow('Spacing X', self.spacing_x_spin_box)
        layout.addRow('Spacing Y', self.spacing_y_spin_box)
        layout.addRow('Item scale', self.item_scale_spin_box)
        layout.addRow('Transition (s)', self.transition_duration_spin_box)
        layout.addRow('Include hidden', self.include_hidden_check_box)
        layout.addRow('Debug overlay', self.debug_overlay_check_box)

        self.set_parameters(parameters)

    def _enum_combo_box(self, enum_cls) -> QComboBox:
        combo_box = QComboBox()
        for member in enum_cls:
            combo_box.addItem(member.value.replace("_", " "), member.value)
        combo_box.currentIndexChanged.connect(self._emit_parameters)
        return combo_box

    def _int_spin_box(self, minimum: int, maximum: int) -> QSpinBox:
        spin_box = QSpinBox()
        spin_box.setRange(minimum, maximum)
        spin_box.valueChanged.connect(self._emit_parameters)
        return spin_box

    def _double_spin_box(self, minimum: float, maximum: float, step: float) -> QDoubleSpinBox:
        spin_box = QDoubleSpinBox()
        spin_box.setRange(minimum, maximum)
        spin_box.setSingleStep(step)
        spin_box.setDecimals(3)
        spin_box.valueChanged.connect(self._emit_parameters)
        return spin_box

    def set_parameters(self, parameters: GridParameters):
        self._syncing = True
        try:
            for combo_box, value in (
                (self.grid_type_combo_box, parameters.grid_type),
                (self.stagger_parity_combo_box, parameters.stagger_parity),
                (self.ordering_combo_box, parameters.ordering),
                (self.contain_mode_combo_box, parameters.contain_mode),
            ):
                combo_box.setCurrentIndex(combo_box.findData(value.value))
            self.columns_spin_box.setValue(parameters.columns)
            self.rows_spin_box.setValue(parameters.rows)
            self.angle_x_spin_box.setValue(parameters.angle_x)
            self.angle_y_spin_box.setValue(parameters.angle_y)
            self.spacing_x_spin_box.setValue(parameters.spacing_x)
            self.spacing_y_spin_box.setValue(parameters.spacing_y)
            self.item_scale_spin_box.setValue(parameters.item_scale)
            self.transition_duration_spin_box.setValue(parameters.transition_duration)
            self.include_hidden_check_box.setChecked(parameters.include_hidden)
            self.debug_overlay_check_box.setChecked(parameters.debug_overlay)
        finally:
            self._syncing = False

    def parameters(self) -> GridParameters:
        return GridParameters.create(
            grid_type=self.grid_type_combo_box.currentData(),
            stagger_parity=self.stagger_parity_combo_box.currentData(),
            include_hidden=self.include_hidden_check_box.isChecked(),
            ordering=self.ordering_combo_box.currentData(),
            columns=self.columns_spin_box.value(),
            rows=self.rows_spin_box.value(),
            angle_x=self.angle_x_spin_box.value(),
            angle_y=self.angle_y_spin_box.value(),
            contain_mode=self.contain_mode_combo_box.currentData(),
            spacing_x=self.spacing_x_spin_box.value(),
            spacing_y=self.spacing_y_spin_box.value(),
            item_scale=self.item_scale_spin_box.value(),
            debug_overlay=self.debug_overlay_check_box.isChecked(),
            transition_duration=self.transition_duration_spin_box.value(),
        )

    def _emit_parameters(self, *_):
        if self._syncing:
            return
        self.preset_combo_box.blockSignals(True)
        self.preset_combo_box.setCurrentIndex(0)
        self.preset_combo_box.blockSignals(False)
        self.parametersChanged.emit(self.parameters())

    def _apply_preset(self, index: int):
        if index <= 0 or index > len(self._presets):
            return
        parameters = self._presets[index - 1].parameters
        self.set_parameters(parameters)
        self.parametersChanged.emit(parameters)
