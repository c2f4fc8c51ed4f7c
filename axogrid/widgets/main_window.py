"""Demo window: a grid container in a graphics view next to its controls."""

from __future__ import annotations

import random

from PySide6.QtCore import QSizeF, Qt
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import (
    QDockWidget,
    QGraphicsScene,
    QGraphicsView,
    QMainWindow,
    QToolBar,
)

from axogrid.layout.grid_schema import GridParameters
from axogrid.layout.grid_settings import parameters_from_settings, parameters_to_settings
from axogrid.presets.preset_loader import GridPresetLoader
from axogrid.utils.settings import settings
from axogrid.widgets.axonometric_grid_widget import AxonometricGridWidget
from axogrid.widgets.grid_controls_panel import GridControlsPanel
from axogrid.widgets.tile_item import TileItem

TILE_COLORS = ('#2196F3', '#FF0080', '#FF8C00', '#32CD32', '#6B8E23', '#9C27B0')


class MainWindow(QMainWindow):

    def __init__(self, app):
        super().__init__()
        self.app = app
        self.setWindowTitle('Axonometric Grid')
        self.resize(1200, 800)
        self._tile_count = 0
        self._random = random.Random(7)

        parameters = parameters_from_settings(settings)
        self.scene = QGraphicsScene(self)
        self.grid_widget = AxonometricGridWidget(parameters)
        self.scene.addItem(self.grid_widget)
        self.view = QGraphicsView(self.scene)
        self.view.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.view.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(self.view)

        presets = GridPresetLoader().list_available_presets()
        self.controls_panel = GridControlsPanel(parameters, presets)
        self.controls_panel.parametersChanged.connect(self.set_grid_parameters)
        controls_dock = QDockWidget('Grid', self)
        controls_dock.setObjectName('grid_controls_dock')
        controls_dock.setWidget(self.controls_panel)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, controls_dock)

        toolbar = QToolBar('Tiles', self)
        toolbar.setObjectName('tiles_toolbar')
        toolbar.addAction('Add tile', self.add_tile)
        toolbar.addAction('Remove tile', self.remove_tile)
        toolbar.addAction('Toggle last tile', self.toggle_last_tile)
        self.addToolBar(toolbar)

        self.grid_widget.layoutApplied.connect(self._on_layout_applied)
        for _ in range(9):
            self.add_tile()

    def set_grid_parameters(self, parameters: GridParameters):
        self.grid_widget.set_parameters(parameters)
        parameters_to_settings(parameters, settings)

    def add_tile(self):
        self._tile_count += 1
        size = QSizeF(self._random.choice((48, 64, 72)), self._random.choice((48, 64, 80)))
        color = QColor(TILE_COLORS[self._tile_count % len(TILE_COLORS)])
        TileItem(str(self._tile_count), size, color, parent=self.grid_widget)

    def remove_tile(self):
        tiles = self.grid_widget.managed_widgets()
        if not tiles:
            return
        tile = tiles[-1]
        tile.setParentItem(None)
        self.scene.removeItem(tile)
        tile.deleteLater()

    def toggle_last_tile(self):
        tiles = self.grid_widget.managed_widgets()
        if tiles:
            tiles[-1].setVisible(not tiles[-1].isVisible())

    def _on_layout_applied(self, placed_count: int):
        result = self.grid_widget.layout_result()
        bounds = result.bounds
        self.scene.setSceneRect(bounds.adjusted(-40, -40, 40, 40))
        self.statusBar().showMessage(
            f'{placed_count} placed, {len(result.unplaced_items)} unplaced, '
            f'{len(result.state.slots)} slots, '
            f'bounds {bounds.width():.0f}x{bounds.height():.0f}')

    def closeEvent(self, event):
        self.grid_widget.animator().stop_all()
        parameters_to_settings(self.grid_widget.parameters(), settings)
        settings.setValue('geometry', self.saveGeometry())
        settings.sync()
        super().closeEvent(event)
