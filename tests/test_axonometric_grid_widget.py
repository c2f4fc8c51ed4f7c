import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QPointF, QSizeF
from PySide6.QtWidgets import QApplication, QGraphicsRectItem, QGraphicsWidget

from axogrid.layout.grid_schema import GridParameters
from axogrid.widgets.axonometric_grid_widget import AxonometricGridWidget

app = QApplication.instance() or QApplication([])


def _container(**changes):
    params = GridParameters(transition_duration=0.0).with_changes(**changes)
    container = AxonometricGridWidget(params)
    passes = []
    container.layoutApplied.connect(passes.append)
    return container, passes


def _child(container, width=64.0, height=64.0):
    child = QGraphicsWidget()
    child.setMinimumSize(width, height)
    child.setParentItem(container)
    return child


def test_child_minimum_size_change_triggers_relayout():
    container, _ = _container(columns=2)
    a = _child(container)
    _child(container)
    app.processEvents()
    assert container.layout_result().state.cell_size == QSizeF(64.0, 64.0)

    a.setMinimumSize(200.0, 200.0)
    app.processEvents()
    app.processEvents()

    state = container.layout_result().state
    assert state.cell_size.width() == 200.0
    assert state.cell_size.height() == 200.0


def test_adding_children_is_coalesced_into_one_pass():
    container, passes = _container(columns=3)
    children = [_child(container) for _ in range(5)]
    app.processEvents()

    assert passes == [5]
    assert len(container.managed_widgets()) == len(children)


def test_non_widget_children_are_left_alone():
    container, passes = _container(columns=2)
    rect = QGraphicsRectItem(0.0, 0.0, 10.0, 10.0, container)
    rect.setPos(7.0, 9.0)
    _child(container)
    _child(container)
    app.processEvents()

    assert passes == [2]
    assert rect not in container.managed_widgets()
    assert rect.pos() == QPointF(7.0, 9.0)


def test_minimum_size_follows_the_layout_result():
    container, _ = _container(columns=2, spacing_x=1.5)
    for _ in range(3):
        _child(container, 80.0, 50.0)
    app.processEvents()

    result = container.layout_result()
    assert result.minimum_size.width() > 0.0
    assert container.minimumSize() == result.minimum_size


def test_explicitly_hidden_child_leaves_the_grid():
    container, passes = _container(columns=3)
    children = [_child(container) for _ in range(3)]
    app.processEvents()

    children[1].hide()
    app.processEvents()

    assert passes[-1] == 2


def test_hidden_container_still_places_its_children():
    container, _ = _container(columns=3)
    for _ in range(3):
        _child(container)
    container.hide()

    result = container.relayout()

    assert len(result.placements) == 3


def test_removed_child_is_detached_from_the_container():
    container, passes = _container(columns=2)
    a = _child(container)
    _child(container)
    app.processEvents()
    assert a.parentLayoutItem() is not None

    a.setParentItem(None)
    app.processEvents()

    assert a.parentLayoutItem() is None
    assert passes[-1] == 1
    a.setMinimumSize(120.0, 120.0)
    app.processEvents()
    assert container.layout_result().state.cell_size == QSizeF(64.0, 64.0)


def test_parameter_change_requests_a_new_pass():
    container, passes = _container(columns=2)
    for _ in range(4):
        _child(container)
    app.processEvents()

    container.update_parameters(columns=4)
    container.update_parameters(columns=4)
    app.processEvents()

    assert passes == [4, 4]
    assert container.layout_result().state.columns == 4
