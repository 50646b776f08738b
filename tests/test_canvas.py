import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt5.QtWidgets")

from PyQt5.QtCore import Qt  # noqa: E402
from PyQt5.QtTest import QTest  # noqa: E402

from polyfill.canvas_2d import Canvas  # noqa: E402
from polyfill.polygon_model import PolygonModel  # noqa: E402


@pytest.fixture(scope="module")
def app():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def canvas(app):
    widget = Canvas(PolygonModel())
    calls = []
    widget.on_configuration_changed = lambda: calls.append(widget.model.configuration.copy())
    widget.calls = calls
    yield widget
    widget.deleteLater()


def test_thickness_keys_notify_configuration_change(canvas):
    QTest.keyClick(canvas, Qt.Key_Plus)
    assert canvas.model.configuration.line_thickness == 3.0
    assert canvas.calls[-1].line_thickness == 3.0

    QTest.keyClick(canvas, Qt.Key_Minus)
    QTest.keyClick(canvas, Qt.Key_Minus)
    assert canvas.model.configuration.line_thickness == 1.0
    assert len(canvas.calls) == 3


def test_vertex_key_notifies_configuration_change(canvas):
    QTest.keyClick(canvas, Qt.Key_V)
    assert canvas.model.configuration.show_vertices is False
    assert canvas.calls[-1].show_vertices is False


def test_preset_key_notifies_configuration_change(canvas):
    QTest.keyClick(canvas, Qt.Key_2)
    assert canvas.model.configuration.fill_color == (0.0, 1.0, 0.0)
    assert len(canvas.calls) == 1


def test_drawing_keys_do_not_notify_configuration_change(canvas):
    QTest.keyClick(canvas, Qt.Key_C)
    QTest.keyClick(canvas, Qt.Key_Backspace)
    assert canvas.calls == []


def test_palette_notifies_only_when_applied(canvas):
    canvas.apply_palette_color(20)
    assert canvas.calls == []
    canvas.apply_palette_color(9, "both")
    assert canvas.model.configuration.line_color == (0.0, 1.0, 0.0)
    assert len(canvas.calls) == 1
