"""
Canvas 2D para desenho de polígonos e preenchimento com scanline
"""
from typing import Iterable, List, Optional

from PyQt5.QtCore import Qt, QPoint
from PyQt5.QtGui import QPainter, QPen, QColor
from PyQt5.QtWidgets import QWidget, QMessageBox

from polyfill.config import ColorRGB
from polyfill.errors import PolygonError
from polyfill.polygon_fill import Span, fill_polygon
from polyfill.polygon_model import PolygonModel
from polyfill.renderers import SpanConsumer, render_saved_polygons


def to_qcolor(color: ColorRGB) -> QColor:
    r, g, b = color
    return QColor(int(r * 255), int(g * 255), int(b * 255))


def from_qcolor(color: QColor) -> ColorRGB:
    return (color.red() / 255.0, color.green() / 255.0, color.blue() / 255.0)


class QPainterSpanRenderer(SpanConsumer):
    """Desenha spans com um QPainter já ativo"""

    def __init__(self, painter: QPainter):
        self.painter = painter

    def draw_spans(self, spans: Iterable[Span], color: ColorRGB):
        self.painter.save()
        pen = QPen(to_qcolor(color))
        pen.setWidth(1)
        self.painter.setPen(pen)
        for y, x1, x2 in spans:
            self.painter.drawLine(x1, y, x2, y)
        self.painter.restore()

    def draw_polygon_outline(self, vertices, color: ColorRGB, thickness: float):
        if len(vertices) < 2:
            return
        self.painter.save()
        pen = QPen(to_qcolor(color))
        pen.setWidth(max(1, int(thickness)))
        self.painter.setPen(pen)
        n = len(vertices)
        for i in range(n):
            x0, y0 = vertices[i]
            x1, y1 = vertices[(i + 1) % n]
            self.painter.drawLine(x0, y0, x1, y1)
        self.painter.restore()


class Canvas(QWidget):
    """Canvas 2D para desenho de polígonos"""

    def __init__(self, model: PolygonModel, parent=None):
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.model = model
        self.filled_spans: Optional[List[Span]] = None
        self.on_polygon_changed = None  # Callback para notificar mudanças
        self.on_configuration_changed = None  # cor, espessura ou vértices
        self.setMinimumSize(model.config.drawing_area_width,
                            model.config.drawing_area_height)

    @property
    def is_filled(self) -> bool:
        return self.filled_spans is not None

    def _changed(self):
        if self.on_polygon_changed:
            self.on_polygon_changed()
        self.update()

    def _configuration_changed(self):
        if self.on_configuration_changed:
            self.on_configuration_changed()
        self.update()

    def clear(self):
        """Limpa o polígono atual"""
        self.model.clear()
        self.filled_spans = None
        self._changed()

    def undo(self):
        """Desfaz a última ação"""
        if self.filled_spans is not None:
            # Se já preenchido, undo limpa o preenchimento primeiro
            self.filled_spans = None
        else:
            self.model.remove_last_vertex()
        self._changed()

    def set_line_color(self, color: QColor):
        self.model.set_line_color(*from_qcolor(color))
        self._configuration_changed()

    def set_fill_color(self, color: QColor):
        self.model.set_fill_color(*from_qcolor(color))
        self._configuration_changed()

    def set_line_thickness(self, width: int):
        self.model.set_line_thickness(width)
        self._configuration_changed()

    def set_show_vertices(self, show: bool):
        self.model.configuration.show_vertices = bool(show)
        self._configuration_changed()

    def apply_palette_color(self, index: int, target: str = "fill"):
        if self.model.apply_palette_color(index, target):
            self._configuration_changed()

    def mousePressEvent(self, event):
        """Botão esquerdo adiciona vértice, direito fecha o polígono"""
        if event.button() == Qt.LeftButton:
            self.filled_spans = None
            self.model.add_vertex((event.x(), event.y()))
            self._changed()
        elif event.button() == Qt.RightButton:
            self.close_polygon()

    def keyPressEvent(self, event):
        key = event.key()
        if key == Qt.Key_F:
            self.close_polygon()
        elif key == Qt.Key_P:
            self.fill_polygon()
        elif key == Qt.Key_C:
            self.clear()
        elif key == Qt.Key_S:
            self.save_polygon()
        elif key == Qt.Key_V:
            self.model.toggle_vertex_visibility()
            self._configuration_changed()
        elif key in (Qt.Key_Plus, Qt.Key_Equal):
            self.model.adjust_line_thickness(True)
            self._configuration_changed()
        elif key == Qt.Key_Minus:
            self.model.adjust_line_thickness(False)
            self._configuration_changed()
        elif Qt.Key_1 <= key <= Qt.Key_6:
            self.model.apply_preset_fill_color(key - Qt.Key_0)
            self._configuration_changed()
        elif key == Qt.Key_Backspace:
            self.undo()
        else:
            super().keyPressEvent(event)

    def _show_alert(self, error: PolygonError):
        """Mostra um alerta ao usuário"""
        msg_box = QMessageBox(self)
        msg_box.setIcon(QMessageBox.Warning)
        msg_box.setWindowTitle(error.title)
        msg_box.setText(str(error))
        msg_box.setStandardButtons(QMessageBox.Ok)
        msg_box.exec_()

    def close_polygon(self) -> bool:
        """Fecha o polígono com validações"""
        try:
            self.model.validate_shape()
        except PolygonError as e:
            self._show_alert(e)
            return False
        self.model.close()
        self._changed()
        return True

    def fill_polygon(self) -> bool:
        """Preenche o polígono usando scanline com validações"""
        try:
            self.model.validate_for_fill()
        except PolygonError as e:
            self._show_alert(e)
            return False
        self.filled_spans = fill_polygon(self.model.vertices, self.width(), self.height())
        self.update()
        return True

    def save_polygon(self) -> bool:
        """Salva o polígono atual (preenchido ou não) e recomeça a edição"""
        try:
            self.model.save(filled=self.is_filled)
        except PolygonError as e:
            self._show_alert(e)
            return False
        self.filled_spans = None
        self._changed()
        return True

    def clear_saved(self):
        self.model.clear_saved()
        self._changed()

    def paintEvent(self, event):
        """Renderiza o canvas"""
        painter = QPainter(self)
        painter.fillRect(self.rect(), Qt.white)
        renderer = QPainterSpanRenderer(painter)

        render_saved_polygons(self.model, renderer, self.width(), self.height())
        for saved in self.model.saved_polygons:
            config = saved.configuration
            if config.show_vertices:
                self._draw_vertices(painter, saved.vertices, config.line_color,
                                    config.line_thickness)

        config = self.model.configuration
        vertices = self.model.vertices
        # Desenhar preenchimento primeiro se existir
        if self.filled_spans:
            renderer.draw_spans(self.filled_spans, config.fill_color)

        painter.setRenderHint(QPainter.Antialiasing, True)
        if self.model.is_closed:
            renderer.draw_polygon_outline(vertices, config.line_color, config.line_thickness)
        else:
            pen = QPen(to_qcolor(config.line_color))
            pen.setWidth(int(config.line_thickness))
            painter.setPen(pen)
            for i in range(1, len(vertices)):
                x0, y0 = vertices[i - 1]
                x1, y1 = vertices[i]
                painter.drawLine(x0, y0, x1, y1)

        if config.show_vertices:
            self._draw_vertices(painter, vertices, config.line_color, config.line_thickness)

    @staticmethod
    def _draw_vertices(painter: QPainter, vertices, color: ColorRGB, thickness: float):
        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(to_qcolor(color))
        r = max(2, int(thickness))
        for x, y in vertices:
            painter.drawEllipse(QPoint(x, y), r, r)
        painter.restore()
