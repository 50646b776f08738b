"""
Módulo widgets - Componentes de interface gráfica

Organização:
- Canvas3D: pré-visualização dos sólidos extrudados com QPainter
- MainWindow: Janela principal com abas e barra de ferramentas
"""
import logging
import math
from typing import List, Optional

import numpy as np
from PyQt5.QtCore import Qt, QPointF
from PyQt5.QtGui import QPainter, QPen, QColor, QPolygonF, QPixmap, QIcon
from PyQt5.QtWidgets import (
    QWidget, QMainWindow, QAction, QColorDialog, QSpinBox, QLabel,
    QToolBar, QStatusBar, QTabWidget, QInputDialog, QComboBox
)

from polyfill.canvas_2d import Canvas, to_qcolor
from polyfill.config import COLOR_PALETTE, AppConfig
from polyfill.extrusion import Solid, extrude_saved_polygons
from polyfill.gl_renderer import GLPolygonView
from polyfill.polygon_model import MAX_LINE_THICKNESS, MIN_LINE_THICKNESS, PolygonModel

logger = logging.getLogger(__name__)


def rotation_matrix(rot_x_deg: float, rot_y_deg: float) -> np.ndarray:
    """Rotação da câmera: primeiro em Y (yaw), depois em X (pitch)"""
    ax, ay = math.radians(rot_x_deg), math.radians(rot_y_deg)
    cx, sx = math.cos(ax), math.sin(ax)
    cy, sy = math.cos(ay), math.sin(ay)
    rx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]], dtype=float)
    ry = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]], dtype=float)
    return rx @ ry


class Canvas3D(QWidget):
    """
    Visualização dos sólidos extrudados com projeção ortográfica

    - Rotação de câmera com o mouse
    - Zoom com a roda do mouse
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.solids: List[Solid] = []
        self.colors: List[QColor] = []
        self.edge_color = QColor(0, 0, 0)
        self.camera_rot_x = 30.0
        self.camera_rot_y = 45.0
        self.zoom = 1.0
        self.last_mouse_pos = None
        self.mouse_sensitivity = 0.5
        self.setMinimumSize(400, 300)
        self.setFocusPolicy(Qt.StrongFocus)

    def set_solids(self, solids: List[Solid], colors: List[QColor]):
        self.solids = list(solids)
        self.colors = list(colors)
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.fillRect(self.rect(), Qt.white)
        if not self.solids:
            return

        rotation = rotation_matrix(self.camera_rot_x, self.camera_rot_y)
        center = np.array([self.width() / 2.0, self.height() / 2.0])

        for solid, color in zip(self.solids, self.colors):
            cam = solid.vertices @ rotation.T
            # y da tela cresce para baixo
            projected = np.column_stack((cam[:, 0], -cam[:, 1])) * self.zoom + center
            normals = solid.face_normals() @ rotation.T

            # faces de trás primeiro (pintor simples por profundidade média)
            order = sorted(range(len(solid.faces)),
                           key=lambda i: cam[solid.faces[i], 2].mean())
            pen = QPen(self.edge_color)
            pen.setWidth(1)
            painter.setPen(pen)
            for i in order:
                shade = 0.4 + 0.6 * abs(normals[i, 2])
                face_color = QColor(int(color.red() * shade), int(color.green() * shade),
                                    int(color.blue() * shade))
                painter.setBrush(face_color)
                points = [QPointF(*projected[idx]) for idx in solid.faces[i]]
                painter.drawPolygon(QPolygonF(points))

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.last_mouse_pos = event.pos()
            self.setFocus()

    def mouseMoveEvent(self, event):
        if event.buttons() & Qt.LeftButton and self.last_mouse_pos is not None:
            dx = event.x() - self.last_mouse_pos.x()
            dy = event.y() - self.last_mouse_pos.y()
            self.camera_rot_y += dx * self.mouse_sensitivity
            self.camera_rot_x += dy * self.mouse_sensitivity
            self.last_mouse_pos = event.pos()
            self.update()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.last_mouse_pos = None

    def wheelEvent(self, event):
        factor = 1.1 if event.angleDelta().y() > 0 else 1 / 1.1
        self.zoom = max(0.1, min(10.0, self.zoom * factor))
        self.update()


class MainWindow(QMainWindow):
    """
    Janela principal da aplicação

    Abas: Desenho 2D (QPainter), OpenGL 2D e Extrusão 3D.
    Teclado no canvas 2D: F fecha, P preenche, S salva, C limpa,
    V alterna vértices, +/- espessura, 1-6 cores predefinidas.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        super().__init__()
        self.config = config if config is not None else AppConfig()
        self.setWindowTitle("Preenchimento de Polígonos - ET/AET")

        self.model = PolygonModel(self.config)

        self.viewer_tabs = QTabWidget(self)
        self.canvas = Canvas(self.model, self)
        self.viewer_tabs.addTab(self.canvas, "Desenho 2D")

        self.gl_view = GLPolygonView(self.model, self)
        self.viewer_tabs.addTab(self.gl_view, "OpenGL 2D")

        self.canvas3d = Canvas3D(self)
        self.viewer_tabs.addTab(self.canvas3d, "Extrusão 3D")

        self.canvas.on_polygon_changed = self._on_polygon_changed
        self.canvas.on_configuration_changed = self._sync_style_controls
        self.viewer_tabs.currentChanged.connect(self._on_tab_changed)

        self.setCentralWidget(self.viewer_tabs)
        self.status = QStatusBar(self)
        self.setStatusBar(self.status)
        self._create_toolbar()
        self.resize(self.config.window_width, self.config.window_height)

    def _create_toolbar(self):
        """Cria a barra de ferramentas organizada por categorias"""
        tb = QToolBar("Ferramentas", self)
        self.addToolBar(tb)

        # === DESENHO 2D ===
        tb.addWidget(QLabel("Desenho:"))
        for label, slot in (("Limpar", self.canvas.clear),
                            ("Desfazer", self.canvas.undo),
                            ("Fechar", self.canvas.close_polygon),
                            ("Preencher", self._fill),
                            ("Salvar", self._save),
                            ("Limpar Salvos", self._clear_saved)):
            action = QAction(label, self)
            action.triggered.connect(slot)
            tb.addAction(action)

        tb.addSeparator()

        # === CORES E ESTILO ===
        act_stroke = QAction("Contorno", self)
        act_stroke.triggered.connect(self._choose_line_color)
        tb.addAction(act_stroke)

        act_fill = QAction("Preenchimento", self)
        act_fill.triggered.connect(self._choose_fill_color)
        tb.addAction(act_fill)

        tb.addWidget(QLabel("Espessura:"))
        self.thickness_spin = QSpinBox(self)
        self.thickness_spin.setRange(int(MIN_LINE_THICKNESS), int(MAX_LINE_THICKNESS))
        self.thickness_spin.setValue(int(self.model.configuration.line_thickness))
        self.thickness_spin.setMaximumWidth(60)
        self.thickness_spin.valueChanged.connect(self._set_thickness)
        tb.addWidget(self.thickness_spin)

        self.vertices_action = QAction("Vértices", self)
        self.vertices_action.setCheckable(True)
        self.vertices_action.setChecked(self.model.configuration.show_vertices)
        self.vertices_action.toggled.connect(self._set_show_vertices)
        tb.addAction(self.vertices_action)

        tb.addSeparator()

        # === EXTRUSÃO ===
        act_extrude = QAction("Extrudar Salvos", self)
        act_extrude.triggered.connect(self._extrude_saved)
        tb.addAction(act_extrude)

        self._create_palette_toolbar()

    def _create_palette_toolbar(self):
        """Paleta de 16 cores aplicada ao preenchimento, ao contorno ou a ambos"""
        tb = QToolBar("Paleta", self)
        self.addToolBar(tb)

        tb.addWidget(QLabel("Paleta:"))
        self.palette_target = QComboBox(self)
        for label, target in (("Preenchimento", "fill"),
                              ("Contorno", "line"),
                              ("Ambos", "both")):
            self.palette_target.addItem(label, target)
        tb.addWidget(self.palette_target)

        for index, rgb in enumerate(COLOR_PALETTE):
            pixmap = QPixmap(16, 16)
            pixmap.fill(QColor(*rgb))
            action = QAction(QIcon(pixmap), f"Cor {index + 1}", self)
            action.triggered.connect(lambda checked=False, i=index: self._apply_palette_color(i))
            tb.addAction(action)

    def _refresh_views(self):
        self.canvas.update()
        self.gl_view.current_filled = self.canvas.is_filled
        self.gl_view.update()

    def _on_polygon_changed(self):
        self.status.showMessage(
            f"{self.model.vertex_count} vértices | "
            f"{'fechado' if self.model.is_closed else 'aberto'} | "
            f"{self.model.saved_count} salvos", 3000)
        self.gl_view.current_filled = self.canvas.is_filled
        self.gl_view.update()

    def _on_tab_changed(self, index: int):
        self._refresh_views()

    def _fill(self):
        if self.canvas.fill_polygon():
            self.status.showMessage(f"{len(self.canvas.filled_spans)} spans", 3000)
            self._refresh_views()

    def _save(self):
        if self.canvas.save_polygon():
            self.status.showMessage(f"Polígono salvo ({self.model.saved_count} no total)", 3000)

    def _clear_saved(self):
        self.canvas.clear_saved()
        self.canvas3d.set_solids([], [])

    def _choose_line_color(self):
        current = to_qcolor(self.model.configuration.line_color)
        color = QColorDialog.getColor(current, self, "Cor do Contorno")
        if color.isValid():
            self.canvas.set_line_color(color)

    def _choose_fill_color(self):
        current = to_qcolor(self.model.configuration.fill_color)
        color = QColorDialog.getColor(current, self, "Cor de Preenchimento")
        if color.isValid():
            self.canvas.set_fill_color(color)

    def _set_thickness(self, value: int):
        self.canvas.set_line_thickness(value)

    def _set_show_vertices(self, checked: bool):
        self.canvas.set_show_vertices(checked)

    def _apply_palette_color(self, index: int):
        self.canvas.apply_palette_color(index, self.palette_target.currentData())

    def _sync_style_controls(self):
        """Reflete na barra de ferramentas mudanças feitas pelo teclado"""
        cfg = self.model.configuration
        self.thickness_spin.blockSignals(True)
        self.thickness_spin.setValue(int(cfg.line_thickness))
        self.thickness_spin.blockSignals(False)
        self.vertices_action.blockSignals(True)
        self.vertices_action.setChecked(cfg.show_vertices)
        self.vertices_action.blockSignals(False)
        self._refresh_views()

    def _extrude_saved(self):
        """Extrui todos os polígonos salvos para a aba 3D"""
        if not self.model.saved_count:
            self.status.showMessage("Nenhum polígono salvo para extrudar", 3000)
            return
        depth, ok = QInputDialog.getDouble(
            self, "Profundidade", "Digite a profundidade da extrusão:",
            self.config.extrusion_depth, 1.0, 500.0, 1
        )
        if not ok:
            return
        self.config.extrusion_depth = depth
        solids = extrude_saved_polygons(self.model, depth)
        colors = [to_qcolor(saved.configuration.fill_color)
                  for saved in self.model.saved_polygons if len(saved.vertices) >= 3]
        self.canvas3d.set_solids(solids, colors)
        self.viewer_tabs.setCurrentWidget(self.canvas3d)
        logger.info("%d sólidos extrudados com profundidade %.1f", len(solids), depth)
        self.status.showMessage(f"{len(solids)} sólidos extrudados", 3000)
