"""
Renderização dos spans com OpenGL (modo imediato)
"""
from typing import Iterable

from PyQt5.QtWidgets import QOpenGLWidget
from PyQt5.QtGui import QSurfaceFormat
from OpenGL.GL import *

from polyfill.config import ColorRGB
from polyfill.polygon_fill import Span, fill_polygon
from polyfill.polygon_model import PolygonModel
from polyfill.renderers import SpanConsumer, render_saved_polygons


class GLSpanRenderer(SpanConsumer):
    """Desenha spans como GL_LINES; o contexto GL precisa estar ativo"""

    def draw_spans(self, spans: Iterable[Span], color: ColorRGB):
        spans = list(spans)
        if not spans:
            return
        glColor3f(*color)
        glBegin(GL_LINES)
        for y, x1, x2 in spans:
            if x1 == x2:
                continue
            # x2 + 1: a linha do OpenGL não inclui o pixel final
            glVertex2i(x1, y)
            glVertex2i(x2 + 1, y)
        glEnd()
        glBegin(GL_POINTS)
        for y, x1, x2 in spans:
            if x1 == x2:
                glVertex2i(x1, y)
        glEnd()

    def draw_polygon_outline(self, vertices, color: ColorRGB, thickness: float):
        if len(vertices) < 2:
            return
        glColor3f(*color)
        glLineWidth(thickness)
        glBegin(GL_LINE_LOOP)
        for x, y in vertices:
            glVertex2i(x, y)
        glEnd()
        glLineWidth(1.0)


class GLPolygonView(QOpenGLWidget):
    """Visualização OpenGL 2D (projeção ortográfica em pixels) do modelo"""

    def __init__(self, model: PolygonModel, parent=None):
        super().__init__(parent)
        fmt = QSurfaceFormat()
        fmt.setVersion(2, 1)
        self.setFormat(fmt)
        self.model = model
        self.renderer = GLSpanRenderer()
        self.current_filled = False
        self.background = (0.12, 0.12, 0.18)
        self.setMinimumSize(model.config.drawing_area_width,
                            model.config.drawing_area_height)

    def initializeGL(self):
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_LIGHTING)
        glClearColor(*self.background, 1.0)

    def resizeGL(self, width, height):
        glViewport(0, 0, width, height)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        # y cresce para baixo, como nas coordenadas do mouse
        glOrtho(0, width, height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def paintGL(self):
        glClear(GL_COLOR_BUFFER_BIT)
        width, height = self.width(), self.height()
        render_saved_polygons(self.model, self.renderer, width, height)

        config = self.model.configuration
        vertices = self.model.vertices
        if self.current_filled and self.model.can_be_filled:
            self.renderer.draw_spans(fill_polygon(vertices, width, height),
                                     config.fill_color)
        if self.model.is_closed:
            self.renderer.draw_polygon_outline(vertices, config.line_color,
                                               config.line_thickness)
        elif len(vertices) >= 2:
            glColor3f(*config.line_color)
            glLineWidth(config.line_thickness)
            glBegin(GL_LINE_STRIP)
            for x, y in vertices:
                glVertex2i(x, y)
            glEnd()
            glLineWidth(1.0)

        if config.show_vertices and vertices:
            glColor3f(*config.line_color)
            glPointSize(max(4.0, config.line_thickness * 2))
            glBegin(GL_POINTS)
            for x, y in vertices:
                glVertex2i(x, y)
            glEnd()
            glPointSize(1.0)
