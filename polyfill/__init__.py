"""
polyfill - preenchimento de polígonos por scanline (ET/AET)

Estrutura:
- polygon_fill.py: Edge Table, Active Edge Table e geração de spans
- polygon_model.py: polígono em edição e polígonos salvos
- renderers.py: consumidores de spans (interface e buffer numpy)
- extrusion.py: extrusão dos polígonos em sólidos 3D
- canvas_2d.py, gl_renderer.py, widgets.py: interface PyQt5/OpenGL
"""
from polyfill.polygon_fill import (
    Edge,
    EdgeTable,
    Point,
    Span,
    build_edge_table,
    fill_polygon,
    scanline_spans,
)

__all__ = [
    "Edge",
    "EdgeTable",
    "Point",
    "Span",
    "build_edge_table",
    "fill_polygon",
    "scanline_spans",
]
