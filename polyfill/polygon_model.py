"""
Modelo do polígono em edição e dos polígonos salvos
"""
import logging
from typing import List, Optional, Sequence, Tuple

from polyfill.config import COLOR_PALETTE, AppConfig, ColorRGB, palette_color
from polyfill.errors import (
    CollinearPolygonError,
    PolygonNotClosedError,
    TooFewVerticesError,
)
from polyfill.polygon_fill import Point, PointLike

logger = logging.getLogger(__name__)

# Cores predefinidas para as teclas 1-6
PRESET_FILL_COLORS = {
    1: (1.0, 0.0, 0.0),
    2: (0.0, 1.0, 0.0),
    3: (0.0, 0.0, 1.0),
    4: (1.0, 1.0, 0.0),
    5: (1.0, 0.0, 1.0),
    6: (0.0, 1.0, 1.0),
}

MIN_LINE_THICKNESS = 1.0
MAX_LINE_THICKNESS = 10.0
DEFAULT_PALETTE_INDEX = 12


def _clamp_color(color: Sequence[float]) -> ColorRGB:
    r, g, b = color
    return tuple(min(1.0, max(0.0, float(c))) for c in (r, g, b))


def are_points_collinear(points: Sequence[PointLike], tolerance: float = 1e-6) -> bool:
    """
    Verifica se todos os pontos são colineares

    A reta de referência vai do primeiro ponto ao primeiro ponto distinto
    dele (cliques repetidos são ignorados); os demais são testados pela
    área do triângulo. Se todos os pontos coincidem, são colineares.
    """
    if len(points) < 3:
        return False

    x1, y1 = points[0]
    reference = None
    for x, y in points[1:]:
        if abs(x - x1) >= tolerance or abs(y - y1) >= tolerance:
            reference = (x, y)
            break
    if reference is None:
        return True

    x2, y2 = reference
    for x3, y3 in points[1:]:
        area = abs((x2 - x1) * (y3 - y1) - (x3 - x1) * (y2 - y1))
        if area > tolerance:
            return False
    return True


class PolygonConfiguration:
    """Configurações visuais do polígono"""

    def __init__(self, line_color: ColorRGB = (0.0, 0.5, 1.0),
                 fill_color: ColorRGB = (0.0, 0.5, 1.0),
                 line_thickness: float = 2.0, show_vertices: bool = True):
        self.line_color = _clamp_color(line_color)
        self.fill_color = _clamp_color(fill_color)
        self.line_thickness = float(line_thickness)
        self.show_vertices = bool(show_vertices)

    @classmethod
    def from_config(cls, config: AppConfig) -> "PolygonConfiguration":
        return cls(config.line_color, config.fill_color,
                   config.line_thickness, config.show_vertices)

    def copy(self) -> "PolygonConfiguration":
        return PolygonConfiguration(self.line_color, self.fill_color,
                                    self.line_thickness, self.show_vertices)

    def __eq__(self, other):
        if not isinstance(other, PolygonConfiguration):
            return NotImplemented
        return (self.line_color == other.line_color
                and self.fill_color == other.fill_color
                and self.line_thickness == other.line_thickness
                and self.show_vertices == other.show_vertices)

    def __repr__(self):
        return (f"PolygonConfiguration(line_color={self.line_color}, "
                f"fill_color={self.fill_color}, line_thickness={self.line_thickness}, "
                f"show_vertices={self.show_vertices})")


class SavedPolygon:
    """Polígono salvo: vértices e configuração congelados no momento do save"""

    __slots__ = ("_vertices", "_configuration", "_filled")

    def __init__(self, vertices: Sequence[PointLike],
                 configuration: PolygonConfiguration, filled: bool = False):
        self._vertices = tuple(Point(int(x), int(y)) for x, y in vertices)
        self._configuration = configuration.copy()
        self._filled = bool(filled)

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return self._vertices

    @property
    def configuration(self) -> PolygonConfiguration:
        # cópia para que o polígono salvo continue imutável
        return self._configuration.copy()

    @property
    def filled(self) -> bool:
        return self._filled

    def __repr__(self):
        return f"SavedPolygon({len(self._vertices)} vértices, filled={self._filled})"


class PolygonModel:
    """Gerencia o polígono em edição, sua configuração e os polígonos salvos"""

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config if config is not None else AppConfig()
        self._vertices: List[Point] = []
        self._closed = False
        self._saved: List[SavedPolygon] = []
        self.configuration = PolygonConfiguration.from_config(self.config)
        self.selected_color_index = DEFAULT_PALETTE_INDEX

    # --- vértices ---------------------------------------------------

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """Snapshot somente leitura dos vértices atuais"""
        return tuple(self._vertices)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def can_be_filled(self) -> bool:
        return self._closed and len(self._vertices) >= 3

    def add_vertex(self, point: PointLike):
        x, y = point
        self._vertices.append(Point(int(x), int(y)))
        self._closed = False

    def remove_last_vertex(self) -> Optional[Point]:
        if not self._vertices:
            return None
        self._closed = False
        return self._vertices.pop()

    def close(self) -> bool:
        """Fecha o polígono; só tem efeito com 3 ou mais vértices"""
        if len(self._vertices) >= 3:
            self._closed = True
        return self._closed

    def clear(self):
        self._vertices.clear()
        self._closed = False

    def validate_shape(self):
        """Levanta PolygonError se os vértices não formam uma área"""
        if len(self._vertices) < 3:
            raise TooFewVerticesError(len(self._vertices))
        if are_points_collinear(self._vertices):
            raise CollinearPolygonError()

    def validate_for_fill(self):
        """Levanta PolygonError se o polígono atual não pode ser preenchido"""
        if len(self._vertices) < 3:
            raise TooFewVerticesError(len(self._vertices))
        if not self._closed:
            raise PolygonNotClosedError()
        if are_points_collinear(self._vertices):
            raise CollinearPolygonError()

    # --- polígonos salvos -------------------------------------------

    @property
    def saved_polygons(self) -> Tuple[SavedPolygon, ...]:
        return tuple(self._saved)

    @property
    def saved_count(self) -> int:
        return len(self._saved)

    def save(self, filled: bool = False) -> SavedPolygon:
        """Salva o polígono atual e recomeça a edição"""
        if len(self._vertices) < 3:
            raise TooFewVerticesError(len(self._vertices))
        if not self._closed:
            raise PolygonNotClosedError()
        saved = SavedPolygon(self._vertices, self.configuration, filled)
        self._saved.append(saved)
        logger.info("Polígono salvo (%d vértices, preenchido=%s); total=%d",
                    len(saved.vertices), saved.filled, len(self._saved))
        self.clear()
        return saved

    def clear_saved(self):
        logger.info("Removendo %d polígonos salvos", len(self._saved))
        self._saved.clear()

    # --- configuração visual ----------------------------------------

    def set_line_color(self, r: float, g: float, b: float):
        self.configuration.line_color = _clamp_color((r, g, b))

    def set_fill_color(self, r: float, g: float, b: float):
        self.configuration.fill_color = _clamp_color((r, g, b))

    def set_line_thickness(self, thickness: float):
        self.configuration.line_thickness = min(
            MAX_LINE_THICKNESS, max(MIN_LINE_THICKNESS, float(thickness)))

    def adjust_line_thickness(self, increase: bool):
        delta = 1.0 if increase else -1.0
        self.set_line_thickness(self.configuration.line_thickness + delta)

    def toggle_vertex_visibility(self) -> bool:
        self.configuration.show_vertices = not self.configuration.show_vertices
        return self.configuration.show_vertices

    def apply_preset_fill_color(self, index: int) -> bool:
        color = PRESET_FILL_COLORS.get(index)
        if color is None:
            return False
        self.set_fill_color(*color)
        return True

    def apply_palette_color(self, index: int, target: str = "fill") -> bool:
        """
        Aplica uma cor da paleta de 16 cores

        Args:
            index: Posição na paleta (0-15); fora da faixa é ignorado
            target: "fill", "line" ou "both"
        """
        if not 0 <= index < len(COLOR_PALETTE):
            return False
        if target not in ("fill", "line", "both"):
            raise ValueError(f"alvo de cor desconhecido: {target!r}")
        color = palette_color(index)
        if target in ("fill", "both"):
            self.set_fill_color(*color)
        if target in ("line", "both"):
            self.set_line_color(*color)
        self.selected_color_index = index
        return True
