"""
Configuração da aplicação: dimensões do canvas, cores padrão e paleta
"""
import logging
import os
from typing import Tuple

logger = logging.getLogger(__name__)

ColorRGB = Tuple[float, float, float]

# Paleta de 16 cores (RGB 0-255)
COLOR_PALETTE = (
    (0, 0, 0), (128, 128, 128), (192, 192, 192), (255, 255, 255),
    (128, 0, 0), (255, 0, 0), (255, 128, 0), (255, 255, 0),
    (128, 255, 0), (0, 255, 0), (0, 255, 128), (0, 255, 255),
    (0, 128, 255), (0, 0, 255), (128, 0, 255), (255, 0, 255),
)


def palette_color(index: int) -> ColorRGB:
    """Cor da paleta convertida para RGB 0.0-1.0"""
    r, g, b = COLOR_PALETTE[index]
    return (r / 255.0, g / 255.0, b / 255.0)


class AppConfig:
    """Configuração explícita passada para o modelo e para os widgets.

    Attributes:
        window_width (int): Largura da janela (default: 1000)
        window_height (int): Altura da janela (default: 700)
        right_panel_width (int): Largura do painel lateral (default: 200)
        line_color (ColorRGB): Cor padrão das arestas, 0.0 a 1.0
        fill_color (ColorRGB): Cor padrão de preenchimento, 0.0 a 1.0
        line_thickness (float): Espessura padrão das arestas (default: 2.0)
        show_vertices (bool): Desenhar os vértices (default: True)
        extrusion_depth (float): Profundidade da extrusão 3D (default: 50.0)
        log_level (str): Nível do logging (default: "WARNING")

    Example:
        >>> cfg = AppConfig()
        >>> cfg.drawing_area_width, cfg.drawing_area_height
        (800, 700)
    """

    def __init__(
        self,
        window_width: int = 1000,
        window_height: int = 700,
        right_panel_width: int = 200,
        line_color: ColorRGB = (0.0, 0.5, 1.0),
        fill_color: ColorRGB = (0.0, 0.5, 1.0),
        line_thickness: float = 2.0,
        show_vertices: bool = True,
        extrusion_depth: float = 50.0,
        log_level: str = "WARNING",
    ):
        self.window_width = max(0, int(window_width))
        self.window_height = max(0, int(window_height))
        self.right_panel_width = max(0, int(right_panel_width))
        self.line_color = tuple(line_color)
        self.fill_color = tuple(fill_color)
        self.line_thickness = float(line_thickness)
        self.show_vertices = bool(show_vertices)
        self.extrusion_depth = float(extrusion_depth)
        self.log_level = str(log_level).upper()

    @property
    def drawing_area_width(self) -> int:
        return max(0, self.window_width - self.right_panel_width)

    @property
    def drawing_area_height(self) -> int:
        return self.window_height

    @classmethod
    def from_env(cls, environ=None) -> "AppConfig":
        """Lê POLYFILL_WIDTH, POLYFILL_HEIGHT e POLYFILL_LOG_LEVEL"""
        environ = os.environ if environ is None else environ
        kwargs = {}
        for key, name in (("POLYFILL_WIDTH", "window_width"),
                          ("POLYFILL_HEIGHT", "window_height")):
            raw = environ.get(key, "").strip()
            if not raw:
                continue
            try:
                kwargs[name] = int(raw)
            except ValueError:
                logger.warning("Ignorando %s inválido: %r", key, raw)
        level = environ.get("POLYFILL_LOG_LEVEL", "").strip()
        if level:
            kwargs["log_level"] = level
        return cls(**kwargs)

    def __repr__(self):
        return (f"AppConfig(window={self.window_width}x{self.window_height}, "
                f"drawing_area={self.drawing_area_width}x{self.drawing_area_height}, "
                f"log_level={self.log_level!r})")
