"""
Consumidores de spans: interface comum e rasterizador em buffer numpy
"""
from abc import ABC, abstractmethod
import logging
from typing import Iterable, Optional

import numpy as np

from polyfill.config import ColorRGB
from polyfill.polygon_fill import Span, fill_polygon

logger = logging.getLogger(__name__)


class SpanConsumer(ABC):
    """Interface para quem desenha os trechos gerados pelo scanline."""

    @abstractmethod
    def draw_spans(self, spans: Iterable[Span], color: ColorRGB):
        """
        Desenha os trechos na cor indicada.

        Args:
            spans: Trechos (y, x1, x2) inclusivos
            color: Cor RGB com componentes de 0.0 a 1.0
        """

    def draw_polygon_outline(self, vertices, color: ColorRGB, thickness: float):
        """Contorno opcional; consumidores que não desenham linhas ignoram."""


class MaskRenderer(SpanConsumer):
    """Rasteriza spans em um buffer RGB numpy (height x width x 3, uint8)"""

    def __init__(self, width: int, height: int,
                 background: ColorRGB = (0.0, 0.0, 0.0)):
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self.image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        # pixels cobertos por pelo menos um span
        self.mask = np.zeros((self.height, self.width), dtype=bool)
        self.background = background
        self.clear()

    @staticmethod
    def _to_rgb8(color: ColorRGB) -> np.ndarray:
        rgb = np.clip(np.asarray(color, dtype=np.float32), 0.0, 1.0)
        return np.round(rgb * 255.0).astype(np.uint8)

    def clear(self, background: Optional[ColorRGB] = None):
        if background is not None:
            self.background = background
        self.image[:, :] = self._to_rgb8(self.background)
        self.mask.fill(False)

    def draw_spans(self, spans: Iterable[Span], color: ColorRGB):
        rgb = self._to_rgb8(color)
        for y, x1, x2 in spans:
            if not 0 <= y < self.height:
                continue
            lo = max(0, x1)
            hi = min(self.width - 1, x2)
            if lo > hi:
                continue
            self.image[y, lo:hi + 1] = rgb
            self.mask[y, lo:hi + 1] = True

    def coverage(self) -> int:
        """Número de pixels preenchidos"""
        return int(self.mask.sum())


def span_pixel_count(spans: Iterable[Span]) -> int:
    """Soma dos comprimentos inclusivos dos trechos"""
    return sum(x2 - x1 + 1 for _, x1, x2 in spans)


def render_saved_polygons(model, consumer: SpanConsumer, width: int, height: int) -> int:
    """
    Desenha todos os polígonos salvos do modelo no consumidor.

    Polígonos marcados como preenchidos são rasterizados com a própria
    cor de preenchimento; o contorno é repassado ao consumidor.

    Returns:
        Número de spans enviados ao consumidor
    """
    total = 0
    for saved in model.saved_polygons:
        config = saved.configuration
        if saved.filled:
            spans = fill_polygon(saved.vertices, width, height)
            consumer.draw_spans(spans, config.fill_color)
            total += len(spans)
        consumer.draw_polygon_outline(saved.vertices, config.line_color,
                                      config.line_thickness)
    logger.debug("render_saved_polygons: %d polígonos, %d spans",
                 model.saved_count, total)
    return total
