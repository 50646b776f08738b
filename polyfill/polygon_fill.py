"""
Preenchimento de polígonos por scanline usando Edge Table (ET) e
Active Edge Table (AET)
"""
import logging
import math
from typing import Iterator, List, NamedTuple, Sequence, Tuple, Union

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: int
    y: int


class Span(NamedTuple):
    """Trecho horizontal inclusivo: pixels x1..x2 na linha y"""
    y: int
    x1: int
    x2: int


PointLike = Union[Point, Tuple[int, int]]


class Edge:
    """Aresta ativa do algoritmo de scanline"""

    __slots__ = ("min_y", "max_y", "current_x", "inv_slope")

    def __init__(self, min_y: int, max_y: int, current_x: float, inv_slope: float):
        self.min_y = min_y
        self.max_y = max_y
        self.current_x = float(current_x)
        self.inv_slope = float(inv_slope)

    def step(self):
        self.current_x += self.inv_slope

    def copy(self) -> "Edge":
        return Edge(self.min_y, self.max_y, self.current_x, self.inv_slope)

    def __repr__(self):
        return (f"Edge(min_y={self.min_y}, max_y={self.max_y}, "
                f"current_x={self.current_x!r}, inv_slope={self.inv_slope!r})")


EdgeTable = List[List[Edge]]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def build_edge_table(vertices: Sequence[PointLike], canvas_height: int) -> EdgeTable:
    """
    Constrói a Edge Table indexada pela scanline inicial de cada aresta

    Args:
        vertices: Vértices do polígono em ordem (fechamento implícito)
        canvas_height: Altura do canvas; define o número de posições da ET

    Returns:
        Lista com canvas_height posições, cada uma com as arestas que
        começam naquela scanline
    """
    height = max(0, int(canvas_height))
    edge_table: EdgeTable = [[] for _ in range(height)]
    n = len(vertices)
    if n < 2:
        return edge_table

    for i in range(n):
        x0, y0 = vertices[i]
        x1, y1 = vertices[(i + 1) % n]
        # arestas horizontais não geram interseções
        if y0 == y1:
            continue

        if y0 < y1:
            min_x, min_y, max_y = x0, y0, y1
            # vizinhos do vértice inferior: anterior a i e o próprio p2
            before = vertices[(i - 1) % n]
            after = vertices[(i + 1) % n]
        else:
            min_x, min_y, max_y = x1, y1, y0
            # vizinhos do vértice inferior: p1 e o seguinte a p2
            before = vertices[i]
            after = vertices[(i + 2) % n]

        inv_slope = (x1 - x0) / (y1 - y0)
        current_x = float(min_x)

        before_above = before[1] < min_y
        after_above = after[1] < min_y
        if not before_above and not after_above:
            # Vale: o vértice seria contado pelas duas arestas
            min_y += 1
            current_x += inv_slope

        if 0 <= min_y < height:
            edge_table[min_y].append(Edge(min_y, max_y, current_x, inv_slope))

    logger.debug("edge table: %d arestas em %d scanlines",
                 sum(len(bucket) for bucket in edge_table), height)
    return edge_table


def scanline_spans(edge_table: EdgeTable, canvas_width: int,
                   canvas_height: int) -> Iterator[Span]:
    """
    Percorre a ET gerando os trechos internos de cada scanline

    As arestas são copiadas para a AET, então a mesma ET pode ser
    percorrida novamente com resultado idêntico. A ordenação da AET é
    estável: empates em current_x mantêm a ordem de entrada.
    """
    width = max(0, int(canvas_width))
    height = min(max(0, int(canvas_height)), len(edge_table))

    y = 0
    while y < height and not edge_table[y]:
        y += 1
    if y >= height:
        return

    active: List[Edge] = []
    # arestas que continuam abaixo do canvas não geram mais trechos
    while y < height:
        active.extend(edge.copy() for edge in edge_table[y])
        active.sort(key=lambda e: e.current_x)

        for k in range(0, len(active) - 1, 2):
            x1 = _round_half_up(active[k].current_x)
            x2 = _round_half_up(active[k + 1].current_x)
            if x1 > x2:
                x1, x2 = x2, x1
            if x1 < 0:
                x1 = 0
            if x2 > width - 1:
                x2 = width - 1
            if x1 <= x2:
                yield Span(y, x1, x2)

        if len(active) % 2 == 1:
            x = _round_half_up(active[-1].current_x)
            logger.debug("AET com número ímpar de arestas na scanline %d", y)
            if 0 <= x < width:
                yield Span(y, x, x)

        y += 1
        for edge in active:
            edge.step()
        active = [e for e in active if e.max_y > y]


def fill_polygon(vertices: Sequence[PointLike], canvas_width: int,
                 canvas_height: int) -> List[Span]:
    """Constrói a ET e retorna todos os trechos do polígono"""
    edge_table = build_edge_table(vertices, canvas_height)
    spans = list(scanline_spans(edge_table, canvas_width, canvas_height))
    logger.debug("fill: %d vértices -> %d spans", len(vertices), len(spans))
    return spans
