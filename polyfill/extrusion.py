"""
Extrusão de polígonos 2D em sólidos 3D
"""
import logging
from typing import List, Sequence, Tuple

import numpy as np

from polyfill.errors import TooFewVerticesError
from polyfill.polygon_fill import PointLike

logger = logging.getLogger(__name__)


class Solid:
    """Sólido 3D: vértices (N x 3), arestas e faces por índice"""

    def __init__(self, vertices: np.ndarray, edges: List[Tuple[int, int]],
                 faces: List[List[int]]):
        self.vertices = np.asarray(vertices, dtype=float)
        self.edges = edges
        self.faces = faces

    def face_normals(self) -> np.ndarray:
        """
        Normais unitárias das faces pelo método de Newell

        Funciona para faces planas com qualquer número de vértices;
        faces degeneradas recebem a normal nula.
        """
        normals = np.zeros((len(self.faces), 3), dtype=float)
        for i, face in enumerate(self.faces):
            pts = self.vertices[face]
            nxt = np.roll(pts, -1, axis=0)
            normal = np.array([
                np.sum((pts[:, 1] - nxt[:, 1]) * (pts[:, 2] + nxt[:, 2])),
                np.sum((pts[:, 2] - nxt[:, 2]) * (pts[:, 0] + nxt[:, 0])),
                np.sum((pts[:, 0] - nxt[:, 0]) * (pts[:, 1] + nxt[:, 1])),
            ])
            length = np.linalg.norm(normal)
            if length > 0:
                normals[i] = normal / length
        return normals

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.vertices.min(axis=0), self.vertices.max(axis=0)


def extrude_polygon(vertices: Sequence[PointLike], depth: float = 50.0) -> Solid:
    """
    Extrusão de um polígono 2D ao longo do eixo Z

    Args:
        vertices: Pontos 2D (x, y) em coordenadas de tela
        depth: Profundidade da extrusão

    Returns:
        Solid centralizado na origem, com Y invertido (Y cresce para cima)
        e as faces z = -depth/2 e z = +depth/2
    """
    n = len(vertices)
    if n < 3:
        raise TooFewVerticesError(n)

    pts = np.asarray(vertices, dtype=float).reshape(n, 2)
    center = (pts.min(axis=0) + pts.max(axis=0)) / 2.0
    xy = np.column_stack((pts[:, 0] - center[0], center[1] - pts[:, 1]))

    half = depth / 2.0
    bottom = np.column_stack((xy, np.full(n, -half)))
    top = np.column_stack((xy, np.full(n, half)))
    solid_vertices = np.vstack((bottom, top))

    ring = [(i, (i + 1) % n) for i in range(n)]
    edges = ring + [(n + a, n + b) for a, b in ring] + [(i, n + i) for i in range(n)]

    faces = [list(range(n)), [n + i for i in range(n - 1, -1, -1)]]
    faces += [[i, j, n + j, n + i] for i, j in ring]

    return Solid(solid_vertices, edges, faces)


def extrude_saved_polygons(model, depth: float = 50.0) -> List[Solid]:
    """Extrusão de todos os polígonos salvos com pelo menos 3 vértices"""
    solids = [extrude_polygon(saved.vertices, depth)
              for saved in model.saved_polygons if len(saved.vertices) >= 3]
    logger.debug("extrude_saved_polygons: %d sólidos", len(solids))
    return solids
