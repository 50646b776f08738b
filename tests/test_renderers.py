import numpy as np
import pytest

from polyfill.polygon_fill import Span, fill_polygon
from polyfill.polygon_model import PolygonModel
from polyfill.renderers import (
    MaskRenderer,
    SpanConsumer,
    render_saved_polygons,
    span_pixel_count,
)


class RecordingConsumer(SpanConsumer):
    def __init__(self):
        self.fills = []
        self.outlines = []

    def draw_spans(self, spans, color):
        self.fills.append((list(spans), color))

    def draw_polygon_outline(self, vertices, color, thickness):
        self.outlines.append((tuple(vertices), color, thickness))


def _saved_model(filled_flags):
    model = PolygonModel()
    for i, filled in enumerate(filled_flags):
        offset = 20 * i
        for p in [(offset, 0), (offset + 10, 0), (offset + 5, 10)]:
            model.add_vertex(p)
        model.close()
        model.save(filled=filled)
    return model


def test_span_consumer_is_abstract():
    with pytest.raises(TypeError):
        SpanConsumer()


def test_mask_renderer_draws_inclusive_spans():
    renderer = MaskRenderer(10, 5)
    renderer.draw_spans([Span(2, 3, 6)], (1.0, 0.0, 0.0))
    assert renderer.coverage() == 4
    assert renderer.mask[2, 3:7].all()
    assert not renderer.mask[2, 7]
    assert tuple(renderer.image[2, 3]) == (255, 0, 0)
    assert tuple(renderer.image[2, 2]) == (0, 0, 0)


def test_mask_renderer_ignores_out_of_bounds_spans():
    renderer = MaskRenderer(10, 5)
    renderer.draw_spans([Span(-1, 0, 3), Span(5, 0, 3), Span(1, 8, 20)], (0.0, 1.0, 0.0))
    assert renderer.coverage() == 2
    assert renderer.mask[1, 8:10].all()


def test_mask_renderer_clear():
    renderer = MaskRenderer(4, 4)
    renderer.draw_spans([Span(0, 0, 3)], (1.0, 1.0, 1.0))
    renderer.clear(background=(0.0, 0.0, 1.0))
    assert renderer.coverage() == 0
    assert np.all(renderer.image[:, :, 2] == 255)


@pytest.mark.parametrize("vertices,expected", [
    # quadrado: linhas 11..49, 41 pixels cada
    ([(10, 10), (50, 10), (50, 50), (10, 50)], 39 * 41),
    # triângulo: nove spans, de (1, 1, 10) até (9, 5, 6)
    ([(0, 0), (10, 0), (5, 10)], 54),
    # entalhe: linhas 11..20 com 61 px, linhas 21..49 com 102 - 2y
    ([(10, 10), (70, 10), (70, 50), (40, 20), (10, 50)], 610 + 928),
    # hexágono: linhas 11..29 com 2y + 1, linhas 30..49 com 121 - 2y
    ([(20, 10), (40, 10), (60, 30), (40, 50), (20, 50), (0, 30)], 779 + 840),
])
def test_fill_area_matches_known_pixel_total(vertices, expected):
    spans = fill_polygon(vertices, 100, 100)
    assert span_pixel_count(spans) == expected

    renderer = MaskRenderer(100, 100)
    renderer.draw_spans(spans, (1.0, 1.0, 1.0))
    assert renderer.coverage() == expected


def test_concave_polygon_has_two_spans_on_notch_rows():
    # entalhe em V no lado de baixo: (60,60)->(35,30)->(10,60)
    spans = fill_polygon([(10, 10), (60, 10), (60, 60), (35, 30), (10, 60)], 100, 100)
    rows = {}
    for s in spans:
        rows.setdefault(s.y, []).append(s)
    assert len(rows[20]) == 1
    assert len(rows[50]) == 2
    left, right = rows[50]
    assert left.x2 < right.x1


def test_render_saved_polygons_fills_only_filled():
    model = _saved_model([True, False])
    consumer = RecordingConsumer()
    total = render_saved_polygons(model, consumer, 100, 100)

    assert len(consumer.fills) == 1
    spans, color = consumer.fills[0]
    assert total == len(spans) == 9
    assert color == model.saved_polygons[0].configuration.fill_color
    assert len(consumer.outlines) == 2


def test_render_saved_polygons_on_mask():
    model = _saved_model([True, True])
    renderer = MaskRenderer(100, 100)
    render_saved_polygons(model, renderer, 100, 100)
    assert renderer.coverage() == 2 * 54
