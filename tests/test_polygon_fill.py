import pytest

from polyfill.polygon_fill import (
    Edge,
    Point,
    Span,
    build_edge_table,
    fill_polygon,
    scanline_spans,
)

SQUARE = [(10, 10), (50, 10), (50, 50), (10, 50)]
TRIANGLE = [(0, 0), (10, 0), (5, 10)]


def _empty_table(height):
    return [[] for _ in range(height)]


# ---------------------------------------------------------------------------
# Edge Table
# ---------------------------------------------------------------------------

def test_edge_table_has_one_bucket_per_scanline():
    et = build_edge_table(SQUARE, 100)
    assert len(et) == 100


def test_edge_table_skips_horizontal_edges():
    et = build_edge_table(SQUARE, 100)
    edges = [e for bucket in et for e in bucket]
    assert len(edges) == 2
    assert all(e.min_y <= e.max_y for e in edges)
    assert all(e.inv_slope == 0.0 for e in edges)


def test_triangle_valley_vertices_start_one_scanline_later():
    et = build_edge_table(TRIANGLE, 20)
    assert len(et[0]) == 0
    assert len(et[1]) == 2

    first, second = et[1]
    # (10,0)->(5,10) entra primeiro, já avançado uma scanline
    assert first.current_x == pytest.approx(9.5)
    assert first.inv_slope == pytest.approx(-0.5)
    assert second.current_x == pytest.approx(0.5)
    assert second.inv_slope == pytest.approx(0.5)
    assert first.max_y == second.max_y == 10


def test_pass_through_vertex_is_not_shifted():
    # B=(10,5) tem um vizinho acima (A) e outro abaixo (C)
    et = build_edge_table([(0, 0), (10, 5), (0, 10)], 20)
    assert len(et[0]) == 0
    assert len(et[1]) == 2
    assert len(et[5]) == 1
    (edge,) = et[5]
    assert edge.current_x == pytest.approx(10.0)
    assert edge.max_y == 10


def test_edge_table_with_fewer_than_two_vertices_is_empty():
    assert build_edge_table([], 10) == _empty_table(10)
    assert build_edge_table([(3, 3)], 10) == _empty_table(10)


def test_edge_table_negative_height_is_empty():
    assert build_edge_table(SQUARE, -5) == []


def test_edges_starting_above_canvas_are_dropped():
    et = build_edge_table([(10, -10), (50, -10), (50, 50), (10, 50)], 100)
    assert all(not bucket for bucket in et)


def test_edges_starting_below_canvas_are_dropped():
    et = build_edge_table([(10, 200), (50, 200), (50, 250)], 100)
    assert all(not bucket for bucket in et)


# ---------------------------------------------------------------------------
# Scanline
# ---------------------------------------------------------------------------

def test_square_spans():
    spans = fill_polygon(SQUARE, 100, 100)
    # o canto superior é um vale: a primeira linha preenchida é y=11
    assert spans == [Span(y, 10, 50) for y in range(11, 50)]


def test_square_has_no_spans_outside_its_rows():
    ys = {s.y for s in fill_polygon(SQUARE, 100, 100)}
    assert min(ys) == 11
    assert max(ys) == 49


def test_triangle_golden_spans():
    spans = fill_polygon(TRIANGLE, 100, 100)
    assert len(spans) == 9
    assert spans[0] == Span(1, 1, 10)
    assert spans[1] == Span(2, 1, 9)
    assert spans[-1] == Span(9, 5, 6)
    assert sum(s.x2 - s.x1 + 1 for s in spans) == 54


def test_pass_through_polygon_spans():
    spans = fill_polygon([(0, 0), (10, 5), (0, 10)], 100, 100)
    by_y = {s.y: s for s in spans}
    assert by_y[1] == Span(1, 0, 2)
    assert by_y[4] == Span(4, 0, 8)
    assert by_y[5] == Span(5, 0, 10)
    assert by_y[6] == Span(6, 0, 8)
    assert by_y[9] == Span(9, 0, 2)
    assert len(spans) == 9


def test_horizontal_vertex_on_edge_does_not_change_spans():
    with_extra = [(10, 10), (30, 10), (50, 10), (50, 50), (10, 50)]
    assert fill_polygon(with_extra, 100, 100) == fill_polygon(SQUARE, 100, 100)


def test_spans_are_idempotent_for_same_table():
    et = build_edge_table(TRIANGLE, 50)
    first = list(scanline_spans(et, 50, 50))
    second = list(scanline_spans(et, 50, 50))
    assert first == second
    # a tabela não é alterada pelo percurso
    assert [e.current_x for e in et[1]] == [pytest.approx(9.5), pytest.approx(0.5)]


def test_scanline_spans_is_lazy():
    et = build_edge_table(SQUARE, 100)
    gen = scanline_spans(et, 100, 100)
    assert next(gen) == Span(11, 10, 50)


def test_spans_clamped_to_canvas_width():
    spans = fill_polygon([(50, 10), (150, 10), (150, 50), (50, 50)], 100, 100)
    assert spans
    assert all(s.x2 == 99 for s in spans)
    assert all(s.x1 == 50 for s in spans)


def test_spans_clamped_to_zero_on_left():
    spans = fill_polygon([(-20, 10), (30, 10), (30, 50), (-20, 50)], 100, 100)
    assert spans
    assert all(s.x1 == 0 and s.x2 == 30 for s in spans)


def test_polygon_fully_right_of_canvas_has_no_spans():
    assert fill_polygon([(150, 10), (180, 10), (180, 50), (150, 50)], 100, 100) == []


def test_spans_stop_at_canvas_bottom():
    spans = fill_polygon([(10, 10), (50, 10), (50, 500), (10, 500)], 100, 100)
    assert spans[-1].y == 99
    assert all(0 <= s.y < 100 for s in spans)


@pytest.mark.parametrize("width,height", [(0, 100), (100, 0), (-1, 100), (100, -1)])
def test_degenerate_canvas_produces_no_spans(width, height):
    assert fill_polygon(SQUARE, width, height) == []


@pytest.mark.parametrize("vertices", [[], [(1, 1)], [(1, 1), (9, 1)]])
def test_degenerate_polygons_produce_no_spans(vertices):
    assert fill_polygon(vertices, 100, 100) == []


def test_empty_table_produces_no_spans():
    assert list(scanline_spans(_empty_table(10), 10, 10)) == []


def test_half_pixel_positions_round_up():
    et = _empty_table(3)
    et[0] = [Edge(0, 1, 2.5, 0.0), Edge(0, 1, 7.5, 0.0)]
    assert list(scanline_spans(et, 20, 3)) == [Span(0, 3, 8)]


def test_negative_half_pixel_rounds_toward_zero():
    et = _empty_table(3)
    et[0] = [Edge(0, 1, -0.5, 0.0), Edge(0, 1, 4.0, 0.0)]
    assert list(scanline_spans(et, 20, 3)) == [Span(0, 0, 4)]


def test_odd_active_edge_count_emits_single_pixel():
    et = _empty_table(5)
    et[1] = [Edge(1, 3, 2.0, 0.0)]
    assert list(scanline_spans(et, 10, 5)) == [Span(1, 2, 2), Span(2, 2, 2)]


def test_odd_active_edge_out_of_bounds_is_ignored():
    et = _empty_table(5)
    et[1] = [Edge(1, 3, 12.0, 0.0)]
    assert list(scanline_spans(et, 10, 5)) == []


def test_equal_x_keeps_insertion_order():
    et = _empty_table(2)
    et[0] = [Edge(0, 1, 5.0, 0.0), Edge(0, 1, 5.0, 0.0), Edge(0, 1, 9.0, 0.0)]
    assert list(scanline_spans(et, 20, 2)) == [Span(0, 5, 5), Span(0, 9, 9)]


def test_fill_accepts_points_and_tuples():
    points = [Point(x, y) for x, y in TRIANGLE]
    assert fill_polygon(points, 100, 100) == fill_polygon(TRIANGLE, 100, 100)


def test_point_equality_by_components():
    assert Point(3, 4) == (3, 4)
    assert Point(3, 4) != Point(4, 3)


def test_edge_step_advances_by_inverse_slope():
    edge = Edge(0, 4, 1.0, 0.25)
    edge.step()
    edge.step()
    assert edge.current_x == pytest.approx(1.5)
