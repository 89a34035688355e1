import numpy as np
import pytest

from fourline_grading import LETTER_CATALOG, RasterRenderer, StrokeSet, get_letter_spec
from fourline_grading.rendering.raster import INK, PAPER, Raster, blank_canvas, smooth_stroke
from fourline_grading.schemas import BBox
from fourline_grading.shape import ShapeComparator, compare_shapes, downsample
from fourline_grading.shape.comparator import MAX_SCORE, score_rasters
from fourline_grading.zones.rules import rules_for


def test_identical_grids_score_zero():
    grid = np.random.default_rng(7).integers(0, 256, size=(20, 20), dtype=np.uint8)
    assert compare_shapes(grid, grid.copy()) == 0.0


def test_opposite_grids_score_one():
    black = np.zeros((20, 20), dtype=np.uint8)
    white = np.full((20, 20), 255, dtype=np.uint8)
    assert compare_shapes(black, white) == pytest.approx(1.0)


def test_score_is_bounded():
    rng = np.random.default_rng(3)
    for _ in range(5):
        a = rng.integers(0, 256, size=(20, 20), dtype=np.uint8)
        b = rng.integers(0, 256, size=(20, 20), dtype=np.uint8)
        assert 0.0 <= compare_shapes(a, b) <= 1.0


def test_grid_shape_mismatch_raises():
    with pytest.raises(ValueError):
        compare_shapes(np.zeros((20, 20), np.uint8), np.zeros((10, 10), np.uint8))


def test_downsample_stretches_box_to_grid():
    buffer = np.full((100, 100), PAPER, dtype=np.uint8)
    buffer[20:60, 30:50] = INK
    grid = downsample(buffer, BBox(x=30, y=20, width=20, height=40), grid_size=20)

    assert grid.shape == (20, 20)
    assert grid.dtype == np.uint8
    assert grid.max() == INK


def test_downsample_pads_outside_buffer_with_paper():
    buffer = np.zeros((10, 10), dtype=np.uint8)
    grid = downsample(buffer, BBox(x=0, y=0, width=20, height=20), grid_size=20)

    assert grid[0, 0] == INK
    assert grid[15, 15] == PAPER
    assert grid[5, 15] == PAPER


def test_smooth_stroke_keeps_endpoints():
    points = np.array([[0, 0], [10, 0], [10, 10], [20, 10]], dtype=float)
    path = smooth_stroke(points, samples=4)

    np.testing.assert_allclose(path[0], points[0])
    np.testing.assert_allclose(path[-1], points[-1])
    assert len(path) == 1 + 3 * 4 + 1


def test_smooth_stroke_single_point():
    path = smooth_stroke(np.array([[5.0, 6.0]]))
    np.testing.assert_allclose(path, [[5.0, 6.0]])


def test_reference_raster_is_centered_on_canvas(config):
    reference = RasterRenderer(config).render_reference(get_letter_spec("A"))

    assert reference.buffer.shape == (400, 400)
    assert reference.buffer.dtype == np.uint8
    assert not reference.is_degenerate
    center_x = reference.bbox.x + reference.bbox.width / 2
    assert abs(center_x - 200) < 20


def test_lowercase_reference_sits_on_baseline(config):
    reference = RasterRenderer(config).render_reference(get_letter_spec("o"))
    assert abs(reference.bbox.y1 - 242) < 15


def test_capital_reference_is_taller_than_lowercase(config):
    renderer = RasterRenderer(config)
    capital = renderer.render_reference(get_letter_spec("O")).bbox
    lowercase = renderer.render_reference(get_letter_spec("o")).bbox
    assert capital.height > lowercase.height


def test_user_bbox_is_padded_and_clamped(config):
    renderer = RasterRenderer(config)

    bbox = renderer.stroke_bbox(StrokeSet(strokes=(((100, 100), (200, 150)),)))
    assert (bbox.x, bbox.y, bbox.x1, bbox.y1) == (90, 90, 210, 160)

    clamped = renderer.stroke_bbox(StrokeSet(strokes=(((5, 20), (60, 395)),)))
    assert (clamped.x, clamped.y1) == (0, 400)


def test_user_raster_draws_ink(config, make_line):
    user = RasterRenderer(config).render_user(make_line((100, 100), (300, 300)))
    assert user.buffer[200, 200] < 128
    assert user.buffer[20, 380] == PAPER


def test_tap_renders_as_dot(config):
    user = RasterRenderer(config).render_user(StrokeSet(strokes=(((200, 200),),)))
    assert user.buffer[200, 200] == INK
    assert user.buffer[200, 230] == PAPER


def test_blank_user_raster_has_no_ink_bbox(config):
    renderer = RasterRenderer(config)
    assert renderer.ink_bbox(blank_canvas(config.canvas_wh)) is None


def test_too_few_points_score_max(config):
    comparator = ShapeComparator(RasterRenderer(config))
    strokes = StrokeSet(strokes=(((100, 100), (120, 120), (140, 140), (160, 160)),))
    measurement = comparator.measure(get_letter_spec("o"), strokes)
    assert measurement.degenerate
    assert measurement.score == MAX_SCORE


def test_degenerate_user_bbox_scores_max(config):
    comparator = ShapeComparator(RasterRenderer(config))
    strokes = StrokeSet(strokes=(tuple((-50.0, 200.0 + i) for i in range(5)),))
    measurement = comparator.measure(get_letter_spec("o"), strokes)
    assert measurement.degenerate
    assert measurement.user_bbox is None
    assert measurement.score == MAX_SCORE


def test_score_rasters_with_missing_bbox():
    buffer = blank_canvas((400, 400))
    reference = Raster(buffer=buffer, bbox=None)
    user = Raster(buffer=buffer, bbox=BBox(x=10, y=10, width=50, height=50))
    assert score_rasters(reference, user, 20).score == MAX_SCORE


def test_reference_against_itself_scores_zero(config):
    reference = RasterRenderer(config).render_reference(get_letter_spec("g"))
    assert score_rasters(reference, reference, 20).score == 0.0


def test_diagonal_line_differs_from_o(config, make_line):
    comparator = ShapeComparator(RasterRenderer(config))
    score = comparator.score(get_letter_spec("o"), make_line((170, 165), (230, 238)))
    assert score > 0.32


@pytest.mark.parametrize("letter", sorted(LETTER_CATALOG))
def test_reference_is_wide_enough_for_size_gate(config, letter):
    spec = get_letter_spec(letter)
    bbox = RasterRenderer(config).render_reference(spec).bbox
    assert bbox.width / config.canvas_width >= rules_for(spec).size_gate.min_width


def test_capital_i_reference_has_bars(config):
    reference = RasterRenderer(config).render_reference(get_letter_spec("I"))
    top_row = reference.buffer[int(reference.bbox.y) + 3]
    middle_row = reference.buffer[int(reference.bbox.y + reference.bbox.height / 2)]
    assert np.count_nonzero(top_row < 128) > 3 * np.count_nonzero(middle_row < 128)
    assert abs(reference.bbox.y1 - 242) < 15
