import numpy as np

from fourline_grading import FailZone, GradingResult, NotebookVisualizer, RasterRenderer, get_letter_spec


def test_attempt_overlay_frame(config, make_grid):
    visualizer = NotebookVisualizer(RasterRenderer(config))
    result = GradingResult.failure("Too low", FailZone.TOO_LOW)

    frame = visualizer.draw_attempt(get_letter_spec("A"), make_grid(150, 250, 120, 380), result)

    assert frame.shape == (400, 400, 3)
    assert frame.dtype == np.uint8
    assert frame.min() < 255


def test_guides_are_drawn_at_shared_positions(config):
    visualizer = NotebookVisualizer(RasterRenderer(config))
    frame = visualizer.draw_guides(visualizer.blank_frame())

    # L3 baseline is red (BGR)
    b, g, r = frame[242, 200]
    assert r > 200 and g < 100 and b < 100
    # L1 solid line is grey
    assert frame[74, 5].tolist() == list(visualizer.guide_color.as_bgr())
    # Rows between guides stay white
    assert frame[120, 200].tolist() == [255, 255, 255]


def test_l2_is_dashed(config):
    visualizer = NotebookVisualizer(RasterRenderer(config))
    frame = visualizer.draw_guides(visualizer.blank_frame())
    row = frame[158]
    assert (row == 255).all(axis=1).any()
    assert (row != 255).any(axis=1).any()


def test_overlay_without_result_has_no_verdict(config, make_grid):
    visualizer = NotebookVisualizer(RasterRenderer(config))
    frame = visualizer.draw_attempt(
        get_letter_spec("a"), make_grid(180, 230, 165, 240), show_guide=False, show_bbox=False
    )
    assert frame[390, 200].tolist() == [255, 255, 255]
