"""
Zone check tests on a 400x400 canvas.

Pixel landmarks: L1=74, L2=158, L3=242, L4=326.
"""

import numpy as np
import pytest

from fourline_grading import FailZone, StrokeSet, ZoneClassifier, classify, get_letter_spec
from fourline_grading.geometry import NotebookGuides
from fourline_grading.zones.rules import EMPTY_REASON, TOO_LOW_REASON, TOO_SMALL_REASON

W = H = 400


def run(letter, strokes):
    return classify(get_letter_spec(letter), strokes.point_cloud(), W, H)


def test_sparse_input_is_empty(make_grid):
    strokes = make_grid(150, 250, 80, 220, rows=2, cols=7)  # 14 points
    result = run("A", strokes)
    assert not result.passed
    assert result.fail_zone is FailZone.EMPTY
    assert result.reason == EMPTY_REASON


def test_no_strokes_is_empty():
    result = run("a", StrokeSet())
    assert result.fail_zone is FailZone.EMPTY


def test_fifteen_points_is_not_empty(make_grid):
    result = run("A", make_grid(150, 250, 80, 220, rows=3, cols=5))
    assert result.fail_zone is not FailZone.EMPTY


def test_capital_in_top_rows_passes(make_grid):
    result = run("A", make_grid(150, 250, 80, 220))
    assert result.passed
    assert result.fail_zone is None


def test_capital_in_bottom_rows_is_wrong_area(make_grid):
    # Starts below L2+0.06, which is checked before the spill rule
    result = run("A", make_grid(150, 250, 300, 380))
    assert not result.passed
    assert result.fail_zone is FailZone.WRONG_AREA


def test_capital_spilling_below_baseline_is_too_low(make_grid):
    result = run("A", make_grid(150, 250, 120, 380))
    assert not result.passed
    assert result.fail_zone is FailZone.TOO_LOW


def test_capital_above_x_height_is_wrong_area(make_grid):
    result = run("B", make_grid(150, 250, 10, 140))
    assert result.fail_zone is FailZone.WRONG_AREA


def test_narrow_capital_is_too_small(make_grid):
    result = run("A", make_grid(150, 200, 80, 220))
    assert result.fail_zone is FailZone.TOO_SMALL
    assert result.reason == TOO_SMALL_REASON


def _occupancy_strokes(outside):
    top = [(float(x), 30.0) for x in np.linspace(150, 250, outside)]
    body_count = 20 - outside
    body = [
        (float(x), float(y))
        for x, y in zip(np.linspace(150, 250, body_count), np.linspace(100, 220, body_count))
    ]
    return StrokeSet(strokes=(tuple(top), tuple(body)))


@pytest.mark.parametrize("outside, passed", [(4, True), (6, False)])
def test_capital_occupancy_threshold(outside, passed):
    result = run("A", _occupancy_strokes(outside))
    assert result.passed is passed
    if not passed:
        assert result.fail_zone is FailZone.WRONG_AREA


@pytest.mark.parametrize("letter, y0, y1, fail_zone", [
    # ascenders
    ("b", 80, 240, None),
    ("h", 200, 240, FailZone.WRONG_AREA),
    ("l", 100, 370, FailZone.TOO_LOW),
    # dot ascenders
    ("i", 150, 240, None),
    ("i", 250, 330, FailZone.WRONG_AREA),
    ("j", 140, 360, FailZone.TOO_LOW),
    # descenders
    ("p", 160, 300, None),
    ("y", 60, 300, FailZone.WRONG_AREA),
    ("q", 240, 320, FailZone.WRONG_AREA),
    ("g", 100, 200, FailZone.WRONG_AREA),
    # default
    ("a", 165, 240, None),
    ("e", 100, 240, FailZone.WRONG_AREA),
    ("n", 200, 222, FailZone.TOO_SMALL),
])
def test_lowercase_categories(make_grid, letter, y0, y1, fail_zone):
    result = run(letter, make_grid(180, 230, y0, y1))
    assert result.passed is (fail_zone is None)
    assert result.fail_zone is fail_zone


def test_thin_letter_uses_lower_height_floor(make_grid):
    # 16px tall: under the 0.05 floor but over the 0.03 one for 'i'
    strokes = make_grid(190, 220, 210, 226)
    assert run("i", strokes).fail_zone is not FailZone.TOO_SMALL
    assert run("o", strokes).fail_zone is FailZone.TOO_SMALL


def test_too_low_reason_for_ascender(make_grid):
    result = run("l", make_grid(180, 230, 100, 370))
    assert result.reason == TOO_LOW_REASON


def test_classification_is_idempotent(make_grid):
    cloud = make_grid(150, 250, 120, 380).point_cloud()
    spec = get_letter_spec("A")
    classifier = ZoneClassifier()
    first = classifier.classify(spec, cloud, W, H)
    second = classifier.classify(spec, cloud, W, H)
    assert first == second


def test_custom_guides_shift_the_bands(make_grid):
    strokes = make_grid(150, 250, 80, 220)
    lowered = NotebookGuides(l1=0.5, l2=0.6, l3=0.7, l4=0.9)
    result = classify(get_letter_spec("A"), strokes.point_cloud(), W, H, guides=lowered)
    assert result.fail_zone is FailZone.WRONG_AREA


def test_classifier_rejects_bad_min_points():
    with pytest.raises(ValueError):
        ZoneClassifier(min_points=0)
