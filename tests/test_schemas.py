import pytest

from fourline_grading.schemas import BBox, FailZone, GradingResult, LetterStatus


def test_failure_to_dict_uses_wire_keys():
    result = GradingResult.failure("Too small!", FailZone.TOO_SMALL)
    assert result.to_dict() == {"pass": False, "reason": "Too small!", "failZone": "tooSmall"}


def test_success_omits_fail_zone():
    assert GradingResult.success("Great!").to_dict() == {"pass": True, "reason": "Great!"}


def test_result_from_dict():
    result = GradingResult.from_dict({"pass": False, "reason": "x", "failZone": "wrongArea"})
    assert result == GradingResult.failure("x", FailZone.WRONG_AREA)

    with pytest.raises(ValueError):
        GradingResult.from_dict({"reason": "x"})
    with pytest.raises(ValueError):
        GradingResult.from_dict({"pass": False, "reason": "x", "failZone": "sideways"})


def test_passing_result_cannot_carry_fail_zone():
    with pytest.raises(ValueError):
        GradingResult(passed=True, reason="ok", fail_zone=FailZone.EMPTY)


def test_fail_zone_string_is_coerced():
    assert GradingResult(passed=False, reason="x", fail_zone="empty").fail_zone is FailZone.EMPTY


def test_letter_status():
    assert GradingResult.success("ok").letter_status is LetterStatus.PASS
    assert GradingResult.failure("no", FailZone.EMPTY).letter_status is LetterStatus.ATTEMPT


def test_bbox_from_edges():
    bbox = BBox.from_edges(10, 20, 60, 90)
    assert bbox == BBox(x=10, y=20, width=50, height=70)
    assert (bbox.x1, bbox.y1, bbox.area) == (60, 90, 3500)
    assert BBox.from_edges(10, 20, 10, 90) is None
    assert BBox.from_edges(10, 20, 60, 5) is None


def test_bbox_pixel_edges_round_outward():
    assert BBox(x=1.5, y=2.2, width=3.0, height=4.0).pixel_edges() == (1, 2, 5, 7)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 5)])
def test_bbox_rejects_empty_extent(width, height):
    with pytest.raises(ValueError):
        BBox(x=0, y=0, width=width, height=height)


def test_bbox_to_dict():
    assert BBox(x=1.0, y=2.0, width=3.0, height=4.0).to_dict() == {
        "x": 1.0, "y": 2.0, "width": 3.0, "height": 4.0,
    }
