import pytest

from animkit.rectpack import MAXVAL, Heuristic, Rect, RectPacker


def _assert_no_overlap_and_inside(rects, width, height):
    placed = [r for r in rects if r.was_packed and r.w and r.h]
    for r in placed:
        assert 0 <= r.x and r.x + r.w <= width
        assert 0 <= r.y and r.y + r.h <= height
    for i, a in enumerate(placed):
        for b in placed[i + 1:]:
            disjoint = (
                a.x + a.w <= b.x
                or b.x + b.w <= a.x
                or a.y + a.h <= b.y
                or b.y + b.h <= a.y
            )
            assert disjoint, (a, b)


def test_single_rect_goes_to_origin():
    packer = RectPacker(64, 64, 64)
    rect = Rect(id=1, w=10, h=20)
    assert packer.pack([rect]) is True
    assert (rect.x, rect.y) == (0, 0)
    assert rect.was_packed


def test_rect_too_large_is_not_packed():
    packer = RectPacker(32, 32, 32)
    rect = Rect(id=1, w=40, h=10)
    assert packer.pack([rect]) is False
    assert (rect.x, rect.y) == (MAXVAL, MAXVAL)
    assert rect.was_packed is False


def test_empty_rect_needs_no_space():
    packer = RectPacker(16, 16, 16)
    rects = [Rect(id=0, w=0, h=5), Rect(id=1, w=5, h=0)]
    assert packer.pack(rects) is True
    assert all((r.x, r.y) == (0, 0) and r.was_packed for r in rects)


def test_original_order_is_kept():
    packer = RectPacker(100, 100, 100)
    rects = [Rect(id=i, w=5 + i, h=3 + 2 * i) for i in range(6)]
    packer.pack(rects)
    assert [r.id for r in rects] == list(range(6))


@pytest.mark.parametrize(
    "heuristic", [Heuristic.SKYLINE_BL_SORT_HEIGHT, Heuristic.SKYLINE_BF_SORT_HEIGHT]
)
@pytest.mark.parametrize("allow", [True, False])
def test_packing_has_no_overlaps(heuristic, allow):
    width, height = 128, 128
    packer = RectPacker(width, height, width)
    packer.allow_out_of_mem(allow)
    packer.set_heuristic(heuristic)
    rects = [Rect(id=i, w=(i * 7) % 23 + 3, h=(i * 11) % 19 + 2) for i in range(40)]
    packer.pack(rects)
    _assert_no_overlap_and_inside(rects, width, height)
    assert any(r.was_packed for r in rects)


def test_all_fit_returns_true_and_fills_grid():
    packer = RectPacker(40, 40, 40)
    packer.allow_out_of_mem(True)
    rects = [Rect(id=i, w=10, h=10) for i in range(16)]
    assert packer.pack(rects) is True
    _assert_no_overlap_and_inside(rects, 40, 40)
    assert sorted((r.x, r.y) for r in rects) == sorted(
        (x, y) for x in range(0, 40, 10) for y in range(0, 40, 10)
    )


def test_overflow_reports_failure():
    packer = RectPacker(20, 20, 20)
    packer.allow_out_of_mem(True)
    rects = [Rect(id=i, w=10, h=10) for i in range(5)]
    assert packer.pack(rects) is False
    assert sum(r.was_packed for r in rects) == 4
    _assert_no_overlap_and_inside(rects, 20, 20)


def test_running_out_of_nodes_fails():
    packer = RectPacker(100, 100, 1)
    packer.allow_out_of_mem(True)
    rects = [Rect(id=0, w=10, h=10), Rect(id=1, w=10, h=10)]
    assert packer.pack(rects) is False
    assert sum(r.was_packed for r in rects) == 1


def test_repeated_pack_calls_continue_same_target():
    packer = RectPacker(20, 10, 20)
    packer.allow_out_of_mem(True)
    first = Rect(id=0, w=10, h=10)
    second = Rect(id=1, w=10, h=10)
    assert packer.pack([first]) is True
    assert packer.pack([second]) is True
    _assert_no_overlap_and_inside([first, second], 20, 10)


def test_invalid_heuristic_raises():
    packer = RectPacker(10, 10, 10)
    with pytest.raises(ValueError):
        packer.set_heuristic(7)


def test_invalid_node_count_raises():
    with pytest.raises(ValueError):
        RectPacker(10, 10, 0)


def test_default_heuristic_is_bottom_left():
    packer = RectPacker(10, 10, 10)
    assert packer.heuristic is Heuristic.SKYLINE_BL_SORT_HEIGHT
    assert Heuristic.SKYLINE_DEFAULT is Heuristic.SKYLINE_BL_SORT_HEIGHT