import pytest

from delver.util.coordinates import Rect, Room


def test_rect_corners_from_size():
    r = Rect(2, 3, 6, 4)
    assert (r.x1, r.y1, r.x2, r.y2) == (2, 3, 8, 7)
    assert (r.width, r.height) == (6, 4)
    assert Rect.from_bounds(2, 3, 8, 7) == r


def test_rect_rejects_empty_size():
    with pytest.raises(ValueError):
        Rect(0, 0, 0, 5)
    with pytest.raises(ValueError):
        Rect(0, 0, 5, -1)


def test_center_truncates_toward_first_corner():
    assert Rect(0, 0, 6, 6).center() == (3, 3)
    assert Rect(0, 0, 7, 5).center() == (3, 2)
    assert Rect(10, 20, 9, 9).center() == (14, 24)


def test_spaces_skip_first_row_and_column_but_include_far_edge():
    r = Rect(1, 1, 2, 2)
    assert r.spaces() == [(2, 2), (3, 2), (2, 3), (3, 3)]


def test_spaces_are_row_major_and_restartable():
    r = Rect(0, 0, 3, 2)
    first = r.spaces()
    assert first == [(1, 1), (2, 1), (3, 1), (1, 2), (2, 2), (3, 2)]
    assert r.spaces() == first
    assert len(first) == r.width * r.height


def test_intersect_is_true_only_for_disjoint_rooms():
    a = Rect(0, 0, 5, 5)
    far = Rect(20, 20, 5, 5)
    touching = Rect(4, 4, 5, 5)  # shares cell (5, 5)

    assert a.intersect(far)
    assert far.intersect(a)
    assert not a.intersect(touching)
    assert not touching.intersect(a)
    assert not a.intersect(a)


def test_overlaps_is_the_plain_reading():
    a = Rect(0, 0, 5, 5)
    assert a.overlaps(Rect(4, 4, 5, 5))
    assert not a.overlaps(Rect(5, 0, 5, 5))  # only the wall column x=5 touches


def test_room_is_abstract():
    with pytest.raises(TypeError):
        Room()  # type: ignore[abstract]


def test_custom_room_shape_works_with_intersect():
    class Dot(Room):
        def __init__(self, x: int, y: int) -> None:
            self.x, self.y = x, y

        def center(self) -> tuple[int, int]:
            return (self.x, self.y)

        def spaces(self) -> list[tuple[int, int]]:
            return [(self.x, self.y)]

    room = Rect(0, 0, 3, 3)
    assert not Dot(2, 2).intersect(room)
    assert Dot(9, 9).intersect(room)
    assert room.overlaps(Dot(1, 1))
