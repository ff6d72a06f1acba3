import pytest

from questgrid.geometry import Point2d, SearchConclusion


def test_distance_three_four_five():
    assert Point2d(0, 0).distance(3, 4) == pytest.approx(5.0)


def test_distance_to_self_is_zero():
    p = Point2d(7, 2)
    assert p.distance(7, 2) == 0.0


@pytest.mark.parametrize("a,b", [((1, 2), (5, 9)), ((0, 0), (10, 0)), ((4, 4), (1, 1))])
def test_distance_is_symmetric(a, b):
    assert Point2d(*a).distance(*b) == pytest.approx(Point2d(*b).distance(*a))


def test_distance_accepts_negative_coordinates():
    assert Point2d(0, 0).distance(-3, -4) == pytest.approx(Point2d(0, 0).distance(3, 4))


def test_point_is_mutable():
    p = Point2d(1, 1)
    p.x = 4
    p.y = 6
    assert (p.x, p.y) == (4, 6)
    assert p == Point2d(4, 6)


def test_point_str():
    assert str(Point2d(2, 3)) == "(Point2d:)(2,3)"


def test_search_conclusion_fields_and_str():
    found = SearchConclusion(Point2d(4, 1), "E")
    assert found.symbol == "E"
    assert found.point == Point2d(4, 1)
    assert str(found) == "(SearchConclusion:)(Point2d:)(4,1)"


def test_search_conclusion_str_tracks_coordinates():
    found = SearchConclusion(Point2d(9, 8), "I")
    assert str(found).endswith(f"({found.point.x},{found.point.y})")