import pytest

from terrainkit.triangle import Triangle


def test_vertex_returns_corners_in_order():
    t = Triangle(4, 9, 2)
    assert [t.vertex(i) for i in range(3)] == [4, 9, 2]


def test_iteration_matches_vertices():
    t = Triangle(7, 1, 5)
    assert tuple(t) == (7, 1, 5)


def test_copy_is_equal():
    t = Triangle(3, 6, 8)
    assert Triangle(*t) == t


@pytest.mark.parametrize("bad", [-1, 3])
def test_vertex_out_of_range(bad):
    with pytest.raises(IndexError):
        Triangle(0, 1, 2).vertex(bad)


def test_triangle_is_immutable():
    t = Triangle(0, 1, 2)
    with pytest.raises(AttributeError):
        t.v0 = 5
    assert [t.vertex(i) for i in range(3)] == [0, 1, 2]