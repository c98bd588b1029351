import pytest

from numlab.matrix import Matrix2d


def test_fill_sets_every_cell():
    m = Matrix2d(3, 4)
    m.fill(7)
    assert all(m[r, c] == 7 for r in range(3) for c in range(4))


def test_set_then_get_round_trip():
    m = Matrix2d(2, 3)
    m[1, 2] = 9
    m[0, 0] = 4
    assert m[1, 2] == 9
    assert m[0, 0] == 4
    assert m[0, 1] == 0


def test_cells_are_independent():
    m = Matrix2d(2, 2)
    m[0, 1] = 5
    assert m[1, 0] == 0


@pytest.mark.parametrize("key", [(2, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_bounds_raises(key):
    m = Matrix2d(2, 3)
    m.fill(3)
    with pytest.raises(IndexError):
        m[key]
    with pytest.raises(IndexError):
        m[key] = 1
    assert [m[r, c] for r in range(2) for c in range(3)] == [3] * 6
    assert m.format() == "3 3 3\n3 3 3"


def test_format_rows():
    m = Matrix2d(2, 2)
    m[0, 0], m[0, 1], m[1, 0], m[1, 1] = 1, 2, 3, 4
    assert m.format() == "1 2\n3 4"
    assert str(m) == m.format()


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Matrix2d(-1, 2)