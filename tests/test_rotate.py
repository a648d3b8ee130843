import pytest

from pixgrid.buffer import PixelBuffer
from pixgrid.ops import apply_op, rotate, rotate_once


def test_quarter_turn_example(grid_2x3):
    out = rotate(grid_2x3, 90)
    assert out.shape == (3, 2)
    assert out.to_rows() == [[4, 1], [5, 2], [6, 3]]


def test_rotate_once_matches_rotate(grid_2x3):
    assert rotate_once(grid_2x3).to_rows() == [[4, 1], [5, 2], [6, 3]]


def test_half_turn(grid_2x3):
    assert rotate(grid_2x3, 180).to_rows() == [[6, 5, 4], [3, 2, 1]]


@pytest.mark.parametrize("k", range(9))
def test_direct_rotation_equals_iterated_steps(patterned_buffer, k):
    expected = patterned_buffer
    for _ in range(k):
        expected = rotate_once(expected)
    assert rotate(patterned_buffer, 90 * k) == expected


def test_four_quarter_turns_round_trip(patterned_buffer):
    out = patterned_buffer
    for _ in range(4):
        out = rotate(out, 90)
    assert out == patterned_buffer
    assert out.shape == patterned_buffer.shape


@pytest.mark.parametrize("degree", [45, -90, 1, 91, -360])
def test_invalid_degree_is_noop(patterned_buffer, degree):
    before = patterned_buffer.copy()
    out = rotate(patterned_buffer, degree)
    assert out is patterned_buffer
    assert patterned_buffer == before


def test_zero_degree_returns_equal_new_buffer(grid_2x3):
    out = rotate(grid_2x3, 0)
    assert out == grid_2x3
    assert out is not grid_2x3


def test_rotate_does_not_touch_input(grid_2x3):
    rotate(grid_2x3, 270)
    assert grid_2x3.to_rows() == [[1, 2, 3], [4, 5, 6]]


def test_empty_rows_rotate_shape():
    assert rotate(PixelBuffer(0, 3), 90).shape == (3, 0)


def test_apply_op_dispatch(grid_2x3):
    assert apply_op(grid_2x3, "rotate", degree=90) == rotate(grid_2x3, 90)
    with pytest.raises(ValueError):
        apply_op(grid_2x3, "shear")


def test_apply_op_missing_degree(grid_2x3):
    with pytest.raises(ValueError, match="degree"):
        apply_op(grid_2x3, "rotate")
