import threading

import pytest

from pixgrid.buffer import PixelBuffer
from pixgrid.color import Color
from pixgrid.session import EditSession


def test_operations_require_an_image():
    session = EditSession()
    assert session.image is None
    with pytest.raises(RuntimeError):
        session.rotate(90)


def test_rotate_replaces_current_image(grid_2x3):
    session = EditSession(grid_2x3)
    session.rotate(90)
    assert session.image.to_rows() == [[4, 1], [5, 2], [6, 3]]


def test_invalid_operations_keep_image(grid_2x3):
    session = EditSession(grid_2x3)
    session.rotate(45)
    session.down_sample(3, 1)
    assert session.patch(0, 0, PixelBuffer(3, 3), (0, 0, 0)) == 0
    assert session.image is grid_2x3


def test_patch_mutates_current_image():
    session = EditSession(PixelBuffer(2, 2))
    src = PixelBuffer.from_rows([[Color(9, 9, 9)]])
    assert session.patch(1, 1, src, (0, 0, 0)) == 1
    assert session.image.get(1, 1) == Color(9, 9, 9)


def test_load_save_round_trip(tmp_path, patterned_png):
    path, expected = patterned_png
    session = EditSession()
    session.load(path)
    session.down_sample(7, 5)
    assert session.image.shape == (1, 1)
    out = tmp_path / "small.png"
    session.save(out)
    reloaded = EditSession()
    reloaded.load(out)
    assert reloaded.image == session.image


def test_dump_matches_print(capsys):
    session = EditSession(PixelBuffer.from_rows([[Color(1, 2, 3)]]))
    session.print_image()
    assert capsys.readouterr().out == session.dump() == "(  1,   2,   3) \n"


def test_concurrent_rotations_are_serialized(patterned_buffer):
    session = EditSession(patterned_buffer)
    threads = [threading.Thread(target=session.rotate, args=(90,)) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert session.image == patterned_buffer
