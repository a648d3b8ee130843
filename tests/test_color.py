import numpy as np

from pixgrid.color import (
    Color,
    clamp_channel,
    pack,
    pack_array,
    unpack,
    unpack_array,
    unpack_blue,
    unpack_green,
    unpack_red,
)


def test_pack_layout():
    assert pack(0x12, 0x34, 0x56) == 0x123456
    assert pack(255, 0, 0) == 0xFF0000
    assert pack(0, 255, 0) == 0x00FF00
    assert pack(0, 0, 255) == 0x0000FF


def test_round_trip_all_channel_values():
    for v in range(256):
        for red, green, blue in ((v, 0, 0), (0, v, 0), (0, 0, v), (v, 255 - v, v // 2)):
            word = pack(red, green, blue)
            assert (unpack_red(word), unpack_green(word), unpack_blue(word)) == (red, green, blue)


def test_unpack_ignores_high_bits():
    word = 0xAB000000 | pack(10, 20, 30)
    assert unpack(word) == Color(10, 20, 30)


def test_color_helpers():
    c = Color(1, 2, 3)
    assert c.packed() == 0x010203
    assert Color.from_word(0x010203) == c
    assert c == (1, 2, 3)


def test_clamp_channel():
    assert clamp_channel(-5) == 0
    assert clamp_channel(300) == 255
    assert clamp_channel(128) == 128


def test_array_codec_matches_scalar_codec():
    rgb = np.array([[[1, 2, 3], [255, 0, 128]]], dtype=np.uint8)
    words = pack_array(rgb)
    assert words.dtype == np.uint32
    assert words.tolist() == [[pack(1, 2, 3), pack(255, 0, 128)]]
    assert np.array_equal(unpack_array(words), rgb)


def test_pack_accepts_numpy_channel_scalars():
    r, g, b = np.array([200, 100, 50], dtype=np.uint8)
    assert pack(r, g, b) == pack(200, 100, 50)
    assert Color(r, g, b).packed() == 0xC86432
