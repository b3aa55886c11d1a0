import pytest

from lazaretto.canvas import Canvas, pack_rgba


def test_pack_opaque_black():
    assert pack_rgba(0, 0, 0, 255) == 0x000000FF


def test_pack_source_colour():
    assert pack_rgba(0x6A, 0x4F, 0x3F, 0xFF) == 0x6A4F3FFF


@pytest.mark.parametrize("rgba", [(1, 2, 3, 4), (255, 255, 255, 255), (0, 128, 7, 0)])
def test_pack_channels_round_trip(rgba):
    color = pack_rgba(*rgba)
    unpacked = ((color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
    assert unpacked == rgba


def test_put_then_get():
    canvas = Canvas(4, 3)
    canvas.put(2, 1, 0xE9CD92FF)
    assert canvas.get(2, 1) == 0xE9CD92FF
    assert canvas.get(1, 2) == 0


def test_fill_sets_every_pixel():
    canvas = Canvas(3, 2)
    canvas.fill(0x1A140FFF)
    assert all(canvas.get(x, y) == 0x1A140FFF for x in range(3) for y in range(2))


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_bounds_raises(x, y):
    canvas = Canvas(4, 3)
    with pytest.raises(IndexError):
        canvas.put(x, y, 1)
    with pytest.raises(IndexError):
        canvas.get(x, y)


def test_rgba_bytes_layout():
    canvas = Canvas(2, 1)
    canvas.put(0, 0, pack_rgba(1, 2, 3, 4))
    canvas.put(1, 0, pack_rgba(5, 6, 7, 8))
    assert canvas.rgba_bytes() == bytes([1, 2, 3, 4, 5, 6, 7, 8])


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Canvas(-1, 2)