import numpy as np
import pytest

from chip8vm import DisplayBuffer


def test_starts_blank():
    d = DisplayBuffer()
    assert d.pixels.shape == (32, 64)
    assert d.lit_count() == 0


def test_set_lights_pixel_without_collision():
    d = DisplayBuffer()
    assert d.set(3, 5, True) == 0
    assert d.get(3, 5)


def test_set_over_lit_pixel_reports_collision_and_clears():
    d = DisplayBuffer()
    d.set(3, 5, True)
    assert d.set(3, 5, True) == 1
    assert not d.get(3, 5)


def test_set_false_is_a_noop():
    d = DisplayBuffer()
    d.set(0, 0, True)
    assert d.set(0, 0, False) == 0
    assert d.get(0, 0)


@pytest.mark.parametrize("row,col", [(32, 64), (33, 0), (0, 70), (95, 127), (255, 255)])
def test_wraparound(row, col):
    d = DisplayBuffer()
    d.set(row, col, True)
    assert d.pixels[row % 32, col % 64]
    assert d.lit_count() == 1


def test_clear():
    d = DisplayBuffer()
    for i in range(10):
        d.set(i, i * 3, True)
    d.clear()
    assert d.lit_count() == 0


def test_to_rgba_flips_rows_and_scales():
    d = DisplayBuffer()
    d.set(0, 0, True)
    frame = d.to_rgba(scale=2)
    assert frame.shape == (64, 128, 4)
    # row 0 is the top of the screen, i.e. the last rows of a bottom-up image
    assert np.all(frame[-2:, :2, :3] == 255)
    assert np.all(frame[:-2, :, :3] == 0)
    assert np.all(frame[..., 3] == 255)
