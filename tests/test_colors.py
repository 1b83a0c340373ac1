import pytest

from cfgdraw.colors import Color, Coord, Dims


def test_coord_plus_dims_moves_point():
    start = Coord(10.0, 20.0)
    moved = start + Dims(5.0, 7.0)
    assert moved == Coord(15.0, 27.0)


def test_adding_zero_dims_is_identity():
    start = Coord(3.5, -2.0)
    assert start + Dims(0.0, 0.0) == start


def test_coord_plus_other_type_fails():
    with pytest.raises(TypeError):
        Coord(0.0, 0.0) + 3


def test_dim_keeps_rgb_and_lowers_alpha():
    color = Color(255, 10, 20, 30)
    dimmed = color.dim()
    assert dimmed.alpha == 85
    assert (dimmed.red, dimmed.green, dimmed.blue) == (10, 20, 30)


def test_dim_of_transparent_stays_transparent():
    assert Color(0, 1, 2, 3).dim().alpha == 0


@pytest.mark.parametrize("channels", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 300, 0)])
def test_channels_out_of_range_are_rejected(channels):
    with pytest.raises(ValueError):
        Color(*channels)