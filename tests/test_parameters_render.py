import argparse
import math

import pytest

from terrainkit.parameters_render import (
    ParametersRender,
    add_render_options,
    parameters_render_from_args,
)
from terrainkit.rgb import FloatRGBA


def _parse(argv):
    parser = argparse.ArgumentParser()
    add_render_options(parser)
    return parameters_render_from_args(parser.parse_args(argv))


def test_defaults_from_no_options():
    p = _parse([])
    assert p.wireframe is False
    assert p.display_list is False
    assert p.joystick_mouse is True


def test_fixed_defaults():
    p = ParametersRender()
    assert p.ambient == pytest.approx(0.1)
    assert p.illumination_azimuth == pytest.approx(-math.pi / 3)
    assert p.illumination_elevation == pytest.approx(math.pi / 6)
    assert p.background_colour_low == FloatRGBA(0.25, 0.25, 1.0, 0.0)
    assert p.background_colour_high == FloatRGBA(0.0, 0.0, 0.0, 0.0)
    assert p.fps_target == 60.0


@pytest.mark.parametrize(
    "argv,attribute,expected",
    [
        (["-w"], "wireframe", True),
        (["--wireframe"], "wireframe", True),
        (["-d"], "display_list", True),
        (["--display-list"], "display_list", True),
        (["-y"], "joystick_mouse", False),
        (["--invert-mouse-y"], "joystick_mouse", False),
    ],
)
def test_options(argv, attribute, expected):
    assert getattr(_parse(argv), attribute) is expected


def test_combined_short_options():
    p = _parse(["-wdy"])
    assert (p.wireframe, p.display_list, p.joystick_mouse) == (True, True, False)


def test_unknown_option_rejected():
    with pytest.raises(SystemExit):
        _parse(["--bogus"])


@pytest.mark.parametrize("azimuth", [0.0, 0.7, -math.pi / 3, 2.5])
@pytest.mark.parametrize("elevation", [0.0, math.pi / 6, -0.4])
def test_illumination_direction_is_unit(azimuth, elevation):
    p = ParametersRender(illumination_azimuth=azimuth, illumination_elevation=elevation)
    d = p.illumination_direction()
    assert math.sqrt(sum(c * c for c in d)) == pytest.approx(1.0)


def test_illumination_straight_up():
    p = ParametersRender(illumination_azimuth=1.0, illumination_elevation=math.pi / 2)
    x, y, z = p.illumination_direction()
    assert z == pytest.approx(1.0)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(0.0, abs=1e-12)


def test_illumination_along_x_axis():
    p = ParametersRender(illumination_azimuth=0.0, illumination_elevation=0.0)
    assert p.illumination_direction() == pytest.approx((1.0, 0.0, 0.0))