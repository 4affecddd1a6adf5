"""Parameters controlling rendering of the generated objects."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field

from .matrix33 import Vector
from .rgb import FloatRGBA


@dataclass
class ParametersRender:
    """Rendering mode, lighting, background colours and target frame rate."""

    wireframe: bool = False
    display_list: bool = False
    joystick_mouse: bool = True
    ambient: float = 0.1
    illumination_azimuth: float = -math.pi / 3
    illumination_elevation: float = math.pi / 6
    background_colour_low: FloatRGBA = field(
        default_factory=lambda: FloatRGBA(0.25, 0.25, 1.0, 0.0)
    )
    background_colour_high: FloatRGBA = field(
        default_factory=lambda: FloatRGBA(0.0, 0.0, 0.0, 0.0)
    )
    fps_target: float = 60.0

    def illumination_direction(self) -> Vector:
        """Unit vector towards the light, from azimuth and elevation."""
        cos_elevation = math.cos(self.illumination_elevation)
        return (
            math.cos(self.illumination_azimuth) * cos_elevation,
            math.sin(self.illumination_azimuth) * cos_elevation,
            math.sin(self.illumination_elevation),
        )


def add_render_options(parser: argparse.ArgumentParser) -> argparse._ArgumentGroup:
    """Add the render command-line options to ``parser``; returns their group."""
    group = parser.add_argument_group("Render options")
    group.add_argument(
        "-d", "--display-list", action="store_true", help="use display list rendering"
    )
    group.add_argument(
        "-w", "--wireframe", action="store_true", help="render in wireframe mode"
    )
    group.add_argument(
        "-y",
        "--invert-mouse-y",
        action="store_true",
        help="invert mouse-y in flight mode",
    )
    return group


def parameters_render_from_args(args: argparse.Namespace) -> ParametersRender:
    """Build render parameters from options parsed by ``add_render_options``."""
    return ParametersRender(
        wireframe=bool(getattr(args, "wireframe", False)),
        display_list=bool(getattr(args, "display_list", False)),
        joystick_mouse=not getattr(args, "invert_mouse_y", False),
    )