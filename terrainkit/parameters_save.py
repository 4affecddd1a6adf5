"""Parameters controlling how generated objects are saved."""

from __future__ import annotations

from dataclasses import dataclass

from .parameters_render import ParametersRender


@dataclass
class ParametersSave:
    """Options for POV-Ray, Blender and texture output."""

    parameters_render: ParametersRender | None
    pov_atmosphere: bool = False
    pov_sea_object: bool = True
    blender_per_vertex_alpha: bool = False
    texture_shaded: bool = False
    texture_height: int = 1024