"""Parameters controlling cloud generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .parameters_object import ParametersObject
from .rgb import FloatRGBA


@dataclass
class ParametersCloud(ParametersObject):
    """Whether clouds are made, their base height, weather systems and colour."""

    enabled: bool = False
    cloudbase: float = 0.1
    weather_systems: int = 0
    colour: FloatRGBA = field(default_factory=lambda: FloatRGBA(1.0, 1.0, 1.0, 1.0))