"""Parameters controlling terrain generation."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from .matrix33 import Vector
from .parameters_noise import ParametersNoise
from .parameters_object import ParametersObject
from .rgb import FloatRGBA


def _time_seed() -> int:
    return int(time.time()) & 0xFFFFFFFF


def _colour(r: float, g: float, b: float, a: float):
    return field(default_factory=lambda: FloatRGBA(r, g, b, a))


@dataclass
class ParametersTerrain(ParametersObject):
    """Subdivision, perturbation, snowline, river and colour settings."""

    subdivisions_unperturbed: int = 1
    variation: Vector = (0.0, 0.0, 0.125)
    noise: ParametersNoise = field(default_factory=lambda: ParametersNoise(0))
    base_height: float = 0.0
    power_law: float = 1.5
    snowline_equator: float = 0.8
    snowline_pole: float = -0.1
    snowline_power_law: float = 1.0
    snowline_slope_effect: float = 1.0
    snowline_glacier_effect: float = 0.1
    rivers: int = 0
    rivers_seed: int = field(default_factory=_time_seed)
    lake_becomes_sea: float = 0.05
    oceans_and_rivers_emissive: float = 0.0
    colour_ocean: FloatRGBA = _colour(0.0, 0.0, 1.0, 1.0)
    colour_river: FloatRGBA = _colour(0.0, 0.0, 1.0, 1.0)
    colour_shoreline: FloatRGBA = _colour(1.0, 1.0, 0.0, 1.0)
    colour_low: FloatRGBA = _colour(0.0, 1.0, 0.0, 1.0)
    colour_high: FloatRGBA = _colour(1.0, 0.5, 0.0, 1.0)
    colour_snow: FloatRGBA = _colour(1.0, 1.0, 1.0, 1.0)