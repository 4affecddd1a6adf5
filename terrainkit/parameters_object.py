"""Parameters common to terrain and cloud generation."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum


class ObjectType(Enum):
    """What kind of object will be generated."""

    PLANET = 0
    FLAT_HEXAGON = 1
    FLAT_TRIANGLE = 2
    FLAT_SQUARE = 3


def _time_seed() -> int:
    return int(time.time()) & 0xFFFFFFFF


@dataclass
class ParametersObject:
    """Kind of object, random seed and subdivision count."""

    object_type: ObjectType = ObjectType.PLANET
    seed: int = field(default_factory=_time_seed)
    subdivisions: int = 8