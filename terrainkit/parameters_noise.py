"""Parameters controlling a multi-term noise perturbation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParametersNoise:
    """Number of noise terms and the frequency and amplitude of the first."""

    terms: int
    frequency: float = 1.0
    amplitude: float = 0.125
    amplitude_decay: float = 0.5