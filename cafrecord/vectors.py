"""Compact three- and four-vector records."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: zero denominators give inf or nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _sqrt(value: float) -> float:
    """Square root that yields nan for negative input instead of raising."""
    if value < 0:
        return math.nan
    return math.sqrt(value)


@dataclass
class SRVector3D:
    """A 3-vector; components default to nan until set."""

    x: float = math.nan
    y: float = math.nan
    z: float = math.nan

    def mag2(self) -> float:
        """Squared magnitude."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def mag(self) -> float:
        """Magnitude."""
        return _sqrt(self.mag2())

    def dot(self, other: SRVector3D) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def unit(self) -> SRVector3D:
        """Vector of unit length in the same direction."""
        m = self.mag()
        return SRVector3D(_divide(self.x, m), _divide(self.y, m), _divide(self.z, m))

    def __add__(self, other: SRVector3D) -> SRVector3D:
        if not isinstance(other, SRVector3D):
            return NotImplemented
        return SRVector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: SRVector3D) -> SRVector3D:
        if not isinstance(other, SRVector3D):
            return NotImplemented
        return SRVector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g},{self.z:g})"


@dataclass
class SRLorentzVector:
    """A 4-momentum; components default to nan until set."""

    E: float = math.nan
    px: float = math.nan
    py: float = math.nan
    pz: float = math.nan

    def mag(self) -> float:
        """Magnitude of the spatial part."""
        return _sqrt(self.px * self.px + self.py * self.py + self.pz * self.pz)

    def beta(self) -> float:
        """Velocity as a fraction of c: |p| / E."""
        return _divide(self.mag(), self.E)

    def gamma(self) -> float:
        """Lorentz factor 1 / sqrt(1 - beta^2)."""
        b = self.beta()
        return _divide(1.0, _sqrt(1 - b * b))

    def vect(self) -> SRVector3D:
        """Spatial part as a 3-vector."""
        return SRVector3D(self.px, self.py, self.pz)