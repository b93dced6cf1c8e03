"""Spill-by-spill beam quality information."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class SRBeamBranch:
    """Beam-line measurements for one pulse.

    POT values already include the 1e12 normalisation. Position and intensity
    lists hold six batch values followed by their mean.
    """

    ismc: bool = False
    isgoodpulse: bool = True
    pulsetimesec: int = 0
    pulsetimensec: int = 0
    gpspulsetimesec: int = 0
    gpspulsetimensec: int = 0
    deltapulsetimensec: int = -9999999
    pulsepot: float = math.nan
    potTOR101: float = math.nan
    potTR101D: float = math.nan
    hornI: float = math.nan
    hornDir: float = math.nan
    beamHwidth: float = math.nan
    beamVwidth: float = math.nan
    horizontalposTGT: list[float] = field(default_factory=list)
    horizontalintTGT: list[float] = field(default_factory=list)
    horizontalpos121: list[float] = field(default_factory=list)
    verticalposTGT: list[float] = field(default_factory=list)
    verticalintTGT: list[float] = field(default_factory=list)
    verticalpos121: list[float] = field(default_factory=list)
    multiwireInfo: list[float] = field(default_factory=list)

    def is_fhc(self) -> bool:
        """Positive horn current: forward horn current."""
        return self.hornI > 0

    def is_0hc(self) -> bool:
        """Horn current magnitude below 1 kA."""
        return abs(self.hornI) < 1

    def is_rhc(self) -> bool:
        """Negative horn current: reverse horn current."""
        return self.hornI < 0