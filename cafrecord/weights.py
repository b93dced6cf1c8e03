"""File-level information about systematic weight parameters."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SRSystParamHeader:
    """Description of one systematic parameter."""

    nshifts: int = 0
    name: str = ""
    id: int = -1


@dataclass
class SRWeightGlobal:
    """All systematic parameters used for weights in a file."""

    params: list[SRSystParamHeader] = field(default_factory=list)


@dataclass
class SRGlobal:
    """Top-level per-file record."""

    wgts: SRWeightGlobal = field(default_factory=SRWeightGlobal)