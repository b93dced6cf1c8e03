"""Far-detector reconstruction output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, TypeVar

from cafrecord.enums import FDRecoStack
from cafrecord.recoobjects import SRPFP, SRShower, SRTrack

_T = TypeVar("_T")


def _element(items: Sequence[_T], index: int, what: str) -> _T:
    """Return ``items[index]``, rejecting negative or out-of-range indices."""
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index {index} out of range (size {len(items)})")
    return items[index]


@dataclass
class SRFDInt:
    """A reconstructed interaction in a far detector."""

    tracks: list[SRTrack] = field(default_factory=list)
    ntracks: int = 0

    showers: list[SRShower] = field(default_factory=list)
    nshowers: int = 0

    pfps: list[SRPFP] = field(default_factory=list)
    npfps: int = 0


@dataclass
class SRFDID:
    """Uniquely identifies a far-detector reconstructed object."""

    reco: FDRecoStack = FDRecoStack.UNKNOWN
    ixn: int = -1
    idx: int = -1


@dataclass
class SRFD:
    """Reconstruction output of one far-detector module."""

    pandora: list[SRFDInt] = field(default_factory=list)
    npandora: int = 0

    def _interaction(self, id: SRFDID) -> SRFDInt:
        if id.reco == FDRecoStack.PANDORA:
            interactions = self.pandora
        else:
            raise ValueError(f"Unknown reco stack: {int(id.reco)}")
        return _element(interactions, id.ixn, "interaction")

    def track(self, id: SRFDID) -> SRTrack:
        """The track identified by ``id``."""
        return _element(self._interaction(id).tracks, id.idx, "track")

    def shower(self, id: SRFDID) -> SRShower:
        """The shower identified by ``id``."""
        return _element(self._interaction(id).showers, id.idx, "shower")

    def pfp(self, id: SRFDID) -> SRPFP:
        """The particle-flow object identified by ``id``."""
        return _element(self._interaction(id).pfps, id.idx, "pfp")


@dataclass
class SRFDBranch:
    """Far-detector information, one entry per module or prototype."""

    hd: SRFD = field(default_factory=SRFD)
    vd: SRFD = field(default_factory=SRFD)
    pd_hd: SRFD = field(default_factory=SRFD)
    pd_vd: SRFD = field(default_factory=SRFD)