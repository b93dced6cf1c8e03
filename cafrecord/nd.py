"""Near-detector reconstruction output and cross-detector associations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, TypeVar

from cafrecord.enums import FlashMatch, NDLArRecoStack, NDRecoMatchType
from cafrecord.recoobjects import (
    SRECALCluster,
    SRGArECAL,
    SRGArTrack,
    SROpticalFlash,
    SRShower,
    SRTrack,
)

_T = TypeVar("_T")


def _element(items: Sequence[_T], index: int, what: str) -> _T:
    """Return ``items[index]``, rejecting negative or out-of-range indices."""
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index {index} out of range (size {len(items)})")
    return items[index]


# ---------------------------------------------------------------- ND-LAr


@dataclass
class SRNDLArInt:
    """A reconstructed interaction in ND-LAr."""

    tracks: list[SRTrack] = field(default_factory=list)
    ntracks: int = 0

    showers: list[SRShower] = field(default_factory=list)
    nshowers: int = 0

    flash: list[FlashMatch] = field(default_factory=list)


@dataclass
class SRNDLArID:
    """Uniquely identifies an ND-LAr reconstructed object."""

    reco: NDLArRecoStack = NDLArRecoStack.UNKNOWN
    ixn: int = -1
    idx: int = -1


@dataclass
class SRNDLAr:
    """ND-LAr reconstruction output."""

    dlp: list[SRNDLArInt] = field(default_factory=list)
    ndlp: int = 0
    pandora: list[SRNDLArInt] = field(default_factory=list)
    npandora: int = 0
    flashes: list[SROpticalFlash] = field(default_factory=list)
    nflashes: int = 0

    def _interaction(self, id: SRNDLArID) -> SRNDLArInt:
        if id.reco == NDLArRecoStack.DEEP_LEARN_PHYS:
            interactions = self.dlp
        elif id.reco == NDLArRecoStack.PANDORA:
            interactions = self.pandora
        else:
            raise ValueError(f"Unknown reco stack: {int(id.reco)}")
        return _element(interactions, id.ixn, "interaction")

    def track(self, id: SRNDLArID) -> SRTrack:
        """The track identified by ``id``."""
        return _element(self._interaction(id).tracks, id.idx, "track")

    def shower(self, id: SRNDLArID) -> SRShower:
        """The shower identified by ``id``."""
        return _element(self._interaction(id).showers, id.idx, "shower")


# ---------------------------------------------------------------- MINERvA


@dataclass
class SRMINERvAInt:
    """A reconstructed interaction in the MINERvA planes."""

    tracks: list[SRTrack] = field(default_factory=list)
    ntracks: int = 0

    showers: list[SRShower] = field(default_factory=list)
    nshowers: int = 0


@dataclass
class SRMINERvAID:
    """Uniquely identifies a MINERvA reconstructed object."""

    ixn: int = -1
    idx: int = -1


@dataclass
class SRMINERvA:
    """MINERvA reconstruction output."""

    ixn: list[SRMINERvAInt] = field(default_factory=list)
    nixn: int = 0

    def track(self, id: SRMINERvAID) -> SRTrack:
        """The track identified by ``id``."""
        return _element(_element(self.ixn, id.ixn, "interaction").tracks, id.idx, "track")

    def shower(self, id: SRMINERvAID) -> SRShower:
        """The shower identified by ``id``."""
        return _element(
            _element(self.ixn, id.ixn, "interaction").showers, id.idx, "shower"
        )


# ---------------------------------------------------------------- TMS


@dataclass
class SRTMSInt:
    """A reconstructed interaction in TMS."""

    tracks: list[SRTrack] = field(default_factory=list)
    ntracks: int = 0


@dataclass
class SRTMSID:
    """Uniquely identifies a TMS reconstructed object."""

    ixn: int = -1
    idx: int = -1


@dataclass
class SRTMS:
    """TMS reconstruction output."""

    ixn: list[SRTMSInt] = field(default_factory=list)
    nixn: int = 0

    def track(self, id: SRTMSID) -> SRTrack:
        """The track identified by ``id``."""
        return _element(_element(self.ixn, id.ixn, "interaction").tracks, id.idx, "track")


# ---------------------------------------------------------------- ND-GAr


@dataclass
class SRGArInt:
    """A reconstructed interaction in ND-GAr, with legacy parametric fields."""

    tracks: list[SRGArTrack] = field(default_factory=list)
    ntracks: int = 0

    clusters: list[SRGArECAL] = field(default_factory=list)
    nclusters: int = 0

    nFSP: int = 0
    pdg: list[int] = field(default_factory=list)
    ptrue: list[float] = field(default_factory=list)
    trkLen: list[float] = field(default_factory=list)
    trkLenPerp: list[float] = field(default_factory=list)
    partEvReco: list[float] = field(default_factory=list)
    gastpc_pi_pl_mult: int = 0
    gastpc_pi_min_mult: int = 0


@dataclass
class SRGArID:
    """Uniquely identifies an ND-GAr reconstructed object."""

    ixn: int = -1
    idx: int = -1


@dataclass
class SRGAr:
    """ND-GAr reconstruction output."""

    nixn: int = 0
    ixn: list[SRGArInt] = field(default_factory=list)


# ---------------------------------------------------------------- SAND


@dataclass
class SRSANDInt:
    """A reconstructed interaction in SAND."""

    tracks: list[SRTrack] = field(default_factory=list)
    ntracks: int = 0

    showers: list[SRShower] = field(default_factory=list)
    nshowers: int = 0

    ECALClusters: list[SRECALCluster] = field(default_factory=list)
    nclusters: int = 0


@dataclass
class SRSANDID:
    """Uniquely identifies a SAND reconstructed object."""

    ixn: int = -1
    idx: int = -1


@dataclass
class SRSAND:
    """SAND reconstruction output."""

    nixn: int = 0
    ixn: list[SRSANDInt] = field(default_factory=list)


# ---------------------------------------------------------------- associations


@dataclass
class SRNDTrackAssn:
    """A track matched across ND subdetectors, with the synthesised track."""

    larid: SRNDLArID = field(default_factory=SRNDLArID)
    tmsid: SRTMSID = field(default_factory=SRTMSID)
    minervaid: SRMINERvAID = field(default_factory=SRMINERvAID)
    garid: SRGArID = field(default_factory=SRGArID)

    transdispl: float = math.nan
    angdispl: float = math.nan
    matchScore: float = math.nan

    matchType: NDRecoMatchType = NDRecoMatchType.UNDECLARED

    trk: SRTrack = field(default_factory=SRTrack)


@dataclass
class SRNDShowerAssn:
    """A shower matched across ND subdetectors, with the synthesised shower."""

    larid: SRNDLArID = field(default_factory=SRNDLArID)
    minervaid: SRMINERvAID = field(default_factory=SRMINERvAID)

    shw: SRShower = field(default_factory=SRShower)


@dataclass
class SRNDTrkAssnBranch:
    """Track associations made by extrapolating track directions."""

    nextrap: int = 0
    extrap: list[SRNDTrackAssn] = field(default_factory=list)


@dataclass
class SRNDShwAssnBranch:
    """Shower associations made by extrapolation."""

    nextrap: int = 0
    extrap: list[SRNDShowerAssn] = field(default_factory=list)


@dataclass
class SRNDBranch:
    """Reconstructed information for the near-detector complex."""

    lar: SRNDLAr = field(default_factory=SRNDLAr)
    gar: SRGAr = field(default_factory=SRGAr)
    tms: SRTMS = field(default_factory=SRTMS)
    sand: SRSAND = field(default_factory=SRSAND)
    minerva: SRMINERvA = field(default_factory=SRMINERvA)

    trkmatch: SRNDTrkAssnBranch = field(default_factory=SRNDTrkAssnBranch)
    shwmatch: SRNDShwAssnBranch = field(default_factory=SRNDShwAssnBranch)