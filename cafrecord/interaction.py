"""Reconstructed top-level interactions and the hypotheses attached to them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import chain
from typing import ClassVar

from cafrecord.enums import PartEMethod, RecoObjType, TrueParticleID
from cafrecord.vectors import SRVector3D


@dataclass
class SRCVNScoreBranch:
    """Classifier scores for flavour and final-state multiplicities."""

    isnubar: float = math.nan

    nue: float = math.nan
    numu: float = math.nan
    nutau: float = math.nan
    nc: float = math.nan

    protons0: float = math.nan
    protons1: float = math.nan
    protons2: float = math.nan
    protonsN: float = math.nan

    chgpi0: float = math.nan
    chgpi1: float = math.nan
    chgpi2: float = math.nan
    chgpiN: float = math.nan

    pizero0: float = math.nan
    pizero1: float = math.nan
    pizero2: float = math.nan
    pizeroN: float = math.nan

    neutron0: float = math.nan
    neutron1: float = math.nan
    neutron2: float = math.nan
    neutronN: float = math.nan


@dataclass
class SRNeutrinoHypothesisBranch:
    """Hypotheses for the identity of an interaction's neutrino."""

    cvn: SRCVNScoreBranch = field(default_factory=SRCVNScoreBranch)


@dataclass
class SRNeutrinoEnergyBranch:
    """Estimates of the reconstructed neutrino energy."""

    calo: float = math.nan
    lep_calo: float = math.nan
    mu_range: float = math.nan
    mu_mcs: float = math.nan
    mu_mcs_llhd: float = math.nan
    e_calo: float = math.nan

    e_had: float = math.nan
    mu_had: float = math.nan

    regcnn: float = math.nan


@dataclass
class SRDirectionBranch:
    """Hypotheses for the direction of an interaction's parent particle."""

    lngtrk: SRVector3D = field(default_factory=SRVector3D)
    heshw: SRVector3D = field(default_factory=SRVector3D)
    calo: SRVector3D = field(default_factory=SRVector3D)
    part_mom_sum: SRVector3D = field(default_factory=SRVector3D)


@dataclass
class SRRecoParticle:
    """A reconstructed particle candidate.

    ``parent`` and ``daughters`` are indices of other particles in the same
    collection; ``parent`` is -1 when there is none. ``truth`` locates the
    associated true particles in the truth branch.
    """

    PDG_HADRONIC_BLOB: ClassVar[int] = 2000000002

    primary: bool = False
    pdg: int = 0
    tgtA: int = 0
    score: float = math.nan
    E: float = math.nan
    E_method: PartEMethod = PartEMethod.UNKNOWN
    p: SRVector3D = field(default_factory=SRVector3D)
    start: SRVector3D = field(default_factory=SRVector3D)
    end: SRVector3D = field(default_factory=SRVector3D)
    contained: bool = False
    walldist: float = math.nan
    origRecoObjType: RecoObjType = RecoObjType.UNKNOWN
    parent: int = -1
    daughters: list[int] = field(default_factory=list)
    truth: list[TrueParticleID] = field(default_factory=list)
    truthOverlap: list[float] = field(default_factory=list)


@dataclass
class SRRecoParticlesBranch:
    """Reconstructed particles, one collection per reconstruction stack."""

    ndlp: int = 0
    dlp: list[SRRecoParticle] = field(default_factory=list)

    npandora: int = 0
    pandora: list[SRRecoParticle] = field(default_factory=list)

    npida: int = 0
    pida: list[SRRecoParticle] = field(default_factory=list)

    nsandreco: int = 0
    sandreco: list[SRRecoParticle] = field(default_factory=list)


@dataclass
class SRInteraction:
    """A reconstructed top-level interaction, usually of a neutrino.

    ``truth`` holds indices into the truth branch's interactions and
    ``truthOverlap`` the fractional overlap with each of them.
    """

    id: int = -1
    vtx: SRVector3D = field(default_factory=SRVector3D)
    dir: SRDirectionBranch = field(default_factory=SRDirectionBranch)
    nuhyp: SRNeutrinoHypothesisBranch = field(default_factory=SRNeutrinoHypothesisBranch)
    Enu: SRNeutrinoEnergyBranch = field(default_factory=SRNeutrinoEnergyBranch)
    part: SRRecoParticlesBranch = field(default_factory=SRRecoParticlesBranch)
    truth: list[int] = field(default_factory=list)
    truthOverlap: list[float] = field(default_factory=list)
    preselected: bool = False

    def contained(self) -> bool:
        """True when every DLP, Pandora and PIDA particle is contained."""
        return all(
            particle.contained
            for particle in chain(self.part.dlp, self.part.pandora, self.part.pida)
        )


@dataclass
class SRInteractionBranch:
    """Reconstructed interactions, one collection per reconstruction stack."""

    dlp: list[SRInteraction] = field(default_factory=list)
    ndlp: int = 0

    pandora: list[SRInteraction] = field(default_factory=list)
    npandora: int = 0

    sandreco: list[SRInteraction] = field(default_factory=list)
    nsandreco: int = 0


@dataclass
class SRCommonRecoBranch:
    """Reconstructed information shared across detectors."""

    ixn: SRInteractionBranch = field(default_factory=SRInteractionBranch)