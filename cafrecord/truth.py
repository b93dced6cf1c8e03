"""True particles and interactions from simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from cafrecord.enums import Generator, ScatteringMode, TrueParticleID
from cafrecord.vectors import SRLorentzVector, SRVector3D


@dataclass
class SRTrueParticle:
    """A true particle in the particle record.

    Most come straight from the event generator (primaries). Some are other
    intermediaries kept because reconstruction refers to them. Process codes
    follow GEANT4's process and subprocess numbering. ``first_process`` may be
    the process of the first saved trajectory step rather than the creation
    process.
    """

    pdg: int = 0
    G4ID: int = -1
    interaction_id: int = -1
    time: float = math.nan
    ancestor_id: TrueParticleID = field(default_factory=TrueParticleID)
    p: SRLorentzVector = field(default_factory=SRLorentzVector)
    start_pos: SRVector3D = field(default_factory=SRVector3D)
    end_pos: SRVector3D = field(default_factory=SRVector3D)
    parent: int = -1
    daughters: list[int] = field(default_factory=list)
    first_process: int = 0
    first_subprocess: int = 0
    end_process: int = 0
    end_subprocess: int = 0


@dataclass
class SRTrueInteraction:
    """True interaction of a probe particle with the detector.

    This is usually a neutrino, but cosmics and the like appear here too.
    The lepton always comes first in ``prim``.
    """

    id: int = -1
    genieIdx: int = -1

    pdg: int = 0
    pdgorig: int = 0

    iscc: bool = False
    mode: ScatteringMode = ScatteringMode.UNKNOWN
    targetPDG: int = 0

    hitnuc: int = 0
    removalE: float = math.nan

    E: float = math.nan
    vtx: SRVector3D = field(default_factory=SRVector3D)
    momentum: SRVector3D = field(default_factory=SRVector3D)
    isvtxcont: bool = False

    time: float = math.nan
    bjorkenX: float = math.nan
    inelasticity: float = math.nan
    Q2: float = math.nan
    q0: float = math.nan
    modq: float = math.nan
    W: float = math.nan
    t: float = math.nan

    ischarm: bool = False
    isseaquark: bool = False
    resnum: int = 0
    xsec: float = math.nan

    genweight: float = math.nan

    baseline: float = math.nan
    prod_vtx: SRVector3D = field(default_factory=SRVector3D)
    parent_dcy_mom: SRVector3D = field(default_factory=SRVector3D)
    parent_dcy_mode: int = -1
    parent_pdg: int = 0
    parent_dcy_E: float = math.nan
    imp_weight: float = math.nan

    generator: Generator = Generator.UNKNOWN
    genVersion: list[int] = field(default_factory=list)

    nproton: int = 0
    nneutron: int = 0
    npip: int = 0
    npim: int = 0
    npi0: int = 0

    nprim: int = 0
    prim: list[SRTrueParticle] = field(default_factory=list)
    nprefsi: int = 0
    prefsi: list[SRTrueParticle] = field(default_factory=list)
    nsec: int = 0
    sec: list[SRTrueParticle] = field(default_factory=list)

    xsec_cvwgt: float = math.nan


@dataclass
class SRTruthBranch:
    """True interactions contributing to this trigger."""

    nu: list[SRTrueInteraction] = field(default_factory=list)
    nnu: int = 0