"""Enumerations and small identifier records shared across the record tree."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum


class Detector(IntEnum):
    """Known detectors in CAFs."""

    UNKNOWN = 0

    # full NDs in Phase I or Phase II
    ND_LAR = 1
    ND_TMS = 2
    ND_SAND = 3
    ND_GAR = 4

    # ND prototypes
    LAR_2X2 = 5
    MINERVA = 6

    # full FDs
    FD_HD = 10
    FD_VD = 11

    # FD prototypes
    PROTODUNE = 15

    # Upper bound used when sizing per-detector bit sets.
    LAST_DETECTOR = 24


class Generator(IntEnum):
    """Known generators of neutrino interactions."""

    UNKNOWN = 0
    GENIE = 1
    GIBUU = 2
    NEUT = 3
    CRY = 4
    NUWRO = 5
    MARLEY = 6
    CORSIKA = 7
    GEANT = 8


class PartEMethod(IntEnum):
    """Methods for reconstructing particle energies."""

    UNKNOWN = 0
    RANGE = 1
    MCS = 2
    CALORIMETRY = 3


class ScatteringMode(IntEnum):
    """Neutrino interaction categories, kept in step with GENIE's numbering."""

    UNKNOWN = -100
    QE = 1
    SINGLE_KAON = 2
    DIS = 3
    RES = 4
    COH = 5
    DIFFRACTIVE = 6
    NU_ELECTRON_ELASTIC = 7
    INV_MUON_DECAY = 8
    AM_NU_GAMMA = 9
    MEC = 10
    COH_ELASTIC = 11
    INVERSE_BETA_DECAY = 12
    GLASHOW_RESONANCE = 13
    IMD_ANNIHILATION = 14
    PHOTON_COH = 15
    PHOTON_RES = 16
    DARK_MATTER_ELASTIC = 101
    DARK_MATTER_DIS = 102
    DARK_MATTER_ELECTRON = 103


class FDRecoStack(IntEnum):
    """Reconstruction toolkit used for an FD event."""

    UNKNOWN = 0
    PANDORA = 1


class NDLArRecoStack(IntEnum):
    """Reconstruction toolkit used for an ND-LAr event."""

    UNKNOWN = 0
    DEEP_LEARN_PHYS = 1
    PANDORA = 2


class NDRecoMatchType(IntEnum):
    """How a match between ND reconstructed objects was performed."""

    UNDECLARED = 0
    SIMPLE = 1
    UNIQUE_NO_TIME = 2
    UNIQUE_WITH_TIME = 3


class RecoObjType(IntEnum):
    """Kind of reconstructed object underlying a reconstructed particle."""

    UNKNOWN = -1
    TRACK = 1
    SHOWER = 2
    HIT_COLLECTION = 3


class PartType(IntEnum):
    """Which particle collection of a true interaction a particle lives in."""

    UNKNOWN = 0
    PRIMARY = 1
    PRIMARY_BEFORE_FSI = 2
    SECONDARY = 3


@dataclass
class TrueParticleID:
    """Locates a true particle inside the truth branch."""

    ixn: int = -1
    type: PartType = PartType.UNKNOWN
    part: int = -1


@dataclass
class FlashMatch:
    """Attributes of an optical flash matched to an interaction."""

    id: int = -1
    time: float = math.nan
    total_pe: float = math.nan
    hypothesis_pe: float = math.nan