"""Reconstructed tracks, showers, particle-flow objects, clusters and flashes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from cafrecord.enums import TrueParticleID
from cafrecord.truth import SRTrueParticle
from cafrecord.vectors import SRVector3D


@dataclass
class SRTrack:
    """A reconstructed track.

    ``dir`` is the direction estimated at the start point and ``enddir`` the
    direction estimated at the end point. ``truth`` locates the associated
    true particles in the truth branch, and ``truthOverlap`` gives the
    fractional overlap with each of them.
    """

    start: SRVector3D = field(default_factory=SRVector3D)
    end: SRVector3D = field(default_factory=SRVector3D)
    dir: SRVector3D = field(default_factory=SRVector3D)
    enddir: SRVector3D = field(default_factory=SRVector3D)

    time: float = math.nan
    Evis: float = math.nan
    qual: float = math.nan
    len_gcm2: float = math.nan
    len_cm: float = math.nan
    E: float = math.nan

    truth: list[TrueParticleID] = field(default_factory=list)
    truthOverlap: list[float] = field(default_factory=list)

    def _geometry(self) -> str:
        return (
            f"with start={self.start}  end={self.end}"
            f"   start dir={self.dir}  end_dir={self.enddir}"
        )

    def __str__(self) -> str:
        return f"SRTrack {self._geometry()}  visE={self.Evis:g}"


@dataclass
class SRShower:
    """A reconstructed shower."""

    start: SRVector3D = field(default_factory=SRVector3D)
    direction: SRVector3D = field(default_factory=SRVector3D)
    Evis: float = -999.0

    truth: list[TrueParticleID] = field(default_factory=list)
    truthOverlap: list[float] = field(default_factory=list)


@dataclass
class SRPFP:
    """Features of a reconstructed particle-flow object."""

    nhits_U: int = 0
    nhits_V: int = 0
    nhits_W: int = 0
    nhits_3D: int = 0

    # hierarchy features
    daughter_parent_hit_ratio: float = math.nan
    ndaughters_hit_3d: float = math.nan

    # charge features
    charge_end_fraction: float = math.nan
    charge_fractional_spread: float = math.nan

    # linear-fit features
    diff_straight_line_mean: float = math.nan
    line_length: float = math.nan
    max_fit_gap_length: float = math.nan
    sliding_linear_fit_rms: float = math.nan

    # opening-angle feature
    angle_diff_3d: float = math.nan

    # principal-component features
    secondary_pca_ratio: float = math.nan
    tertiary_pca_ratio: float = math.nan

    # vertex-distance feature
    vertex_distance: float = math.nan

    # track/shower classifier score
    track_score: float = math.nan


@dataclass
class SRGArTrack(SRTrack):
    """A track reconstructed in the gaseous argon TPC."""

    dEdx_fwd: float = -999.0
    dEdx_bkwd: float = -999.0

    p_fwd: float = -999.0
    p_bkwd: float = -999.0

    len_cm_fwd: float = -999.0
    len_cm_bkwd: float = -999.0

    clusters_in_track: int = -999

    garsoft_trk_id: int = -999

    pid_fwd: list[int] = field(default_factory=list)
    pid_prob_fwd: list[float] = field(default_factory=list)
    pid_bkwd: list[int] = field(default_factory=list)
    pid_prob_bkwd: list[float] = field(default_factory=list)

    truth_fraction: float = math.nan

    def __str__(self) -> str:
        return f"SRGArTrack {self._geometry()}"


@dataclass
class SRGArECAL:
    """A cluster in the gaseous argon detector's ECAL."""

    position: SRVector3D = field(default_factory=SRVector3D)
    E: float = -999.0
    hits_in_cluster: int = -999
    garsoft_ecal_id: int = -999
    garsoft_trk_assn: int = -999
    truth: SRTrueParticle = field(default_factory=SRTrueParticle)
    truth_fraction: float = math.nan


@dataclass
class SRECALCluster:
    """A reconstructed ECAL cluster; positions are energy-weighted, in cm."""

    id: int = -1
    position: SRVector3D = field(default_factory=SRVector3D)
    var_position: SRVector3D = field(default_factory=SRVector3D)
    time: float = math.nan
    start: SRVector3D = field(default_factory=SRVector3D)
    direction: SRVector3D = field(default_factory=SRVector3D)
    E: float = math.nan
    num_cells: int = 0

    truth: list[TrueParticleID] = field(default_factory=list)
    truthOverlap: list[float] = field(default_factory=list)


@dataclass
class SROpticalFlash:
    """An optical flash candidate; times are relative to the trigger, in s."""

    id: int = -1
    tpc_id: int = -1
    time: float = math.nan
    time_width: float = math.nan
    total_pe: float = math.nan