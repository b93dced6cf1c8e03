"""Per-detector metadata about the events in a file."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class SRDetectorMeta:
    """Run and readout information for one detector."""

    enabled: bool = False
    run: int = -1
    subrun: int = -1
    event: int = -1
    subevt: int = -1
    triggertype: int = -1
    triggered: bool = True
    readoutstart_s: int = 0
    readoutstart_ns: int = 0
    readoutend_s: int = 0
    readoutend_ns: int = 0
    prism_offset: float = math.nan


@dataclass
class SRDetectorMetaBranch:
    """Metadata for every known detector."""

    nd_lar: SRDetectorMeta = field(default_factory=SRDetectorMeta)
    nd_gar: SRDetectorMeta = field(default_factory=SRDetectorMeta)
    tms: SRDetectorMeta = field(default_factory=SRDetectorMeta)
    sand: SRDetectorMeta = field(default_factory=SRDetectorMeta)
    lar2x2: SRDetectorMeta = field(default_factory=SRDetectorMeta)
    minerva: SRDetectorMeta = field(default_factory=SRDetectorMeta)
    fd_hd: SRDetectorMeta = field(default_factory=SRDetectorMeta)
    fd_vd: SRDetectorMeta = field(default_factory=SRDetectorMeta)
    pd_hd: SRDetectorMeta = field(default_factory=SRDetectorMeta)