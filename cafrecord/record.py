"""The top-level event record of a common analysis file."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.beam import SRBeamBranch
from cafrecord.fd import SRFDBranch
from cafrecord.interaction import SRCommonRecoBranch
from cafrecord.meta import SRDetectorMetaBranch
from cafrecord.nd import SRNDBranch
from cafrecord.truth import SRTruthBranch


@dataclass
class StandardRecord:
    """The primary per-event object in common analysis file trees."""

    meta: SRDetectorMetaBranch = field(default_factory=SRDetectorMetaBranch)
    beam: SRBeamBranch = field(default_factory=SRBeamBranch)
    mc: SRTruthBranch = field(default_factory=SRTruthBranch)
    common: SRCommonRecoBranch = field(default_factory=SRCommonRecoBranch)
    fd: SRFDBranch = field(default_factory=SRFDBranch)
    nd: SRNDBranch = field(default_factory=SRNDBranch)