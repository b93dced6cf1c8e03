import dataclasses
import math

from cafrecord.meta import SRDetectorMeta, SRDetectorMetaBranch


def test_detector_meta_defaults():
    m = SRDetectorMeta()
    assert m.enabled is False
    assert m.triggered is True
    assert (m.run, m.subrun, m.event, m.subevt, m.triggertype) == (-1, -1, -1, -1, -1)
    assert (m.readoutstart_s, m.readoutstart_ns, m.readoutend_s, m.readoutend_ns) == (0, 0, 0, 0)
    assert math.isnan(m.prism_offset)


def test_detector_meta_keeps_values():
    m = SRDetectorMeta(enabled=True, run=42, prism_offset=-12.5)
    assert m.enabled is True
    assert m.run == 42
    assert m.prism_offset == -12.5


def test_branch_has_all_detectors():
    branch = SRDetectorMetaBranch()
    names = [f.name for f in dataclasses.fields(branch)]
    assert names == [
        "nd_lar", "nd_gar", "tms", "sand", "lar2x2",
        "minerva", "fd_hd", "fd_vd", "pd_hd",
    ]
    assert [getattr(branch, name).run for name in names] == [-1] * len(names)


def test_branch_entries_are_independent():
    branch = SRDetectorMetaBranch()
    branch.nd_lar.enabled = True
    branch.nd_lar.run = 7
    assert branch.tms.enabled is False
    assert branch.tms.run == -1
    assert SRDetectorMetaBranch().nd_lar.enabled is False