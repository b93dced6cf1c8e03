import math

import pytest

from cafrecord.enums import FDRecoStack
from cafrecord.fd import SRFD, SRFDBranch, SRFDID, SRFDInt
from cafrecord.recoobjects import SRPFP, SRShower, SRTrack


@pytest.fixture
def fd():
    first = SRFDInt(
        tracks=[SRTrack(Evis=1.0), SRTrack(Evis=2.0)],
        ntracks=2,
        showers=[SRShower(Evis=3.0)],
        nshowers=1,
        pfps=[SRPFP(nhits_U=4)],
        npfps=1,
    )
    second = SRFDInt(tracks=[SRTrack(Evis=5.0)], ntracks=1)
    return SRFD(pandora=[first, second], npandora=2)


def test_id_defaults():
    fid = SRFDID()
    assert fid.reco is FDRecoStack.UNKNOWN
    assert (fid.ixn, fid.idx) == (-1, -1)


def test_track_lookup_returns_stored_object(fd):
    fid = SRFDID(reco=FDRecoStack.PANDORA, ixn=0, idx=1)
    assert fd.track(fid) is fd.pandora[0].tracks[1]
    assert fd.track(SRFDID(FDRecoStack.PANDORA, 1, 0)).Evis == 5.0


def test_shower_and_pfp_lookup(fd):
    fid = SRFDID(reco=FDRecoStack.PANDORA, ixn=0, idx=0)
    assert fd.shower(fid) is fd.pandora[0].showers[0]
    assert fd.pfp(fid) is fd.pandora[0].pfps[0]


def test_unknown_stack_raises(fd):
    with pytest.raises(ValueError, match="Unknown reco stack: 0"):
        fd.track(SRFDID(ixn=0, idx=0))


@pytest.mark.parametrize("ixn,idx", [(2, 0), (0, 5), (-1, 0), (0, -1)])
def test_out_of_range_raises(fd, ixn, idx):
    with pytest.raises(IndexError):
        fd.track(SRFDID(FDRecoStack.PANDORA, ixn, idx))


def test_missing_pfp_in_second_interaction(fd):
    with pytest.raises(IndexError):
        fd.pfp(SRFDID(FDRecoStack.PANDORA, 1, 0))


def test_branch_modules_are_independent():
    branch = SRFDBranch()
    branch.hd.pandora.append(SRFDInt())
    assert len(branch.hd.pandora) == 1
    assert branch.vd.pandora == []
    assert branch.pd_hd.npandora == 0


def test_empty_interaction_defaults():
    ixn = SRFDInt()
    assert (ixn.ntracks, ixn.nshowers, ixn.npfps) == (0, 0, 0)
    assert math.isnan(SRPFP().track_score)