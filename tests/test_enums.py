import math

import pytest

from cafrecord.enums import (
    Detector,
    FDRecoStack,
    FlashMatch,
    Generator,
    NDLArRecoStack,
    NDRecoMatchType,
    PartEMethod,
    PartType,
    RecoObjType,
    ScatteringMode,
    TrueParticleID,
)


@pytest.mark.parametrize(
    "value, member",
    [
        (0, Detector.UNKNOWN),
        (1, Detector.ND_LAR),
        (4, Detector.ND_GAR),
        (10, Detector.FD_HD),
        (11, Detector.FD_VD),
        (15, Detector.PROTODUNE),
        (24, Detector.LAST_DETECTOR),
    ],
)
def test_detector_values_fixed_by_format(value, member):
    assert Detector(value) is member
    assert int(Detector(value)) == value


def test_detector_lookup_by_value():
    assert Detector(3) is Detector.ND_SAND
    assert Detector(6) is Detector.MINERVA


def test_detector_gap_is_not_a_member():
    with pytest.raises(ValueError):
        Detector(7)


def test_scattering_mode_values():
    assert ScatteringMode.UNKNOWN == -100
    assert ScatteringMode(10) is ScatteringMode.MEC
    assert ScatteringMode.DARK_MATTER_ELECTRON == 103


def test_generator_members_in_order():
    assert [g.value for g in Generator] == list(range(9))
    assert Generator(1) is Generator.GENIE


@pytest.mark.parametrize(
    "enum_cls, first_name",
    [
        (PartEMethod, "UNKNOWN"),
        (FDRecoStack, "UNKNOWN"),
        (NDLArRecoStack, "UNKNOWN"),
        (NDRecoMatchType, "UNDECLARED"),
        (PartType, "UNKNOWN"),
    ],
)
def test_default_members_are_zero(enum_cls, first_name):
    assert enum_cls[first_name] == 0


def test_reco_stacks():
    assert NDLArRecoStack(2) is NDLArRecoStack.PANDORA
    assert FDRecoStack(1) is FDRecoStack.PANDORA
    with pytest.raises(ValueError):
        FDRecoStack(2)


def test_reco_obj_type_unknown_is_negative():
    assert RecoObjType(-1) is RecoObjType.UNKNOWN
    assert RecoObjType(3) is RecoObjType.HIT_COLLECTION
    with pytest.raises(ValueError):
        RecoObjType(0)


def test_true_particle_id_defaults():
    pid = TrueParticleID()
    assert pid.ixn == -1
    assert pid.part == -1
    assert pid.type is PartType.UNKNOWN


def test_true_particle_id_equality():
    a = TrueParticleID(ixn=2, type=PartType.SECONDARY, part=5)
    b = TrueParticleID(2, PartType.SECONDARY, 5)
    assert a == b
    assert a != TrueParticleID(2, PartType.PRIMARY, 5)


def test_flash_match_defaults():
    fm = FlashMatch()
    assert fm.id == -1
    assert [math.isnan(v) for v in (fm.time, fm.total_pe, fm.hypothesis_pe)] == [True, True, True]