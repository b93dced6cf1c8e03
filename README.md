# cafrecord

A plain-Python data model for Common Analysis File (CAF) standard records. It
covers the whole event record: detector metadata, beam-spill quality, Monte
Carlo truth, reconstruction shared by every detector, reconstruction for the
far detectors and reconstruction for the near-detector complex.

Every branch is a dataclass. Each field has the same default as the record
format. Floating-point quantities that are not filled start as NaN, and
indices and IDs start at -1.

## Modules

- `cafrecord.enums`: `Detector`, `Generator`, `PartEMethod`, `ScatteringMode`,
  `FDRecoStack`, `NDLArRecoStack`, `NDRecoMatchType`, `RecoObjType`,
  `PartType` (all `IntEnum`), and the small records `TrueParticleID` and
  `FlashMatch`.
- `cafrecord.vectors`: `SRVector3D` (`mag2`, `mag`, `dot`, `unit`, `+`, `-`,
  iteration over x, y, z) and `SRLorentzVector` (`mag`, `beta`, `gamma`,
  `vect`).
- `cafrecord.meta`: `SRDetectorMeta` and `SRDetectorMetaBranch`.
- `cafrecord.beam`: `SRBeamBranch` with `is_fhc`, `is_0hc` and `is_rhc`.
- `cafrecord.truth`: `SRTrueParticle`, `SRTrueInteraction`, `SRTruthBranch`.
- `cafrecord.weights`: `SRSystParamHeader`, `SRWeightGlobal`, `SRGlobal`.
- `cafrecord.recoobjects`: `SRTrack`, `SRShower`, `SRPFP`, `SRGArTrack`,
  `SRGArECAL`, `SRECALCluster`, `SROpticalFlash`.
- `cafrecord.interaction`: `SRCVNScoreBranch`, `SRNeutrinoHypothesisBranch`,
  `SRNeutrinoEnergyBranch`, `SRDirectionBranch`, `SRRecoParticle`,
  `SRRecoParticlesBranch`, `SRInteraction`, `SRInteractionBranch`,
  `SRCommonRecoBranch`.
- `cafrecord.fd`: `SRFDInt`, `SRFDID`, `SRFD`, `SRFDBranch`.
- `cafrecord.nd`: ND-LAr, MINERvA, TMS, ND-GAr and SAND records, their ID
  records, the track and shower associations, and `SRNDBranch`.
- `cafrecord.record`: `StandardRecord`, the top-level event record.

## Installation

```
pip install .
```

## Building a record

```python
import math

from cafrecord.record import StandardRecord
from cafrecord.vectors import SRVector3D
from cafrecord.enums import Detector

rec = StandardRecord()
rec.meta.nd_lar.enabled = True
rec.meta.nd_lar.run = 12

rec.beam.hornI = 200.0
assert rec.beam.is_fhc() and not rec.beam.is_rhc()

v = SRVector3D(3.0, 4.0, 0.0)
assert v.mag() == 5.0
print(v + SRVector3D(1.0, 1.0, 1.0))   # (4,5,1)

assert math.isnan(rec.beam.pulsepot)
assert Detector.FD_HD == 10
```

`str()` of a track gives its start, end and directions; for `SRTrack` it
also gives the visible energy.

## Looking up reconstructed objects

Reconstructed objects are addressed by small ID records. The owning branch
resolves an ID:

```python
from cafrecord.enums import NDLArRecoStack
from cafrecord.nd import SRNDLAr, SRNDLArID, SRNDLArInt
from cafrecord.recoobjects import SRTrack

lar = SRNDLAr()
lar.dlp.append(SRNDLArInt(tracks=[SRTrack()]))
track = lar.track(SRNDLArID(reco=NDLArRecoStack.DEEP_LEARN_PHYS, ixn=0, idx=0))
```

A lookup that names an unknown reconstruction stack raises `ValueError`. An
index outside its collection, negative indices included, raises `IndexError`.

The far-detector branch works the same way through `SRFD.track`,
`SRFD.shower` and `SRFD.pfp`; only `FDRecoStack.PANDORA` is known there.
MINERvA uses `SRMINERvA.track` and `SRMINERvA.shower`, and TMS uses
`SRTMS.track`.

## Interactions

`SRInteraction.contained()` reports whether every reconstructed particle in
the interaction's DLP, Pandora and PIDA collections is contained.

## What the package does not do

It is an in-memory data model only. It does not read or write record files,
has no serialisation format, and provides no command-line tool. Count fields
such as `ntracks` or `nixn` are plain fields and are not kept in step with
their lists automatically.

## Running the tests

```
pip install .[test]
pytest
```