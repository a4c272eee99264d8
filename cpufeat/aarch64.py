"""AArch64 feature set and processor identification."""

from __future__ import annotations

import enum
from collections.abc import Collection
from dataclasses import dataclass, field

UNKNOWN_FEATURE = "unknown_feature"


class Aarch64Feature(enum.IntEnum):
    """Every AArch64 feature that can be reported, in introspection order."""

    FP = 0
    ASIMD = 1
    EVTSTRM = 2
    AES = 3
    PMULL = 4
    SHA1 = 5
    SHA2 = 6
    CRC32 = 7
    ATOMICS = 8
    FPHP = 9
    ASIMDHP = 10
    CPUID = 11
    ASIMDRDM = 12
    JSCVT = 13
    FCMA = 14
    LRCPC = 15
    DCPOP = 16
    SHA3 = 17
    SM3 = 18
    SM4 = 19
    ASIMDDP = 20
    SHA512 = 21
    SVE = 22
    ASIMDFHM = 23
    DIT = 24
    USCAT = 25
    ILRCPC = 26
    FLAGM = 27
    SSBS = 28
    SB = 29
    PACA = 30
    PACG = 31
    DCPODP = 32
    SVE2 = 33
    SVEAES = 34
    SVEPMULL = 35
    SVEBITPERM = 36
    SVESHA3 = 37
    SVESM4 = 38
    FLAGM2 = 39
    FRINT = 40
    SVEI8MM = 41
    SVEF32MM = 42
    SVEF64MM = 43
    SVEBF16 = 44
    I8MM = 45
    BF16 = 46
    DGH = 47
    RNG = 48
    BTI = 49
    MTE = 50
    ECV = 51
    AFP = 52
    RPRES = 53
    MTE3 = 54
    SME = 55
    SME_I16I64 = 56
    SME_F64F64 = 57
    SME_I8I32 = 58
    SME_F16F32 = 59
    SME_B16F32 = 60
    SME_F32F32 = 61
    SME_FA64 = 62
    WFXT = 63
    EBF16 = 64
    SVE_EBF16 = 65
    CSSC = 66
    RPRFM = 67
    SVE2P1 = 68
    SME2 = 69
    SME2P1 = 70
    SME_I16I32 = 71
    SME_BI32I32 = 72
    SME_B16B16 = 73
    SME_F16F16 = 74
    MOPS = 75
    HBC = 76
    SVE_B16B16 = 77
    LRCPC3 = 78
    LSE128 = 79
    FPMR = 80
    LUT = 81
    FAMINMAX = 82
    F8CVT = 83
    F8FMA = 84
    F8DP4 = 85
    F8DP2 = 86
    F8E4M3 = 87
    F8E5M2 = 88
    SME_LUTV2 = 89
    SME_F8F16 = 90
    SME_F8F32 = 91
    SME_SF8FMA = 92
    SME_SF8DP4 = 93
    SME_SF8DP2 = 94

    @property
    def field_name(self) -> str:
        """Short feature name, e.g. ``smei16i64`` for ``SME_I16I64``."""
        return self.name.lower().replace("_", "")


def _as_feature(feature: int) -> Aarch64Feature | None:
    try:
        return Aarch64Feature(feature)
    except ValueError:
        return None


def feature_name(feature: int) -> str:
    """Name of a feature, or ``"unknown_feature"`` for a value outside the enum."""
    known = _as_feature(feature)
    return UNKNOWN_FEATURE if known is None else known.field_name


def feature_value(features: Collection[Aarch64Feature], feature: int) -> bool:
    """Whether ``feature`` is among ``features``; unknown values are never present."""
    known = _as_feature(feature)
    return known is not None and known in features


@dataclass(frozen=True)
class Aarch64Info:
    """Detected features and identification registers of an AArch64 processor."""

    features: frozenset[Aarch64Feature] = field(default_factory=frozenset)
    implementer: int = 0
    variant: int = 0
    part: int = 0
    revision: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "features", frozenset(Aarch64Feature(f) for f in self.features)
        )