"""Introspection table linking AArch64 features to cpuinfo flags and hwcap words."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .aarch64 import Aarch64Feature


class HwcapWord(enum.Enum):
    """Auxiliary-vector word that carries a feature's hardware capability bit."""

    HWCAP = "hwcap"
    HWCAP2 = "hwcap2"


@dataclass(frozen=True)
class IntrospectionEntry:
    """How one feature is named, spelled in ``/proc/cpuinfo`` and reported by hwcaps."""

    feature: Aarch64Feature
    name: str
    cpuinfo_flag: str
    hwcap_word: HwcapWord


# The kernel spells this flag differently from the feature's own name.
_FLAG_OVERRIDES = {Aarch64Feature.SME_LUTV2: "smelutv1"}

# Features from this one onwards are reported in the second hwcap word.
_FIRST_HWCAP2_FEATURE = Aarch64Feature.DCPODP


def _build_table() -> Mapping[Aarch64Feature, IntrospectionEntry]:
    table = {
        feature: IntrospectionEntry(
            feature=feature,
            name=feature.field_name,
            cpuinfo_flag=_FLAG_OVERRIDES.get(feature, feature.field_name),
            hwcap_word=(
                HwcapWord.HWCAP2
                if feature >= _FIRST_HWCAP2_FEATURE
                else HwcapWord.HWCAP
            ),
        )
        for feature in Aarch64Feature
    }
    return MappingProxyType(table)


_TABLE = _build_table()
_BY_FLAG = MappingProxyType(
    {item.cpuinfo_flag: item.feature for item in _TABLE.values()}
)


def entry(feature: int) -> IntrospectionEntry:
    """Table entry for ``feature``; raises ``ValueError`` for an unknown feature."""
    return _TABLE[Aarch64Feature(feature)]


def cpuinfo_flag(feature: int) -> str:
    """Flag under which ``/proc/cpuinfo`` lists ``feature``."""
    return entry(feature).cpuinfo_flag


def features_from_cpuinfo_flags(flags: str | Iterable[str]) -> frozenset[Aarch64Feature]:
    """Features named by cpuinfo flags, given as a whitespace-separated string or words.

    Flags that name no known feature are ignored.
    """
    words = flags.split() if isinstance(flags, str) else flags
    return frozenset(_BY_FLAG[word] for word in words if word in _BY_FLAG)