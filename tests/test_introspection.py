import pytest

from cpufeat.aarch64 import Aarch64Feature
from cpufeat.introspection import (
    HwcapWord,
    IntrospectionEntry,
    cpuinfo_flag,
    entry,
    features_from_cpuinfo_flags,
)


def test_entry_for_first_word_feature():
    item = entry(Aarch64Feature.AES)
    assert item == IntrospectionEntry(
        feature=Aarch64Feature.AES,
        name="aes",
        cpuinfo_flag="aes",
        hwcap_word=HwcapWord.HWCAP,
    )


def test_pacg_is_last_in_first_word_and_dcpodp_first_in_second():
    assert entry(Aarch64Feature.PACG).hwcap_word is HwcapWord.HWCAP
    assert entry(Aarch64Feature.DCPODP).hwcap_word is HwcapWord.HWCAP2


def test_sme_lutv2_uses_kernel_flag_spelling():
    assert cpuinfo_flag(Aarch64Feature.SME_LUTV2) == "smelutv1"
    assert entry(Aarch64Feature.SME_LUTV2).name == "smelutv2"


@pytest.mark.parametrize(
    "feature, flag",
    [
        (Aarch64Feature.FP, "fp"),
        (Aarch64Feature.SVEBITPERM, "svebitperm"),
        (Aarch64Feature.SME_I16I64, "smei16i64"),
        (Aarch64Feature.SME_SF8DP2, "smesf8dp2"),
    ],
)
def test_cpuinfo_flag_values(feature, flag):
    assert cpuinfo_flag(feature) == flag


def test_every_feature_has_an_entry_for_itself():
    for feature in Aarch64Feature:
        assert entry(feature).feature is feature
        assert entry(int(feature)) == entry(feature)


def test_cpuinfo_flags_are_unique():
    flags = [cpuinfo_flag(f) for f in Aarch64Feature]
    assert len(set(flags)) == len(flags)


def test_unknown_feature_raises():
    with pytest.raises(ValueError):
        entry(len(Aarch64Feature))
    with pytest.raises(ValueError):
        cpuinfo_flag(-1)


def test_round_trip_all_flags():
    flags = [cpuinfo_flag(f) for f in Aarch64Feature]
    assert features_from_cpuinfo_flags(flags) == frozenset(Aarch64Feature)


def test_features_from_string_line():
    result = features_from_cpuinfo_flags("fp asimd evtstrm aes pmull")
    assert result == frozenset(
        {
            Aarch64Feature.FP,
            Aarch64Feature.ASIMD,
            Aarch64Feature.EVTSTRM,
            Aarch64Feature.AES,
            Aarch64Feature.PMULL,
        }
    )


def test_unknown_flags_are_ignored():
    assert features_from_cpuinfo_flags(["bogus", "sve", "smelutv2"]) == frozenset(
        {Aarch64Feature.SVE}
    )


def test_empty_input_gives_no_features():
    assert features_from_cpuinfo_flags("") == frozenset()
    assert features_from_cpuinfo_flags([]) == frozenset()