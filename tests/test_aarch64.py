import pytest

from cpufeat.aarch64 import (
    Aarch64Feature,
    Aarch64Info,
    feature_name,
    feature_value,
)


def test_features_enum_names():
    last = len(Aarch64Feature)
    last_name = feature_name(last)
    assert last_name == "unknown_feature"
    for feature in Aarch64Feature:
        name = feature_name(feature)
        assert name != ""
        assert name != last_name


def test_enum_values_are_contiguous():
    assert [int(f) for f in Aarch64Feature] == list(range(len(Aarch64Feature)))
    assert feature_name(0) == "fp"
    for value in range(len(Aarch64Feature)):
        assert feature_value({Aarch64Feature(value)}, value) is True
        assert feature_name(value) == feature_name(Aarch64Feature(value))


def test_names_are_unique():
    names = [feature_name(f) for f in Aarch64Feature]
    assert len(set(names)) == len(names)


@pytest.mark.parametrize(
    "feature, name",
    [
        (Aarch64Feature.FP, "fp"),
        (Aarch64Feature.ASIMD, "asimd"),
        (Aarch64Feature.SME_I16I64, "smei16i64"),
        (Aarch64Feature.SVE_EBF16, "sveebf16"),
        (Aarch64Feature.SME_LUTV2, "smelutv2"),
        (Aarch64Feature.SME_SF8DP2, "smesf8dp2"),
    ],
)
def test_specific_names(feature, name):
    assert feature_name(feature) == name


def test_name_from_plain_int():
    assert feature_name(int(Aarch64Feature.CRC32)) == "crc32"
    assert feature_name(-1) == "unknown_feature"


def test_feature_value():
    features = {Aarch64Feature.AES, Aarch64Feature.CRC32}
    assert feature_value(features, Aarch64Feature.AES) is True
    assert feature_value(features, Aarch64Feature.CRC32) is True
    assert feature_value(features, Aarch64Feature.SHA1) is False


def test_feature_value_out_of_bounds():
    features = set(Aarch64Feature)
    assert feature_value(features, ~0) is False
    assert feature_value(features, len(Aarch64Feature)) is False


def test_info_defaults():
    info = Aarch64Info()
    assert info.features == frozenset()
    assert (info.implementer, info.variant, info.part, info.revision) == (0, 0, 0, 0)
    assert not any(feature_value(info.features, f) for f in Aarch64Feature)


def test_info_normalises_features():
    info = Aarch64Info(
        features=[int(Aarch64Feature.SVE), Aarch64Feature.FP],
        implementer=0x41,
        revision=3,
    )
    assert info.features == frozenset({Aarch64Feature.SVE, Aarch64Feature.FP})
    assert feature_value(info.features, Aarch64Feature.SVE)
    assert info.implementer == 0x41
    assert info.revision == 3


def test_info_rejects_unknown_feature():
    with pytest.raises(ValueError):
        Aarch64Info(features=[len(Aarch64Feature)])