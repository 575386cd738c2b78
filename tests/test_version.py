import pytest

from hdbcore.version import (
    FEATURE_AVAILABILITY,
    Feature,
    VersionNumber,
    format_uint,
    parse_version,
    parse_version_number,
)


@pytest.mark.parametrize(
    "s, fields",
    [
        ("2.00.048.00", (2, 0, 48, 0, 0)),
        ("2.00.045.00.15756393121", (2, 0, 45, 0, 15756393121)),
    ],
)
def test_parse(s, fields):
    v = parse_version(s)
    assert str(v) == s
    assert tuple(v.vn) == fields


@pytest.mark.parametrize(
    "s1, s2, r",
    [
        ("2.00.045.00.15756393121", "2.00.048.00", -1),
        ("2.00.045.00.15756393121", "2.00.045.00.15756393122", 0),
        ("2.00.048.00", "2.00.045.00", 1),
    ],
)
def test_compare(s1, s2, r):
    assert parse_version_number(s1).compare(parse_version_number(s2)) == r


def test_feature():
    for f, cv1 in FEATURE_AVAILABILITY.items():
        for cv2 in FEATURE_AVAILABILITY.values():
            v1 = parse_version(str(cv1))
            v2 = parse_version(str(cv2))
            assert v2.has_feature(f) == (v2.compare(v1) >= 0)


def test_zero_version_is_one():
    v = parse_version("")
    assert str(v) == "1.00.120.00"
    assert not v.has_feature(Feature.SERVER_VERSION)
    assert not v.has_feature(Feature.CONNECT_CLIENT_INFO)


def test_accessors():
    v = parse_version("2.00.045.03.1575639312")
    assert v.major() == 2
    assert v.minor() == 0
    assert v.revision() == 45
    assert v.sps() == 4
    assert v.patch() == 3
    assert v.build_id() == 1575639312
    assert v.has_feature(Feature.CONNECT_CLIENT_INFO)


def test_non_numeric_fields_are_zero():
    assert tuple(parse_version_number("2.x.5")) == (2, 0, 5, 0, 0)


def test_format_uint():
    assert format_uint(5, 3) == "005"
    assert format_uint(1234, 2) == "34"


def test_is_zero():
    assert VersionNumber().is_zero()
    assert not VersionNumber([0, 0, 1]).is_zero()