"""Database semantic versions (u.vv.wwx.yy.zzzzzzzzzz) and feature detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Iterable

_MAJOR, _MINOR, _REVISION, _PATCH, _BUILD_ID = range(5)
_VERSION_COUNT = 5
_MAX_UINT64 = (1 << 64) - 1


def format_uint(i: int, digits: int) -> str:
    """Format i with exactly digits digits, zero padded and cut from the left."""
    s = "0" * digits + str(i)
    return s[len(s) - digits:]


def _parse_uint(s: str) -> int:
    if not s or not (s.isascii() and s.isdigit()):
        return 0
    return min(int(s), _MAX_UINT64)


class VersionNumber(tuple):
    """Version fields: major, minor, revision, patch and build id."""

    def __new__(cls, fields: Iterable[int] = ()) -> "VersionNumber":
        values = list(fields)[:_VERSION_COUNT]
        values += [0] * (_VERSION_COUNT - len(values))
        return super().__new__(cls, values)

    def __str__(self) -> str:
        s = (
            f"{self[_MAJOR]}.{format_uint(self[_MINOR], 2)}."
            f"{format_uint(self[_REVISION], 3)}.{format_uint(self[_PATCH], 2)}"
        )
        if self[_BUILD_ID] != 0:
            return f"{s}.{self[_BUILD_ID]}"
        return s

    def is_zero(self) -> bool:
        """Report whether all fields are zero."""
        return not any(self)

    def compare(self, other: "VersionNumber") -> int:
        """Compare with other ignoring the build id: -1, 0 or 1."""
        for a, b in zip(self[:_BUILD_ID], other[:_BUILD_ID]):
            if a != b:
                return 1 if a > b else -1
        return 0


def parse_version_number(s: str) -> VersionNumber:
    """Parse a dotted version string; non numeric fields become zero."""
    return VersionNumber(_parse_uint(part) for part in s.split(".", _VERSION_COUNT - 1))


class Feature(IntFlag):
    """Version dependent database features."""

    NONE = 1
    SERVER_VERSION = 2
    CONNECT_CLIENT_INFO = 4


FEATURE_AVAILABILITY: dict[Feature, VersionNumber] = {
    Feature.SERVER_VERSION: parse_version_number("2.00.000"),
    Feature.CONNECT_CLIENT_INFO: parse_version_number("2.00.042"),
}

VERSION_NUMBER_ONE = parse_version_number("1.00.120")


@dataclass(frozen=True)
class Version:
    """A database version with the features it supports."""

    vn: VersionNumber
    feature: int = 0

    def __str__(self) -> str:
        return str(self.vn)

    def major(self) -> int:
        return self.vn[_MAJOR]

    def minor(self) -> int:
        return self.vn[_MINOR]

    def sps(self) -> int:
        return self.vn[_REVISION] // 10

    def revision(self) -> int:
        return self.vn[_REVISION]

    def patch(self) -> int:
        return self.vn[_PATCH]

    def build_id(self) -> int:
        return self.vn[_BUILD_ID]

    def compare(self, other: "Version") -> int:
        """Compare with other ignoring the build id: -1, 0 or 1."""
        return self.vn.compare(other.vn)

    def has_feature(self, feature: int) -> bool:
        """Report whether this version supports feature."""
        return self.feature & feature != 0


def parse_version(s: str) -> Version:
    """Parse a version string; an empty or zero version is taken as 1.00.120."""
    vn = parse_version_number(s)
    if vn.is_zero():
        vn = VERSION_NUMBER_ONE
    feature = 0
    for f, cv in FEATURE_AVAILABILITY.items():
        if vn.compare(cv) >= 0:
            feature |= f
    return Version(vn, feature)