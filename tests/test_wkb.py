import math
import struct

from hdbcore.geometry import (
    Coord,
    GeometryCollection,
    LineString,
    Point,
    PointM,
    PointZ,
    Polygon,
)
from hdbcore.wkb import encode_ewkb, encode_wkb, wkb_type

EXAMPLE = GeometryCollection(
    [Point(x=1, y=1), LineString([Coord(x=1, y=1), Coord(x=2, y=2)])]
)


def test_example_wkb():
    assert encode_wkb(EXAMPLE, False) == (
        b"0107000000020000000101000000000000000000f03f000000000000f03f"
        b"010200000002000000000000000000f03f000000000000f03f"
        b"00000000000000400000000000000040"
    )


def test_example_ewkb():
    assert encode_ewkb(EXAMPLE, False, 4711) == (
        b"010700002067120000020000000101000000000000000000f03f000000000000f03f"
        b"010200000002000000000000000000f03f000000000000f03f"
        b"00000000000000400000000000000040"
    )


def test_wkb_type_dimensions():
    assert wkb_type(Point()) == 1
    assert wkb_type(PointZ()) == 1001
    assert wkb_type(PointM()) == 2001


def test_point_little_endian():
    raw = bytes.fromhex(encode_wkb(Point(x=2.5, y=3.0), False).decode())
    assert raw[0] == 1
    assert struct.unpack("<I", raw[1:5])[0] == 1
    assert struct.unpack("<2d", raw[5:]) == (2.5, 3.0)


def test_point_big_endian():
    raw = bytes.fromhex(encode_wkb(Point(x=-3.0, y=-4.5), True).decode())
    assert raw[0] == 0
    assert struct.unpack(">I", raw[1:5])[0] == 1
    assert struct.unpack(">2d", raw[5:]) == (-3.0, -4.5)


def test_point_m_nan():
    raw = bytes.fromhex(encode_wkb(PointM(x=-3.0, y=-4.5, m=math.nan), False).decode())
    assert struct.unpack("<I", raw[1:5])[0] == wkb_type(PointM())
    x, y, m = struct.unpack("<3d", raw[5:])
    assert (x, y) == (-3.0, -4.5)
    assert math.isnan(m)


def test_empty_line_string():
    raw = bytes.fromhex(encode_wkb(LineString(), False).decode())
    assert len(raw) == 9
    assert struct.unpack("<I", raw[5:9])[0] == 0


def test_polygon_ring_sizes():
    ring = [Coord(x=6.0, y=7.0), Coord(x=10.0, y=3.0), Coord(x=10.0, y=10.0), Coord(x=6.0, y=7.0)]
    raw = bytes.fromhex(encode_wkb(Polygon([ring]), False).decode())
    assert struct.unpack("<I", raw[1:5])[0] == wkb_type(Polygon())
    assert struct.unpack("<I", raw[5:9])[0] == 1
    assert struct.unpack("<I", raw[9:13])[0] == len(ring)
    assert struct.unpack("<8d", raw[13:]) == (6.0, 7.0, 10.0, 3.0, 10.0, 10.0, 6.0, 7.0)


def test_ewkb_srid_only_on_outer_geometry():
    raw = bytes.fromhex(encode_ewkb(EXAMPLE, True, 3857).decode())
    assert struct.unpack(">I", raw[1:5])[0] == wkb_type(EXAMPLE) | 0x20000000
    assert struct.unpack(">i", raw[5:9])[0] == 3857
    plain = bytes.fromhex(encode_wkb(EXAMPLE, True).decode())
    assert raw[9:] == plain[5:]


def test_ewkb_negative_srid():
    raw = bytes.fromhex(encode_ewkb(Point(), False, -1).decode())
    assert struct.unpack("<i", raw[5:9])[0] == -1