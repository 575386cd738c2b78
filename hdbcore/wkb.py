"""Encoding of geometries in (extended) well known binary format, hex encoded."""

from __future__ import annotations

import struct
from typing import Any

from hdbcore.geometry import Geometry, GeoType, coord_values, geo_type

XDR = 0x00
"""Big endian byte order marker."""
NDR = 0x01
"""Little endian byte order marker."""

SRID_FLAG = 0x20000000

DIM_Z = 1000
DIM_M = 2000
DIM_ZM = 3000


def wkb_type(g: Geometry) -> int:
    """Return the WKB type code of g, including its dimension offset."""
    gt = int(geo_type(g))
    name = type(g).__name__
    if name.endswith("ZM"):
        return gt + DIM_ZM
    if name.endswith("Z"):
        return gt + DIM_Z
    if name.endswith("M"):
        return gt + DIM_M
    return gt


class _WKBWriter:
    def __init__(self, is_xdr: bool, extended: bool, srid: int) -> None:
        self._prefix = ">" if is_xdr else "<"
        self._order_byte = XDR if is_xdr else NDR
        self._extended = extended
        self._srid = srid
        self._buf = bytearray()

    def _pack(self, fmt: str, *values: Any) -> None:
        self._buf += struct.pack(self._prefix + fmt, *values)

    def coord(self, c: Any) -> None:
        values = coord_values(c)
        self._pack(f"{len(values)}d", *values)

    def size(self, n: int) -> None:
        self._pack("I", n)

    def type(self, g: Geometry) -> None:
        self._buf.append(self._order_byte)
        if self._extended:
            self._pack("I", wkb_type(g) | SRID_FLAG)
            self._pack("i", self._srid)
            self._extended = False
        else:
            self._pack("I", wkb_type(g))

    def geometry(self, g: Geometry) -> None:
        self.type(g)
        gt = geo_type(g)
        if gt is GeoType.POINT:
            self.coord(g)
        elif gt in (GeoType.LINE_STRING, GeoType.CIRCULAR_STRING):
            self.size(len(g))
            for c in g:
                self.coord(c)
        elif gt is GeoType.POLYGON:
            self.size(len(g))
            for ring in g:
                self.size(len(ring))
                for c in ring:
                    self.coord(c)
        else:
            self.size(len(g))
            for item in g:
                self.geometry(item)

    def hex(self) -> bytes:
        return self._buf.hex().encode("ascii")


def encode_wkb(g: Geometry, is_xdr: bool = False) -> bytes:
    """Encode g to hex encoded 'well known binary'."""
    w = _WKBWriter(is_xdr, False, -1)
    w.geometry(g)
    return w.hex()


def encode_ewkb(g: Geometry, is_xdr: bool, srid: int) -> bytes:
    """Encode g to hex encoded 'extended well known binary' carrying srid."""
    w = _WKBWriter(is_xdr, True, srid)
    w.geometry(g)
    return w.hex()