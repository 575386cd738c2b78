"""Encoding of geometries in (extended) well known text format."""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Sequence

from hdbcore.geometry import Geometry, GeoType, coord_values, geo_type, geo_type_name


class _TypeFlag(Enum):
    FULL = "full"
    SHORT = "short"
    NONE = "none"


def wkt_type_name(g: Geometry) -> str:
    """Return the WKT type name of g including its dimension, e.g. 'POINT ZM'."""
    name = type(g).__name__
    if name.endswith("ZM"):
        return name[:-2].upper() + " ZM"
    if name.endswith("M"):
        return name[:-1].upper() + " M"
    if name.endswith("Z"):
        return name[:-1].upper() + " Z"
    return name.upper()


def _wkt_short_type_name(g: Geometry) -> str:
    return geo_type_name(g).upper()


def format_float(f: float) -> str:
    """Format f in shortest fixed point notation; NaN is written as NULL."""
    if math.isnan(f):
        return "NULL"
    if math.isinf(f):
        return "+Inf" if f > 0 else "-Inf"
    s = format(Decimal(repr(float(f))), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _coord(c: Any) -> str:
    return " ".join(format_float(v) for v in coord_values(c))


def _list(items: Sequence[Any], fn: Callable[[Any], str]) -> str:
    if not items:
        return "EMPTY"
    return "(" + ",".join(fn(item) for item in items) + ")"


def _encode(g: Geometry, flag: _TypeFlag) -> str:
    if flag is _TypeFlag.FULL:
        prefix = wkt_type_name(g) + " "
    elif flag is _TypeFlag.SHORT:
        prefix = _wkt_short_type_name(g) + " "
    else:
        prefix = ""

    gt = geo_type(g)
    if gt is GeoType.POINT:
        body = "(" + _coord(g) + ")"
    elif gt in (GeoType.LINE_STRING, GeoType.CIRCULAR_STRING):
        body = _list(g, _coord)
    elif gt is GeoType.POLYGON:
        body = _list(g, lambda ring: _list(ring, _coord))
    elif gt is GeoType.GEOMETRY_COLLECTION:
        body = _list(g, lambda item: _encode(item, _TypeFlag.SHORT))
    else:
        body = _list(g, lambda item: _encode(item, _TypeFlag.NONE))
    return prefix + body


def encode_wkt(g: Geometry) -> bytes:
    """Encode g to 'well known text'."""
    return _encode(g, _TypeFlag.FULL).encode("utf-8")


def encode_ewkt(g: Geometry, srid: int) -> bytes:
    """Encode g to 'extended well known text' carrying srid."""
    return f"SRID={int(srid)};{_encode(g, _TypeFlag.FULL)}".encode("utf-8")