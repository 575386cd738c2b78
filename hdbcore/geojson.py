"""Encoding of geometries in GeoJSON format."""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any

from hdbcore.geometry import (
    Coord,
    CoordM,
    CoordZ,
    CoordZM,
    Geometry,
    GeoType,
    geo_type,
    geo_type_name,
)
from hdbcore.wkt import format_float


def _coord(c: Any) -> list[float | None]:
    if isinstance(c, Coord):
        values = (c.x, c.y)
    elif isinstance(c, CoordZ):
        values = (c.x, c.y, c.z)
    elif isinstance(c, CoordM):
        values = (c.x, c.y, 0.0, c.m)
    elif isinstance(c, CoordZM):
        values = (c.x, c.y, c.z, c.m)
    else:
        raise TypeError(f"invalid coordinate type {type(c).__name__}")
    return [None if math.isnan(v) else float(v) for v in values]


def _convert(v: Any) -> Any:
    if isinstance(v, list):
        return [_convert(item) for item in v]
    return _coord(v)


def _float(f: float) -> str:
    if math.isinf(f) or math.isnan(f):
        raise ValueError(f"json: unsupported value: {f}")
    a = abs(f)
    if a != 0 and (a < 1e-6 or a >= 1e21):
        return format(Decimal(repr(f)), "e")
    return format_float(f)


def _dump(v: Any) -> str:
    if v is None:
        return "null"
    if isinstance(v, float):
        return _float(v)
    if isinstance(v, str):
        return json.dumps(v)
    if isinstance(v, dict):
        return "{" + ",".join(f"{json.dumps(k)}:{_dump(val)}" for k, val in v.items()) + "}"
    if isinstance(v, list):
        return "[" + ",".join(_dump(item) for item in v) + "]"
    raise TypeError(f"unsupported json value {type(v).__name__}")


def encode_geojson(g: Geometry) -> bytes:
    """Encode g to GeoJSON."""
    if geo_type(g) is GeoType.GEOMETRY_COLLECTION:
        doc: dict[str, Any] = {
            "type": geo_type_name(g),
            "geometries": [
                {"type": geo_type_name(item), "coordinates": _convert(item)} for item in g
            ],
        }
    else:
        doc = {"type": geo_type_name(g), "coordinates": _convert(g)}
    return _dump(doc).encode("utf-8")