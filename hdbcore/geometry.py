"""Geo spatial types: coordinates, points, strings, polygons and collections."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


def nan() -> float:
    """Return a 'not-a-number' value, used for missing measures."""
    return math.nan


class Geometry:
    """Base class of all spatial types."""

    __slots__ = ()


@dataclass(frozen=True)
class Coord:
    """Two dimensional coordinate."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class CoordZ:
    """Three dimensional coordinate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class CoordM:
    """Annotated two dimensional coordinate."""

    x: float = 0.0
    y: float = 0.0
    m: float = 0.0


@dataclass(frozen=True)
class CoordZM:
    """Annotated three dimensional coordinate."""

    x: float = 0.0
    y: float = 0.0
    m: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Point(Coord, Geometry):
    """Two dimensional point."""


@dataclass(frozen=True)
class PointZ(CoordZ, Geometry):
    """Three dimensional point."""


@dataclass(frozen=True)
class PointM(CoordM, Geometry):
    """Annotated two dimensional point."""


@dataclass(frozen=True)
class PointZM(CoordZM, Geometry):
    """Annotated three dimensional point."""


class _GeometryList(list, Geometry):
    """A geometry made of a sequence of coordinates, rings or geometries."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"


class LineString(_GeometryList):
    """Two dimensional line string (list of Coord)."""


class LineStringZ(_GeometryList):
    """Three dimensional line string (list of CoordZ)."""


class LineStringM(_GeometryList):
    """Annotated two dimensional line string (list of CoordM)."""


class LineStringZM(_GeometryList):
    """Annotated three dimensional line string (list of CoordZM)."""


class CircularString(_GeometryList):
    """Two dimensional circular string (list of Coord)."""


class CircularStringZ(_GeometryList):
    """Three dimensional circular string (list of CoordZ)."""


class CircularStringM(_GeometryList):
    """Annotated two dimensional circular string (list of CoordM)."""


class CircularStringZM(_GeometryList):
    """Annotated three dimensional circular string (list of CoordZM)."""


class Polygon(_GeometryList):
    """Two dimensional polygon (list of rings of Coord)."""


class PolygonZ(_GeometryList):
    """Three dimensional polygon (list of rings of CoordZ)."""


class PolygonM(_GeometryList):
    """Annotated two dimensional polygon (list of rings of CoordM)."""


class PolygonZM(_GeometryList):
    """Annotated three dimensional polygon (list of rings of CoordZM)."""


class MultiPoint(_GeometryList):
    """Two dimensional multi point (list of Point)."""


class MultiPointZ(_GeometryList):
    """Three dimensional multi point (list of PointZ)."""


class MultiPointM(_GeometryList):
    """Annotated two dimensional multi point (list of PointM)."""


class MultiPointZM(_GeometryList):
    """Annotated three dimensional multi point (list of PointZM)."""


class MultiLineString(_GeometryList):
    """Two dimensional multi line string (list of LineString)."""


class MultiLineStringZ(_GeometryList):
    """Three dimensional multi line string (list of LineStringZ)."""


class MultiLineStringM(_GeometryList):
    """Annotated two dimensional multi line string (list of LineStringM)."""


class MultiLineStringZM(_GeometryList):
    """Annotated three dimensional multi line string (list of LineStringZM)."""


class MultiPolygon(_GeometryList):
    """Two dimensional multi polygon (list of Polygon)."""


class MultiPolygonZ(_GeometryList):
    """Three dimensional multi polygon (list of PolygonZ)."""


class MultiPolygonM(_GeometryList):
    """Annotated two dimensional multi polygon (list of PolygonM)."""


class MultiPolygonZM(_GeometryList):
    """Annotated three dimensional multi polygon (list of PolygonZM)."""


class GeometryCollection(_GeometryList):
    """Two dimensional geometry collection."""


class GeometryCollectionZ(_GeometryList):
    """Three dimensional geometry collection."""


class GeometryCollectionM(_GeometryList):
    """Annotated two dimensional geometry collection."""


class GeometryCollectionZM(_GeometryList):
    """Annotated three dimensional geometry collection."""


class GeoType(IntEnum):
    """Base geometry type codes."""

    POINT = 1
    LINE_STRING = 2
    POLYGON = 3
    MULTI_POINT = 4
    MULTI_LINE_STRING = 5
    MULTI_POLYGON = 6
    GEOMETRY_COLLECTION = 7
    CIRCULAR_STRING = 8


_GEO_TYPES = {
    "Point": GeoType.POINT,
    "LineString": GeoType.LINE_STRING,
    "Polygon": GeoType.POLYGON,
    "MultiPoint": GeoType.MULTI_POINT,
    "MultiLineString": GeoType.MULTI_LINE_STRING,
    "MultiPolygon": GeoType.MULTI_POLYGON,
    "GeometryCollection": GeoType.GEOMETRY_COLLECTION,
    "CircularString": GeoType.CIRCULAR_STRING,
}


def geo_type_name(g: Geometry) -> str:
    """Return the type name of g without its dimension suffix."""
    name = type(g).__name__
    if name.endswith("ZM"):
        return name[:-2]
    if name[-1:] in ("M", "Z"):
        return name[:-1]
    return name


def geo_type(g: Geometry) -> GeoType:
    """Return the base geometry type of g."""
    try:
        return _GEO_TYPES[geo_type_name(g)]
    except KeyError:
        raise ValueError(f"invalid geometry type {type(g).__name__}") from None


def coord_values(c: Any) -> tuple[float, ...]:
    """Return the coordinate values of c in x, y[, z][, m] order."""
    if isinstance(c, Coord):
        return (c.x, c.y)
    if isinstance(c, CoordZ):
        return (c.x, c.y, c.z)
    if isinstance(c, CoordM):
        return (c.x, c.y, c.m)
    if isinstance(c, CoordZM):
        return (c.x, c.y, c.z, c.m)
    raise TypeError(f"invalid coordinate type {type(c).__name__}")