import json
import math

import pytest

from hdbcore.geojson import encode_geojson
from hdbcore.geometry import (
    Coord,
    GeometryCollection,
    LineString,
    MultiPoint,
    Point,
    PointM,
    PointZ,
    Polygon,
    nan,
)


def test_example_geojson():
    g = GeometryCollection([Point(1, 1), LineString([Coord(1, 1), Coord(2, 2)])])
    assert encode_geojson(g) == (
        b'{"type":"GeometryCollection","geometries":[{"type":"Point","coordinates":[1,1]},'
        b'{"type":"LineString","coordinates":[[1,1],[2,2]]}]}'
    )


def test_point_m_with_nan():
    assert encode_geojson(PointM(-3.0, -4.5, nan())) == (
        b'{"type":"Point","coordinates":[-3,-4.5,0,null]}'
    )


def test_point_z():
    assert encode_geojson(PointZ(-3.0, -4.5, 5.0)) == (
        b'{"type":"Point","coordinates":[-3,-4.5,5]}'
    )


def test_empty_line_string():
    assert encode_geojson(LineString()) == b'{"type":"LineString","coordinates":[]}'


def test_exponent_formatting():
    assert encode_geojson(Point(1e21, 1e-7)) == (
        b'{"type":"Point","coordinates":[1e+21,1e-7]}'
    )


def test_small_fixed_formatting():
    assert encode_geojson(Point(0.000001, 2.5)) == (
        b'{"type":"Point","coordinates":[0.000001,2.5]}'
    )


def test_polygon_is_valid_json():
    g = Polygon([[Coord(6, 7), Coord(10, 3), Coord(10, 10), Coord(6, 7)]])
    assert json.loads(encode_geojson(g)) == {
        "type": "Polygon",
        "coordinates": [[[6, 7], [10, 3], [10, 10], [6, 7]]],
    }


def test_multi_point():
    assert json.loads(encode_geojson(MultiPoint([Point(3, 3), Point(5, 4)]))) == {
        "type": "MultiPoint",
        "coordinates": [[3, 3], [5, 4]],
    }


def test_infinity_rejected():
    with pytest.raises(ValueError):
        encode_geojson(Point(math.inf, 1))