# hdbcore

Building blocks used by a HANA database client, in pure Python with no
third-party dependencies.

## Modules

- `hdbcore.cesu8` – CESU-8 encoding and decoding. Code points beyond the Basic
  Multilingual Plane are written as a surrogate pair of three-byte sequences.
  Functions: `rune_len`, `encode_rune`, `decode_rune`, `full_rune`, `size`,
  `string_size`, `replace_error_handler`, `default_encoder`, `default_decoder`.
  Classes: `Encoder` (UTF-8 to CESU-8) and `Decoder` (CESU-8 to UTF-8), each with
  `transform(src, at_eof)` returning the output and the number of source bytes
  consumed, plus `Encoder.encode(text)` and `Decoder.decode(data)`. Invalid input
  raises `DecodeError` unless an error handler is given;
  `replace_error_handler` substitutes U+FFFD.
- `hdbcore.geometry` – spatial types: `Coord`, `CoordZ`, `CoordM`, `CoordZM`,
  `Point`, `LineString`, `CircularString`, `Polygon`, `MultiPoint`,
  `MultiLineString`, `MultiPolygon`, `GeometryCollection` and their `Z`, `M` and
  `ZM` variants; helpers `nan`, `geo_type_name`, `geo_type` (returning a
  `GeoType`) and `coord_values`.
- `hdbcore.wkb` – `encode_wkb(g, is_xdr)` and `encode_ewkb(g, is_xdr, srid)`
  produce hex encoded (extended) well-known binary as bytes; `wkb_type` gives the
  type code including the dimension offset.
- `hdbcore.wkt` – `encode_wkt(g)` and `encode_ewkt(g, srid)` produce (extended)
  well-known text as bytes; NaN values are written as `NULL`.
- `hdbcore.geojson` – `encode_geojson(g)` produces GeoJSON as bytes; NaN values
  become `null`.
- `hdbcore.version` – `parse_version`, `parse_version_number`, `format_uint`,
  `VersionNumber`, `Version` and `Feature`. Comparison ignores the build id; an
  empty or all-zero version string is taken as `1.00.120`.
- `hdbcore.metrics` – `Histogram`, `Metrics`, `Stats`, `StatsHistogram`,
  `StatsConfig` and `load_stats_config`. `Metrics` is thread safe, forwards
  every measurement to an optional parent, records durations given in seconds
  as milliseconds, and rejects measurements after `close()` with `RuntimeError`.
- `hdbcore.randutil` – `rand_alphanum_bytes(n)` and `rand_alphanum_string(n)`
  from a cryptographic random source.
- `hdbcore.sqltrace` – `set_on(on)` and `is_on()` switch output of the
  `TRACE` logger to standard error on and off.
- `hdbcore.lob` – `Lob` (a `reader` as content source, a `writer` as
  destination for `scan`), `NullLob` and `LobError`.

## Installation

```
pip install hdbcore
```

## Examples

```python
from hdbcore.cesu8 import default_encoder, default_decoder

data = default_encoder().encode("\U00010400")
assert data == bytes([0xED, 0xA0, 0x81, 0xED, 0xB0, 0x80])
assert default_decoder().decode(data) == "\U00010400"
```

```python
from hdbcore.geometry import Coord, GeometryCollection, LineString, Point
from hdbcore.wkt import encode_ewkt
from hdbcore.geojson import encode_geojson

g = GeometryCollection([Point(1, 1), LineString([Coord(1, 1), Coord(2, 2)])])
print(encode_ewkt(g, 4711).decode())
# SRID=4711;GEOMETRYCOLLECTION (POINT (1 1),LINESTRING (1 1,2 2))
print(encode_geojson(g).decode())
# {"type":"GeometryCollection","geometries":[{"type":"Point","coordinates":[1,1]},{"type":"LineString","coordinates":[[1,1],[2,2]]}]}
```

```python
from hdbcore.version import Feature, parse_version

v = parse_version("2.00.045.00.1575639312")
print(v.sps(), v.has_feature(Feature.CONNECT_CLIENT_INFO))
# 4 True
```

## What this package does not do

It does not connect to a database. There is no wire protocol, no connection
or statement handling and no query execution; `Lob.scan` expects a source
object that provides its own `scan(writer)` method, and `Metrics` only holds
what its caller records.

## Running the tests

```
pip install -e ".[test]"
pytest
```