[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hdbcore"
version = "0.1.0"
description = "Building blocks for a HANA database client: CESU-8 codec, spatial encoders, version handling, statistics and LOB holders"
requires-python = ">=3.10"
dependencies = []
keywords = ["hana", "hdb", "cesu-8", "wkb", "wkt", "geojson", "spatial", "metrics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hdbcore"]

[tool.pytest.ini_options]
addopts = "-ra"
