"""CESU-8 codec, spatial types and encoders, version parsing, statistics, SQL trace and LOB holders."""

__version__ = "0.1.0"