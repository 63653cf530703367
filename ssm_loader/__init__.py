"""Populate dataclass configuration records from AWS SSM Parameter Store."""

from .core import (
    Config,
    FetchError,
    FetchParameter,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    ParseError,
    PopulateError,
    UnsupportedKindError,
    populate,
    ssm_field,
)

__version__ = "1.0.0"
