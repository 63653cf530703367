import logging
import math
import re
import struct
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ParseError, UnsupportedKindError
from .fields import Float32, Float64, Int8, Int16, Int32, Int64


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Kind:
    """Scalar kind a parameter value is coerced into."""

    name: str
    family: str
    bits: int = 0


STRING = Kind("string", "string")
BOOL = Kind("bool", "bool")
INT8 = Kind("int8", "int", 8)
INT16 = Kind("int16", "int", 16)
INT32 = Kind("int32", "int", 32)
INT64 = Kind("int64", "int", 64)
FLOAT32 = Kind("float32", "float", 32)
FLOAT64 = Kind("float64", "float", 64)

KINDS: Dict[Any, Kind] = {
    str: STRING,
    bool: BOOL,
    int: INT64,
    Int8: INT8,
    Int16: INT16,
    Int32: INT32,
    Int64: INT64,
    float: FLOAT64,
    Float32: FLOAT32,
    Float64: FLOAT64,
}

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# Base-detecting integer literal: 0x / 0o / 0b prefixes, legacy leading-zero octal,
# underscores only between digits (or right after a prefix).
_INT_LITERAL = re.compile(
    r"[+-]?(?:"
    r"0[xX](?:_?[0-9a-fA-F])+"
    r"|0[oO](?:_?[0-7])+"
    r"|0[bB](?:_?[01])+"
    r"|0(?:_?[0-7])*"
    r"|[1-9](?:_?[0-9])*"
    r")"
)
_DECIMAL_FLOAT = re.compile(
    r"[+-]?(?=\.?[0-9])(?:[0-9](?:_?[0-9])*)?(?:\.(?:[0-9](?:_?[0-9])*)?)?(?:[eE][+-]?[0-9](?:_?[0-9])*)?"
)
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?=\.?[0-9a-fA-F])(?:[0-9a-fA-F](?:_?[0-9a-fA-F])*)?"
    r"(?:\.(?:[0-9a-fA-F](?:_?[0-9a-fA-F])*)?)?[pP][+-]?[0-9](?:_?[0-9])*"
)
_SPECIAL_FLOAT = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)

_INT_BASES = {"x": 16, "o": 8, "b": 2}


def _type_name(tp: Any) -> str:
    name = getattr(tp, "__name__", None)
    return name if isinstance(name, str) else repr(tp)


def resolve_kind(field_name: str, tp: Any) -> Kind:
    try:
        return KINDS[tp]
    except (KeyError, TypeError):
        raise UnsupportedKindError(field_name, _type_name(tp)) from None


def parse_int(raw: str, bits: int = 64) -> int:
    """Parse a signed integer literal, detecting the base from its prefix.

    Raises ValueError when the literal is malformed or out of range for ``bits``.
    """
    if not _INT_LITERAL.fullmatch(raw):
        raise ValueError("invalid syntax")
    sign = -1 if raw[0] == "-" else 1
    body = raw.lstrip("+-").replace("_", "")
    if len(body) > 1 and body[1].lower() in _INT_BASES:
        value = int(body[2:], _INT_BASES[body[1].lower()])
    elif len(body) > 1 and body[0] == "0":
        value = int(body[1:], 8)
    else:
        value = int(body, 10)
    value *= sign

    # The literal has to fit 64 bits before it is narrowed
    for width in (64, bits):
        if not -(1 << (width - 1)) <= value <= (1 << (width - 1)) - 1:
            raise ValueError(f"value out of range for int{width}")
    return value


def parse_float(raw: str, bits: int = 64) -> float:
    if _SPECIAL_FLOAT.fullmatch(raw):
        return _narrow_float(float(raw), bits)
    try:
        if _HEX_FLOAT.fullmatch(raw):
            value = float.fromhex(raw.replace("_", ""))
        elif _DECIMAL_FLOAT.fullmatch(raw):
            value = float(raw.replace("_", ""))
        else:
            raise ValueError("invalid syntax")
    except OverflowError:
        raise ValueError("value out of range for float64") from None
    if math.isinf(value):
        raise ValueError("value out of range for float64")
    return _narrow_float(value, bits)


def _narrow_float(value: float, bits: int) -> float:
    if bits != 32:
        return value
    try:
        # "<f" raises OverflowError past float32 range
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        raise ValueError("value out of range for float32") from None


def parse_bool(raw: str) -> bool:
    if raw in TRUE_LITERALS:
        return True
    if raw in FALSE_LITERALS:
        return False
    raise ValueError("invalid syntax")


def coerce(field_name: str, raw: str, kind: Kind, path: Optional[str] = None) -> Any:
    """Convert a raw parameter value into ``kind``.

    Strings pass through verbatim. Every other failure is reported as a
    ParseError carrying the field, the raw value and the target kind.
    """
    if kind.family == "string":
        return raw
    try:
        if kind.family == "int":
            return parse_int(raw, kind.bits)
        if kind.family == "float":
            return parse_float(raw, kind.bits)
        if kind.family == "bool":
            return parse_bool(raw)
    except ValueError as e:
        logger.debug(f"Rejected value for {field_name} as {kind.name}: {e}")
        raise ParseError(field_name, raw, kind.name, str(e), path=path) from e
    raise UnsupportedKindError(field_name, kind.name)
