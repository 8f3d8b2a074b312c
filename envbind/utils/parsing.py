import math
import re
import struct

_TRUE = {"1", "t", "true"}
_FALSE = {"0", "f", "false"}

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_SPECIAL_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_RE = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")


def _syntax_error(text: str, kind: str) -> ValueError:
    return ValueError(f'parsing "{text}" as {kind}: invalid syntax')


def _range_error(text: str, kind: str) -> ValueError:
    return ValueError(f'parsing "{text}" as {kind}: value out of range')


def parse_bool(text: str) -> bool:
    """Parses 1/t/true and 0/f/false, case-insensitively."""
    v = text.lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise _syntax_error(text, "bool")


def parse_int(text: str, bits: int = 64) -> int:
    """Parses a base-10 signed integer that fits in `bits`."""
    kind = f"int{bits}"
    if not _SIGNED_RE.fullmatch(text):
        raise _syntax_error(text, kind)
    value = int(text, 10)
    limit = 1 << (bits - 1)
    if value < -limit or value >= limit:
        raise _range_error(text, kind)
    return value


def parse_uint(text: str, bits: int = 64) -> int:
    """Parses a base-10 unsigned integer (no sign) that fits in `bits`."""
    kind = f"uint{bits}"
    if not _UNSIGNED_RE.fullmatch(text):
        raise _syntax_error(text, kind)
    value = int(text, 10)
    if value >= 1 << bits:
        raise _range_error(text, kind)
    return value


def parse_float(text: str, bits: int = 64) -> float:
    """
    Parses an ASCII decimal or hex (0x1p-2) float at 32 or 64-bit precision.
    Finite input that overflows the precision is a range error.
    """
    kind = f"float{bits}"
    if _SPECIAL_RE.fullmatch(text):
        return float(text)
    try:
        if _DECIMAL_RE.fullmatch(text):
            value = float(text)
        elif _HEX_RE.fullmatch(text):
            value = float.fromhex(text)
        else:
            raise _syntax_error(text, kind)
    except OverflowError:
        raise _range_error(text, kind) from None
    if bits == 32:
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            raise _range_error(text, kind) from None
    if math.isinf(value):
        raise _range_error(text, kind)
    return value
