from __future__ import annotations  # keep type hints lightweight

import functools  # cached powers of ten
import re  # strict literal grammar

from .errors import InsufficientLength, InvalidInput, PrecisionLoss

BIG_ENDIAN = "be"  # most significant byte first
LITTLE_ENDIAN = "le"  # least significant byte first
MAX_SAFE_INTEGER = (1 << 53) - 1  # largest integer an IEEE-754 double holds exactly

_LITERAL = re.compile(r"(-?)(?:0x([0-9a-fA-F]+)|([0-9]+))")  # [-]0x<hex> or [-]<decimal>

def parse_literal(s: str) -> tuple[bool, str, int]:  # Split a string literal into (negative, digits, base).
    m = _LITERAL.fullmatch(s)
    if m is None:
        raise InvalidInput(f"Invalid BigInteger input: {s!r}")
    sign, hex_digits, dec_digits = m.groups()
    if hex_digits is not None:
        return sign == "-", hex_digits, 16
    return sign == "-", dec_digits, 10

DECIMAL_CHUNK = 1000  # digits converted directly; well below the interpreter's int/str digit limit
_CHUNK_BOUND = 10**DECIMAL_CHUNK

@functools.lru_cache(maxsize=None)
def _pow10(k: int) -> int:  # 10**k, cached across the recursion.
    return 10**k

def parse_decimal(digits: str) -> int:  # Decimal digits -> int, split in halves so each int() stays small.
    if len(digits) <= DECIMAL_CHUNK:
        return int(digits, 10)
    k = len(digits) // 2
    return parse_decimal(digits[:-k]) * _pow10(k) + parse_decimal(digits[-k:])

def format_decimal(v: int) -> str:  # int -> canonical decimal, split on powers of ten so each str() stays small.
    if v < 0:
        return "-" + format_decimal(-v)
    if v < _CHUNK_BOUND:
        return str(v)
    k = (v.bit_length() * 30103 // 100000) // 2  # about half the digit count, always below it
    hi, lo = divmod(v, _pow10(k))
    return format_decimal(hi) + format_decimal(lo).zfill(k)

def is_byte_like(n) -> bool:  # bytes, bytearray or memoryview input.
    return isinstance(n, (bytes, bytearray, memoryview))

def check_endian(endian: str) -> str:  # Validate an endianness tag.
    if endian not in (BIG_ENDIAN, LITTLE_ENDIAN):
        raise InvalidInput(f"endian must be {BIG_ENDIAN!r} or {LITTLE_ENDIAN!r}, got {endian!r}")
    return endian

def pad_magnitude(raw: bytes, endian: str = BIG_ENDIAN, length: int | None = None) -> bytes:  # Lay out minimal big-endian magnitude bytes.
    """Zero-pad `raw` (minimal big-endian magnitude) to `length` and reorder for `endian`.

    Padding always lands on the high-order end: in front for big-endian output and at
    the tail for little-endian output. A `length` shorter than `raw` is rejected rather
    than truncated.
    """
    check_endian(endian)
    if length is not None:
        length = int(length)
        if length < len(raw):
            raise InsufficientLength(f"value needs {len(raw)} bytes, requested length is {length}")
        raw = b"\x00" * (length - len(raw)) + raw
    return raw if endian == BIG_ENDIAN else raw[::-1]

def check_safe_integer(v: int) -> int:  # Return v if it fits the exact double range.
    if -MAX_SAFE_INTEGER <= v <= MAX_SAFE_INTEGER:
        return v
    raise PrecisionLoss("Number can only safely store up to 53 bits")
