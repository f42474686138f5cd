from __future__ import annotations  # keep type hints lightweight

from .codec import check_safe_integer, format_decimal, is_byte_like, parse_decimal, parse_literal
from .errors import DivisionByZero, InvalidInput
from .interface import BigInteger
from .reduction import gcd, mod_inverse, mod_pow

class NativeBigInteger(BigInteger):  # BigInteger over Python's built-in unbounded int.
    def __init__(self, n=None):  # Build from int, decimal/0x string, big-endian bytes or another BigInteger.
        if n is None:
            raise InvalidInput("Invalid BigInteger input")
        if isinstance(n, int):
            self.value = int(n)
        elif isinstance(n, str):
            negative, digits, base = parse_literal(n)
            v = parse_decimal(digits) if base == 10 else int(digits, base)
            self.value = -v if negative else v
        elif is_byte_like(n):
            self.value = int.from_bytes(bytes(n), "big")
        elif isinstance(n, BigInteger):
            self.value = int(n)
        else:
            raise InvalidInput(f"Invalid BigInteger input type: {type(n).__name__}")

    def clone(self):
        return NativeBigInteger(self.value)

    def iinc(self):
        self.value += 1
        return self

    def idec(self):
        self.value -= 1
        return self

    def iadd(self, x):
        self.value += self._c(x).value
        return self

    def isub(self, x):
        self.value -= self._c(x).value
        return self

    def imul(self, x):
        self.value *= self._c(x).value
        return self

    def idiv(self, x):  # Quotient truncated toward zero.
        d = self._c(x).value
        if d == 0:
            raise DivisionByZero("division by zero")
        q = abs(self.value) // abs(d)
        self.value = -q if (self.value < 0) != (d < 0) else q
        return self

    def imod(self, m):
        d = self._c(m).value
        if d == 0:
            raise DivisionByZero("modulo by zero")
        self.value %= abs(d)
        return self

    def ileft_shift(self, x):
        k = self._shift_count(x, left=True)
        self.value = self.value << k if k >= 0 else self.value >> -k
        return self

    def iright_shift(self, x):
        k = self._shift_count(x, left=False)
        self.value = self.value << k if k >= 0 else self.value >> -k
        return self

    def ixor(self, x):
        self.value ^= self._c(x).value
        return self

    def ibitwise_and(self, x):
        self.value &= self._c(x).value
        return self

    def ibitwise_or(self, x):
        self.value |= self._c(x).value
        return self

    def iabs(self):
        self.value = abs(self.value)
        return self

    def inegate(self):
        self.value = -self.value
        return self

    def mod_exp(self, e, n):  # Windowed exponentiation; Montgomery for odd n, plain otherwise.
        e, n = self._c(e).value, abs(self._c(n).value)
        if n == 0:
            raise DivisionByZero("modulus is zero")
        base = self.value
        if e < 0:
            base, e = mod_inverse(base, n), -e
        return NativeBigInteger(mod_pow(base, e, n))

    def mod_inv(self, n):
        n = abs(self._c(n).value)
        if n == 0:
            raise DivisionByZero("modulus is zero")
        return NativeBigInteger(mod_inverse(self.value, n))

    def gcd(self, b):
        return NativeBigInteger(gcd(self.value, self._c(b).value))

    def cmp(self, x):
        v = self._c(x).value
        return (self.value > v) - (self.value < v)

    def is_zero(self):
        return self.value == 0

    def is_one(self):
        return self.value == 1

    def is_negative(self):
        return self.value < 0

    def is_even(self):
        return self.value & 1 == 0

    def bit_length(self):
        return self.value.bit_length()

    def get_bit(self, i):
        i = int(i)
        if i < 0:
            raise InvalidInput("bit index must be non-negative")
        return (self.value >> i) & 1

    def to_string(self):
        return format_decimal(self.value)

    def to_number(self):
        return check_safe_integer(self.value)

    def _magnitude_bytes(self):
        v = abs(self.value)
        return v.to_bytes((v.bit_length() + 7) // 8, "big")

    def __int__(self):
        return self.value
