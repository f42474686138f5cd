"""BigInteger backed by the GMP engine through gmpy2.

Division, modular exponentiation, inversion and gcd go straight to the engine's routines;
only sign conventions and error types are adjusted so the results match
`NativeBigInteger` bit for bit.
"""

from __future__ import annotations  # keep type hints lightweight

import gmpy2  # GMP arbitrary-precision engine

from .codec import check_safe_integer, is_byte_like, parse_literal
from .errors import DivisionByZero, InverseDoesNotExist, InvalidInput
from .interface import BigInteger

_ZERO = gmpy2.mpz(0)
_ONE = gmpy2.mpz(1)

class GmpBigInteger(BigInteger):  # BigInteger over gmpy2.mpz.
    _coercible = (int, gmpy2.mpz)

    def __init__(self, n=None):  # Build from int/mpz, decimal/0x string, big-endian bytes or another BigInteger.
        if n is None:
            raise InvalidInput("Invalid BigInteger input")
        if isinstance(n, (int, gmpy2.mpz)):
            self.value = gmpy2.mpz(n)
        elif isinstance(n, str):
            negative, digits, base = parse_literal(n)
            v = gmpy2.mpz(digits, base)
            self.value = -v if negative else v
        elif is_byte_like(n):
            self.value = gmpy2.mpz(bytes(n).hex() or "0", 16)
        elif isinstance(n, BigInteger):
            self.value = gmpy2.mpz(int(n))
        else:
            raise InvalidInput(f"Invalid BigInteger input type: {type(n).__name__}")

    def clone(self):  # mpz is immutable, so sharing it is a deep copy.
        return GmpBigInteger(self.value)

    def _modulus(self, n):  # |n| as mpz; DivisionByZero on zero.
        n = abs(self._c(n).value)
        if n == 0:
            raise DivisionByZero("modulus is zero")
        return n

    def iinc(self):
        self.value += _ONE
        return self

    def idec(self):
        self.value -= _ONE
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

    def idiv(self, x):
        d = self._c(x).value
        if d == 0:
            raise DivisionByZero("division by zero")
        self.value = gmpy2.t_div(self.value, d)
        return self

    def imod(self, m):
        d = self._c(m).value
        if d == 0:
            raise DivisionByZero("modulo by zero")
        self.value = gmpy2.f_mod(self.value, abs(d))
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

    def mod_exp(self, e, n):
        e, n = self._c(e).value, self._modulus(n)
        if n == 1:
            return GmpBigInteger(_ZERO)
        base = gmpy2.f_mod(self.value, n)
        if e < 0:
            base, e = self._invert(base, n), -e
        return GmpBigInteger(gmpy2.powmod(base, e, n))

    @staticmethod
    def _invert(a, n):  # Inverse of a mod n (n > 1), with an explicit coprimality check.
        if gmpy2.gcd(a, n) != 1:
            raise InverseDoesNotExist("Inverse does not exist")
        return gmpy2.invert(gmpy2.f_mod(a, n), n)

    def mod_inv(self, n):
        n = self._modulus(n)
        if n == 1:
            return GmpBigInteger(_ZERO)
        return GmpBigInteger(self._invert(self.value, n))

    def gcd(self, b):
        return GmpBigInteger(gmpy2.gcd(self.value, self._c(b).value))

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
        return gmpy2.is_even(self.value)

    def bit_length(self):
        return self.value.bit_length()

    def get_bit(self, i):
        i = int(i)
        if i < 0:
            raise InvalidInput("bit index must be non-negative")
        return int(gmpy2.bit_test(self.value, i))

    def to_string(self):
        return str(self.value)

    def to_number(self):
        return check_safe_integer(int(self.value))

    def _magnitude_bytes(self):
        if self.value == 0:
            return b""
        digits = format(abs(self.value), "x")
        return bytes.fromhex(digits if len(digits) % 2 == 0 else "0" + digits)

    def __int__(self):
        return int(self.value)
