from __future__ import annotations  # allow forward refs + keep type hints lightweight

from .codec import BIG_ENDIAN, pad_magnitude

class BigInteger:  # Arbitrary-precision signed integer contract shared by every backend.
    """Backend-agnostic big integer.

    Every mutating operation comes as a pair: `iop` mutates the receiver and returns it,
    `op` returns `self.clone().iop(...)` and leaves the receiver untouched. Backends
    implement the in-place forms, the comparisons via `cmp`, the modular operations and
    the conversions; the pure forms and the Python operator protocol live here.

    Never mutate (via an `i`-method) a value that another part of the program still reads;
    clone it first.
    """

    # -- construction -------------------------------------------------------------------

    def clone(self) -> BigInteger:  # Deep, independent copy.
        raise NotImplementedError()

    _coercible = (int,)  # raw values a backend accepts as operands next to its own type

    def _c(self, other):  # Coerce int/raw/same-type operand into this backend.
        cls = type(self)
        if isinstance(other, cls):
            return other
        if isinstance(other, self._coercible):
            return cls(other)
        raise TypeError(f"expected {cls.__name__} or int, got {type(other).__name__}")

    def _shift_count(self, x, left):  # Signed left-shift count; right shifts clamp once the result saturates.
        x = self._c(x)
        amount = x.abs()
        if x.is_negative() == left:
            cap = self.bit_length() + 1
            return -(cap if amount.gt(cap) else amount.to_number())
        return amount.to_number()

    # -- in-place forms (backend) -------------------------------------------------------

    def iinc(self):  # self += 1
        raise NotImplementedError()

    def idec(self):  # self -= 1
        raise NotImplementedError()

    def iadd(self, x):  # self += x
        raise NotImplementedError()

    def isub(self, x):  # self -= x
        raise NotImplementedError()

    def imul(self, x):  # self *= x
        raise NotImplementedError()

    def idiv(self, x):  # self = trunc(self / x); DivisionByZero on x == 0.
        raise NotImplementedError()

    def imod(self, m):  # self = self mod |m| in [0, |m|); DivisionByZero on m == 0.
        raise NotImplementedError()

    def ileft_shift(self, x):  # self <<= x; negative x shifts right.
        raise NotImplementedError()

    def iright_shift(self, x):  # self >>= x (flooring); negative x shifts left.
        raise NotImplementedError()

    def ixor(self, x):  # self ^= x (two's complement)
        raise NotImplementedError()

    def ibitwise_and(self, x):  # self &= x (two's complement)
        raise NotImplementedError()

    def ibitwise_or(self, x):  # self |= x (two's complement)
        raise NotImplementedError()

    def iabs(self):  # self = |self|
        raise NotImplementedError()

    def inegate(self):  # self = -self
        raise NotImplementedError()

    # -- pure forms ---------------------------------------------------------------------

    def inc(self):
        return self.clone().iinc()

    def dec(self):
        return self.clone().idec()

    def add(self, x):
        return self.clone().iadd(x)

    def sub(self, x):
        return self.clone().isub(x)

    def mul(self, x):
        return self.clone().imul(x)

    def div(self, x):
        return self.clone().idiv(x)

    def mod(self, m):
        return self.clone().imod(m)

    def left_shift(self, x):
        return self.clone().ileft_shift(x)

    def right_shift(self, x):
        return self.clone().iright_shift(x)

    def xor(self, x):
        return self.clone().ixor(x)

    def bitwise_and(self, x):
        return self.clone().ibitwise_and(x)

    def bitwise_or(self, x):
        return self.clone().ibitwise_or(x)

    def abs(self):
        return self.clone().iabs()

    def negate(self):
        return self.clone().inegate()

    # -- modular ------------------------------------------------------------------------

    def mod_exp(self, e, n):  # self^e mod |n|.
        raise NotImplementedError()

    def mod_inv(self, n):  # x with self*x = 1 (mod |n|); InverseDoesNotExist if gcd != 1.
        raise NotImplementedError()

    def gcd(self, b):  # Non-negative greatest common divisor.
        raise NotImplementedError()

    # -- comparisons and predicates -----------------------------------------------------

    def cmp(self, x) -> int:  # -1, 0 or 1 by signed value.
        raise NotImplementedError()

    def equal(self, x) -> bool:
        return self.cmp(x) == 0

    def lt(self, x) -> bool:
        return self.cmp(x) < 0

    def lte(self, x) -> bool:
        return self.cmp(x) <= 0

    def gt(self, x) -> bool:
        return self.cmp(x) > 0

    def gte(self, x) -> bool:
        return self.cmp(x) >= 0

    def is_zero(self) -> bool:
        raise NotImplementedError()

    def is_one(self) -> bool:
        raise NotImplementedError()

    def is_negative(self) -> bool:
        raise NotImplementedError()

    def is_even(self) -> bool:
        raise NotImplementedError()

    # -- introspection and conversion ---------------------------------------------------

    def bit_length(self) -> int:  # Highest set bit of the magnitude + 1; 0 for zero.
        raise NotImplementedError()

    def byte_length(self) -> int:  # ceil(bit_length / 8).
        return (self.bit_length() + 7) // 8

    def get_bit(self, i: int) -> int:  # Bit i of the two's-complement value (0 or 1).
        raise NotImplementedError()

    def to_string(self) -> str:  # Canonical decimal.
        raise NotImplementedError()

    def to_number(self) -> int:  # Exact int within +-(2^53 - 1); PrecisionLoss otherwise.
        raise NotImplementedError()

    def _magnitude_bytes(self) -> bytes:  # Minimal big-endian bytes of |self| (empty for zero).
        raise NotImplementedError()

    def to_bytes(self, endian: str = BIG_ENDIAN, length: int | None = None) -> bytes:  # Unsigned magnitude bytes.
        return pad_magnitude(self._magnitude_bytes(), endian, length)

    # -- Python protocol ----------------------------------------------------------------

    __hash__ = None  # mutable through in-place forms

    def __eq__(self, other):
        try:
            return self.cmp(other) == 0
        except TypeError:
            return NotImplemented

    def __lt__(self, other): return self.lt(other)

    def __le__(self, other): return self.lte(other)

    def __gt__(self, other): return self.gt(other)

    def __ge__(self, other): return self.gte(other)

    def __add__(self, other): return self.add(other)

    def __radd__(self, other): return self._c(other).add(self)

    def __sub__(self, other): return self.sub(other)

    def __rsub__(self, other): return self._c(other).sub(self)

    def __mul__(self, other): return self.mul(other)

    def __rmul__(self, other): return self._c(other).mul(self)

    def __lshift__(self, other): return self.left_shift(other)

    def __rshift__(self, other): return self.right_shift(other)

    def __and__(self, other): return self.bitwise_and(other)

    def __xor__(self, other): return self.xor(other)

    def __or__(self, other): return self.bitwise_or(other)

    def __neg__(self): return self.negate()

    def __abs__(self): return self.abs()

    def __int__(self):  # Exact conversion, no range limit.
        raise NotImplementedError()

    def __bytes__(self): return self.to_bytes()

    def __str__(self): return self.to_string()

    def __repr__(self): return f"{type(self).__name__}({self.to_string()})"
