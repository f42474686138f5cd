"""Modular arithmetic over plain Python ints: reduction contexts, windowed exponentiation,
extended-Euclid inversion and gcd.

The exponentiation picks a Montgomery context for odd moduli (the radix is a power of two,
so it must be coprime to the modulus) and a plain `%` context otherwise. Callers pass a
positive modulus; sign handling and error translation live in the backends.
"""

from .errors import InverseDoesNotExist

WINDOW_BITS = 4  # fixed exponent window width

class PlainContext:  # Residues kept in canonical form, reduced with `%`.
    def __init__(self, n):  # Bind to a positive modulus.
        self.n = n

    def to_red(self, x):  # Canonical int -> context residue.
        return x % self.n

    def from_red(self, x):  # Context residue -> canonical int.
        return x

    def one(self):  # Multiplicative identity residue.
        return 1 % self.n

    def mul(self, a, b):  # Residue product.
        return (a * b) % self.n

class MontgomeryContext:  # Residues kept as x * R mod n with R = 2^k > n.
    def __init__(self, n):  # Precompute Montgomery constants for an odd modulus.
        if n % 2 == 0 or n < 3:
            raise ValueError("Montgomery modulus must be odd and >= 3")
        self.n = n
        self.k = n.bit_length()
        self.R = 1 << self.k
        self.mask = self.R - 1
        self.np = (-mod_inverse(n, self.R)) & self.mask
        self.r1 = self.R % n
        self.r2 = (self.r1 * self.r1) % n

    def _red(self, t):  # Montgomery reduction: t * R^-1 mod n, for 0 <= t < n*R.
        m = ((t & self.mask) * self.np) & self.mask
        u = (t + m * self.n) >> self.k
        return u - self.n if u >= self.n else u

    def to_red(self, x):
        return self._red((x % self.n) * self.r2)

    def from_red(self, x):
        return self._red(x)

    def one(self):
        return self.r1

    def mul(self, a, b):
        return self._red(a * b)

def reduction_context(n):  # Pick the reduction context suited to the modulus parity.
    return MontgomeryContext(n) if n & 1 and n > 1 else PlainContext(n)

def mod_pow(x, e, n):  # x^e mod n for e >= 0 and n >= 1, fixed-window over a reduction context.
    if n == 1:
        return 0
    ctx = reduction_context(n)
    base = ctx.to_red(x)
    table = [ctx.one(), base]
    for _ in range(2, 1 << WINDOW_BITS):
        table.append(ctx.mul(table[-1], base))
    acc = ctx.one()
    top = -(-e.bit_length() // WINDOW_BITS) * WINDOW_BITS
    for shift in range(top - WINDOW_BITS, -1, -WINDOW_BITS):
        for _ in range(WINDOW_BITS):
            acc = ctx.mul(acc, acc)
        digit = (e >> shift) & ((1 << WINDOW_BITS) - 1)
        if digit:
            acc = ctx.mul(acc, table[digit])
    return ctx.from_red(acc)

def gcd(a, b):  # Euclid on magnitudes; always non-negative.
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a

def mod_inverse(a, n):  # x with a*x = 1 (mod n), for n >= 1.
    a %= n
    # extended Euclid alone yields a bogus value when gcd != 1
    if gcd(a, n) != 1:
        raise InverseDoesNotExist("Inverse does not exist")
    t, new_t = 0, 1
    r, new_r = n, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    return t % n
