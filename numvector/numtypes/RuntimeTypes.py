import math
from fractions import Fraction

from numvector.config import Q_DEFAULT_FRAC_BITS, Q_DEFAULT_INT_BITS


class RuntimeType:
    def to_spec(self):
        raise NotImplementedError

    def __str__(self):
        raise NotImplementedError

    def copy(self):
        raise NotImplementedError

    def total_bits(self):
        raise NotImplementedError

    def __eq__(self, other):
        raise NotImplementedError

    def __hash__(self):
        raise NotImplementedError


class Q(RuntimeType):
    """Signed fixed-point type.

    `val` holds the raw two's-complement bits of a number with `int_bits`
    integer bits (sign included) and `frac_bits` fractional bits.
    Arithmetic widens the result format so that no operation overflows;
    comparisons and equality are by exact value, regardless of format.
    """
    def __init__(self, val: int, int_bits: int, frac_bits: int):
        self.val, self.int_bits, self.frac_bits = val, int_bits, frac_bits

        assert self.int_bits >= 1  # at least one bit for the sign
        assert self.frac_bits >= 0
        assert self.int_bits + self.frac_bits >= 2
        assert 0 <= self.val < (1 << self.total_bits())

    def __str__(self):
        return f"Q{self.int_bits}.{self.frac_bits}({str(self.to_spec())})"

    def __repr__(self):
        return str(self)

    def to_spec(self):
        return float(self.to_fraction())

    def to_fraction(self) -> Fraction:
        return Fraction(self.signed(), 1 << self.frac_bits)

    def signed(self) -> int:
        """Raw bits interpreted as a two's-complement integer."""
        sign_bit = self.sign_bit()
        return self.val - (sign_bit << self.total_bits())

    def sign_bit(self) -> int:
        return self.val >> (self.total_bits() - 1)

    def copy(self, val=None):
        if val is None:
            val = self.val
        return Q(val, self.int_bits, self.frac_bits)

    def total_bits(self):
        return self.int_bits + self.frac_bits

    @staticmethod
    def from_signed(x: int, int_bits: int, frac_bits: int) -> "Q":
        W = int_bits + frac_bits
        assert -(1 << (W - 1)) <= x < (1 << (W - 1)), (
            f"Value {x} does not fit into Q{int_bits}.{frac_bits}"
        )
        return Q(x & ((1 << W) - 1), int_bits, frac_bits)

    @staticmethod
    def from_int(x: int):
        if x < 0:
            magnitude = abs(x)
            int_bits = max(2, (magnitude - 1).bit_length() + 1)
            val = (1 << int_bits) + x
        else:
            int_bits = max(2, x.bit_length() + 1)
            val = x
        return Q(val, int_bits, 0)

    @staticmethod
    def from_float(x: float,
                   target_int: int = Q_DEFAULT_INT_BITS,
                   target_frac: int = Q_DEFAULT_FRAC_BITS):
        W = target_int + target_frac
        scale = 1 << target_frac

        q = int(round(x * scale))

        # Clamps overflow/underflow
        min_q = -(1 << (W - 1))
        max_q =  (1 << (W - 1)) - 1
        if q < min_q:
            q = min_q
        elif q > max_q:
            q = max_q

        return Q.from_signed(q, target_int, target_frac)

    ############# Arithmetic ###############

    def _scaled(self, frac_bits: int) -> int:
        # Signed value re-expressed with more fractional bits
        assert frac_bits >= self.frac_bits, "truncation is not implemented"
        return self.signed() << (frac_bits - self.frac_bits)

    def add(self, other: "Q") -> "Q":
        frac_bits = max(self.frac_bits, other.frac_bits)
        int_bits = max(self.int_bits, other.int_bits) + 1
        return Q.from_signed(self._scaled(frac_bits) + other._scaled(frac_bits), int_bits, frac_bits)

    def sub(self, other: "Q") -> "Q":
        frac_bits = max(self.frac_bits, other.frac_bits)
        int_bits = max(self.int_bits, other.int_bits) + 1
        return Q.from_signed(self._scaled(frac_bits) - other._scaled(frac_bits), int_bits, frac_bits)

    def mul(self, other: "Q") -> "Q":
        return Q.from_signed(
            self.signed() * other.signed(),
            self.int_bits + other.int_bits,
            self.frac_bits + other.frac_bits,
        )

    # One extra integer bit keeps -MIN representable
    def neg(self) -> "Q":
        return Q.from_signed(-self.signed(), self.int_bits + 1, self.frac_bits)

    def abs(self) -> "Q":
        return self.neg() if self.sign_bit() else self.copy()

    def div(self, other: "Q") -> "Q":
        """Quotient truncated toward zero, with max(frac_bits) fractional bits."""
        divisor = other.signed()
        if divisor == 0:
            raise ZeroDivisionError(f"{self} / {other}")
        frac_bits = max(self.frac_bits, other.frac_bits)
        int_bits = self.int_bits + other.frac_bits + 1
        numerator = self.signed() << (other.frac_bits + frac_bits - self.frac_bits)
        quotient = abs(numerator) // abs(divisor)
        if (numerator < 0) != (divisor < 0):
            quotient = -quotient
        return Q.from_signed(quotient, int_bits, frac_bits)

    def sqrt(self) -> "Q":
        """Square root rounded down, keeping frac_bits fractional bits."""
        if self.sign_bit():
            raise ValueError(f"Square root of a negative number: {self}")
        root = math.isqrt(self.signed() << self.frac_bits)
        return Q.from_signed(root, max(2, self.int_bits // 2 + 1), self.frac_bits)

    def _compare(self, other: "Q") -> int:
        frac_bits = max(self.frac_bits, other.frac_bits)
        diff = self._scaled(frac_bits) - other._scaled(frac_bits)
        return (diff > 0) - (diff < 0)

    def __add__(self, other):
        return self.add(other) if isinstance(other, Q) else NotImplemented

    def __sub__(self, other):
        return self.sub(other) if isinstance(other, Q) else NotImplemented

    def __mul__(self, other):
        return self.mul(other) if isinstance(other, Q) else NotImplemented

    def __truediv__(self, other):
        return self.div(other) if isinstance(other, Q) else NotImplemented

    def __neg__(self):
        return self.neg()

    def __abs__(self):
        return self.abs()

    def __lt__(self, other):
        return self._compare(other) < 0 if isinstance(other, Q) else NotImplemented

    def __gt__(self, other):
        return self._compare(other) > 0 if isinstance(other, Q) else NotImplemented

    def __le__(self, other):
        return self._compare(other) <= 0 if isinstance(other, Q) else NotImplemented

    def __ge__(self, other):
        return self._compare(other) >= 0 if isinstance(other, Q) else NotImplemented

    def __eq__(self, other):
        return (
            isinstance(other, Q)
            and self._compare(other) == 0
        )

    def __hash__(self):
        return hash(self.to_fraction())
