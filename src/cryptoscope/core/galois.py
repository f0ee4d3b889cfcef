"""
GF(2^8) Arithmetic
Byte and 4-byte word arithmetic over the AES field (reducing polynomial 0x11b)

Addition is XOR. Multiplication is shift-and-add where each shift is an
"xtime" (multiply by x) folded with reduction by 0x1b.
"""

from dataclasses import dataclass
from typing import Tuple


# Low byte of x^8 + x^4 + x^3 + x + 1
REDUCING_CONSTANT = 0x1B


def xtime(value: int) -> int:
    """
    Multiply a byte by the field generator x

    Shift left one bit; if the bit shifted out was set, reduce by 0x1b.
    """
    doubled = (value << 1) & 0xFF
    if value & 0x80:
        doubled ^= REDUCING_CONSTANT
    return doubled


@dataclass(frozen=True)
class GaloisByte:
    """Single element of GF(2^8)"""
    value: int

    def __post_init__(self):
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"GF(2^8) element out of range: {self.value}")

    def add(self, other: 'GaloisByte') -> 'GaloisByte':
        return GaloisByte(self.value ^ other.value)

    def double(self) -> 'GaloisByte':
        return GaloisByte(xtime(self.value))

    def multiply(self, other: 'GaloisByte') -> 'GaloisByte':
        """
        Polynomial product modulo 0x11b

        Walks the multiplier's bits from least significant upward, doubling
        the running multiplicand each step and accumulating it whenever the
        current bit is set.
        """
        accumulator = 0
        running = self.value
        multiplier = other.value

        while multiplier:
            if multiplier & 0x1:
                accumulator ^= running
            running = xtime(running)
            multiplier >>= 1

        return GaloisByte(accumulator)

    def inverse(self) -> 'GaloisByte':
        """
        Multiplicative inverse, computed as self^254

        Raises:
            ZeroDivisionError: zero has no inverse
        """
        if self.value == 0:
            raise ZeroDivisionError("0 has no multiplicative inverse in GF(2^8)")

        result = GaloisByte(1)
        base = self
        exponent = 254
        while exponent:
            if exponent & 1:
                result = result.multiply(base)
            base = base.multiply(base)
            exponent >>= 1
        return result

    def __repr__(self) -> str:
        return f"GaloisByte(0x{self.value:02x})"


@dataclass(frozen=True)
class GaloisVector:
    """One AES state word: four GF(2^8) elements"""
    a0: GaloisByte
    a1: GaloisByte
    a2: GaloisByte
    a3: GaloisByte

    @classmethod
    def from_bytes(cls, b0: int, b1: int, b2: int, b3: int) -> 'GaloisVector':
        return cls(GaloisByte(b0), GaloisByte(b1), GaloisByte(b2), GaloisByte(b3))

    def to_bytes(self) -> bytes:
        return bytes(c.value for c in self.components())

    def components(self) -> Tuple[GaloisByte, GaloisByte, GaloisByte, GaloisByte]:
        return (self.a0, self.a1, self.a2, self.a3)

    def add(self, other: 'GaloisVector') -> 'GaloisVector':
        return GaloisVector(*(a.add(b) for a, b in zip(self.components(), other.components())))

    def dot(self, other: 'GaloisVector') -> GaloisByte:
        """Sum of pairwise products"""
        total = GaloisByte(0)
        for a, b in zip(self.components(), other.components()):
            total = total.add(a.multiply(b))
        return total

    def rotations(self) -> Tuple['GaloisVector', 'GaloisVector', 'GaloisVector', 'GaloisVector']:
        """Rows of the circulant matrix built from this vector"""
        a0, a1, a2, a3 = self.components()
        return (
            GaloisVector(a0, a3, a2, a1),
            GaloisVector(a1, a0, a3, a2),
            GaloisVector(a2, a1, a0, a3),
            GaloisVector(a3, a2, a1, a0),
        )

    def multiply(self, other: 'GaloisVector') -> 'GaloisVector':
        """
        Circulant-matrix-by-vector product (MixColumns form)

        Multiplying (02, 01, 01, 03) by a column applies MixColumns;
        (0e, 09, 0d, 0b) is its inverse.
        """
        return GaloisVector(*(row.dot(other) for row in self.rotations()))

    def __repr__(self) -> str:
        return "GaloisVector(" + ", ".join(f"0x{c.value:02x}" for c in self.components()) + ")"
