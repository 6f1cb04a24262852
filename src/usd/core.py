"""
core.py — Fixed-point US dollar amounts

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   A single signed integer counted in whole cents (total_cents).
   Dollars and cents are views computed from it, never stored.

2. ARBITRARY PRECISION
   Python int has no fixed width, so there is no overflow path:
   every construction and every operation is total.

3. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance.
   No side effects, safe to share between threads.

4. NO IMPLICIT CONVERSION
   Constructors accept int only. Operations with int/float/Decimal raise
   TypeError: convert explicitly with Money.new() or Money.from_cents().

================================================================================
NORMALIZATION
================================================================================

Money.new(dollars, cents) accepts cents >= 100 and carries them into the
dollar part. The cents follow the sign of the dollars:

    Money.new(1, 1015)   ->   $11.15
    Money.new(-1, 115)   ->   -$2.15
    Money.new(-8, 96)    ->   -$8.96

Zero dollars count as positive, so cents alone never produce a negative
amount.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
import logging


logger = logging.getLogger(__name__)

CENTS_PER_DOLLAR = 100


def _require_int(name: str, value: object) -> int:
    """Reject anything that is not a plain int (bool included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{name} must be int, not {type(value).__name__}. "
            f"Money never converts implicitly from other numeric types."
        )
    return value


# ==============================================================================
# MONEY CLASS
# ==============================================================================

@dataclass(frozen=True, order=False)
class Money:
    """
    A signed amount of US dollars with exactly two decimal places.

    INVARIANTS:
    1. _total_cents is always int (no floating point, no width limit)
    2. 0 <= cents <= 99 for every amount, positive or negative
    3. dollars * 100 + sign * cents == total_cents, sign taken from the total

    USAGE:
        price = Money.new(15, 29)
        paid = Money.new(14, 31)
        print(price - paid)   # $0.98
    """
    _total_cents: int

    def __post_init__(self) -> None:
        _require_int("total_cents", self._total_cents)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, dollars: int, cents: int) -> Money:
        """
        Build from a whole-dollar count and a non-negative cent count.

        cents may exceed 99: the excess is carried into the dollars, in the
        same direction as the dollar sign. Zero dollars are treated as
        positive.

        Raises:
            TypeError: if dollars or cents is not an int
            ValueError: if cents is negative
        """
        _require_int("dollars", dollars)
        _require_int("cents", cents)
        if cents < 0:
            raise ValueError(f"cents must be >= 0, got: {cents}")

        carry, remainder = divmod(cents, CENTS_PER_DOLLAR)
        sign = -1 if dollars < 0 else 1

        if carry:
            logger.debug(
                "Carrying %d cents into dollars: %d -> %d",
                cents, dollars, dollars + sign * carry,
            )

        return cls.from_cents(
            (dollars + sign * carry) * CENTS_PER_DOLLAR + sign * remainder
        )

    @classmethod
    def from_cents(cls, total_cents: int) -> Money:
        """Wrap a signed cent count. No normalization, already canonical."""
        return cls(_total_cents=total_cents)

    @classmethod
    def zero(cls) -> Money:
        """$0.00. Useful as the start value for sum()."""
        return cls(_total_cents=0)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def total_cents(self) -> int:
        """The whole amount in cents. Sole source of truth."""
        return self._total_cents

    @property
    def dollars(self) -> int:
        """
        Whole dollars, truncated toward zero.

        Integer-only: // floors, so it is applied to the absolute value.
        """
        whole = abs(self._total_cents) // CENTS_PER_DOLLAR
        return -whole if self._total_cents < 0 else whole

    @property
    def cents(self) -> int:
        """
        Cent digits of the amount, always in [0, 99].

        Python's % is already the non-negative (Euclidean) remainder, so for
        a negative total it counts up from the next lower dollar; flip it
        back to get the digits shown after the decimal point.
        """
        remainder = self._total_cents % CENTS_PER_DOLLAR
        if self._total_cents < 0 and remainder != 0:
            return CENTS_PER_DOLLAR - remainder
        return remainder

    def is_zero(self) -> bool:
        return self._total_cents == 0

    def is_negative(self) -> bool:
        return self._total_cents < 0

    def is_positive(self) -> bool:
        return self._total_cents > 0

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Money) -> Money:
        """Sum of the two amounts."""
        self._check_money(other, "+")
        return Money.from_cents(self._total_cents + other._total_cents)

    def sub(self, other: Money) -> Money:
        """Difference, as addition of the inverse: a - b == a + (-b)."""
        self._check_money(other, "-")
        return self.add(-other)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return self._reject(other, "+")
        return self.add(other)

    def __radd__(self, other: object) -> Money:
        # sum() without a start value begins from the int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return self._reject(other, "+")

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return self._reject(other, "-")
        return self.sub(other)

    def __neg__(self) -> Money:
        return Money.from_cents(-self._total_cents)

    def __abs__(self) -> Money:
        return Money.from_cents(abs(self._total_cents))

    def _check_money(self, other: object, op: str) -> None:
        if not isinstance(other, Money):
            self._reject(other, op)

    @staticmethod
    def _reject(other: object, op: str) -> Money:
        raise TypeError(
            f"Operation not allowed: Money {op} {type(other).__name__}. "
            f"Use Money.new() or Money.from_cents() to convert."
        )

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return self._total_cents == other._total_cents
        return NotImplemented

    def __lt__(self, other: Money) -> bool:
        self._check_comparable(other)
        return self._total_cents < other._total_cents

    def __le__(self, other: Money) -> bool:
        self._check_comparable(other)
        return self._total_cents <= other._total_cents

    def __gt__(self, other: Money) -> bool:
        self._check_comparable(other)
        return self._total_cents > other._total_cents

    def __ge__(self, other: Money) -> bool:
        self._check_comparable(other)
        return self._total_cents >= other._total_cents

    def _check_comparable(self, other: object) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot compare Money with {type(other).__name__}")

    def __hash__(self) -> int:
        return hash(self._total_cents)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def display(self) -> str:
        """
        Canonical text: "$D.CC" or "-$D.CC".

        The sign comes from the total, not from the dollar part: -4 cents
        has zero dollars but still prints as "-$0.04".
        """
        sign = "-" if self._total_cents < 0 else ""
        return f"{sign}${abs(self.dollars)}.{self.cents:02d}"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Money.from_cents({self._total_cents})"
