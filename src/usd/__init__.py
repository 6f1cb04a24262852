"""
usd — Fixed-point US dollar amounts

An immutable money type that stores every amount as a whole number of cents,
so sums and differences never lose precision and never overflow.

================================================================================
QUICK START
================================================================================

    from usd import Money

    # Dollars and cents (cents above 99 carry into dollars)
    price = Money.new(15, 29)
    paid = Money.new(14, 31)

    # Arithmetic returns new values
    change = price - paid
    print(change)                 # $0.98

    # Negative amounts keep positive cent digits
    debt = Money.new(15, 95) + Money.new(-22, 99)
    debt.dollars, debt.cents      # (-7, 4)
    print(debt)                   # -$7.04

    # Totals
    total = sum([price, paid], Money.zero())

================================================================================
"""

from .core import (
    Money,
    CENTS_PER_DOLLAR,
)

__version__ = "1.0.0"

__all__ = [
    "Money",
    "CENTS_PER_DOLLAR",
]
