"""
Illustrative computation: $0.00 - $15.31.

    $ python -m usd
    -$15.31

Set USD_LOG_LEVEL=DEBUG to see the library's debug records. Unknown level
names fall back to WARNING.
"""

import logging
import os

from .core import Money


logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = logging.WARNING


def main() -> int:
    raw_level = os.environ.get("USD_LOG_LEVEL", "WARNING")
    level = logging.getLevelName(raw_level.strip().upper())
    known = isinstance(level, int)

    logging.basicConfig(
        level=level if known else DEFAULT_LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    if not known:
        logger.warning("Unknown USD_LOG_LEVEL %r, using WARNING", raw_level)

    start = Money.new(0, 0)
    spent = Money.new(15, 31)
    balance = start - spent
    logger.debug("%r - %r = %r", start, spent, balance)

    print(balance)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
