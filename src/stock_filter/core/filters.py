"""
Filter evaluation: keep the stock records that satisfy every supplied bound.
Pure functions, no I/O; safe to call once per search with fresh inputs.
"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

from .models import ConstraintSet, DividendPreference, StockRecord

logger = logging.getLogger(__name__)

# (record attribute, lower-bound attribute, upper-bound attribute)
RANGE_CHECKS: Tuple[Tuple[str, str, str], ...] = (
    ("price", "price_min", "price_max"),
    ("pe_ratio", "pe_ratio_min", "pe_ratio_max"),
    ("rsi", "rsi_min", "rsi_max"),
    ("peg_ratio", "peg_ratio_min", "peg_ratio_max"),
    ("dividend_yield", "dividend_yield_min", "dividend_yield_max"),
)


def parse_decimal(val) -> Optional[float]:
    """
    Parse a metric if numeric or numeric-like string ('28.5', ' 1,024.5 '); else None.
    NaN counts as unparsable.
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        num = float(val)
    else:
        s = str(val).replace(",", "").strip()
        try:
            num = float(s)
        except ValueError:
            return None
    if math.isnan(num):
        return None
    return num


def _passes_range(record: StockRecord, field: str, low: Optional[float], high: Optional[float]) -> bool:
    if low is None and high is None:
        return True
    value = parse_decimal(getattr(record, field))
    if value is None:
        logger.debug("excluding %s: %s=%r is not a number", record.symbol, field, getattr(record, field))
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def _passes_dividends(record: StockRecord, preference: DividendPreference) -> bool:
    if preference is DividendPreference.YES:
        return record.pays_dividends
    if preference is DividendPreference.NO:
        return not record.pays_dividends
    return True


def matches(record: StockRecord, constraints: ConstraintSet) -> bool:
    """True if *record* passes every check whose bound is present in *constraints*."""
    for field, low_attr, high_attr in RANGE_CHECKS:
        if not _passes_range(record, field, getattr(constraints, low_attr), getattr(constraints, high_attr)):
            return False
    return _passes_dividends(record, constraints.pays_dividends)


def filter_stocks(records: Iterable[StockRecord], constraints: ConstraintSet) -> List[StockRecord]:
    """Return the records matching *constraints*, in input order.

    Bounds are inclusive. A record whose metric cannot be parsed fails any
    check on that metric; it is dropped rather than raising.
    """
    records = list(records)
    if constraints.is_empty():
        return records
    kept = [r for r in records if matches(r, constraints)]
    logger.debug("filter kept %d of %d records", len(kept), len(records))
    return kept
