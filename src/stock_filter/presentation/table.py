"""Plain-text rendering of a result set."""

from typing import List, Sequence

from ..core.filters import parse_decimal
from ..core.models import StockRecord
from ..core.session import NO_RESULTS_MESSAGE

COLUMNS = ["Symbol", "Company", "Price", "P/E Ratio", "RSI", "PEG Ratio", "Div. Yield", "Dividends"]


def _display(val) -> str:
    return "" if val is None else str(val)


def _price(val) -> str:
    num = parse_decimal(val)
    return f"${num:.2f}" if num is not None else _display(val)


def _row(stock: StockRecord) -> List[str]:
    return [
        stock.symbol,
        stock.company,
        _price(stock.price),
        _display(stock.pe_ratio),
        _display(stock.rsi),
        _display(stock.peg_ratio),
        f"{_display(stock.dividend_yield)}%",
        "Yes" if stock.pays_dividends else "No",
    ]


def format_results_table(records: Sequence[StockRecord]) -> str:
    if not records:
        return NO_RESULTS_MESSAGE
    rows = [COLUMNS] + [_row(r) for r in records]
    widths = [max(len(row[i]) for row in rows) for i in range(len(COLUMNS))]
    lines = [f"Search Results ({len(records)} stocks found)"]
    for n, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip())
        if n == 0:
            lines.append("  ".join("-" * w for w in widths))
    return "\n".join(lines)
