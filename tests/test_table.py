from stock_filter.core.models import StockRecord
from stock_filter.presentation.table import format_results_table


def test_table_columns_and_formatting(apple, google):
    text = format_results_table([apple, google])
    lines = text.splitlines()
    assert lines[0] == "Search Results (2 stocks found)"
    assert lines[1].split()[:2] == ["Symbol", "Company"]
    assert "$175.23" in text
    assert "0.52%" in text
    assert "Yes" in lines[3] and "No" in lines[4]


def test_table_price_given_as_text():
    r = StockRecord(symbol="X", company="X Co", price="12.5")
    assert "$12.50" in format_results_table([r])


def test_table_empty():
    assert format_results_table([]).startswith("No stocks found")
