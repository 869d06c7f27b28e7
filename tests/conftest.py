import pytest

from stock_filter.core.models import StockRecord


@pytest.fixture
def apple():
    return StockRecord(symbol="AAPL", company="Apple Inc.", price=175.23, peRatio=28.5, rsi=65.2,
                       pegRatio=2.1, dividendYield=0.52, paysDividends=True)


@pytest.fixture
def google():
    return StockRecord(symbol="GOOGL", company="Alphabet Inc.", price=138.45, peRatio="24.3", rsi="72.1",
                       pegRatio="1.2", dividendYield="0.0", paysDividends=False)


@pytest.fixture
def jpm():
    return StockRecord(symbol="JPM", company="JPMorgan Chase", price=145.89, peRatio="12.3", rsi="42.1",
                       pegRatio="1.1", dividendYield="2.8", paysDividends=True)


@pytest.fixture
def stocks(apple, google, jpm):
    return [apple, google, jpm]
