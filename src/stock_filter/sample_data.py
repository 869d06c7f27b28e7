# sample_data.py
# Static datasets: the sample rows served by /api/stocks and the constant the
# client falls back to when the endpoint can't be reached.

from typing import List

from .core.models import StockRecord

SAMPLE_STOCKS: List[StockRecord] = [
    StockRecord(symbol="AAPL", company="Apple Inc.", price=175.23, peRatio="28.5", rsi="65.2",
                pegRatio="2.1", dividendYield="0.52", paysDividends=True),
    StockRecord(symbol="MSFT", company="Microsoft Corp.", price=342.11, peRatio="32.1", rsi="58.7",
                pegRatio="1.8", dividendYield="0.68", paysDividends=True),
    StockRecord(symbol="GOOGL", company="Alphabet Inc.", price=138.45, peRatio="24.3", rsi="72.1",
                pegRatio="1.2", dividendYield="0.0", paysDividends=False),
    StockRecord(symbol="TSLA", company="Tesla Inc.", price=235.67, peRatio="45.2", rsi="55.4",
                pegRatio="2.8", dividendYield="0.0", paysDividends=False),
    StockRecord(symbol="JPM", company="JPMorgan Chase", price=145.89, peRatio="12.3", rsi="42.1",
                pegRatio="1.1", dividendYield="2.8", paysDividends=True),
]

# first three sample rows
FALLBACK_STOCKS: List[StockRecord] = SAMPLE_STOCKS[:3]
