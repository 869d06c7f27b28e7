"""NYSE stock filter: screen equities by valuation, momentum and dividend metrics."""

__version__ = "0.1.0"
