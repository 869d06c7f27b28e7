"""
Screener state owned by the caller (web handler, CLI, UI layer).
Each search produces a new state; nothing is kept at module level.
"""

from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .filters import filter_stocks
from .models import ConstraintSet, StockRecord

NO_RESULTS_MESSAGE = "No stocks found matching your criteria. Try adjusting your filters."


class ScreenerState(BaseModel):
    """Last constraint values, last result set and the message to show."""

    model_config = ConfigDict(frozen=True)

    constraints: ConstraintSet = Field(default_factory=ConstraintSet)
    results: List[StockRecord] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.results)


def run_search(state: ScreenerState, records: Iterable[StockRecord]) -> ScreenerState:
    results = filter_stocks(records, state.constraints)
    return ScreenerState(
        constraints=state.constraints,
        results=results,
        error=None if results else NO_RESULTS_MESSAGE,
    )


def reset(state: ScreenerState) -> ScreenerState:
    """Clear every constraint, the results and any message."""
    return ScreenerState()
