"""
Data models for the stock filter.
No filtering logic, only Pydantic models and typed structures.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Suppliers hand metrics over either as numbers or as numeric text ("28.5").
Metric = Union[float, str, None]


class DividendPreference(str, Enum):
    """Tri-state yes/no radio value. ANY means the field was left unset."""

    ANY = ""
    YES = "yes"
    NO = "no"


class StockRecord(BaseModel):
    """One row as produced by the data supplier.

    Metric values are kept exactly as supplied; they are parsed to decimals
    by the filter, so a malformed value only affects the checks that use it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    symbol: str = Field(..., description="Ticker symbol")
    company: str = Field(..., description="Company name")
    price: Metric = Field(None, description="Last price in currency units")
    pe_ratio: Metric = Field(None, alias="peRatio", description="Price-to-earnings ratio")
    rsi: Metric = Field(None, description="Relative Strength Index, 0-100")
    peg_ratio: Metric = Field(None, alias="pegRatio", description="P/E divided by earnings growth")
    dividend_yield: Metric = Field(None, alias="dividendYield", description="Dividend yield in percent, 0 if none")
    pays_dividends: bool = Field(False, alias="paysDividends", description="Whether the company pays dividends")

    def to_wire(self) -> dict:
        """camelCase dict as served over HTTP."""
        return self.model_dump(by_alias=True)


class ConstraintSet(BaseModel):
    """Optional inclusive bounds; a bound left as None imposes no restriction.

    profit_expectation_1/2 are carried along with the form but are not used
    when filtering.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)

    price_min: Optional[float] = Field(None, alias="priceMin")
    price_max: Optional[float] = Field(None, alias="priceMax")
    pe_ratio_min: Optional[float] = Field(None, alias="peRatioMin")
    pe_ratio_max: Optional[float] = Field(None, alias="peRatioMax")
    rsi_min: Optional[float] = Field(None, alias="rsiMin")
    rsi_max: Optional[float] = Field(None, alias="rsiMax")
    peg_ratio_min: Optional[float] = Field(None, alias="pegRatioMin")
    peg_ratio_max: Optional[float] = Field(None, alias="pegRatioMax")
    dividend_yield_min: Optional[float] = Field(None, alias="dividendYieldMin")
    dividend_yield_max: Optional[float] = Field(None, alias="dividendYieldMax")
    pays_dividends: DividendPreference = Field(DividendPreference.ANY, alias="paysDividends")
    profit_expectation_1: DividendPreference = Field(DividendPreference.ANY, alias="profitExpectation1")
    profit_expectation_2: DividendPreference = Field(DividendPreference.ANY, alias="profitExpectation2")

    @field_validator(
        "price_min", "price_max",
        "pe_ratio_min", "pe_ratio_max",
        "rsi_min", "rsi_max",
        "peg_ratio_min", "peg_ratio_max",
        "dividend_yield_min", "dividend_yield_max",
        mode="before",
    )
    @classmethod
    def _blank_is_absent(cls, v: Any) -> Any:
        # form inputs send "" for an untouched field
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("pays_dividends", "profit_expectation_1", "profit_expectation_2", mode="before")
    @classmethod
    def _normalize_choice(cls, v: Any) -> Any:
        if v is None:
            return DividendPreference.ANY
        if isinstance(v, bool):
            return DividendPreference.YES if v else DividendPreference.NO
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "ConstraintSet":
        """Build a constraint set from raw form values keyed by camelCase or snake_case names.

        Raises pydantic.ValidationError if a bound is present but not numeric.
        """
        return cls.model_validate(dict(form))

    def is_empty(self) -> bool:
        """True when nothing here would narrow a result set."""
        bounds = self.model_dump(exclude={"pays_dividends", "profit_expectation_1", "profit_expectation_2"})
        return all(v is None for v in bounds.values()) and self.pays_dividends is DividendPreference.ANY

    def to_form(self) -> dict:
        """camelCase dict with absent values rendered as empty strings, like the form."""
        out = {}
        for key, value in self.model_dump(by_alias=True).items():
            if isinstance(value, DividendPreference):
                out[key] = value.value
            else:
                out[key] = "" if value is None else value
        return out
