"""
Pydantic schemas for market catalog JSON documents.
"""
from decimal import Decimal
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationInfo, field_validator

from .types import Market


class MarketRecord(BaseModel):
    """One market as it appears in a catalog document."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    symbol: str = ""
    local_symbol: str = Field("", alias="localSymbol")
    base_currency: str = Field("", alias="baseCurrency")
    quote_currency: str = Field("", alias="quoteCurrency")
    price_precision: int = Field(0, alias="pricePrecision")
    volume_precision: int = Field(0, alias="volumePrecision")
    quote_precision: int = Field(0, alias="quotePrecision")
    tick_size: Decimal = Field(Decimal("0"), alias="tickSize")
    step_size: Decimal = Field(Decimal("0"), alias="stepSize")
    min_notional: Decimal = Field(Decimal("0"), alias="minNotional")
    min_quantity: Decimal = Field(Decimal("0"), alias="minQuantity")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        # JSON null means "not set"
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    def to_market(self) -> Market:
        return Market(
            symbol=self.symbol,
            local_symbol=self.local_symbol,
            base_currency=self.base_currency,
            quote_currency=self.quote_currency,
            price_precision=self.price_precision,
            volume_precision=self.volume_precision,
            quote_precision=self.quote_precision,
            tick_size=self.tick_size,
            step_size=self.step_size,
            min_notional=self.min_notional,
            min_quantity=self.min_quantity,
        )


# Shape 1: {"SYMBOL": {...}, ...}
MarketMapping = TypeAdapter(Dict[str, MarketRecord])

# Shape 2: [{...}, {...}]
MarketArray = TypeAdapter(List[MarketRecord])
