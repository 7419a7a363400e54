"""
Ticker-related models.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, StrictFloat, StrictInt

from .base import SchemaModel


class TickerType(str, Enum):
    """Type of listed security."""
    STOCK = "stock"
    ETF = "etf"
    INDEX = "index"


class Ticker(SchemaModel):
    """Listed security with its latest price and daily change metrics."""
    symbol: str = Field(..., description='Stock ticker symbol (e.g., "AAPL")')
    name: str = Field(..., description="Company or fund name")
    exchange: str = Field(..., description="Exchange where the ticker is listed")
    ticker_type: TickerType = Field(..., alias="type", description="Type of security")

    price: StrictFloat = Field(..., description="Current price")
    change: StrictFloat = Field(..., description="Price change from previous close")
    change_percent: StrictFloat = Field(..., description="Percentage change from previous close")
    volume: StrictInt = Field(..., description="Trading volume")

    market_cap: Optional[StrictFloat] = Field(None, description="Market capitalization")
    high_52_week: Optional[StrictFloat] = Field(None, alias="high52Week", description="52-week high")
    low_52_week: Optional[StrictFloat] = Field(None, alias="low52Week", description="52-week low")
    previous_close: Optional[StrictFloat] = Field(None, description="Previous close price")
    day_high: Optional[StrictFloat] = Field(None, description="Day's high")
    day_low: Optional[StrictFloat] = Field(None, description="Day's low")


class TickerSearchResult(SchemaModel):
    """Search hit for a ticker lookup."""
    symbol: str
    name: str
    exchange: str
    ticker_type: TickerType = Field(..., alias="type")


class TickerQuote(SchemaModel):
    """Real-time quote for a ticker."""
    symbol: str
    price: StrictFloat
    change: StrictFloat
    change_percent: StrictFloat
    volume: StrictInt
    timestamp: str = Field(..., description="Quote time (ISO-8601)")
