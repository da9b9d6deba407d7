"""Market statistics data model."""

from pydantic import BaseModel, Field


class MarketStats(BaseModel):
    """Aggregate totals over a coin collection snapshot."""

    total_volume: float = Field(..., ge=0, description="Sum of 24h volumes")
    total_market_cap: float = Field(..., ge=0, description="Sum of market caps")
    count: int = Field(..., ge=0, description="Number of active coins")

    model_config = {"frozen": True}
