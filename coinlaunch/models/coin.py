"""Coin data model."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Coin(BaseModel):
    """Represents a tradable coin listed in the market."""

    id: str = Field(..., min_length=1, description="Registry identifier")
    name: str = Field(..., min_length=1, max_length=50, description="Display name")
    symbol: str = Field(
        ..., pattern=r"^[A-Z0-9]{1,10}$", description="Ticker symbol (uppercase)"
    )
    description: Optional[str] = Field(
        default=None, max_length=500, description="Coin description"
    )
    image: Optional[str] = Field(default=None, description="Image reference")
    created_at: datetime = Field(..., description="Creation timestamp")
    price: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="Current price"
    )
    change_24h: float = Field(
        default=0.0, allow_inf_nan=False, description="24h percentage change"
    )
    volume_24h: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="24h volume"
    )
    market_cap: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="Market capitalization"
    )
    holders: int = Field(default=0, ge=0, description="Holder count")

    model_config = {"frozen": True}
