"""Coin launch (creation) module."""

from coinlaunch.launch.creator import (
    MAX_IMAGE_BYTES,
    MINTING_FEE,
    CoinCreationError,
    InvalidImageError,
    create_coin,
    validate_image,
)

__all__ = [
    "MAX_IMAGE_BYTES",
    "MINTING_FEE",
    "CoinCreationError",
    "InvalidImageError",
    "create_coin",
    "validate_image",
]
