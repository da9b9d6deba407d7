"""Coin creation for the launch form.

Builds a new Coin record from user input. Nothing is minted on-chain;
the coin only exists in the registry it is added to.
"""

import logging
import mimetypes
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from coinlaunch.models import Coin

logger = logging.getLogger(__name__)

# All-inclusive minting fee (SOL)
MINTING_FEE = 0.11

# Max coin image size (5MB)
MAX_IMAGE_BYTES = 5 * 1024 * 1024

MAX_NAME_LENGTH = 50
MAX_SYMBOL_LENGTH = 10
MAX_DESCRIPTION_LENGTH = 500


class CoinCreationError(ValueError):
    """Raised when coin form input is invalid."""


class InvalidImageError(CoinCreationError):
    """Raised when a coin image is missing, too large or not an image."""


def validate_image(path: Path) -> Path:
    """Check a coin image file.

    Args:
        path: Path to the image.

    Returns:
        The path unchanged.

    Raises:
        InvalidImageError: If the file is missing, larger than 5MB,
            or not an image.
    """
    path = Path(path)

    if not path.is_file():
        raise InvalidImageError(f"Image not found: {path}")

    if path.stat().st_size > MAX_IMAGE_BYTES:
        raise InvalidImageError("Image must be smaller than 5MB")

    mime_type, _ = mimetypes.guess_type(path.name)
    if mime_type is None or not mime_type.startswith("image/"):
        raise InvalidImageError("Please upload an image file")

    return path


def create_coin(
    name: str,
    symbol: str,
    description: str = "",
    image: Optional[Path] = None,
    now: Optional[datetime] = None,
    coin_id: Optional[str] = None,
) -> Coin:
    """Create a new coin from launch form input.

    Args:
        name: Coin name (required, up to 50 characters).
        symbol: Ticker symbol (required, upper-cased, up to 10 characters).
        description: Optional description (up to 500 characters).
        image: Optional path to a coin image.
        now: Creation time. Defaults to the current time.
        coin_id: Coin id. Defaults to the creation time in milliseconds.

    Returns:
        A new Coin with zeroed market fields.

    Raises:
        CoinCreationError: If any field is invalid.
    """
    name = name.strip()
    symbol = symbol.strip().upper()
    description = description.strip()

    if not name or not symbol:
        raise CoinCreationError("Please fill in coin name and symbol")
    if len(name) > MAX_NAME_LENGTH:
        raise CoinCreationError(f"Coin name must be at most {MAX_NAME_LENGTH} characters")
    if len(symbol) > MAX_SYMBOL_LENGTH:
        raise CoinCreationError(f"Coin symbol must be at most {MAX_SYMBOL_LENGTH} characters")
    if not symbol.isascii() or not symbol.isalnum():
        raise CoinCreationError("Coin symbol must contain only letters and digits")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise CoinCreationError(
            f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters"
        )

    image_ref = str(validate_image(image)) if image is not None else None

    created_at = now or datetime.now()
    if coin_id is None:
        coin_id = str(int(created_at.timestamp() * 1000))

    try:
        coin = Coin(
            id=coin_id,
            name=name,
            symbol=symbol,
            description=description or None,
            image=image_ref,
            created_at=created_at,
        )
    except ValidationError as e:
        raise CoinCreationError(str(e)) from e

    logger.info("Created coin %s (%s)", coin.name, coin.symbol)
    return coin
