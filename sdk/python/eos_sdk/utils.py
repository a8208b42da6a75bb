"""
Utility functions for EOS asset strings
"""

import re
from decimal import Decimal, InvalidOperation

from .exceptions import ValidationError

QUANTITY_PATTERN = re.compile(r'[0-9]+(\.[0-9]+)?')
SYMBOL_PATTERN = re.compile(r'[A-Z]{1,7}')


class Utils:
    """Helper utilities for EOS asset handling"""

    @staticmethod
    def parse_asset_amount(asset: str) -> float:
        """
        Parse the amount of an asset string.

        Args:
            asset: Asset string, e.g. "123.4567 EOS"

        Returns:
            Amount as float

        Example:
            >>> Utils.parse_asset_amount("123.4567 EOS")
            123.4567
        """
        try:
            return float(Decimal(asset.split(' ')[0]))
        except (InvalidOperation, AttributeError, IndexError):
            raise ValidationError(f"Invalid asset string: {asset!r}") from None

    @staticmethod
    def decimal_places(quantity: str) -> int:
        """
        Count decimal places of a quantity string.

        Args:
            quantity: Quantity without symbol, e.g. "1.2300"

        Returns:
            Number of digits after the decimal point
        """
        if not isinstance(quantity, str) or not QUANTITY_PATTERN.fullmatch(quantity):
            raise ValidationError(f"Invalid quantity: {quantity!r}")
        if '.' not in quantity:
            return 0
        return len(quantity.split('.')[1])

    @staticmethod
    def is_valid_symbol(symbol: str) -> bool:
        return bool(SYMBOL_PATTERN.fullmatch(symbol or ''))

    @staticmethod
    def format_asset(quantity: str, symbol: str) -> str:
        return f"{quantity} {symbol}"
