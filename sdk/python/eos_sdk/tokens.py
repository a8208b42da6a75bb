"""
Token registry: symbol -> contract and precision
"""

from typing import Dict, Iterable, Optional

from .exceptions import UnknownTokenError, ValidationError
from .models import TokenInfo
from .utils import Utils

DEFAULT_TOKENS = (
    TokenInfo(symbol='EOS', contract='eosio.token', precision=4),
    TokenInfo(symbol='USDT', contract='tethertether', precision=4),
    TokenInfo(symbol='IQ', contract='everipediaiq', precision=3),
    TokenInfo(symbol='DICE', contract='betdicetoken', precision=4),
)


class TokenRegistry:
    """
    Lookup of token metadata by symbol.

    Example:
        >>> registry = TokenRegistry()
        >>> registry.get('EOS').contract
        'eosio.token'
    """

    def __init__(self, tokens: Optional[Iterable[TokenInfo]] = None):
        self._tokens: Dict[str, TokenInfo] = {}
        for token in DEFAULT_TOKENS if tokens is None else tokens:
            self.register(token)

    def register(self, token: TokenInfo) -> None:
        if not isinstance(token.symbol, str) or not Utils.is_valid_symbol(token.symbol.upper()):
            raise ValidationError(f"Invalid token symbol: {token.symbol!r}")
        if token.precision < 0:
            raise ValidationError(f"Invalid precision for {token.symbol}: {token.precision}")
        self._tokens[token.symbol.upper()] = token

    def get(self, symbol: str) -> TokenInfo:
        try:
            return self._tokens[symbol.upper()]
        except KeyError:
            raise UnknownTokenError(f"Unknown token symbol: {symbol}") from None

    def contract_of(self, symbol: str) -> str:
        return self.get(symbol).contract

    def precision_of(self, symbol: str) -> int:
        return self.get(symbol).precision

    def __contains__(self, symbol):
        return symbol.upper() in self._tokens

    def __iter__(self):
        return iter(self._tokens.values())
