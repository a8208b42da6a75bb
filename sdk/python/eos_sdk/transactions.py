"""
Transfer action and transaction construction
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List

from .constants import EXPIRE_SECONDS
from .exceptions import QuantityPrecisionError, UnexpectedResponseError
from .models import Authorization, BlockRef, TransferAction
from .names import name_to_number
from .tokens import TokenRegistry
from .utils import Utils

TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%S'


def create_transfer_action(
    from_account: str,
    to_account: str,
    symbol: str,
    quantity: str,
    memo: str = '',
    registry: TokenRegistry = None,
) -> TransferAction:
    """
    Build a token transfer action.

    Args:
        from_account: Sender account, also the authorizing actor
        to_account: Receiver account
        symbol: Token symbol, e.g. 'EOS'
        quantity: Amount with exactly the token's decimals, e.g. '1.2300'
        memo: Transfer memo
        registry: Token registry (default tokens if omitted)

    Returns:
        TransferAction addressed to the token contract

    Raises:
        UnknownTokenError: symbol not registered
        QuantityPrecisionError: wrong number of decimals
        InvalidNameError: invalid account name
    """
    registry = registry or TokenRegistry()
    token = registry.get(symbol)

    name_to_number(from_account)
    name_to_number(to_account)

    decimals = Utils.decimal_places(quantity)
    if decimals != token.precision:
        raise QuantityPrecisionError(
            f"{token.symbol} quantity must have {token.precision} decimal places, "
            f"got {quantity!r} ({decimals})"
        )

    return TransferAction(
        account=token.contract,
        authorization=[Authorization(actor=from_account, permission='active')],
        data={
            'from': from_account,
            'to': to_account,
            'quantity': Utils.format_asset(quantity, token.symbol),
            'memo': memo,
        },
    )


def block_ref_from_block(block: Dict[str, Any]) -> BlockRef:
    """Extract the TAPOS fields of a get_block response."""
    try:
        return BlockRef(
            block_num=int(block['block_num']),
            timestamp=block['timestamp'],
            ref_block_prefix=int(block['ref_block_prefix']),
        )
    except (KeyError, TypeError, ValueError):
        raise UnexpectedResponseError(f"Block response lacks reference fields: {block!r}") from None


def expiration_from(timestamp: str, expire_seconds: int = EXPIRE_SECONDS) -> str:
    """
    Expiration time relative to a block timestamp.

    Example:
        >>> expiration_from('2019-01-01T00:00:00.500')
        '2019-01-01T00:05:00'
    """
    base = datetime.strptime(timestamp.split('.')[0].rstrip('Z'), TIMESTAMP_FORMAT)
    return (base + timedelta(seconds=expire_seconds)).strftime(TIMESTAMP_FORMAT)


def build_transaction(
    actions: List[TransferAction],
    ref_block: BlockRef,
    expire_seconds: int = EXPIRE_SECONDS,
) -> Dict[str, Any]:
    """
    Assemble an unsigned transaction anchored on ref_block.

    Args:
        actions: Actions to include
        ref_block: Reference block
        expire_seconds: Seconds after the reference block time

    Returns:
        Transaction dict ready for a TransactionSigner
    """
    return {
        'expiration': expiration_from(ref_block.timestamp, expire_seconds),
        'ref_block_num': ref_block.block_num & 0xFFFF,
        'ref_block_prefix': ref_block.ref_block_prefix,
        'max_net_usage_words': 0,
        'max_cpu_usage_ms': 0,
        'delay_sec': 0,
        'context_free_actions': [],
        'actions': [action.to_dict() for action in actions],
        'transaction_extensions': [],
    }
