"""
Main EOS RPC client
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from .constants import (
    API_ENDPOINT_OVERRIDE,
    BLOCKS_BEHIND,
    EXPIRE_SECONDS,
    MAX_ATTEMPTS,
    REQUEST_TIMEOUT,
    RPC_PATHS,
)
from .crypto import EosCrypto, TransactionSigner
from .endpoints import EndpointPool
from .exceptions import (
    ConfigurationError,
    InvalidPublicKeyError,
    RetriesExhaustedError,
    RpcSemanticError,
    UnexpectedResponseError,
    ValidationError,
)
from .models import RETRYABLE_FAILURES, ChainInfo, CurrencyStats, RpcOk, TableQuery, TableRows
from .names import numeric_from_name
from .tokens import TokenRegistry
from .transactions import block_ref_from_block, build_transaction, create_transfer_action
from .transport import RpcTransport
from .utils import Utils

logger = logging.getLogger(__name__)


class EosClient:
    """
    Client for EOS RPC nodes with random load balancing and failover.

    Every request picks a random endpoint from the pool. Transport failures
    and "Unknown Endpoint" answers are retried on a freshly selected
    endpoint, up to max_attempts in total; any other node error is raised
    at once.

    Example:
        >>> client = EosClient()
        >>> client.account_exists("eosio.token")
        True
        >>> client.get_currency_balance("eosio.token", "EOS")
        0.0
    """

    def __init__(
        self,
        pool: Optional[EndpointPool] = None,
        transport: Optional[RpcTransport] = None,
        token_registry: Optional[TokenRegistry] = None,
        signer: Optional[TransactionSigner] = None,
        key_validator: Callable[[str], bool] = EosCrypto.is_valid_public_key,
        max_attempts: int = MAX_ATTEMPTS,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """
        Initialize EOS client.

        Args:
            pool: Endpoint pool (default seed list, or EOS_SDK_API_ENDPOINT if set)
            transport: RPC transport (default: requests based, with timeout)
            token_registry: Token metadata (default tokens if omitted)
            signer: Transaction signer, required for transfer()
            key_validator: Public key format check
            max_attempts: Attempts per request, including the first
            timeout: Request timeout in seconds, used when transport is omitted
        """
        if max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be at least 1, got {max_attempts}")

        if pool is None:
            pool = EndpointPool.default().with_override(API_ENDPOINT_OVERRIDE)
        self.pool = pool
        self.transport = transport or RpcTransport(timeout=timeout)
        self.token_registry = token_registry or TokenRegistry()
        self.signer = signer
        self.key_validator = key_validator
        self.max_attempts = max_attempts

    def set_api_endpoint(self, api_endpoint: str) -> None:
        """
        Send all traffic of this client to one endpoint.

        Args:
            api_endpoint: Endpoint URL; empty string keeps the current pool
        """
        self.pool = self.pool.with_override(api_endpoint)

    def _call(self, method: str, params: Dict[str, Any], endpoint: Optional[str] = None) -> Any:
        """Run one RPC method with endpoint rotation and return the decoded JSON."""
        return self._request(method, params, endpoint).data

    def _request(self, method: str, params: Dict[str, Any], endpoint: Optional[str] = None) -> RpcOk:
        """
        Run one RPC method with endpoint rotation.

        Args:
            method: Key of RPC_PATHS
            params: JSON body
            endpoint: Per-call endpoint, bypasses the pool

        Returns:
            RpcOk of the endpoint that answered

        Raises:
            RpcSemanticError: node rejected the request
            RetriesExhaustedError: every attempt failed with a retryable error
        """
        pool = EndpointPool([endpoint]) if endpoint else self.pool
        path = RPC_PATHS[method]
        failures = []

        for attempt in range(1, self.max_attempts + 1):
            url = pool.select()
            outcome = self.transport.call(url, path, params)

            if isinstance(outcome, RpcOk):
                if failures:
                    logger.info(f"{method} succeeded on {url} after {len(failures)} failed attempt(s)")
                return outcome

            if isinstance(outcome, RETRYABLE_FAILURES):
                failures.append(outcome)
                logger.warning(
                    f"{method} attempt {attempt}/{self.max_attempts} on {url} failed "
                    f"({outcome.classification}): {outcome.message}"
                )
                continue

            logger.debug(f"{method} rejected by {url}: {outcome.message}")
            raise RpcSemanticError(
                outcome.message,
                endpoint=outcome.endpoint,
                path=outcome.path,
                classification=outcome.classification,
                code=outcome.code,
                details=outcome.details,
            )

        last_failure = failures[-1]
        logger.error(f"{method} failed on {len(failures)} endpoint(s), last error: {last_failure.message}")
        raise RetriesExhaustedError(last_failure, failures, self.max_attempts)

    # Chain Information

    def get_info(self, endpoint: Optional[str] = None) -> ChainInfo:
        """
        Get chain head information.

        Returns:
            ChainInfo object
        """
        return self._chain_info(self._call('get_info', {}, endpoint))

    @staticmethod
    def _chain_info(data: Any) -> ChainInfo:
        try:
            return ChainInfo(
                chain_id=data['chain_id'],
                head_block_num=int(data['head_block_num']),
                last_irreversible_block_num=int(data['last_irreversible_block_num']),
                head_block_time=data['head_block_time'],
                server_version=data.get('server_version_string') or data.get('server_version'),
            )
        except (KeyError, TypeError, ValueError):
            raise UnexpectedResponseError(f"Unknown get_info response format: {data!r}") from None

    def get_block(self, block_num_or_id: Union[int, str], endpoint: Optional[str] = None) -> Dict[str, Any]:
        """Get a block by number or id."""
        return self._call('get_block', {'block_num_or_id': block_num_or_id}, endpoint)

    # Accounts

    @staticmethod
    def numeric_from_name(account_name: str) -> str:
        """
        Numeric id of an account name.

        Args:
            account_name: Account name

        Returns:
            Decimal string of the uint64 value
        """
        return numeric_from_name(account_name)

    def account_exists(self, account_name: str, endpoint: Optional[str] = None) -> bool:
        """
        Check the existence of an account.

        Only created accounts have a row in the eosio userres table.

        Args:
            account_name: Account name

        Returns:
            True if the account exists, otherwise False
        """
        result = self.get_table_rows(
            TableQuery(
                code='eosio',
                scope=account_name,
                table='userres',
                lower_bound=account_name,
                upper_bound=account_name,
                limit=1,
            ),
            endpoint=endpoint,
        )
        return len(result.rows) > 0

    def get_key_accounts(self, public_key: str, endpoint: Optional[str] = None) -> List[str]:
        """
        Get the account names controlled by a public key.

        Args:
            public_key: Public key, 'EOS...' or 'PUB_K1_...'

        Returns:
            List of account names, empty if there are none

        Raises:
            InvalidPublicKeyError: malformed key, raised before any request
        """
        if not self.key_validator(public_key):
            raise InvalidPublicKeyError(f"Invalid public key: {public_key}")

        data = self._call('get_key_accounts', {'public_key': public_key}, endpoint)
        if not isinstance(data, dict) or not isinstance(data.get('account_names'), list):
            raise UnexpectedResponseError(f"Unknown get_key_accounts response format: {data!r}")
        return list(data['account_names'])

    # Tables

    def get_table_rows(self, query: TableQuery, endpoint: Optional[str] = None) -> TableRows:
        """
        Read a range of rows from a contract table.

        Bounds and limit are passed through as given; callers loop on
        `more` to paginate.

        Args:
            query: TableQuery

        Returns:
            TableRows object
        """
        data = self._call('get_table_rows', query.to_params(), endpoint)
        if not isinstance(data, dict) or not isinstance(data.get('rows'), list):
            raise UnexpectedResponseError(f"Unknown get_table_rows response format: {data!r}")
        return TableRows(
            rows=data['rows'],
            more=bool(data.get('more', False)),
            next_key=data.get('next_key') or None,
        )

    # Currency

    def get_currency_balance(self, account: str, symbol: str, endpoint: Optional[str] = None) -> float:
        """
        Get the balance of a token held by an account.

        Args:
            account: Account name
            symbol: Token symbol, resolved through the token registry

        Returns:
            Balance, 0.0 if the account holds none
        """
        token = self.token_registry.get(symbol)
        data = self._call(
            'get_currency_balance',
            {'code': token.contract, 'account': account, 'symbol': token.symbol},
            endpoint,
        )
        if not isinstance(data, list):
            raise UnexpectedResponseError(f"Unknown get_currency_balance response format: {data!r}")
        if not data:
            return 0.0
        try:
            return Utils.parse_asset_amount(data[0])
        except ValidationError:
            raise UnexpectedResponseError(f"Unknown get_currency_balance response format: {data!r}") from None

    def get_currency_stats(
        self,
        contract: Optional[str],
        symbol: str,
        endpoint: Optional[str] = None,
    ) -> CurrencyStats:
        """
        Get supply information of a token.

        Args:
            contract: Token contract; None resolves it through the token registry
            symbol: Token symbol

        Returns:
            CurrencyStats object
        """
        symbol = symbol.upper()
        if contract is None:
            contract = self.token_registry.contract_of(symbol)

        data = self._call('get_currency_stats', {'code': contract, 'symbol': symbol}, endpoint)
        stats = data.get(symbol) if isinstance(data, dict) else None
        if not isinstance(stats, dict):
            raise UnexpectedResponseError(f"Unknown get_currency_stats response format: {data!r}")
        try:
            return CurrencyStats(
                supply=Utils.parse_asset_amount(stats['supply']),
                max_supply=Utils.parse_asset_amount(stats['max_supply']),
                issuer=stats['issuer'],
            )
        except (KeyError, ValidationError):
            raise UnexpectedResponseError(f"Unknown get_currency_stats response format: {data!r}") from None

    # Transactions

    def get_transaction(
        self,
        txid: str,
        block_num: Optional[int] = None,
        endpoint: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Look up a transaction in the node's history.

        Args:
            txid: Transaction id
            block_num: Optional block number hint

        Returns:
            Transaction trace dict
        """
        params: Dict[str, Any] = {'id': txid}
        if block_num is not None:
            params['block_num_hint'] = block_num

        data = self._call('get_transaction', params, endpoint)
        if isinstance(data, dict) and (data.get('transaction_id') or data.get('id')):
            return data
        raise UnexpectedResponseError('Unknown response format')

    def _reference_block(self, info: ChainInfo, head_endpoint: str, endpoint: Optional[str]) -> Dict[str, Any]:
        """
        Fetch the TAPOS reference block.

        The block BLOCKS_BEHIND the head is read from the node that reported
        that head, since a lagging node may not have it yet. If that node
        cannot serve it, the last irreversible block is read through the pool.
        """
        ref_block_num = max(info.head_block_num - BLOCKS_BEHIND, 1)
        try:
            return self.get_block(ref_block_num, head_endpoint)
        except (RpcSemanticError, RetriesExhaustedError) as e:
            logger.warning(
                f"Block {ref_block_num} unavailable on {head_endpoint} ({e}), "
                f"using last irreversible block {info.last_irreversible_block_num}"
            )
        return self.get_block(info.last_irreversible_block_num, endpoint)

    def transfer(
        self,
        from_account: str,
        private_key: str,
        to_account: str,
        symbol: str,
        quantity: str,
        memo: str = '',
        endpoint: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send tokens to another account.

        Args:
            from_account: Sender account
            private_key: Sender's private key, handed to the signer
            to_account: Receiver account
            symbol: Token symbol, e.g. 'EOS'
            quantity: Amount with exactly the token's decimals, e.g. '1.0000'
            memo: Transfer memo

        Returns:
            push_transaction receipt

        Example:
            >>> client = EosClient(signer=my_signer)
            >>> client.transfer("alice", key, "bob", "EOS", "1.0000", "thanks")
        """
        if self.signer is None:
            raise ConfigurationError("A transaction signer is required to transfer")

        action = create_transfer_action(
            from_account, to_account, symbol, quantity, memo, registry=self.token_registry
        )

        answered = self._request('get_info', {}, endpoint)
        info = self._chain_info(answered.data)
        ref_block = block_ref_from_block(self._reference_block(info, answered.endpoint, endpoint))
        transaction = build_transaction([action], ref_block, expire_seconds=EXPIRE_SECONDS)

        signed = self.signer.sign(transaction, info.chain_id, private_key)
        logger.info(
            f"Pushing transfer of {action.data['quantity']} from {from_account} to {to_account}"
        )
        return self._call('push_transaction', signed, endpoint)

    def close(self):
        """Close the session"""
        self.transport.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, *args):
        """Context manager exit"""
        self.close()
