"""
Data models for EOS SDK
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class TableQuery:
    """Range scan over a contract table"""
    code: str
    scope: str
    table: str
    lower_bound: Any = ''
    upper_bound: Any = ''
    limit: int = 100

    def to_params(self) -> Dict[str, Any]:
        return {
            'json': True,
            'code': self.code,
            'scope': self.scope,
            'table': self.table,
            'lower_bound': self.lower_bound,
            'upper_bound': self.upper_bound,
            'limit': self.limit,
        }


@dataclass
class TableRows:
    """Rows returned by a table scan"""
    rows: List[Dict[str, Any]]
    more: bool
    next_key: Optional[str] = None


@dataclass
class Authorization:
    """Permission level authorizing an action"""
    actor: str
    permission: str = 'active'


@dataclass
class TransferAction:
    """Token transfer action"""
    account: str
    authorization: List[Authorization]
    data: Dict[str, str]
    name: str = 'transfer'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'account': self.account,
            'name': self.name,
            'authorization': [
                {'actor': auth.actor, 'permission': auth.permission}
                for auth in self.authorization
            ],
            'data': dict(self.data),
        }


@dataclass
class TokenInfo:
    """Token contract and precision"""
    symbol: str
    contract: str
    precision: int


@dataclass
class CurrencyStats:
    """Token supply information"""
    supply: float
    max_supply: float
    issuer: str


@dataclass
class ChainInfo:
    """Subset of get_info used by the SDK"""
    chain_id: str
    head_block_num: int
    last_irreversible_block_num: int
    head_block_time: str
    server_version: Optional[str] = None


@dataclass
class BlockRef:
    """Block used as transaction reference (TAPOS)"""
    block_num: int
    timestamp: str
    ref_block_prefix: int


# Transport outcomes

@dataclass
class RpcOk:
    """Successful round trip"""
    endpoint: str
    path: str
    data: Any


@dataclass
class TransportFailure:
    """No usable response: network error, timeout or non-JSON body"""
    endpoint: str
    path: str
    message: str
    status_code: Optional[int] = None
    classification: str = field(default='transport', init=False)


@dataclass
class EndpointUnsupported:
    """Node does not implement the requested RPC method"""
    endpoint: str
    path: str
    message: str
    status_code: Optional[int] = None
    classification: str = field(default='endpoint_unsupported', init=False)


@dataclass
class SemanticFailure:
    """Node understood the request and rejected it"""
    endpoint: str
    path: str
    message: str
    status_code: Optional[int] = None
    code: Optional[int] = None
    details: Optional[Dict[str, Any]] = None
    classification: str = field(default='semantic', init=False)


RpcOutcome = Union[RpcOk, TransportFailure, EndpointUnsupported, SemanticFailure]

RETRYABLE_FAILURES = (TransportFailure, EndpointUnsupported)
