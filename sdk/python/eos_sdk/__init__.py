"""
EOS Python SDK

Python client for EOS RPC nodes.

Features:
- Random load balancing over a pool of public nodes
- Bounded failover on broken or incomplete nodes
- Account, table and currency queries
- Token transfers through a pluggable signer
"""

__version__ = "1.0.0"
__author__ = "EOS SDK Team"

from .client import EosClient
from .crypto import EosCrypto, TransactionSigner
from .endpoints import EndpointPool
from .exceptions import (
    ConfigurationError,
    EosSdkError,
    InvalidNameError,
    InvalidPublicKeyError,
    QuantityPrecisionError,
    RetriesExhaustedError,
    RpcError,
    RpcSemanticError,
    UnexpectedResponseError,
    UnknownTokenError,
    ValidationError,
)
from .models import (
    TableQuery,
    TableRows,
    TransferAction,
    TokenInfo,
    CurrencyStats,
    ChainInfo,
)
from .names import name_to_number, number_to_name, numeric_from_name
from .tokens import TokenRegistry
from .transactions import create_transfer_action
from .transport import RpcTransport
from .utils import Utils

__all__ = [
    "EosClient",
    "EosCrypto",
    "TransactionSigner",
    "EndpointPool",
    "RpcTransport",
    "TokenRegistry",
    "TableQuery",
    "TableRows",
    "TransferAction",
    "TokenInfo",
    "CurrencyStats",
    "ChainInfo",
    "create_transfer_action",
    "name_to_number",
    "number_to_name",
    "numeric_from_name",
    "Utils",
    "EosSdkError",
    "ConfigurationError",
    "ValidationError",
    "InvalidNameError",
    "InvalidPublicKeyError",
    "QuantityPrecisionError",
    "UnknownTokenError",
    "UnexpectedResponseError",
    "RpcError",
    "RpcSemanticError",
    "RetriesExhaustedError",
]
