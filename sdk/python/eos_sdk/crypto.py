"""
Cryptographic utilities for EOS
"""

from typing import Any, Dict, Optional, Protocol

import base58
from Crypto.Hash import RIPEMD160

LEGACY_PREFIX = 'EOS'
K1_PREFIX = 'PUB_K1_'
COMPRESSED_KEY_SIZE = 33
CHECKSUM_SIZE = 4


class TransactionSigner(Protocol):
    """
    Signs and serializes a transaction for push_transaction.

    Implementations receive the transaction as a JSON-compatible dict and
    must return the push_transaction body:
    {'signatures': [...], 'compression': 0,
     'packed_context_free_data': '', 'packed_trx': '<hex>'}
    """

    def sign(self, transaction: Dict[str, Any], chain_id: str, private_key: str) -> Dict[str, Any]:
        ...


class EosCrypto:
    """
    Key format checks and signing helpers.

    Checksums use RIPEMD-160 via PyCryptodome.
    """

    @staticmethod
    def _checksum(data: bytes) -> bytes:
        return RIPEMD160.new(data).digest()[:CHECKSUM_SIZE]

    @staticmethod
    def public_key_to_bytes(public_key: str) -> Optional[bytes]:
        """
        Decode a public key string to its 33-byte compressed form.

        Args:
            public_key: 'EOS...' or 'PUB_K1_...' key string

        Returns:
            Compressed key bytes, or None if the format or checksum is wrong
        """
        if not isinstance(public_key, str):
            return None

        if public_key.startswith(K1_PREFIX):
            encoded, suffix = public_key[len(K1_PREFIX):], b'K1'
        elif public_key.startswith(LEGACY_PREFIX):
            encoded, suffix = public_key[len(LEGACY_PREFIX):], b''
        else:
            return None

        try:
            raw = base58.b58decode(encoded)
        except ValueError:
            return None

        if len(raw) != COMPRESSED_KEY_SIZE + CHECKSUM_SIZE:
            return None

        key, checksum = raw[:COMPRESSED_KEY_SIZE], raw[COMPRESSED_KEY_SIZE:]
        if key[0] not in (2, 3):
            return None
        if EosCrypto._checksum(key + suffix) != checksum:
            return None
        return key

    @staticmethod
    def is_valid_public_key(public_key: str) -> bool:
        """
        Validate public key format and checksum.

        Example:
            >>> EosCrypto.is_valid_public_key('EOS6MRyAjQq8ud7hVNYcfnVPJqcVpscN5So8BhtHuGYqET5GDW5CV')
            True
        """
        return EosCrypto.public_key_to_bytes(public_key) is not None
