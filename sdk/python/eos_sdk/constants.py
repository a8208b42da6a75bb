"""
EOS SDK constants and environment configuration

Values can be overridden through environment variables or a local `.env`
file. Process environment wins over `.env`.
"""

import os

from dotenv import dotenv_values

_config = {**dotenv_values(".env"), **os.environ}

SDK_DEFAULTS = {
    'EOS_SDK_API_ENDPOINT': '',
    'EOS_SDK_TIMEOUT':      '30',
    'EOS_SDK_MAX_ATTEMPTS': '3',
    'EOS_SDK_LOG_LEVEL':    'INFO',
    'EOS_SDK_LOG_FORMAT':   '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


def _setting(key: str) -> str:
    value = _config.get(key)
    if value is None or value == '':
        return SDK_DEFAULTS[key]
    return value


API_ENDPOINT_OVERRIDE = _setting('EOS_SDK_API_ENDPOINT')
REQUEST_TIMEOUT = float(_setting('EOS_SDK_TIMEOUT'))
MAX_ATTEMPTS = int(_setting('EOS_SDK_MAX_ATTEMPTS'))
LOG_LEVEL = _setting('EOS_SDK_LOG_LEVEL').upper()
LOG_FORMAT = _setting('EOS_SDK_LOG_FORMAT')

# Seed nodes used by default
DEFAULT_API_ENDPOINTS = (
    'http://eos.infstones.io',
    'https://eos.infstones.io',
    'http://eos.eoscafeblock.com',
    'https://eos.eoscafeblock.com',
    'http://api.main.alohaeos.com',
    'https://api.main.alohaeos.com',
    'http://api-mainnet.starteos.io',
    'https://api-mainnet.starteos.io',
    'https://bp.whaleex.com',
    'https://api.zbeos.com',
    'https://node1.zbeos.com',
    'https://api.eoslaomao.com',
    'https://mainnet.eoscannon.io',
)

# Nodes seen returning HTML error pages or rejecting requests.
# Never selected unless explicitly opted into.
BLACKLIST_API_ENDPOINTS = (
    'https://node.betdice.one',
    'http://peer1.eoshuobipool.com:8181',
    'http://peer2.eoshuobipool.com:8181',
    'https://api.redpacketeos.com',
)

# Transaction anchoring
BLOCKS_BEHIND = 3
EXPIRE_SECONDS = 300

RPC_PATHS = {
    'get_info':               '/v1/chain/get_info',
    'get_block':              '/v1/chain/get_block',
    'get_table_rows':         '/v1/chain/get_table_rows',
    'get_currency_balance':   '/v1/chain/get_currency_balance',
    'get_currency_stats':     '/v1/chain/get_currency_stats',
    'push_transaction':       '/v1/chain/push_transaction',
    'get_key_accounts':       '/v1/history/get_key_accounts',
    'get_transaction':        '/v1/history/get_transaction',
}

UNKNOWN_ENDPOINT_MARKER = 'Unknown Endpoint'
