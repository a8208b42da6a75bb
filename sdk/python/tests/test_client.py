"""
EOS client test suite

Covers the failover policy and every query operation against a scripted
transport.

Run with:
    pytest sdk/python/tests/test_client.py -v
"""

import pytest

from eos_sdk import (
    ConfigurationError,
    EndpointPool,
    EosClient,
    InvalidPublicKeyError,
    RetriesExhaustedError,
    RpcSemanticError,
    TableQuery,
    UnexpectedResponseError,
    UnknownTokenError,
)

from conftest import ENDPOINTS, FakeTransport, legacy_key, semantic_failure, transport_failure, unknown_endpoint

VALID_KEY = legacy_key(bytes([2]) + bytes(range(1, 33)))


# ============================================================================
# Failover policy
# ============================================================================


class TestFailover:

    def test_first_success_returns_immediately(self, client, transport, pool, mocker):
        spy = mocker.spy(pool, 'select')
        transport.queue({'rows': [], 'more': False})

        client.get_table_rows(TableQuery(code='eosio', scope='eosio', table='global'))

        assert spy.call_count == 1
        assert len(transport.calls) == 1

    def test_succeeds_on_third_attempt(self, client, transport, pool, mocker):
        spy = mocker.spy(pool, 'select')
        transport.queue(transport_failure(), transport_failure(), {'rows': [{'a': 1}], 'more': False})

        result = client.get_table_rows(TableQuery(code='eosio', scope='eosio', table='global'))

        assert result.rows == [{'a': 1}]
        assert spy.call_count == 3
        assert len(transport.calls) == 3

    def test_unknown_endpoint_is_retried(self, client, transport):
        transport.queue(unknown_endpoint(), {'account_names': ['alice']})

        assert client.get_key_accounts(VALID_KEY) == ['alice']
        assert len(transport.calls) == 2

    def test_exhausted_retries_carry_last_failure(self, client, transport, pool, mocker):
        spy = mocker.spy(pool, 'select')
        transport.queue(
            transport_failure('first'),
            unknown_endpoint(),
            transport_failure('ConnectionError: third'),
        )

        with pytest.raises(RetriesExhaustedError) as excinfo:
            client.account_exists('alice')

        error = excinfo.value
        assert spy.call_count == 3
        assert error.attempts == 3
        assert error.last_failure.message == 'ConnectionError: third'
        assert error.classification == 'transport'
        assert error.endpoint == transport.calls[2][0]
        assert len(error.failures) == 3
        assert error.failures[1].classification == 'endpoint_unsupported'
        assert 'third' in str(error)

    def test_semantic_failure_is_not_retried(self, client, transport, pool, mocker):
        spy = mocker.spy(pool, 'select')
        transport.queue(semantic_failure('account not found'))

        with pytest.raises(RpcSemanticError) as excinfo:
            client.get_currency_balance('nobody', 'EOS')

        assert spy.call_count == 1
        assert len(transport.calls) == 1
        assert excinfo.value.message == 'account not found'
        assert excinfo.value.code == 3060002
        assert excinfo.value.endpoint in ENDPOINTS

    def test_semantic_failure_after_retryable_failure(self, client, transport):
        transport.queue(transport_failure(), semantic_failure())

        with pytest.raises(RpcSemanticError):
            client.get_info()
        assert len(transport.calls) == 2

    def test_custom_attempt_budget(self, pool):
        transport = FakeTransport([transport_failure()] * 5)
        client = EosClient(pool=pool, transport=transport, max_attempts=5)

        with pytest.raises(RetriesExhaustedError) as excinfo:
            client.get_info()
        assert excinfo.value.attempts == 5
        assert len(transport.calls) == 5

    def test_invalid_attempt_budget(self, pool, transport):
        with pytest.raises(ConfigurationError):
            EosClient(pool=pool, transport=transport, max_attempts=0)

    def test_requests_use_pool_endpoints(self, client, transport):
        transport.queue(transport_failure(), transport_failure(), {'rows': [], 'more': False})

        client.account_exists('alice')

        assert all(endpoint in ENDPOINTS for endpoint, _, _ in transport.calls)


class TestEndpointOverride:

    def test_per_call_endpoint(self, client, transport, pool, mocker):
        spy = mocker.spy(pool, 'select')
        transport.queue({'rows': [], 'more': False})

        client.account_exists('alice', endpoint='http://127.0.0.1:8888')

        assert spy.call_count == 0
        assert transport.calls[0][0] == 'http://127.0.0.1:8888'

    def test_per_call_endpoint_is_retried_in_place(self, client, transport):
        transport.queue(transport_failure(), transport_failure(), transport_failure())

        with pytest.raises(RetriesExhaustedError):
            client.get_info(endpoint='http://127.0.0.1:8888')
        assert [call[0] for call in transport.calls] == ['http://127.0.0.1:8888'] * 3

    def test_set_api_endpoint(self, client, transport, pool):
        client.set_api_endpoint('https://forced.example/')

        transport.queue({'rows': [], 'more': False}, {'rows': [], 'more': False})
        client.account_exists('alice')
        client.account_exists('bob')

        assert [call[0] for call in transport.calls] == ['https://forced.example'] * 2
        assert len(pool) == len(ENDPOINTS)

    def test_set_api_endpoint_ignores_empty(self, client, pool):
        client.set_api_endpoint('')
        assert client.pool is pool

    def test_clients_do_not_share_overrides(self, transport):
        first = EosClient(pool=EndpointPool(ENDPOINTS), transport=transport)
        second = EosClient(pool=EndpointPool(ENDPOINTS), transport=transport)

        first.set_api_endpoint('https://forced.example')

        assert len(first.pool) == 1
        assert len(second.pool) == len(ENDPOINTS)


# ============================================================================
# Operations
# ============================================================================


class TestAccounts:

    def test_numeric_from_name(self, client):
        assert client.numeric_from_name('eosio') == '6138663577826885632'

    def test_account_exists(self, client, transport):
        transport.queue({'rows': [{'owner': 'alice', 'net_weight': '1.0000 EOS'}], 'more': False})

        assert client.account_exists('alice') is True

        endpoint, path, params = transport.calls[0]
        assert path == '/v1/chain/get_table_rows'
        assert params == {
            'json': True,
            'code': 'eosio',
            'scope': 'alice',
            'table': 'userres',
            'lower_bound': 'alice',
            'upper_bound': 'alice',
            'limit': 1,
        }

    def test_account_does_not_exist(self, client, transport):
        transport.queue({'rows': [], 'more': False})
        assert client.account_exists('nobody') is False

    def test_get_key_accounts(self, client, transport):
        transport.queue({'account_names': ['alice', 'bob']})

        assert client.get_key_accounts(VALID_KEY) == ['alice', 'bob']
        assert transport.calls[0][1] == '/v1/history/get_key_accounts'
        assert transport.calls[0][2] == {'public_key': VALID_KEY}

    def test_get_key_accounts_empty(self, client, transport):
        transport.queue({'account_names': []})
        assert client.get_key_accounts(VALID_KEY) == []

    def test_get_key_accounts_rejects_invalid_key(self, client, transport):
        with pytest.raises(InvalidPublicKeyError):
            client.get_key_accounts('EOS-not-a-key')
        assert transport.calls == []

    def test_get_key_accounts_custom_validator(self, pool, transport):
        client = EosClient(pool=pool, transport=transport, key_validator=lambda key: False)

        with pytest.raises(InvalidPublicKeyError):
            client.get_key_accounts(VALID_KEY)
        assert transport.calls == []

    def test_get_key_accounts_unexpected_response(self, client, transport):
        transport.queue({'accounts': []})
        with pytest.raises(UnexpectedResponseError):
            client.get_key_accounts(VALID_KEY)


class TestTables:

    def test_bounds_pass_through(self, client, transport):
        transport.queue({'rows': [{'id': 7}, {'id': 8}], 'more': False})
        query = TableQuery(
            code='eosio.token', scope='alice', table='accounts',
            lower_bound='7', upper_bound='9', limit=10,
        )

        result = client.get_table_rows(query)

        assert transport.calls[0][2] == {
            'json': True,
            'code': 'eosio.token',
            'scope': 'alice',
            'table': 'accounts',
            'lower_bound': '7',
            'upper_bound': '9',
            'limit': 10,
        }
        assert result.rows == [{'id': 7}, {'id': 8}]
        assert result.more is False

    def test_defaults(self, client, transport):
        transport.queue({'rows': []})

        result = client.get_table_rows(TableQuery(code='eosio', scope='eosio', table='producers'))

        params = transport.calls[0][2]
        assert params['lower_bound'] == ''
        assert params['upper_bound'] == ''
        assert params['limit'] == 100
        assert result.more is False

    def test_more_and_next_key(self, client, transport):
        transport.queue({'rows': [{'id': 1}], 'more': True, 'next_key': '2'})

        result = client.get_table_rows(TableQuery(code='c', scope='s', table='t', limit=1))

        assert result.more is True
        assert result.next_key == '2'

    def test_unexpected_response(self, client, transport):
        transport.queue(['not', 'a', 'dict'])
        with pytest.raises(UnexpectedResponseError):
            client.get_table_rows(TableQuery(code='c', scope='s', table='t'))


class TestCurrency:

    def test_balance(self, client, transport):
        transport.queue(['123.4567 EOS'])

        assert client.get_currency_balance('alice', 'EOS') == pytest.approx(123.4567)
        assert transport.calls[0][1] == '/v1/chain/get_currency_balance'
        assert transport.calls[0][2] == {'code': 'eosio.token', 'account': 'alice', 'symbol': 'EOS'}

    def test_balance_without_holding_is_zero(self, client, transport):
        transport.queue([])
        assert client.get_currency_balance('alice', 'EOS') == 0.0

    def test_balance_resolves_token_contract(self, client, transport):
        transport.queue(['10.000 IQ'])

        assert client.get_currency_balance('alice', 'iq') == pytest.approx(10.0)
        assert transport.calls[0][2]['code'] == 'everipediaiq'
        assert transport.calls[0][2]['symbol'] == 'IQ'

    @pytest.mark.parametrize('row', [123, None, {'amount': '1.0000'}, 'garbage EOS', ''])
    def test_balance_malformed_row(self, client, transport, row):
        transport.queue([row])

        with pytest.raises(UnexpectedResponseError):
            client.get_currency_balance('alice', 'EOS')
        assert len(transport.calls) == 1

    def test_balance_unknown_token(self, client, transport):
        with pytest.raises(UnknownTokenError):
            client.get_currency_balance('alice', 'NOPE')
        assert transport.calls == []

    def test_stats(self, client, transport):
        transport.queue({
            'EOS': {
                'supply': '1017659380.6093 EOS',
                'max_supply': '10000000000.0000 EOS',
                'issuer': 'eosio',
            }
        })

        stats = client.get_currency_stats('eosio.token', 'EOS')

        assert stats.supply == pytest.approx(1017659380.6093)
        assert stats.max_supply == pytest.approx(10000000000.0)
        assert stats.issuer == 'eosio'
        assert transport.calls[0][2] == {'code': 'eosio.token', 'symbol': 'EOS'}

    def test_stats_contract_from_registry(self, client, transport):
        transport.queue({'USDT': {'supply': '1.0000 USDT', 'max_supply': '2.0000 USDT', 'issuer': 'tether'}})

        client.get_currency_stats(None, 'USDT')

        assert transport.calls[0][2] == {'code': 'tethertether', 'symbol': 'USDT'}

    def test_stats_missing_symbol(self, client, transport):
        transport.queue({})
        with pytest.raises(UnexpectedResponseError):
            client.get_currency_stats('eosio.token', 'EOS')

    def test_stats_malformed_supply(self, client, transport):
        transport.queue({'EOS': {'supply': 17, 'max_supply': '1.0000 EOS', 'issuer': 'eosio'}})
        with pytest.raises(UnexpectedResponseError):
            client.get_currency_stats('eosio.token', 'EOS')


class TestChain:

    def test_get_info(self, client, transport):
        transport.queue({
            'chain_id': 'aca376f206b8fc25a6ed44dbdc66547c36c6c33e3a119ffbeaef943642f0e906',
            'head_block_num': 1000,
            'last_irreversible_block_num': 670,
            'head_block_time': '2019-01-01T00:00:00.000',
            'server_version_string': 'v1.8.1',
        })

        info = client.get_info()

        assert info.head_block_num == 1000
        assert info.server_version == 'v1.8.1'

    def test_get_transaction(self, client, transport):
        transport.queue({'id': 'abc', 'block_num': 5})

        assert client.get_transaction('abc', block_num=5)['id'] == 'abc'
        assert transport.calls[0][2] == {'id': 'abc', 'block_num_hint': 5}

    def test_get_transaction_unknown_format(self, client, transport):
        transport.queue({'trx': {}})
        with pytest.raises(UnexpectedResponseError):
            client.get_transaction('abc')

    def test_context_manager_closes_transport(self, pool, transport):
        with EosClient(pool=pool, transport=transport):
            pass
        assert transport.closed
