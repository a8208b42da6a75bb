#!/usr/bin/env python3
"""
EOS endpoint connectivity check

Probes every seed endpoint (good and known-bad) in parallel and writes
endpoint_report.json for visualize.py.
"""

import json
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from eos_sdk import EndpointPool, RpcTransport
from eos_sdk.constants import RPC_PATHS
from eos_sdk.logger import setup_logging
from eos_sdk.models import RpcOk

# Configuration
MAX_WORKERS = 8
PROBE_TIMEOUT = 10
PROBE_PUBLIC_KEY = 'EOS6MRyAjQq8ud7hVNYcfnVPJqcVpscN5So8BhtHuGYqET5GDW5CV'
REPORT_PATH = Path('endpoint_report.json')

logger = logging.getLogger('check_endpoints')


def probe(transport, endpoint, method, params):
    """Time one call and summarize its outcome"""
    start = time.perf_counter()
    outcome = transport.call(endpoint, RPC_PATHS[method], params)
    latency_ms = (time.perf_counter() - start) * 1000

    result = {
        'method': method,
        'status': 'ok' if isinstance(outcome, RpcOk) else outcome.classification,
        'latency_ms': round(latency_ms, 1),
    }
    if isinstance(outcome, RpcOk):
        if method == 'get_info':
            result['head_block_num'] = outcome.data.get('head_block_num')
    else:
        result['message'] = outcome.message
    return result


def check_endpoint(transport, endpoint, pool_name):
    probes = [
        probe(transport, endpoint, 'get_info', {}),
        probe(transport, endpoint, 'get_key_accounts', {'public_key': PROBE_PUBLIC_KEY}),
    ]
    for result in probes:
        level = logging.INFO if result['status'] == 'ok' else logging.WARNING
        logger.log(level, f"{endpoint} {result['method']}: {result['status']} ({result['latency_ms']} ms)")
    return {'endpoint': endpoint, 'pool': pool_name, 'probes': probes}


def main():
    setup_logging()

    targets = [(url, 'default') for url in EndpointPool.default().endpoints]
    targets += [(url, 'known_bad') for url in EndpointPool.known_bad().endpoints]

    transport = RpcTransport(timeout=PROBE_TIMEOUT)
    try:
        with ThreadPoolExecutor(max_workers=MAX_WORKERS) as executor:
            report = list(executor.map(lambda target: check_endpoint(transport, *target), targets))
    finally:
        transport.close()

    with open(REPORT_PATH, 'w') as f:
        json.dump(report, f, indent=2)

    healthy = sum(all(p['status'] == 'ok' for p in item['probes']) for item in report)
    print(f"\n{healthy}/{len(report)} endpoints fully healthy, report saved to {REPORT_PATH}")
    return 0 if healthy else 1


if __name__ == '__main__':
    exit(main())
