"""
Single-shot HTTP transport with failure classification
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .constants import REQUEST_TIMEOUT, UNKNOWN_ENDPOINT_MARKER
from .models import (
    EndpointUnsupported,
    RpcOk,
    RpcOutcome,
    SemanticFailure,
    TransportFailure,
)

logger = logging.getLogger(__name__)


def _error_messages(error: Dict[str, Any]) -> List[str]:
    """Collect human readable messages from a node error payload."""
    messages = []
    inner = error.get('error') if isinstance(error.get('error'), dict) else error
    for detail in inner.get('details') or []:
        if isinstance(detail, dict) and detail.get('message'):
            messages.append(str(detail['message']))
    for key in ('what', 'message'):
        if inner.get(key):
            messages.append(str(inner[key]))
    if inner is not error and error.get('message'):
        messages.append(str(error['message']))
    return messages


def _error_payload(body: Any, status_ok: bool) -> Optional[Dict[str, Any]]:
    """Return the error part of a response body, or None on success."""
    if isinstance(body, dict):
        for key in ('processed', 'result'):
            nested = body.get(key)
            if isinstance(nested, dict) and nested.get('except'):
                failure = nested['except']
                return failure if isinstance(failure, dict) else {'message': str(failure)}
        if not status_ok:
            return body
    elif not status_ok:
        return {'message': str(body)}
    return None


class RpcTransport:
    """
    Performs one JSON-over-HTTP round trip against one node.

    Never retries and never raises for remote failures; every failure is
    returned as a classified outcome.

    Example:
        >>> transport = RpcTransport()
        >>> outcome = transport.call("https://eos.greymass.com", "/v1/chain/get_info", {})
    """

    def __init__(self, timeout: float = REQUEST_TIMEOUT, session: Optional[requests.Session] = None):
        """
        Initialize transport.

        Args:
            timeout: Request timeout in seconds
            session: Optional preconfigured requests session
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
        })

    def call(self, endpoint: str, path: str, params: Optional[Dict[str, Any]] = None) -> RpcOutcome:
        """
        POST params to endpoint + path.

        Args:
            endpoint: Node base URL
            path: RPC path, e.g. '/v1/chain/get_table_rows'
            params: JSON body

        Returns:
            RpcOk, TransportFailure, EndpointUnsupported or SemanticFailure
        """
        url = f"{endpoint.rstrip('/')}{path}"
        try:
            response = self.session.post(url, json=params or {}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug(f"Request to {url} failed: {e}")
            return TransportFailure(endpoint=endpoint, path=path, message=f"{type(e).__name__}: {e}")

        try:
            body = response.json()
        except ValueError:
            logger.debug(f"Non-JSON response from {url} (HTTP {response.status_code})")
            return TransportFailure(
                endpoint=endpoint,
                path=path,
                message=f"Invalid JSON response (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        error = _error_payload(body, response.ok)
        if error is None:
            return RpcOk(endpoint=endpoint, path=path, data=body)

        messages = _error_messages(error)
        if any(UNKNOWN_ENDPOINT_MARKER in message for message in messages):
            return EndpointUnsupported(
                endpoint=endpoint,
                path=path,
                message=UNKNOWN_ENDPOINT_MARKER,
                status_code=response.status_code,
            )

        code = error.get('code')
        if isinstance(error.get('error'), dict):
            code = error['error'].get('code', code)
        return SemanticFailure(
            endpoint=endpoint,
            path=path,
            message=messages[0] if messages else f"HTTP {response.status_code}",
            status_code=response.status_code,
            code=code,
            details=error,
        )

    def close(self):
        """Close the session"""
        self.session.close()
