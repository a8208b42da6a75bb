"""
EOS SDK Exceptions

Every error raised by the SDK derives from EosSdkError.
"""

from typing import List, Optional


class EosSdkError(Exception):
    """Base exception for the EOS SDK."""
    pass


class ConfigurationError(EosSdkError):
    """SDK is misconfigured (empty endpoint pool, missing signer, ...)."""
    pass


class ValidationError(EosSdkError):
    """Input rejected before any network call."""
    pass


class InvalidNameError(ValidationError):
    """Account name is not encodable."""
    pass


class InvalidPublicKeyError(ValidationError):
    """Public key has an invalid format or checksum."""
    pass


class UnknownTokenError(ValidationError):
    """Token symbol is not in the registry."""
    pass


class QuantityPrecisionError(ValidationError):
    """Quantity decimals do not match the token precision."""
    pass


class UnexpectedResponseError(EosSdkError):
    """Node answered with a payload of an unknown shape."""
    pass


class RpcError(EosSdkError):
    """
    A failed RPC attempt.

    Attributes:
        endpoint: URL of the node that failed
        path: RPC path that was called
        classification: 'transport', 'endpoint_unsupported' or 'semantic'
        code: error code reported by the node, if any
        details: raw error payload, if any
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        path: Optional[str] = None,
        classification: Optional[str] = None,
        code: Optional[int] = None,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.endpoint = endpoint
        self.path = path
        self.classification = classification
        self.code = code
        self.details = details
        super().__init__(f"[{classification}] {endpoint}{path or ''}: {message}")


class RpcSemanticError(RpcError):
    """Node rejected the request; retrying elsewhere would not help."""
    pass


class RetriesExhaustedError(RpcError):
    """All attempts failed with retryable errors."""

    def __init__(self, last_failure, failures: List, attempts: int):
        self.last_failure = last_failure
        self.failures = list(failures)
        self.attempts = attempts
        super().__init__(
            f"{attempts} attempt(s) failed, last error: {last_failure.message}",
            endpoint=last_failure.endpoint,
            path=last_failure.path,
            classification=last_failure.classification,
            code=getattr(last_failure, 'code', None),
            details=getattr(last_failure, 'details', None),
        )
