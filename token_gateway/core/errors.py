"""
Error taxonomy shared by the gateway and the HTTP layer.
"""
from typing import Optional


class GatewayError(Exception):
    """Base class for every failure on the token read path."""

    status_code = 500

    def __init__(self, message: str, function: Optional[str] = None):
        super().__init__(message)
        self.function = function


class ValidationError(GatewayError):
    """Bad or missing client input. Raised before any node call."""

    status_code = 400


class EncodingError(GatewayError):
    """Call arguments do not match the contract interface."""


class DecodingError(GatewayError):
    """Node returned bytes that do not parse as the declared outputs."""


class TransportError(GatewayError):
    """Node unreachable, timed out, or reverted the call."""
