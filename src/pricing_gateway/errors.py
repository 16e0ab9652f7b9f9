"""
Exception types raised by the gateway.

Each class maps onto one HTTP outcome in the API layer:
ClientInputError -> 400, RemoteEvaluationError -> 500, AssetMissingError -> 500.
"""
from pathlib import Path
from typing import Any, Optional


class GatewayError(Exception):
    """Base class for gateway failures."""


class ClientInputError(GatewayError):
    """Request body is not a JSON array of parts."""


class RemoteEvaluationError(GatewayError):
    """A call to the decision service failed (transport, HTTP status or payload)."""

    def __init__(
        self,
        message: str,
        rule_id: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.rule_id = rule_id
        self.status_code = status_code
        self.cause = cause


class AssetMissingError(GatewayError):
    """The static index page is not present on disk."""

    def __init__(self, path: Path):
        super().__init__(f"Missing {path}")
        self.path = path
