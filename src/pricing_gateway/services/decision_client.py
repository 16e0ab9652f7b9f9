"""
DecisionRules Client - async transport to the remote decision service.

Rules and flows are both solved through the same endpoint:

    POST {host}/rule/solve/{rule_id}[/{version}]
    Authorization: Bearer <solver key>
    {"data": <payload>}

Each call is attempted once. Timeouts come from settings; any transport,
status or decoding failure surfaces as RemoteEvaluationError.
"""
import logging
from typing import Any, Optional, Protocol

import httpx

from ..config.settings import Settings
from ..errors import RemoteEvaluationError
from ..utils.strict_json import reject_constant


logger = logging.getLogger(__name__)


class RuleEvaluator(Protocol):
    """Anything that can solve a rule or flow by identifier."""

    async def evaluate(self, rule_id: str, payload: Any, version: Optional[str] = None) -> Any:
        ...


class DecisionRulesClient:
    """
    RuleEvaluator backed by the DecisionRules solver API.

    Pass an existing `httpx.AsyncClient` to share a connection pool (or a
    mock transport in tests); otherwise one is created and owned here.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=settings.request_timeout)

    @property
    def base_url(self) -> str:
        return self.settings.decision_rules_host.rstrip("/")

    def solve_url(self, rule_id: str, version: Optional[str] = None) -> str:
        url = f"{self.base_url}/rule/solve/{rule_id}"
        if version:
            url += f"/{version}"
        return url

    async def evaluate(self, rule_id: str, payload: Any, version: Optional[str] = None) -> Any:
        """Solve `rule_id` against `payload` and return the decoded JSON result."""
        url = self.solve_url(rule_id, version)
        headers = {
            "Authorization": f"Bearer {self.settings.solver_key}",
            "Content-Type": "application/json",
        }

        try:
            response = await self._client.post(url, json={"data": payload}, headers=headers)
        except httpx.TimeoutException as exc:
            raise RemoteEvaluationError(
                f"DecisionRules request timed out for rule '{rule_id}'",
                rule_id=rule_id,
                cause=repr(exc),
            ) from exc
        except httpx.RequestError as exc:
            raise RemoteEvaluationError(
                f"DecisionRules request failed for rule '{rule_id}': {exc}",
                rule_id=rule_id,
                cause=repr(exc),
            ) from exc

        if response.is_error:
            raise RemoteEvaluationError(
                f"DecisionRules returned HTTP {response.status_code} for rule '{rule_id}'",
                rule_id=rule_id,
                status_code=response.status_code,
                cause=response.text,
            )

        try:
            result = response.json(parse_constant=reject_constant)
        except ValueError as exc:
            raise RemoteEvaluationError(
                f"DecisionRules returned a malformed payload for rule '{rule_id}'",
                rule_id=rule_id,
                status_code=response.status_code,
                cause=response.text,
            ) from exc

        logger.debug("Solved %s (HTTP %s)", rule_id, response.status_code)
        return result

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> 'DecisionRulesClient':
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
