"""
Flow Engine - prices parts through the remote pricing flow.

Two modes:
- per part: one flow call per part, issued concurrently
- batch: a single flow call carrying every part

Either way the payload items are wrapped as {"input": part}, and the raw
responses go through the Response Merger so each result carries its input.
"""
import logging
from typing import Any, Optional

from ..config.settings import Settings, get_settings
from ..services.decision_client import RuleEvaluator
from .fanout import gather_fail_fast
from .models import Part
from .response_merger import pair_inputs_with_responses


logger = logging.getLogger(__name__)


class FlowEngine:
    """Orchestrates pricing-flow calls and merges their responses."""

    def __init__(self, evaluator: RuleEvaluator, settings: Optional[Settings] = None):
        self.evaluator = evaluator
        self.settings = settings or get_settings()

    @staticmethod
    def wrap(part: Part) -> dict:
        return {"input": part.to_payload()}

    async def run_per_part(self, parts: list[Part]) -> list[Any]:
        """One flow call per part; raw responses in input order."""
        return await gather_fail_fast([
            self.evaluator.evaluate(self.settings.pricing_flow_id, self.wrap(part))
            for part in parts
        ])

    async def run_batch(self, parts: list[Part]) -> Any:
        """A single flow call for the whole batch; the raw response as returned."""
        return await self.evaluator.evaluate(
            self.settings.pricing_flow_id,
            [self.wrap(part) for part in parts],
        )

    async def run(self, parts: list[Part], batch: bool = False) -> list:
        logger.debug("Running pricing flow for %d part(s) (batch=%s)", len(parts), batch)
        if batch:
            raw = await self.run_batch(parts)
        else:
            raw = await self.run_per_part(parts)
        return pair_inputs_with_responses(parts, raw)
