import asyncio
import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from pricing_gateway.config.settings import Settings
from pricing_gateway.engine.models import Part


MARKUP_RULE = "markup-rule"
DISCOUNT_RULE = "discount-rule"
MANUFACT_RULE = "manufact-rule"
PRICING_FLOW = "pricing-flow"


class FakeEvaluator:
    """
    In-memory RuleEvaluator.

    `responses` maps rule id -> value, or a function of the payload.
    `failures` maps rule id -> function of the payload returning an
    exception to raise (or None to answer normally).
    """

    def __init__(self, responses=None, failures=None):
        self.responses = responses or {}
        self.failures = failures or {}
        self.calls = []

    async def evaluate(self, rule_id, payload, version=None):
        self.calls.append((rule_id, payload))
        await asyncio.sleep(0)

        failure = self.failures.get(rule_id)
        error = failure(payload) if failure else None
        if error is not None:
            raise error

        response = self.responses.get(rule_id)
        return response(payload) if callable(response) else response

    def calls_for(self, rule_id):
        return [payload for called_id, payload in self.calls if called_id == rule_id]


def part_payload(**overrides):
    payload = {
        "basePrice": 100,
        "method": "CNC",
        "material": "Aluminum",
        "quantity": 50,
        "customerTier": "Gold",
    }
    payload.update(overrides)
    return payload


def make_part(**overrides) -> Part:
    return Part.model_validate(part_payload(**overrides))


@pytest.fixture
def settings(tmp_path):
    return Settings(
        solver_key="test-key",
        decision_rules_host="https://decisions.test",
        markup_rule_id=MARKUP_RULE,
        discount_rule_id=DISCOUNT_RULE,
        manufacturability_rule_id=MANUFACT_RULE,
        pricing_flow_id=PRICING_FLOW,
        index_html=tmp_path / "index.html",
    )


@pytest.fixture
def pricing_responses():
    """Markup 10, discount 5, feasible: the reference pricing example."""
    return {
        MARKUP_RULE: {"markupAmount": 10},
        DISCOUNT_RULE: {"discountValue": 5},
        MANUFACT_RULE: {"isFeasible": True},
    }
