"""
Pricing Engine - prices parts through three remote decision rules.

For every part the markup, discount and manufacturability rules are solved
concurrently, and every part is priced concurrently with the others:

    finalPrice = basePrice + markupAmount - discountAmount

A failed rule call aborts the whole batch; no partial pricing is returned.
"""
import logging
from typing import Optional

from ..config.settings import Settings, get_settings
from ..services.decision_client import RuleEvaluator
from .fanout import gather_fail_fast
from .models import Part, PartPricing, PricingSummary
from .result_reader import read_discount_amount, read_feasible, read_markup_amount


logger = logging.getLogger(__name__)


class PricingEngine:
    """Orchestrates the per-rule pricing calls for a batch of parts."""

    def __init__(self, evaluator: RuleEvaluator, settings: Optional[Settings] = None):
        self.evaluator = evaluator
        self.settings = settings or get_settings()

    async def price_part(self, part: Part) -> PartPricing:
        payload = part.to_payload()
        markup_res, discount_res, manufact_res = await gather_fail_fast([
            self.evaluator.evaluate(self.settings.markup_rule_id, payload),
            self.evaluator.evaluate(self.settings.discount_rule_id, payload),
            self.evaluator.evaluate(self.settings.manufacturability_rule_id, payload),
        ])

        markup_amount = read_markup_amount(markup_res)
        discount_amount = read_discount_amount(discount_res)

        summary = PricingSummary(
            markup_amount=markup_amount,
            discount_amount=discount_amount,
            final_price=part.base_price + markup_amount - discount_amount,
            manufacturable=read_feasible(manufact_res),
        )

        return PartPricing(
            input=part,
            summary=summary,
            outputs={
                "markup": markup_res,
                "discount": discount_res,
                "manufacturability": manufact_res,
            },
        )

    async def price_parts(self, parts: list[Part]) -> list[PartPricing]:
        """Price every part; output order matches input order."""
        logger.debug("Pricing %d part(s) via rules", len(parts))
        return await gather_fail_fast([self.price_part(part) for part in parts])
