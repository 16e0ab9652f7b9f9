"""
Data models for the pricing gateway.

`Part` is a pydantic model so incoming records are validated at the edge while
unknown fields ride along untouched. Derived results use dataclasses, the same
as the rest of the engine.
"""
from dataclasses import dataclass, field
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationError

from ..errors import ClientInputError


Number = Union[StrictInt, StrictFloat]

BODY_NOT_ARRAY = "Body must be a JSON array of parts"


class Part(BaseModel):
    """
    A part submitted for pricing.

    The five pricing fields are required; any additional attributes are kept
    in `model_extra` and echoed verbatim in `to_payload()`.
    """
    model_config = ConfigDict(extra="allow", frozen=True, allow_inf_nan=False)

    base_price: Number = Field(alias="basePrice")
    method: StrictStr
    material: StrictStr
    quantity: Number
    customer_tier: StrictStr = Field(alias="customerTier")

    def to_payload(self) -> dict[str, Any]:
        """Wire representation, extra attributes included."""
        return self.model_dump(by_alias=True)

    @classmethod
    def parse_batch(cls, body: Any) -> list['Part']:
        """
        Validate a decoded JSON body as a batch of parts.

        Raises ClientInputError when the body is not an array or an element is
        not a valid part record.
        """
        if not isinstance(body, list):
            raise ClientInputError(BODY_NOT_ARRAY)

        parts = []
        for index, item in enumerate(body):
            try:
                parts.append(cls.model_validate(item))
            except ValidationError as e:
                first = e.errors()[0]
                location = ".".join(str(loc) for loc in first.get("loc", ())) or "record"
                raise ClientInputError(
                    f"{BODY_NOT_ARRAY}: item {index} is invalid ({location}: {first.get('msg')})"
                ) from e
        return parts


@dataclass
class PricingSummary:
    """Computed price for one part."""
    markup_amount: float
    discount_amount: float
    final_price: float
    manufacturable: bool

    def to_dict(self) -> dict:
        return {
            "markupAmount": self.markup_amount,
            "discountAmount": self.discount_amount,
            "finalPrice": self.final_price,
            "manufacturable": self.manufacturable,
        }


@dataclass
class PartPricing:
    """Pricing result for one part: the input, raw rule outputs and summary."""
    input: Part
    summary: PricingSummary
    outputs: dict[str, Any] = field(default_factory=dict)  # rule name -> raw payload

    def to_dict(self) -> dict:
        return {
            "input": self.input.to_payload(),
            "outputs": self.outputs,
            "summary": self.summary.to_dict(),
        }
