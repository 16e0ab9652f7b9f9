"""
Response Merger - re-attaches original inputs to flow outputs.

The flow service does not echo its input and its response shape varies by
flow: a record, a list of records, a list of scalars or a bare scalar. Each
shape is detected here and merged with the part that produced it.

A one-element list holding a record is collapsed into that record. This is a
heuristic for flows that wrap a single result in a list, not a documented
contract of the remote service.
"""
from typing import Any, Optional

from .models import Part


def is_plain_record(value: Any) -> bool:
    """True for key/value records (not lists, not None, not scalars)."""
    return isinstance(value, dict)


def _input_payload(part: Optional[Part]) -> Optional[dict]:
    return part.to_payload() if part is not None else None


def _merge_item(input_payload: Optional[dict], item: Any) -> dict:
    if is_plain_record(item):
        return {**item, "input": input_payload}
    return {"input": input_payload, "value": item}


def merge_input_with_payload(part: Optional[Part], payload: Any) -> Any:
    """
    Merge one part with one raw flow payload.

    Returns a record, or a list of records when the payload is a list that
    does not collapse to a single record.
    """
    input_payload = _input_payload(part)

    if isinstance(payload, list):
        if len(payload) == 1 and is_plain_record(payload[0]):
            return {**payload[0], "input": input_payload}
        return [_merge_item(input_payload, item) for item in payload]

    return _merge_item(input_payload, payload)


def pair_inputs_with_responses(parts: list[Part], responses: Any) -> list:
    """
    Pair inputs with flow responses.

    A list of responses is paired positionally (element i with part i; an
    element without a matching part gets `input: None`). Any other value is
    treated as one response shared by every part.
    """
    if isinstance(responses, list):
        return [
            merge_input_with_payload(parts[index] if index < len(parts) else None, payload)
            for index, payload in enumerate(responses)
        ]

    return [merge_input_with_payload(part, responses) for part in parts]
