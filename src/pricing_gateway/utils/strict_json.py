"""
JSON decoding that refuses NaN, Infinity and -Infinity.

The stdlib decoder accepts those tokens, but they are not JSON and cannot be
rendered back into a response.
"""
import json
from typing import Any, Union


def reject_constant(token: str):
    raise ValueError(f"Non-standard JSON constant: {token}")


def loads(raw: Union[str, bytes]) -> Any:
    return json.loads(raw, parse_constant=reject_constant)
