"""
Diagnostics - structured logging around decision service calls.

Only a bounded summary of the batch is logged (count plus the first few
parts). Nothing in here may raise into the request path: values that cannot
be serialized are logged via str().
"""
import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Sequence

from ..engine.models import Part


logger = logging.getLogger(__name__)

SAMPLE_SIZE = 3
LOG_PREFIX = "[DecisionRules]"


def _as_payload(part: Any) -> Any:
    return part.to_payload() if isinstance(part, Part) else part


def summarize_parts(parts: Sequence[Any]) -> dict:
    """Count plus the first SAMPLE_SIZE parts of a batch."""
    return {
        "count": len(parts),
        "sample": [_as_payload(part) for part in list(parts)[:SAMPLE_SIZE]],
    }


def safe_stringify(value: Any) -> str:
    """Pretty JSON for `value`, or str(value) when it is not serializable."""
    try:
        return json.dumps(value, indent=2)
    except (TypeError, ValueError):
        return str(value)


def _base_log(path: str, parts: Sequence[Any]) -> dict:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": path,
        "parts": summarize_parts(parts),
    }


def log_evaluation_error(err: Any, path: str, parts: Sequence[Any]) -> None:
    """Log a failed request with its batch summary, cause and stack."""
    base_log = _base_log(path, parts)

    if isinstance(err, BaseException):
        message = getattr(err, "message", None) or str(err)
        logger.error("%s Request failed %s", LOG_PREFIX, safe_stringify({**base_log, "message": message}))

        cause = getattr(err, "cause", None)
        if cause is None:
            cause = err.__cause__
        if cause is not None:
            logger.error("%s Cause %s", LOG_PREFIX, safe_stringify(cause))

        if err.__traceback__ is not None:
            logger.error("".join(traceback.format_exception(type(err), err, err.__traceback__)).rstrip())
    else:
        logger.error("%s Non-error thrown %s", LOG_PREFIX, safe_stringify({**base_log, "value": err}))


def log_evaluation_response(path: str, parts: Sequence[Any], payload: Any, enabled: bool) -> None:
    """Log a successful response when response logging is enabled."""
    if not enabled:
        return

    logger.info("%s Response %s", LOG_PREFIX, safe_stringify({**_base_log(path, parts), "payload": payload}))
