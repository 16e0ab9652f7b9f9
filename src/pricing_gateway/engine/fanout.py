"""
Fan-out helper shared by the pricing and flow engines.
"""
import asyncio
from typing import Any, Awaitable, Iterable


async def gather_fail_fast(awaitables: Iterable[Awaitable[Any]]) -> list[Any]:
    """
    Run awaitables concurrently and return their results in input order.

    The first failure cancels every task still pending and is re-raised;
    results of tasks that already finished are discarded.
    """
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    if not tasks:
        return []

    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        raise

    if pending:
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    errors = [
        task.exception()
        for task in tasks
        if task.done() and not task.cancelled() and task.exception() is not None
    ]
    if errors:
        raise errors[0]

    return [task.result() for task in tasks]
