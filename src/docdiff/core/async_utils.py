"""Async helpers for running CPU-bound diffs off the event loop.

The diff engine is synchronous and quadratic, so batch callers push each
document pair onto a worker thread.  ``DiffRunner`` caps how many of those
threads are busy at once.
"""

import asyncio
import logging
from typing import Any, Callable, Coroutine, Sequence, TypeVar

T = TypeVar("T")
logger = logging.getLogger(__name__)


async def run_sync(
    func: Callable[..., T], *args: Any, **kwargs: Any
) -> T:
    """Run a synchronous function in a thread pool without blocking the event loop.

    Args:
        func: Synchronous function to call
        *args: Positional arguments for func
        **kwargs: Keyword arguments for func

    Returns:
        Result of func(*args, **kwargs)

    Example:
        operations = await run_sync(compute_line_diff, old_text, new_text)
    """
    return await asyncio.to_thread(func, *args, **kwargs)


class DiffRunner:
    """Bounded thread-pool dispatcher for synchronous diff work.

    Usage:
        runner = DiffRunner(max_parallel=4)
        results = await runner.gather(
            [runner.run(diff_document, pair) for pair in pairs]
        )
    """

    def __init__(self, max_parallel: int = 4):
        if max_parallel < 1:
            raise ValueError(
                f"max_parallel must be at least 1, got {max_parallel}"
            )
        self.max_parallel = max_parallel
        self._semaphore = asyncio.Semaphore(max_parallel)
        logger.debug(
            "Diff runner initialized: max_parallel=%d", max_parallel
        )

    async def run(
        self, func: Callable[..., T], *args: Any, **kwargs: Any
    ) -> T:
        """Run *func* on a worker thread once a slot is free."""
        async with self._semaphore:
            return await run_sync(func, *args, **kwargs)

    async def gather(
        self, coros: Sequence[Coroutine[Any, Any, T]]
    ) -> list[T]:
        """Await *coros* concurrently, returning results in input order.

        Each coroutine should come from ``run()`` so the cap applies.
        Exceptions propagate from the first failure.
        """
        return list(await asyncio.gather(*coros))
