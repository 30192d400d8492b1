"""
Thread pool for blocking I/O inside async operations.

The transcript provider and the OpenAI client are synchronous; running them
here keeps the event loop free while a batch awaits each call in turn.
"""
import asyncio
import functools
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, TypeVar

T = TypeVar("T")

# Thread pool for blocking I/O operations
executor = ThreadPoolExecutor(max_workers=4)


async def run_blocking(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run a synchronous function in the thread pool executor.

    Args:
        func: Synchronous function to run
        *args, **kwargs: Arguments to pass to the function

    Returns:
        Result from the function (exceptions propagate to the awaiting task)
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, functools.partial(func, *args, **kwargs))
