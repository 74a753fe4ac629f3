"""Running plain and blocking work alongside coroutines."""

from __future__ import annotations

import argparse
import asyncio
import functools
import sys
import time
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def sync_function(value: int) -> int:
    """Double value."""
    return value * 2


async def async_function(value: int) -> int:
    """Return sync_function(value) as an awaitable result."""
    return sync_function(value)


async def sleep_task(name: str, seconds: float) -> str:
    """Sleep without blocking, report completion and return name."""
    await asyncio.sleep(seconds)
    print(f"Task {name} completed")
    return name


async def run_blocking(task: Callable[[], T]) -> T:
    """Run a blocking callable in a worker thread and return its result."""
    return await asyncio.to_thread(task)


async def join_tasks(*args: Awaitable[Any]) -> list[Any]:
    """Await all arguments concurrently and return their results in order.

    If any of them fails, the rest are cancelled and the error is raised.
    """
    tasks = [asyncio.ensure_future(awaitable) for awaitable in args]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def _blocking_task(seconds: float) -> None:
    time.sleep(seconds)
    print("Task 4 completed")


async def _demo(scale: float) -> None:
    result = await async_function(5)
    print(f"Result: {result}")
    await join_tasks(
        sleep_task("1", 2 * scale),
        sleep_task("2", 3 * scale),
        sleep_task("3", 4 * scale),
        run_blocking(functools.partial(_blocking_task, 5 * scale)),
    )
    print("All tasks completed successfully")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration tasks; --scale shortens or stretches the delays."""
    parser = argparse.ArgumentParser(description="Run tasks concurrently.")
    parser.add_argument(
        "--scale", type=float, default=1.0, help="multiplier for every delay"
    )
    args = parser.parse_args(argv)
    if args.scale < 0:
        parser.error("--scale must not be negative")
    try:
        asyncio.run(_demo(args.scale))
    except Exception as exc:
        print(f"Error: {exc!r}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())