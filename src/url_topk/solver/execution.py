"""Execution policy and executor selection for shard counting."""

import os
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import TypeAlias

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# Environment variable to select the executor.
TOPK_EXECUTOR_ENV = "TOPK_EXECUTOR"


def get_executor_class() -> ExecutorClass:
    """
    Select the executor used to count shards.

    TOPK_EXECUTOR may be "serial" (default), "threads" or "processes".
    Parallel modes keep up to one frequency table per worker in memory at
    once, so they are opt-in. Unknown values fall back to serial.
    """
    executor_override = os.environ.get(TOPK_EXECUTOR_ENV, "").lower()

    if executor_override == "threads":
        return ThreadPoolExecutor
    if executor_override == "processes":
        return ProcessPoolExecutor
    return None


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    if executor_class is ThreadPoolExecutor:
        return "threads"
    return "processes"
