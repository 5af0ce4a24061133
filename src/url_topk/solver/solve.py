import logging
import os
import time
from collections import deque
from collections.abc import Iterator
from concurrent.futures import Future
from contextlib import closing
from itertools import islice
from pathlib import Path

from url_topk.errors import InvalidInputError
from url_topk.output import format_entry, write_results
from url_topk.partition import KEY_LENGTH, ShardRegistry, cleanup_shards, partition_to_shards
from url_topk.reduce import (
    DEFAULT_MAX_SHARD_BYTES,
    DEFAULT_TOP_K,
    FrequencyTable,
    TopKList,
    check_shard_size,
    count_shard,
    merge_top_k,
)
from url_topk.solver.execution import ExecutorClass, describe_executor, get_executor_class
from url_topk.solver.state import PipelineRun, PipelineState

logger = logging.getLogger(__name__)


def iter_frequency_tables(
    shard_paths: list[str],
    executor_class: ExecutorClass,
    workers: int | None = None,
) -> Iterator[FrequencyTable]:
    """
    Yield one frequency table per shard, in the order of shard_paths.

    Serial mode counts a shard only when the previous table has been
    consumed. Executors keep at most max_workers shards in flight and
    results are taken in submission order, so the merge order is the same
    for every executor and at most max_workers + 1 tables are alive.
    """
    if executor_class is None:
        for path in shard_paths:
            yield count_shard(path)
        return

    max_in_flight = workers or os.cpu_count() or 1
    remaining = iter(shard_paths)

    with executor_class(max_workers=workers) as executor:
        pending: deque[Future[FrequencyTable]] = deque(
            executor.submit(count_shard, path) for path in islice(remaining, max_in_flight)
        )
        while pending:
            table = pending.popleft().result()
            next_path = next(remaining, None)
            if next_path is not None:
                pending.append(executor.submit(count_shard, next_path))
            yield table


def solve(
    input_path: str,
    output_path: str,
    k: int = DEFAULT_TOP_K,
    shard_dir: str = ".",
    key_length: int = KEY_LENGTH,
    max_shard_bytes: int | None = DEFAULT_MAX_SHARD_BYTES,
    workers: int | None = None,
) -> TopKList:
    """
    Find the k most frequent records in the input and write them to output_path.

    Two-pass algorithm:
    1. Partition records into shard files by their key prefix
    2. Count each shard exactly, in sorted key order, merging every table
       into the top-k list carried from the previous shards
    3. Write the carried list

    Shard files are removed on every exit path. A failed run may leave a
    partial or stale output file.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if key_length < 1:
        raise ValueError(f"key_length must be at least 1, got {key_length}")

    total_start = time.perf_counter()
    input_file = Path(input_path)

    executor_class = get_executor_class()
    executor_name = describe_executor(executor_class)
    workers_desc = "auto" if workers is None else str(workers)

    logger.info(
        f"Starting: file={input_file.name}, k={k}, key_length={key_length}, "
        f"shard_dir={shard_dir}, executor={executor_name}, workers={workers_desc}"
    )

    run = PipelineRun(registry=ShardRegistry(shard_dir), k=k)

    try:
        # Shard files are truncated on creation and deleted at cleanup.
        for role, path in (("input", input_path), ("output", output_path)):
            if run.registry.reserves(path):
                raise InvalidInputError(
                    f"{role} file {path} lies in shard directory {shard_dir} with the "
                    f"shard suffix and could be overwritten or deleted"
                )

        # Pass 1: partition to shards.
        run.advance(PipelineState.PARTITIONING)
        t1_start = time.perf_counter()
        stats = partition_to_shards(input_path, run.registry, key_length=key_length)
        t1 = time.perf_counter() - t1_start

        logger.info(
            "Pass 1 done: %d records into %d shards in %.2fs",
            stats.records_written,
            len(run.registry),
            t1,
        )

        if not run.registry:
            raise InvalidInputError(f"input file has no non-empty records: {input_path}")

        shards = run.registry.ordered()
        for shard in shards:
            size = check_shard_size(shard, max_shard_bytes)
            logger.debug("Shard %r: %d records, %d bytes", shard.key, shard.records_written, size)

        # Pass 2: count and merge shards in key order.
        t2_start = time.perf_counter()
        shard_paths = [str(shard.path) for shard in shards]
        with closing(iter_frequency_tables(shard_paths, executor_class, workers)) as tables:
            for shard, table in zip(shards, tables, strict=True):
                run.advance(PipelineState.REDUCING)
                run.carried = merge_top_k(table, run.carried, run.k)
                logger.debug(
                    "Shard %r: %d distinct records, carried %d",
                    shard.key,
                    len(table),
                    len(run.carried),
                )

        t2 = time.perf_counter() - t2_start
        logger.info("Pass 2 done: %d shards reduced in %.2fs", len(shards), t2)

        total_passes = t1 + t2
        if total_passes > 0:
            logger.debug(
                "Timing breakdown: Pass1=%.2fs (%.0f%%), Pass2=%.2fs (%.0f%%)",
                t1,
                100 * t1 / total_passes,
                t2,
                100 * t2 / total_passes,
            )

        run.advance(PipelineState.FINALIZING)
        write_results(run.carried, output_path)
        run.advance(PipelineState.DONE)

        total_time = time.perf_counter() - total_start
        logger.info("Result: %d entries written to %s (total %.2fs)", len(run.carried), output_path, total_time)
        return run.carried

    except Exception:
        failed_in = run.state.value
        run.advance(PipelineState.FAILED)
        logger.debug("Run failed during %s", failed_in)
        raise

    finally:
        removed = cleanup_shards(run.registry)
        logger.debug("Cleanup: %d shard files removed", removed)


def main_solve(
    input_path: str,
    output_path: str,
    k: int = DEFAULT_TOP_K,
    shard_dir: str = ".",
    key_length: int = KEY_LENGTH,
    max_shard_bytes: int | None = DEFAULT_MAX_SHARD_BYTES,
    workers: int | None = None,
) -> TopKList:
    """Main entry point that runs the pipeline and reports the top record."""
    result = solve(
        input_path,
        output_path,
        k=k,
        shard_dir=shard_dir,
        key_length=key_length,
        max_shard_bytes=max_shard_bytes,
        workers=workers,
    )

    if result:
        logger.info("Top record: %s", format_entry(result[0]))
    return result
