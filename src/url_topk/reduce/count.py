"""Exact per-shard frequency counting."""

import logging
from collections import Counter

from url_topk.errors import PipelineIOError, ShardTooLargeError
from url_topk.partition.types import Shard
from url_topk.reader import BUFFER_SIZE, iter_records
from url_topk.reduce.types import FrequencyTable

logger = logging.getLogger(__name__)

# Shards above this size are assumed not to fit in memory as a hash table.
DEFAULT_MAX_SHARD_BYTES = 500 * 1024 * 1024


def check_shard_size(shard: Shard, max_bytes: int | None) -> int:
    """
    Enforce the shard size limit before counting.

    Oversized shards are not re-partitioned; the run fails instead.
    A max_bytes of None or 0 disables the check.

    Returns:
        The shard file size in bytes.
    """
    try:
        size = shard.path.stat().st_size
    except OSError as exc:
        raise PipelineIOError(f"cannot stat shard {shard.path}: {exc}") from exc

    if max_bytes and size > max_bytes:
        raise ShardTooLargeError(
            f"shard {shard.key!r} is {size} bytes, above the {max_bytes} byte limit; "
            "the key distribution is too skewed for this key length"
        )
    return size


def count_shard(shard_path: str) -> FrequencyTable:
    """Count every record in one shard file."""
    counts: FrequencyTable = Counter()
    try:
        with open(shard_path, "rb", buffering=BUFFER_SIZE) as handle:
            counts.update(iter_records(handle))
    except OSError as exc:
        raise PipelineIOError(f"cannot read shard {shard_path}: {exc}") from exc
    return counts
