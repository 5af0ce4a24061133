"""Partitioning pass: route every record to the shard for its key."""

import logging
from contextlib import closing
from pathlib import Path

from url_topk.errors import InvalidInputError, PipelineIOError
from url_topk.partition.cache import LRUFileCache
from url_topk.partition.registry import ShardRegistry
from url_topk.partition.types import KEY_LENGTH, MAX_OPEN_HANDLES, PartitionStats
from url_topk.reader import encode_record, stream_records

logger = logging.getLogger(__name__)


def partition_key(record: str, key_length: int = KEY_LENGTH) -> str:
    """
    Return the partition key of a record: its first key_length characters.

    Every occurrence of a record maps to the same key, so all copies of a
    record end up in one shard.
    """
    if len(record) < key_length:
        raise InvalidInputError(
            f"record {record!r} is shorter than the partition key length {key_length}"
        )
    return record[:key_length]


def validate_input(input_path: str) -> Path:
    """Reject a missing, non-regular or empty input file before any work."""
    path = Path(input_path)
    try:
        if not path.is_file():
            raise InvalidInputError(f"input file does not exist or is not a file: {input_path}")
        if path.stat().st_size == 0:
            raise InvalidInputError(f"input file is empty: {input_path}")
    except OSError as exc:
        raise PipelineIOError(f"cannot inspect input file {input_path}: {exc}") from exc
    return path


def partition_to_shards(
    input_path: str,
    registry: ShardRegistry,
    key_length: int = KEY_LENGTH,
    max_open_handles: int = MAX_OPEN_HANDLES,
) -> PartitionStats:
    """
    Partition the input file into shard files keyed by record prefix.

    Shards are registered in the given registry as they are created, so the
    caller can clean them up even when partitioning fails part way. Uses an
    LRU cache to limit the number of open file handles.
    """
    validate_input(input_path)

    try:
        registry.shard_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PipelineIOError(f"cannot create shard directory {registry.shard_dir}: {exc}") from exc

    cache = LRUFileCache(max_open_handles)
    stats = PartitionStats()

    try:
        with closing(stream_records(input_path)) as records:
            for line_no, record in enumerate(records, start=1):
                stats.lines_read += 1
                if not record:
                    stats.empty_lines += 1
                    continue

                try:
                    key = partition_key(record, key_length)
                except InvalidInputError as exc:
                    raise InvalidInputError(f"{input_path}:{line_no}: {exc}") from None

                shard = registry.get_or_create(key)
                if not shard.created:
                    stats.shards_created += 1
                    logger.debug("Created shard %r at %s", key, shard.path)

                cache.write(shard, encode_record(record))
                shard.records_written += 1
                stats.records_written += 1

        cache.close_all()
    except OSError as exc:
        raise PipelineIOError(f"I/O error while partitioning {input_path}: {exc}") from exc
    finally:
        # No-op after a successful close_all; releases handles on error paths.
        try:
            cache.close_all()
        except OSError:
            logger.warning("Failed to close shard handles after an earlier error")

    if stats.empty_lines > 0:
        logger.warning("Partition: %d empty lines skipped", stats.empty_lines)

    return stats
