"""Partitioning of the input into per-key shard files."""

from url_topk.partition.cache import LRUFileCache
from url_topk.partition.cleanup import cleanup_shards
from url_topk.partition.partition import partition_key, partition_to_shards, validate_input
from url_topk.partition.registry import ShardRegistry, shard_file_name
from url_topk.partition.types import KEY_LENGTH, PartitionStats, Shard

__all__ = [
    "KEY_LENGTH",
    "LRUFileCache",
    "PartitionStats",
    "Shard",
    "ShardRegistry",
    "cleanup_shards",
    "partition_key",
    "partition_to_shards",
    "shard_file_name",
    "validate_input",
]
