"""Shared constants and metadata structures for partitioning."""

from dataclasses import dataclass
from pathlib import Path

# Records are routed by their first KEY_LENGTH characters.
KEY_LENGTH = 2

# Maximum number of file handles to keep open at once (LRU cache limit).
MAX_OPEN_HANDLES = 128

SHARD_SUFFIX = ".sub"


@dataclass
class Shard:
    """One partition of the input, backed by a single file."""

    key: str
    path: Path
    records_written: int = 0
    # Set once the backing file has been opened (and truncated) this run.
    created: bool = False


@dataclass
class PartitionStats:
    """Statistics from partition_to_shards operation."""

    lines_read: int = 0
    empty_lines: int = 0
    records_written: int = 0
    shards_created: int = 0
