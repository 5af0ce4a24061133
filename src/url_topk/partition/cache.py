"""File-handle cache used by partitioning."""

from collections import OrderedDict
from typing import BinaryIO

from url_topk.partition.types import Shard
from url_topk.reader import BUFFER_SIZE


class LRUFileCache:
    """LRU cache for shard write handles to prevent file descriptor exhaustion."""

    def __init__(self, max_handles: int):
        self._max_handles = max_handles
        self._cache: OrderedDict[str, BinaryIO] = OrderedDict()

    def _open(self, shard: Shard) -> BinaryIO:
        # First open truncates stale content; re-opens after eviction append.
        mode = "ab" if shard.created else "wb"
        handle = open(shard.path, mode, buffering=BUFFER_SIZE)  # noqa: SIM115
        shard.created = True
        return handle

    def write(self, shard: Shard, data: bytes) -> None:
        """Write data to the given shard, opening its handle if needed."""
        if shard.key in self._cache:
            self._cache.move_to_end(shard.key)
            handle = self._cache[shard.key]
        else:
            while len(self._cache) >= self._max_handles:
                _, old_handle = self._cache.popitem(last=False)
                old_handle.close()

            handle = self._open(shard)
            self._cache[shard.key] = handle

        handle.write(data)

    def close_all(self) -> None:
        """
        Flush and close all open file handles.

        Every handle is closed even if an earlier close fails; the first
        failure is re-raised afterwards.
        """
        first_error: OSError | None = None
        for handle in self._cache.values():
            try:
                handle.close()
            except OSError as exc:
                if first_error is None:
                    first_error = exc
        self._cache.clear()
        if first_error is not None:
            raise first_error
