"""Removal of shard files at the end of a run."""

import logging

from url_topk.partition.registry import ShardRegistry

logger = logging.getLogger(__name__)


def cleanup_shards(registry: ShardRegistry) -> int:
    """
    Delete every registered shard file and clear the registry.

    Missing files are ignored and a failed delete is logged, never raised,
    so this is safe to call on any exit path and more than once.

    Returns:
        Number of shard files actually removed.
    """
    removed = 0
    for shard in registry:
        try:
            if shard.path.exists():
                shard.path.unlink(missing_ok=True)
                removed += 1
        except OSError as exc:
            logger.warning("Could not delete shard file %s: %s", shard.path, exc)

    registry.clear()
    return removed
