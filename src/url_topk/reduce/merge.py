"""Bounded top-K merge carried across shards."""

import heapq
from collections.abc import Mapping

from url_topk.reduce.types import DEFAULT_TOP_K, TopKEntry, TopKList


def rank_key(entry: TopKEntry) -> tuple[int, str]:
    """Sort key: count descending, then record ascending for ties."""
    return -entry.count, entry.record


def merge_top_k(
    table: Mapping[str, int],
    carried: TopKList,
    k: int = DEFAULT_TOP_K,
) -> TopKList:
    """
    Merge one shard's frequency table into the carried top-K list.

    A record only ever appears in a single shard, so its count in that
    shard's table is final. Entries cut off here can never come back.

    Returns:
        A new list of at most k entries ordered by rank_key.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")

    candidates = list(carried)
    candidates.extend(TopKEntry(record, count) for record, count in table.items())
    return tuple(heapq.nsmallest(k, candidates, key=rank_key))
