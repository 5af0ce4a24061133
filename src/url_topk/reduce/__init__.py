"""Per-shard counting and top-K merging."""

from url_topk.reduce.count import DEFAULT_MAX_SHARD_BYTES, check_shard_size, count_shard
from url_topk.reduce.merge import merge_top_k, rank_key
from url_topk.reduce.types import DEFAULT_TOP_K, FrequencyTable, TopKEntry, TopKList

__all__ = [
    "DEFAULT_MAX_SHARD_BYTES",
    "DEFAULT_TOP_K",
    "FrequencyTable",
    "TopKEntry",
    "TopKList",
    "check_shard_size",
    "count_shard",
    "merge_top_k",
    "rank_key",
]
