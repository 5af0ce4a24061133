"""Shared type definitions for the reduce pass."""

from collections import Counter
from dataclasses import dataclass
from typing import TypeAlias

DEFAULT_TOP_K = 100

FrequencyTable: TypeAlias = Counter[str]


@dataclass(frozen=True, slots=True)
class TopKEntry:
    """A record and its exact global occurrence count."""

    record: str
    count: int


TopKList: TypeAlias = tuple[TopKEntry, ...]
