"""Registry of the shards created by one pipeline run."""

from collections.abc import Iterator
from pathlib import Path
from urllib.parse import quote

from url_topk.partition.types import SHARD_SUFFIX, Shard
from url_topk.reader import ENCODING, ENCODING_ERRORS


def shard_file_name(key: str) -> str:
    """
    Map a partition key to its shard file name.

    Keys are percent-quoted so that separators and other unsafe characters
    still give a legal, unique name; alphanumeric keys are left as they are.
    """
    quoted = quote(key.encode(ENCODING, ENCODING_ERRORS), safe="")
    return f"{quoted}{SHARD_SUFFIX}"


class ShardRegistry:
    """Maps partition keys to shards; owned by a single run."""

    def __init__(self, shard_dir: str | Path = "."):
        self._shard_dir = Path(shard_dir)
        self._shards: dict[str, Shard] = {}

    @property
    def shard_dir(self) -> Path:
        return self._shard_dir

    def reserves(self, path: str | Path) -> bool:
        """True if path could be a shard file of this registry."""
        candidate = Path(path).resolve()
        return candidate.suffix == SHARD_SUFFIX and candidate.parent == self._shard_dir.resolve()

    def get_or_create(self, key: str) -> Shard:
        """Return the shard for key, registering it on first use."""
        shard = self._shards.get(key)
        if shard is None:
            shard = Shard(key=key, path=self._shard_dir / shard_file_name(key))
            self._shards[key] = shard
        return shard

    def get(self, key: str) -> Shard | None:
        return self._shards.get(key)

    def ordered(self) -> list[Shard]:
        """Shards sorted by partition key, the fixed reduce order."""
        return [self._shards[key] for key in sorted(self._shards)]

    def clear(self) -> None:
        self._shards.clear()

    def __len__(self) -> int:
        return len(self._shards)

    def __iter__(self) -> Iterator[Shard]:
        return iter(self._shards.values())

    def __contains__(self, key: object) -> bool:
        return key in self._shards
