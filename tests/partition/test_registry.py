"""Tests for ShardRegistry and shard naming."""

from pathlib import Path

from url_topk.partition import ShardRegistry, shard_file_name


def test_shard_file_name_keeps_plain_keys() -> None:
    assert shard_file_name("ab") == "ab.sub"
    assert shard_file_name("A9") == "A9.sub"


def test_shard_file_name_quotes_unsafe_characters() -> None:
    assert shard_file_name("//") == "%2F%2F.sub"
    assert shard_file_name("%2") == "%252.sub"
    assert "/" not in shard_file_name("a/")


def test_get_or_create_returns_same_shard(tmp_path) -> None:
    registry = ShardRegistry(tmp_path)

    first = registry.get_or_create("ab")
    second = registry.get_or_create("ab")

    assert first is second
    assert first.path == Path(tmp_path) / "ab.sub"
    assert len(registry) == 1


def test_ordered_sorts_by_key(tmp_path) -> None:
    registry = ShardRegistry(tmp_path)
    for key in ("zz", "ab", "mm", "Ab"):
        registry.get_or_create(key)

    assert [shard.key for shard in registry.ordered()] == ["Ab", "ab", "mm", "zz"]


def test_clear_empties_registry(tmp_path) -> None:
    registry = ShardRegistry(tmp_path)
    registry.get_or_create("ab")

    registry.clear()

    assert len(registry) == 0
    assert registry.get("ab") is None


def test_reserves_shard_named_paths_only(tmp_path) -> None:
    registry = ShardRegistry(tmp_path)

    assert registry.reserves(tmp_path / "aa.sub")
    assert registry.reserves(str(tmp_path / "sub" / ".." / "zz.sub"))
    assert not registry.reserves(tmp_path / "aa.txt")
    assert not registry.reserves(tmp_path / "nested" / "aa.sub")
