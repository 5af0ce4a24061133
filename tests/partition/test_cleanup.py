"""Tests for shard cleanup."""

from pathlib import Path

from url_topk.partition import ShardRegistry, cleanup_shards


def test_removes_all_shard_files(tmp_path) -> None:
    registry = ShardRegistry(tmp_path)
    for key in ("aa", "ab"):
        registry.get_or_create(key).path.write_text("x\n")

    removed = cleanup_shards(registry)

    assert removed == 2
    assert list(tmp_path.glob("*.sub")) == []
    assert len(registry) == 0


def test_missing_files_are_ignored(tmp_path) -> None:
    registry = ShardRegistry(tmp_path)
    registry.get_or_create("aa").path.write_text("x\n")
    registry.get_or_create("ab")  # never written

    assert cleanup_shards(registry) == 1


def test_is_idempotent(tmp_path) -> None:
    registry = ShardRegistry(tmp_path)
    registry.get_or_create("aa").path.write_text("x\n")

    assert cleanup_shards(registry) == 1
    assert cleanup_shards(registry) == 0


def test_failed_delete_is_logged_not_raised(tmp_path, monkeypatch, caplog) -> None:
    registry = ShardRegistry(tmp_path)
    shard = registry.get_or_create("aa")
    shard.path.write_text("x\n")

    def refuse(self, missing_ok=False):
        raise PermissionError("read-only")

    monkeypatch.setattr(Path, "unlink", refuse)

    assert cleanup_shards(registry) == 0
    assert "Could not delete shard file" in caplog.text
    assert len(registry) == 0
