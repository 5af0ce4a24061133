"""Tests for execution-policy helpers."""

from url_topk.solver import execution


def test_executor_override_modes(monkeypatch) -> None:
    monkeypatch.setenv(execution.TOPK_EXECUTOR_ENV, "serial")
    assert execution.describe_executor(execution.get_executor_class()) == "serial"

    monkeypatch.setenv(execution.TOPK_EXECUTOR_ENV, "threads")
    assert execution.describe_executor(execution.get_executor_class()) == "threads"

    monkeypatch.setenv(execution.TOPK_EXECUTOR_ENV, "PROCESSES")
    assert execution.describe_executor(execution.get_executor_class()) == "processes"


def test_executor_defaults_to_serial(monkeypatch) -> None:
    monkeypatch.delenv(execution.TOPK_EXECUTOR_ENV, raising=False)
    assert execution.get_executor_class() is None

    monkeypatch.setenv(execution.TOPK_EXECUTOR_ENV, "bogus")
    assert execution.describe_executor(execution.get_executor_class()) == "serial"
