"""Tests for the pipeline state machine."""

import pytest

from url_topk.partition import ShardRegistry
from url_topk.solver import PipelineRun, PipelineState


def new_run(tmp_path) -> PipelineRun:
    return PipelineRun(registry=ShardRegistry(tmp_path), k=100)


def test_happy_path_counts_shards(tmp_path) -> None:
    run = new_run(tmp_path)

    run.advance(PipelineState.PARTITIONING)
    for _ in range(3):
        run.advance(PipelineState.REDUCING)
    run.advance(PipelineState.FINALIZING)
    run.advance(PipelineState.DONE)

    assert run.state is PipelineState.DONE
    assert run.shard_index == 2


def test_failed_is_reachable_from_any_active_state(tmp_path) -> None:
    for steps in ([], [PipelineState.PARTITIONING], [PipelineState.PARTITIONING, PipelineState.REDUCING]):
        run = new_run(tmp_path)
        for step in steps:
            run.advance(step)
        run.advance(PipelineState.FAILED)
        assert run.state is PipelineState.FAILED


def test_rejects_skipping_partitioning(tmp_path) -> None:
    run = new_run(tmp_path)
    with pytest.raises(RuntimeError):
        run.advance(PipelineState.REDUCING)


def test_terminal_states_are_final(tmp_path) -> None:
    run = new_run(tmp_path)
    run.advance(PipelineState.FAILED)
    with pytest.raises(RuntimeError):
        run.advance(PipelineState.FAILED)
    with pytest.raises(RuntimeError):
        run.advance(PipelineState.PARTITIONING)
