"""Run state for the partition/reduce pipeline."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from url_topk.partition.registry import ShardRegistry
from url_topk.reduce.types import TopKList

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    IDLE = "idle"
    PARTITIONING = "partitioning"
    REDUCING = "reducing"
    FINALIZING = "finalizing"
    DONE = "done"
    FAILED = "failed"


# FAILED is reachable from every non-terminal state and handled separately.
_TRANSITIONS: dict[PipelineState, frozenset[PipelineState]] = {
    PipelineState.IDLE: frozenset({PipelineState.PARTITIONING}),
    PipelineState.PARTITIONING: frozenset({PipelineState.REDUCING}),
    PipelineState.REDUCING: frozenset({PipelineState.REDUCING, PipelineState.FINALIZING}),
    PipelineState.FINALIZING: frozenset({PipelineState.DONE}),
    PipelineState.DONE: frozenset(),
    PipelineState.FAILED: frozenset(),
}


@dataclass
class PipelineRun:
    """
    Everything one run carries between stages.

    The registry is filled by partitioning and emptied by cleanup; the
    carried list is replaced, never mutated, after each shard.
    """

    registry: ShardRegistry
    k: int
    state: PipelineState = PipelineState.IDLE
    carried: TopKList = field(default_factory=tuple)
    shard_index: int = -1

    def advance(self, new_state: PipelineState) -> None:
        """Move to new_state, rejecting transitions the pipeline never makes."""
        if new_state is PipelineState.FAILED:
            if self.state in (PipelineState.DONE, PipelineState.FAILED):
                raise RuntimeError(f"cannot fail a run that is already {self.state.value}")
        elif new_state not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"illegal transition {self.state.value} -> {new_state.value}")

        if new_state is PipelineState.REDUCING:
            self.shard_index += 1
            logger.debug("State: %s -> %s[%d]", self.state.value, new_state.value, self.shard_index)
        else:
            logger.debug("State: %s -> %s", self.state.value, new_state.value)
        self.state = new_state
