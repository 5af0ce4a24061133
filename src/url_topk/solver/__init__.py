"""Pipeline driver."""

from url_topk.solver.solve import main_solve, solve
from url_topk.solver.state import PipelineRun, PipelineState

__all__ = ["PipelineRun", "PipelineState", "main_solve", "solve"]
