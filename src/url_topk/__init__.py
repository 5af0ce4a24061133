"""url-topk - Find the most frequent URLs in a corpus larger than memory."""

from url_topk.solver.solve import main_solve, solve

__all__ = ["solve", "main_solve"]
