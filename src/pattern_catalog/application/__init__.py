"""Application layer - runs the pattern demos."""

from pattern_catalog.application.demos import DEMOS, DemoResult, run_all, run_demo

__all__ = [
    "DEMOS",
    "DemoResult",
    "run_demo",
    "run_all",
]
