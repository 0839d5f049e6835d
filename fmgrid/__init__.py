"""Grid primitives, graph search helpers, a spanning-tree baseline, path validation, scenarios and timing."""

__version__ = "0.1.0"

__all__ = [
    "baseline",
    "graph",
    "grid",
    "scenario",
    "timer",
    "validate",
]