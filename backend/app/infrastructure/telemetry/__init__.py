from .tracing import setup_tracing, traced
from .metrics import count_success, render_latest

__all__ = [
    "setup_tracing",
    "traced",
    "count_success",
    "render_latest",
]
