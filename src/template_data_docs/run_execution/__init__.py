"""Run execution domain exports."""

from .render_run_use_case import RenderExecutionError, execute_render_run
from .run_contracts import RenderOutcome, RenderRequest

__all__ = [
    "RenderRequest",
    "RenderOutcome",
    "RenderExecutionError",
    "execute_render_run",
]
