from gedcom_tree.core.context import LayoutContext, LayoutResult
from gedcom_tree.core.exceptions import ParseExecutionError, PipelineError
from gedcom_tree.core.pipeline import Pipeline

__all__ = [
    "LayoutContext",
    "LayoutResult",
    "ParseExecutionError",
    "Pipeline",
    "PipelineError",
]
