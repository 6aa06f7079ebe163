class PipelineError(Exception):
    """Base exception for pipeline failures."""


class ParseExecutionError(PipelineError):
    """Raised when a pipeline stage fails unexpectedly."""
