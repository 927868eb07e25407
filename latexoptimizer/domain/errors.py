"""Exceptions raised by latexoptimizer."""

from pathlib import Path


class LatexOptimizerError(Exception):
    """Base class for all latexoptimizer errors."""


class OperationError(LatexOptimizerError):
    """A filesystem mutation failed and the running operation was aborted.

    Attributes:
        action: The attempted action, e.g. "archive" or "link".
        path: The path the action failed on.
    """

    def __init__(self, action: str, path: str | Path, cause: BaseException | None = None) -> None:
        self.action = action
        self.path = Path(path)
        message = f"Failed to {action} {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
