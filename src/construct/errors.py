"""Exception types raised by the construct scaffolder."""

from __future__ import annotations


class InvalidNameError(ValueError):
    """Raised when a project identifier is not of the form ``vendor/project``."""

    def __init__(self, name: str) -> None:
        super().__init__(f'"{name}" is not a valid project name, please use "vendor/project"')
        self.name = name


class ScaffoldError(RuntimeError):
    """Raised when a scaffolding step cannot be completed.

    ``step`` is the 1-based position of the failing step, ``name`` its label and
    ``cause`` the underlying filesystem error.
    """

    def __init__(self, step: int, name: str, cause: BaseException) -> None:
        super().__init__(f"step {step} ({name}) failed: {cause}")
        self.step = step
        self.name = name
        self.cause = cause
