"""Errors raised by the mock utilities."""

from typing import Any


class NotAMockError(TypeError):
    """Raised when a utility that needs a generated mock gets something else."""

    def __init__(self, value: Any):
        """Initialize with the offending value."""
        self.value = value
        super().__init__(f"Argument must be a mock function, got {type(value).__name__}")
