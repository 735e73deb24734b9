"""Deferred values returned by resolved/rejected mock implementations."""

import asyncio
from typing import Any, Generator, Optional


class Deferred:
    """
    Awaitable that settles with a value or an exception.

    Unlike a coroutine object, a Deferred can be awaited any number of times
    and does not warn when it is dropped without being awaited. Each await
    yields to the event loop once before settling.
    """

    def __init__(self, value: Any = None, error: Optional[BaseException] = None):
        """
        Initialize deferred value.

        Args:
            value: Value produced when the deferred resolves
            error: Exception raised when the deferred is rejected
        """
        self.value = value
        self.error = error

    @property
    def rejected(self) -> bool:
        """Check if awaiting this deferred raises."""
        return self.error is not None

    async def _settle(self) -> Any:
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.value

    def __await__(self) -> Generator[Any, None, Any]:
        return self._settle().__await__()

    def __repr__(self) -> str:
        if self.rejected:
            return f"<Deferred rejected={self.error!r}>"
        return f"<Deferred resolved={self.value!r}>"


def resolved(value: Any = None) -> Deferred:
    """Create a deferred that resolves to value."""
    return Deferred(value=value)


def rejected(error: BaseException) -> Deferred:
    """Create a deferred that raises error when awaited."""
    return Deferred(error=error)
