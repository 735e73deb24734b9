"""Behavior configuration protocol shared by all recorders."""

from collections import deque
from typing import Any, Callable, Optional

from deepmock.deferred import rejected, resolved
from deepmock.types import MockState

Implementation = Callable[..., Any]


def _raiser(error: BaseException) -> Implementation:
    def implementation(*args: Any, **kwargs: Any) -> Any:
        raise error

    return implementation


class BehaviorConfiguration:
    """
    Mixin with the operations that script a recorder's future behavior.

    Every operation returns the recorder so calls can be chained::

        recorder.mock_return_value(None).mock_return_value_once("first")

    Implementations queued with the ``*_once`` variants are consumed in FIFO
    order, one per call, before falling back to the default implementation.
    """

    _mock_state: MockState
    _mock_impl: Optional[Implementation]
    _mock_default_impl: Optional[Implementation]
    _mock_once: deque[Implementation]

    def mock_implementation(self, implementation: Implementation):
        """Replace the default implementation."""
        self._mock_impl = implementation
        return self

    def mock_implementation_once(self, implementation: Implementation):
        """Queue an implementation for the next unclaimed call."""
        self._mock_once.append(implementation)
        return self

    def mock_return_value(self, value: Any):
        """Return value from every call."""
        return self.mock_implementation(lambda *args, **kwargs: value)

    def mock_return_value_once(self, value: Any):
        """Return value from the next unclaimed call."""
        return self.mock_implementation_once(lambda *args, **kwargs: value)

    def mock_resolved_value(self, value: Any):
        """Return an awaitable resolving to value from every call."""
        return self.mock_implementation(lambda *args, **kwargs: resolved(value))

    def mock_resolved_value_once(self, value: Any):
        """Return an awaitable resolving to value from the next unclaimed call."""
        return self.mock_implementation_once(lambda *args, **kwargs: resolved(value))

    def mock_rejected_value(self, error: BaseException):
        """Return an awaitable raising error from every call."""
        return self.mock_implementation(lambda *args, **kwargs: rejected(error))

    def mock_rejected_value_once(self, error: BaseException):
        """Return an awaitable raising error from the next unclaimed call."""
        return self.mock_implementation_once(lambda *args, **kwargs: rejected(error))

    def mock_raise(self, error: BaseException):
        """Raise error synchronously from every call."""
        return self.mock_implementation(_raiser(error))

    def mock_raise_once(self, error: BaseException):
        """Raise error synchronously from the next unclaimed call."""
        return self.mock_implementation_once(_raiser(error))

    def mock_clear(self):
        """Forget recorded calls and results. Configured behavior is kept."""
        self._mock_state.calls = []
        self._mock_state.results = []
        return self

    def mock_reset(self):
        """Forget recorded calls and all configured behavior."""
        self.mock_clear()
        self._mock_once.clear()
        self._mock_impl = self._mock_default_impl
        return self

    def mock_restore(self):
        """Same as mock_reset(); there is no original to restore."""
        return self.mock_reset()


# Members that belong to the recorder itself rather than to the mocked shape
RESERVED_NAMES = frozenset(
    ["mock", *(name for name in vars(BehaviorConfiguration) if name.startswith("mock_"))]
)
