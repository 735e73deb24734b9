"""Call recorder - the callable at every node of a mock tree."""

import logging
from collections import deque
from typing import Any, Optional

from deepmock.behavior import BehaviorConfiguration, Implementation
from deepmock.config import get_settings
from deepmock.types import Invocation, MockResult, MockState

logger = logging.getLogger(__name__)


class CallRecorder(BehaviorConfiguration):
    """Callable that logs each invocation and answers per its configured behavior."""

    def __init__(
        self,
        implementation: Optional[Implementation] = None,
        log_calls: Optional[bool] = None,
    ):
        """
        Initialize recorder.

        Args:
            implementation: Default implementation, restored by mock_reset().
                None makes calls return None.
            log_calls: Log every call at DEBUG (default from settings, read once here)
        """
        if log_calls is None:
            log_calls = get_settings().log_calls
        self._mock_log_calls = log_calls
        self._mock_state = MockState()
        self._mock_default_impl = implementation
        self._mock_impl = implementation
        self._mock_once = deque()

    @property
    def mock(self) -> MockState:
        """Recorded calls and results."""
        return self._mock_state

    def _mock_label(self) -> str:
        return type(self).__name__

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Record the call, then run the next one-shot or the default implementation."""
        # Logged before running so an implementation sees its own call
        self._mock_state.calls.append(Invocation(args, kwargs))
        implementation = self._mock_once.popleft() if self._mock_once else self._mock_impl

        if self._mock_log_calls:
            logger.debug(f"{self._mock_label()} called with args={args!r} kwargs={kwargs!r}")

        try:
            value = implementation(*args, **kwargs) if implementation is not None else None
        except BaseException as e:
            self._mock_state.results.append(MockResult("throw", e))
            logger.debug(f"{self._mock_label()} raised configured {type(e).__name__}: {e}")
            raise

        self._mock_state.results.append(MockResult("return", value))
        return value


def create_recorder(implementation: Optional[Implementation] = None) -> CallRecorder:
    """Create a standalone recorder with an optional default implementation."""
    return CallRecorder(implementation)
