"""Deep mocks: recursive, call-recording test doubles for any interface."""

from deepmock.config import MockSettings, get_settings, set_settings
from deepmock.deferred import Deferred, rejected, resolved
from deepmock.engine import DeepMock, create_mock
from deepmock.errors import NotAMockError
from deepmock.introspection import (
    clear_all_mocks,
    create_mock_with_defaults,
    get_call_info,
    is_mock,
    iter_mock_tree,
    reset_all_mocks,
    with_defaults,
)
from deepmock.recorder import CallRecorder, create_recorder
from deepmock.types import CallInfo, Invocation, MockResult, MockState

__all__ = [
    "CallInfo",
    "CallRecorder",
    "DeepMock",
    "Deferred",
    "Invocation",
    "MockResult",
    "MockSettings",
    "MockState",
    "NotAMockError",
    "clear_all_mocks",
    "create_mock",
    "create_mock_with_defaults",
    "create_recorder",
    "get_call_info",
    "get_settings",
    "is_mock",
    "iter_mock_tree",
    "rejected",
    "reset_all_mocks",
    "resolved",
    "set_settings",
    "with_defaults",
]
