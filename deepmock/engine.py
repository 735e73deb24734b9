"""Deep mock engine - lazily materialized, depth-bounded trees of recorders."""

import logging
from collections import deque
from typing import Any, Optional

from deepmock.config import get_settings
from deepmock.recorder import CallRecorder
from deepmock.types import MockState

logger = logging.getLogger(__name__)


def _is_passthrough(name: str) -> bool:
    """Names the engine never materializes: dunders and its own state."""
    return (name.startswith("__") and name.endswith("__")) or name.startswith("_mock_")


class DeepMock(CallRecorder):
    """
    Recorder whose unknown attributes are recorders too.

    Reading an attribute that was neither assigned nor seen before creates a
    child one level deeper and caches it, so repeated reads return the same
    child. Once a child would sit deeper than max_depth, reads return None
    instead and nothing is cached; this is what keeps self-referential shapes
    finite. Calling a node returns a fresh nested mock unless configured
    otherwise.

    Assigning an attribute stores the value as-is and it wins over any child
    of the same name. dir() lists only assigned and materialized names.
    """

    def __init__(
        self,
        depth: int = 0,
        max_depth: int = 10,
        name: str = "mock",
        log_calls: Optional[bool] = None,
    ):
        """
        Initialize deep mock node.

        Args:
            depth: Distance from the root of the tree
            max_depth: Deepest level at which nodes are still created
            name: Dotted path used in repr and log messages
            log_calls: Log every call at DEBUG (default from settings)
        """
        super().__init__(implementation=self._mock_nested, log_calls=log_calls)
        self._mock_depth = depth
        self._mock_max_depth = max_depth
        self._mock_name = name
        self._mock_children: dict[str, DeepMock] = {}

    def _mock_label(self) -> str:
        return self._mock_name

    def _mock_spawn(self, name: str) -> Optional["DeepMock"]:
        depth = self._mock_depth + 1
        if depth > self._mock_max_depth:
            logger.debug(f"Depth bound {self._mock_max_depth} reached at {name}, returning None")
            return None
        return DeepMock(
            depth=depth,
            max_depth=self._mock_max_depth,
            name=name,
            log_calls=self._mock_log_calls,
        )

    def _mock_nested(self, *args: Any, **kwargs: Any) -> Optional["DeepMock"]:
        return self._mock_spawn(f"{self._mock_name}()")

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails: assigned values and the
        # behavior protocol never get here.
        if _is_passthrough(name):
            raise AttributeError(name)

        children = self._mock_children
        if name in children:
            return children[name]

        child = self._mock_spawn(f"{self._mock_name}.{name}")
        if child is not None:
            children[name] = child
            logger.debug(f"Materialized {child._mock_name} at depth {child._mock_depth}")
        return child

    def __delattr__(self, name: str) -> None:
        if _is_passthrough(name):
            super().__delattr__(name)
            return

        found = name in self.__dict__
        if found:
            super().__delattr__(name)
        if self._mock_children.pop(name, None) is not None:
            found = True
        if not found:
            raise AttributeError(name)

    def __dir__(self) -> list[str]:
        assigned = {key for key in self.__dict__ if not key.startswith("_mock_")}
        return sorted(assigned | set(self._mock_children))

    def __copy__(self) -> "DeepMock":
        # Own logs, queue and default; children and assigned values are shared
        clone = DeepMock(
            depth=self._mock_depth,
            max_depth=self._mock_max_depth,
            name=self._mock_name,
            log_calls=self._mock_log_calls,
        )
        clone._mock_state = MockState(list(self._mock_state.calls), list(self._mock_state.results))
        clone._mock_once = deque(self._mock_once)
        if self._mock_impl is not self._mock_default_impl:
            clone._mock_impl = self._mock_impl
        clone._mock_children = dict(self._mock_children)
        for key, value in vars(self).items():
            if not key.startswith("_mock_"):
                setattr(clone, key, value)
        return clone

    def __repr__(self) -> str:
        return f"<DeepMock name={self._mock_name!r} depth={self._mock_depth}>"


def create_mock(
    shape: Any = None,
    *,
    max_depth: Optional[int] = None,
    name: Optional[str] = None,
) -> DeepMock:
    """
    Create a deep mock standing in for shape.

    The shape is only used for naming; its members are never inspected and
    any call or attribute access is accepted.

    Args:
        shape: Class, protocol or function being mocked (optional)
        max_depth: Depth bound for this tree (default from settings)
        name: Display name of the root (default: shape's __name__, or "mock")

    Example:
        >>> service = create_mock(UserService)
        >>> _ = service.repository.find_by_id.mock_return_value({"id": "1"})
        >>> service.repository.find_by_id("1")
        {'id': '1'}
    """
    settings = get_settings()
    if max_depth is None:
        max_depth = settings.max_depth
    if name is None:
        name = getattr(shape, "__name__", None) or "mock"
    return DeepMock(depth=0, max_depth=max_depth, name=name, log_calls=settings.log_calls)
