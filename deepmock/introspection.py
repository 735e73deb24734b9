"""Introspection and lifecycle helpers for generated mocks."""

from collections.abc import Iterator, Mapping
from typing import Any, Optional

from deepmock.behavior import RESERVED_NAMES
from deepmock.engine import DeepMock, create_mock
from deepmock.errors import NotAMockError
from deepmock.types import CallInfo, Invocation, MockResult


def is_mock(value: Any) -> bool:
    """
    Check if value is a generated mock.

    Duck-typed: anything callable with a ``mock`` record holding list-valued
    ``calls`` and ``results`` qualifies. Never raises.
    """
    try:
        if not callable(value):
            return False
        state = getattr(value, "mock", None)
        return isinstance(getattr(state, "calls", None), list) and isinstance(
            getattr(state, "results", None), list
        )
    except Exception:
        return False


def get_call_info(mock_fn: Any) -> CallInfo:
    """
    Get call information from a generated mock.

    Raises:
        NotAMockError: If mock_fn is not a generated mock

    Example:
        >>> fn = create_mock()
        >>> _ = fn(42)
        >>> get_call_info(fn).last_call
        Invocation(args=(42,), kwargs={})
    """
    if not is_mock(mock_fn):
        raise NotAMockError(mock_fn)

    calls = mock_fn.mock.calls
    results = mock_fn.mock.results
    return CallInfo(
        call_count=len(calls),
        calls=calls,
        results=results,
        last_call=calls[-1] if calls else Invocation(),
        last_result=results[-1] if results else MockResult("return", None),
    )


def with_defaults(base: Any, defaults: Mapping[str, Any]) -> Any:
    """
    Pre-configure top-level members of a mock.

    For each key, a callable default becomes the member's implementation and
    a plain value becomes its return value. When the member is not a
    generated mock (it was assigned, or the depth bound is zero) the value is
    assigned directly instead.

    Raises:
        ValueError: If a key names a recorder member such as "mock" or "mock_reset"
    """
    reserved = sorted(RESERVED_NAMES.intersection(defaults))
    if reserved:
        raise ValueError(f"Cannot set defaults for reserved mock members: {', '.join(reserved)}")

    for key, value in defaults.items():
        member = getattr(base, key)
        if is_mock(member) and callable(value):
            member.mock_implementation(value)
        elif is_mock(member):
            member.mock_return_value(value)
        else:
            setattr(base, key, value)
    return base


def create_mock_with_defaults(
    defaults: Optional[Mapping[str, Any]] = None,
    *,
    shape: Any = None,
    max_depth: Optional[int] = None,
) -> DeepMock:
    """
    Create a deep mock with some members already configured.

    Example:
        >>> service = create_mock_with_defaults({
        ...     "get_user": lambda user_id: {"id": user_id, "name": "John"},
        ...     "region": "eu-west-1",
        ... })
    """
    return with_defaults(create_mock(shape, max_depth=max_depth), defaults or {})


def iter_mock_tree(root: Any) -> Iterator[Any]:
    """Yield root and every materialized or assigned descendant mock, depth-first."""
    seen: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen or not is_mock(node):
            continue
        seen.add(id(node))
        yield node

        if isinstance(node, DeepMock):
            # Assigned values win over children of the same name
            members = dict(node._mock_children)
            members.update(
                (key, value) for key, value in vars(node).items() if not key.startswith("_mock_")
            )
            stack.extend(reversed([members[key] for key in sorted(members)]))


def clear_all_mocks(*mocks: Any) -> None:
    """Clear recorded calls on every node of the given mock trees."""
    for root in mocks:
        for node in iter_mock_tree(root):
            node.mock_clear()


def reset_all_mocks(*mocks: Any) -> None:
    """Reset calls and behavior on every node of the given mock trees."""
    for root in mocks:
        for node in iter_mock_tree(root):
            node.mock_reset()
