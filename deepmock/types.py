"""Common types for recorded calls and results."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Invocation:
    """Arguments of a single call to a mock."""

    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MockResult:
    """Outcome of a single call to a mock."""

    type: str  # "return" or "throw"
    value: Any = None

    @property
    def raised(self) -> bool:
        """Check if the call ended with an exception."""
        return self.type == "throw"


@dataclass
class MockState:
    """Call and result log of a mock, index-aligned."""

    calls: list[Invocation] = field(default_factory=list)
    results: list[MockResult] = field(default_factory=list)


@dataclass
class CallInfo:
    """Summary of a mock's recorded activity."""

    call_count: int
    calls: list[Invocation]
    results: list[MockResult]
    last_call: Invocation
    last_result: MockResult
