"""
Type definitions for want.

Provides the labeled predicate record (Test) and the MISSING sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

# Type aliases
CheckFn = Callable[[Any], bool]


class _Missing(Enum):
    """
    Sentinel for an absent value.

    Distinct from None: Nullable() accepts None, Optional() accepts MISSING.
    Object() hands MISSING to a field's test when the key is not present.
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING


@dataclass(frozen=True, slots=True)
class Test:
    """
    Immutable labeled predicate.

    Pairs a check function with the human-readable label used in error
    messages. The label is diagnostic only; it never affects the result.
    """

    __test__ = False  # keep pytest from collecting this class

    check: CheckFn
    label: str

    def __post_init__(self) -> None:
        if not callable(self.check):
            raise TypeError(f"Test check must be callable, got {type(self.check).__name__}")
        if not isinstance(self.label, str):
            raise TypeError(f"Test label must be a string, got {type(self.label).__name__}")

    def __call__(self, value: Any) -> bool:
        return bool(self.check(value))

    def __repr__(self) -> str:
        return f"<Test {self.label}>"
