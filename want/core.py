"""
The want() assertion entry point and the labeled() test helper.
"""

from __future__ import annotations

from typing import Any, Callable

from .errors import WantError
from .types import CheckFn, Test


def want(name: str, value: Any, test: Test) -> None:
    """
    Assert that value passes test.

    Args:
        name: Name of the input variable, used in the error message
        value: The value to check; never modified
        test: A labeled predicate built by String(), Object(), labeled(), ...

    Raises:
        WantError: If the test rejects the value
        TypeError: If test carries no label (a mistake in building the
            test, not bad input)

    Examples:
        want("age", 25, Number(0, 130))                 # passes
        want("tags", [], Array(String(), 1, 5))         # WantError
        want("country", "VALIDLAND", String(2, 2))      # WantError
    """
    if not label_of(test):
        raise TypeError(
            "want() test functions need a non-empty label; "
            "build them with the want constructors or labeled()"
        )

    if not test(value):
        raise WantError(name, value, test)


def label_of(test: Any) -> str | None:
    """Return the label attached to a test, or None if it has none."""
    label = getattr(test, "label", None)
    if isinstance(label, str):
        return label
    return None


def require_label(test: Any) -> str:
    """Return the label of a test used inside a composite, or raise TypeError."""
    label = label_of(test)
    if not label or not callable(test):
        raise TypeError(
            f"Composite tests need labeled tests as input, got {test!r}; "
            "wrap plain functions with labeled()"
        )
    return label


def labeled(label: str, check: CheckFn | None = None) -> Test | Callable[[CheckFn], Test]:
    """
    Attach a label to a hand-rolled check function.

    Can be called directly or used as a decorator:
        is_even = labeled("Even", lambda x: isinstance(x, int) and x % 2 == 0)

        @labeled("Email")
        def email(x):
            return isinstance(x, str) and "@" in x

    Returns:
        A Test, or a decorator producing one when check is omitted.
    """
    if check is not None:
        return Test(check=check, label=label)

    def decorator(func: CheckFn) -> Test:
        return Test(check=func, label=label)

    return decorator
