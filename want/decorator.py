"""
The @wants decorator for checking function arguments.
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable

from .core import require_label, want
from .types import Test


def wants(**tests: Test) -> Callable[[Callable], Callable]:
    """
    Decorator that checks a function's arguments with want() before each call.

    Each keyword names a parameter of the decorated function and gives the
    test its argument must pass. Arguments left to their defaults are
    checked too. Parameters without a test are not checked.

        @wants(username=String(1, 64), age=Optional(Number(0, 130)))
        def register(username, age=MISSING): ...

        register("amy")            # OK
        register("", age=30)       # WantError for "username"

    Raises:
        TypeError: At decoration time, if a keyword does not name a parameter
            of the function or its test is unlabeled.
    """
    for test in tests.values():
        require_label(test)

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)
        unknown = [key for key in tests if key not in signature.parameters]
        if unknown:
            raise TypeError(
                f"@wants names parameters not in {func.__qualname__}(): {', '.join(unknown)}"
            )

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()

            # Check in the order the tests were declared
            for key, test in tests.items():
                want(key, bound.arguments[key], test)

            return func(*args, **kwargs)

        return wrapper

    return decorator
