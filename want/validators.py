"""
Built-in test constructors for want.

Provides factory functions that return labeled Test instances. Leaf tests
(String, Number, Date, Boolean) check a single value; composite tests
(Object, Array, Nullable, Optional) wrap other tests.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from .core import require_label
from .types import MISSING, Test

INFINITY = math.inf


def String(min_length: int = 0, max_length: float = INFINITY) -> Test:
    """
    Validate a str whose length is within range (inclusive).

    Usage:
        String()          # Any string, including ""
        String(1)         # Non-empty
        String(2, 2)      # Exactly two characters
    """

    def check(x: Any) -> bool:
        return isinstance(x, str) and min_length <= len(x) <= max_length

    return Test(check=check, label="String")


def Number(min: float = 0, max: float = INFINITY) -> Test:
    """
    Validate a real number within range (inclusive).

    The lower bound defaults to 0, so negative numbers need an explicit min:
        Number()                  # 0 and up, including inf
        Number(-273.15)           # Temperatures in Celsius
        Number(-INFINITY)         # Any number except NaN

    Any numbers.Real passes the type check (int, float, Fraction, numpy
    scalars). bool is rejected even though it subclasses int.
    """

    def check(x: Any) -> bool:
        if isinstance(x, bool) or not isinstance(x, numbers.Real):
            return False
        # NaN is the only value not equal to itself
        if x != x:
            return False
        return min <= x <= max

    return Test(check=check, label="Number")


def _timestamp(bound: Any) -> float:
    if isinstance(bound, datetime):
        return bound.timestamp()
    return float(bound)


def Date(min: Any = 0, max: Any = INFINITY) -> Test:
    """
    Validate a datetime whose POSIX timestamp is within range (inclusive).

    Bounds may be datetimes or numbers of seconds since the epoch; both are
    converted to float timestamps when the test is built. Naive datetimes
    are read as local time, as datetime.timestamp() does.

    Usage:
        Date()                                  # On or after 1970-01-01 UTC
        Date(datetime(2000, 1, 1, tzinfo=UTC))  # This millennium
    """
    lower = _timestamp(min)
    upper = _timestamp(max)

    def check(x: Any) -> bool:
        if not isinstance(x, datetime):
            return False
        try:
            ts = x.timestamp()
        except (OverflowError, OSError, ValueError):
            return False
        return lower <= ts <= upper

    return Test(check=check, label="Date")


def Boolean() -> Test:
    """Validate a bool. No truthy/falsy coercion: 0, 1 and "true" fail."""

    def check(x: Any) -> bool:
        return isinstance(x, bool)

    return Test(check=check, label="Boolean")


def Object(
    field_tests: Mapping[str, Test] | None = None, extra_fields: bool = True
) -> Test:
    """
    Validate a mapping, optionally checking some of its fields.

    Every key in field_tests is mandatory unless its test is wrapped in
    Optional(); a missing key reaches its test as MISSING. With
    extra_fields=False, keys not listed in field_tests are rejected.

    The label records the configuration, not the fields:
        Object()                    -> "Object(+)"
        Object(None, False)         -> "Object()"
        Object({"id": Number()})    -> "Object(:+)"
        Object({...}, False)        -> "Object(:)"

    Usage:
        Object({
            "street": String(5, 100),
            "apartment": Optional(Nullable(String(1, 50))),
            "country": String(2, 2),
        })
    """
    fields: dict[str, Test] = dict(field_tests) if field_tests is not None else {}
    for test in fields.values():
        require_label(test)

    marker_fields = ":" if field_tests is not None else ""
    marker_extra = "+" if extra_fields else ""
    label = f"Object({marker_fields}{marker_extra})"

    def check(x: Any) -> bool:
        if not isinstance(x, Mapping):
            return False
        for key, test in fields.items():
            if not test(x.get(key, MISSING)):
                return False
        if not extra_fields and set(x) - fields.keys():
            return False
        return True

    return Test(check=check, label=label)


def Array(element_test: Test, min_length: int = 0, max_length: float = INFINITY) -> Test:
    """
    Validate a list or tuple whose elements all pass element_test.

    Usage:
        Array(String())                 # Any list of strings, including []
        Array(String(), 1, 5)           # One to five strings
        Array(Nullable(Number()))       # Numbers and Nones
    """
    label = f"Array({require_label(element_test)})"

    def check(x: Any) -> bool:
        return (
            isinstance(x, (list, tuple))
            and all(element_test(item) for item in x)
            and min_length <= len(x) <= max_length
        )

    return Test(check=check, label=label)


def Nullable(test: Test) -> Test:
    """
    Allow None, validate otherwise.

    MISSING is not accepted; combine with Optional() for that:
        Nullable(String())              # None or a string
        Optional(Nullable(String()))    # MISSING, None or a string
    """
    label = f"Nullable({require_label(test)})"

    def check(x: Any) -> bool:
        return x is None or test(x)

    return Test(check=check, label=label)


def Optional(test: Test) -> Test:
    """
    Allow MISSING (an absent field), validate otherwise.

    None is not accepted unless test itself accepts it; that is Nullable's job.
    """
    label = f"Optional({require_label(test)})"

    def check(x: Any) -> bool:
        return x is MISSING or test(x)

    return Test(check=check, label=label)
