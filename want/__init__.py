"""
want - Runtime input validation with composable labeled tests.

Usage:
    from want import want, String, Number, Object, Optional, Nullable, Array

    address = Object({
        "street": String(5, 100),
        "apartment": Optional(Nullable(String(1, 50))),
        "country": String(2, 2),
    })

    want("address", payload, address)   # raises WantError on bad input
"""

from .core import labeled, want
from .decorator import wants
from .errors import WantError
from .schema import as_pydantic
from .types import MISSING, Test
from .validators import (
    INFINITY,
    Array,
    Boolean,
    Date,
    Nullable,
    Number,
    Object,
    Optional,
    String,
)

__all__ = [
    # Entry point
    "want",
    "WantError",
    # Tests
    "Test",
    "MISSING",
    "INFINITY",
    "labeled",
    "String",
    "Number",
    "Date",
    "Boolean",
    "Object",
    "Array",
    "Nullable",
    "Optional",
    # Integration
    "wants",
    "as_pydantic",
]
