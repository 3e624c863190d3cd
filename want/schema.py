"""
Pydantic interop for want.

Provides as_pydantic() to reuse want tests as pydantic field validators.
"""

from __future__ import annotations

from typing import Any

from pydantic import PlainValidator, ValidationInfo

from .core import require_label, want
from .types import Test


def as_pydantic(test: Test) -> PlainValidator:
    """
    Wrap a test as a pydantic field validator.

    The field value is checked with want() under the field's name and kept
    as-is; pydantic's own coercion does not run for the field. A failing
    test surfaces as pydantic.ValidationError.

    Usage:
        from typing import Annotated
        from pydantic import BaseModel

        class Address(BaseModel):
            street: Annotated[str, as_pydantic(String(5, 100))]
            country: Annotated[str, as_pydantic(String(2, 2))]
            tags: Annotated[list[str], as_pydantic(Array(String(1), 0, 10))]

        Address(street="Main Street 1", country="VALIDLAND", tags=[])
        # pydantic.ValidationError: ... Input variable "country" fails type check: String
    """
    require_label(test)

    def validate(value: Any, info: ValidationInfo) -> Any:
        want(info.field_name or "value", value, test)
        return value

    return PlainValidator(validate)
