"""
Error types for want.
"""

from __future__ import annotations

from typing import Any

from .types import Test


class WantError(ValueError):
    """
    Raised when a value fails its test.

    Attributes:
        name: Name of the checked input variable
        value: The offending value, as passed in
        test: The labeled predicate that rejected it
        label: Shortcut for test.label
    """

    def __init__(self, name: str, value: Any, test: Test):
        super().__init__(f'Input variable "{name}" fails type check: {test.label}')
        self.name = name
        self.value = value
        self.test = test

    @property
    def label(self) -> str:
        return self.test.label
