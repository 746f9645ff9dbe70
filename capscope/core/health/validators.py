"""Value validators used by the health scorer."""

from __future__ import annotations

from typing import Any, Protocol


class ValueValidator(Protocol):
    """Decides whether a present capability value is invalid."""

    def is_invalid(self, value: Any) -> bool: ...


class SubstringValidator:
    """Flag string values that contain a marker substring.

    Stands in for real schema validation; swap in another ValueValidator
    rather than extending this one.
    """

    def __init__(self, marker: str = "invalid") -> None:
        self.marker = marker

    def is_invalid(self, value: Any) -> bool:
        return isinstance(value, str) and self.marker in value
