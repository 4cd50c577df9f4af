"""Result preset dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ResultPreset:
    """Named bundle of canned behaviour for backend operations.

    Attributes:
        id: Unique preset identifier
        name: Human-readable name
        description: What the preset simulates
        results: Values to register per operation (operation -> values)
        errors: Business errors per operation
        failures: Failure messages per operation
        is_builtin: Whether the preset ships with the package code
    """

    id: str
    name: str
    description: str = ""
    results: dict[str, tuple[Any, ...]] = field(default_factory=dict)
    errors: dict[str, BaseException] = field(default_factory=dict)
    failures: dict[str, str] = field(default_factory=dict)
    is_builtin: bool = False

    def operations(self) -> list[str]:
        """Every operation the preset configures, sorted."""
        return sorted(set(self.results) | set(self.errors) | set(self.failures))
