"""Violation and scan-result models for the naming linter."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Fix:
    """Replace source characters [start, end) with *text*."""

    start: int
    end: int
    text: str


@dataclass
class NamingViolation:
    file: str
    line: int
    column: int
    rule: str
    message: str
    severity: str = "error"
    expected_name: str | None = None
    actual_name: str | None = None
    fix: Fix | None = None

    @property
    def detail(self) -> str:
        if self.expected_name is None:
            return self.message
        return f"{self.message} (expected: {self.expected_name})"

    @property
    def suggestion(self) -> str | None:
        if self.expected_name is None:
            return None
        return f"Rename to `{self.expected_name}`"


@dataclass
class ScanResult:
    violations: list[NamingViolation] = field(default_factory=list)
    files_scanned: int = 0

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == "warn")

    @property
    def ok(self) -> bool:
        return self.error_count == 0
