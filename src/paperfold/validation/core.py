"""
Core data structures for the validation system.

Defines the fundamental types used throughout the validation package:
- Severity: Issue severity levels (INFO, WARN, FAIL)
- ValidationIssue: Individual validation finding
- ValidationResult: Collection of issues with pass/fail status
- ValidationError: Exception raised when validation fails
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


class Severity(Enum):
    """Validation issue severity levels.

    - INFO: Informational, doesn't affect pass/fail
    - WARN: Suspicious but consistent level state
    - FAIL: Broken square/joint graph
    """
    INFO = auto()
    WARN = auto()
    FAIL = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class ValidationIssue:
    """Represents a single validation finding.

    Attributes:
        severity: Issue severity (INFO, WARN, FAIL)
        code: Rule code (e.g., "JOINT-003")
        message: Human-readable description
        rule_reference: Invariant the rule protects
        remediation: Optional suggested fix
        location: Optional grid coordinate, as text
        square: Optional square id
        joint: Optional joint id
    """
    severity: Severity
    code: str
    message: str
    rule_reference: str
    remediation: Optional[str] = None
    location: Optional[str] = None
    square: Optional[str] = None
    joint: Optional[int] = None

    def format(self) -> str:
        """Format issue for display.

        Returns:
            [SEVERITY] RULE_ID at=L square=S joint=J :: message :: fix=FIX
        """
        location = self.location or '-'
        square = self.square or '-'
        joint = self.joint if self.joint is not None else '-'
        fix = self.remediation or 'N/A'

        return (
            f"[{self.severity}] {self.code} "
            f"at={location} square={square} joint={joint} :: "
            f"{self.message} :: fix={fix}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass
class ValidationResult:
    """Collection of validation issues with pass/fail determination.

    Properties:
        passed: True if no FAIL severity issues
        failed: True if any FAIL severity issues
        warnings / errors / infos: Issues filtered by severity
    """
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not any(i.severity == Severity.FAIL for i in self.issues)

    @property
    def failed(self) -> bool:
        return not self.passed

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARN]

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.FAIL]

    @property
    def infos(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.INFO]

    def codes(self) -> List[str]:
        return [i.code for i in self.issues]

    def add_issue(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    def merge(self, other: 'ValidationResult') -> 'ValidationResult':
        """Merge another result into this one. Returns self for chaining."""
        self.issues.extend(other.issues)
        return self

    def report(self) -> str:
        """Generate a formatted multi-line report of all issues."""
        if not self.issues:
            return "Validation passed: No issues found"

        lines = []
        status = "PASSED" if self.passed else "FAILED"
        lines.append(f"Validation {status}: {len(self.issues)} issue(s)")
        lines.append("-" * 60)

        for severity in [Severity.FAIL, Severity.WARN, Severity.INFO]:
            severity_issues = [i for i in self.issues if i.severity == severity]
            if severity_issues:
                lines.append(f"\n{severity.name} ({len(severity_issues)}):")
                for issue in severity_issues:
                    lines.append(issue.format())

        return "\n".join(lines)


class ValidationError(Exception):
    """Exception raised when validation fails with FAIL severity issues.

    Attributes:
        result: The ValidationResult that caused the failure
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(result.report())
