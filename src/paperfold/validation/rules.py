"""
Validation rule definitions.

Each rule has:
- Code: Unique identifier (e.g., "JOINT-001")
- Severity: FAIL, WARN, or INFO
- Rule reference: The level invariant it protects
- Message template: Human-readable description
- Remediation: Suggested fix

Rules are organized by category:
- GRID: Square registration
- JOINT: Square/joint graph consistency
"""

from dataclasses import dataclass
from typing import Optional

from .core import Severity, ValidationIssue


@dataclass(frozen=True)
class ValidationRule:
    """Definition of a validation rule."""
    code: str
    severity: Severity
    rule_reference: str
    message_template: str
    remediation_template: Optional[str] = None
    description: Optional[str] = None

    def format_message(self, **kwargs) -> str:
        """Format the message template with provided values."""
        return self.message_template.format(**kwargs)

    def format_remediation(self, **kwargs) -> Optional[str]:
        """Format the remediation template with provided values."""
        if self.remediation_template:
            return self.remediation_template.format(**kwargs)
        return None

    def issue(self, location: Optional[str] = None, square: Optional[str] = None,
              joint: Optional[int] = None, **kwargs) -> ValidationIssue:
        """Build an issue for this rule.

        Templates are formatted with kwargs plus location, square and joint.
        """
        values = dict(kwargs, location=location, square=square, joint=joint)
        return ValidationIssue(
            severity=self.severity,
            code=self.code,
            message=self.format_message(**values),
            rule_reference=self.rule_reference,
            remediation=self.format_remediation(**values),
            location=location,
            square=square,
            joint=joint,
        )


# =============================================================================
# GRID RULES (GRID)
# =============================================================================

GRID_001 = ValidationRule(
    code="GRID-001",
    severity=Severity.FAIL,
    rule_reference="Registry - one square per coordinate, registered at its own coordinate",
    message_template="Square registered at {cell} but its coordinate is {coord}",
    remediation_template="Re-register the square at {coord}",
    description="The registry key of a square must equal the square's coordinate"
)

GRID_002 = ValidationRule(
    code="GRID-002",
    severity=Severity.FAIL,
    rule_reference="Registry - coordinates stay within the grid bound",
    message_template="Square at {coord} is outside the grid bound of +/-{bound}",
    remediation_template="Remove the square or enlarge grid_size",
    description="Every registered coordinate must lie inside the grid"
)

GRID_003 = ValidationRule(
    code="GRID-003",
    severity=Severity.FAIL,
    rule_reference="Registry - the center square always exists",
    message_template="No square registered at the center {coord}",
    remediation_template="Reset the registry to recreate the center square",
    description="The center square is created with the registry and never removed"
)


# =============================================================================
# JOINT RULES (JOINT)
# =============================================================================

JOINT_001 = ValidationRule(
    code="JOINT-001",
    severity=Severity.FAIL,
    rule_reference="Joint graph - a joint bridges exactly two distinct squares",
    message_template="Joint {joint} bridges {squares}",
    remediation_template="Discard joint {joint}",
)

JOINT_002 = ValidationRule(
    code="JOINT-002",
    severity=Severity.FAIL,
    rule_reference="Joint graph - joints never outlive their squares",
    message_template="Joint {joint} references unregistered square {square}",
    remediation_template="Detach joint {joint} before removing its squares",
)

JOINT_003 = ValidationRule(
    code="JOINT-003",
    severity=Severity.FAIL,
    rule_reference="Joint graph - both bridged squares list the joint",
    message_template="Joint {joint} is missing from the joint list of square at {coord}",
    remediation_template="Append joint {joint} to the square at {coord}",
)

JOINT_004 = ValidationRule(
    code="JOINT-004",
    severity=Severity.FAIL,
    rule_reference="Joint graph - squares only list live joints that bridge them",
    message_template="Square at {coord} lists joint {joint}, which {reason}",
    remediation_template="Remove joint {joint} from the square at {coord}",
)

JOINT_005 = ValidationRule(
    code="JOINT-005",
    severity=Severity.INFO,
    rule_reference="Joint graph - connected paper",
    message_template="Square at {coord} has no joints",
    description="An isolated square can't fold with the rest of the paper"
)


# =============================================================================
# RULE REGISTRY
# =============================================================================

ALL_RULES = {
    # Grid
    'GRID-001': GRID_001,
    'GRID-002': GRID_002,
    'GRID-003': GRID_003,
    # Joint
    'JOINT-001': JOINT_001,
    'JOINT-002': JOINT_002,
    'JOINT-003': JOINT_003,
    'JOINT-004': JOINT_004,
    'JOINT-005': JOINT_005,
}


def get_rule(code: str) -> Optional[ValidationRule]:
    """Get a rule by its code, or None."""
    return ALL_RULES.get(code)


def get_rules_by_category(prefix: str) -> list:
    """Get all rules with a given prefix (e.g. "JOINT")."""
    return [rule for code, rule in ALL_RULES.items() if code.startswith(prefix)]
