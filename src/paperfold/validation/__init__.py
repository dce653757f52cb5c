"""
Validation package for paper levels.

Checks that the square registry and the joint graph agree with each other.

Public API:
    - ValidationResult, ValidationIssue, Severity: Core result types
    - ValidationError: Exception raised on FAIL issues when fail_fast=True
    - ValidationRule, ALL_RULES, get_rule(): Rule table
    - validate_registry(): Run every check over a GridRegistry
"""

from .core import (
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationError,
)
from .rules import ValidationRule, ALL_RULES, get_rule, get_rules_by_category
from .checks import check_isolated_squares, check_joints, check_squares, validate_registry

__all__ = [
    # Core types
    'Severity',
    'ValidationIssue',
    'ValidationResult',
    'ValidationError',
    # Rules
    'ValidationRule',
    'ALL_RULES',
    'get_rule',
    'get_rules_by_category',
    # Checks
    'check_squares',
    'check_joints',
    'check_isolated_squares',
    'validate_registry',
]
