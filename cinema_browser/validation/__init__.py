from .spec_validation import ValidationIssue, validate_spec

__all__ = ["ValidationIssue", "validate_spec"]
