"""Pydantic models shared across CalcKit."""
from calckit.schemas.validation import FieldRules, ValidationResult

__all__ = ["FieldRules", "ValidationResult"]
