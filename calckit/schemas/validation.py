"""
Validation schemas shared by the validators and the calculator components.

**Domain Coverage**:
- FieldRules: per-call rule descriptor supplied by a widget
- ValidationResult: transient outcome of a single validation

**Design Notes**:
- Validation failures are data, not exceptions: validators always return a
  ValidationResult.
- FieldRules never rejects a descriptor: unrecognized or malformed options
  (a non-string type, a bound that is not a number) mean "no constraint".
"""
from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, ConfigDict, field_validator

# Rule types understood by BaseCalculator.validate_field
RULE_TYPE_NUMBER = "number"
RULE_TYPE_PERCENTAGE = "percentage"


class FieldRules(BaseModel):
    """Rule descriptor for a single field.

    Accepts the short keys used by widgets (``type``, ``min``, ``max``)
    as well as the attribute names.

    Examples:
        >>> FieldRules(required=True)
        >>> FieldRules.model_validate({"type": "number", "min": 0, "max": 10})
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    required: bool = Field(False, description="Reject None and empty strings")
    rule_type: Optional[str] = Field(None, alias="type", description="'number' | 'percentage'; anything else is ignored")
    min_value: Optional[float] = Field(None, alias="min", description="Inclusive lower bound for type='number'")
    max_value: Optional[float] = Field(None, alias="max", description="Inclusive upper bound for type='number'")

    @field_validator('required', mode='before')
    @classmethod
    def coerce_required(cls, v: Any) -> bool:
        """Any truthy value turns the check on; None and the like turn it off."""
        return bool(v)

    @field_validator('rule_type', mode='before')
    @classmethod
    def coerce_rule_type(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    @field_validator('min_value', 'max_value', mode='before')
    @classmethod
    def coerce_bound(cls, v: Any) -> Optional[float]:
        """Bounds that are not finite numbers are dropped."""
        if v is None or isinstance(v, bool):
            return None
        try:
            bound = float(v)
        except (TypeError, ValueError, OverflowError):
            return None
        return bound if math.isfinite(bound) else None

    @classmethod
    def coerce(cls, rules: Union[FieldRules, Mapping[str, Any], None]) -> FieldRules:
        """Build a FieldRules from an instance, a mapping, or None (no constraints).

        Anything that is not a mapping is treated as no constraints.
        """
        if isinstance(rules, cls):
            return rules
        if not isinstance(rules, Mapping):
            return cls()
        return cls.model_validate(dict(rules))


class ValidationResult(BaseModel):
    """Outcome of a single validation.

    Attributes:
        is_valid: Whether the value passed
        error: Human-readable message when is_valid is False
        value: Parsed value (float for numeric checks, the raw value for
            required checks, None when no check ran)
    """
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: Optional[str] = None
    value: Any = None

    @classmethod
    def ok(cls, value: Any = None) -> ValidationResult:
        return cls(is_valid=True, value=value)

    @classmethod
    def fail(cls, error: str) -> ValidationResult:
        return cls(is_valid=False, error=error)
