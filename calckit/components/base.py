"""
Validation and formatting capability shared by calculator widgets.

A widget owns one BaseCalculator and hands it (by reference) to the
specialized calculators it uses, so every part of the widget reports into
the same error map.

Usage:
    base = BaseCalculator()
    base.validate_field("age", "", {"required": True})
    base.is_valid            # False
    base.errors              # {'age': 'This field is required'}
    base.validate_field("age", "30", {"required": True})
    base.is_valid            # True
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from calckit.config import get_settings
from calckit.logging_config import get_logger
from calckit.schemas.validation import (
    FieldRules,
    ValidationResult,
    RULE_TYPE_NUMBER,
    RULE_TYPE_PERCENTAGE,
    )
from calckit.utils import formatting
from calckit.utils.validation_utils import (
    validate_number,
    validate_percentage,
    validate_required,
    )

logger = get_logger(__name__)

RulesLike = Union[FieldRules, Mapping[str, Any], None]


class BaseCalculator:
    """Per-widget error map with a derived validity flag, plus formatting helpers.

    Attributes:
        currency: Default currency code for format_currency
        locale: Default locale for format_currency / format_number
        decimals: Default fraction digits for format_percentage / format_number
    """

    def __init__(self, currency: Optional[str] = None, locale: Optional[str] = None, decimals: Optional[int] = None):
        settings = get_settings()
        self.currency = currency or settings.DEFAULT_CURRENCY
        self.locale = locale or settings.DEFAULT_LOCALE
        self.decimals = settings.DEFAULT_DECIMALS if decimals is None else decimals
        self._errors: Dict[str, str] = {}
        self._reset_hooks: List[Callable[[], None]] = []

    # ------------------------------------------------------------------
    # Validation state
    # ------------------------------------------------------------------

    @property
    def errors(self) -> Dict[str, str]:
        """Copy of the current field -> message map."""
        return dict(self._errors)

    @property
    def is_valid(self) -> bool:
        """True when no field currently has an error."""
        return not self._errors

    def get_error(self, field_name: str) -> Optional[str]:
        return self._errors.get(field_name)

    def has_error(self, field_name: str) -> bool:
        return field_name in self._errors

    def validate_field(self, field_name: str, raw_value: Any, rules: RulesLike = None) -> ValidationResult:
        """
        Validate one field and record the outcome in the error map.

        Only the first applicable rule is checked: `required` wins over
        `type`, and `number` wins over `percentage`. Unknown types, or no
        rules at all, always pass.

        Args:
            field_name: Identifier of the field (non-empty)
            raw_value: Value as entered by the user
            rules: FieldRules, a mapping with required/type/min/max, or None

        Returns:
            ValidationResult of the rule that ran

        Raises:
            ValueError: If field_name is empty
        """
        if not field_name:
            raise ValueError("field_name must be a non-empty string")

        field_rules = FieldRules.coerce(rules)

        if field_rules.required:
            result = validate_required(raw_value)
        elif field_rules.rule_type == RULE_TYPE_NUMBER:
            result = validate_number(raw_value, field_rules.min_value, field_rules.max_value)
        elif field_rules.rule_type == RULE_TYPE_PERCENTAGE:
            result = validate_percentage(raw_value)
        else:
            result = ValidationResult.ok()

        if not result.is_valid:
            self._errors[field_name] = result.error
            logger.debug("Field validation failed", field=field_name, error=result.error)
            return result

        self._errors.pop(field_name, None)
        return result

    def clear_errors(self) -> None:
        """Forget every recorded error."""
        self._errors = {}

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def add_reset_hook(self, hook: Callable[[], None]) -> None:
        """Register a callable run by reset(), after the errors are cleared.

        Widgets use this to reset their own input fields.
        """
        self._reset_hooks.append(hook)

    def reset(self) -> None:
        """Clear errors, then run reset hooks in registration order."""
        self.clear_errors()
        for hook in self._reset_hooks:
            hook()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_currency(self, amount: Optional[formatting.Number]) -> str:
        return formatting.format_currency(amount, self.currency, self.locale)

    def format_percentage(self, value: Optional[formatting.Number], decimals: Optional[int] = None) -> str:
        return formatting.format_percentage(value, self.decimals if decimals is None else decimals)

    def format_number(self, value: Optional[formatting.Number], decimals: Optional[int] = None) -> str:
        return formatting.format_number(value, self.decimals if decimals is None else decimals, self.locale)


class CalculatorComponent:
    """Building block for specialized calculators.

    Holds a BaseCalculator by reference instead of inheriting from it, so
    several components of one widget can share a single error map.
    """

    def __init__(self, base: Optional[BaseCalculator] = None):
        self.base = base if base is not None else BaseCalculator()

    def reset(self) -> None:
        self.base.reset()
