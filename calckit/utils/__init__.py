"""
Utility functions for CalcKit.

This package contains:
- formatting: Currency, percentage and number formatting (Babel)
- validation_utils: Field validators returning ValidationResult
- financial_math: Compounding, annuities, loans and ratios
- datetime_utils: Date coercion and day arithmetic
- translation_utils: Locale resolution with English fallback
"""
