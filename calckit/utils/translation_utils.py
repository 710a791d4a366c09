"""
Localization helpers.

Resolves user-supplied locale identifiers to Babel Locale objects,
with automatic fallback to the default English locale.
"""

import structlog
from babel import Locale, UnknownLocaleError

logger = structlog.get_logger(__name__)

FALLBACK_LOCALE = "en_US"


def get_babel_locale(language: str) -> Locale:
    """
    Get Babel Locale object for given locale identifier.
    Falls back to en_US if the locale is not supported.

    Both separators are accepted: 'en_US' and 'en-US' resolve to the same locale.

    Args:
        language: Locale identifier (e.g., 'en', 'it', 'de_DE', 'fr-CH')

    Returns:
        Babel Locale object

    Examples:
        >>> get_babel_locale('de-DE').territory
        'DE'
        >>> get_babel_locale('invalid_lang').language  # Falls back to 'en_US'
        'en'
    """
    if isinstance(language, Locale):
        return language
    try:
        return Locale.parse(str(language).strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.warning(
            "Locale not supported, falling back to English",
            locale=language,
            error=str(e)
            )
        return Locale.parse(FALLBACK_LOCALE)
