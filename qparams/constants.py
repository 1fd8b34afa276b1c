# constants.py

# --------------------------------------------------------------------------- #
# Django-backed configuration
# --------------------------------------------------------------------------- #

from django.conf import settings as django_settings  # type: ignore


def _get_setting(name: str, default):
    """
    Allow query-parameter defaults to be overridden from Django settings.

    We look for QPARAMS_* keys on django.conf.settings, but only if Django is
    installed AND configured. Otherwise we silently fall back to the
    hard-coded defaults.
    """
    if django_settings is None:
        return default

    configured = getattr(django_settings, "configured", True)
    if not configured:
        return default

    return getattr(django_settings, name, default)


# Default config (can be overridden in Django settings)
# e.g. in settings.py:
#   QPARAMS_CHARSET = "latin-1"
#   QPARAMS_PLUS_AS_SPACE = False
#   QPARAMS_BAD_REQUEST_STATUS = 422

CHARSET = _get_setting("QPARAMS_CHARSET", "utf-8")
PLUS_AS_SPACE = _get_setting("QPARAMS_PLUS_AS_SPACE", True)
BAD_REQUEST_STATUS = _get_setting("QPARAMS_BAD_REQUEST_STATUS", 400)

# Query string grammar
PAIR_SEPARATOR = "&"
NAME_VALUE_SEPARATOR = "="

# Spellings accepted by the boolean accessors (compared case-insensitively)
TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
FALSE_VALUES = frozenset({"false", "no", "off", "0"})
