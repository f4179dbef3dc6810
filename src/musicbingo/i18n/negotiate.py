"""Derive a default locale tag from the process environment."""

import locale
import os
from typing import Optional

_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def normalise_tag(value: Optional[str]) -> Optional[str]:
    """Turn POSIX locale names like ``nl_NL.UTF-8@euro`` into ``nl-NL``."""
    if not value:
        return None
    value = value.split(".")[0].split("@")[0].strip()
    if not value or value.upper() in ("C", "POSIX"):
        return None
    return value.replace("_", "-")


def get_locale_from_environment() -> Optional[str]:
    for name in _ENV_VARS:
        raw = os.environ.get(name, "")
        # LANGUAGE is a colon separated preference list
        tag = normalise_tag(raw.split(":")[0])
        if tag:
            return tag
    try:
        return normalise_tag(locale.getlocale()[0])
    except ValueError:
        # Unparseable locale settings in the C library
        return None
