"""Message catalogs and locale bootstrap for MusicBingo."""

from .bootstrap import LocaleSetup, LocaleState, set_locale, setup_locale
from .catalog import MessageCatalog, catalog, t
from .negotiate import get_locale_from_environment

__all__ = [
    "LocaleSetup",
    "LocaleState",
    "MessageCatalog",
    "catalog",
    "get_locale_from_environment",
    "set_locale",
    "setup_locale",
    "t",
]
