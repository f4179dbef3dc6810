"""
One-time locale bootstrap.

`LocaleSetup` owns the lifecycle of a message catalog: the first `setup()`
registers the bundled languages and picks the initial locale from the
environment, every later call is a no-op.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from importlib import resources
from typing import Callable, Dict, Optional

from .catalog import MessageCatalog, catalog as default_catalog
from .negotiate import get_locale_from_environment

log = logging.getLogger(__name__)

FALLBACK_LOCALE = "en"
BUNDLED_LOCALES = ("en", "nl")


class LocaleState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


def load_bundle(tag: str) -> Dict[str, object]:
    """Read a packaged language bundle (``lang/<tag>.json``)."""
    source = resources.files("musicbingo.i18n") / "lang" / f"{tag}.json"
    return json.loads(source.read_text(encoding="utf-8"))


class LocaleSetup:
    def __init__(
        self,
        catalog: MessageCatalog,
        *,
        negotiate: Callable[[], Optional[str]] = get_locale_from_environment,
    ) -> None:
        self.catalog = catalog
        self.state = LocaleState.UNINITIALIZED
        self._negotiate = negotiate

    def setup(self) -> None:
        # Check-and-set without any await in between
        if self.state is LocaleState.INITIALIZED:
            return
        self.state = LocaleState.INITIALIZED

        for tag in BUNDLED_LOCALES:
            self.catalog.add_messages(tag, load_bundle(tag))

        initial = self._negotiate()
        self.catalog.init(fallback_locale=FALLBACK_LOCALE, initial_locale=initial)
        log.debug("i18n: initial locale %s (environment: %s)", self.catalog.locale, initial)

    def set_locale(self, new_locale: str = FALLBACK_LOCALE) -> None:
        self.catalog.set_locale(new_locale)


_default_setup = LocaleSetup(default_catalog)


def setup_locale() -> None:
    _default_setup.setup()


def set_locale(new_locale: str = FALLBACK_LOCALE) -> None:
    _default_setup.set_locale(new_locale)
