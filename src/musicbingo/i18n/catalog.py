"""
Process-wide message catalog.

Bundles are registered per locale tag; lookups walk the active locale, its
base language (``nl-NL`` -> ``nl``) and finally the fallback locale.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

log = logging.getLogger(__name__)


def _flatten(messages: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in messages.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{full_key}."))
        else:
            flat[full_key] = str(value)
    return flat


class MessageCatalog:
    def __init__(self) -> None:
        self._messages: Dict[str, Dict[str, str]] = {}
        self.fallback_locale: Optional[str] = None
        self._locale: Optional[str] = None

    def add_messages(self, tag: str, messages: Mapping[str, Any]) -> None:
        """Register (or merge into) the bundle for `tag`."""
        self._messages.setdefault(tag, {}).update(_flatten(messages))
        log.debug("i18n: registered %d messages for %s", len(messages), tag)

    def init(self, *, fallback_locale: str, initial_locale: Optional[str] = None) -> None:
        self.fallback_locale = fallback_locale
        self._locale = initial_locale or fallback_locale

    @property
    def locale(self) -> Optional[str]:
        return self._locale

    @locale.setter
    def locale(self, tag: str) -> None:
        self.set_locale(tag)

    def set_locale(self, tag: str) -> None:
        # Unregistered tags are allowed; lookups fall back
        self._locale = tag

    @property
    def locales(self) -> List[str]:
        return sorted(self._messages)

    def _candidates(self, tag: Optional[str]) -> List[str]:
        chain: List[str] = []
        for t in (tag, tag.split("-")[0] if tag else None, self.fallback_locale):
            if t and t not in chain:
                chain.append(t)
        return chain

    def lookup(self, key: str, locale: Optional[str] = None) -> Optional[str]:
        for tag in self._candidates(locale or self._locale):
            msg = self._messages.get(tag, {}).get(key)
            if msg is not None:
                return msg
        return None

    def format(
        self, key: str, locale: Optional[str] = None, default: Optional[str] = None, **values: Any
    ) -> str:
        msg = self.lookup(key, locale)
        if msg is None:
            log.debug("i18n: missing message %s", key)
            msg = default if default is not None else key
        return msg.format(**values) if values else msg


catalog = MessageCatalog()


def t(key: str, **values: Any) -> str:
    return catalog.format(key, **values)
