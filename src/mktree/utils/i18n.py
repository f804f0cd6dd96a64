from __future__ import annotations

"""
Internationalization (i18n) Utility.

Central catalogue of user-facing text. Messages live in JSON locale files
next to the interface layer and are looked up with dot-notation keys,
with optional `{name}` interpolation. Missing locales fall back to
English; missing keys fall back to a caller default or the key itself.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYSTEM DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.

    Loads one JSON catalogue at a time and resolves nested keys safely.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_path: Optional[str] = None):
        """
        Initialize the manager and load the requested locale.

        Args:
            locale: ISO locale identifier (e.g., 'en', 'es').
            locales_path: Directory holding '<locale>.json' files.
        """
        if locales_path is None:
            base_dir = os.path.dirname(os.path.abspath(__file__))
            locales_path = os.path.join(base_dir, LOCALES_REL_PATH)
        self._locales_path = os.path.abspath(locales_path)
        self._translations: Dict[str, Any] = {}
        self.locale = locale
        self.is_loaded = False

        self.load_locale(locale)

    def available_locales(self) -> List[str]:
        """List the locale identifiers shipped in the catalogue directory."""
        if not os.path.isdir(self._locales_path):
            return []
        return sorted(
            os.path.splitext(name)[0]
            for name in os.listdir(self._locales_path)
            if name.endswith(".json")
        )

    def load_locale(self, locale: str) -> None:
        """
        Load a translation catalogue, falling back to the default locale.

        Args:
            locale: ISO identifier for the target language.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.debug(f"I18n: Locale '{locale}' not found at '{file_path}'")
            if locale != DEFAULT_LOCALE:
                self.load_locale(DEFAULT_LOCALE)
                return
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Unreadable locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False
            return

        self.locale = locale
        self.is_loaded = True

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        List values are joined with newlines, which lets multi-line text
        such as the help screen be stored one line per element.

        Args:
            key: Hierarchical identifier path (e.g., 'cli.status.success').
            default: Text to use when the key does not resolve.
            **kwargs: Dynamic variables for string formatting.

        Returns:
            str: The translated and formatted string, else the default or
                 the key itself.
        """
        value = self._lookup(key)

        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            value = "\n".join(value)
        if not isinstance(value, str):
            value = default if default is not None else key

        if not kwargs:
            return value
        try:
            return value.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for '{key}': {e}")
            return value

    def _lookup(self, key: str) -> Any:
        current: Any = self._translations
        for part in key.split("."):
            if not isinstance(current, dict):
                return None
            current = current.get(part)
        return current

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

# Global singleton instance for application-wide resource access
i18n = I18n(DEFAULT_LOCALE)
