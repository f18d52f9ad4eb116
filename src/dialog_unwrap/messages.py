"""Built-in message catalog for dialog titles."""
from __future__ import annotations
from typing import Dict, Optional

DEFAULT_LOCALE = "en"
UNEXPECTED_ERROR = "common.error.unexpected"

CATALOG: Dict[str, Dict[str, str]] = {
    "en": {
        UNEXPECTED_ERROR: "Unexpected Error",
        "common.console.acknowledge": "Press Enter to continue...",
    },
    "ja": {
        UNEXPECTED_ERROR: "予期しないエラーが発生しました",
        "common.console.acknowledge": "Enterキーを押して続行してください...",
    },
    "de": {
        UNEXPECTED_ERROR: "Unerwarteter Fehler",
        "common.console.acknowledge": "Zum Fortfahren Enter drücken...",
    },
}


def normalize_locale(locale: Optional[str]) -> str:
    """Reduce 'ja_JP.UTF-8' / 'de-AT' style names to a catalog key."""
    if not locale:
        return DEFAULT_LOCALE
    lang = locale.split(".", 1)[0].replace("-", "_").split("_", 1)[0].lower()
    return lang if lang in CATALOG else DEFAULT_LOCALE


def translate(key: str, locale: Optional[str] = None) -> str:
    table = CATALOG[normalize_locale(locale)]
    if key in table:
        return table[key]
    return CATALOG[DEFAULT_LOCALE].get(key, key)
