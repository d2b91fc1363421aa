# src/keyscope/i18n.py
"""
Messages shown by keyscope itself (diagnostics and CLI output).

Tables live in ``keyscope.lang.<code>``; the CLI picks one with
:func:`set_locale` and everything else calls :func:`t`.  Unknown keys and
missing translations fall back to English, then to the key.
"""
from typing import Any, Dict, List

from .lang.en import STRINGS as _EN
from .lang.ja import STRINGS as _JA

_TABLES: Dict[str, Dict[str, str]] = {
    "en": _EN,
    "ja": _JA,
}

_locale = "en"


def available_locales() -> List[str]:
    return sorted(_TABLES)


def set_locale(lang: str) -> None:
    """Switch message language; unknown codes select English."""
    global _locale
    _locale = lang if lang in _TABLES else "en"


def get_locale() -> str:
    return _locale


def t(key: str, **kwargs: Any) -> str:
    """Message *key* in the active locale, formatted with *kwargs*."""
    text = _TABLES[_locale].get(key) or _EN.get(key, key)
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError):
        # Placeholder mismatch: show the template rather than fail a scan
        return text
