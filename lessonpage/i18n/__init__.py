"""i18n translation loader. Strict: there is no fallback language."""

import json
import logging
from pathlib import Path

from lessonpage.content import get_lessons
from lessonpage.models.language import Language

_log = logging.getLogger(__name__)

LANGUAGES: tuple[Language, ...] = (
    Language(code="sv", label="Svenska"),
    Language(code="en", label="English"),
)
SUPPORTED_LOCALES = [lang.code for lang in LANGUAGES]

_cache: dict[str, dict[str, str]] = {}
_dir = Path(__file__).parent


class UnknownLanguageError(LookupError):
    pass


def is_supported(locale: str) -> bool:
    return locale in SUPPORTED_LOCALES


def ensure_supported(locale: str) -> str:
    """Return *locale* unchanged, or raise UnknownLanguageError if it is not cataloged."""
    if not is_supported(locale):
        raise UnknownLanguageError(
            f"Language '{locale}' is not in the catalog {SUPPORTED_LOCALES}"
        )
    return locale


def missing_keys() -> dict[str, set[str]]:
    """Map each locale to the keys other bundles define but it lacks.

    Only locales with at least one missing key appear in the result.
    """
    if not _cache:
        load_all()
    return _missing_keys(_cache)


def _missing_keys(bundles: dict[str, dict[str, str]]) -> dict[str, set[str]]:
    all_keys: set[str] = set()
    for bundle in bundles.values():
        all_keys.update(bundle)
    result = {}
    for locale, bundle in bundles.items():
        missing = all_keys - bundle.keys()
        if missing:
            result[locale] = missing
    return result


def load_all() -> None:
    """Load all JSON translation files plus lesson strings into the module cache.

    The cache is only replaced once every bundle has loaded.
    """
    lessons = get_lessons()
    loaded: dict[str, dict[str, str]] = {}
    for locale in SUPPORTED_LOCALES:
        path = _dir / f"{locale}.json"
        with open(path, encoding="utf-8") as f:
            bundle = json.load(f)
        for lesson in lessons:
            bundle.update(lesson.strings(locale))
        loaded[locale] = bundle

    _cache.clear()
    _cache.update(loaded)
    for locale, keys in _missing_keys(loaded).items():
        _log.warning("Translation bundle '%s' is missing keys: %s", locale, sorted(keys))


def get_translations(locale: str) -> dict[str, str]:
    """Return a copy of the translation table for *locale*.

    Raises UnknownLanguageError for locales outside the catalog. Keys absent
    from the locale's bundle stay absent; nothing is borrowed from another
    language.
    """
    ensure_supported(locale)
    if not _cache:
        load_all()
    return dict(_cache[locale])


def translate(locale: str, key: str) -> str:
    """Resolve ``table[locale][key]``; raises KeyError when the key is missing."""
    return get_translations(locale)[key]
