"""Tests for the i18n translation system."""

import json
import re
from pathlib import Path

import pytest

from lessonpage import i18n
from lessonpage.config import settings
from lessonpage.i18n import (
    LANGUAGES,
    SUPPORTED_LOCALES,
    UnknownLanguageError,
    _cache,
    _dir,
    ensure_supported,
    get_translations,
    load_all,
    missing_keys,
    translate,
)


class TestI18nConfig:
    def test_default_language_is_cataloged(self):
        assert settings.default_language in SUPPORTED_LOCALES

    def test_default_language_is_swedish(self):
        assert settings.default_language == "sv"

    def test_supported_locales_follow_catalog_order(self):
        assert SUPPORTED_LOCALES == ["sv", "en"]

    def test_every_language_has_a_label(self):
        for lang in LANGUAGES:
            assert lang.label.strip()


class TestLoadAll:
    def test_load_all_populates_cache(self):
        _cache.clear()
        load_all()
        assert len(_cache) == len(SUPPORTED_LOCALES)
        for locale in SUPPORTED_LOCALES:
            assert locale in _cache
            assert isinstance(_cache[locale], dict)
            assert len(_cache[locale]) > 0

    def test_all_locales_parse(self):
        """Verify every JSON file is valid JSON."""
        for locale in SUPPORTED_LOCALES:
            path = _dir / f"{locale}.json"
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            assert isinstance(data, dict)
            assert len(data) > 0

    def test_failed_load_leaves_cache_untouched(self, monkeypatch, tmp_path):
        (tmp_path / "sv.json").write_text(json.dumps({"app.name": "Lektion"}), encoding="utf-8")
        monkeypatch.setattr(i18n, "_cache", {})
        monkeypatch.setattr(i18n, "_dir", tmp_path)
        with pytest.raises(FileNotFoundError):
            load_all()
        assert i18n._cache == {}

    def test_reload_after_failed_load(self, monkeypatch, tmp_path):
        monkeypatch.setattr(i18n, "_cache", {})
        monkeypatch.setattr(i18n, "_dir", tmp_path)
        with pytest.raises(FileNotFoundError):
            get_translations("sv")
        monkeypatch.setattr(i18n, "_dir", _dir)
        assert get_translations("en")["app.name"] == "Lesson"

    def test_lesson_strings_are_merged(self):
        assert get_translations("sv")["lesson.intro.title"] == "Introduktion till terminalen"
        assert get_translations("en")["lesson.intro.title"] == "Introduction to the terminal"


class TestGetTranslations:
    def test_all_locales_have_same_keys(self):
        sv_keys = set(get_translations("sv").keys())
        for locale in SUPPORTED_LOCALES:
            assert set(get_translations(locale).keys()) == sv_keys, locale

    def test_no_missing_keys_in_packaged_bundles(self):
        assert missing_keys() == {}

    def test_unsupported_locale_raises(self):
        with pytest.raises(UnknownLanguageError):
            get_translations("xx")

    def test_unknown_language_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            ensure_supported("de")

    def test_returns_a_copy(self):
        get_translations("sv")["app.name"] = "changed"
        assert get_translations("sv")["app.name"] != "changed"

    def test_translations_values_are_strings(self):
        for locale in SUPPORTED_LOCALES:
            for key, value in get_translations(locale).items():
                assert isinstance(value, str), f"{locale}.{key} is not a string: {type(value)}"

    def test_languages_have_different_values(self):
        sv = get_translations("sv")
        en = get_translations("en")
        assert all(sv[k] != en[k] for k in sv)


class TestNoFallback:
    def test_translate_resolves_key(self):
        assert translate("en", "page.footer").startswith("We do not store")

    def test_translate_missing_key_raises(self):
        with pytest.raises(KeyError):
            translate("en", "no.such.key")

    def test_missing_key_is_not_borrowed_from_another_language(self, monkeypatch):
        monkeypatch.setattr(
            i18n, "_cache", {"sv": {"a": "ett", "b": "två"}, "en": {"a": "one"}}
        )
        assert "b" not in get_translations("en")
        assert missing_keys() == {"en": {"b"}}


# ---------------------------------------------------------------------------
# Code ↔ JSON sync tests: every t["key"] / _t["key"] in the package must exist
# in every locale file, and every JSON key should be referenced in code.
# ---------------------------------------------------------------------------

_PKG_ROOT = Path(__file__).resolve().parent.parent.parent / "lessonpage"
_KEY_RE = re.compile(r'\b_?t\["([^"]+)"\]')


def _collect_keys_from_code() -> set[str]:
    """Scan all .py files under lessonpage/ for t["..."] and _t["..."] references."""
    keys: set[str] = set()
    for py_file in _PKG_ROOT.rglob("*.py"):
        text = py_file.read_text(encoding="utf-8")
        keys.update(_KEY_RE.findall(text))
    return keys


def _collect_keys_from_json() -> dict[str, set[str]]:
    """Return {locale: set_of_keys} for every locale JSON file."""
    result: dict[str, set[str]] = {}
    for locale in SUPPORTED_LOCALES:
        path = _dir / f"{locale}.json"
        with open(path, encoding="utf-8") as f:
            result[locale] = set(json.load(f).keys())
    return result


class TestCodeJsonSync:
    """Ensure translation keys referenced in code match JSON files."""

    def test_all_code_keys_exist_in_every_locale(self):
        code_keys = _collect_keys_from_code()
        for locale, keys in _collect_keys_from_json().items():
            missing = code_keys - keys
            assert not missing, (
                f"Keys used in code but missing from {locale}.json: {sorted(missing)}"
            )

    def test_no_orphan_keys_in_json(self):
        code_keys = _collect_keys_from_code()
        for locale, keys in _collect_keys_from_json().items():
            orphans = keys - code_keys
            assert not orphans, f"Keys in {locale}.json but never used: {sorted(orphans)}"

    def test_code_references_keys(self):
        """Sanity: the regex scanner should find the page and exercise keys."""
        code_keys = _collect_keys_from_code()
        assert {"page.footer", "switcher.label", "command_lab.step"} <= code_keys
