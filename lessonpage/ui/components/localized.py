"""Pick the text for the current language out of a per-language mapping."""

import reflex as rx


def localized(texts: dict[str, str], lang: rx.Var[str] | str) -> rx.Var[str] | str:
    """Resolve *texts* for *lang*; a language missing from *texts* yields empty text."""
    if isinstance(lang, rx.Var):
        return rx.match(lang, *texts.items(), "")
    return texts.get(lang, "")
