import logging

import reflex as rx

from lessonpage.config import settings
from lessonpage.services.locale_store import LocaleStore, install_locale_store
from lessonpage.ui.pages.lesson import lesson_page

logging.basicConfig(level=settings.log_level)

install_locale_store(LocaleStore(settings.default_language))

app = rx.App(
    stylesheets=["/styles.css"],
)

app.add_page(
    lesson_page,
    route="/",
    title=settings.app_name,
)
