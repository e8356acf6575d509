import pytest

from lessonpage.services.locale_store import LocaleStore, locale_store_scope


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store():
    """A Swedish-default locale store installed for the duration of the test."""
    locale_store = LocaleStore("sv")
    with locale_store_scope(locale_store):
        yield locale_store
