import logging

import pytest
from babel import Locale

from fatum.errors import HelpfulUserError
from fatum.strings import fallback_chain, localized


KEY = "correct_number_employees_selected"


def test_fallback_chain():
    assert fallback_chain(Locale.parse("de_DE")) == ["de_DE", "de", "en"]
    assert fallback_chain(Locale.parse("en")) == ["en"]


def test_plural_forms():
    assert localized(KEY, "en", count=1) == "1 team member selected"
    assert localized(KEY, "en", count=500) == "500 team members selected"
    assert localized(KEY, "de_DE", count=1) == "1 Teammitglied ausgewählt"
    assert localized(KEY, "sv", count=3) == "3 teammedlemmar valda"


def test_arabic_plural_forms():
    assert localized(KEY, "ar", count=2) == "تم اختيار عضوين من أعضاء الفريق"
    assert localized(KEY, "ar", count=500) == "تم اختيار 500 من أعضاء الفريق"
    # no separate "few" form in the catalog
    assert localized(KEY, "ar", count=5) == "تم اختيار 5 من أعضاء الفريق"


def test_placeholders():
    assert localized("rates_heading", "en", date="2010-01-12") == "Exchange rates on 2010-01-12"


def test_fallback_to_english():
    assert localized("number_employees_selected", "sv") == "team members selected"
    assert localized("exchange_rates_unsupported_date", "fr") == "The selected date is not supported."


def test_unknown_key(caplog):
    with caplog.at_level(logging.WARNING, logger="fatum"):
        assert localized("no_such_key", "en") == "no_such_key"
    assert "no_such_key" in caplog.text


def test_plural_entry_without_count():
    with pytest.raises(HelpfulUserError, match="count"):
        localized(KEY, "en")


def test_missing_placeholder():
    with pytest.raises(HelpfulUserError, match="date"):
        localized("rates_heading", "en")
