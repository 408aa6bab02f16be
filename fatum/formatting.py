"""Locale-aware formatting.

Everything here delegates to Babel and the CLDR data that ships with it:
prefer these over hand-built format strings, they know the separators,
word order and plural rules of each locale.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone
from http import HTTPStatus
from typing import Literal

from babel import Locale
from babel import dates, lists, numbers


DateStyle = Literal["short", "medium", "long", "full"]


def parse_locale(locale: str | Locale) -> Locale:
    if isinstance(locale, Locale):
        return locale
    return Locale.parse(locale.replace("-", "_"))


def format_number(value: float, locale: str | Locale = "en_US") -> str:
    return numbers.format_decimal(value, locale=parse_locale(locale))


def format_currency(value: float, currency: str, locale: str | Locale = "en_US") -> str:
    return numbers.format_currency(value, currency, locale=parse_locale(locale))


def format_date(
    value: date, style: DateStyle = "long", locale: str | Locale = "en_US"
) -> str:
    return dates.format_date(value, format=style, locale=parse_locale(locale))


def format_date_template(
    value: date | datetime, skeleton: str, locale: str | Locale = "en_US"
) -> str:
    """Format using a template of fields, e.g. `"MMMMd"`, leaving the order
    and punctuation to the locale: "December 31" in English, "31. Dezember"
    in German."""
    return dates.format_skeleton(
        skeleton, value, tzinfo=timezone.utc, locale=parse_locale(locale)
    )


def format_iso8601(value: date | datetime) -> str:
    return value.isoformat()


def format_duration(delta: timedelta, locale: str | Locale = "en_US") -> str:
    return dates.format_timedelta(delta, locale=parse_locale(locale))


def format_relative(delta: timedelta, locale: str | Locale = "en_US") -> str:
    """Negative deltas lie in the past ("3 weeks ago"), positive ones in the
    future ("in 3 weeks")."""
    return dates.format_timedelta(delta, add_direction=True, locale=parse_locale(locale))


def format_interval(
    start: date | datetime,
    end: date | datetime,
    locale: str | Locale = "en_US",
    skeleton: str = "yMd",
) -> str:
    return dates.format_interval(
        start, end, skeleton, tzinfo=timezone.utc, locale=parse_locale(locale)
    )


def format_list(items: Iterable[str], locale: str | Locale = "en_US") -> str:
    return lists.format_list(list(items), locale=parse_locale(locale))


def weekday_name(
    weekday: int, locale: str | Locale = "en_US", standalone: bool = True
) -> str:
    """Name of a weekday, 0 being Monday like `date.weekday()`. The
    stand-alone form is the one used in headings and menus; some languages
    inflect the form used within a date."""
    context = "stand-alone" if standalone else "format"
    return parse_locale(locale).days[context]["wide"][weekday]


def text_direction(locale: str | Locale) -> str:
    return parse_locale(locale).text_direction


def is_rtl(locale: str | Locale) -> bool:
    return text_direction(locale) == "rtl"


MIRRORED: dict[str, bool] = {
    "workflow": True,
    "rating": True,
    "graph": False,
    "clock": False,
    "playback": False,
    "timeline": False,
    "music": False,
    "phone_number": False,
}


def should_mirror(element: str) -> bool:
    """Whether a kind of UI element is flipped in a right-to-left layout."""
    return MIRRORED[element]


_STATUS_CLASSES = {
    1: "informational",
    2: "success",
    3: "redirected",
    4: "client error",
    5: "server error",
}


def localized_status(status: int) -> str:
    try:
        return HTTPStatus(status).phrase.lower()
    except ValueError:
        return _STATUS_CLASSES.get(status // 100, str(status))
