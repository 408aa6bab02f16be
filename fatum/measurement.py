from __future__ import annotations

from typing import Any

import pint
from babel import Locale, numbers

from .formatting import parse_locale


ureg = pint.UnitRegistry()

# https://en.wikipedia.org/wiki/List_of_humorous_units_of_measurement#Beard-second
ureg.define("beard_second = 1e-8 * meter = BS")
# https://en.wikipedia.org/wiki/Helen_(unit)
ureg.define("helen = [beauty] = Hn")

Quantity = ureg.Quantity


def measure(value: float, unit: str | pint.Unit) -> Any:
    return Quantity(value, unit)


def convert(quantity: Any, unit: str | pint.Unit) -> Any:
    return quantity.to(unit)


def format_measurement(
    quantity: Any, locale: str | Locale = "en_US", digits: int = 2
) -> str:
    """Format a quantity in the unit it was given in, with the number
    formatted for the locale and the unit abbreviated: `52,000 m`."""
    pattern = "#,##0." + "#" * digits if digits > 0 else "#,##0"
    number = numbers.format_decimal(
        quantity.magnitude, format=pattern, locale=parse_locale(locale)
    )
    return f"{number} {quantity.units:~P}"
