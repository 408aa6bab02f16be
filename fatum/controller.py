from __future__ import annotations

from dataclasses import dataclass, field

import aiohttp
from rich.console import Console

from .errors import (
    ExchangeRatesError,
    InvalidResponse,
    RatesDecodingError,
    RequestError,
    UnsupportedDate,
)
from .exchange_rates import DataAccess, Rates
from .formatting import format_currency, localized_status
from .result import Failure, Ok
from .strings import localized


@dataclass
class Controller:
    data_access: DataAccess = field(default_factory=DataAccess)
    locale: str = "de_DE"
    console: Console = field(default_factory=Console)

    async def print_exchange_rates(self, session: aiohttp.ClientSession) -> bool:
        match await self.data_access.fetch_exchange_rates(session):
            case Ok(rates):
                self.print_rates(rates)
                return True
            case Failure(error):
                self.print_error(error)
                return False

    def format_rates(self, rates: Rates) -> list[str]:
        return [
            format_currency(value, code, self.locale)
            for code, value in sorted(rates.items())
        ]

    def print_rates(self, rates: Rates):
        heading = localized("rates_heading", self.locale, date=self.data_access.date)
        self.console.print(heading, style="bold", highlight=False)
        for line in self.format_rates(rates):
            self.console.print(line, highlight=False)

    def describe_error(self, error: ExchangeRatesError) -> str:
        match error:
            case RatesDecodingError(cause) | RequestError(cause):
                return str(cause) or type(cause).__name__
            case InvalidResponse(status):
                return localized_status(status)
            case UnsupportedDate():
                return localized("exchange_rates_unsupported_date", self.locale)
            case _:
                return str(error)

    def print_error(self, error: ExchangeRatesError):
        self.console.print(self.describe_error(error), style="red", highlight=False)
