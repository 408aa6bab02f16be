from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Any

import aiohttp

from .codec import decode
from .errors import (
    ExchangeRatesError,
    InvalidResponse,
    RatesDecodingError,
    RequestError,
    UnsupportedDate,
)
from .http import fetch
from .logging import logger
from .result import Failure, Ok, Result, catching


log = logger()

EXCHANGE_RATES_URL = "https://api.exchangeratesapi.io"
DEFAULT_DATE = "2010-01-12"

Rates = dict[str, float]


@dataclass
class ExchangeRates:
    rates: Rates


def rates_url(base_url: str, day: str) -> Result[str, ExchangeRatesError]:
    try:
        date.fromisoformat(day)
    except ValueError:
        return Failure(UnsupportedDate(day))
    return Ok(f"{base_url.rstrip('/')}/{day}")


def interpret(status: int, body: bytes) -> Result[Rates, ExchangeRatesError]:
    """Turn a status code and response body into rates or an error.

    Only a 2xx response carries rates. The API answers 400 when it has no
    data for the requested date.
    """
    match status:
        case 400:
            return Failure(UnsupportedDate())
        case s if 200 <= s < 300:
            return (
                catching(decode, ExchangeRates, body)
                .map(lambda r: r.rates)
                .map_error(RatesDecodingError)
            )
        case _:
            return Failure(InvalidResponse(status))


@dataclass
class DataAccess:
    base_url: str = EXCHANGE_RATES_URL
    date: str = DEFAULT_DATE

    async def fetch_exchange_rates(
        self, session: aiohttp.ClientSession
    ) -> Result[Rates, ExchangeRatesError]:
        url = rates_url(self.base_url, self.date)
        if isinstance(url, Failure):
            log.debug("not requesting rates for `%s`", self.date)
            return url

        match await fetch(session, url.value):
            case Failure(error):
                return Failure(RequestError(error))
            case Ok(response):
                return interpret(response.status, response.body)

    def fetch_exchange_rates_task(
        self,
        session: aiohttp.ClientSession,
        completion: Callable[[Result[Rates, ExchangeRatesError]], Any],
    ) -> asyncio.Task:
        async def go():
            completion(await self.fetch_exchange_rates(session))

        return asyncio.create_task(go())
