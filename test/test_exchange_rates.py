import io
import json

import aiohttp
import pytest
from aioresponses import aioresponses
from rich.console import Console

from fatum.controller import Controller
from fatum.errors import (
    InvalidResponse,
    RatesDecodingError,
    RequestError,
    UnsupportedDate,
)
from fatum.exchange_rates import DataAccess, interpret, rates_url
from fatum.result import Failure, Ok


BASE = "https://rates.example.org"
URL = f"{BASE}/2010-01-12"

BODY = json.dumps({
    "base": "EUR",
    "date": "2010-01-12",
    "rates": {"USD": 1.4481, "JPY": 132.66, "SEK": 10}
}).encode()


@pytest.mark.parametrize("status, expected", [
    (100, Failure(InvalidResponse(100))),
    (199, Failure(InvalidResponse(199))),
    (301, Failure(InvalidResponse(301))),
    (399, Failure(InvalidResponse(399))),
    (400, Failure(UnsupportedDate())),
    (401, Failure(InvalidResponse(401))),
    (503, Failure(InvalidResponse(503))),
])
def test_interpret_status(status, expected):
    assert interpret(status, BODY) == expected


def test_interpret_success():
    assert interpret(200, BODY) == Ok({"USD": 1.4481, "JPY": 132.66, "SEK": 10.0})
    assert interpret(299, b'{"rates": {}}') == Ok({})
    assert isinstance(interpret(200, b'{"rates": []}').error, RatesDecodingError)
    assert isinstance(interpret(200, b"").error, RatesDecodingError)


def test_rates_url():
    assert rates_url(BASE, "2010-01-12") == Ok(URL)
    assert rates_url(BASE + "/", "2010-01-12") == Ok(URL)
    assert rates_url(BASE, "yesterday") == Failure(UnsupportedDate("yesterday"))


@pytest.mark.asyncio
async def test_fetch_exchange_rates():
    data_access = DataAccess(BASE, "2010-01-12")
    with aioresponses() as m:
        m.get(URL, status=200, body=BODY)
        m.get(URL, status=400, body=b'{"error": "no data"}')
        m.get(URL, exception=aiohttp.ClientConnectionError("offline"))
        async with aiohttp.ClientSession() as session:
            assert (await data_access.fetch_exchange_rates(session)).get()["USD"] == 1.4481
            assert await data_access.fetch_exchange_rates(session) == Failure(UnsupportedDate())
            result = await data_access.fetch_exchange_rates(session)
    assert isinstance(result.error, RequestError)
    assert isinstance(result.error.cause, aiohttp.ClientConnectionError)


@pytest.mark.asyncio
async def test_invalid_date_makes_no_request():
    data_access = DataAccess(BASE, "12/01/2010")
    with aioresponses():
        async with aiohttp.ClientSession() as session:
            result = await data_access.fetch_exchange_rates(session)
    assert result == Failure(UnsupportedDate("12/01/2010"))


@pytest.mark.asyncio
async def test_fetch_exchange_rates_task():
    received = []
    with aioresponses() as m:
        m.get(URL, status=500)
        async with aiohttp.ClientSession() as session:
            await DataAccess(BASE).fetch_exchange_rates_task(session, received.append)
    assert received == [Failure(InvalidResponse(500))]


def controller(locale="de_DE") -> tuple[Controller, io.StringIO]:
    out = io.StringIO()
    console = Console(file=out, width=120, color_system=None)
    return Controller(DataAccess(BASE, "2010-01-12"), locale, console), out


def test_format_rates():
    c, _ = controller()
    lines = c.format_rates({"USD": 1.4481, "JPY": 132.66})
    assert len(lines) == 2
    assert "133" in lines[0] and "¥" in lines[0]
    assert "1,45" in lines[1] and "$" in lines[1]


def test_describe_error():
    c, _ = controller()
    assert c.describe_error(InvalidResponse(404)) == "not found"
    assert c.describe_error(InvalidResponse(599)) == "server error"
    assert c.describe_error(RequestError(OSError("network down"))) == "network down"
    assert c.describe_error(RatesDecodingError(ValueError("bad json"))) == "bad json"
    assert c.describe_error(UnsupportedDate()) == "Das ausgewählte Datum wird nicht unterstützt."

    en, _ = controller("en_GB")
    assert en.describe_error(UnsupportedDate()) == "The selected date is not supported."


@pytest.mark.asyncio
async def test_print_exchange_rates():
    c, out = controller()
    with aioresponses() as m:
        m.get(URL, status=200, body=BODY)
        m.get(URL, status=400)
        async with aiohttp.ClientSession() as session:
            assert await c.print_exchange_rates(session)
            assert not await c.print_exchange_rates(session)

    lines = out.getvalue().splitlines()
    assert lines[0] == "Wechselkurse am 2010-01-12"
    assert "¥" in lines[1]
    assert "SEK" in lines[2]
    assert "$" in lines[3]
    assert lines[4] == "Das ausgewählte Datum wird nicht unterstützt."
