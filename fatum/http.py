from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import aiohttp

from .async_timer import timer
from .errors import InvalidResponse
from .logging import logger
from .result import Failure, Ok, Result


log = logger()


@dataclass(frozen=True)
class Response:
    status: int
    body: bytes
    url: str


async def fetch(session: aiohttp.ClientSession, url: str) -> Result[Response, Exception]:
    """Issue a single GET request.

    Transport errors become a `Failure`. Every HTTP status, including error
    codes, is an `Ok`: it is up to the caller to decide what a status means.
    """
    async with timer() as t:
        try:
            async with session.get(url) as response:
                body = await response.read()
                result: Result[Response, Exception] = Ok(
                    Response(response.status, body, url)
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            result = Failure(e)

    match result:
        case Ok(Response(status=status)):
            log.debug("GET `%s` -> %d (%s)", url, status, t)
        case Failure(error):
            log.debug("GET `%s` failed: %r (%s)", url, error, t)
    return result


def data_task(
    session: aiohttp.ClientSession,
    url: str,
    completion: Callable[[Result[Response, Exception]], Any],
) -> asyncio.Task:
    """Schedule a fetch of `url` and call `completion` once with its result.
    Must be called from within a running event loop."""

    async def go():
        completion(await fetch(session, url))

    return asyncio.create_task(go())


async def fetch_adaptive(
    session: aiohttp.ClientSession,
    url: str,
    low_data_url: str,
    low_data_mode: bool = False,
) -> Result[bytes, Exception]:
    """Fetch `url`, falling back to the lighter `low_data_url` when the
    connection fails or when running in low-data mode. Only a 200 response
    counts as success."""
    if low_data_mode:
        result = await fetch(session, low_data_url)
    else:
        result = await fetch(session, url)
        if isinstance(result, Failure) and isinstance(
            result.error, aiohttp.ClientConnectionError
        ):
            log.info("`%s` unreachable, trying `%s`", url, low_data_url)
            result = await fetch(session, low_data_url)

    return result.flat_map(_require_200)


def _require_200(response: Response) -> Result[bytes, Exception]:
    if response.status != 200:
        return Failure(InvalidResponse(response.status))
    return Ok(response.body)
