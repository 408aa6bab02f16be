from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

import aiohttp

from .codec import decode
from .http import fetch, fetch_adaptive
from .result import Result, catching


CAT_FACT_URL = "https://cat-fact.herokuapp.com/facts/random"


@dataclass
class CatFact:
    text: str


def parse_cat_fact(body: bytes) -> Result[str, Exception]:
    return catching(decode, CatFact, body).map(lambda fact: fact.text)


async def fetch_cat_fact(
    session: aiohttp.ClientSession,
    url: str = CAT_FACT_URL,
    low_data_url: Optional[str] = None,
    low_data_mode: bool = False,
) -> Result[str, Exception]:
    """Fetch a random cat fact. With a `low_data_url` the lighter resource is
    used in low-data mode or when `url` can't be reached."""
    if low_data_url is None:
        result = (await fetch(session, url)).map(lambda response: response.body)
    else:
        result = await fetch_adaptive(session, url, low_data_url, low_data_mode)
    return result.flat_map(parse_cat_fact)


def cat_fact_task(
    session: aiohttp.ClientSession,
    completion: Callable[[Result[str, Exception]], Any],
    url: str = CAT_FACT_URL,
) -> asyncio.Task:
    async def go():
        completion(await fetch_cat_fact(session, url))

    return asyncio.create_task(go())
