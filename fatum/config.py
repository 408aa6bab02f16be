from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Optional
import tomllib

from .cat_facts import CAT_FACT_URL
from .construct import construct, read_from_file
from .exchange_rates import DEFAULT_DATE, EXCHANGE_RATES_URL
from .logging import logger


log = logger()


@dataclass
class Config:
    cat_fact_url: str = CAT_FACT_URL
    exchange_rates_url: str = EXCHANGE_RATES_URL
    date: str = DEFAULT_DATE
    locale: str = "de_DE"
    low_data_url: Optional[str] = None
    low_data_mode: bool = False


def split_section(value: str) -> tuple[Path, Optional[str]]:
    """Split `path[section]` into its path and section parts."""
    if m := re.match(r"([^\[\]]+)\[([^\[\]\s]+)\]", value):
        return Path(m.group(1)), m.group(2)
    return Path(value), None


def load_config(config_file: Optional[str] = None) -> Config:
    """Find the configuration: an explicit `path[section]`, then `fatum.toml`,
    then the `[tool.fatum]` section of `pyproject.toml`. Without any of these
    the defaults are used."""
    if config_file is not None:
        path, section = split_section(config_file)
        return read_from_file(Config, path, section)

    if Path("fatum.toml").exists():
        return read_from_file(Config, Path("fatum.toml"))

    if Path("pyproject.toml").exists():
        with open("pyproject.toml", "rb") as f_in:
            data = tomllib.load(f_in)
        if "fatum" in data.get("tool", {}):
            return construct(Config, data["tool"]["fatum"])
        log.debug("`pyproject.toml` has no `[tool.fatum]` section")

    return Config()
