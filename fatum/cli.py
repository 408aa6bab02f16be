from argparse import ArgumentParser
import asyncio
import datetime
import sys
from typing import Optional
import argh  # type: ignore
import aiohttp
from babel import UnknownLocaleError
from rich.console import Console
from rich.table import Table

from rich_argparse import RichHelpFormatter

from .cat_facts import fetch_cat_fact
from .config import Config, load_config
from .controller import Controller
from .errors import UserError
from .exchange_rates import DataAccess
from .formatting import (
    format_currency,
    format_date,
    format_date_template,
    format_duration,
    format_interval,
    format_iso8601,
    format_list,
    format_number,
    format_relative,
    parse_locale,
    text_direction,
    weekday_name,
)
from .logging import logger, configure_logger
from .measurement import convert, format_measurement, measure
from .result import Failure, Ok, Result
from .strings import localized
from .version import __version__

log = logger()

CONFIG_HELP = "TOML or JSON file, use a `[...]` suffix to indicate a subsection."


def setup(config_file: Optional[str], debug: bool) -> Config:
    configure_logger(debug)
    try:
        return load_config(config_file)
    except UserError as e:
        log.error(f"Failed: {e}")
        sys.exit(1)


async def get_cat_fact(cfg: Config) -> Result[str, Exception]:
    async with aiohttp.ClientSession() as session:
        return await fetch_cat_fact(
            session, cfg.cat_fact_url, cfg.low_data_url, cfg.low_data_mode
        )


@argh.arg("-c", "--config-file", help=CONFIG_HELP)
@argh.arg("--debug", help="more verbose logging")
def fact(*, config_file: Optional[str] = None, debug: bool = False):
    """Print a random cat fact."""
    cfg = setup(config_file, debug)
    match asyncio.run(get_cat_fact(cfg)):
        case Ok(text):
            print(text)
        case Failure(error):
            log.error(f"Failed: {error}")
            sys.exit(1)


async def print_rates(controller: Controller) -> bool:
    async with aiohttp.ClientSession() as session:
        return await controller.print_exchange_rates(session)


@argh.arg("-d", "--date", help="date of the rates, as YYYY-MM-DD")
@argh.arg("-l", "--locale", help="locale to format the amounts in")
@argh.arg("-c", "--config-file", help=CONFIG_HELP)
@argh.arg("--debug", help="more verbose logging")
def rates(
    *,
    date: Optional[str] = None,
    locale: Optional[str] = None,
    config_file: Optional[str] = None,
    debug: bool = False,
):
    """Print the exchange rates of a given day."""
    cfg = setup(config_file, debug)
    data_access = DataAccess(cfg.exchange_rates_url, date or cfg.date)
    controller = Controller(data_access, locale or cfg.locale)
    try:
        parse_locale(controller.locale)
    except (ValueError, UnknownLocaleError) as e:
        log.error(f"Failed: {e}")
        sys.exit(1)
    if not asyncio.run(print_rates(controller)):
        sys.exit(1)


def showcase_table(locale: str) -> Table:
    day = datetime.date(2019, 7, 15)
    t = Table(
        title=f"Formatters ({locale}, {text_direction(locale)})",
        header_style="italic green",
        show_edge=False,
    )
    t.add_column("formatter", style="bold yellow")
    t.add_column("output")
    t.add_row("number", format_number(1234.56, locale))
    t.add_row("currency", format_currency(12, "USD", locale))
    t.add_row("date", format_date(day, "long", locale))
    t.add_row("template MMMMd", format_date_template(datetime.date(2019, 12, 31), "MMMMd", locale))
    t.add_row("ISO 8601", format_iso8601(day))
    t.add_row("duration", format_duration(datetime.timedelta(minutes=10), locale))
    t.add_row("interval", format_interval(datetime.date(2019, 6, 3), datetime.date(2019, 6, 7), locale))
    t.add_row("relative", format_relative(datetime.timedelta(weeks=-3), locale))
    t.add_row("list", format_list(["iOS", "macOS", "watchOS"], locale))
    t.add_row("weekday", weekday_name(0, locale))
    t.add_row("temperature", format_measurement(convert(measure(72, "degF"), "degC"), locale, 1))
    t.add_row("length", format_measurement(measure(52000, "meter"), locale))
    t.add_row("beard-seconds", format_measurement(convert(measure(5, "millimeter"), "beard_second"), locale))
    t.add_row("selection", localized("correct_number_employees_selected", locale, count=500))
    return t


@argh.arg("-l", "--locale", help="locale to format in")
@argh.arg("--debug", help="more verbose logging")
def showcase(*, locale: str = "en_US", debug: bool = False):
    """Show the locale-aware formatters applied to sample values."""
    configure_logger(debug)
    try:
        table = showcase_table(locale)
    except (ValueError, UnknownLocaleError) as e:
        log.error(f"Failed: {e}")
        sys.exit(1)
    Console().print(table)


@argh.arg("key", help="name of the localized string")
@argh.arg("-n", "--count", type=int, help="number to fill in, selects the plural form")
@argh.arg("-l", "--locale", help="locale to look the string up in")
def text(key: str, *, count: Optional[int] = None, locale: str = "en"):
    """Print a localized string."""
    configure_logger(False)
    try:
        print(localized(key, locale, count=count))
    except (ValueError, UnknownLocaleError, UserError) as e:
        log.error(f"Failed: {e}")
        sys.exit(1)


def version():
    """Print version number and exit."""
    print(f"Fatum {__version__}")


def cli():
    parser = ArgumentParser(formatter_class=RichHelpFormatter)
    argh.add_commands(parser, [fact, rates, showcase, text, version])
    argh.dispatch(parser)


if __name__ == "__main__":
    cli()
