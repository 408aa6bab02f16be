import logging
import sys
from rich.console import Console
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler


def logger():
    return logging.getLogger("fatum")


class BackTickHighlighter(RegexHighlighter):
    highlights = [r"`(?P<bold>[^`]*)`"]


def configure_logger(debug: bool, rich: bool = True):
    """Log to standard error, leaving standard output to the facts, rates
    and strings the commands print."""
    if rich:
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(
                console=Console(stderr=True),
                show_path=debug,
                highlighter=BackTickHighlighter(),
            )],
        )
    else:
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
            handlers=[logging.StreamHandler(sys.stderr)]
        )
    # only our own requests are of interest at debug level
    for name in ("aiohttp", "asyncio"):
        logging.getLogger(name).setLevel(logging.INFO)
