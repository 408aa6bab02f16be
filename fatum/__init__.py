from .result import Ok, Failure, Result, catching
from .codec import decode, decode_result, decoded
from .cat_facts import CatFact, fetch_cat_fact
from .exchange_rates import DataAccess, ExchangeRates
from .controller import Controller
from .version import __version__

__all__ = [
    "Ok",
    "Failure",
    "Result",
    "catching",
    "decode",
    "decode_result",
    "decoded",
    "CatFact",
    "fetch_cat_fact",
    "DataAccess",
    "ExchangeRates",
    "Controller",
    "__version__",
]
