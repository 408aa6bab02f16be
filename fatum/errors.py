from dataclasses import dataclass
from typing import Any


class UserError(Exception):
    def __str__(self):
        return "Unknown user error."


@dataclass
class HelpfulUserError(UserError):
    msg: str

    def __str__(self):
        return self.msg


@dataclass
class InputError(UserError):
    expected: Any
    got: Any

    def __str__(self):
        return f"Expected {self.expected}, got: {self.got!r}"


@dataclass
class UnwrapError(UserError):
    error: Any

    def __str__(self):
        return f"Unwrapped a failure: {self.error}"


@dataclass
class DecodingError(UserError):
    cause: Exception

    def __str__(self):
        return f"Could not decode response: {self.cause}"


class ExchangeRatesError(UserError):
    pass


@dataclass
class RatesDecodingError(ExchangeRatesError):
    cause: Exception

    def __str__(self):
        return str(self.cause)


@dataclass
class InvalidResponse(ExchangeRatesError):
    status: int

    def __str__(self):
        return f"Invalid response, status code {self.status}"


@dataclass
class RequestError(ExchangeRatesError):
    cause: Exception

    def __str__(self):
        return str(self.cause) or type(self.cause).__name__


@dataclass
class UnsupportedDate(ExchangeRatesError):
    date: str | None = None

    def __str__(self):
        if self.date is None:
            return "The selected date is not supported."
        return f"The selected date is not supported: {self.date}"
