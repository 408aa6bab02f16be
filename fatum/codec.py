import json
from typing import Type, TypeVar

from .construct import construct
from .errors import DecodingError
from .result import Result, catching


T = TypeVar("T")


def decode(dtype: Type[T], data: bytes | str) -> T:
    """Decode a JSON document into an instance of `dtype`. Raises
    `json.JSONDecodeError` on malformed JSON and `InputError` when the
    document doesn't fit the type."""
    return construct(dtype, json.loads(data))


def decode_result(dtype: Type[T], data: bytes | str) -> Result[T, DecodingError]:
    return catching(decode, dtype, data).map_error(DecodingError)


def decoded(result: Result[bytes, Exception], dtype: Type[T]) -> T:
    """Unwrap a result holding a JSON body and decode it. Raises the failure
    if there is one, otherwise whatever `decode` raises."""
    return decode(dtype, result.get())
