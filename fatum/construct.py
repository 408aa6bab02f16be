from __future__ import annotations
from typing import Optional, Type, TypeGuard, TypeVar, Any, Union, cast
from enum import Enum
from pathlib import Path
import typing
import types
from dataclasses import MISSING, fields, is_dataclass
import tomllib
import json

from .errors import HelpfulUserError, InputError
from .logging import logger


T = TypeVar("T")

log = logger()


def isgeneric(annot):
    return typing.get_origin(annot) and hasattr(annot, "__args__")


def construct(annot: Any, json: Any) -> Any:
    try:
        return _construct(annot, json)
    except (TypeError, ValueError) as e:
        log.debug("could not construct `%s`: %s", annot, e)
        raise InputError(annot, json) from e


def is_object_type(dtype: Type[Any]) -> TypeGuard[Type[dict[str, Any]]]:
    return (
        isgeneric(dtype)
        and typing.get_origin(dtype) is dict
        and typing.get_args(dtype)[0] is str
    )


def is_optional_type(dtype: Type[Any]) -> TypeGuard[Type[Optional[Any]]]:
    return (
        isgeneric(dtype)
        and typing.get_origin(dtype) in (Union, types.UnionType)
        and len(typing.get_args(dtype)) == 2
        and types.NoneType in typing.get_args(dtype)
    )


def _expect(json: Any, dtype: type | tuple[type, ...]):
    if not isinstance(json, dtype) or (dtype is not bool and isinstance(json, bool)):
        raise ValueError(f"Expected {dtype}, got {type(json).__name__}")


def _construct(annot: Type[T], json: Any) -> T:
    """Construct an object from a given type from a JSON stream.

    The `annot` type should be one of: str, bool, int, float, list[T],
    dict[str, T], Optional[T], a union, an enum or a dataclass. Keys in the
    JSON data that are not fields of the dataclass are skipped.
    """
    if annot is str:
        _expect(json, str)
        return cast(T, json)
    if annot is bool:
        _expect(json, bool)
        return cast(T, json)
    if annot is int:
        _expect(json, int)
        return cast(T, json)
    if annot is float:
        _expect(json, (int, float))
        return cast(T, float(json))
    if is_object_type(annot):
        _expect(json, dict)
        return cast(
            T, {k: _construct(typing.get_args(annot)[1], v) for k, v in json.items()}
        )
    if annot is Any:
        return cast(T, json)
    if annot is Path and isinstance(json, str):
        return cast(T, Path(json))
    if isgeneric(annot) and typing.get_origin(annot) is list:
        _expect(json, list)
        return cast(T, [_construct(typing.get_args(annot)[0], item) for item in json])
    if is_optional_type(annot):
        if json is None:
            return cast(T, None)
        else:
            (inner,) = (
                a for a in typing.get_args(annot) if a is not types.NoneType
            )
            return cast(T, _construct(inner, json))
    if isgeneric(annot) and typing.get_origin(annot) in (Union, types.UnionType):
        for dtype in typing.get_args(annot):
            try:
                return cast(T, _construct(dtype, json))
            except ValueError:
                continue
        raise ValueError("None of the choices in type union match data.")
    if is_dataclass(annot):
        _expect(json, dict)
        arg_annot = typing.get_type_hints(annot)
        args = {}
        for f in fields(annot):
            if f.name in json:
                args[f.name] = _construct(arg_annot[f.name], json[f.name])
            elif f.default is MISSING and f.default_factory is MISSING:
                raise ValueError(f"Missing field `{f.name}` for {annot.__name__}")
        return cast(T, annot(**args))
    if isinstance(json, str) and isinstance(annot, type) and issubclass(annot, Enum):
        options = {opt.name.lower(): opt for opt in annot}
        if json.lower() not in options:
            raise ValueError(f"Unknown option `{json}` for {annot.__name__}")
        return cast(T, options[json.lower()])
    raise ValueError(f"Couldn't construct {annot} from {repr(json)}")


def read_from_file(data_type: Type[T], path: Path, section: Optional[str] = None) -> T:
    """Read a config from given `path` in given `section`. The path should refer to
    a TOML or JSON file that should decode to a `data_type` object. If `section` is
    given, only that section is decoded. The `section` string may contain
    periods to indicate deeper nesting.

    Example:

    ```python
    read_from_file(Config, Path("./pyproject.toml"), "tool.fatum")
    ```
    """
    if not path.exists():
        raise HelpfulUserError(f"File not found: {path}")
    with open(path, "rb") as f:
        if path.suffix == ".toml":
            data: Any = tomllib.load(f)
        elif path.suffix == ".json":
            data = json.load(f)
        else:
            raise HelpfulUserError(f"Unrecognized file format: {path}")

    try:
        if section is not None:
            for s in section.split("."):
                data = data[s]
    except KeyError as e:
        raise HelpfulUserError(
            f"Data file `{path}` should contain section `{section}`."
        ) from e

    return construct(data_type, data)
