"""Localized strings.

Catalogs live in `fatum/locales/<language>.toml`. An entry is either a plain
string or a table keyed by CLDR plural category:

```toml
[correct_number_employees_selected]
comment = "The number of employees currently selected."
one = "{count} team member selected"
other = "{count} team members selected"
```

Placeholders are written inside whole sentences, so that translators can
move them where their grammar needs them.
"""

from __future__ import annotations

from functools import cache
from importlib import resources
import tomllib
from typing import Any

from babel import Locale

from .errors import HelpfulUserError
from .formatting import parse_locale
from .logging import logger


log = logger()

DEFAULT_LANGUAGE = "en"


@cache
def load_catalog(language: str) -> dict[str, Any]:
    path = resources.files("fatum") / "locales" / f"{language}.toml"
    if not path.is_file():
        return {}
    return tomllib.loads(path.read_text(encoding="utf-8"))


def fallback_chain(locale: Locale) -> list[str]:
    chain = []
    if locale.territory:
        chain.append(f"{locale.language}_{locale.territory}")
    chain.append(locale.language)
    if DEFAULT_LANGUAGE not in chain:
        chain.append(DEFAULT_LANGUAGE)
    return chain


def lookup(key: str, locale: Locale) -> str | dict[str, str] | None:
    for name in fallback_chain(locale):
        if key in (catalog := load_catalog(name)):
            return catalog[key]
    return None


def localized(
    key: str, locale: str | Locale = "en", count: int | None = None, **kwargs: Any
) -> str:
    loc = parse_locale(locale)
    entry = lookup(key, loc)
    if entry is None:
        log.warning("no localized string for `%s` in `%s`", key, loc)
        return key

    if isinstance(entry, dict):
        category = loc.plural_form(count) if count is not None else "other"
        template = entry.get(category, entry["other"])
    else:
        template = entry

    if count is not None:
        kwargs["count"] = count
    try:
        return template.format(**kwargs)
    except KeyError as e:
        raise HelpfulUserError(
            f"String `{key}` needs a value for `{e.args[0]}`."
        ) from e
