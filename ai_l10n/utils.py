# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""L10N utils."""

from json import dumps
from pathlib import Path
from typing import Any, Callable, Optional

Echo = Optional[Callable[..., None]]

SEPARATOR = "=" * 60


def _echo(message: str, echo: Echo, **kwargs) -> None:
    """Call the provided echo callback if it exists."""
    if echo:
        echo(message, **kwargs)


def split_languages(_, __, value):
    """Turn a comma separated Click option like 'es, fr,de' into a list."""
    if not value:
        return None
    return [language.strip() for language in value.split(",") if language.strip()]


def format_number(value: int) -> str:
    """Format a character count with thousands separators (5000 -> '5,000')."""
    return f"{value:,}"


def count_string_values(data: Any) -> int:
    """Count the string leaves in a nested JSON structure.

    Dictionaries and lists are walked recursively, other values are ignored.
    """
    if isinstance(data, str):
        return 1
    if isinstance(data, dict):
        return sum(count_string_values(value) for value in data.values())
    if isinstance(data, list):
        return sum(count_string_values(value) for value in data)
    return 0


def write_json_file(path: Path, data: Any) -> None:
    """Write data as indented UTF-8 JSON, creating the parent folder."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fp:
        fp.write(dumps(data, indent=2, ensure_ascii=False))
