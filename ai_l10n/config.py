# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Configuration for ai-l10n."""

from __future__ import annotations

from dataclasses import dataclass, fields
from json import JSONDecodeError, loads
from pathlib import Path
from typing import Any, Optional

BASE_URL = "https://l10n.dev"
API_BASE = f"{BASE_URL}/api"

URLS = {
    "BASE": BASE_URL,
    "API_BASE": API_BASE,
    "API_KEYS": f"{BASE_URL}/ws/keys",
    "PRICING": f"{BASE_URL}/#pricing",
    "CONTENT_POLICY": f"{BASE_URL}/terms-of-service#content-policy",
}

CLIENT_NAME = "ai-l10n-python"

API_KEY_ENV_VAR = "L10N_API_KEY"
"""Environment variable checked for the API key."""

API_KEY_CONFIG_DIR_NAME = ".ai-l10n"
"""Folder in the user's home directory holding the stored API key."""

REQUEST_TIMEOUT = 300
"""Seconds to wait for the translation service."""

CAMEL_CASE_KEYS = {
    "sourceFile": "source_file",
    "targetLanguages": "target_languages",
    "apiKey": "api_key",
    "generatePluralForms": "generate_plural_forms",
    "useShortening": "use_shortening",
    "useContractions": "use_contractions",
    "saveFilteredStrings": "save_filtered_strings",
    "translateOnlyNewStrings": "translate_only_new_strings",
    "verbose": "verbose",
}


@dataclass
class TranslationConfig:
    """Options of one translation run.

    :param source_file: Source file to translate (JSON, JSONC or ARB)
    :param target_languages: Language codes like ['es', 'fr']. Detected from
        the project structure when empty.
    :param api_key: API key for l10n.dev, falls back to L10N_API_KEY and the
        stored key
    :param generate_plural_forms: Generate additional plural form strings
    :param use_shortening: Use shortening in translations
    :param use_contractions: Use contractions in translations
    :param save_filtered_strings: Save strings excluded by the service to a
        ``.filtered`` file next to the output
    :param translate_only_new_strings: Update existing files with new strings
        instead of writing new files
    :param verbose: Print details about the run
    """

    source_file: str
    target_languages: Optional[list[str]] = None
    api_key: Optional[str] = None
    generate_plural_forms: bool = False
    use_shortening: bool = False
    use_contractions: bool = True
    save_filtered_strings: bool = True
    translate_only_new_strings: bool = False
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TranslationConfig:
        """Create a config from a dict with camelCase or snake_case keys.

        :raises ValueError: If the dict has unknown keys or no source file
        """
        known = {field.name for field in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown configuration option: {key}")
            kwargs[name] = value

        if "source_file" not in kwargs:
            raise ValueError("sourceFile is required")
        return cls(**kwargs)


def load_batch_configs(config_path: Path) -> list[TranslationConfig]:
    """Read a batch file holding a JSON array of translation configs.

    A UTF-8 byte order mark is ignored.

    :param config_path: Path to the JSON file
    :return: List of TranslationConfig
    :raises ValueError: If the file is not a JSON array of configs
    """
    with config_path.open("r", encoding="utf-8-sig") as fp:
        content = fp.read()

    try:
        data = loads(content)
    except JSONDecodeError as error:
        preview = content[:100].replace("\n", "\\n")
        raise ValueError(
            f"Failed to parse config file as JSON\n"
            f"   File: {config_path}\n"
            f"   Error: {error}\n"
            f"   First 100 characters of file: {preview}"
        ) from error

    if not isinstance(data, list):
        raise ValueError(
            "Config file must contain an array of translation configurations"
        )

    configs = []
    for entry in data:
        if not isinstance(entry, dict):
            raise ValueError("Each translation configuration must be an object")
        configs.append(TranslationConfig.from_dict(entry))
    return configs
