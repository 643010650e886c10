# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Storage of the l10n.dev API key."""

from __future__ import annotations

import os
from json import JSONDecodeError, load
from pathlib import Path
from typing import Optional

from .config import API_KEY_CONFIG_DIR_NAME, API_KEY_ENV_VAR, URLS
from .utils import Echo, _echo, write_json_file


class ApiKeyManager:
    """Reads and writes the API key in ``~/.ai-l10n/config.json``."""

    def __init__(self, config_dir: Optional[Path] = None, echo: Echo = None):
        """Constructor."""
        self.config_dir = config_dir or Path.home() / API_KEY_CONFIG_DIR_NAME
        self.config_file = self.config_dir / "config.json"
        self.echo = echo

    def get_api_key(self) -> Optional[str]:
        """Return the stored API key, or None if there is none or it is unreadable."""
        if not self.config_file.exists():
            return None

        try:
            with self.config_file.open("r", encoding="utf-8") as fp:
                config = load(fp)
        except (JSONDecodeError, OSError, UnicodeDecodeError) as error:
            _echo(
                f"Warning: Failed to read API key from config: {error}",
                self.echo,
                fg="yellow",
            )
            return None

        if not isinstance(config, dict):
            return None
        return config.get("apiKey") or None

    def set_api_key(self, api_key: str) -> None:
        """Store the API key.

        :raises RuntimeError: If the config file cannot be written
        """
        try:
            write_json_file(self.config_file, {"apiKey": api_key})
        except OSError as error:
            raise RuntimeError(f"Failed to save API key: {error}") from error
        _echo("API Key saved successfully!", self.echo, fg="green")

    def clear_api_key(self) -> None:
        """Remove the stored API key.

        :raises RuntimeError: If the config file cannot be removed
        """
        if not self.config_file.exists():
            _echo("No API Key found to clear.", self.echo)
            return

        try:
            self.config_file.unlink()
        except OSError as error:
            raise RuntimeError(f"Failed to clear API key: {error}") from error
        _echo("API Key cleared successfully!", self.echo, fg="green")

    def ensure_api_key(self, provided_api_key: Optional[str] = None) -> str:
        """Find an API key: the given one, then L10N_API_KEY, then the stored one.

        :raises RuntimeError: If no API key is available
        """
        if provided_api_key:
            return provided_api_key

        env_api_key = os.environ.get(API_KEY_ENV_VAR)
        if env_api_key:
            return env_api_key

        stored_api_key = self.get_api_key()
        if stored_api_key:
            return stored_api_key

        raise RuntimeError(
            "API Key not found. Please provide it via:\n"
            "1. Configuration option (api_key) or --api-key\n"
            f"2. Environment variable ({API_KEY_ENV_VAR})\n"
            "3. Run 'ai-l10n config --api-key YOUR_KEY' to save it\n"
            f"Get your API key from {URLS['API_KEYS']}"
        )

    def display_api_key(self) -> str:
        """Describe the stored API key with its middle part masked."""
        api_key = self.get_api_key()
        if not api_key:
            return (
                "API Key not found. Run 'ai-l10n config --api-key YOUR_KEY' "
                f"to save it. Get your API key from {URLS['API_KEYS']}"
            )
        if len(api_key) <= 12:
            return f"API Key: {api_key}"
        return f"API Key: {api_key[:8]}...{api_key[-4:]}"
