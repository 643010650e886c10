# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""CLI for AI-powered translation of localization files."""

from pathlib import Path
from typing import Optional

import rich_click as click
from rich_click import STRING, IntRange, argument, group, option, secho
from rich_click import Path as ClickPath

from .config import TranslationConfig, load_batch_configs
from .service import L10nTranslationService, TranslationServiceError
from .translator import AiTranslator
from .utils import SEPARATOR, format_number, split_languages

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.USE_MARKDOWN = False


@group()
@click.version_option(package_name="ai-l10n")
def ai_l10n():
    """AI-powered auto-translation for JSON and ARB localization files."""


@ai_l10n.command("translate")
@argument(
    "source_file",
    metavar="FILE",
    type=ClickPath(exists=False, dir_okay=False, path_type=Path),
)
@option(
    "--languages",
    "-l",
    "target_languages",
    type=STRING,
    callback=split_languages,
    help="Target language codes, comma separated (e.g. es,fr,de). "
    "Detected from the project structure if omitted.",
)
@option(
    "--api-key",
    "-k",
    help="API key for l10n.dev (or set the L10N_API_KEY environment variable)",
)
@option("--plural", is_flag=True, default=False, help="Generate plural forms")
@option(
    "--shorten", is_flag=True, default=False, help="Use shortening in translations"
)
@option(
    "--contractions/--no-contractions",
    default=True,
    help="Use contractions in translations",
)
@option(
    "--save-filtered/--no-save-filtered",
    default=True,
    help="Save filtered strings to a separate file",
)
@option(
    "--update",
    is_flag=True,
    default=False,
    help="Update existing files with only new translations",
)
@option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose output")
def translate(
    source_file: Path,
    target_languages: Optional[list[str]],
    api_key: Optional[str],
    *,
    plural: bool,
    shorten: bool,
    contractions: bool,
    save_filtered: bool,
    update: bool,
    verbose: bool,
):
    """Translate a localization file.

    Examples:
        ai-l10n translate ./locales/en.json -l es,fr,de
        ai-l10n translate ./lib/l10n/app_en.arb --plural
        ai-l10n translate ./locales/en/common.json --update
    """
    config = TranslationConfig(
        source_file=str(source_file),
        target_languages=target_languages,
        api_key=api_key,
        generate_plural_forms=plural,
        use_shortening=shorten,
        use_contractions=contractions,
        save_filtered_strings=save_filtered,
        translate_only_new_strings=update,
        verbose=verbose,
    )

    result = AiTranslator(echo=secho).translate(config)
    if not result.success:
        raise SystemExit(1)


@ai_l10n.command("config")
@option("--api-key", help="Store the API key")
@option("--clear", is_flag=True, help="Remove the stored API key")
def config(api_key: Optional[str], clear: bool):
    """Manage the stored API key.

    Without options, shows the stored key with its middle part masked.
    """
    translator = AiTranslator(echo=secho)

    try:
        if clear:
            translator.clear_api_key()
        elif api_key:
            translator.set_api_key(api_key)
        else:
            secho(translator.display_api_key())
    except RuntimeError as error:
        secho(f"Error: {error}", fg="red")
        raise SystemExit(1)


@ai_l10n.command("batch")
@argument(
    "config_file",
    metavar="CONFIG",
    type=ClickPath(exists=False, dir_okay=False, path_type=Path),
)
def batch(config_file: Path):
    """Translate multiple files using a config file.

    The config file holds a JSON array of translation configurations:

    .. code-block:: json

        [
            {"sourceFile": "./locales/en.json", "targetLanguages": ["es", "fr"]},
            {"sourceFile": "./lib/l10n/app_en.arb", "generatePluralForms": true}
        ]
    """
    config_path = config_file.resolve()
    if not config_path.exists():
        secho(f"Error: Config file not found: {config_path}", fg="red")
        raise SystemExit(1)

    try:
        configs = load_batch_configs(config_path)
    except (OSError, ValueError) as error:
        secho(f"Error: {error}", fg="red")
        raise SystemExit(1)

    secho(f"Processing {len(configs)} translation(s)...", fg="blue")

    translator = AiTranslator(echo=secho)
    success_count = 0
    fail_count = 0

    for index, translation_config in enumerate(configs, start=1):
        secho(f"\n{SEPARATOR}")
        secho(
            f"Translation {index}/{len(configs)}: {translation_config.source_file}",
            bold=True,
        )
        secho(SEPARATOR)

        result = translator.translate(translation_config)
        if result.success:
            success_count += 1
        else:
            fail_count += 1

    secho(f"\n{SEPARATOR}")
    secho("Batch Translation Complete", bold=True)
    secho(SEPARATOR)
    secho(f"Successful: {success_count}", fg="green")
    secho(f"Failed: {fail_count}", fg="red" if fail_count else None)

    if fail_count > 0:
        raise SystemExit(1)


@ai_l10n.command("languages")
@argument("text")
@option(
    "--limit",
    type=IntRange(min=1),
    default=10,
    show_default=True,
    help="Maximum number of suggestions",
)
def languages(text: str, limit: int):
    """Look up language codes by name, e.g. 'spanish' or 'portuguese brazil'."""
    try:
        predictions = L10nTranslationService(echo=secho).predict_languages(
            text, limit
        )
    except TranslationServiceError as error:
        secho(f"Error: {error}", fg="red")
        raise SystemExit(1)

    if not predictions:
        secho(f"No languages found for '{text}'", fg="yellow")
        return

    for language in predictions:
        secho(f"{language.get('code', ''):<12} {language.get('name', '')}")
    secho(f"Found {format_number(len(predictions))} language(s).", fg="green")
