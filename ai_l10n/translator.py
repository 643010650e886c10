# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Translate localization files into several languages."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from json import dumps
from pathlib import Path
from typing import Optional

from .api_key import ApiKeyManager
from .config import URLS, TranslationConfig
from .project_utilities import (
    build_target_path,
    detect_target_languages,
    filtered_strings_path,
    is_valid_language_tag,
    normalize_language_tag,
    unique_path,
)
from .project_utilities.extract import ARB_EXTENSION, SUPPORTED_EXTENSIONS
from .service import (
    FileSchema,
    FinishReason,
    L10nTranslationService,
    TranslationRequest,
    TranslationResult,
)
from .utils import SEPARATOR, Echo, _echo, format_number, write_json_file

MAX_PARALLEL_TRANSLATIONS = 8


@dataclass
class TranslationOutput:
    """Result of translating into one language."""

    success: bool
    language: str
    output_path: Optional[Path] = None
    chars_used: int = 0
    error: Optional[str] = None
    remaining_balance: Optional[int] = None


@dataclass
class TranslationSummary:
    """Result of translating one source file."""

    success: bool
    results: list[TranslationOutput] = field(default_factory=list)
    total_chars_used: int = 0
    remaining_balance: Optional[int] = None


class AiTranslator:
    """Translates a source file into every target language of a project."""

    def __init__(
        self,
        echo: Echo = None,
        api_key_manager: Optional[ApiKeyManager] = None,
        translation_service: Optional[L10nTranslationService] = None,
    ):
        """Constructor."""
        self.echo = echo
        self.api_key_manager = api_key_manager or ApiKeyManager(echo=echo)
        self.translation_service = translation_service or L10nTranslationService(
            echo=echo
        )

    def translate(self, config: TranslationConfig) -> TranslationSummary:
        """Translate a localization file to one or more target languages.

        Languages are translated in parallel. A failure in one language does
        not stop the others.

        :param config: What to translate and how
        :return: TranslationSummary, successful if at least one language succeeded
        """
        try:
            source_file_path, is_arb_file = self._resolve_source_file(
                config.source_file
            )
            if config.verbose:
                _echo(f"Source file: {source_file_path}", self.echo)

            api_key = self.api_key_manager.ensure_api_key(config.api_key)
            target_languages = self._resolve_target_languages(
                source_file_path, config.target_languages
            )
        except (ValueError, RuntimeError, OSError) as error:
            _echo(f"Translation failed: {error}", self.echo, fg="red")
            return TranslationSummary(success=False)

        if config.verbose:
            _echo(f"Target languages: {', '.join(target_languages)}", self.echo)
            _echo(
                "Configuration:\n"
                f"  - Use contractions: {config.use_contractions}\n"
                f"  - Use shortening: {config.use_shortening}\n"
                f"  - Generate plural forms: {config.generate_plural_forms}\n"
                f"  - Save filtered strings: {config.save_filtered_strings}\n"
                f"  - Translate only new strings: {config.translate_only_new_strings}",
                self.echo,
            )

        total = len(target_languages)
        with ThreadPoolExecutor(
            max_workers=min(total, MAX_PARALLEL_TRANSLATIONS)
        ) as executor:
            futures = [
                executor.submit(
                    self._translate_language,
                    api_key,
                    source_file_path,
                    target_language,
                    config,
                    is_arb_file,
                    f"({index}/{total})",
                )
                for index, target_language in enumerate(target_languages, start=1)
            ]
            results = [future.result() for future in futures]

        return self._summarize(results)

    def _resolve_source_file(self, source_file: str) -> tuple[Path, bool]:
        """Check the source file and tell if it is an ARB file."""
        if not source_file:
            raise ValueError("sourceFile is required")

        source_file_path = Path(source_file).resolve()
        if not source_file_path.exists():
            raise ValueError(f"Source file not found: {source_file_path}")

        extension = source_file_path.suffix.lower()
        if extension not in SUPPORTED_EXTENSIONS:
            raise ValueError(
                f"Unsupported file type: {source_file_path.suffix}. "
                "Only .json, .jsonc, and .arb files are supported."
            )
        return source_file_path, extension == ARB_EXTENSION

    def _resolve_target_languages(
        self, source_file_path: Path, target_languages: Optional[list[str]]
    ) -> list[str]:
        """Use the given languages or detect them from the project structure.

        Languages are deduplicated on their normalized form, and a language
        the project already has keeps the spelling of its existing file.
        """
        detected = detect_target_languages(source_file_path)
        languages = list(target_languages or [])

        if not languages:
            languages = detected
            if not languages:
                raise ValueError(
                    "No target languages found. Please specify target languages "
                    "or ensure your project has the proper structure (e.g., "
                    "folders named with language codes or files named with "
                    "language codes)."
                )
            _echo(
                "Auto-detected target languages from project structure: "
                f"{', '.join(languages)}",
                self.echo,
                fg="cyan",
            )

        for language in languages:
            if not is_valid_language_tag(language):
                raise ValueError(f"Invalid language code: {language}")

        existing = {normalize_language_tag(tag): tag for tag in detected}
        resolved = {}
        for language in languages:
            normalized = normalize_language_tag(language)
            resolved.setdefault(normalized, existing.get(normalized, language))
        return list(resolved.values())

    def _translate_language(
        self,
        api_key: str,
        source_file_path: Path,
        target_language: str,
        config: TranslationConfig,
        is_arb_file: bool,
        progress: str,
    ) -> TranslationOutput:
        """Translate into one language, turning errors into a failed output."""
        _echo(f"Translating {progress} to {target_language}...", self.echo, fg="blue")
        try:
            return self._perform_translation(
                api_key, source_file_path, target_language, config, is_arb_file
            )
        except (ValueError, RuntimeError, OSError) as error:
            _echo(
                f"Translation to {target_language} failed: {error}",
                self.echo,
                fg="red",
            )
            return TranslationOutput(
                success=False, language=target_language, error=str(error)
            )

    def _perform_translation(
        self,
        api_key: str,
        source_file_path: Path,
        target_language: str,
        config: TranslationConfig,
        is_arb_file: bool,
    ) -> TranslationOutput:
        target_file_path = build_target_path(source_file_path, target_language)
        source_content = source_file_path.read_text(encoding="utf-8")

        target_strings = None
        if config.translate_only_new_strings and target_file_path.exists():
            target_strings = target_file_path.read_text(encoding="utf-8")
            if config.verbose:
                _echo(f"  Updating existing file: {target_file_path}", self.echo)

        request = TranslationRequest(
            source_strings=source_content,
            target_language_code=normalize_language_tag(target_language),
            use_contractions=config.use_contractions,
            use_shortening=config.use_shortening,
            generate_plural_forms=config.generate_plural_forms,
            translate_only_new_strings=config.translate_only_new_strings,
            target_strings=target_strings,
            schema=FileSchema.ARB_FLUTTER if is_arb_file else None,
        )
        result = self.translation_service.translate(request, api_key)

        if result is None:
            return TranslationOutput(
                success=False,
                language=target_language,
                error="Translation service returned no result",
            )
        if not result.translations:
            return TranslationOutput(
                success=False,
                language=target_language,
                error="No translation results received",
            )

        output_path = target_file_path
        if not config.translate_only_new_strings:
            output_path = unique_path(target_file_path)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.translations, encoding="utf-8")

        if result.filtered_strings:
            self._handle_filtered_strings(
                result, output_path, config.save_filtered_strings
            )

        _echo(f"  Saved to: {output_path}", self.echo, fg="green")
        _echo(f"  Characters used: {format_number(result.chars_used)}", self.echo)

        return TranslationOutput(
            success=True,
            language=target_language,
            output_path=output_path,
            chars_used=result.chars_used,
            remaining_balance=result.remaining_balance,
        )

    def _handle_filtered_strings(
        self,
        result: TranslationResult,
        output_path: Path,
        save_filtered_strings: bool,
    ) -> None:
        """Report strings the service left out and keep them for review."""
        if result.finish_reason is FinishReason.CONTENT_FILTER:
            reason = "content policy violations"
        elif result.finish_reason is FinishReason.LENGTH:
            reason = "AI context limit was reached (content too long)"
        else:
            return

        _echo(
            f"  {result.filtered_strings_count} string(s) were excluded "
            f"due to {reason}",
            self.echo,
            fg="yellow",
        )
        if result.finish_reason is FinishReason.CONTENT_FILTER:
            _echo(f"  View content policy at: {URLS['CONTENT_POLICY']}", self.echo)

        if save_filtered_strings:
            filtered_path = filtered_strings_path(output_path)
            write_json_file(filtered_path, result.filtered_strings)
            _echo(f"  Filtered strings saved to: {filtered_path}", self.echo)
        else:
            filtered_json = dumps(result.filtered_strings, indent=2, ensure_ascii=False)
            _echo(f"  Filtered strings:\n{filtered_json}", self.echo)

    def _summarize(self, results: list[TranslationOutput]) -> TranslationSummary:
        """Add up the results and print the summary."""
        total_chars_used = sum(result.chars_used for result in results)
        balances = [
            result.remaining_balance
            for result in results
            if result.remaining_balance is not None
        ]
        remaining_balance = min(balances) if balances else None
        successful = [result for result in results if result.success]

        _echo(SEPARATOR, self.echo)
        _echo("Translation Summary", self.echo, bold=True)
        _echo(SEPARATOR, self.echo)
        _echo(f"Successful: {len(successful)}/{len(results)}", self.echo, fg="green")
        _echo(f"Total characters used: {format_number(total_chars_used)}", self.echo)
        if remaining_balance is not None:
            _echo(
                f"Remaining balance: {format_number(remaining_balance)} characters",
                self.echo,
            )
        if len(successful) < len(results):
            failed = [result.language for result in results if not result.success]
            _echo(f"Failed: {', '.join(failed)}", self.echo, fg="red")

        return TranslationSummary(
            success=bool(successful),
            results=results,
            total_chars_used=total_chars_used,
            remaining_balance=remaining_balance,
        )

    def set_api_key(self, api_key: str) -> None:
        """Store the API key for l10n.dev."""
        self.api_key_manager.set_api_key(api_key)

    def clear_api_key(self) -> None:
        """Remove the stored API key."""
        self.api_key_manager.clear_api_key()

    def get_api_key(self) -> Optional[str]:
        """Return the stored API key, if any."""
        return self.api_key_manager.get_api_key()

    def display_api_key(self) -> str:
        """Describe the stored API key with its middle part masked."""
        return self.api_key_manager.display_api_key()
