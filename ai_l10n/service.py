# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Client for the l10n.dev translation service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from json import dumps
from typing import Any, Optional

import requests

from .config import API_BASE, CLIENT_NAME, REQUEST_TIMEOUT, URLS
from .utils import Echo, _echo, count_string_values, format_number


class TranslationServiceError(RuntimeError):
    """The translation service rejected or failed a request."""


class FinishReason(str, Enum):
    """Why the service stopped translating."""

    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "contentFilter"
    INSUFFICIENT_BALANCE = "insufficientBalance"
    ERROR = "error"


class FileSchema(str, Enum):
    """File formats the service needs to know about."""

    ARB_FLUTTER = "arbFlutter"


FINISH_REASONS = {reason.value: reason for reason in FinishReason}


@dataclass
class TranslationRequest:
    """A request to translate one file into one language."""

    source_strings: str
    target_language_code: str
    use_contractions: bool = True
    use_shortening: bool = False
    generate_plural_forms: bool = False
    return_translations_as_string: bool = True
    client: str = CLIENT_NAME
    translate_only_new_strings: bool = False
    target_strings: Optional[str] = None
    schema: Optional[FileSchema] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON body of the translate endpoint."""
        return {
            "sourceStrings": self.source_strings,
            "targetLanguageCode": self.target_language_code,
            "useContractions": self.use_contractions,
            "useShortening": self.use_shortening,
            "generatePluralForms": self.generate_plural_forms,
            "returnTranslationsAsString": self.return_translations_as_string,
            "client": self.client,
            "translateOnlyNewStrings": self.translate_only_new_strings,
            "targetStrings": self.target_strings,
            "schema": self.schema.value if self.schema else None,
        }


@dataclass
class TranslationResult:
    """Answer of the translate endpoint."""

    target_language_code: str
    translations: Optional[str]
    chars_used: int = 0
    finish_reason: Optional[FinishReason] = None
    filtered_strings: Any = None
    filtered_strings_count: Optional[int] = None
    completed_chunks: int = 0
    total_chunks: int = 0
    remaining_balance: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TranslationResult:
        """Create a result from the JSON response body."""
        translations = data.get("translations")
        if translations is not None and not isinstance(translations, str):
            translations = dumps(translations, indent=2, ensure_ascii=False)

        filtered_strings = data.get("filteredStrings")
        filtered_strings_count = None
        if filtered_strings is not None:
            filtered_strings_count = count_string_values(filtered_strings)

        usage = data.get("usage") or {}
        return cls(
            target_language_code=data.get("targetLanguageCode", ""),
            translations=translations,
            chars_used=usage.get("charsUsed") or 0,
            finish_reason=FINISH_REASONS.get(data.get("finishReason")),
            filtered_strings=filtered_strings,
            filtered_strings_count=filtered_strings_count,
            completed_chunks=data.get("completedChunks", 0),
            total_chunks=data.get("totalChunks", 0),
            remaining_balance=data.get("remainingBalance"),
        )


def _collect_error_messages(errors: Any) -> list[str]:
    """Flatten validation errors given as a list or as {field: [messages]}."""
    if not errors:
        return []
    if isinstance(errors, str):
        return [errors]
    if isinstance(errors, dict):
        errors = list(errors.values())

    messages = []
    for error in errors:
        if isinstance(error, (list, tuple)):
            messages.extend(str(message) for message in error)
        else:
            messages.append(str(error))
    return messages


def _read_json_body(response: requests.Response) -> dict[str, Any]:
    """Read a JSON object from a response, or an empty dict if there is none."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class L10nTranslationService:
    """Talks to the l10n.dev API."""

    def __init__(
        self,
        echo: Echo = None,
        api_base: str = API_BASE,
        timeout: int = REQUEST_TIMEOUT,
    ):
        """Constructor."""
        self.echo = echo
        self.api_base = api_base
        self.timeout = timeout

    def predict_languages(self, text: str, limit: int = 10) -> list[dict[str, str]]:
        """Find language codes matching a free text like 'spanish'.

        :param text: Language name or code fragment
        :param limit: Maximum number of suggestions
        :return: List of dicts like {'code': 'es', 'name': 'Spanish'}
        :raises TranslationServiceError: If the request fails
        """
        try:
            response = requests.get(
                f"{self.api_base}/languages/predict",
                params={"input": text, "limit": limit},
                timeout=self.timeout,
            )
        except requests.RequestException as error:
            raise TranslationServiceError(
                f"Failed to predict languages: {error}"
            ) from error

        if not response.ok:
            raise TranslationServiceError(
                f"Failed to predict languages: {response.reason}"
            )
        return _read_json_body(response).get("languages", [])

    def translate(
        self, request: TranslationRequest, api_key: str
    ) -> Optional[TranslationResult]:
        """Send one translation request.

        :param request: What to translate
        :param api_key: API key for l10n.dev
        :return: TranslationResult, or None if the account balance is too low
        :raises TranslationServiceError: If the service rejects or fails the request
        """
        if not api_key:
            raise TranslationServiceError(
                "API Key not set. Please configure your API Key first."
            )

        try:
            response = requests.post(
                f"{self.api_base}/translate",
                json=request.to_dict(),
                headers={"Content-Type": "application/json", "X-API-Key": api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as error:
            raise TranslationServiceError(
                f"Could not reach the translation service: {error}"
            ) from error

        if not response.ok:
            return self._handle_error_response(response)

        try:
            data = response.json()
        except ValueError as error:
            raise TranslationServiceError(
                "The translation service returned an invalid response"
            ) from error
        if not isinstance(data, dict):
            raise TranslationServiceError(
                "The translation service returned an invalid response"
            )

        result = TranslationResult.from_dict(data)

        if result.finish_reason is FinishReason.INSUFFICIENT_BALANCE:
            _echo(
                "Not enough characters left on your balance to finish the translation.",
                self.echo,
                fg="red",
            )
            _echo(f"Top up your balance at: {URLS['PRICING']}", self.echo, fg="red")
            return None
        if result.finish_reason is FinishReason.ERROR:
            raise TranslationServiceError("Translation failed due to an error.")

        return result

    def _handle_error_response(self, response: requests.Response) -> None:
        """Turn an error status into an exception; 402 only gets reported."""
        body = _read_json_body(response)
        status = response.status_code

        if status == 400:
            messages = _collect_error_messages(body.get("errors"))
            raise TranslationServiceError(" ".join(messages) or "Invalid request.")
        if status == 401:
            raise TranslationServiceError("Unauthorized. Please check your API Key.")
        if status == 402:
            data = body.get("data") or {}
            required = data.get("requiredBalance")
            current = data.get("currentBalance")
            message = "Not enough characters left on your balance."
            if required is not None and current is not None:
                message = (
                    f"Not enough characters left on your balance: "
                    f"{format_number(required)} required, "
                    f"{format_number(current)} available."
                )
            _echo(message, self.echo, fg="red")
            _echo(f"Top up your balance at: {URLS['PRICING']}", self.echo, fg="red")
            return None
        if status == 413:
            raise TranslationServiceError(
                "Request too large. Maximum request size is 5 MB."
            )
        if status >= 500:
            error_code = body.get("errorCode") or "unknown"
            raise TranslationServiceError(
                f"An internal server error occurred (Error code: {error_code})"
            )
        raise TranslationServiceError(
            f"Translation request failed with status {status}"
        )
