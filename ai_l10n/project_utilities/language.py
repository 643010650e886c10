# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Language tag helpers."""

from __future__ import annotations

import re

LANGUAGE_TAG_PATTERN = re.compile(
    r"^[a-z]{2,3}(?:[-_][a-z]{4})?(?:[-_](?:[a-z]{2,3}|[0-9]{3}))?$",
    re.IGNORECASE,
)

TAG_SEPARATORS = re.compile(r"[-_]")


def is_valid_language_tag(candidate: str) -> bool:
    """Check if a string looks like a language tag.

    Accepts ``language[-Script][-Region]`` in any case, separated by ``-`` or
    ``_``. Examples: ``en``, ``en_US``, ``zh-Hans``, ``zh_hans_cn``, ``es-419``.

    :param candidate: String to check
    :return: True if the string is a language tag
    """
    if not isinstance(candidate, str):
        return False
    return LANGUAGE_TAG_PATTERN.match(candidate) is not None


def normalize_language_tag(candidate: str) -> str:
    """Canonicalize a language tag, e.g. ``zh_hans_cn`` to ``zh-Hans-CN``.

    Invalid input is normalized segment by segment without raising.

    :param candidate: Language tag like 'en_us'
    :return: Normalized tag like 'en-US'
    """
    if not isinstance(candidate, str):
        return ""

    segments = [segment for segment in TAG_SEPARATORS.split(candidate) if segment]
    if not segments:
        return ""

    normalized = [segments[0].lower()]
    for segment in segments[1:]:
        if len(segment) == 4 and segment.isalpha():
            normalized.append(segment.title())
        else:
            normalized.append(segment.upper())
    return "-".join(normalized)


def language_subtag(tag: str) -> str:
    """Return the lowercase language part of a tag ('pt_BR' -> 'pt')."""
    return normalize_language_tag(tag).split("-")[0]


def has_two_letter_language(tag: str) -> bool:
    """Check for an ISO 639-1 style language part ('pt_BR' yes, 'app_es' no)."""
    return len(language_subtag(tag)) == 2
