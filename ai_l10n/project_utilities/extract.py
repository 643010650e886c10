# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Recover language tags from localization file names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .language import (
    has_two_letter_language,
    is_valid_language_tag,
    normalize_language_tag,
)

ARB_EXTENSION = ".arb"
JSON_EXTENSIONS = (".json", ".jsonc")
SUPPORTED_EXTENSIONS = (ARB_EXTENSION,) + JSON_EXTENSIONS

SHOPIFY_DEFAULT_MARKER = ".default."
SCHEMA_SUFFIX = ".schema"


class ProjectLayout(Enum):
    """How a project stores its locale files."""

    FOLDER = "folder-based"
    FILE = "file-based"
    ARB = "arb-file-based"
    SHOPIFY = "shopify-theme"


@dataclass(frozen=True)
class FileNameMatch:
    """A file name split into its localization parts.

    ``app_en_US.arb`` gives prefix ``app``, language ``en_US``;
    ``en.default.schema.json`` gives language ``en``, suffix ``.schema``.
    """

    layout: ProjectLayout
    language: str
    extension: str
    prefix: str = ""
    suffix: str = ""


def extension_of(file_name: str) -> Optional[str]:
    """Return the supported extension of a file name as written, or None."""
    lowered = file_name.lower()
    for extension in SUPPORTED_EXTENSIONS:
        if lowered.endswith(extension) and len(file_name) > len(extension):
            return file_name[-len(extension) :]
    return None


def extension_family(extension: str) -> str:
    """Group interchangeable extensions (.json and .jsonc are one family)."""
    extension = extension.lower()
    if extension in JSON_EXTENSIONS:
        return ".json"
    return extension


def _has_arb_casing(candidate: str) -> bool:
    """Check lowercase language, title-case script and uppercase region."""
    return normalize_language_tag(candidate) == candidate.replace("_", "-")


def _extends_longer_tag(splits: list, index: int) -> bool:
    """Check if the next longer prefixed split is a tag with a two-letter language.

    ``app_en_us`` holds ``en_us`` with a lowercase region rather than ``us``,
    while ``my_app_en`` holds ``en`` since ``app`` is a three-letter language.
    """
    if index == 0:
        return False
    prefix_segments, tag_segments = splits[index - 1]
    candidate = "_".join(tag_segments)
    return (
        bool("_".join(prefix_segments))
        and is_valid_language_tag(candidate)
        and has_two_letter_language(candidate)
    )


def _parse_arb(file_name: str, extension: str) -> Optional[FileNameMatch]:
    stem = file_name[: -len(extension)]
    segments = stem.split("_")

    # Longest tag first, but a non-empty prefix must remain; a stem that is
    # only a tag comes after every prefixed parse. Parses following the ARB
    # casing convention are preferred over the rest, unless they cut a longer
    # tag with a two-letter language short.
    splits = [
        (segments[:-size], segments[-size:])
        for size in range(len(segments) - 1, 0, -1)
    ]
    splits.append(([], segments))

    for strict in (True, False):
        for index, (prefix_segments, tag_segments) in enumerate(splits):
            prefix = "_".join(prefix_segments)
            candidate = "_".join(tag_segments)
            if prefix_segments and not prefix:
                continue
            if not is_valid_language_tag(candidate):
                continue
            if strict and not _has_arb_casing(candidate):
                continue
            if strict and prefix_segments and _extends_longer_tag(splits, index):
                continue
            return FileNameMatch(
                layout=ProjectLayout.ARB,
                language=candidate,
                extension=extension,
                prefix=prefix,
            )
    return None


def _parse_shopify(file_name: str, extension: str) -> Optional[FileNameMatch]:
    language, _, rest = file_name.partition(SHOPIFY_DEFAULT_MARKER)
    if not is_valid_language_tag(language):
        return None

    # rest is "json" or e.g. "schema.json"
    if rest.lower() == extension.lower().lstrip("."):
        suffix = ""
    else:
        suffix = "." + rest[: -len(extension)]

    return FileNameMatch(
        layout=ProjectLayout.SHOPIFY,
        language=language,
        extension=extension,
        suffix=suffix,
    )


def _parse_plain(file_name: str, extension: str) -> Optional[FileNameMatch]:
    stem = file_name[: -len(extension)]
    if is_valid_language_tag(stem):
        return FileNameMatch(
            layout=ProjectLayout.FILE, language=stem, extension=extension
        )

    if stem.endswith(SCHEMA_SUFFIX):
        language = stem[: -len(SCHEMA_SUFFIX)]
        if is_valid_language_tag(language):
            return FileNameMatch(
                layout=ProjectLayout.FILE,
                language=language,
                extension=extension,
                suffix=SCHEMA_SUFFIX,
            )
    return None


def parse_file_name(file_name: str) -> Optional[FileNameMatch]:
    """Classify a file name as a locale file.

    Patterns are tried from the most to the least specific: ARB, then Shopify
    theme (``.default.`` marker), then plain JSON/JSONC.

    :param file_name: File name without directories, like 'app_en.arb'
    :return: FileNameMatch, or None if the name is not a locale file name
    """
    if not file_name:
        return None

    extension = extension_of(file_name)
    if extension is None:
        return None

    if extension.lower() == ARB_EXTENSION:
        return _parse_arb(file_name, extension)

    if SHOPIFY_DEFAULT_MARKER in file_name:
        return _parse_shopify(file_name, extension)

    return _parse_plain(file_name, extension)


def extract_language_tag(file_name: str) -> Optional[str]:
    """Get the language tag embedded in a file name.

    :param file_name: File name like 'en.json', 'app_en_US.arb'
        or 'en.default.schema.json'
    :return: The tag as written in the name ('en_US'), or None
    """
    match = parse_file_name(file_name)
    if match is None:
        return None
    return match.language
