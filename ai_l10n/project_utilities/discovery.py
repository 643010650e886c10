# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Discovery helpers for target languages of a project."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from .extract import FileNameMatch, ProjectLayout, extension_family, parse_file_name
from .language import is_valid_language_tag, normalize_language_tag
from .paths import PathLike, SourceDescriptor, describe_source


def scan_directory(directory: Path) -> tuple[list[str], list[str]]:
    """List the folder and file names of a directory.

    :param directory: Folder to list
    :return: Pair of (folder_names, file_names), both empty if the folder
        cannot be read
    """
    folders: list[str] = []
    files: list[str] = []
    try:
        for entry in sorted(directory.iterdir()):
            if entry.is_dir():
                folders.append(entry.name)
            elif entry.is_file():
                files.append(entry.name)
    except OSError:
        return [], []
    return folders, files


def _is_same_file(file_name: str, source_name: str) -> bool:
    """Check if two names refer to the same localization file.

    ``.json`` and ``.jsonc`` count as the same file.
    """
    if file_name == source_name:
        return True
    candidate, source = Path(file_name), Path(source_name)
    return candidate.stem == source.stem and extension_family(
        candidate.suffix
    ) == extension_family(source.suffix)


def _has_same_pattern(match: FileNameMatch, source: SourceDescriptor) -> bool:
    """Check if a sibling file follows the naming pattern of the source."""
    if extension_family(match.extension) != extension_family(source.extension):
        return False
    if source.layout is ProjectLayout.ARB:
        return match.layout is ProjectLayout.ARB and match.prefix == source.prefix
    # a Shopify default locale sits among plain locale files
    return match.layout in (ProjectLayout.FILE, ProjectLayout.SHOPIFY) and (
        match.suffix == source.suffix
    )


def _select_languages(candidates: Iterable[str], source_language: str) -> list[str]:
    """Drop the source language and duplicates, then sort."""
    seen = {normalize_language_tag(source_language)}
    languages = []
    for candidate in candidates:
        normalized = normalize_language_tag(candidate)
        if normalized in seen:
            continue
        seen.add(normalized)
        languages.append(candidate)
    return sorted(languages)


def languages_from_folders(
    folders: Mapping[str, Iterable[str]], source: SourceDescriptor
) -> list[str]:
    """Find languages of a folder-based project.

    :param folders: Sibling folder names of the source's language folder,
        mapped to the file names they contain
    :param source: Described source file
    :return: Sorted language folder names that hold a copy of the source file
    """
    candidates = [
        folder_name
        for folder_name, file_names in folders.items()
        if is_valid_language_tag(folder_name)
        and any(_is_same_file(name, source.file_name) for name in file_names)
    ]
    return _select_languages(candidates, source.language)


def languages_from_files(
    file_names: Iterable[str], source: SourceDescriptor
) -> list[str]:
    """Find languages of a file-based project (JSON, ARB or Shopify theme).

    :param file_names: File names in the source's folder
    :param source: Described source file
    :return: Sorted language tags as written in the sibling file names
    """
    candidates = []
    for file_name in file_names:
        match = parse_file_name(file_name)
        if match is None or not _has_same_pattern(match, source):
            continue
        candidates.append(match.language)
    return _select_languages(candidates, source.language)


def detect_target_languages(source_file_path: PathLike) -> list[str]:
    """Detect which languages a project translates its source file into.

    Looks at sibling language folders (``locales/en/common.json`` next to
    ``locales/de/common.json``) or at sibling files (``en.json`` next to
    ``de.json``, ``app_en.arb`` next to ``app_de.arb``).

    :param source_file_path: Path to the source file
    :return: Sorted, deduplicated tags, never including the source language.
        Empty if nothing was found.
    :raises ValueError: If the path is empty
    """
    if not source_file_path:
        raise ValueError("Source file path is required")

    try:
        source = describe_source(source_file_path)
    except ValueError:
        return []

    if source.layout is ProjectLayout.FOLDER:
        locale_root = source.path.parent.parent
        folder_names, _ = scan_directory(locale_root)
        folders = {
            folder_name: scan_directory(locale_root / folder_name)[1]
            for folder_name in folder_names
            if is_valid_language_tag(folder_name)
        }
        return languages_from_folders(folders, source)

    _, file_names = scan_directory(source.path.parent)
    return languages_from_files(file_names, source)
