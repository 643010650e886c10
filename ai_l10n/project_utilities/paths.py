# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Output path helpers for translated files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .extract import ProjectLayout, extension_of, parse_file_name
from .language import (
    TAG_SEPARATORS,
    has_two_letter_language,
    is_valid_language_tag,
    normalize_language_tag,
)

MAX_DISAMBIGUATOR = 10_000

PathLike = Union[str, Path]


@dataclass(frozen=True)
class SourceDescriptor:
    """How a source file is laid out in its project."""

    path: Path
    layout: ProjectLayout
    language: str
    file_name: str
    extension: str
    prefix: str = ""
    suffix: str = ""


def _prefers_folder(folder_language: str, file_language: str) -> bool:
    """Pick a layout when both the folder and the file name look like tags.

    Two-letter language codes are far more common than three-letter ones,
    while folders like ``src`` or ``app`` are three letters long.
    """
    if has_two_letter_language(folder_language):
        return True
    return not has_two_letter_language(file_language)


def describe_source(source_file_path: PathLike) -> SourceDescriptor:
    """Work out the layout of a source localization file.

    :param source_file_path: Path like 'locales/en/common.json' or 'lib/l10n/app_en.arb'
    :return: SourceDescriptor for the file
    :raises ValueError: If the path is empty or matches no known layout
    """
    if not source_file_path:
        raise ValueError("Source file path is required")

    path = Path(source_file_path)
    extension = extension_of(path.name)
    if extension is None:
        raise ValueError(
            f"Unsupported file type: {path.suffix or path.name}. "
            "Only .json, .jsonc, and .arb files are supported."
        )

    folder_language = path.parent.name
    if not is_valid_language_tag(folder_language):
        folder_language = None
    file_match = parse_file_name(path.name)

    if folder_language and (
        file_match is None or _prefers_folder(folder_language, file_match.language)
    ):
        return SourceDescriptor(
            path=path,
            layout=ProjectLayout.FOLDER,
            language=folder_language,
            file_name=path.name,
            extension=extension,
        )

    if file_match is not None:
        return SourceDescriptor(
            path=path,
            layout=file_match.layout,
            language=file_match.language,
            file_name=path.name,
            extension=file_match.extension,
            prefix=file_match.prefix,
            suffix=file_match.suffix,
        )

    raise ValueError(
        f"Cannot determine the project structure of {path}: neither the file "
        "name nor its folder contains a language code"
    )


def _tag_separator(source_language: str, target_language: str) -> str:
    """Separator used in the project's tags, '-' unless it writes 'pt_BR'.

    The source language decides; a source like ``en`` carries no separator, so
    the target as written (``pt_BR`` from a detected sibling) decides then.
    """
    for tag in (source_language, target_language):
        separator = TAG_SEPARATORS.search(tag)
        if separator:
            return separator.group()
    return "-"


def target_path_for(source: SourceDescriptor, target_language: str) -> Path:
    """Compute the output path of a described source for one language.

    The target tag is normalized but keeps the separator style of the project,
    so ``pt_BR.json`` next to ``en.json`` is found again.

    :param source: Output of describe_source()
    :param target_language: Language tag like 'es' or 'pt_BR'
    :return: Path of the translated file, next to the source
    """
    normalized = normalize_language_tag(target_language)
    directory = source.path.parent

    if source.layout is ProjectLayout.ARB:
        arb_language = normalized.replace("-", "_")
        stem = f"{source.prefix}_{arb_language}" if source.prefix else arb_language
        return directory / f"{stem}{source.extension}"

    separator = _tag_separator(source.language, target_language)
    language = normalized.replace("-", separator)

    if source.layout is ProjectLayout.FOLDER:
        return directory.parent / language / source.file_name

    # file-based and Shopify: the ".default" marker is not carried over
    return directory / f"{language}{source.suffix}{source.extension}"


def build_target_path(source_file_path: PathLike, target_language: str) -> Path:
    """Build the path a translation of the source file is written to.

    Directories are not created here; callers create the parent folder before
    writing.

    :param source_file_path: Source file like 'locales/en.json'
    :param target_language: Language tag like 'es' or 'es_ES'
    :return: Path like 'locales/es.json'
    :raises ValueError: If the language is invalid or the layout is unknown
    """
    if not is_valid_language_tag(target_language):
        raise ValueError(f"Invalid language code: {target_language}")

    return target_path_for(describe_source(source_file_path), target_language)


def unique_path(candidate: PathLike) -> Path:
    """Find a path that does not exist yet.

    ``output.json`` becomes ``output (1).json``, then ``output (2).json``.

    :param candidate: Preferred path
    :return: The candidate itself, or the first free numbered variant
    :raises RuntimeError: If no free name is found
    """
    path = Path(candidate)
    if not path.exists():
        return path

    for counter in range(1, MAX_DISAMBIGUATOR + 1):
        option = path.with_name(f"{path.stem} ({counter}){path.suffix}")
        if not option.exists():
            return option

    raise RuntimeError(f"Could not find a free file name for {path}")


def filtered_strings_path(output_path: PathLike) -> Path:
    """Path for strings the service filtered out: 'es.json' -> 'es.filtered.json'."""
    path = Path(output_path)
    return path.with_name(f"{path.stem}.filtered{path.suffix}")
