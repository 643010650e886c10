# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Project structure and language tag utilities.

Utilities for working out how a project stores its localization files, which
languages it already has, and where a translated file has to be written.
Supports JSON, JSONC and Flutter ARB files.

LANGUAGE TAGS  --------
Check and canonicalize ``language[-Script][-Region]`` tags:

.. code-block:: python

    from ai_l10n.project_utilities import is_valid_language_tag, normalize_language_tag
    is_valid_language_tag("zh_hans_cn")   # True
    normalize_language_tag("zh_hans_cn")  # 'zh-Hans-CN'

FILE NAMES  ------
Recover the language of a localization file from its name:

.. code-block:: python

    from ai_l10n.project_utilities import extract_language_tag
    extract_language_tag("app_en_US.arb")           # 'en_US'
    extract_language_tag("en.default.schema.json")  # 'en'
    extract_language_tag("readme.md")               # None

Supported layouts:

- **folder-based**: ``locales/en/common.json``, ``locales/de/common.json``
- **file-based**: ``locales/en.json``, ``locales/de.json`` (also ``en.schema.json``)
- **arb-file-based**: ``lib/l10n/app_en.arb``, ``lib/l10n/app_de.arb``
- **shopify-theme**: ``locales/en.default.json``, ``locales/de.json``

DISCOVERY  ------
Find the languages a project already translates into:

.. code-block:: python

    from ai_l10n.project_utilities import detect_target_languages
    detect_target_languages("locales/en.json")  # ['de', 'fr']

PATHS  ------
Compute where a translation goes, without overwriting existing files:

.. code-block:: python

    from ai_l10n.project_utilities import build_target_path, unique_path
    target = build_target_path("lib/l10n/app_en_US.arb", "es-ES")  # app_es_ES.arb
    output = unique_path(target)  # lib/l10n/app_es_ES (1).arb if taken

Note that a JSON file whose name happens to be a language code (``app.json``)
cannot be told apart from a locale file.
"""

from __future__ import annotations

from .discovery import (
    detect_target_languages,
    languages_from_files,
    languages_from_folders,
    scan_directory,
)
from .extract import (
    FileNameMatch,
    ProjectLayout,
    extract_language_tag,
    parse_file_name,
)
from .language import is_valid_language_tag, normalize_language_tag
from .paths import (
    SourceDescriptor,
    build_target_path,
    describe_source,
    filtered_strings_path,
    target_path_for,
    unique_path,
)

__all__ = [
    "FileNameMatch",
    "ProjectLayout",
    "SourceDescriptor",
    "build_target_path",
    "describe_source",
    "detect_target_languages",
    "extract_language_tag",
    "filtered_strings_path",
    "is_valid_language_tag",
    "languages_from_files",
    "languages_from_folders",
    "normalize_language_tag",
    "parse_file_name",
    "scan_directory",
    "target_path_for",
    "unique_path",
]
