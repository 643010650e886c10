# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Test cases for target language discovery."""

import pytest

from ai_l10n.project_utilities import (
    describe_source,
    detect_target_languages,
    languages_from_files,
    languages_from_folders,
)


def test_file_based_project(make_files):
    """Test sibling JSON files named after languages."""
    source, *_ = make_files(
        "locales/en.json",
        "locales/es.json",
        "locales/fr.json",
        "locales/common.json",
        "locales/notes.txt",
    )

    assert detect_target_languages(source) == ["es", "fr"]


def test_folder_based_project(make_files):
    """Test language folders holding a copy of the source file."""
    source, *_ = make_files(
        "locales/en/common.json",
        "locales/es/common.json",
        "locales/fr/common.jsonc",
        "locales/de/other.json",
        "locales/shared/common.json",
    )

    assert detect_target_languages(source) == ["es", "fr"]


def test_folder_based_project_accepts_string_paths(make_files):
    """Test that plain string paths work like Path objects."""
    source, *_ = make_files("locales/en/app.json", "locales/pt-BR/app.json")

    assert detect_target_languages(str(source)) == ["pt-BR"]


def test_arb_project_matches_prefix(make_files):
    """Test that only ARB files with the source's prefix count."""
    source, *_ = make_files(
        "lib/l10n/app_en.arb",
        "lib/l10n/app_es.arb",
        "lib/l10n/app_de_DE.arb",
        "lib/l10n/other_fr.arb",
        "lib/l10n/intl_messages.arb",
    )

    assert detect_target_languages(source) == ["de_DE", "es"]


def test_shopify_theme_project(make_files):
    """Test that default and schema locales are kept apart."""
    source, schema_source, *_ = make_files(
        "locales/en.default.json",
        "locales/en.default.schema.json",
        "locales/es.json",
        "locales/fr.json",
        "locales/es.schema.json",
    )

    assert detect_target_languages(source) == ["es", "fr"]
    assert detect_target_languages(schema_source) == ["es"]


def test_json_and_jsonc_are_interchangeable(make_files):
    """Test that .jsonc siblings of a .json source are detected."""
    source, *_ = make_files("locales/en.json", "locales/es.jsonc")

    assert detect_target_languages(source) == ["es"]


def test_duplicates_are_collapsed(make_files):
    """Test that differently written tags of one language count once."""
    source, *_ = make_files(
        "locales/en.json",
        "locales/es-ES.json",
        "locales/es_ES.json",
        "locales/en_US.json",
        "locales/EN.jsonc",
    )

    assert detect_target_languages(source) == ["en_US", "es-ES"]


def test_missing_directory_gives_nothing(tmp_path):
    """Test that an unreadable project yields no languages."""
    assert detect_target_languages(tmp_path / "missing" / "en.json") == []


def test_unknown_layout_gives_nothing(make_files):
    """Test that a file without a language code yields no languages."""
    source, *_ = make_files("config/settings.json", "config/es.json")

    assert detect_target_languages(source) == []


def test_empty_path_raises():
    """Test that an empty source path is a caller error."""
    with pytest.raises(ValueError, match="Source file path is required"):
        detect_target_languages("")


def test_languages_from_files():
    """Test discovery on a plain listing of names."""
    source = describe_source("locales/en.json")

    languages = languages_from_files(
        ["de.json", "en.json", "readme.md", "es.schema.json", "ja.arb"], source
    )

    assert languages == ["de"]


def test_languages_from_folders():
    """Test discovery on a plain mapping of folders to files."""
    source = describe_source("locales/en/app.json")
    folders = {
        "en": ["app.json"],
        "es": ["app.json", "other.json"],
        "fr": ["other.json"],
        "zh-Hans": ["app.jsonc"],
    }

    assert languages_from_folders(folders, source) == ["es", "zh-Hans"]
