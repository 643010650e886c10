# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Test cases for target path building and collision avoidance."""

from pathlib import Path

import pytest

from ai_l10n.project_utilities import (
    ProjectLayout,
    build_target_path,
    describe_source,
    detect_target_languages,
    extract_language_tag,
    filtered_strings_path,
    normalize_language_tag,
    unique_path,
)


@pytest.mark.parametrize(
    "source, target, expected",
    [
        ("locales/en.json", "es", "locales/es.json"),
        ("locales/en.jsonc", "fr", "locales/fr.jsonc"),
        ("locales/en.schema.json", "es", "locales/es.schema.json"),
        ("locales/en.default.schema.json", "es-ES", "locales/es-ES.schema.json"),
        ("locales/en.default.json", "de", "locales/de.json"),
        ("lib/l10n/app_en_US.arb", "es_ES", "lib/l10n/app_es_ES.arb"),
        ("lib/l10n/app_en_US.arb", "es-ES", "lib/l10n/app_es_ES.arb"),
        ("lib/l10n/app_en.arb", "zh-hant-tw", "lib/l10n/app_zh_Hant_TW.arb"),
        ("lib/l10n/en.arb", "de", "lib/l10n/de.arb"),
        ("locales/en/common.json", "es", "locales/es/common.json"),
        (
            "public/locales/en-US/translation.json",
            "pt_br",
            "public/locales/pt-BR/translation.json",
        ),
        ("en/common.json", "de", "de/common.json"),
    ],
)
def test_build_target_path(source, target, expected):
    """Test the output path of each layout."""
    assert build_target_path(source, target) == Path(expected)


@pytest.mark.parametrize(
    "source, target, expected",
    [
        ("locales/en.json", "pt_BR", "locales/pt_BR.json"),
        ("locales/en.json", "pt_br", "locales/pt_BR.json"),
        ("locales/en.json", "pt-br", "locales/pt-BR.json"),
        ("locales/en_US.json", "pt-BR", "locales/pt_BR.json"),
        ("locales/en-US.schema.json", "zh_hans", "locales/zh-Hans.schema.json"),
        ("locales/en.default.json", "es_MX", "locales/es_MX.json"),
        ("locales/en/common.json", "pt_BR", "locales/pt_BR/common.json"),
        ("locales/en_GB/common.json", "es-419", "locales/es_419/common.json"),
    ],
)
def test_build_target_path_keeps_separator_style(source, target, expected):
    """Test that underscore-named projects keep underscores."""
    assert build_target_path(source, target) == Path(expected)


def test_build_target_path_finds_existing_underscore_file(make_files):
    """Test that a detected sibling maps back onto its own file."""
    source, existing = make_files("locales/en.json", "locales/pt_BR.json")

    (language,) = detect_target_languages(source)

    assert build_target_path(source, language) == existing


def test_build_target_path_keeps_absolute_paths(tmp_path):
    """Test that absolute sources give absolute targets."""
    source = tmp_path / "locales" / "en.json"

    target = build_target_path(source, "es")

    assert target == tmp_path / "locales" / "es.json"
    assert target.is_absolute()


def test_build_target_path_does_not_create_directories(tmp_path):
    """Test that building a folder-based path has no side effects."""
    source = tmp_path / "locales" / "en" / "common.json"

    target = build_target_path(source, "es")

    assert target == tmp_path / "locales" / "es" / "common.json"
    assert not target.parent.exists()


@pytest.mark.parametrize(
    "source",
    ["locales/common.json", "lib/l10n/messages.arb", "config/settings.json"],
)
def test_build_target_path_fails_without_layout(source):
    """Test that an unknown layout raises instead of guessing."""
    with pytest.raises(ValueError, match="Cannot determine the project structure"):
        build_target_path(source, "es")


def test_build_target_path_rejects_empty_source():
    """Test that an empty source path is a caller error."""
    with pytest.raises(ValueError, match="Source file path is required"):
        build_target_path("", "es")


def test_build_target_path_rejects_invalid_language():
    """Test that the target language is validated."""
    with pytest.raises(ValueError, match="Invalid language code"):
        build_target_path("locales/en.json", "spanish")


def test_build_target_path_rejects_unsupported_extension():
    """Test that only JSON, JSONC and ARB files are handled."""
    with pytest.raises(ValueError, match="Unsupported file type"):
        build_target_path("locales/en.yaml", "es")


@pytest.mark.parametrize(
    "source, layout",
    [
        ("locales/en/common.json", ProjectLayout.FOLDER),
        ("locales/en.json", ProjectLayout.FILE),
        ("lib/l10n/app_en.arb", ProjectLayout.ARB),
        ("locales/en.default.json", ProjectLayout.SHOPIFY),
        # three-letter folders like src are rarely languages
        ("src/en.json", ProjectLayout.FILE),
        # three-letter file names like app are rarely languages
        ("locales/fr/app.json", ProjectLayout.FOLDER),
        ("locales/en/en.json", ProjectLayout.FOLDER),
    ],
)
def test_describe_source_layout(source, layout):
    """Test layout classification of source paths."""
    assert describe_source(source).layout is layout


def test_describe_source_parts():
    """Test the parts kept from an ARB source name."""
    source = describe_source("lib/l10n/my_app_en_US.arb")

    assert source.language == "en_US"
    assert source.prefix == "my_app"
    assert source.extension == ".arb"
    assert source.file_name == "my_app_en_US.arb"


@pytest.mark.parametrize(
    "source",
    [
        "locales/en.json",
        "locales/en.schema.json",
        "locales/en.default.json",
        "locales/en.default.schema.json",
        "lib/l10n/app_en.arb",
        "lib/l10n/my_app_en_US.arb",
    ],
)
@pytest.mark.parametrize("target", ["es", "es-ES", "pt_br", "zh-Hans", "sr_latn_rs"])
def test_extract_after_build_recovers_target(source, target):
    """Test that the target language can be read back from the built name."""
    target_path = build_target_path(source, target)

    extracted = extract_language_tag(target_path.name)

    assert normalize_language_tag(extracted) == normalize_language_tag(target)


@pytest.mark.parametrize("target", ["es", "es-ES", "zh-Hans"])
def test_folder_target_recovers_target(target):
    """Test that folder-based targets land in a folder named after the language."""
    target_path = build_target_path("locales/en/common.json", target)

    assert normalize_language_tag(target_path.parent.name) == normalize_language_tag(
        target
    )
    assert target_path.name == "common.json"


def test_unique_path_returns_free_path(tmp_path):
    """Test that a free path is returned unchanged."""
    candidate = tmp_path / "output.json"

    assert unique_path(candidate) == candidate


def test_unique_path_counts_up(tmp_path):
    """Test the numbered variants of taken paths."""
    (tmp_path / "output.json").write_text("{}")
    assert unique_path(tmp_path / "output.json") == tmp_path / "output (1).json"

    (tmp_path / "output (1).json").write_text("{}")
    assert unique_path(tmp_path / "output.json") == tmp_path / "output (2).json"


def test_unique_path_keeps_inner_suffixes(tmp_path):
    """Test that only the last extension moves behind the counter."""
    (tmp_path / "es.schema.json").write_text("{}")

    assert unique_path(tmp_path / "es.schema.json") == tmp_path / "es.schema (1).json"


def test_unique_path_gives_up(tmp_path, monkeypatch):
    """Test the guard against endless probing."""
    monkeypatch.setattr("ai_l10n.project_utilities.paths.MAX_DISAMBIGUATOR", 2)
    for name in ("out.json", "out (1).json", "out (2).json"):
        (tmp_path / name).write_text("{}")

    with pytest.raises(RuntimeError, match="Could not find a free file name"):
        unique_path(tmp_path / "out.json")


def test_filtered_strings_path():
    """Test the name of the filtered strings file."""
    assert filtered_strings_path(Path("locales/es.json")) == Path(
        "locales/es.filtered.json"
    )
