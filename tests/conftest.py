# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Pytest configuration."""

import pytest


class EchoRecorder:
    """Collects messages sent to an echo callback."""

    def __init__(self):
        self.messages = []

    def __call__(self, message, **kwargs):
        self.messages.append(message)

    @property
    def output(self):
        return "\n".join(self.messages)


@pytest.fixture
def echo():
    """Echo callback recording its messages."""
    return EchoRecorder()


@pytest.fixture
def make_files(tmp_path):
    """Create files below tmp_path, e.g. make_files("en.json", "de/common.json")."""

    def _make_files(*relative_paths, content="{}"):
        created = []
        for relative_path in relative_paths:
            path = tmp_path / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            created.append(path)
        return created

    return _make_files
