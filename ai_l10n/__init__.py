# -*- coding: utf-8 -*-
#
# This file is part of ai-l10n.
# Copyright (C) 2026 ai-l10n contributors.
#
# ai-l10n is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""AI-powered translation of JSON, JSONC and Flutter ARB localization files.

.. code-block:: python

    from ai_l10n import AiTranslator, TranslationConfig
    from rich_click import secho

    translator = AiTranslator(echo=secho)
    summary = translator.translate(
        TranslationConfig(
            source_file="./locales/en.json", target_languages=["es", "fr"]
        )
    )

When no target languages are given they are detected from the project
structure, see :mod:`ai_l10n.project_utilities`.
"""

from .api_key import ApiKeyManager
from .config import URLS, TranslationConfig, load_batch_configs
from .service import (
    FileSchema,
    FinishReason,
    L10nTranslationService,
    TranslationRequest,
    TranslationResult,
    TranslationServiceError,
)
from .translator import AiTranslator, TranslationOutput, TranslationSummary

__version__ = "1.0.0"

__all__ = (
    "__version__",
    "AiTranslator",
    "ApiKeyManager",
    "FileSchema",
    "FinishReason",
    "L10nTranslationService",
    "TranslationConfig",
    "TranslationOutput",
    "TranslationRequest",
    "TranslationResult",
    "TranslationServiceError",
    "TranslationSummary",
    "URLS",
    "load_batch_configs",
)
