"""
Tencent Cloud api catalogue

Pre-built api descriptors:
- Machine Translation (tmt)
"""

from typing import Any, Optional, Tuple

from ..api import Api
from .tmt import (
    LANGUAGE_DETECT,
    TEXT_TRANSLATE,
    LanguageDetectRequest,
    LanguageDetectResponse,
    TextTranslateRequest,
    TextTranslateResponse,
)

ALL_APIS: Tuple[Api[Any, Any], ...] = (
    TEXT_TRANSLATE,
    LANGUAGE_DETECT,
)


def find_api(service: str, action: str) -> Optional[Api[Any, Any]]:
    """Look up a pre-built api by service and action name."""
    for api in ALL_APIS:
        if api.service == service and api.action == action:
            return api
    return None


__all__ = [
    "ALL_APIS",
    "find_api",
    "TEXT_TRANSLATE",
    "TextTranslateRequest",
    "TextTranslateResponse",
    "LANGUAGE_DETECT",
    "LanguageDetectRequest",
    "LanguageDetectResponse",
]
