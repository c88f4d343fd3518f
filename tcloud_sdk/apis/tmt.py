"""
Machine Translation (tmt) apis.

Hand-crafted Pydantic v2 models for the tmt actions used most often.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..api import Api

VERSION = "2018-03-21"
SERVICE = "tmt"
HOST = "tmt.tencentcloudapi.com"


class TextTranslateRequest(BaseModel):
    """Translate a piece of text."""

    source_text: str = Field(..., alias="SourceText", min_length=1)
    source: str = Field(..., alias="Source", description="Source language, or 'auto'")
    target: str = Field(..., alias="Target")
    project_id: int = Field(0, alias="ProjectId")
    untranslated_text: Optional[str] = Field(None, alias="UntranslatedText")

    model_config = {
        "populate_by_name": True,
    }


class TextTranslateResponse(BaseModel):
    """Result of TextTranslate."""

    source: str = Field(..., alias="Source")
    target: str = Field(..., alias="Target")
    target_text: str = Field(..., alias="TargetText")

    model_config = {
        "populate_by_name": True,
    }


class LanguageDetectRequest(BaseModel):
    """Detect the language of a piece of text."""

    text: str = Field(..., alias="Text", min_length=1)
    project_id: int = Field(0, alias="ProjectId")

    model_config = {
        "populate_by_name": True,
    }


class LanguageDetectResponse(BaseModel):
    """Result of LanguageDetect."""

    lang: str = Field(..., alias="Lang")

    model_config = {
        "populate_by_name": True,
    }


TEXT_TRANSLATE: Api[TextTranslateRequest, TextTranslateResponse] = Api(
    request_model=TextTranslateRequest,
    response_model=TextTranslateResponse,
    version=VERSION,
    action="TextTranslate",
    service=SERVICE,
    host=HOST,
)

LANGUAGE_DETECT: Api[LanguageDetectRequest, LanguageDetectResponse] = Api(
    request_model=LanguageDetectRequest,
    response_model=LanguageDetectResponse,
    version=VERSION,
    action="LanguageDetect",
    service=SERVICE,
    host=HOST,
)
