# peeklingo/models/__init__.py
"""
Data models for PeekLingo.
"""

from .types import (
    ERROR_CODE_SUCCESS,
    ERROR_CODE_WARNING,
    ERROR_CODE_NOT_QUERIED,
    EMPTY_LANGUAGE,
    LanguageEntry,
    CopyMode,
    TranslationQuery,
    BasicDictionary,
    WebTranslation,
    TranslationResponse,
    SignedRequest,
    SectionKind,
    DisplayItem,
    DisplaySection,
    split_language_pair,
)

__all__ = [
    'ERROR_CODE_SUCCESS',
    'ERROR_CODE_WARNING',
    'ERROR_CODE_NOT_QUERIED',
    'EMPTY_LANGUAGE',
    'LanguageEntry',
    'CopyMode',
    'TranslationQuery',
    'BasicDictionary',
    'WebTranslation',
    'TranslationResponse',
    'SignedRequest',
    'SectionKind',
    'DisplayItem',
    'DisplaySection',
    'split_language_pair',
]
