# peeklingo/services/__init__.py
"""
Service layer for PeekLingo.

The HTTP client is lazy-loaded.
Use explicit imports like:
    from peeklingo.services.youdao_client import YoudaoClient
"""

# Fast imports - pure helpers
from .exceptions import (
    PeekLingoError,
    TranslationRequestError,
    ResponseParseError,
    LanguageConflictError,
)
from .languages import LANGUAGE_LIST, get_language, describe_language_pair
from .copy_mode import parse_query, apply_copy_mode

# Lazy-loaded services via __getattr__
_LAZY_IMPORTS = {
    'YoudaoClient': 'youdao_client',
    'build_signed_request': 'youdao_client',
    'parse_translation_response': 'youdao_client',
    'reformat_translate_result': 'reformatter',
}

# Submodules that can be accessed via __getattr__ (for patching support)
_SUBMODULES = {'youdao_client', 'reformatter', 'languages', 'copy_mode', 'exceptions'}


def __getattr__(name: str):
    """Lazy-load service modules on first access."""
    import importlib
    # Support accessing submodules directly (for unittest.mock.patch)
    if name in _SUBMODULES:
        return importlib.import_module(f'.{name}', __package__)
    if name in _LAZY_IMPORTS:
        module_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(f'.{module_name}', __package__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'PeekLingoError',
    'TranslationRequestError',
    'ResponseParseError',
    'LanguageConflictError',
    'LANGUAGE_LIST',
    'get_language',
    'describe_language_pair',
    'parse_query',
    'apply_copy_mode',
    'YoudaoClient',
    'build_signed_request',
    'parse_translation_response',
    'reformat_translate_result',
]
