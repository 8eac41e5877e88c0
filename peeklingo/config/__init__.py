# peeklingo/config/__init__.py
"""
Configuration for PeekLingo.
"""

from .settings import AppSettings, get_default_settings_path, invalidate_settings_cache

__all__ = [
    'AppSettings',
    'get_default_settings_path',
    'invalidate_settings_cache',
]
