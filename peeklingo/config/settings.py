# peeklingo/config/settings.py
"""
Preferences for PeekLingo.

Two files live in the config folder:
- settings.template.json: shipped defaults (replaced on upgrade)
- user_settings.json: only the keys in USER_SETTINGS_KEYS, written by save()

load() merges them (user values win) and keeps the result per path until
either file's mtime changes.
"""

import json
import logging
import threading
from dataclasses import dataclass, fields
from pathlib import Path
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

TEMPLATE_FILE_NAME = "settings.template.json"
USER_SETTINGS_FILE_NAME = "user_settings.json"

# Keys the user may change (persisted to user_settings.json)
USER_SETTINGS_KEYS = {
    # Preferred language pair
    "lang1",
    "lang2",
    # API credentials
    "app_id",
    "app_key",
    # Search the current selection when the window opens
    "is_selection_paste",
}

DEFAULT_API_URL = "https://openapi.youdao.com/api"
DEFAULT_HELP_URL = "https://ai.youdao.com/DOCSIRMA/html/trans/api/wbfy/index.html"

MIN_REQUEST_TIMEOUT = 1
MAX_REQUEST_TIMEOUT = 120


class _SettingsFiles(NamedTuple):
    """Template/user file pair next to a settings path, with their mtimes"""
    template: Path
    user: Path
    template_mtime: float
    user_mtime: float

    @classmethod
    def locate(cls, path: Path) -> "_SettingsFiles":
        template = path.parent / TEMPLATE_FILE_NAME
        user = path.parent / USER_SETTINGS_FILE_NAME
        return cls(template, user, _mtime(template), _mtime(user))

    @property
    def stamp(self) -> tuple[float, float]:
        return (self.template_mtime, self.user_mtime)


# Cache: resolved path -> (file stamp, AppSettings)
_cache: dict[str, tuple[tuple[float, float], "AppSettings"]] = {}
_cache_lock = threading.Lock()


def _mtime(path: Path) -> float:
    return path.stat().st_mtime if path.exists() else 0.0


def _cache_key(path: Path) -> str:
    return str(path.resolve())


def _read_json(path: Path, label: str) -> dict:
    """Read a JSON object; a missing or broken file yields {}."""
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Failed to load %s settings: %s", label, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s settings: expected an object, got %s", label, type(data).__name__)
        return {}
    logger.debug("Loaded %s settings from: %s", label, path)
    return data


_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


def _coerce_bool(name: str, value: object, default: bool) -> bool:
    """Accept real booleans, 0/1 and "true"/"false"-like strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    logger.warning("%s is not a boolean (%r), resetting to %s", name, value, default)
    return default


def _coerce_int(name: str, value: object, default: int) -> int:
    """Accept ints, integral floats and numeric strings."""
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        return value
    elif isinstance(value, float) and value.is_integer():
        return int(value)
    elif isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    logger.warning("%s is not an integer (%r), resetting to %d", name, value, default)
    return default


@dataclass
class AppSettings:
    """Lookup preferences"""

    # Preferred languages: lang1 is the primary ("home") language
    lang1: str = "en"
    lang2: str = "zh-CHS"

    # Youdao application id / application key (secret)
    app_id: str = ""
    app_key: str = ""

    # Auto-search the selected text on startup
    is_selection_paste: bool = False

    # Endpoint
    api_url: str = DEFAULT_API_URL
    help_url: str = DEFAULT_HELP_URL
    request_timeout: int = 10           # Seconds

    # Timers
    debounce_delay_ms: int = 400        # Input debounce before sending a query
    pivot_delay_ms: int = 900           # Wait before switching the target language automatically

    @classmethod
    def load(cls, path: Path, use_cache: bool = True) -> "AppSettings":
        """Merge the template and user settings found next to `path`.

        Args:
            path: config/settings.json; only its folder is used to find the two files
            use_cache: return the cached instance while neither file has changed
        """
        files = _SettingsFiles.locate(path)
        key = _cache_key(path)

        if use_cache:
            with _cache_lock:
                cached = _cache.get(key)
            if cached is not None and cached[0] == files.stamp:
                logger.debug("Using cached settings for: %s", path)
                return cached[1]

        data = _read_json(files.template, "template")
        user_data = _read_json(files.user, "user")
        data.update({k: v for k, v in user_data.items() if k in USER_SETTINGS_KEYS})

        known = {f.name for f in fields(cls)}
        settings = cls(**{k: v for k, v in data.items() if k in known})
        settings._validate()

        with _cache_lock:
            _cache[key] = (files.stamp, settings)
        return settings

    def _validate(self) -> None:
        """Normalize values; wrong types and out-of-range numbers fall back to defaults with a warning.

        lang1 == lang2 is left as is: the UI reports the conflict.
        """
        self.lang1 = str(self.lang1 or "").strip()
        self.lang2 = str(self.lang2 or "").strip()
        self.app_id = str(self.app_id or "").strip()
        self.app_key = str(self.app_key or "").strip()
        self.is_selection_paste = _coerce_bool("is_selection_paste", self.is_selection_paste, False)
        self.request_timeout = _coerce_int("request_timeout", self.request_timeout, 10)
        self.debounce_delay_ms = _coerce_int("debounce_delay_ms", self.debounce_delay_ms, 400)
        self.pivot_delay_ms = _coerce_int("pivot_delay_ms", self.pivot_delay_ms, 900)

        if not MIN_REQUEST_TIMEOUT <= self.request_timeout <= MAX_REQUEST_TIMEOUT:
            logger.warning("request_timeout out of range (%d), resetting to 10", self.request_timeout)
            self.request_timeout = 10

        if self.debounce_delay_ms < 0:
            logger.warning("debounce_delay_ms negative (%d), resetting to 400", self.debounce_delay_ms)
            self.debounce_delay_ms = 400

        if self.pivot_delay_ms < 0:
            logger.warning("pivot_delay_ms negative (%d), resetting to 900", self.pivot_delay_ms)
            self.pivot_delay_ms = 900

        if not self.app_id or not self.app_key:
            logger.warning("Youdao credentials are not configured (app_id/app_key)")

    def has_language_conflict(self) -> bool:
        """True when both preferred languages are the same."""
        return self.lang1 == self.lang2

    @property
    def debounce_delay(self) -> float:
        return self.debounce_delay_ms / 1000

    @property
    def pivot_delay(self) -> float:
        return self.pivot_delay_ms / 1000

    def save(self, path: Path) -> None:
        """Write the user-editable keys to user_settings.json (the template is never touched)."""
        path.parent.mkdir(parents=True, exist_ok=True)
        user_path = path.parent / USER_SETTINGS_FILE_NAME

        data = {key: getattr(self, key) for key in sorted(USER_SETTINGS_KEYS)}
        with open(user_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.debug("Saved user settings to: %s", user_path)

        files = _SettingsFiles.locate(path)
        with _cache_lock:
            _cache[_cache_key(path)] = (files.stamp, self)


def get_default_settings_path() -> Path:
    """config/settings.json at the project root"""
    return Path(__file__).resolve().parents[2] / "config" / "settings.json"


def invalidate_settings_cache(path: Optional[Path] = None) -> None:
    """Drop the cached settings for `path`, or every entry when `path` is None."""
    with _cache_lock:
        if path is None:
            _cache.clear()
            logger.debug("Cleared all settings cache")
        elif _cache.pop(_cache_key(path), None) is not None:
            logger.debug("Cleared settings cache for: %s", path)
