# peeklingo/models/types.py
"""
Core data types for PeekLingo lookup application.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# Youdao errorCode values handled by the UI
ERROR_CODE_SUCCESS = "0"
ERROR_CODE_WARNING = "207"      # Success with warning: render and notify
ERROR_CODE_NOT_QUERIED = "-1"   # Local sentinel, never sent by the server

SUCCESS_ERROR_CODES = frozenset({ERROR_CODE_SUCCESS, ERROR_CODE_WARNING})

# Separator used by the API in the "l" field (e.g. "en2zh-CHS")
LANGUAGE_PAIR_SEPARATOR = "2"


def split_language_pair(language_pair: str) -> tuple[str, str]:
    """(from, to) language ids of an API pair, e.g. "en2zh" -> ("en", "zh"); missing parts are ""."""
    parts = language_pair.split(LANGUAGE_PAIR_SEPARATOR)
    from_id = parts[0] if parts else ""
    to_id = parts[1] if len(parts) > 1 else ""
    return from_id, to_id


@dataclass(frozen=True)
class LanguageEntry:
    """A supported language (id as used by the API)"""
    language_id: str
    title: str
    voice_ids: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.language_id)


EMPTY_LANGUAGE = LanguageEntry(language_id="", title="", voice_ids=("",))


class CopyMode(Enum):
    """Text-casing transform applied when copying a result"""
    NORMAL = "normal"
    LOWERCASE_CAMEL_CASE = "lowercase_camel_case"   # ">" prefix
    UPPERCASE = "uppercase"                         # ">>" prefix


@dataclass
class TranslationQuery:
    """
    A query derived from the raw search text.
    `text` is the raw text with the copy-mode marker removed.
    """
    raw_text: str
    text: str
    copy_mode: CopyMode = CopyMode.NORMAL

    @property
    def is_empty(self) -> bool:
        return not self.text


@dataclass
class BasicDictionary:
    """The optional "basic" block of a translation response"""
    phonetic: Optional[str] = None
    us_phonetic: Optional[str] = None
    uk_phonetic: Optional[str] = None
    explains: list[str] = field(default_factory=list)

    @property
    def has_dual_phonetic(self) -> bool:
        return bool(self.us_phonetic) and bool(self.uk_phonetic)


@dataclass
class WebTranslation:
    """One entry of the "web" block: a source phrase and its translations"""
    key: str
    values: list[str] = field(default_factory=list)


@dataclass
class TranslationResponse:
    """
    Parsed translation response.
    Optional blocks that are absent in the payload are mapped to
    None (basic) or empty lists (translation, web).
    """
    error_code: str
    language_pair: str = ""
    translation: list[str] = field(default_factory=list)
    basic: Optional[BasicDictionary] = None
    web: list[WebTranslation] = field(default_factory=list)
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @property
    def language_ids(self) -> tuple[str, str]:
        """(from, to) language ids split from the pair, e.g. "en2zh" -> ("en", "zh")"""
        return split_language_pair(self.language_pair)

    @property
    def from_language_id(self) -> str:
        return self.language_ids[0]

    @property
    def to_language_id(self) -> str:
        return self.language_ids[1]

    @property
    def is_success(self) -> bool:
        return self.error_code in SUCCESS_ERROR_CODES

    @property
    def is_warning(self) -> bool:
        return self.error_code == ERROR_CODE_WARNING


@dataclass(frozen=True)
class SignedRequest:
    """Signed form parameters for a single translation call"""
    salt: str
    sign: str
    params: dict


class SectionKind(Enum):
    """Result section types (value is the label shown as section title)"""
    TRANSLATE = "Translate"
    PHONETIC = "Phonetic"
    DETAIL = "Detail"
    WEB_TRANSLATE = "Web Translate"


@dataclass
class DisplayItem:
    """
    A single row in a result section.
    `key` must be unique within its section.
    """
    title: str
    key: str
    subtitle: str = ""
    accessory_label: str = ""
    icon: str = ""          # Material icon name
    color: str = ""         # Quasar color name
    copy_text: str = ""     # Text placed on the clipboard (defaults to title)

    def __post_init__(self):
        if not self.copy_text:
            self.copy_text = self.title


@dataclass
class DisplaySection:
    """
    A titled group of result rows.
    Sections without data are still emitted with an empty `items` list.
    """
    kind: SectionKind
    hint: str = ""
    items: list[DisplayItem] = field(default_factory=list)
    language_label: Optional[str] = None
    show_type: bool = True  # False for a continuation section (second phonetic group)

    @property
    def title(self) -> str:
        return self.kind.value if self.show_type else ""

    @property
    def is_empty(self) -> bool:
        return not self.items
