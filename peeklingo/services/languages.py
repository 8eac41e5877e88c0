# peeklingo/services/languages.py
"""
Supported language catalog.

Language ids follow the Youdao API (`from`/`to` parameters and the "l" field).
Voice ids are macOS `say` voices for the language, first entry preferred.
"""

from peeklingo.models.types import EMPTY_LANGUAGE, LanguageEntry, split_language_pair


LANGUAGE_LIST: tuple[LanguageEntry, ...] = (
    LanguageEntry("zh", "Chinese", ("Ting-Ting",)),
    LanguageEntry("zh-CHS", "Chinese-Simplified", ("Ting-Ting",)),
    LanguageEntry("zh-CHT", "Chinese-Traditional", ("Mei-Jia", "Sin-ji")),
    LanguageEntry("en", "English", ("Samantha", "Alex", "Daniel")),
    LanguageEntry("ja", "Japanese", ("Kyoko",)),
    LanguageEntry("ko", "Korean", ("Yuna",)),
    LanguageEntry("fr", "French", ("Thomas", "Amelie")),
    LanguageEntry("es", "Spanish", ("Monica", "Jorge")),
    LanguageEntry("pt", "Portuguese", ("Joana", "Luciana")),
    LanguageEntry("it", "Italian", ("Alice", "Luca")),
    LanguageEntry("ru", "Russian", ("Milena", "Yuri")),
    LanguageEntry("de", "German", ("Anna",)),
    LanguageEntry("ar", "Arabic", ("Maged",)),
    LanguageEntry("nl", "Dutch", ("Xander", "Ellen")),
    LanguageEntry("sv", "Swedish", ("Alva",)),
    LanguageEntry("id", "Indonesian", ("Damayanti",)),
    LanguageEntry("th", "Thai", ("Kanya",)),
    LanguageEntry("vi", "Vietnamese", ("Linh",)),
    LanguageEntry("hi", "Hindi", ("Lekha",)),
    LanguageEntry("tr", "Turkish", ("Yelda",)),
)

# Index built once at import
LANGUAGE_BY_ID: dict[str, LanguageEntry] = {lang.language_id: lang for lang in LANGUAGE_LIST}


def get_language(language_id: str) -> LanguageEntry:
    """Look up a language by id. Unknown ids return EMPTY_LANGUAGE."""
    return LANGUAGE_BY_ID.get(language_id, EMPTY_LANGUAGE)


def describe_language_pair(language_pair: str) -> str:
    """Human readable label for an API language pair, e.g. "en2zh" -> "English to Chinese"."""
    from_id, to_id = split_language_pair(language_pair)
    return f"{get_language(from_id).title} to {get_language(to_id).title}"
