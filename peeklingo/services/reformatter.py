# peeklingo/services/reformatter.py
"""
Reshape a translation response into display sections.

Section order is fixed:
1. Translate (always)
2. Phonetic (0, 1 or 2 sections)
3. Detail (always)
4. Web Translate (always)

Sections with no data are still returned with an empty item list.
"""

import json
import logging

from peeklingo.models.types import (
    DisplayItem,
    DisplaySection,
    SectionKind,
    TranslationResponse,
)
from peeklingo.services.copy_mode import WEB_VALUE_SEPARATOR
from peeklingo.services.languages import describe_language_pair

logger = logging.getLogger(__name__)

HINT_TRANSLATE = "Translation"
HINT_PHONETIC = "Phonetic"
HINT_DETAIL = "Detailed Definitions"
HINT_WEB_TRANSLATE = "Web Translation"

ACCESSORY_UK = "UK"
ACCESSORY_US = "US"
ACCESSORY_PINYIN = "Mandarin [Pinyin]"

ICON_TRANSLATE, COLOR_TRANSLATE = "text_fields", "purple"
ICON_PHONETIC, COLOR_PHONETIC = "record_voice_over", "blue"
ICON_DETAIL, COLOR_DETAIL = "description", "red"
ICON_WEB, COLOR_WEB = "public", "orange"


def _item_key(idx: int, text: str) -> str:
    # Index first: "1:a1" and "11:a" cannot collide
    return f"{idx}:{text}"


def format_phonetic(phonetic: str | None) -> str:
    return f"[{phonetic}]" if phonetic else ""


def deduplicate_explains(translation: list[str], explains: list[str]) -> list[str]:
    """Drop explains[0] when it repeats translation[0].

    The API only repeats the first translation line as the first
    explanation, so only that pair is compared.
    """
    if explains and translation and explains[0] == translation[0]:
        return explains[1:]
    return list(explains)


def _phonetic_items(translation: list[str], phonetic: str, accessory_label: str) -> list[DisplayItem]:
    # One row per translation line, each repeating the same phonetic
    return [
        DisplayItem(
            title=phonetic,
            key=_item_key(idx, text),
            accessory_label=accessory_label,
            icon=ICON_PHONETIC,
            color=COLOR_PHONETIC,
        )
        for idx, text in enumerate(translation)
    ]


def _build_phonetic_sections(resp: TranslationResponse) -> list[DisplaySection]:
    basic = resp.basic
    if basic is None:
        return []

    if basic.has_dual_phonetic:
        return [
            DisplaySection(
                kind=SectionKind.PHONETIC,
                hint=HINT_PHONETIC,
                items=_phonetic_items(resp.translation, basic.uk_phonetic, ACCESSORY_UK),
            ),
            # Continuation group: rendered under the previous header
            DisplaySection(
                kind=SectionKind.PHONETIC,
                show_type=False,
                items=_phonetic_items(resp.translation, basic.us_phonetic, ACCESSORY_US),
            ),
        ]

    if basic.phonetic:
        return [
            DisplaySection(
                kind=SectionKind.PHONETIC,
                hint=HINT_PHONETIC,
                items=_phonetic_items(resp.translation, basic.phonetic, ACCESSORY_PINYIN),
            )
        ]

    return []


def reformat_translate_result(resp: TranslationResponse) -> list[DisplaySection]:
    """Convert a translation response into ordered display sections."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Reformatting response: %s", json.dumps(resp.raw, ensure_ascii=False))

    basic = resp.basic
    phonetic = format_phonetic(basic.phonetic if basic else None)

    sections: list[DisplaySection] = [
        DisplaySection(
            kind=SectionKind.TRANSLATE,
            hint=HINT_TRANSLATE,
            language_label=describe_language_pair(resp.language_pair),
            items=[
                DisplayItem(
                    title=text,
                    key=_item_key(idx, text),
                    subtitle=phonetic,
                    icon=ICON_TRANSLATE,
                    color=COLOR_TRANSLATE,
                )
                for idx, text in enumerate(resp.translation)
            ],
        )
    ]

    explains = deduplicate_explains(resp.translation, basic.explains if basic else [])

    sections.extend(_build_phonetic_sections(resp))

    sections.append(
        DisplaySection(
            kind=SectionKind.DETAIL,
            hint=HINT_DETAIL,
            items=[
                DisplayItem(title=text, key=_item_key(idx, text), icon=ICON_DETAIL, color=COLOR_DETAIL)
                for idx, text in enumerate(explains)
            ],
        )
    )

    web_items = []
    for idx, entry in enumerate(resp.web):
        joined = WEB_VALUE_SEPARATOR.join(entry.values)
        web_items.append(
            DisplayItem(
                title=entry.key,
                key=_item_key(idx, entry.key),
                subtitle=joined,
                icon=ICON_WEB,
                color=COLOR_WEB,
                copy_text=joined,
            )
        )
    sections.append(
        DisplaySection(kind=SectionKind.WEB_TRANSLATE, hint=HINT_WEB_TRANSLATE, items=web_items)
    )

    return sections
