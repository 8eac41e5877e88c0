# tests/test_reformatter.py
"""Tests for peeklingo.services.reformatter"""

from peeklingo.models.types import SectionKind
from peeklingo.services.reformatter import (
    ACCESSORY_PINYIN,
    ACCESSORY_UK,
    ACCESSORY_US,
    deduplicate_explains,
    format_phonetic,
    reformat_translate_result,
)
from peeklingo.services.youdao_client import parse_translation_response


def _reformat(payload: dict):
    return reformat_translate_result(parse_translation_response(payload))


def _kinds(sections):
    return [s.kind for s in sections]


class TestHelloScenario:
    """input "hello", en/zh preferences, plain en2zh response"""

    def test_sections(self, hello_payload):
        sections = _reformat(hello_payload)
        assert _kinds(sections) == [SectionKind.TRANSLATE, SectionKind.DETAIL, SectionKind.WEB_TRANSLATE]

    def test_translate_section(self, hello_payload):
        translate = _reformat(hello_payload)[0]
        assert translate.hint == "Translation"
        assert translate.language_label == "English to Chinese"
        assert [i.title for i in translate.items] == ["你好"]
        assert translate.items[0].subtitle == ""

    def test_detail_and_web(self, hello_payload):
        _, detail, web = _reformat(hello_payload)
        assert detail.hint == "Detailed Definitions"
        assert [i.title for i in detail.items] == ["问候语"]
        assert web.hint == "Web Translation"
        assert web.items == []


class TestDeduplication:

    def test_first_explain_matching_translation_is_dropped(self):
        sections = _reformat({
            "errorCode": "0", "l": "en2zh", "translation": ["a"], "basic": {"explains": ["a", "b"]},
        })
        detail = next(s for s in sections if s.kind == SectionKind.DETAIL)
        assert [i.title for i in detail.items] == ["b"]

    def test_only_first_pair_is_compared(self):
        assert deduplicate_explains(["a", "b"], ["b", "a"]) == ["b", "a"]

    def test_input_is_not_mutated(self, full_payload):
        resp = parse_translation_response(full_payload)
        reformat_translate_result(resp)
        reformat_translate_result(resp)
        assert resp.basic.explains[0] == "好"

    def test_empty_inputs(self):
        assert deduplicate_explains([], ["a"]) == ["a"]
        assert deduplicate_explains(["a"], []) == []


class TestPhoneticSections:

    def test_dual_phonetic(self, full_payload):
        full_payload["basic"]["uk-phonetic"] = "gʊd-uk"
        full_payload["basic"]["us-phonetic"] = "gʊd-us"
        sections = _reformat(full_payload)
        phonetic = [s for s in sections if s.kind == SectionKind.PHONETIC]
        assert len(phonetic) == 2

        uk, us = phonetic
        assert uk.hint == "Phonetic"
        assert uk.title == "Phonetic"
        assert [(i.title, i.accessory_label) for i in uk.items] == [("gʊd-uk", ACCESSORY_UK)]
        # Continuation group carries no header
        assert us.hint == ""
        assert us.title == ""
        assert [(i.title, i.accessory_label) for i in us.items] == [("gʊd-us", ACCESSORY_US)]

    def test_generic_phonetic_only(self):
        sections = _reformat({
            "errorCode": "0", "l": "zh-CHS2en", "translation": ["good", "fine"],
            "basic": {"phonetic": "hǎo", "explains": []},
        })
        phonetic = [s for s in sections if s.kind == SectionKind.PHONETIC]
        assert len(phonetic) == 1
        assert [i.accessory_label for i in phonetic[0].items] == [ACCESSORY_PINYIN, ACCESSORY_PINYIN]
        assert [i.title for i in phonetic[0].items] == ["hǎo", "hǎo"]
        assert sections[0].items[0].subtitle == "[hǎo]"

    def test_single_regional_phonetic_is_ignored(self):
        sections = _reformat({
            "errorCode": "0", "l": "en2zh", "translation": ["x"], "basic": {"us-phonetic": "x"},
        })
        assert SectionKind.PHONETIC not in _kinds(sections)

    def test_format_phonetic(self):
        assert format_phonetic("ab") == "[ab]"
        assert format_phonetic(None) == ""
        assert format_phonetic("") == ""


class TestWebSection:

    def test_values_joined_with_fullwidth_semicolon(self, full_payload):
        web = _reformat(full_payload)[-1]
        assert web.kind == SectionKind.WEB_TRANSLATE
        assert [i.title for i in web.items] == ["Good", "Good Friday"]
        assert web.items[0].subtitle == "好；善；商品"
        assert web.items[0].copy_text == "好；善；商品"

    def test_entry_without_values(self):
        web = _reformat({"errorCode": "0", "l": "en2zh", "web": [{"key": "k", "value": []}]})[-1]
        assert web.items[0].subtitle == ""
        assert web.items[0].copy_text == "k"


class TestSectionShape:

    def test_always_translate_detail_and_one_web(self):
        sections = _reformat({"errorCode": "0", "l": "en2zh"})
        assert _kinds(sections) == [SectionKind.TRANSLATE, SectionKind.DETAIL, SectionKind.WEB_TRANSLATE]
        assert all(s.items == [] for s in sections)

    def test_full_order(self, full_payload):
        assert _kinds(_reformat(full_payload)) == [
            SectionKind.TRANSLATE,
            SectionKind.PHONETIC,
            SectionKind.PHONETIC,
            SectionKind.DETAIL,
            SectionKind.WEB_TRANSLATE,
        ]

    def test_item_keys_unique_within_sections(self):
        sections = _reformat({
            "errorCode": "0", "l": "en2zh", "translation": ["x", "x"],
            "basic": {"phonetic": "p", "explains": ["y", "y"]},
            "web": [{"key": "k", "value": ["v"]}, {"key": "k", "value": ["w"]}],
        })
        for section in sections:
            keys = [i.key for i in section.items]
            assert len(keys) == len(set(keys))

    def test_item_keys_unique_when_text_ends_with_digits(self):
        # "a1" at index 1 and "a" at index 11 must not share a key
        web_keys = ["x", "a1"] + [f"y{n}" for n in range(9)] + ["a"]
        texts = ["x", "a1"] + [f"t{n}" for n in range(9)] + ["a"]
        sections = _reformat({
            "errorCode": "0", "l": "en2zh", "translation": texts,
            "basic": {"phonetic": "p", "explains": ["e"] + texts[1:]},
            "web": [{"key": k, "value": ["v"]} for k in web_keys],
        })
        web = sections[-1]
        assert len(web.items) == 12
        for section in sections:
            keys = [i.key for i in section.items]
            assert len(keys) == len(set(keys)), section.kind
