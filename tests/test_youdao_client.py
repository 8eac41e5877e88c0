# tests/test_youdao_client.py
"""Tests for peeklingo.services.youdao_client"""

import hashlib
import io
import json
import urllib.error
import urllib.parse
from unittest.mock import MagicMock, Mock, patch

import pytest

from peeklingo.config.settings import AppSettings
from peeklingo.services.exceptions import ResponseParseError, TranslationRequestError
from peeklingo.services.youdao_client import (
    YoudaoClient,
    build_signed_request,
    generate_sign,
    parse_translation_response,
)


def _settings(**overrides) -> AppSettings:
    values = dict(app_id="my-app-id", app_key="my-secret", api_url="https://example.invalid/api")
    values.update(overrides)
    return AppSettings(**values)


def _opener_returning(body: bytes) -> MagicMock:
    response = MagicMock()
    response.read.return_value = body
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    opener = MagicMock()
    opener.open.return_value = response
    return opener


class TestGenerateSign:

    def test_sign_is_uppercase_md5_of_concatenation(self):
        expected = hashlib.md5("idhello123secret".encode("utf-8")).hexdigest().upper()
        assert generate_sign("hello", "123", "id", "secret") == expected

    def test_sign_shape(self):
        sign = generate_sign("你好", 1700000000000, "id", "secret")
        assert len(sign) == 32
        assert sign == sign.upper()
        int(sign, 16)

    def test_sign_is_deterministic(self):
        assert generate_sign("q", "1", "a", "b") == generate_sign("q", "1", "a", "b")
        assert generate_sign("q", "1", "a", "b") != generate_sign("q", "2", "a", "b")


class TestBuildSignedRequest:

    def test_fixed_salt_is_deterministic(self):
        first = build_signed_request("hello", "zh", "app", "secret", salt=42)
        second = build_signed_request("hello", "zh", "app", "secret", salt=42)
        assert first == second
        assert first.salt == "42"

    def test_params_layout(self):
        signed = build_signed_request("hello", "zh", "app", "secret", salt="1")
        assert signed.params == {
            "q": "hello",
            "appKey": "app",
            "from": "auto",
            "to": "zh",
            "salt": "1",
            "sign": signed.sign,
        }

    def test_app_id_in_first_slot_secret_in_last(self):
        signed = build_signed_request("hello", "zh", "app", "secret", salt="1")
        assert signed.sign == generate_sign("hello", "1", "app", "secret")

    def test_default_salt_is_epoch_millis(self):
        with patch("peeklingo.services.youdao_client.time.time", return_value=1700000000.5):
            signed = build_signed_request("hello", "zh", "app", "secret")
        assert signed.salt == "1700000000500"


class TestParseTranslationResponse:

    def test_full_payload(self, full_payload):
        resp = parse_translation_response(full_payload)
        assert resp.error_code == "0"
        assert resp.language_pair == "en2zh-CHS"
        assert resp.language_ids == ("en", "zh-CHS")
        assert resp.translation == ["好"]
        assert resp.basic.us_phonetic == "ɡʊd"
        assert resp.basic.has_dual_phonetic
        assert [w.key for w in resp.web] == ["Good", "Good Friday"]
        assert resp.raw is full_payload

    def test_missing_optional_blocks(self):
        resp = parse_translation_response({"errorCode": "0", "l": "en2zh", "translation": ["x"]})
        assert resp.basic is None
        assert resp.web == []

    def test_error_payload_without_language_pair(self):
        resp = parse_translation_response({"errorCode": "108"})
        assert resp.error_code == "108"
        assert resp.language_pair == ""
        assert resp.translation == []
        assert not resp.is_success

    def test_numeric_error_code_is_normalized(self):
        assert parse_translation_response({"errorCode": 0}).error_code == "0"

    def test_missing_error_code_raises(self):
        with pytest.raises(ResponseParseError):
            parse_translation_response({"translation": ["x"]})

    def test_non_object_raises(self):
        with pytest.raises(ResponseParseError):
            parse_translation_response(["x"])

    def test_malformed_web_entries_are_skipped(self):
        resp = parse_translation_response({
            "errorCode": "0",
            "web": [{"value": ["no key"]}, "junk", {"key": "ok"}],
        })
        assert len(resp.web) == 1
        assert resp.web[0].key == "ok"
        assert resp.web[0].values == []


class TestYoudaoClient:

    def test_translate_posts_signed_form(self, hello_payload):
        opener = _opener_returning(json.dumps(hello_payload).encode("utf-8"))
        client = YoudaoClient(_settings(request_timeout=7), opener=opener)

        resp = client.translate("hello", "zh")

        assert resp.translation == ["你好"]
        req = opener.open.call_args.args[0]
        assert opener.open.call_args.kwargs["timeout"] == 7
        assert req.get_method() == "POST"
        assert req.full_url == "https://example.invalid/api"
        form = urllib.parse.parse_qs(req.data.decode("utf-8"))
        assert form["q"] == ["hello"]
        assert form["appKey"] == ["my-app-id"]
        assert form["from"] == ["auto"]
        assert form["to"] == ["zh"]
        assert form["sign"] == [generate_sign("hello", form["salt"][0], "my-app-id", "my-secret")]

    def test_query_is_sent_as_utf8(self, hello_payload):
        opener = _opener_returning(json.dumps(hello_payload).encode("utf-8"))
        YoudaoClient(_settings(), opener=opener).translate("你好 世界", "en")
        req = opener.open.call_args.args[0]
        form = urllib.parse.parse_qs(req.data.decode("utf-8"))
        assert form["q"] == ["你好 世界"]

    def test_http_error_raises_request_error(self):
        opener = Mock()
        opener.open.side_effect = urllib.error.HTTPError(
            "https://example.invalid/api", 502, "Bad Gateway", {}, io.BytesIO(b"")
        )
        with pytest.raises(TranslationRequestError) as exc_info:
            YoudaoClient(_settings(), opener=opener).translate("hello", "zh")
        assert exc_info.value.status_code == 502

    def test_network_error_raises_request_error(self):
        opener = Mock()
        opener.open.side_effect = urllib.error.URLError("no route")
        with pytest.raises(TranslationRequestError):
            YoudaoClient(_settings(), opener=opener).translate("hello", "zh")

    def test_invalid_json_raises_request_error(self):
        opener = _opener_returning(b"<html>oops</html>")
        with pytest.raises(TranslationRequestError):
            YoudaoClient(_settings(), opener=opener).translate("hello", "zh")
