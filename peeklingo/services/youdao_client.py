# peeklingo/services/youdao_client.py
"""
Youdao text translation API client.

API: POST https://openapi.youdao.com/api (application/x-www-form-urlencoded)
Fields: q, appKey, from, to, salt, sign

Signature:
    sign = MD5(app_id + q + salt + app_key).hexdigest()[:32].upper()

The application id travels as `appKey` in the form while the application
key (secret) only appears inside the signature. The vendor names are
confusing but the endpoint expects exactly this layout.
"""

from __future__ import annotations

import hashlib
import json
import logging
import ssl
import time
import urllib.error
import urllib.parse
import urllib.request
from typing import Optional

from peeklingo import __app_name__, __version__
from peeklingo.config.settings import AppSettings
from peeklingo.models.types import (
    BasicDictionary,
    SignedRequest,
    TranslationResponse,
    WebTranslation,
)
from peeklingo.services.exceptions import ResponseParseError, TranslationRequestError

logger = logging.getLogger(__name__)

SOURCE_LANGUAGE_AUTO = "auto"


def generate_sign(content: str, salt: str | int, app_key: str, app_secret: str) -> str:
    """MD5 signature over app_key + content + salt + app_secret (uppercase hex, 32 chars)."""
    digest = hashlib.md5()
    digest.update(f"{app_key}{content}{salt}{app_secret}".encode("utf-8"))
    return digest.hexdigest()[:32].upper()


def build_signed_request(
    query_text: str,
    target_language_id: str,
    app_id: str,
    app_key: str,
    salt: Optional[str | int] = None,
) -> SignedRequest:
    """Build the signed form parameters for one translation call.

    Args:
        query_text: Text to translate (sent as-is, UTF-8)
        target_language_id: `to` language id
        app_id: Application id (public, sent as `appKey`)
        app_key: Application key (secret, only used for signing)
        salt: Fixed salt for reproducible signatures. Defaults to epoch milliseconds.
    """
    if salt is None:
        salt = int(time.time() * 1000)
    salt = str(salt)
    sign = generate_sign(query_text, salt, app_id, app_key)
    params = {
        "q": query_text,
        "appKey": app_id,
        "from": SOURCE_LANGUAGE_AUTO,
        "to": target_language_id,
        "salt": salt,
        "sign": sign,
    }
    return SignedRequest(salt=salt, sign=sign, params=params)


def _string_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _optional_str(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


def _parse_basic(value: object) -> Optional[BasicDictionary]:
    if not isinstance(value, dict):
        return None
    return BasicDictionary(
        phonetic=_optional_str(value.get("phonetic")),
        us_phonetic=_optional_str(value.get("us-phonetic")),
        uk_phonetic=_optional_str(value.get("uk-phonetic")),
        explains=_string_list(value.get("explains")),
    )


def _parse_web(value: object) -> list[WebTranslation]:
    if not isinstance(value, list):
        return []
    entries = []
    for item in value:
        if not isinstance(item, dict):
            continue
        key = item.get("key")
        if key is None:
            continue
        entries.append(WebTranslation(key=str(key), values=_string_list(item.get("value"))))
    return entries


def parse_translation_response(payload: object) -> TranslationResponse:
    """Parse a decoded JSON payload into a TranslationResponse.

    Only `errorCode` is required. Missing optional blocks become empty values.

    Raises:
        ResponseParseError: payload is not an object or has no errorCode
    """
    if not isinstance(payload, dict):
        raise ResponseParseError(f"Unexpected response type: {type(payload).__name__}")
    error_code = payload.get("errorCode")
    if error_code is None:
        raise ResponseParseError("Response has no errorCode")

    return TranslationResponse(
        error_code=str(error_code),
        language_pair=str(payload.get("l") or ""),
        translation=_string_list(payload.get("translation")),
        basic=_parse_basic(payload.get("basic")),
        web=_parse_web(payload.get("web")),
        raw=payload,
    )


class YoudaoClient:
    """Blocking client for the translation endpoint (call from a worker thread)."""

    def __init__(self, settings: AppSettings, opener: Optional[urllib.request.OpenerDirector] = None):
        self._settings = settings
        self.opener = opener or self._build_opener()

    @staticmethod
    def _build_opener() -> urllib.request.OpenerDirector:
        """Opener with certificate verification enabled"""
        ssl_context = ssl.create_default_context()
        return urllib.request.build_opener(urllib.request.HTTPSHandler(context=ssl_context))

    def translate(self, query_text: str, target_language_id: str) -> TranslationResponse:
        """Translate `query_text` into `target_language_id` (source auto-detected).

        Raises:
            TranslationRequestError: network failure, non-2xx status or undecodable body
            ResponseParseError: body is JSON but not a translation payload
        """
        signed = build_signed_request(
            query_text,
            target_language_id,
            self._settings.app_id,
            self._settings.app_key,
        )
        body = urllib.parse.urlencode(signed.params).encode("utf-8")

        req = urllib.request.Request(self._settings.api_url, data=body, method="POST")
        req.add_header("Content-Type", "application/x-www-form-urlencoded")
        req.add_header("User-Agent", f"{__app_name__}/{__version__}")

        logger.debug("Requesting translation to=%s salt=%s chars=%d",
                     target_language_id, signed.salt, len(query_text))
        try:
            with self.opener.open(req, timeout=self._settings.request_timeout) as response:
                data = response.read()
        except urllib.error.HTTPError as e:
            raise TranslationRequestError(f"HTTP {e.code}: {e.reason}", status_code=e.code) from e
        except (urllib.error.URLError, OSError) as e:
            raise TranslationRequestError(f"Translation endpoint unreachable: {e}") from e

        try:
            payload = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise TranslationRequestError(f"Invalid JSON response: {e}") from e

        result = parse_translation_response(payload)
        logger.debug("Translation response errorCode=%s l=%s", result.error_code, result.language_pair)
        return result
