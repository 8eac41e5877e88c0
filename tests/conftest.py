from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure the project root is importable when running `pytest` via its entrypoint,
# where `sys.path[0]` may not be the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    from peeklingo.config.settings import invalidate_settings_cache

    invalidate_settings_cache()
    yield
    invalidate_settings_cache()


@pytest.fixture
def hello_payload() -> dict:
    """Response for "hello" translated en -> zh"""
    return {
        "errorCode": "0",
        "l": "en2zh",
        "query": "hello",
        "translation": ["你好"],
        "basic": {"explains": ["问候语"]},
    }


@pytest.fixture
def full_payload() -> dict:
    """Response with every optional block present"""
    return {
        "errorCode": "0",
        "l": "en2zh-CHS",
        "query": "good",
        "translation": ["好"],
        "basic": {
            "phonetic": "ɡʊd",
            "us-phonetic": "ɡʊd",
            "uk-phonetic": "ɡʊd",
            "explains": ["好", "adj. 好的；优秀的", "n. 好处"],
        },
        "web": [
            {"key": "Good", "value": ["好", "善", "商品"]},
            {"key": "Good Friday", "value": ["耶稣受难节"]},
        ],
    }
