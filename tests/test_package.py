# tests/test_package.py
"""Tests for package metadata and source conventions"""

import re
from pathlib import Path

import peeklingo

PACKAGE_DIR = Path(peeklingo.__file__).parent

# Hiragana, Katakana and half-width Katakana
_RE_KANA = re.compile(r"[\u3040-\u30ff\uff66-\uff9f]")


class TestPackageMetadata:

    def test_version_matches_pyproject(self):
        pyproject = (PACKAGE_DIR.parent / "pyproject.toml").read_text(encoding="utf-8")
        assert f'version = "{peeklingo.__version__}"' in pyproject

    def test_app_name(self):
        assert peeklingo.__app_name__ == "PeekLingo"


class TestSourceConventions:

    def test_source_comments_are_english(self):
        offenders = [
            f"{path.relative_to(PACKAGE_DIR)}:{lineno}"
            for path in sorted(PACKAGE_DIR.rglob("*.py"))
            for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), 1)
            if _RE_KANA.search(line)
        ]
        assert offenders == []
