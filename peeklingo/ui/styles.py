# peeklingo/ui/styles.py
"""
Page styles for PeekLingo: result list, section headers and the compact search box.
"""

from pathlib import Path

_CSS_FILE = Path(__file__).parent / "styles.css"

VIEWPORT_META = '<meta name="viewport" content="width=device-width, initial-scale=1.0">'


def _load_css() -> str:
    if not _CSS_FILE.exists():
        return ""
    return _CSS_FILE.read_text(encoding="utf-8")


COMPLETE_CSS = _load_css()


def page_head_html() -> list[str]:
    """Head snippets added once per page (viewport + stylesheet)."""
    return [VIEWPORT_META, f"<style>{COMPLETE_CSS}</style>"]
