# peeklingo/__init__.py
"""
PeekLingo - Quick dictionary lookup backed by the Youdao translation API.

Type (or select) a word, get the translation, phonetics, dictionary
definitions and web translations in one list.
"""

from pathlib import Path


def _get_version() -> str:
    """Read the version from pyproject.toml; "0.1.0" when it is unavailable (installed wheel)."""
    import tomllib

    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return "0.1.0"
    return data.get("project", {}).get("version", "0.1.0")


__version__ = _get_version()
__app_name__ = "PeekLingo"
