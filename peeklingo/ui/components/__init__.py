# peeklingo/ui/components/__init__.py
"""
UI components for PeekLingo.

Use explicit imports like:
    from peeklingo.ui.components.result_panel import create_result_panel
"""

# Lazy-loaded components via __getattr__
_LAZY_IMPORTS = {
    "create_result_panel": "result_panel",
    "render_language_conflict": "result_panel",
    "ResultView": "result_panel",
}


def __getattr__(name: str):
    """Lazy-load component modules (NiceGUI) on first access."""
    if name in _LAZY_IMPORTS:
        module_name = _LAZY_IMPORTS[name]
        import importlib

        module = importlib.import_module(f".{module_name}", __package__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "create_result_panel",
    "render_language_conflict",
    "ResultView",
]
