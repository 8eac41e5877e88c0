# peeklingo/ui/app.py
"""
PeekLingo main page: search box + result list.

One PeekLingoApp (and one lookup session) is created per connected client.
"""

import logging
from typing import Optional

from nicegui import Client as nicegui_Client
from nicegui import ui

from peeklingo import __app_name__
from peeklingo.config.settings import AppSettings, get_default_settings_path
from peeklingo.models.types import LanguageEntry
from peeklingo.services.youdao_client import YoudaoClient
from peeklingo.ui.components.result_panel import create_result_panel, render_language_conflict
from peeklingo.ui.controller import LanguageDirectionController, TranslationClient
from peeklingo.ui.state import SessionState

# Module logger
logger = logging.getLogger(__name__)


class PeekLingoApp:
    """Lookup page for one client.

    Sections:
    1. Initialization & Properties
    2. UI Creation
    3. Controller callbacks
    4. Actions (copy, language override, selection search)
    """

    # =========================================================================
    # Section 1: Initialization & Properties
    # =========================================================================

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        client: Optional[TranslationClient] = None,
    ):
        self.settings_path = get_default_settings_path()
        self._settings = settings
        self._translation_client = client
        self.controller: Optional[LanguageDirectionController] = None

        # NiceGUI client saved from the @ui.page handler (context is lost in async tasks)
        self._client: Optional[nicegui_Client] = None

        # UI references for refresh
        self._search_input: Optional[ui.input] = None
        self._status_bar = None
        self._result_panel = None

    @property
    def settings(self) -> AppSettings:
        if self._settings is None:
            self._settings = AppSettings.load(self.settings_path)
        return self._settings

    @property
    def state(self) -> Optional[SessionState]:
        return self.controller.state if self.controller else None

    def attach_client(self, client: nicegui_Client) -> None:
        self._client = client

    # =========================================================================
    # Section 2: UI Creation
    # =========================================================================

    def create_ui(self) -> None:
        """Create the page. A language conflict blocks everything else."""
        from peeklingo.ui.styles import page_head_html

        for snippet in page_head_html():
            ui.add_head_html(snippet)

        settings = self.settings
        if settings.has_language_conflict():
            logger.error("Language conflict: lang1 and lang2 are both %r", settings.lang1)
            with ui.element('div').classes('app-container'):
                render_language_conflict()
            return

        self.controller = LanguageDirectionController(
            settings,
            self._translation_client or YoudaoClient(settings),
            on_change=self._on_state_change,
            on_notice=self._show_notice,
        )

        with ui.element('div').classes('app-container'):
            self._search_input = ui.input(
                placeholder='Type text',
                on_change=lambda e: self.controller.on_search_text_change(e.value),
            ).props('autofocus clearable outlined dense').classes('search-input')

            @ui.refreshable
            def status_bar():
                state = self.controller.state
                with ui.row().classes('items-center gap-2 w-full'):
                    target = state.active_target_language
                    chip = ui.chip(
                        f'to {target.title}',
                        icon='push_pin' if state.is_user_pinned_target_language else 'translate',
                    ).props('outline dense').classes('target-language-chip')
                    chip.tooltip('Target language')
                    if state.last_detected_source_language:
                        ui.label(f'detected: {state.last_detected_source_language.title or "?"}') \
                            .classes('text-xs text-muted')
                    if state.is_loading:
                        ui.spinner(size='sm')

            @ui.refreshable
            def result_panel():
                create_result_panel(
                    self.controller.state,
                    self.settings.help_url,
                    on_copy=self._copy_text,
                    on_select_language=self._select_target_language,
                )

            self._status_bar = status_bar
            self._result_panel = result_panel
            status_bar()
            result_panel()

    # =========================================================================
    # Section 3: Controller callbacks
    # =========================================================================

    def _on_state_change(self, _state: SessionState) -> None:
        if self._client is None:
            self._refresh()
            return
        with self._client:
            self._refresh()

    def _refresh(self) -> None:
        if self._status_bar:
            self._status_bar.refresh()
        if self._result_panel:
            self._result_panel.refresh()

    def _show_notice(self, notify_type: str, title: str, message: str) -> None:
        if self._client is None:
            ui.notify(title, type=notify_type, caption=message, multi_line=True)
            return
        with self._client:
            ui.notify(title, type=notify_type, caption=message, multi_line=True)

    # =========================================================================
    # Section 4: Actions
    # =========================================================================

    def _copy_text(self, text: str) -> None:
        """Copy specified text to clipboard"""
        if text:
            ui.clipboard.write(text)
            ui.notify('Copied', type='positive')

    def _select_target_language(self, language: LanguageEntry) -> None:
        if self.controller:
            self.controller.select_target_language(language)

    async def search_selection(self) -> None:
        """Search the current clipboard selection when enabled and nothing is typed yet."""
        if not self.settings.is_selection_paste or self.controller is None:
            return
        if self.controller.state.has_query or (self._search_input and self._search_input.value):
            return
        try:
            text = await ui.clipboard.read()
        except Exception as e:
            logger.debug("Selection unavailable: %s", e)
            return
        text = (text or '').strip()
        if not text:
            return
        logger.info("Searching selected text (%d chars)", len(text))
        # Setting the value fires on_change, which goes through the normal debounce
        self._search_input.value = text

    def close(self) -> None:
        if self.controller:
            self.controller.close()


def run_app(
    host: str = '127.0.0.1',
    port: int = 8765,
    native: bool = False,
):
    """Run the application.

    Args:
        host: Host to bind to
        port: Port to bind to
        native: Use native window mode (pywebview)
    """
    import multiprocessing

    # Native mode re-executes the script in a child process; only the main process serves
    if multiprocessing.current_process().name != 'MainProcess':
        return

    @ui.page('/')
    async def main_page(client: nicegui_Client):
        peek_app = PeekLingoApp()
        peek_app.attach_client(client)
        peek_app.create_ui()
        client.on_disconnect(peek_app.close)

        await client.connected()
        await peek_app.search_selection()

    logger.info("Starting %s on http://%s:%d", __app_name__, host, port)
    ui.run(
        host=host,
        port=port,
        title=__app_name__,
        dark=False,
        reload=False,
        native=native,
        show=not native,
        reconnect_timeout=30.0,
        uvicorn_logging_level='warning',
    )
