# peeklingo/ui/controller.py
"""
Lookup controller: debounced querying and target-language negotiation.

Flow:
    input change --(debounce)--> request(target) --> response
        pinned by user          -> commit
        from == to              -> wait, switch to the other preferred language, re-query
        from != lang1, target != lang1 -> wait, switch to lang1, re-query
        otherwise               -> commit

All timers are asyncio tasks stored on SessionState and replaced on each new
event. Requests run in a worker thread and are tagged with a generation
number; a response whose generation is no longer current is discarded.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Callable, Optional, Protocol

from peeklingo.config.settings import AppSettings
from peeklingo.models.types import (
    ERROR_CODE_NOT_QUERIED,
    CopyMode,
    LanguageEntry,
    TranslationResponse,
)
from peeklingo.services.copy_mode import parse_query
from peeklingo.services.exceptions import LanguageConflictError, PeekLingoError
from peeklingo.services.languages import get_language
from peeklingo.services.reformatter import reformat_translate_result
from peeklingo.ui.state import LookupPhase, SessionState

logger = logging.getLogger(__name__)

# Upper bound on automatic target switches for a single query.
# Some inputs (digits, symbols) are detected as "from == to" for every target.
MAX_AUTO_PIVOTS_PER_QUERY = 2

StateCallback = Callable[[SessionState], None]
# (notify type, title, message), notify type is a NiceGUI notification type
NoticeCallback = Callable[[str, str, str], None]


class TranslationClient(Protocol):
    def translate(self, query_text: str, target_language_id: str) -> TranslationResponse: ...


class LanguageDirectionController:
    """Owns the SessionState of one search session."""

    def __init__(
        self,
        settings: AppSettings,
        client: TranslationClient,
        on_change: Optional[StateCallback] = None,
        on_notice: Optional[NoticeCallback] = None,
    ):
        if settings.has_language_conflict():
            raise LanguageConflictError(
                f"Preferred languages must be different (lang1={settings.lang1!r}, lang2={settings.lang2!r})"
            )
        self._settings = settings
        self._client = client
        self._on_change = on_change
        self._on_notice = on_notice

        self.primary_language = get_language(settings.lang1)
        self.secondary_language = get_language(settings.lang2)
        self.state = SessionState(active_target_language=self.primary_language)
        self._auto_pivot_count = 0

    # =========================================================================
    # Input events
    # =========================================================================

    def on_search_text_change(self, text: Optional[str]) -> None:
        """Handle a raw search box change (debounced)."""
        text = (text or "").strip()
        self._cancel_task("debounce_task")
        self._cancel_task("pivot_task")

        if not text:
            self.clear()
            return

        # A response for the previous text must not land after this point
        self._cancel_task("request_task")
        self.state.next_generation()
        self.state.debounce_task = asyncio.create_task(self._debounced_submit(text))

    async def _debounced_submit(self, text: str) -> None:
        await asyncio.sleep(self._settings.debounce_delay)
        query = parse_query(text)
        if query.is_empty:
            # Only copy-mode markers typed so far
            self.clear()
            return
        self.submit(query.text, query.copy_mode)

    def submit(self, query_text: str, copy_mode: CopyMode = CopyMode.NORMAL) -> asyncio.Task:
        """Issue a query immediately for the active target language."""
        self.state.current_query = query_text
        self.state.copy_mode = copy_mode
        self._auto_pivot_count = 0
        return self._start_request()

    def select_target_language(self, language: LanguageEntry) -> Optional[asyncio.Task]:
        """Pin the target language chosen by the user and re-query.

        Auto-pivot stays disabled for the rest of the session.
        """
        logger.info("Target language pinned by user: %s", language.language_id)
        self.state.is_user_pinned_target_language = True
        self.state.active_target_language = language
        self._cancel_task("pivot_task")

        if self.state.has_query:
            return self._start_request()
        self._notify_change()
        return None

    def clear(self) -> None:
        """Input cleared: drop results and pending work."""
        self._cancel_all()
        self.state.reset_results()
        self._notify_change()

    def close(self) -> None:
        self._cancel_all()

    async def wait_until_settled(self) -> None:
        """Wait until no debounce, pivot or request task is pending."""
        while True:
            pending = [
                task
                for task in (self.state.debounce_task, self.state.pivot_task, self.state.request_task)
                if task is not None and not task.done()
            ]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    # =========================================================================
    # Requests
    # =========================================================================

    def _start_request(self) -> asyncio.Task:
        self._cancel_task("pivot_task")
        self._cancel_task("request_task")

        generation = self.state.next_generation()
        self.state.phase = LookupPhase.AWAITING_RESPONSE
        self.state.is_loading = True
        self._notify_change()

        task = asyncio.create_task(
            self._request(generation, self.state.current_query, self.state.active_target_language)
        )
        self.state.request_task = task
        return task

    async def _request(self, generation: int, query_text: str, target: LanguageEntry) -> None:
        logger.debug("Query #%d: %r -> %s", generation, query_text, target.language_id)
        try:
            response = await asyncio.to_thread(self._client.translate, query_text, target.language_id)
        except PeekLingoError as e:
            if self._is_stale(generation, query_text):
                return
            logger.warning("Translation request failed: %s", e)
            self._commit_failure(str(e))
            return
        except Exception as e:
            if self._is_stale(generation, query_text):
                return
            logger.exception("Unexpected error during translation request: %s", e)
            self._commit_failure(f"{type(e).__name__}: {e}")
            return

        if self._is_stale(generation, query_text):
            return
        self._handle_response(response)

    def _is_stale(self, generation: int, query_text: str) -> bool:
        if self.state.is_current(generation):
            return False
        logger.debug("Discarding stale response #%d for %r", generation, query_text)
        return True

    def _handle_response(self, response: TranslationResponse) -> None:
        from_id, to_id = response.language_ids

        if response.is_success and not self.state.is_user_pinned_target_language:
            primary_id = self.primary_language.language_id
            if from_id == to_id:
                if self._auto_pivot_count >= MAX_AUTO_PIVOTS_PER_QUERY:
                    # Every preferred target came back as "from == to"; nothing worth showing
                    self._commit_unresolved(response)
                    return
                # Source detected as the requested target: translate into the other preferred language
                if from_id == self.secondary_language.language_id:
                    self._schedule_pivot(self.primary_language)
                else:
                    self._schedule_pivot(self.secondary_language)
                return
            if (
                from_id != primary_id
                and self.state.active_target_language.language_id != primary_id
                and self._auto_pivot_count < MAX_AUTO_PIVOTS_PER_QUERY
            ):
                # Unexpected source language: land on the home language
                self._schedule_pivot(self.primary_language)
                return

        self._commit(response)

    # =========================================================================
    # Auto-pivot
    # =========================================================================

    def _schedule_pivot(self, language: LanguageEntry) -> None:
        logger.debug("Scheduling target switch to %s in %dms",
                     language.language_id, self._settings.pivot_delay_ms)
        self._cancel_task("pivot_task")
        self.state.phase = LookupPhase.PENDING_PIVOT
        self.state.pivot_task = asyncio.create_task(self._pivot_after_delay(language))

    async def _pivot_after_delay(self, language: LanguageEntry) -> None:
        await asyncio.sleep(self._settings.pivot_delay)
        self.state.pivot_task = None
        self.state.active_target_language = language
        self._auto_pivot_count += 1
        logger.info("Target language switched to %s", language.language_id)
        self._start_request()

    # =========================================================================
    # Commit
    # =========================================================================

    def _commit(self, response: TranslationResponse) -> None:
        state = self.state
        state.phase = LookupPhase.HAS_RESULT
        state.is_loading = False
        state.last_error_code = response.error_code
        state.last_raw_payload = response.raw
        state.last_request_error = ""
        state.last_detected_source_language = get_language(response.from_language_id)
        state.sections = reformat_translate_result(response) if response.is_success else []

        if response.is_warning:
            self._notice(
                "warning",
                f"Notice: {response.error_code}",
                json.dumps(response.raw, ensure_ascii=False),
            )
        elif not response.is_success:
            logger.info("API reported errorCode=%s", response.error_code)

        self._notify_change()

    def _commit_unresolved(self, response: TranslationResponse) -> None:
        """Stop pivoting without rendering the degenerate response."""
        logger.warning("No usable target language for %r after %d switches (l=%s)",
                       self.state.current_query, self._auto_pivot_count, response.language_pair)
        state = self.state
        state.phase = LookupPhase.HAS_RESULT
        state.is_loading = False
        state.last_error_code = ERROR_CODE_NOT_QUERIED
        state.last_raw_payload = response.raw
        state.last_request_error = ""
        state.last_detected_source_language = None
        state.sections = []
        self._notify_change()

    def _commit_failure(self, message: str) -> None:
        state = self.state
        state.phase = LookupPhase.HAS_RESULT
        state.is_loading = False
        state.last_error_code = ERROR_CODE_NOT_QUERIED
        state.last_raw_payload = {}
        state.last_request_error = message
        state.sections = []
        self._notice("negative", "Translation request failed", message)
        self._notify_change()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _cancel_task(self, attr: str) -> None:
        task: Optional[asyncio.Task] = getattr(self.state, attr)
        if task is None:
            return
        setattr(self.state, attr, None)
        if task is asyncio.current_task():
            return
        if not task.done():
            task.cancel()

    def _cancel_all(self) -> None:
        for attr in ("debounce_task", "pivot_task", "request_task"):
            self._cancel_task(attr)

    def _notify_change(self) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change(self.state)
        except Exception as e:
            logger.exception("State change callback failed: %s", e)

    def _notice(self, notify_type: str, title: str, message: str) -> None:
        if self._on_notice is None:
            return
        try:
            self._on_notice(notify_type, title, message)
        except Exception as e:
            logger.exception("Notice callback failed: %s", e)
