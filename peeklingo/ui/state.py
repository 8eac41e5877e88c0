# peeklingo/ui/state.py
"""
Lookup session state for PeekLingo.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from peeklingo.models.types import (
    EMPTY_LANGUAGE,
    ERROR_CODE_NOT_QUERIED,
    CopyMode,
    DisplaySection,
    LanguageEntry,
    SUCCESS_ERROR_CODES,
)

# Module logger
logger = logging.getLogger(__name__)


class LookupPhase(Enum):
    """Lookup session states"""
    IDLE = "idle"                           # No query yet / input cleared
    AWAITING_RESPONSE = "awaiting_response"
    HAS_RESULT = "has_result"
    PENDING_PIVOT = "pending_pivot"         # Waiting to switch target language and re-query


@dataclass
class SessionState:
    """
    State of one search session.
    Owned and mutated only by LanguageDirectionController, on the event loop thread.
    """
    active_target_language: LanguageEntry = EMPTY_LANGUAGE
    phase: LookupPhase = LookupPhase.IDLE

    # Current query
    current_query: str = ""
    copy_mode: CopyMode = CopyMode.NORMAL

    # Once the user picks a target language, auto-pivot is disabled for the session
    is_user_pinned_target_language: bool = False

    # Last committed result
    last_detected_source_language: Optional[LanguageEntry] = None
    last_error_code: str = ERROR_CODE_NOT_QUERIED
    last_raw_payload: dict = field(default_factory=dict, repr=False)
    last_request_error: str = ""
    sections: list[DisplaySection] = field(default_factory=list)
    is_loading: bool = False

    # Incremented for every outgoing request; responses carrying an older value are stale
    request_generation: int = 0

    # Scheduled work (cancel-and-replace)
    debounce_task: Optional[asyncio.Task] = field(default=None, repr=False, compare=False)
    pivot_task: Optional[asyncio.Task] = field(default=None, repr=False, compare=False)
    request_task: Optional[asyncio.Task] = field(default=None, repr=False, compare=False)

    @property
    def has_query(self) -> bool:
        return bool(self.current_query)

    @property
    def has_result(self) -> bool:
        """True when a successful (0/207) result is committed."""
        return self.phase == LookupPhase.HAS_RESULT and self.last_error_code in SUCCESS_ERROR_CODES

    @property
    def has_error(self) -> bool:
        """True when the API reported an error code other than 0/207."""
        return (
            self.phase == LookupPhase.HAS_RESULT
            and self.last_error_code != ERROR_CODE_NOT_QUERIED
            and self.last_error_code not in SUCCESS_ERROR_CODES
        )

    def next_generation(self) -> int:
        self.request_generation += 1
        return self.request_generation

    def is_current(self, generation: int) -> bool:
        return generation == self.request_generation

    def reset_results(self) -> None:
        """Return to the idle view: no query, no result, nothing loading"""
        self.phase = LookupPhase.IDLE
        self.current_query = ""
        self.copy_mode = CopyMode.NORMAL
        self.last_error_code = ERROR_CODE_NOT_QUERIED
        self.last_raw_payload = {}
        self.last_request_error = ""
        self.sections = []
        self.is_loading = False
        # Any in-flight response becomes stale
        self.request_generation += 1
