# peeklingo/ui/components/result_panel.py
"""
Result list for a lookup: one group per display section, one row per item.
Each row carries a menu with copy actions and target-language overrides.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from nicegui import ui

from peeklingo.models.types import (
    CopyMode,
    DisplayItem,
    DisplaySection,
    LanguageEntry,
    SectionKind,
)
from peeklingo.services.copy_mode import (
    CopyOption,
    apply_copy_mode,
    build_copy_options,
    split_web_values,
    truncate,
)
from peeklingo.services.languages import LANGUAGE_LIST
from peeklingo.ui.state import SessionState

logger = logging.getLogger(__name__)

COPY_MODE_LABELS: dict[CopyMode, str] = {
    CopyMode.NORMAL: 'Copy',
    CopyMode.LOWERCASE_CAMEL_CASE: 'Copy as camelCase',
    CopyMode.UPPERCASE: 'Copy as UPPERCASE',
}


class ResultView(Enum):
    """What the result area shows for a given session state"""
    EMPTY = "empty"          # Nothing typed yet
    LOADING = "loading"      # Waiting for the first result of this query
    RESULTS = "results"      # Sections (0 or 207)
    ERROR = "error"          # API errorCode other than 0/207
    NOTHING = "nothing"      # Request failed or no result to show


def resolve_result_view(state: SessionState) -> ResultView:
    if not state.has_query and not state.is_loading:
        return ResultView.EMPTY
    if state.has_result:
        return ResultView.RESULTS
    if state.has_error:
        return ResultView.ERROR
    if state.is_loading:
        return ResultView.LOADING
    return ResultView.NOTHING


def build_item_copy_options(
    item: DisplayItem,
    kind: SectionKind,
    copy_mode: CopyMode,
) -> list[CopyOption]:
    """Copy menu entries for a row, with the session copy mode applied.

    Web translation rows with several values get one entry per value
    plus an "All" entry holding the joined text.
    """
    values = split_web_values(item.copy_text) if kind == SectionKind.WEB_TRANSLATE else []
    if len(values) > 1:
        options = build_copy_options(values + [item.copy_text])
    else:
        options = [CopyOption(title=truncate(item.copy_text), value=item.copy_text)]
    return [CopyOption(title=o.title, value=apply_copy_mode(o.value, copy_mode)) for o in options]


def target_language_choices(state: SessionState) -> list[LanguageEntry]:
    """Languages offered in the "Translate to" menu (current target and detected source excluded)."""
    excluded = {state.active_target_language.language_id}
    if state.last_detected_source_language:
        excluded.add(state.last_detected_source_language.language_id)
    return [lang for lang in LANGUAGE_LIST if lang.language_id not in excluded]


def _render_item_menu(
    item: DisplayItem,
    section: DisplaySection,
    state: SessionState,
    on_copy: Callable[[str], None],
    on_select_language: Callable[[LanguageEntry], None],
):
    with ui.button(icon='more_vert').props('flat round dense').classes('item-menu-button'):
        with ui.menu():
            label = COPY_MODE_LABELS[state.copy_mode]
            for option in build_item_copy_options(item, section.kind, state.copy_mode):
                ui.menu_item(
                    f'{label}: {option.title}',
                    on_click=lambda value=option.value: on_copy(value),
                )
            ui.separator()
            with ui.menu_item('Translate to...', auto_close=False):
                with ui.item_section().props('side'):
                    ui.icon('keyboard_arrow_right')
                with ui.menu().props('anchor="top end" self="top start"'):
                    for lang in target_language_choices(state):
                        ui.menu_item(
                            lang.title,
                            on_click=lambda lang=lang: on_select_language(lang),
                        )


def _render_item(
    item: DisplayItem,
    section: DisplaySection,
    state: SessionState,
    on_copy: Callable[[str], None],
    on_select_language: Callable[[LanguageEntry], None],
):
    # Translate rows show the language direction on the right
    accessory = item.accessory_label
    if not accessory and section.kind == SectionKind.TRANSLATE:
        accessory = section.language_label or ''

    with ui.item(on_click=lambda: on_copy(apply_copy_mode(item.copy_text, state.copy_mode))).classes('result-item'):
        with ui.item_section().props('avatar'):
            ui.icon(item.icon or 'circle', color=item.color or None)
        with ui.item_section():
            ui.item_label(item.title).classes('result-title')
            if item.subtitle:
                ui.item_label(item.subtitle).props('caption')
        if accessory:
            with ui.item_section().props('side'):
                ui.item_label(accessory).props('caption').classes('result-accessory')
        with ui.item_section().props('side'):
            _render_item_menu(item, section, state, on_copy, on_select_language)


def render_sections(
    state: SessionState,
    on_copy: Callable[[str], None],
    on_select_language: Callable[[LanguageEntry], None],
):
    """Render all sections. Empty sections keep their header and show no rows."""
    with ui.list().props('dense separator').classes('result-list w-full'):
        for section in state.sections:
            if section.title or section.hint:
                with ui.row().classes('section-header items-baseline gap-2'):
                    ui.label(section.title).classes('section-title')
                    ui.label(section.hint).classes('section-hint')
            for item in section.items:
                _render_item(item, section, state, on_copy, on_select_language)


def render_error(error_code: str, help_url: str):
    """Failure row for an API error code, with a link to the error code reference"""
    with ui.list().classes('result-list w-full'):
        with ui.item().classes('result-item error-item'):
            with ui.item_section().props('avatar'):
                ui.icon('cancel', color='red')
            with ui.item_section():
                ui.item_label('Sorry! We have some problems..')
                ui.item_label(f'code: {error_code}').props('caption')
            with ui.item_section().props('side'):
                ui.link('Help', help_url, new_tab=True)


def render_empty_state():
    with ui.element('div').classes('empty-result-state'):
        ui.icon('description').classes('text-4xl text-muted opacity-30')
        ui.label('Type something to translate.').classes('text-sm text-muted opacity-50')


def render_loading():
    with ui.row().classes('items-center gap-3 loading-row'):
        ui.spinner('dots', size='lg').classes('text-primary')
        ui.label('Translating...').classes('message')


def render_language_conflict():
    """Blocking view shown when both preferred languages are the same"""
    with ui.list().classes('result-list w-full'):
        with ui.item().classes('result-item error-item'):
            with ui.item_section().props('avatar'):
                ui.icon('cancel', color='red')
            with ui.item_section():
                ui.item_label('Language Conflict')
                ui.item_label('Your first Language with second Language must be different.').props('caption')


def create_result_panel(
    state: SessionState,
    help_url: str,
    on_copy: Callable[[str], None],
    on_select_language: Callable[[LanguageEntry], None],
    view: Optional[ResultView] = None,
):
    """Render the result area for the current state."""
    view = view or resolve_result_view(state)
    logger.debug("Rendering result view: %s", view.value)

    if view == ResultView.EMPTY:
        render_empty_state()
    elif view == ResultView.LOADING:
        render_loading()
    elif view == ResultView.RESULTS:
        render_sections(state, on_copy, on_select_language)
    elif view == ResultView.ERROR:
        render_error(state.last_error_code, help_url)
