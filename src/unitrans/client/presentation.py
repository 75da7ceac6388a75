"""Presentation state for the translator UI.

Everything here is derived from :class:`TranslationController` state plus a
small immutable :class:`TranslatorView` holding what the panels show. The
helpers are pure so any front-end can reuse them; :class:`TranslatorPresenter`
wires them to a controller for the terminal shell.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Mapping

from unitrans.shared.models import TranslationResult

from . import effects
from .controller import TranslationController
from .history import HISTORY_DISPLAY_LIMIT, HistoryEntry

AUTO_LANGUAGE = "auto"
SOURCE_TEXT_LIMIT = 5000
EMPTY_HISTORY_MESSAGE = "No translations yet"


@dataclass(frozen=True)
class TranslatorView:
    """Contents of the language pickers and the two text panels."""

    source_text: str = ""
    translated_text: str = ""
    source_language: str = AUTO_LANGUAGE
    target_language: str = "en"
    copied: bool = False

    def with_source_text(self, text: str) -> TranslatorView:
        return replace(self, source_text=text[:SOURCE_TEXT_LIMIT], copied=False)


@dataclass(frozen=True)
class HistoryRow:
    entry_id: str
    direction: str
    time: str
    original_text: str
    translated_text: str


def language_options(
    languages: Mapping[str, str], *, exclude_auto: bool = False
) -> list[tuple[str, str]]:
    """Return ``(code, name)`` picker options; the target picker omits ``auto``."""

    return [
        (code, name)
        for code, name in languages.items()
        if not (exclude_auto and code == AUTO_LANGUAGE)
    ]


def can_swap(view: TranslatorView) -> bool:
    """Auto-detected sources have no reverse mapping, so swapping is disabled."""

    return view.source_language != AUTO_LANGUAGE


def swap_languages(view: TranslatorView) -> TranslatorView:
    if not can_swap(view):
        return view
    return replace(
        view,
        source_language=view.target_language,
        target_language=view.source_language,
        source_text=view.translated_text,
        translated_text=view.source_text,
        copied=False,
    )


def can_translate(view: TranslatorView, *, is_loading: bool) -> bool:
    return bool(view.source_text.strip()) and not is_loading


def apply_result(view: TranslatorView, result: TranslationResult) -> TranslatorView:
    return replace(view, translated_text=result.translated_text, copied=False)


def select_history_entry(view: TranslatorView, entry: HistoryEntry) -> TranslatorView:
    """Restore a past translation into the panels and pickers."""

    return replace(
        view,
        source_text=entry.original_text,
        translated_text=entry.translated_text,
        source_language=entry.source_language,
        target_language=entry.target_language,
        copied=False,
    )


def describe_entry(entry: HistoryEntry, languages: Mapping[str, str]) -> HistoryRow:
    source = languages.get(entry.source_language, entry.source_language)
    target = languages.get(entry.target_language, entry.target_language)
    return HistoryRow(
        entry_id=entry.id,
        direction=f"{source} → {target}",
        time=entry.timestamp.astimezone().strftime("%H:%M:%S"),
        original_text=entry.original_text,
        translated_text=entry.translated_text,
    )


def history_rows(
    entries: tuple[HistoryEntry, ...], languages: Mapping[str, str]
) -> list[HistoryRow]:
    """Rows for the history panel, capped at the display limit."""

    return [describe_entry(entry, languages) for entry in entries[:HISTORY_DISPLAY_LIMIT]]


def translation_stats(history_size: int, languages: Mapping[str, str]) -> dict[str, int]:
    return {
        "total_translations": history_size,
        "languages_available": len(languages),
        "character_limit": SOURCE_TEXT_LIMIT,
    }


def _truncate(text: str, width: int = 60) -> str:
    flat = " ".join(text.split())
    return flat if len(flat) <= width else flat[: width - 1] + "…"


class TranslatorPresenter:
    """Routes user intents to the controller and keeps the view in sync."""

    def __init__(
        self,
        controller: TranslationController,
        *,
        view: TranslatorView | None = None,
        copy: Callable[[str], bool] = effects.copy_to_clipboard,
        speak: Callable[[str], bool] = effects.speak,
    ) -> None:
        self.controller = controller
        self.view = view or TranslatorView()
        self._copy = copy
        self._speak = speak

    @property
    def languages(self) -> Mapping[str, str]:
        return self.controller.languages

    def set_source_text(self, text: str) -> None:
        self.view = self.view.with_source_text(text)

    def set_source_language(self, code: str) -> None:
        if code not in self.languages:
            raise ValueError(f"Unknown language code: {code}")
        self.view = replace(self.view, source_language=code)

    def set_target_language(self, code: str) -> None:
        if code == AUTO_LANGUAGE or code not in self.languages:
            raise ValueError(f"Unknown target language code: {code}")
        self.view = replace(self.view, target_language=code)

    def swap(self) -> bool:
        swapped = can_swap(self.view)
        self.view = swap_languages(self.view)
        return swapped

    def translate(self) -> TranslationResult | None:
        if not can_translate(self.view, is_loading=self.controller.is_loading):
            return None
        result = self.controller.translate(
            self.view.source_text,
            self.view.source_language,
            self.view.target_language,
        )
        if result is not None:
            self.view = apply_result(self.view, result)
        return result

    def select(self, position: int) -> HistoryEntry:
        """Restore the entry at 1-based ``position`` of the visible history."""

        visible = self.controller.history.recent()
        if not 1 <= position <= len(visible):
            raise IndexError(f"No history entry at position {position}")
        entry = visible[position - 1]
        self.view = select_history_entry(self.view, entry)
        return entry

    def clear_history(self) -> None:
        self.controller.clear_history()

    def copy(self) -> bool:
        if not self.view.translated_text:
            return False
        copied = self._copy(self.view.translated_text)
        self.view = replace(self.view, copied=copied)
        return copied

    def speak(self) -> bool:
        return self._speak(self.view.translated_text)

    def render_panels(self) -> str:
        languages = self.languages
        source = languages.get(self.view.source_language, self.view.source_language)
        target = languages.get(self.view.target_language, self.view.target_language)
        swap_hint = "" if can_swap(self.view) else " (swap disabled)"
        lines = [
            f"From: {source}  To: {target}{swap_hint}",
            f"Original ({len(self.view.source_text)}/{SOURCE_TEXT_LIMIT}): "
            f"{self.view.source_text or 'Enter text to translate...'}",
            f"Translation: {self.view.translated_text or 'Translation will appear here...'}",
        ]
        if self.controller.error:
            lines.append(f"Error: {self.controller.error}")
        return "\n".join(lines)

    def render_history(self) -> str:
        rows = history_rows(self.controller.history.recent(), self.languages)
        if not rows:
            return f"Translation History\n  {EMPTY_HISTORY_MESSAGE}"
        lines = ["Translation History"]
        for position, row in enumerate(rows, start=1):
            lines.append(f"  {position:>2}. [{row.time}] {row.direction}")
            lines.append(f"      {_truncate(row.original_text)}")
            lines.append(f"      {_truncate(row.translated_text)}")
        return "\n".join(lines)

    def render_languages(self) -> str:
        return "\n".join(f"  {code:<6} {name}" for code, name in language_options(self.languages))

    def render_stats(self) -> str:
        stats = translation_stats(len(self.controller.history), self.languages)
        return "\n".join(
            [
                "Translation Stats",
                f"  Total Translations: {stats['total_translations']}",
                f"  Languages Available: {stats['languages_available']}",
                f"  Character Limit: {stats['character_limit']:,}",
            ]
        )


__all__ = [
    "AUTO_LANGUAGE",
    "EMPTY_HISTORY_MESSAGE",
    "SOURCE_TEXT_LIMIT",
    "HistoryRow",
    "TranslatorPresenter",
    "TranslatorView",
    "apply_result",
    "can_swap",
    "can_translate",
    "describe_entry",
    "history_rows",
    "language_options",
    "select_history_entry",
    "swap_languages",
    "translation_stats",
]
