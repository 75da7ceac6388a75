"""Unit tests for the clipboard and speech helpers."""

from __future__ import annotations

import subprocess
from typing import Any

import pytest

from unitrans.client import effects


class Completed:
    def __init__(self, returncode: int) -> None:
        self.returncode = returncode


@pytest.fixture()
def runs(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []

    def fake_run(command, **kwargs):
        calls.append({"command": command, **kwargs})
        return Completed(0)

    monkeypatch.setattr(effects.subprocess, "run", fake_run)
    return calls


def _which(*available: str):
    return lambda name: f"/usr/bin/{name}" if name in available else None


def test_copy_pipes_text_to_first_available_tool(runs) -> None:
    assert effects.copy_to_clipboard("Hola", which=_which("xclip", "xsel")) is True

    assert runs[0]["command"] == ["/usr/bin/xclip", "-selection", "clipboard"]
    assert runs[0]["input"] == "Hola"


def test_copy_prefers_wl_copy_on_wayland(runs, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_SESSION_TYPE", "wayland")

    effects.copy_to_clipboard("Hola", which=_which("wl-copy", "xclip"))

    assert runs[0]["command"][0] == "/usr/bin/wl-copy"


def test_copy_ignores_wl_copy_outside_wayland(runs, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_SESSION_TYPE", "x11")

    assert effects.copy_to_clipboard("Hola", which=_which("wl-copy")) is False
    assert runs == []


def test_copy_without_tool_reports_failure(runs) -> None:
    assert effects.copy_to_clipboard("Hola", which=_which()) is False
    assert runs == []


def test_empty_text_is_not_sent(runs) -> None:
    assert effects.copy_to_clipboard("", which=_which("pbcopy")) is False
    assert effects.speak("", which=_which("say")) is False
    assert runs == []


def test_speak_passes_text_as_argument(runs) -> None:
    assert effects.speak("Hola", which=_which("spd-say")) is True

    assert runs[0]["command"] == ["/usr/bin/spd-say", "--wait", "--", "Hola"]
    assert runs[0]["input"] is None


@pytest.mark.parametrize("text", ["--help", "-o out.aiff", "-5 degrees"])
def test_speak_keeps_dash_text_out_of_option_parsing(runs, text: str) -> None:
    assert effects.speak(text, which=_which("espeak")) is True

    assert runs[0]["command"] == ["/usr/bin/espeak", "--", text]


def test_failing_process_reports_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(effects.subprocess, "run", lambda command, **kwargs: Completed(1))

    assert effects.speak("Hola", which=_which("espeak")) is False


@pytest.mark.parametrize(
    "error", [FileNotFoundError("gone"), subprocess.TimeoutExpired("say", 1)]
)
def test_process_errors_are_contained(monkeypatch: pytest.MonkeyPatch, error) -> None:
    def fail(command, **kwargs):
        raise error

    monkeypatch.setattr(effects.subprocess, "run", fail)

    assert effects.copy_to_clipboard("Hola", which=_which("pbcopy")) is False
