"""Best-effort desktop side effects: clipboard copy and text-to-speech.

Both helpers look for a platform tool on ``PATH`` and pipe the text into it.
They report success as a boolean and never raise; a missing tool or a failing
process only means the effect did not happen.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import Callable, Sequence

_LOGGER = logging.getLogger(__name__)

Which = Callable[[str], "str | None"]

_SPEECH_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("say",),
    ("espeak-ng",),
    ("espeak",),
    ("spd-say", "--wait"),
)


def _clipboard_commands() -> tuple[tuple[str, ...], ...]:
    session = os.environ.get("XDG_SESSION_TYPE", "").casefold()
    commands: list[tuple[str, ...]] = [("pbcopy",), ("clip",)]
    if session == "wayland":
        commands.append(("wl-copy", "--type", "text/plain"))
    commands.extend(
        [
            ("xclip", "-selection", "clipboard"),
            ("xsel", "--clipboard", "--input"),
        ]
    )
    return tuple(commands)


def _resolve(candidates: Sequence[tuple[str, ...]], which: Which) -> list[str] | None:
    for name, *arguments in candidates:
        executable = which(name)
        if executable is not None:
            return [executable, *arguments]
    return None


def _run(command: list[str], *, stdin: str | None = None, argument: str | None = None) -> bool:
    if argument is not None:
        # "--" ends option parsing so text starting with "-" is spoken, not parsed.
        command = [*command, "--", argument]
    try:
        completed = subprocess.run(
            command,
            input=stdin,
            text=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as error:
        _LOGGER.debug("Side effect %s failed: %s", command[0], error)
        return False
    return completed.returncode == 0


def copy_to_clipboard(text: str, *, which: Which = shutil.which) -> bool:
    """Copy ``text`` to the system clipboard."""

    if not text:
        return False
    command = _resolve(_clipboard_commands(), which)
    if command is None:
        _LOGGER.debug("No clipboard tool available")
        return False
    return _run(command, stdin=text)


def speak(text: str, *, which: Which = shutil.which) -> bool:
    """Read ``text`` aloud with the platform speech synthesiser."""

    if not text:
        return False
    command = _resolve(_SPEECH_COMMANDS, which)
    if command is None:
        _LOGGER.debug("No speech synthesiser available")
        return False
    return _run(command, argument=text)


__all__ = ["copy_to_clipboard", "speak"]
