"""Blocking error presenters: Qt message box and terminal fallback."""
from __future__ import annotations
from typing import Callable, Dict, TextIO, Optional
import logging
import sys

from dialog_unwrap.config import get_config
from dialog_unwrap.messages import translate

LOG_UI = logging.getLogger("dialog_unwrap.ui")

Presenter = Callable[[str, str], None]


def _get_or_create_app():
    """Make sure a QApplication exists so a message box can be shown.

    Failures can happen before the host app starts Qt (or in a plain script);
    an already running application is reused as-is.
    """
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication(sys.argv[:1])


def show_qt_message_box(title: str, body: str) -> None:
    """Show a modal critical message box; returns once the user closes it."""
    from PySide6.QtWidgets import QMessageBox

    _get_or_create_app()
    QMessageBox.critical(None, title, body)


def show_console_message(
    title: str,
    body: str,
    stream: Optional[TextIO] = None,
    stdin: Optional[TextIO] = None,
    locale: Optional[str] = None,
) -> None:
    """Write the error to stderr and wait for Enter when attached to a terminal."""
    stream = stream if stream is not None else sys.stderr
    stdin = stdin if stdin is not None else sys.stdin
    rule = "=" * max(len(title), 20)
    stream.write(f"{rule}\n{title}\n{rule}\n{body}\n")
    stream.flush()
    if stdin is not None and stdin.isatty():
        stream.write(translate("common.console.acknowledge", locale or get_config().locale))
        stream.flush()
        stdin.readline()


PRESENTERS: Dict[str, Presenter] = {
    "qt": show_qt_message_box,
    "console": show_console_message,
}


def resolve_presenter(name: str) -> Presenter:
    try:
        return PRESENTERS[name]
    except KeyError:
        raise ValueError(f"Unknown presenter '{name}' (expected one of: {', '.join(PRESENTERS)})") from None
