"""Pagepad CLI entry point.

Allows running via `python -m pagepad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from .constants import EditorConstants
from .settings import EditorSettings, load_settings
from .version import get_version_string

USAGE = "usage: pagepad [--version | --keytest] FILE"


def configure_logging(settings: EditorSettings) -> None:
    """Send log records to a file if one is configured.

    The screen is in raw mode while editing, so nothing is ever logged
    to the terminal.
    """
    log_file = os.environ.get(EditorConstants.LOG_ENV_VAR) or settings.log_file
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def run_keyboard_test() -> None:
    """Echo the key code of every key pressed. Quit with ESC."""
    from .keyboard import KeyboardHandler, ESCAPE
    from .status import StatusLine
    from .terminal import TerminalInterface

    print("Keyboard test mode - press keys to see their codes.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    line = StatusLine(3)
    try:
        while True:
            code = kb.get_key_code()
            if code is None:
                continue
            if code == ESCAPE:
                break
            line.notify_key(code)
            print(f"code=0x{line.text}\r")
    finally:
        term.cleanup()
    print("Exiting keyboard test.")


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return 0
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 2

    settings = load_settings()
    configure_logging(settings)

    # Lazy import to avoid importing UI deps for --version
    from .editor import edit
    return edit(args[0], settings=settings)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
