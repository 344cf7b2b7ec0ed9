"""Main editor controller: session state and the render/read/dispatch loop."""

import logging
import sys
from dataclasses import dataclass
from typing import Optional

from . import persistence
from .commands import CommandRegistry
from .constants import EditorConstants
from .errors import FileError
from .keyboard import KeyboardHandler, QUIT
from .model import PageModel
from .settings import EditorSettings
from .status import StatusLine
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    """Outcome of an editing session; error is set if a save failed."""
    error: Optional[FileError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Editor:
    """One editing session on one file."""

    def __init__(self, filename: str, terminal=None, settings: Optional[EditorSettings] = None):
        """Initialize the editor components.

        The page geometry is taken from the terminal once, here, and does
        not change for the rest of the session.
        """
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.settings = settings or EditorSettings()
        self.command_registry = CommandRegistry()
        self.model = PageModel(self.terminal.width, self.terminal.height,
                               total_pages=self.settings.total_pages,
                               tab_width=self.settings.tab_width)
        self.messages = StatusLine(self.terminal.width)
        self.filename = filename
        self.pristine = True
        self.running = False

    def load(self):
        """Snarf the session's file into the document.

        Raises:
            FileError: The file exists but could not be read.
        """
        if not persistence.snarf(self.model, self.filename):
            self.messages.notify(EditorConstants.NEW_FILE_MESSAGE.format(self.filename))

    def save(self):
        """Write the document, backing the file up on the first save.

        Raises:
            FileError: The backup or the save failed.
        """
        persistence.save(self.model, self.filename, backup=self.pristine,
                         backup_suffix=self.settings.backup_suffix)
        self.pristine = False
        self.messages.notify(EditorConstants.SAVED_MESSAGE.format(self.filename))

    def render(self):
        """Redraw the whole page and status line, then place the cursor."""
        for y, line in enumerate(self.model.lines()):
            self.terminal.blit(y, 0, line)
        self.terminal.blit(self.model.height, 0, bytes(self.messages))
        row, column = self.model.cursor.coords()
        self.terminal.refresh(row, column)

    def handle_key(self, key: int):
        """Dispatch one key code.

        Raises:
            FileError: The key triggered a save that failed.
        """
        self.messages.clear()
        if self.settings.show_key_codes:
            self.messages.notify_key(key)
        logger.debug("key 0x%03x", key)
        self.command_registry.execute(self, key)

    def _editing(self) -> SessionResult:
        self.running = True
        while self.running:
            self.render()
            key = self.keyboard.get_key_code()
            if key is None:
                continue
            if key == QUIT:
                self.running = False
                break
            try:
                self.handle_key(key)
            except FileError as e:
                logger.error("%s", e)
                self.running = False
                return SessionResult(error=e)
        return SessionResult()

    def run(self) -> SessionResult:
        """Run the editing loop with the terminal in raw mode.

        The terminal is restored on every way out of the loop.
        """
        self.terminal.setup()
        try:
            return self._editing()
        except KeyboardInterrupt:
            logger.info("Interrupted")
            return SessionResult()
        finally:
            self.terminal.cleanup()


def edit(path: str, settings: Optional[EditorSettings] = None, terminal=None) -> int:
    """Edit a file until the user quits.

    Returns:
        Process exit status: 0 on a normal quit, 1 if a file error ended
        the session.
    """
    editor = Editor(path, terminal=terminal, settings=settings)
    try:
        editor.load()
    except FileError as e:
        print(e, file=sys.stderr)
        return 1
    result = editor.run()
    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1
    return 0
