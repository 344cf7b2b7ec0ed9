"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, TYPE_CHECKING

from .keyboard import KeyCode, ctrl, DEL

if TYPE_CHECKING:
    from .editor import Editor


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key: int):
        """Execute the command.

        Args:
            editor: Editor instance
            key: The key code that triggered this command
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key: int):
        self._move(editor, key)

    @abstractmethod
    def _move(self, editor: 'Editor', key: int):
        """Perform the movement."""
        pass


class ForwardCharCommand(MovementCommand):
    def _move(self, editor, key):
        editor.model.forward_char()


class BackwardCharCommand(MovementCommand):
    def _move(self, editor, key):
        editor.model.backward_char()


class ForwardLineCommand(MovementCommand):
    def _move(self, editor, key):
        editor.model.forward_line()


class BackwardLineCommand(MovementCommand):
    def _move(self, editor, key):
        editor.model.backward_line()


class StartOfLineCommand(MovementCommand):
    def _move(self, editor, key):
        editor.model.start_of_line()


class EndOfLineCommand(MovementCommand):
    def _move(self, editor, key):
        editor.model.end_of_line()


class HomeCommand(MovementCommand):
    def _move(self, editor, key):
        editor.model.home()


class EndCommand(MovementCommand):
    def _move(self, editor, key):
        editor.model.end()


class ForwardPageCommand(MovementCommand):
    def _move(self, editor, key):
        editor.model.forward_page()


class BackwardPageCommand(MovementCommand):
    def _move(self, editor, key):
        editor.model.backward_page()


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key: int):
        self._edit(editor, key)

    @abstractmethod
    def _edit(self, editor: 'Editor', key: int):
        """Perform the edit."""
        pass


class DeleteCharCommand(EditCommand):
    def _edit(self, editor, key):
        editor.model.delete()


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key):
        editor.model.backspace()


class TabCommand(EditCommand):
    def _edit(self, editor, key):
        editor.model.tab()


class KillLineCommand(EditCommand):
    def _edit(self, editor, key):
        editor.model.kill_line()


class NewlineCommand(EditCommand):
    def _edit(self, editor, key):
        editor.model.newline()


class TransposeCharsCommand(EditCommand):
    def _edit(self, editor, key):
        editor.model.transpose_chars()


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key):
        # insert() coerces anything outside printable ASCII to a blank
        editor.model.insert(key)


class SystemCommand(EditorCommand):
    """Base class for system commands like save."""

    def execute(self, editor: 'Editor', key: int):
        self._execute_system(editor, key)

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key: int):
        """Perform the system action."""
        pass


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key):
        editor.save()


class CommandRegistry:
    """Registry mapping key codes to commands."""

    def __init__(self):
        self._commands: Dict[int, EditorCommand] = {}
        self._default = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register(ctrl('a'), StartOfLineCommand())
        self.register(ctrl('b'), BackwardCharCommand())
        self.register(ctrl('e'), EndOfLineCommand())
        self.register(ctrl('f'), ForwardCharCommand())
        self.register(ctrl('n'), ForwardLineCommand())
        self.register(ctrl('p'), BackwardLineCommand())
        self.register(KeyCode.UP, BackwardLineCommand())
        self.register(KeyCode.DOWN, ForwardLineCommand())
        self.register(KeyCode.RIGHT, ForwardCharCommand())
        self.register(KeyCode.LEFT, BackwardCharCommand())
        self.register(KeyCode.HOME, HomeCommand())
        self.register(KeyCode.END, EndCommand())
        self.register(KeyCode.PAGE_UP, BackwardPageCommand())
        self.register(KeyCode.PAGE_DOWN, ForwardPageCommand())

        # Editing commands
        self.register(ctrl('d'), DeleteCharCommand())
        self.register(KeyCode.DELETE, DeleteCharCommand())
        self.register(DEL, BackspaceCommand())
        self.register(ctrl('i'), TabCommand())
        self.register(ctrl('k'), KillLineCommand())
        self.register(ctrl('m'), NewlineCommand())
        self.register(ctrl('t'), TransposeCharsCommand())

        # System commands
        self.register(ctrl('s'), SaveCommand())

    def register(self, key: int, command: EditorCommand):
        """Register a command for a key code."""
        self._commands[int(key)] = command

    def get_command(self, key: int) -> Optional[EditorCommand]:
        """Get the command bound to a key code."""
        return self._commands.get(int(key))

    def execute(self, editor: 'Editor', key: int):
        """Execute the command for the given key code.

        Keys with no binding are inserted as text.
        """
        command = self.get_command(key) or self._default
        command.execute(editor, key)
