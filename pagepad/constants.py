"""Constants and configuration for the pagepad editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Document layout
    TOTAL_PAGES = 8  # Pages in every document
    TAB_WIDTH = 8  # Tab stops every N columns
    STATUS_ROWS = 1  # Terminal rows reserved below the page

    # Bytes
    BLANK = 0x20
    PRINTABLE_MIN = 0x20
    PRINTABLE_MAX = 0x7E
    TAB = 0x09
    NEWLINE = 0x0A
    FORM_FEED = 0x0C

    # File operations
    BACKUP_SUFFIX = "~"  # Appended to the filename for the first-save backup

    # Settings
    CONFIG_APP_NAME = "pagepad"
    SETTINGS_FILENAME = "settings.json"
    LOG_ENV_VAR = "PAGEPAD_LOG"

    # Status messages
    SAVED_MESSAGE = "Saved {}"
    NEW_FILE_MESSAGE = "New file {}"


def bowdlerize(byte: int) -> int:
    """Return byte if printable ASCII, else a space."""
    if EditorConstants.PRINTABLE_MIN <= byte <= EditorConstants.PRINTABLE_MAX:
        return byte
    return EditorConstants.BLANK
