"""Loading and saving documents.

Loading ("snarfing") replays a file's bytes through the same editing
operations that handle keystrokes, so a loaded document is exactly what
typing the file would have produced. Saving writes every page's used
rows, trailing blanks trimmed, with a form feed after each page.
"""

import logging
import os
import shutil
import tempfile
from typing import Optional

from .constants import EditorConstants
from .errors import FileError
from .model import PageModel

logger = logging.getLogger(__name__)


def snarf_byte(model: PageModel, byte: int) -> bool:
    """Apply one byte of file content as if it had been typed.

    Returns:
        True if the byte filled the last cell of a row and moved the
        point onto the start of the next one.
    """
    if byte == EditorConstants.TAB:
        before = model.point
        model.tab()
    elif byte == EditorConstants.NEWLINE:
        model.newline()
        return False
    elif byte == EditorConstants.FORM_FEED:
        model.forward_page()
        return False
    else:
        before = model.point
        model.insert(byte)
    return model.point != before and model.cursor.column == 0


def load_bytes(model: PageModel, data: bytes) -> None:
    """Replay data into the model from the top of the first page.

    A row saved at full width already ends on the next row, so the
    newline written after it is skipped.
    """
    model.reset_cursor()
    wrapped = False
    for byte in data:
        if wrapped and byte == EditorConstants.NEWLINE:
            wrapped = False
            continue
        wrapped = snarf_byte(model, byte)
    model.reset_cursor()


def snarf(model: PageModel, path: str) -> bool:
    """Load a file into the model.

    Args:
        model: Document to load into.
        path: File to read.

    Returns:
        True if the file was read, False if it does not exist yet.

    Raises:
        FileError: The file exists but could not be read.
    """
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except FileNotFoundError:
        logger.info("%s does not exist, starting a new document", path)
        model.reset_cursor()
        return False
    except OSError as e:
        raise FileError(path, "read", e.strerror) from e
    load_bytes(model, data)
    logger.info("Loaded %d bytes from %s", len(data), path)
    return True


def encode_document(model: PageModel) -> bytes:
    """Serialize every page of the model to the on-disk format."""
    out = bytearray()
    for page in range(model.total_pages):
        for row in model.visible_rows(page):
            out += row
            out.append(EditorConstants.NEWLINE)
        out.append(EditorConstants.FORM_FEED)
    return bytes(out)


def backup_path(path: str, suffix: str = EditorConstants.BACKUP_SUFFIX) -> str:
    return path + suffix


def write_backup(path: str, suffix: str = EditorConstants.BACKUP_SUFFIX) -> Optional[str]:
    """Copy the file's current content next to it.

    Args:
        path: Document file to back up.
        suffix: Appended to path to name the backup.

    Returns:
        Path of the backup, or None if there was no file to copy.

    Raises:
        FileError: The file could not be read or the backup could not be
            written. The error names whichever of the two failed.
    """
    target = backup_path(path, suffix)
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except FileNotFoundError:
        logger.info("No existing %s to back up", path)
        return None
    except OSError as e:
        raise FileError(path, "read", e.strerror) from e
    try:
        with open(target, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise FileError(target, "write backup", e.strerror) from e
    logger.info("Backed up %s to %s", path, target)
    return target


def write_file(path: str, data: bytes) -> None:
    """Replace the file's content with data atomically."""
    dir_name = os.path.dirname(path) or '.'
    temp_filename = None
    try:
        # Write to a temporary file in the same directory so the rename is atomic
        with tempfile.NamedTemporaryFile(mode='wb', dir=dir_name,
                                         prefix='.' + os.path.basename(path) + '.',
                                         suffix='.tmp', delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(data)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        if os.path.exists(path):
            shutil.copymode(path, temp_filename)
        os.replace(temp_filename, path)
    except OSError as e:
        if temp_filename and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError:
                logger.warning("Could not remove %s", temp_filename)
        raise FileError(path, "write", e.strerror) from e


def save(model: PageModel, path: str, backup: bool = False,
         backup_suffix: str = EditorConstants.BACKUP_SUFFIX) -> None:
    """Write the whole document to path.

    Args:
        model: Document to save. Its cursor returns to the top of page 0.
        path: File to overwrite.
        backup: Copy the file's current content aside first.
        backup_suffix: Appended to path to name the backup.

    Raises:
        FileError: The backup or the save failed.
    """
    if backup:
        write_backup(path, backup_suffix)
    data = encode_document(model)
    write_file(path, data)
    model.reset_cursor()
    logger.info("Saved %d bytes to %s", len(data), path)
