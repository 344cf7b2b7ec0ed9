"""Pagepad - a paged plain-text terminal editor."""

import logging

from .errors import FileError, PagepadError
from .model import PageModel

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'FileError',
    'PageModel',
    'PagepadError',
]
