#!/usr/bin/env python3
"""Pagepad - a paged plain-text editor.

Usage:
    python main.py FILE

Controls:
    Arrow keys, Ctrl-B/F/N/P: Move the cursor
    PageUp/PageDown: Previous/next page
    Ctrl-S: Save (the first save keeps a FILE~ backup)
    Ctrl-Q: Quit
    Type to insert text
"""

import sys

from pagepad.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
