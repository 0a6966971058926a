#!/usr/bin/env python3
"""markpad - A Markdown editor with live preview.

Usage:
    python main.py [--data-dir DIR] [--log-file PATH]

Controls:
    Ctrl-B: Bold
    Ctrl-I: Italic
    Ctrl-Q: Quit
    Toolbar buttons insert headings, lists, links, code blocks and tables;
    the Preview button shows the rendered document.
"""

import sys

from markpad.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
