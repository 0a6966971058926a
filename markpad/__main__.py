"""markpad CLI entry point.

Allows running via `python -m markpad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .version import get_version_string

USAGE = """\
usage: markpad [--data-dir DIR] [--log-file PATH]
       markpad --render FILE
       markpad --version"""


def _configure_logging(log_file: Optional[str]) -> None:
    # The TUI owns the terminal, so logs only go to a file when asked for
    if not log_file:
        logging.getLogger("markpad").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def render_file(path: str) -> int:
    """Print the sanitized preview HTML for a Markdown file."""
    from .render import render_preview

    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        print(f"markpad: cannot read {path}: {e}", file=sys.stderr)
        return 1
    sys.stdout.write(render_preview(text))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing for version, render mode and storage options
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ("--help", "-h"):
        print(USAGE)
        return 0

    options = {"--data-dir": None, "--log-file": None, "--render": None}
    while args:
        flag = args.pop(0)
        if flag not in options or not args:
            print(USAGE, file=sys.stderr)
            return 2
        options[flag] = args.pop(0)

    _configure_logging(options["--log-file"])
    if options["--render"]:
        return render_file(options["--render"])

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .persistence import DocumentStore, LocalStorage
    from .textual_app import main as run_app

    storage = LocalStorage(options["--data-dir"])
    run_app(Editor(store=DocumentStore(storage)))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
