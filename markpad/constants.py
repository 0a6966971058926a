"""Constants and configuration for the markpad editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Application identity (used for the platformdirs data directory)
    APP_NAME = "markpad"
    APP_AUTHOR = "markpad"

    # Persistence
    STORAGE_KEY = "md-editor-content"  # Fixed key for the document text
    STORAGE_SUFFIX = ".md"  # One file per key: <data dir>/<key>.md
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Document shown when nothing has been saved yet
    DEFAULT_MARKDOWN = (
        "# Welcome 👋\n"
        "This is a **simple Markdown editor** with live preview.\n"
        "\n"
        "- Open the preview with the eye button on the right\n"
        "- The view splits side by side on wide screens\n"
        "\n"
        "**Bold**, *Italic*, `Code`\n"
    )

    # Markdown transform: tables + fenced code (extra), heading ids (toc).
    # No nl2br, single newlines stay soft breaks.
    MARKDOWN_EXTENSIONS = ["extra", "sane_lists", "toc"]
    MARKDOWN_EXTENSION_CONFIGS = {
        "toc": {"permalink": False},
    }

    # Sanitizer allow-lists
    ALLOWED_TAGS = [
        "a", "abbr", "blockquote", "br", "code", "dd", "del", "div", "dl",
        "dt", "em", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "img", "li",
        "ol", "p", "pre", "span", "strong", "sup", "table", "tbody", "td",
        "th", "thead", "tr", "ul",
    ]
    ALLOWED_ATTRIBUTES = {
        "*": ["id", "class", "title"],
        "a": ["href", "title", "rel"],
        "img": ["src", "alt", "title"],
        "th": ["align"],
        "td": ["align"],
        "ol": ["start"],
    }
    ALLOWED_PROTOCOLS = ["http", "https", "mailto"]

    # UI
    TOGGLE_BUTTON_ID = "toggle"  # Visibility toggle, excluded from formatting dispatch
    SPLIT_LAYOUT_CLASS = "is-split"
    STATS_FORMAT = "{words} words · {chars} characters · {lines} lines"
    FOOTER_HINT = "Tip: content is saved locally as you type."
