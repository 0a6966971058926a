"""Local persistence for the document buffer.

A small key-value store in the user's data directory.  Each key is one file
holding the raw value, so the stored text equals the buffer verbatim.
Failures are logged and otherwise ignored: saving is best effort and a failed
load looks the same as nothing having been saved.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class LocalStorage:
    """Key-value storage backed by one file per key."""

    def __init__(self, directory: Optional[Union[str, Path]] = None):
        """Initialize storage.

        Args:
            directory: Where values are kept.  Defaults to the
                platform-appropriate user data directory.
        """
        if directory is None:
            directory = platformdirs.user_data_dir(
                EditorConstants.APP_NAME, EditorConstants.APP_AUTHOR
            )
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        return self._directory / (key + EditorConstants.STORAGE_SUFFIX)

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if missing or unreadable."""
        path = self.path_for(key)
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return None

    def set_item(self, key: str, value: str) -> bool:
        """Overwrite the value for ``key`` atomically.

        Returns:
            True if the write succeeded, False otherwise.
        """
        path = self.path_for(key)
        temp_filename = None
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            # Write to temp file first, then rename for atomicity
            with tempfile.NamedTemporaryFile(
                mode='w',
                encoding='utf-8',
                newline='',
                dir=self._directory,
                suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                delete=False,
            ) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(value)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_filename, path)
            return True
        except (OSError, UnicodeEncodeError) as e:
            logger.warning(f"Could not save {path}: {e}")
            if temp_filename is not None:
                try:
                    os.remove(temp_filename)
                except OSError:
                    pass
            return False


class DocumentStore:
    """Saves and restores the document under a fixed key."""

    def __init__(self, storage: Optional[LocalStorage] = None,
                 key: str = EditorConstants.STORAGE_KEY):
        self.storage = storage if storage is not None else LocalStorage()
        self.key = key

    def save(self, text: str) -> bool:
        return self.storage.set_item(self.key, text)

    def load(self) -> Optional[str]:
        return self.storage.get_item(self.key)
