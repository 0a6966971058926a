"""Unit tests for document persistence."""

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from markpad.constants import EditorConstants
from markpad.persistence import DocumentStore, LocalStorage


class TestLocalStorage(unittest.TestCase):
    """Test the key-value storage."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.storage = LocalStorage(self.temp_dir)

    def tearDown(self):
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_set_and_get(self):
        self.assertTrue(self.storage.set_item("key", "value"))
        self.assertEqual(self.storage.get_item("key"), "value")

    def test_get_missing_key(self):
        self.assertIsNone(self.storage.get_item("missing"))

    def test_overwrite(self):
        self.storage.set_item("key", "first")
        self.storage.set_item("key", "second")
        self.assertEqual(self.storage.get_item("key"), "second")

    def test_value_stored_verbatim(self):
        """The file holds exactly the text, line endings included."""
        text = "# Título\r\nline two\n\n✓ done"
        self.storage.set_item("doc", text)

        with open(self.storage.path_for("doc"), 'rb') as f:
            self.assertEqual(f.read().decode('utf-8'), text)
        self.assertEqual(self.storage.get_item("doc"), text)

    def test_no_temp_files_left_behind(self):
        self.storage.set_item("doc", "content")
        self.assertEqual(os.listdir(self.temp_dir), ["doc.md"])

    def test_creates_missing_directory(self):
        nested = Path(self.temp_dir) / "a" / "b"
        storage = LocalStorage(nested)
        self.assertTrue(storage.set_item("doc", "x"))
        self.assertTrue((nested / "doc.md").exists())

    def test_save_failure_is_reported_as_false(self):
        """Saving below a regular file fails without raising."""
        blocker = Path(self.temp_dir) / "not_a_dir"
        blocker.write_text("")
        storage = LocalStorage(blocker / "sub")

        with self.assertLogs("markpad.persistence", level="WARNING"):
            self.assertFalse(storage.set_item("doc", "text"))

    def test_unencodable_text_is_dropped(self):
        """A lone surrogate cannot be written as UTF-8; the save just fails."""
        self.storage.set_item("doc", "previous")

        with self.assertLogs("markpad.persistence", level="WARNING"):
            self.assertFalse(self.storage.set_item("doc", "bad \ud800 char"))

        self.assertEqual(self.storage.get_item("doc"), "previous")
        self.assertEqual(os.listdir(self.temp_dir), ["doc.md"])

    def test_read_failure_is_absence(self):
        os.mkdir(self.storage.path_for("doc"))

        with self.assertLogs("markpad.persistence", level="WARNING"):
            self.assertIsNone(self.storage.get_item("doc"))

    def test_default_directory_uses_platformdirs(self):
        with patch("markpad.persistence.platformdirs.user_data_dir",
                   return_value=self.temp_dir) as user_data_dir:
            storage = LocalStorage()
        user_data_dir.assert_called_once_with(
            EditorConstants.APP_NAME, EditorConstants.APP_AUTHOR
        )
        self.assertEqual(storage.directory, Path(self.temp_dir))


class TestDocumentStore(unittest.TestCase):
    """Test saving the document under the fixed key."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.store = DocumentStore(LocalStorage(self.temp_dir))

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_round_trip(self):
        text = "# Notes\n\n- one\n- two\n"
        self.store.save(text)
        self.assertEqual(self.store.load(), text)

    def test_load_before_save(self):
        self.assertIsNone(self.store.load())

    def test_empty_text_is_not_absence(self):
        self.store.save("")
        self.assertEqual(self.store.load(), "")

    def test_uses_fixed_key(self):
        self.store.save("x")
        expected = Path(self.temp_dir) / (EditorConstants.STORAGE_KEY + ".md")
        self.assertTrue(expected.exists())


if __name__ == '__main__':
    unittest.main()
