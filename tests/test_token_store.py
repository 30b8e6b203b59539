"""
Unit Tests - JSON persistence

Module: tests.test_token_store

Covers:
- JSONStore missing file, invalid JSON, non-object documents
- On-disk format (indentation, slashes, non-ASCII, trailing newline)
- TokenStore graceful load failures and per-record validation
- Save with directory creation, failure reporting, round trip
"""

import io
import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from token_manager.cli.console import Console
from token_manager.core.token_table import TokenTable
from token_manager.persistence.json_store import (
    JSONStore,
    JSONStoreFormatError,
    JSONStoreIOError,
)
from token_manager.persistence.token_store import TokenStore

NOW = 1_700_000_000


def silent_console() -> Console:
    return Console(input_func=lambda: "", stream=io.StringIO())


class TestJSONStore(unittest.TestCase):
    """Test suite for JSONStore"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.store_path = Path(self.test_dir) / "store.json"

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_missing_file_is_empty_without_creating(self):
        store = JSONStore(self.store_path)
        self.assertEqual(store.load(), {})
        self.assertFalse(self.store_path.exists())

    def test_save_and_load(self):
        store = JSONStore(self.store_path)
        store.save({"name": "Alice", "age": 30})
        self.assertEqual(store.load(), {"name": "Alice", "age": 30})

    def test_invalid_json_raises_error(self):
        self.store_path.write_text("{invalid json}")
        with self.assertRaises(JSONStoreFormatError):
            JSONStore(self.store_path).load()

    def test_non_object_raises_error(self):
        self.store_path.write_text("[1, 2, 3]")
        with self.assertRaises(JSONStoreFormatError):
            JSONStore(self.store_path).load()

    def test_output_format(self):
        store = JSONStore(self.store_path)
        store.save({"url": "https://example.com/a", "name": "José"})
        content = self.store_path.read_text(encoding="utf-8")
        self.assertEqual(
            content,
            '{\n    "url": "https://example.com/a",\n    "name": "José"\n}\n',
        )

    def test_creates_parent_directories(self):
        nested = Path(self.test_dir) / "a" / "b" / "store.json"
        JSONStore(nested).save({"x": 1})
        self.assertTrue(nested.exists())

    def test_atomic_write_leaves_no_temp_file(self):
        JSONStore(self.store_path).save({"value": 42})
        self.assertEqual(os.listdir(self.test_dir), ["store.json"])

    def test_write_failure_raises_io_error(self):
        blocker = Path(self.test_dir) / "blocker"
        blocker.write_text("not a directory")
        with self.assertRaises(JSONStoreIOError):
            JSONStore(blocker / "store.json").save({"x": 1})


class TestTokenStore(unittest.TestCase):
    """Test suite for TokenStore"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.tokens_file = Path(self.test_dir) / "database" / "tokens.lotus"
        self.output = io.StringIO()
        self.console = Console(input_func=lambda: "", stream=self.output)
        self.store = TokenStore(self.tokens_file, self.console)

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def write_raw(self, content: str) -> None:
        self.tokens_file.parent.mkdir(parents=True, exist_ok=True)
        self.tokens_file.write_text(content, encoding="utf-8")

    def test_missing_file_is_empty_table(self):
        table = self.store.load()
        self.assertTrue(table.is_empty())
        self.assertEqual(self.output.getvalue(), "")

    def test_parse_error_reported_and_empty(self):
        self.write_raw("{not json")
        table = self.store.load()
        self.assertTrue(table.is_empty())
        self.assertIn("Error reading tokens", self.output.getvalue())

    def test_top_level_array_reported_and_empty(self):
        self.write_raw('["a", "b"]')
        self.assertTrue(self.store.load().is_empty())
        self.assertIn("Error reading tokens", self.output.getvalue())

    def test_load_preserves_file_order(self):
        self.write_raw(json.dumps({
            "zzz": {"expire": NOW, "nameClient": "Zed"},
            "aaa": {"expire": NOW, "nameClient": "Amy"},
        }))
        self.assertEqual(list(self.store.load()), ["zzz", "aaa"])

    def test_malformed_records_skipped_individually(self):
        self.write_raw(json.dumps({
            "good": {"expire": NOW, "nameClient": "Alice"},
            "not-an-object": "oops",
            "bad-expire": {"expire": "soon", "nameClient": "Bob"},
            "defaults": {"nameClient": ""},
        }))
        table = self.store.load()

        self.assertEqual(list(table), ["good", "defaults"])
        self.assertEqual(table.get("defaults").expire, 0)
        self.assertEqual(table.get("defaults").name_client, "N/A")
        self.assertEqual(
            table.passthrough,
            {"not-an-object": "oops", "bad-expire": {"expire": "soon", "nameClient": "Bob"}},
        )
        self.assertIn("Ignoring malformed token", self.output.getvalue())

    def test_malformed_records_survive_save(self):
        raw = {
            "legacy": {"expire": "soon", "nameClient": "Bob"},
            "not-an-object": ["x", 1],
        }
        self.write_raw(json.dumps({"good": {"expire": NOW, "nameClient": "Alice"}, **raw}))

        table = self.store.load()
        table.remove("good")
        self.assertTrue(self.store.save(table))

        self.assertEqual(json.loads(self.tokens_file.read_text(encoding="utf-8")), raw)

    def test_save_creates_directory_and_formats(self):
        table = TokenTable()
        table.add("token/with/slashes", "Alice", NOW)

        self.assertTrue(self.store.save(table))
        content = self.tokens_file.read_text(encoding="utf-8")
        self.assertEqual(
            content,
            '{\n'
            '    "token/with/slashes": {\n'
            f'        "expire": {NOW},\n'
            '        "nameClient": "Alice"\n'
            '    }\n'
            '}\n',
        )

    def test_save_failure_reported(self):
        blocker = Path(self.test_dir) / "blocker"
        blocker.write_text("file, not directory")
        store = TokenStore(blocker / "tokens.lotus", self.console)

        table = TokenTable()
        table.add("abc", "Alice", NOW)
        self.assertFalse(store.save(table))
        self.assertIn("Error saving file", self.output.getvalue())

    def test_save_failure_on_replace(self):
        table = TokenTable()
        table.add("abc", "Alice", NOW)
        with patch("pathlib.Path.replace", side_effect=PermissionError("denied")):
            self.assertFalse(self.store.save(table))
        self.assertFalse(self.tokens_file.exists())

    def test_round_trip(self):
        table = TokenTable()
        table.add("first", "Alice", NOW + 100)
        table.add("second", "Bob", (NOW - 100) * 1000)
        table.add("third", "Çelik", 0)

        self.assertTrue(self.store.save(table))
        first_content = self.tokens_file.read_text(encoding="utf-8")
        loaded = self.store.load()
        self.assertEqual(loaded, table)

        self.assertTrue(self.store.save(loaded))
        self.assertEqual(self.tokens_file.read_text(encoding="utf-8"), first_content)

    def test_default_path(self):
        store = TokenStore(console=silent_console())
        self.assertEqual(store.file_path, Path("database") / "tokens.lotus")


if __name__ == "__main__":
    unittest.main()
