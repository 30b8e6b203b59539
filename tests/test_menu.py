"""
Integration Tests - Menu loop

Module: tests.test_menu

Drives TokenManagerApp end to end: scripted operator input, a real
tokens file in a temporary directory and a fixed clock.

Scenarios:
1. Add a generated token to an empty store
2. Statistics on one expired and one active token
3. Extend a token by 10 days
4. Invalid menu choice
5. Exit code and end of input
6. External edits picked up between iterations
7. Malformed records kept through a cancelled remove
"""

import io
import json
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from scripted_input import ScriptedInput
from token_manager.__main__ import main
from token_manager.cli.console import Console
from token_manager.cli.menu import MenuState, TokenManagerApp
from token_manager.core.constants import EXIT_EOF, EXIT_OK, SECONDS_PER_DAY
from token_manager.persistence.token_store import TokenStore

NOW = 1_700_000_000


class TestTokenManagerApp(unittest.TestCase):
    """Menu loop scenarios"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.tokens_file = Path(self.test_dir) / "database" / "tokens.lotus"
        self.output = io.StringIO()

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def make_app(self, *answers: str) -> TokenManagerApp:
        self.script = ScriptedInput(list(answers))
        console = Console(input_func=self.script, stream=self.output)
        store = TokenStore(self.tokens_file, console)
        return TokenManagerApp(store, console, clock=lambda: NOW)

    def write_tokens(self, data: dict) -> None:
        self.tokens_file.parent.mkdir(parents=True, exist_ok=True)
        self.tokens_file.write_text(json.dumps(data), encoding="utf-8")

    def read_tokens(self) -> dict:
        return json.loads(self.tokens_file.read_text(encoding="utf-8"))

    @property
    def text(self) -> str:
        return self.output.getvalue()

    def test_add_generated_token_to_empty_store(self):
        app = self.make_app("2", "", "Alice", "30", "", "7")
        self.assertEqual(app.run(), EXIT_OK)

        data = self.read_tokens()
        self.assertEqual(len(data), 1)
        token, record = next(iter(data.items()))
        self.assertTrue(token)
        self.assertEqual(record, {"expire": NOW + 30 * SECONDS_PER_DAY, "nameClient": "Alice"})
        self.assertIn("Changes saved", self.text)

    def test_statistics_do_not_write(self):
        self.write_tokens({
            "old": {"expire": NOW - 3600, "nameClient": "Bob"},
            "new": {"expire": NOW + 3600, "nameClient": "Alice"},
        })
        before = self.tokens_file.read_text(encoding="utf-8")

        app = self.make_app("6", "", "1", "", "7")
        app.run()

        self.assertIn("Total tokens: \033[0m2", self.text)
        self.assertIn("Active tokens: \033[0m1", self.text)
        self.assertIn("Expired tokens: \033[0m1", self.text)
        self.assertNotIn("Changes saved", self.text)
        self.assertEqual(self.tokens_file.read_text(encoding="utf-8"), before)

    def test_extend_by_ten_days(self):
        expire = NOW + 100
        self.write_tokens({"tok": {"expire": expire, "nameClient": "Alice"}})

        app = self.make_app("4", "tok", "2", "10", "", "7")
        app.run()

        self.assertEqual(self.read_tokens()["tok"]["expire"], expire + 864000)

    def test_remove_and_clean_persist(self):
        self.write_tokens({
            "old": {"expire": NOW - 3600, "nameClient": "Bob"},
            "keep": {"expire": NOW + 3600, "nameClient": "Alice"},
            "gone": {"expire": NOW + 3600, "nameClient": "Carol"},
        })

        app = self.make_app("3", "gone", "y", "", "5", "y", "", "7")
        app.run()

        self.assertEqual(list(self.read_tokens()), ["keep"])

    def test_cancelled_remove_keeps_malformed_records(self):
        self.write_tokens({
            "good": {"expire": NOW + 3600, "nameClient": "Alice"},
            "legacy": {"expire": "soon", "nameClient": "Bob"},
        })

        app = self.make_app("3", "good", "n", "", "7")
        app.run()

        self.assertEqual(self.read_tokens(), {
            "good": {"expire": NOW + 3600, "nameClient": "Alice"},
            "legacy": {"expire": "soon", "nameClient": "Bob"},
        })
        self.assertIn("Operation cancelled", self.text)

    def test_duplicate_add_does_not_change_file(self):
        self.write_tokens({"tok": {"expire": NOW, "nameClient": "Alice"}})
        app = self.make_app("2", "tok", "", "7")
        app.run()
        self.assertEqual(self.read_tokens(), {"tok": {"expire": NOW, "nameClient": "Alice"}})

    def test_invalid_choice(self):
        app = self.make_app("42", "", "7")
        self.assertEqual(app.run_once(), MenuState.MAIN_MENU)
        self.assertIn("Invalid option", self.text)
        self.assertFalse(self.tokens_file.exists())
        self.assertEqual(app.run_once(), MenuState.EXITING)

    def test_exit_skips_pause(self):
        app = self.make_app("7")
        self.assertEqual(app.run(), EXIT_OK)
        self.assertIn("Exiting...", self.text)
        self.assertNotIn("Press ENTER", self.text)

    def test_end_of_input_raises(self):
        app = self.make_app("1")
        with self.assertRaises(EOFError):
            app.run()

    def test_reloads_every_iteration(self):
        app = self.make_app("1", "", "1", "", "7")
        self.assertEqual(app.run_once(), MenuState.LISTING)
        self.assertIn("No tokens registered", self.text)

        self.write_tokens({"external": {"expire": NOW + 60, "nameClient": "Dana"}})
        app.run_once()
        self.assertIn("Dana", self.text)

    def test_save_failure_reported(self):
        blocker = Path(self.test_dir) / "blocker"
        blocker.write_text("file, not directory")
        self.tokens_file = blocker / "tokens.lotus"

        app = self.make_app("2", "tok", "Alice", "1", "", "7")
        app.run()

        self.assertIn("Error saving file", self.text)
        self.assertNotIn("Changes saved", self.text)


class TestMain(unittest.TestCase):
    """Tests for the process entry point"""

    def test_exit_choice_returns_zero(self):
        with patch("sys.stdin", io.StringIO("7\n")), patch("sys.stdout", new_callable=io.StringIO):
            self.assertEqual(main(), EXIT_OK)

    def test_end_of_input_returns_one(self):
        with patch("sys.stdin", io.StringIO("")), patch("sys.stdout", new_callable=io.StringIO):
            self.assertEqual(main(), EXIT_EOF)


if __name__ == "__main__":
    unittest.main()
