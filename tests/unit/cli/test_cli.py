"""CLI argument, exit-status and output-mode tests.

Verifies how ``lazydu.cli.main`` picks its input, merges options with the
config file and reports unreadable or malformed input.
"""

from __future__ import annotations

import io
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazydu import cli
from lazydu.size_format import SizeFormat
from lazydu.tree_model import SortKey
from lazydu.ui_theme import PLAIN_THEME

DU_OUTPUT = "4\t/srv/a/x\n8\t/srv/a\n2\t/srv/b\n20\t/srv\n"


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.tmp = Path(tmp.name)
        config_patch = mock.patch("lazydu.cli.load_config", return_value={})
        self.load_config = config_patch.start()
        self.addCleanup(config_patch.stop)

    def _du_file(self, text: str = DU_OUTPUT) -> Path:
        path = self.tmp / "du.txt"
        path.write_text(text, encoding="utf-8")
        return path

    def _run(self, argv: list[str]) -> tuple[int, str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch("sys.stdout", stdout), mock.patch("sys.stderr", stderr):
            status = cli.main(argv)
        return status, stdout.getvalue(), stderr.getvalue()

    def test_missing_or_extra_file_argument_is_usage_error(self) -> None:
        with mock.patch("lazydu.cli.run_browser") as run_browser:
            status, _out, err = self._run([])
            self.assertEqual(status, cli.EXIT_USAGE)
            self.assertIn("usage: lazydu", err)
            self.assertIn("expected exactly one FILE argument, got 0", err)

            status, _out, _err = self._run(["a", "b"])
            self.assertEqual(status, cli.EXIT_USAGE)
        run_browser.assert_not_called()

    def test_print_mode_writes_expanded_tree_and_skips_browser(self) -> None:
        path = self._du_file()
        with mock.patch("lazydu.cli.run_browser") as run_browser:
            status, out, _err = self._run(["-q", "--print", "--no-color", str(path)])

        run_browser.assert_not_called()
        self.assertEqual(status, cli.EXIT_OK)
        self.assertEqual(
            out.splitlines(),
            [
                "20  ▾ srv/",
                " 8    ▾ a/",
                " 4        x",
                " 2      b",
            ],
        )

    def test_print_mode_honors_sort_and_threshold(self) -> None:
        path = self._du_file()
        status, out, _err = self._run(["-q", "--print", "--sort", "size", "-t", "3", str(path)])

        self.assertEqual(status, cli.EXIT_OK)
        self.assertEqual(out.splitlines(), ["20  ▾ srv/", " 8    ▾ a/", " 4        x"])

    def test_format_error_exits_with_failure(self) -> None:
        path = self._du_file("4\t/elsewhere/x\n20\t/srv\n")
        with mock.patch("lazydu.cli.run_browser") as run_browser:
            status, _out, err = self._run(["-q", str(path)])

        run_browser.assert_not_called()
        self.assertEqual(status, cli.EXIT_FAILURE)
        self.assertIn("Format error: line 2 from the end: path has no parent entry", err)

    def test_empty_input_is_format_error(self) -> None:
        path = self._du_file("")
        status, _out, err = self._run(["-q", str(path)])
        self.assertEqual(status, cli.EXIT_FAILURE)
        self.assertIn("Format error: input is empty", err)

    def test_missing_file_exits_with_failure(self) -> None:
        missing = self.tmp / "missing.txt"
        status, _out, err = self._run(["-q", str(missing)])
        self.assertEqual(status, cli.EXIT_FAILURE)
        self.assertIn(f"Cannot read {missing}", err)

    def test_browser_receives_tree_and_display_options(self) -> None:
        path = self._du_file()
        with mock.patch("lazydu.cli.run_browser") as run_browser:
            status, _out, _err = self._run(["-q", "--human-readable", "--sort", "name", "--no-color", str(path)])

        self.assertEqual(status, cli.EXIT_OK)
        run_browser.assert_called_once()
        (tree,) = run_browser.call_args.args
        kwargs = run_browser.call_args.kwargs
        self.assertEqual(tree.root.full_name, "/srv")
        self.assertEqual(tree.node_count, 4)
        self.assertIs(kwargs["size_format"], SizeFormat.HUMAN)
        self.assertIs(kwargs["sort_key"], SortKey.NAME)
        self.assertIs(kwargs["theme"], PLAIN_THEME)

    def test_config_fills_options_not_given_on_command_line(self) -> None:
        path = self._du_file()
        self.load_config.return_value = {
            "absolute_threshold": 3,
            "human_readable": True,
            "sort": "size",
            "theme": "ocean",
        }
        with mock.patch("lazydu.cli.run_browser") as run_browser:
            self._run(["-q", "-t", "5", str(path)])

        (tree,) = run_browser.call_args.args
        kwargs = run_browser.call_args.kwargs
        self.assertEqual(tree.threshold, 5)
        self.assertEqual(tree.node_count, 2)
        self.assertIs(kwargs["size_format"], SizeFormat.HUMAN)
        self.assertIs(kwargs["sort_key"], SortKey.SIZE)
        self.assertEqual(kwargs["theme"].name, "ocean")

    def test_package_main_delegates_to_cli(self) -> None:
        import lazydu

        with mock.patch("lazydu.cli.main", return_value=7) as cli_main:
            self.assertEqual(lazydu.main(["x"]), 7)
        cli_main.assert_called_once_with(["x"])


if __name__ == "__main__":
    unittest.main()
