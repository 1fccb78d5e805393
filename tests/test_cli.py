"""Tests for the command line interface."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from docpolish.cli import main


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.tmp = Path(self._td.name)

    def tearDown(self) -> None:
        self._td.cleanup()

    def _write(self, name: str, content: str) -> str:
        path = self.tmp / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    def test_build_writes_page(self) -> None:
        src = self._write("in.html", "<h1><span>v1.0.0</span></h1><hr><p>x</p>")
        out = self.tmp / "doc"
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            code = main(["build", src, "--out", str(out)])
        self.assertEqual(code, 0)
        self.assertIn("Docs built", stdout.getvalue())
        self.assertIn("<p>x</p>", (out / "1.0.0.html").read_text(encoding="utf-8"))

    def test_polish_prints_page(self) -> None:
        src = self._write("in.html", "<h1><span>v2.0.0</span></h1><p>x</p>")
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            code = main(["polish", src])
        self.assertEqual(code, 0)
        self.assertTrue(stdout.getvalue().startswith("---\nid: docs\n"))
        self.assertIn("version: 2.0.0", stdout.getvalue())

    def test_polish_reports_structural_error(self) -> None:
        src = self._write("in.html", '<div class="highlight"><pre>x</pre></div>')
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            code = main(["polish", src])
        self.assertEqual(code, 1)
        self.assertIn("Error:", stderr.getvalue())

    def test_polish_missing_file(self) -> None:
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            code = main(["polish", str(self.tmp / "missing.html")])
        self.assertEqual(code, 1)
        self.assertIn("Error:", stderr.getvalue())

    def test_uncomment(self) -> None:
        src = self._write("README.md", "<!-- div -->\ntext\n<!-- /div -->\n")
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            code = main(["uncomment", src])
        self.assertEqual(code, 0)
        self.assertEqual(stdout.getvalue(), "<div>\ntext\n</div>\n")


if __name__ == "__main__":
    unittest.main()
