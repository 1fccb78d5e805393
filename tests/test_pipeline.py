"""Tests for the full rewrite pipeline."""

import unittest

from docpolish.dom import parse_html, to_html
from docpolish.passes import StructuralError
from docpolish.pipeline import MISSING_VERSION_WARNING, PASSES, polish, run_passes

BODY_IN = (
    '<div class="doc-container">'
    '<h3 id="user-content-_"><a href="#_">Lodash</a></h3><hr>'
    "<p><code>_.map</code> and <code>_.mapValues</code></p>"
    '<div class="highlight"><pre><div class="line"><span class="source js">'
    "<span class=\"string\"><span class=\"string\">'a'</span></span>"
    "</span></div></pre></div>"
    "</div>"
)

BODY_OUT = (
    '<div class="doc-container">'
    '<h3><a href="#lodash">Lodash</a></h3>'
    '<p><a href="#map"><code>_.map</code></a> and '
    '<a href="#mapValues"><code>_.mapValues</code></a></p>'
    "<div class=\"highlight js\"><pre><span class=\"string\">'a'</span></pre></div>"
    "</div>"
)


class TestPipeline(unittest.TestCase):
    def test_pass_order(self) -> None:
        names = [p.__name__ for p in PASSES]
        self.assertEqual(
            names,
            [
                "auto_link",
                "rename_anchor",
                "remove_horizontal_rules",
                "strip_renderer_attributes",
                "repair_headers",
                "tidy_highlights",
            ],
        )

    def test_run_passes(self) -> None:
        doc = run_passes(parse_html(BODY_IN))
        self.assertEqual(to_html(doc), BODY_OUT)

    def test_polish_renders_page(self) -> None:
        result = polish(parse_html(BODY_IN), "4.17.4")
        self.assertEqual(
            result.output,
            "---\n"
            "id: docs\n"
            "layout: docs\n"
            "title: Lodash Documentation\n"
            "version: 4.17.4\n"
            "---\n"
            "\n"
            "{% raw %}\n"
            f"{BODY_OUT}\n"
            "{% endraw %}\n",
        )
        self.assertEqual(result.version, "4.17.4")
        self.assertEqual(result.warnings, [])
        self.assertEqual(to_html(result.document), BODY_OUT)

    def test_missing_version_uses_null(self) -> None:
        result = polish(parse_html("<p>x</p>"), None)
        self.assertIn("version: null\n", result.output)
        self.assertIsNone(result.version)
        self.assertEqual(result.warnings, [MISSING_VERSION_WARNING])

    def test_structural_error_propagates(self) -> None:
        with self.assertRaises(StructuralError):
            polish(parse_html('<div class="highlight"><pre>x</pre></div>'), "1.0.0")

    def test_output_has_no_rules_or_renderer_ids(self) -> None:
        html = '<hr><h2 id="user-content-a"><a href="#a">A</a></h2><div><hr></div>'
        result = polish(parse_html(html), "1.0.0")
        self.assertNotIn("<hr", result.output)
        self.assertNotIn("user-content-", result.output)


if __name__ == "__main__":
    unittest.main()
