"""Tests for level-3 header repair."""

import unittest

from docpolish.dom import parse_html, to_html
from docpolish.passes.headers import (
    flatten_code_emphasis,
    rebuild_trailing_paragraphs,
    remove_leading_paragraphs,
    repair_headers,
)


def _run(html: str, rewrite=repair_headers) -> str:
    doc = parse_html(html)
    rewrite(doc)
    return to_html(doc)


class TestRemoveLeadingParagraphs(unittest.TestCase):
    def test_removes_paragraph_before_empty_paragraph(self) -> None:
        html = "<div><p>stray</p><p></p><h3>T</h3></div>"
        self.assertEqual(
            _run(html, remove_leading_paragraphs),
            "<div><p></p><h3>T</h3></div>",
        )

    def test_requires_empty_trigger(self) -> None:
        html = "<div><p>a</p><p>b</p><h3>T</h3></div>"
        self.assertEqual(_run(html, remove_leading_paragraphs), html)

    def test_keeps_non_paragraph_before_empty_paragraph(self) -> None:
        html = '<div class="doc-container">x</div><p></p><h3>T</h3>'
        self.assertEqual(_run(html, remove_leading_paragraphs), html)

    def test_ignores_other_headings(self) -> None:
        html = "<div><p>a</p><p></p><h2>T</h2></div>"
        self.assertEqual(_run(html, remove_leading_paragraphs), html)


class TestRebuildTrailingParagraphs(unittest.TestCase):
    def test_reconstructs_fragmented_inline_content(self) -> None:
        html = (
            "<div><h3>T</h3>first <code>x</code> middle <em>y</em> last<p></p></div>"
        )
        self.assertEqual(
            _run(html, rebuild_trailing_paragraphs),
            "<div><h3>T</h3>first <p><code>x</code> middle <em>y</em> last</p></div>",
        )

    def test_stops_at_paragraph_boundary(self) -> None:
        html = "<div><h3>T</h3><p>keep</p>a<b>b</b>c<p></p></div>"
        self.assertEqual(
            _run(html, rebuild_trailing_paragraphs),
            "<div><h3>T</h3><p>keep</p>a<p><b>b</b>c</p></div>",
        )

    def test_empty_paragraph_without_h3_is_untouched(self) -> None:
        html = "<div><h2>T</h2>a<b>b</b>c<p></p></div>"
        self.assertEqual(_run(html, rebuild_trailing_paragraphs), html)

    def test_paragraph_right_after_h3(self) -> None:
        html = "<div><h3>T</h3><p></p></div>"
        self.assertEqual(_run(html, rebuild_trailing_paragraphs), html)

    def test_h3_with_leading_sibling_stays_outside_paragraph(self) -> None:
        html = "<div>\n<h3>T</h3><p></p></div>"
        self.assertEqual(_run(html, rebuild_trailing_paragraphs), html)

    def test_boundary_paragraph_is_never_moved(self) -> None:
        html = "<div><h3>T</h3>a<p>keep</p><p></p></div>"
        self.assertEqual(_run(html, rebuild_trailing_paragraphs), html)


class TestFlattenCodeEmphasis(unittest.TestCase):
    def test_restores_underscores(self) -> None:
        html = '<h3><a href="#x"><code>_.from<em>pairs</em></code></a></h3>'
        self.assertEqual(
            _run(html, flatten_code_emphasis),
            '<h3><a href="#x"><code>_.from_pairs_</code></a></h3>',
        )

    def test_ignores_code_outside_h3(self) -> None:
        html = "<p><code>a<em>b</em></code></p><h3><em>c</em></h3>"
        self.assertEqual(_run(html, flatten_code_emphasis), html)


class TestRepairHeaders(unittest.TestCase):
    def test_full_repair(self) -> None:
        html = (
            "<div><p>x</p><p></p>"
            '<h3><a href="#a"><code>_.a<em>b</em></code></a></h3>'
            "see <code>c</code> here<p></p></div>"
        )
        self.assertEqual(
            _run(html),
            '<div><p></p><h3><a href="#a"><code>_.a_b_</code></a></h3>'
            "see <p><code>c</code> here</p></div>",
        )


if __name__ == "__main__":
    unittest.main()
