from mdwiki.core.render import render_markdown, sanitize_html
from mdwiki.models import Page


def test_render_basic_markdown():
    html = render_markdown("# Title\n\nSome *emphasis* and a [link](https://example.test).")
    assert '<h1 id="title">Title</h1>' in html
    assert "<em>emphasis</em>" in html
    assert 'href="https://example.test"' in html
    assert 'rel="nofollow noopener noreferrer"' in html


def test_render_tables_and_fenced_code():
    raw = "| a | b |\n|---|---|\n| 1 | 2 |\n\n```\nprint('hi')\n```\n"
    html = render_markdown(raw)
    assert "<table>" in html
    assert "<td>1</td>" in html
    assert "<pre><code>" in html


def test_render_strips_scripts_and_event_handlers():
    raw = "hello <script>alert(1)</script>\n\n<img src=\"x.png\" onerror=\"alert(2)\">"
    html = render_markdown(raw)
    assert "<script" not in html
    assert "alert(1)" not in html
    assert "onerror" not in html
    assert 'src="x.png"' in html


def test_render_drops_javascript_links():
    html = render_markdown('<a href="javascript:alert(1)">click</a>')
    assert "javascript:" not in html
    assert "click" in html


def test_sanitize_html_keeps_plain_text():
    assert sanitize_html("<p>plain</p>") == "<p>plain</p>"


def test_render_empty():
    assert render_markdown("") == ""


def test_page_process_markdown_fills_body():
    page = Page(path="/tmp/x", uri="/x", raw="**bold**")
    assert page.process_markdown() is page
    assert page.body == "<p><strong>bold</strong></p>"


def test_page_crumbs():
    page = Page(path="/tmp/a/b/c", uri="/a/b/c", raw="")
    assert [(c.name, c.uri) for c in page.crumbs()] == [("home", "/"), ("a", "/a"), ("b", "/a/b")]
