"""Tests for Netscape HTML export."""

from blastmarks import Bookmark, BookmarkDirectory, HTMLExporter, count_items, export_to_html


def test_export_nested_tree(populated_manager):
    html = HTMLExporter(populated_manager.root).export()
    lines = html.split("\n")

    assert lines[0] == "<!DOCTYPE NETSCAPE-Bookmark-file-1>"
    assert "\t<DT><H3>Work</H3>" in lines
    assert '\t\t<DT><A HREF="https://docs.python.org">Docs</A>' in lines
    assert "\t\t<DT><H3>Tools</H3>" in lines
    assert '\t\t\t<DT><A HREF="https://bugs.python.org">Tracker</A>' in lines
    assert '\t<DT><A HREF="https://news.ycombinator.com">News</A>' in lines
    assert lines[-1] == "</DL><p>"


def test_export_preserves_order(populated_manager):
    html = HTMLExporter(populated_manager.root).export()

    assert html.index("Work") < html.index("Docs") < html.index("Tracker") < html.index("News")


def test_export_escapes(manager):
    manager.root.add_node(Bookmark.create('Q&A <"best">', "http://x?a=1&b=2"))

    html = HTMLExporter(manager.root).export()

    assert "Q&amp;A &lt;&quot;best&quot;&gt;" in html
    assert 'HREF="http://x?a=1&amp;b=2"' in html


def test_export_empty_directory(manager):
    manager.root.add_node(BookmarkDirectory.create("Empty", "empty"))

    html = HTMLExporter(manager.root).export()

    assert "\t<DT><H3>Empty</H3>\n\t<DL><p>\n\t</DL><p>" in html


def test_count_items(populated_manager):
    assert count_items(populated_manager.root) == (3, 2)


def test_export_to_html_writes_file(tmp_path, populated_manager):
    output = tmp_path / "out.html"

    counts = export_to_html(populated_manager, output_path=output)

    assert counts == (3, 2)
    assert output.read_text(encoding="utf-8") == HTMLExporter(populated_manager.root).export()


def test_export_to_html_default_name(tmp_path, monkeypatch, manager):
    monkeypatch.chdir(tmp_path)

    export_to_html(manager)

    files = list(tmp_path.glob("bookmarks_*.html"))
    assert len(files) == 1
