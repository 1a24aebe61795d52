"""
Tests for the document indexer.
"""

from pathlib import Path

import pytest

from sitescribe_core import indexer
from sitescribe_core.indexer import index_html, index_site, index_text, is_markup, is_supported
from sitescribe_core.models import HtmlRecord, TextRecord


@pytest.fixture
def site(tmp_path):
    (tmp_path / "index.html").write_text("<html><body><h1>Home</h1><p>Intro</p></body></html>", encoding="utf-8")
    (tmp_path / "about.htm").write_text("<h2>About</h2>", encoding="utf-8")
    (tmp_path / "style.css").write_text("body { color: red; }\nh1 { margin: 0; }", encoding="utf-8")
    (tmp_path / "notes.md").write_text("# Notes\r\nsecond line", encoding="utf-8")
    (tmp_path / "image.png").write_bytes(b"\x89PNG")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "page.html").write_text("<h1>Sub</h1>", encoding="utf-8")
    return tmp_path


class TestFileTypes:
    def test_supported_extensions(self):
        for name in ["a.html", "a.htm", "a.HTML", "a.css", "a.md"]:
            assert is_supported(name)
        for name in ["a.png", "a.txt", "a.html.bak", "a.js"]:
            assert not is_supported(name)

    def test_markup_extensions(self):
        assert is_markup("x.html")
        assert is_markup("x.HTM")
        assert not is_markup("x.css")
        assert not is_markup("x.md")


class TestIndexSite:
    def test_directory_walk_is_recursive_and_sorted(self, site):
        result = index_site(site)

        assert result.root_dir == str(site)
        assert [Path(f).relative_to(site).as_posix() for f in result.files] == [
            "about.htm", "index.html", "notes.md", "style.css", "sub/page.html",
        ]
        assert len(result.records) == len(result.files)

    def test_text_files_are_never_parsed_as_markup(self, site):
        result = index_site(site)
        by_name = {Path(r.file).name: r for r in result.records}

        assert isinstance(by_name["index.html"], HtmlRecord)
        assert isinstance(by_name["about.htm"], HtmlRecord)
        assert isinstance(by_name["style.css"], TextRecord)
        assert isinstance(by_name["notes.md"], TextRecord)
        assert by_name["notes.md"].lines == ["# Notes", "second line"]

    def test_single_file(self, site):
        result = index_site(site / "index.html")

        assert result.root_dir == str(site)
        assert result.files == [str(site / "index.html")]
        assert result.primary_document() == str(site / "index.html")

    def test_unsupported_single_file(self, site):
        result = index_site(site / "image.png")

        assert result.root_dir == str(site)
        assert result.files == []
        assert result.records == []
        assert result.primary_document() is None

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            index_site(tmp_path / "nope")

    def test_unreadable_file_is_skipped(self, site, monkeypatch):
        real_read = indexer.read_document

        def flaky_read(path):
            if str(path).endswith("about.htm"):
                raise PermissionError("Permission denied")
            return real_read(path)

        monkeypatch.setattr(indexer, "read_document", flaky_read)
        result = index_site(site)

        assert str(site / "about.htm") in result.files
        assert all(not r.file.endswith("about.htm") for r in result.records)
        assert len(result.records) == len(result.files) - 1

    def test_text_preview_is_bounded(self, tmp_path):
        (tmp_path / "long.md").write_text("\n".join(f"line {i}" for i in range(20)), encoding="utf-8")

        result = index_site(tmp_path, max_lines=5)

        assert result.records[0].lines == [f"line {i}" for i in range(5)]

    def test_primary_document_is_first_markup_file(self, site):
        result = index_site(site)
        assert result.primary_document() == str(site / "about.htm")


class TestIndexHtml:
    def test_descriptors_in_document_order(self):
        record = index_html(
            "page.html",
            '<body><h1 id="t">Hi</h1><p class="lead big">Text</p>'
            '<img src="a.png"><a href="/x">Link</a></body>',
        )

        assert [i.tag for i in record.items] == ["h1", "p", "img", "a"]
        h1, p, img, a = record.items
        assert h1.id == "t"
        assert h1.selector == "body > h1#t"
        assert p.class_name == "lead big"
        assert img.src == "a.png"
        assert a.href == "/x"
        assert a.text == "Link"

    def test_descriptor_wire_form(self):
        record = index_html("page.html", "<h1>Hi</h1>")
        assert record.items[0].to_dict() == {
            "type": "h1",
            "text": "Hi",
            "id": None,
            "className": None,
            "src": None,
            "href": None,
            "selector": "h1",
            "file": "page.html",
        }

    def test_headings_limit(self):
        record = index_html("p.html", "<h1>A</h1><h2>B</h2><h3>C</h3><h2>D</h2><h1>E</h1>")
        assert record.headings() == ["A", "B", "D"]
        assert record.headings(limit=1) == ["A"]

    def test_index_text_splits_crlf(self):
        record = index_text("a.css", "a\r\nb\nc", max_lines=10)
        assert record.lines == ["a", "b", "c"]
        assert record.first_line == "a"
