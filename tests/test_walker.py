"""Tests for tree walking, output layout and the table of contents."""

import pytest

from orchdocs.exceptions import SourceNotFoundError, UnsafeCleanError
from orchdocs.walker import (
    find_source_files,
    generate_docs,
    generate_toc,
    group_by_directory,
    module_name,
)


class TestModuleName:
    def test_nested_directories(self):
        path = "/work/project/src/main/resources/com/acme/util/helper.js"
        assert module_name(path) == "com.acme.util"

    def test_windows_separators(self):
        path = "C:\\work\\src\\main\\resources\\com\\acme\\helper.js"
        assert module_name(path) == "com.acme"

    def test_trailing_base_name_is_dropped(self):
        path = "/work/src/main/resources/com/acme/widget/widget.js"
        assert module_name(path) == "com.acme"

    def test_partial_segment_is_kept(self):
        path = "/work/src/main/resources/com/mywidget/widget.js"
        assert module_name(path) == "com.mywidget"

    def test_outside_root_is_unknown(self):
        assert module_name("/work/lib/helper.js") == "unknown"

    def test_file_directly_under_root_is_unknown(self):
        assert module_name("/work/src/main/resources/helper.js") == "unknown"

    def test_custom_root_and_extension(self):
        path = "/work/lib/actions/net/dns/lookup.action.js"
        assert module_name(path, "lib/actions", ".action.js") == "net.dns"


def test_find_source_files_sorted_and_filtered(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "a").mkdir()
    (tmp_path / "b" / "z.js").write_text("")
    (tmp_path / "a" / "y.js").write_text("")
    (tmp_path / "a" / "notes.txt").write_text("")
    (tmp_path / "top.js").write_text("")

    files = find_source_files(tmp_path, ".js")
    assert [f.relative_to(tmp_path).as_posix() for f in files] == [
        "top.js",
        "a/y.js",
        "b/z.js",
    ]


def test_find_source_files_skips_output_dir(tmp_path):
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "stale.js").write_text("")
    (tmp_path / "action.js").write_text("")

    files = find_source_files(tmp_path, ".js", exclude=tmp_path / "docs")
    assert [f.name for f in files] == ["action.js"]


def test_group_by_directory_keeps_order(tmp_path):
    files = [tmp_path / "a" / "2.js", tmp_path / "b" / "1.js", tmp_path / "a" / "1.js"]
    groups = group_by_directory(files)
    assert list(groups) == [tmp_path / "a", tmp_path / "b"]
    assert groups[tmp_path / "a"] == [tmp_path / "a" / "2.js", tmp_path / "a" / "1.js"]


class TestGenerateDocs:
    def test_layout(self, source_tree, tmp_path):
        docs = tmp_path / "docs"
        result = generate_docs(source_tree, docs)

        class_page = docs / "com" / "acme" / "widgets" / "Widget.md"
        module_page = docs / "com" / "acme" / "vms" / "vms.md"
        assert result.written == [class_page, module_page]
        assert result.toc == docs / "README.md"

        assert [c.name for c in result.class_docs] == ["Widget"]
        assert [m.name for m in result.module_docs] == ["findVm", "powerOn"]

    def test_class_page(self, source_tree, tmp_path):
        docs = tmp_path / "docs"
        generate_docs(source_tree, docs)

        text = (docs / "com" / "acme" / "widgets" / "Widget.md").read_text()
        assert text.startswith("# Class `Widget`\n\nModule: `com.acme.widgets`")
        assert text == text.strip()

    def test_flat_directory_merged(self, source_tree, tmp_path):
        docs = tmp_path / "docs"
        generate_docs(source_tree, docs)

        text = (docs / "com" / "acme" / "vms" / "vms.md").read_text()
        assert text.startswith("# Module: `com.acme.vms`\n\n## Actions\n\n")
        assert text.count("## Actions") == 1
        assert text.index("`findVm()`") < text.index("`powerOn()`")
        assert text == text.strip()

    def test_toc(self, source_tree, tmp_path):
        docs = tmp_path / "docs"
        generate_docs(source_tree, docs)

        assert (docs / "README.md").read_text() == "\n".join(
            [
                "# 📚 Table of Contents",
                "",
                "- **com**",
                "  - **acme**",
                "    - **vms**",
                "      - [vms](./com/acme/vms/vms)",
                "    - **widgets**",
                "      - [Widget](./com/acme/widgets/Widget)",
                "",
            ]
        )

    def test_flat_files_at_source_root(self, tmp_path):
        source = tmp_path / "actions"
        source.mkdir()
        (source / "ping.js").write_text("/** Ping. */\n(function () {});\n")

        docs = tmp_path / "docs"
        result = generate_docs(source, docs)
        assert result.written == [docs / "actions.md"]
        assert result.module_docs[0].module == "unknown"

    def test_output_inside_source_is_skipped(self, source_tree):
        docs = source_tree / "docs"
        docs.mkdir()
        (docs / "old.js").write_text("/** Old. */\n(function () {});\n")

        result = generate_docs(source_tree, docs)
        assert "old" not in [m.name for m in result.module_docs]

    def test_missing_source(self, tmp_path):
        with pytest.raises(SourceNotFoundError):
            generate_docs(tmp_path / "missing", tmp_path / "docs")
        assert not (tmp_path / "docs").exists()

    def test_clean_removes_stale_pages(self, source_tree, tmp_path):
        docs = tmp_path / "docs"
        docs.mkdir()
        (docs / "stale.md").write_text("old")

        generate_docs(source_tree, docs, clean=True)
        assert not (docs / "stale.md").exists()
        assert "stale" not in (docs / "README.md").read_text()

    def test_clean_refuses_to_remove_sources(self, source_tree):
        with pytest.raises(UnsafeCleanError):
            generate_docs(source_tree, source_tree.parent, clean=True)
        assert source_tree.exists()


def test_toc_skips_non_markdown_and_itself(tmp_path):
    (tmp_path / "guide.md").write_text("# Guide")
    (tmp_path / "notes.txt").write_text("")
    (tmp_path / "README.md").write_text("old toc")

    generate_toc(tmp_path)
    toc = (tmp_path / "README.md").read_text()
    assert "- [guide](./guide)" in toc
    assert "README" not in toc
    assert "notes" not in toc
    assert ".md)" not in toc
