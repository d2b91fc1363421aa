"""
Tests for document and project scanning.
"""
from pathlib import Path

import pytest

from keyscope.frameworks.next_intl import NextIntlFramework
from keyscope.log import LoggingErrorReporter
from keyscope.models import REWRITE_SOURCE_SOURCE, REWRITE_SOURCE_WRITE, KeyInDocument, RewriteKeyContext
from keyscope.scanner import (
    discover_scopes,
    language_id_for_path,
    make_rewriter,
    scan_document,
    scan_paths,
    scan_project,
)

PAGE = (
    "import { useTranslations } from 'next-intl';\n"
    "export default function Page() {\n"
    "  const t = useTranslations('home');\n"
    "  return <h1>{t('title')}</h1>;\n"
    "}\n"
)


class TestLanguageId:
    def test_known_extensions(self):
        assert language_id_for_path("app/page.tsx") == "typescriptreact"
        assert language_id_for_path(Path("lib/x.TS")) == "typescript"
        assert language_id_for_path("a.jsx") == "javascriptreact"

    def test_unknown_extension(self):
        assert language_id_for_path("main.py") is None


class TestDiscoverScopes:
    def test_unsupported_language(self, next_intl):
        assert discover_scopes(PAGE, "python", [next_intl]) is None

    def test_collects_ranges(self, next_intl):
        scopes = discover_scopes(PAGE, "typescriptreact", [next_intl])
        assert [s.namespace for s in scopes] == ["home"]

    def test_no_frameworks(self):
        assert discover_scopes(PAGE, "typescriptreact", []) is None


class TestScanDocument:
    def test_finds_scoped_key(self, next_intl, settings):
        keys = scan_document(PAGE, "typescriptreact", [next_intl], settings=settings)
        start = PAGE.index("title")
        assert keys == [KeyInDocument(key="home.title", start=start, end=start + 5, quoted=True)]

    def test_frameworks_share_claimed_offsets(self, settings):
        starts = set()
        keys = scan_document(
            PAGE,
            "typescriptreact",
            [NextIntlFramework(), NextIntlFramework()],
            settings=settings,
            starts=starts,
        )
        assert len(keys) == 1
        assert starts == {keys[0].start}

    def test_unsupported_language_yields_nothing(self, next_intl, settings):
        assert scan_document(PAGE, "python", [next_intl], settings=settings) == []

    def test_make_rewriter_chains_frameworks(self, next_intl):
        rewrite = make_rewriter([next_intl])
        assert rewrite("a.b.c", REWRITE_SOURCE_WRITE, RewriteKeyContext(namespace="a")) == "b.c"
        assert make_rewriter([])("x:y", "reference") == "x:y"

    def test_make_rewriter_shortens_extracted_keys(self, next_intl):
        rewrite = make_rewriter([next_intl])
        assert rewrite("home.title", REWRITE_SOURCE_SOURCE, RewriteKeyContext(namespace="home")) == "title"

    def test_make_rewriter_rejects_unknown_source(self, next_intl):
        with pytest.raises(ValueError, match="lookup"):
            make_rewriter([next_intl])("a.b", "lookup")


class TestScanProject:
    def test_finds_sources_and_skips_vendored(self, tmp_path):
        (tmp_path / "app").mkdir()
        page = tmp_path / "app" / "page.tsx"
        page.write_text(PAGE, encoding="utf-8")
        (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
        (tmp_path / "node_modules" / "pkg" / "index.js").write_text("t('x')", encoding="utf-8")
        (tmp_path / "README.md").write_text("# readme", encoding="utf-8")

        assert scan_project(str(tmp_path)) == [page]

    def test_scan_paths(self, tmp_path, settings):
        page = tmp_path / "page.tsx"
        page.write_text(PAGE, encoding="utf-8")
        empty = tmp_path / "empty.ts"
        empty.write_text("export const x = 1;\n", encoding="utf-8")

        results = scan_paths([page, empty], [NextIntlFramework()], settings=settings)

        assert list(results) == [str(page)]
        assert [k.key for k in results[str(page)]] == ["home.title"]

    def test_unreadable_file_reported(self, tmp_path, settings):
        broken = tmp_path / "folder.ts"
        broken.mkdir()
        reporter = LoggingErrorReporter()

        results = scan_paths([broken], [NextIntlFramework()], settings=settings, reporter=reporter)

        assert results == {}
        assert len(reporter.notifications) == 1
        assert "folder.ts" in reporter.notifications[0]
