"""
Tests for the command-line entry point.
"""
import json

import pytest

import keyscope.main as cli
from keyscope.i18n import set_locale

PAGE = (
    "const t = useTranslations('home');\n"
    "t('title'); t('sub.');\n"
)


@pytest.fixture(autouse=True)
def reset_locale():
    yield
    set_locale("en")


def test_scan_single_file(tmp_path, capsys):
    page = tmp_path / "page.ts"
    page.write_text(PAGE, encoding="utf-8")

    assert cli.main([str(page), "--framework", "next-intl"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert [k["key"] for k in report[str(page)]] == ["home.title"]
    assert set(report[str(page)][0]) == {"key", "start", "end", "quoted"}


def test_disable_path_parsing_flag(tmp_path, capsys):
    page = tmp_path / "page.ts"
    page.write_text(PAGE, encoding="utf-8")

    cli.main([str(page), "--framework", "next-intl", "--disable-path-parsing"])

    report = json.loads(capsys.readouterr().out)
    assert [k["key"] for k in report[str(page)]] == ["home.title", "sub."]


def test_unreadable_file_keeps_stdout_json(tmp_path, capsys):
    (tmp_path / "page.ts").write_text(PAGE, encoding="utf-8")
    (tmp_path / "bad.ts").write_bytes(b"t('\xff\xfe')")

    assert cli.main([str(tmp_path), "--framework", "next-intl"]) == 0

    captured = capsys.readouterr()
    report = json.loads(captured.out)
    assert list(report) == [str(tmp_path / "page.ts")]
    assert "bad.ts" in captured.err


def test_default_namespace_flag(tmp_path, capsys):
    page = tmp_path / "page.ts"
    page.write_text(" tOther('title');\nconst t = useTranslations('home');\n", encoding="utf-8")

    cli.main([str(page), "--default-namespace", "common"])

    report = json.loads(capsys.readouterr().out)
    assert [k["key"] for k in report[str(page)]] == ["common.title"]


def test_output_file(tmp_path, capsys):
    (tmp_path / "src").mkdir()
    page = tmp_path / "src" / "page.tsx"
    page.write_text(PAGE, encoding="utf-8")
    out = tmp_path / "report.json"

    cli.main([str(tmp_path), "--output", str(out)])

    report = json.loads(out.read_text(encoding="utf-8"))
    assert str(page) in report
    assert str(out) in capsys.readouterr().out


def test_missing_path_exits(tmp_path):
    with pytest.raises(SystemExit):
        cli.main([str(tmp_path / "nope")])


def test_empty_directory(tmp_path, capsys):
    assert cli.main([str(tmp_path)]) == 0
    assert "No source files" in capsys.readouterr().out


def test_unknown_framework_rejected(tmp_path):
    with pytest.raises(SystemExit):
        cli.main([str(tmp_path), "--framework", "vue-i18n"])


class TestResolveFrameworks:
    def test_explicit_ids(self, tmp_path):
        assert [f.id for f in cli.resolve_frameworks(["next-intl"], tmp_path)] == ["next-intl"]

    def test_detected_from_package_json(self, tmp_path):
        (tmp_path / "package.json").write_text(
            json.dumps({"dependencies": {"next-intl": "^3.0.0"}}), encoding="utf-8"
        )
        assert [f.id for f in cli.resolve_frameworks(None, tmp_path)] == ["next-intl"]

    def test_invalid_package_json_falls_back(self, tmp_path):
        (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
        assert [f.id for f in cli.resolve_frameworks(None, tmp_path)] == ["next-intl"]
