import json
from pathlib import Path

import pytest

import export_to_figma
from export_specs import COMPONENTS
from export_to_figma import ExportPaths, main, prepare_export


def _snapshot(root):
    return {p.relative_to(root): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}


def test_export_paths():
    paths = ExportPaths(Path("out"))
    assert [p.name for p in paths.all_dirs()] == ["out", "components", "pages", "assets", "tokens"]


def test_prepare_export_writes_full_tree(tmp_path, tokens_file):
    out = tmp_path / "exports" / "figma-ready"
    summary = prepare_export(tokens_file, out)

    assert (out / "tokens" / "figma-variables.json").is_file()
    assert (out / "tokens" / "tokens.css").is_file()
    for component in COMPONENTS:
        assert (out / "components" / f"{component.name}.md").is_file()
    assert (out / "pages" / "README.md").is_file()
    assert (out / "navigation-flow.json").is_file()
    assert (out / "IMPORT-GUIDE.md").is_file()
    assert summary["tokens"]["tokens"] == 6
    assert len(summary["components"]) == 5


def test_prepare_export_twice_is_byte_identical(tmp_path, tokens_file):
    out = tmp_path / "out"
    prepare_export(tokens_file, out)
    first = _snapshot(out)
    prepare_export(tokens_file, out)
    assert _snapshot(out) == first


def test_main_defaults_to_relative_paths(tmp_path, tokens_file, monkeypatch, capsys):
    (tmp_path / "tokens").mkdir()
    (tmp_path / "tokens" / "design-tokens.json").write_text(tokens_file.read_text(encoding="utf-8"), encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FIGMA_EXPORT_TOKENS", raising=False)
    monkeypatch.delenv("FIGMA_EXPORT_OUTDIR", raising=False)

    assert main([]) == 0
    assert (tmp_path / "exports" / "figma-ready" / "navigation-flow.json").is_file()
    out = capsys.readouterr().out
    assert "[figma-export] Exporting design tokens..." in out
    assert "Next steps:" in out
    assert "1. Run: node scripts/capture-screens.js" in out


def test_main_respects_environment(tmp_path, tokens_file, monkeypatch):
    out = tmp_path / "env-out"
    monkeypatch.setenv("FIGMA_EXPORT_TOKENS", str(tokens_file))
    monkeypatch.setenv("FIGMA_EXPORT_OUTDIR", str(out))
    assert main(["--quiet"]) == 0
    assert json.loads((out / "tokens" / "figma-variables.json").read_text(encoding="utf-8"))["version"] == "1.0.0"


def test_main_flags_override_environment(tmp_path, tokens_file, monkeypatch):
    monkeypatch.setenv("FIGMA_EXPORT_OUTDIR", str(tmp_path / "ignored"))
    out = tmp_path / "flag-out"
    assert main(["--tokens", str(tokens_file), "--out", str(out), "--quiet"]) == 0
    assert out.is_dir()
    assert not (tmp_path / "ignored").exists()


def test_main_quiet_prints_nothing_on_success(tmp_path, tokens_file, capsys):
    assert main(["--tokens", str(tokens_file), "--out", str(tmp_path / "q"), "--quiet"]) == 0
    assert capsys.readouterr().out == ""


def test_main_missing_tokens_exits_non_zero(tmp_path, capsys):
    code = main(["--tokens", str(tmp_path / "missing.json"), "--out", str(tmp_path / "out")])
    assert code == 1
    err = capsys.readouterr().err
    assert "[figma-export] error: Token document not found" in err


def test_main_write_failure_exits_non_zero(tmp_path, tokens_file, monkeypatch, capsys):
    def boom(*_args, **_kwargs):
        raise PermissionError("read-only file system")

    monkeypatch.setattr(export_to_figma, "write_component_specs", boom)
    code = main(["--tokens", str(tokens_file), "--out", str(tmp_path / "out")])
    assert code == 1
    assert "write failed: read-only file system" in capsys.readouterr().err
    # Earlier steps are not rolled back.
    assert (tmp_path / "out" / "tokens" / "tokens.css").is_file()


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_main_unreadable_tokens_is_reported_as_input_error(tmp_path, capsys):
    tokens_dir = tmp_path / "dir.json"
    tokens_dir.mkdir()
    code = main(["--tokens", str(tokens_dir), "--out", str(tmp_path / "out")])
    assert code == 1
    err = capsys.readouterr().err
    assert "Cannot read token document" in err
    assert "write failed" not in err


def test_prepare_export_replaces_non_utf8_output(tmp_path, tokens_file):
    out = tmp_path / "out"
    (out / "tokens").mkdir(parents=True)
    (out / "tokens" / "tokens.css").write_bytes(b"\xff\xfe stale")
    prepare_export(tokens_file, out)
    assert "--color-primary: #FF0000;" in (out / "tokens" / "tokens.css").read_text(encoding="utf-8")
