from __future__ import annotations

import json
from pathlib import Path

import pytest

from vnscript import ScriptError, format_diagnostic, parse_expression, parse_file
from vnscript.cli import main


def test_format_diagnostic_points_at_the_error() -> None:
    src = "x = (1 +\n  2"
    with pytest.raises(ScriptError) as e:
        parse_expression(src, file="scene.vns")
    out = format_diagnostic(e.value, src)
    lines = out.splitlines()
    assert lines[0] == "scene.vns:2:4: unclosed '(' at end of input"
    assert lines[1] == "    2"
    assert lines[2] == "     ^"
    assert lines[3] == "hint: '(' opened at 1:5"


def test_format_diagnostic_underlines_token() -> None:
    src = "a <<= )"
    with pytest.raises(ScriptError) as e:
        parse_expression(src, file="scene.vns")
    out = format_diagnostic(e.value, src)
    assert out.splitlines()[0].startswith("scene.vns:1:7: unmatched ')'")


def test_parse_file_uses_resolved_path(tmp_path: Path) -> None:
    p = tmp_path / "main.vns"
    p.write_text("a =", encoding="utf-8")
    with pytest.raises(ScriptError) as e:
        parse_file(p)
    assert format_diagnostic(e.value).startswith(f"{p.resolve()}:1:4:")


def test_cli_prints_sexpr(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "main.vns"
    p.write_text("a = 1 + 2 * 3\n", encoding="utf-8")
    assert main([str(p)]) == 0
    assert capsys.readouterr().out.strip() == "(= a (+ 1 (* 2 3)))"


def test_cli_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "main.vns"
    p.write_text("-x", encoding="utf-8")
    assert main(["--json", str(p)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["node"] == "Unary"
    assert data["op"] == "-"
    assert data["operand"] == {
        "node": "Identifier",
        "span": {
            "node": "Span",
            "start": {"row": 1, "col": 2, "offset": 1},
            "end": {"row": 1, "col": 2, "offset": 1},
        },
        "name": "x",
    }


def test_cli_tokens(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "main.vns"
    p.write_text("a+=1", encoding="utf-8")
    assert main(["--tokens", str(p)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split("\t")[1] for line in lines] == ["IDENT", "PLUS_EQ", "INT", "EOF"]


def test_cli_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "bad.vns"
    bad.write_text("1 +", encoding="utf-8")
    good = tmp_path / "good.vns"
    good.write_text("1", encoding="utf-8")
    assert main([str(bad), str(good)]) == 1
    captured = capsys.readouterr()
    assert "bad.vns:1:4: unexpected end of input" in captured.err
    assert captured.out.strip() == "1"


def test_cli_reports_unreadable_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "missing.vns"
    binary = tmp_path / "binary.vns"
    binary.write_bytes(b"\xff\xfe\x00")
    good = tmp_path / "good.vns"
    good.write_text("a + b", encoding="utf-8")
    assert main([str(missing), str(binary), str(good)]) == 1
    captured = capsys.readouterr()
    assert "missing.vns: cannot read script" in captured.err
    assert "binary.vns: cannot read script" in captured.err
    assert captured.out.strip() == "(+ a b)"


def test_format_diagnostic_strips_carriage_return() -> None:
    src = "a + )\r\nb"
    with pytest.raises(ScriptError) as e:
        parse_expression(src, file="scene.vns")
    out = format_diagnostic(e.value, src)
    assert "\r" not in out
    lines = out.split("\n")
    assert lines[0] == "scene.vns:1:5: unmatched ')'"
    assert lines[1] == "  a + )"
    assert lines[2] == "      ^"
