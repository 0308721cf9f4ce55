"""Regression tests for the CLI JSON contract."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

from tests.conftest import make_docx

_REPO_ROOT = Path(__file__).parent.parent


def _run_cli(args: list[str], cwd: Path = _REPO_ROOT) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(_REPO_ROOT / "src")
    env["PYTHONIOENCODING"] = "utf-8"
    return subprocess.run(
        [sys.executable, "-m", "kanawidth.cli", *args],
        cwd=cwd,
        env=env,
        text=True,
        encoding="utf-8",
        capture_output=True,
    )


def _parse_single_json(stdout: str) -> dict:
    payload_raw = stdout.strip()
    assert payload_raw.startswith("{")
    assert payload_raw.endswith("}")
    payload = json.loads(payload_raw)
    assert isinstance(payload, dict)
    return payload


def _ok_payload(args: list[str]) -> dict:
    proc = _run_cli(args)
    assert proc.returncode == 0, proc.stdout
    assert proc.stderr == ""
    payload = _parse_single_json(proc.stdout)
    assert payload["status"] in {"ok", "warnings"}
    return payload


def test_cli_text_commands_return_single_json_object() -> None:
    width = _ok_payload(["width", "--text", "Aあ"])
    assert width["width"] == 3
    assert width["command"] == "width"
    assert "run_id" not in width

    half = _ok_payload(["convert", "--to", "half-kana", "--text", "ガ"])
    assert half["result"] == "ｶﾞ"
    assert half["width_before"] == 2
    assert half["width_after"] == 2

    full = _ok_payload(["convert", "--to", "full", "--text", "ｳﾞ 'x'"])
    assert full["result"] == "ヴ　’ｘ’"

    cut = _ok_payload(["cut", "--text", "あいう", "--offset", "1", "--size", "2"])
    assert cut["result"] == "  "


def test_cli_text_input_keeps_line_breaks_verbatim(steps_file: Path) -> None:
    """--text is converted as one string; CR, trailing LF and NEL survive."""
    crlf = _ok_payload(["convert", "--to", "full-kana", "--text", "ｶﾞ\r\nｷﾞ\n"])
    assert crlf["result"] == "ガ\r\nギ\n"

    nel = _ok_payload(["convert", "--to", "full-kana", "--text", "ｶ\x85ﾞ"])
    assert nel["result"] == "カ\x85゛"

    piped = _ok_payload(["pipeline", "--steps", str(steps_file), "--text", "ＡＢ\r\nｶﾞ\n"])
    assert piped["result"] == "AB\r\nガ\n"
    assert piped["lines_total"] == 1


def test_cli_text_output_file_is_verbatim(tmp_path: Path) -> None:
    out = tmp_path / "out.txt"
    payload = _ok_payload([
        "convert", "--to", "half-kana", "--text", "ガ\r\nギ\n", "--output", str(out),
    ])
    assert payload["output"] == str(out)
    assert out.read_bytes().decode("utf-8") == "ｶﾞ\r\nｷﾞ\n"


def test_cli_cut_text_splits_on_lf_only() -> None:
    cut = _ok_payload(["cut", "--text", "ab\r\n\x85cd", "--offset", "0", "--size", "3"])
    assert cut["result"] == "ab\r\n\x85c"


def test_cli_cut_accepts_negative_offset() -> None:
    cut = _ok_payload(["cut", "--text", "abc", "--offset", "-2", "--size", "5"])
    assert cut["result"] == "abc"


def test_cli_file_commands(tmp_path: Path, kana_txt: Path) -> None:
    out_txt = tmp_path / "out" / "full.txt"
    convert = _ok_payload([
        "convert", "--to", "full-kana", "--path", str(kana_txt), "--output", str(out_txt),
    ])
    assert convert["lines_written"] == 4
    assert convert["source"]["lines"] == 4
    assert out_txt.read_text(encoding="utf-8").splitlines()[0] == "ガギグ テスト"

    width = _ok_payload(["width", "--path", str(kana_txt)])
    assert width["line_widths"][2] == 0
    assert width["width"] == sum(width["line_widths"])
    assert width["max_line_width"] == max(width["line_widths"])

    cut = _ok_payload(["cut", "--path", str(kana_txt), "--offset", "0", "--size", "4"])
    assert cut["lines"][0] == "ｶﾞｷﾞ"


def test_cli_pipeline_with_run_log(tmp_path: Path, steps_file: Path) -> None:
    docx_path = tmp_path / "in.docx"
    docx_path.write_bytes(make_docx(["ＡＢＣ　ｶﾞ", "plain"]))
    log_dir = tmp_path / "logs"

    payload = _ok_payload([
        "--log-dir", str(log_dir),
        "pipeline", "--steps", str(steps_file), "--path", str(docx_path),
    ])
    assert payload["lines"] == ["ABC ガ", "plain"]
    assert payload["lines_modified"] == 1
    assert payload["steps_applied"] == ["half-ascii", "kana to full"]
    assert Path(payload["log"]).exists()
    assert payload["run_id"] in payload["log"]


def test_cli_measure_exports_jsonl(tmp_path: Path, kana_txt: Path) -> None:
    out = tmp_path / "widths.jsonl"
    payload = _ok_payload(["measure", "--path", str(kana_txt), "--output", str(out)])
    assert payload["rows"] == 4
    rows = [json.loads(line) for line in out.read_text(encoding="utf-8").splitlines()]
    assert [r["n"] for r in rows] == [1, 2, 3, 4]
    assert payload["width"] == sum(r["width"] for r in rows)


def test_cli_argparse_failure_returns_json_error() -> None:
    """Argument parsing failures must still return JSON envelope + exit code 1."""
    proc = _run_cli(["convert", "--to", "sideways", "--text", "x"])

    assert proc.returncode == 1
    assert proc.stderr == ""

    payload = _parse_single_json(proc.stdout)
    assert payload["status"] == "error"
    assert "Invalid arguments" in payload["error"]
    assert "created_at" in payload


def test_cli_missing_source_returns_json_error(tmp_path: Path) -> None:
    proc = _run_cli(["width", "--path", str(tmp_path / "missing.txt")])

    assert proc.returncode == 1
    assert proc.stderr == ""
    payload = _parse_single_json(proc.stdout)
    assert payload["status"] == "error"
    assert "not found" in payload["error"]
    assert payload["command"] == "width"
