"""CLI entrypoint — kanawidth.

Subcommands:
  convert   Apply one named width/Kana transform to text or a file.
  width     Measure display width (half-width = 1 column, full-width = 2).
  cut       Slice text by display columns, padding split wide glyphs.
  pipeline  Apply a JSON list of transform steps and report what changed.
  measure   Export per-line width measurements (JSONL/CSV/TSV).

Input is either --text or --path (.txt or .docx). Each command outputs a
single JSON object to stdout. Non-zero exit code on error, with
{"status": "error", "error": "..."} JSON on stdout. With --log-dir, each
command also writes a run log under <log-dir>/runs/<run_id>/run.log.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def _created_at() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _ok(data: dict) -> None:
    payload = dict(data)
    payload.setdefault("status", "ok")
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _err(data: dict, code: int = 1) -> None:
    payload = dict(data)
    payload["status"] = "error"
    payload.setdefault("error", "Unknown error")
    payload.setdefault("created_at", _created_at())
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    sys.exit(code)


class _JsonArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that preserves CLI JSON contract on parse failures."""

    def error(self, message: str) -> None:  # type: ignore[override]
        _err({"error": f"Invalid arguments: {message}"}, code=1)


class _Run:
    """Run context: id, logger and log path (file logging only with --log-dir)."""

    def __init__(self, args: argparse.Namespace, kind: str, params: dict) -> None:
        from .runs import new_run_id, setup_run_logger

        self.kind = kind
        self.run_id: Optional[str] = None
        self.log_path: Optional[Path] = None
        self.log: logging.Logger = logger

        log_dir = getattr(args, "log_dir", None)
        if log_dir:
            self.run_id = new_run_id()
            self.log, self.log_path = setup_run_logger(log_dir, self.run_id)
            self.log.info(
                "%s started: %s", kind, json.dumps(params, ensure_ascii=False)
            )

    def envelope(self) -> dict:
        from .runs import utcnow_iso

        data: dict = {"command": self.kind, "created_at": utcnow_iso()}
        if self.run_id is not None:
            data["run_id"] = self.run_id
            data["log"] = str(self.log_path)
        return data

    def fail(self, exc: Exception) -> None:
        self.log.error("%s failed: %s\n%s", self.kind, exc, traceback.format_exc())
        self.close()
        _err({**self.envelope(), "error": str(exc)})

    def close(self) -> None:
        from .runs import close_run_logger

        if self.run_id is not None:
            close_run_logger(self.log)


def _input_params(args: argparse.Namespace) -> dict:
    return {"text": args.text, "path": args.path}


def _read_lines(
    args: argparse.Namespace,
    run: _Run,
    split_text: bool = False,
) -> tuple[list[str], Optional[dict]]:
    """Return (lines, source info).

    --text is kept whole unless split_text is set, in which case it is split
    on "\n" only so that joining with "\n" gives back the exact input.
    """
    if args.text is not None:
        return (args.text.split("\n") if split_text else [args.text]), None

    from .importers import load_source

    source = load_source(args.path, run_logger=run.log)
    return source.lines, source.to_dict()


def _write_lines(path: str | Path, lines: list[str]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line)
            f.write("\n")
    return path


def _write_text(path: str | Path, text: str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    return path


def _emit_lines(
    args: argparse.Namespace,
    lines: list[str],
    payload: dict,
) -> None:
    """Put converted lines in the reply, or write them to --output."""
    output = getattr(args, "output", None)
    if args.text is not None:
        result = "\n".join(lines)
        if output:
            payload["output"] = str(_write_text(output, result))
        else:
            payload["result"] = result
    elif output:
        payload["output"] = str(_write_lines(output, lines))
        payload["lines_written"] = len(lines)
    else:
        payload["lines"] = lines


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------

def cmd_convert(args: argparse.Namespace) -> None:
    from .japanese import resolve_transform
    from .width import get_width

    run = _Run(args, "convert", {"to": args.to, **_input_params(args)})
    try:
        func = resolve_transform(args.to)
        lines, source = _read_lines(args, run)
        converted = [func(line) for line in lines]
        payload = {
            **run.envelope(),
            "transform": args.to,
            "width_before": sum(get_width(line) for line in lines),
            "width_after": sum(get_width(line) for line in converted),
        }
        if source is not None:
            payload["source"] = source
        _emit_lines(args, converted, payload)
        run.log.info(
            "convert completed: %d line(s), transform=%s", len(lines), args.to
        )
        run.close()
        _ok(payload)
    except Exception as exc:
        run.fail(exc)


# ---------------------------------------------------------------------------
# width
# ---------------------------------------------------------------------------

def cmd_width(args: argparse.Namespace) -> None:
    from .width import get_width

    run = _Run(args, "width", _input_params(args))
    try:
        if args.text is not None:
            payload = {**run.envelope(), "width": get_width(args.text)}
        else:
            lines, source = _read_lines(args, run)
            widths = [get_width(line) for line in lines]
            payload = {
                **run.envelope(),
                "source": source,
                "width": sum(widths),
                "max_line_width": max(widths, default=0),
                "line_widths": widths,
            }
        run.log.info("width completed: %d", payload["width"])
        run.close()
        _ok(payload)
    except Exception as exc:
        run.fail(exc)


# ---------------------------------------------------------------------------
# cut
# ---------------------------------------------------------------------------

def cmd_cut(args: argparse.Namespace) -> None:
    from .width import cut_text_for_width

    run = _Run(args, "cut", {
        "offset": args.offset,
        "size": args.size,
        **_input_params(args),
    })
    try:
        lines, source = _read_lines(args, run, split_text=True)
        cut = [cut_text_for_width(line, args.offset, args.size) for line in lines]
        payload = {**run.envelope(), "offset": args.offset, "size": args.size}
        if source is not None:
            payload["source"] = source
        _emit_lines(args, cut, payload)
        run.log.info(
            "cut completed: %d line(s), offset=%d size=%d",
            len(lines), args.offset, args.size,
        )
        run.close()
        _ok(payload)
    except Exception as exc:
        run.fail(exc)


# ---------------------------------------------------------------------------
# pipeline
# ---------------------------------------------------------------------------

def cmd_pipeline(args: argparse.Namespace) -> None:
    from .pipeline import convert_lines, load_steps

    run = _Run(args, "pipeline", {"steps": args.steps, **_input_params(args)})
    try:
        steps = load_steps(args.steps)
        lines, source = _read_lines(args, run)
        converted, report = convert_lines(lines, steps, run_logger=run.log)
        payload = {
            **run.envelope(),
            "steps": [step.transform for step in steps],
            **report.to_dict(),
        }
        if source is not None:
            payload["source"] = source
        _emit_lines(args, converted, payload)
        if report.warnings:
            payload["status"] = "warnings"
        run.close()
        _ok(payload)
    except Exception as exc:
        run.fail(exc)


# ---------------------------------------------------------------------------
# measure
# ---------------------------------------------------------------------------

def cmd_measure(args: argparse.Namespace) -> None:
    from .exporters import export_csv, export_jsonl
    from .importers import load_source
    from .width import measure_lines

    run = _Run(args, "measure", {
        "path": args.path,
        "output": args.output,
        "format": args.format,
    })
    try:
        source = load_source(args.path, run_logger=run.log)
        rows = measure_lines(source.lines)
        if args.format == "jsonl":
            out = export_jsonl(rows, args.output)
        else:
            delimiter = "\t" if args.format == "tsv" else ","
            out = export_csv(rows, args.output, delimiter=delimiter)
        widths = [row["width"] for row in rows]
        run.log.info("measure completed: %d row(s) -> %s", len(rows), out)
        run.close()
        _ok({
            **run.envelope(),
            "source": source.to_dict(),
            "format": args.format,
            "output": str(out),
            "rows": len(rows),
            "width": sum(widths),
            "max_line_width": max(widths, default=0),
        })
    except Exception as exc:
        run.fail(exc)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def _add_input_args(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", default=None, help="Literal input text")
    src.add_argument("--path", default=None, help="Input file (.txt or .docx)")


def build_parser() -> argparse.ArgumentParser:
    from .japanese import TRANSFORMS

    parser = _JsonArgumentParser(
        prog="kanawidth",
        description="kanawidth — Japanese half-width/full-width conversion and display-width tools",
    )
    parser.add_argument(
        "--log-dir",
        dest="log_dir",
        default=None,
        help="Write a run log under LOG_DIR/runs/<run_id>/run.log",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # convert
    p_convert = sub.add_parser("convert", help="Apply a named transform")
    p_convert.add_argument(
        "--to",
        required=True,
        choices=sorted(TRANSFORMS),
        help="Transform name",
    )
    _add_input_args(p_convert)
    p_convert.add_argument("--output", default=None, help="Write converted lines to this file")
    p_convert.set_defaults(func=cmd_convert)

    # width
    p_width = sub.add_parser("width", help="Measure display width")
    _add_input_args(p_width)
    p_width.set_defaults(func=cmd_width)

    # cut
    p_cut = sub.add_parser("cut", help="Cut text by display columns")
    _add_input_args(p_cut)
    p_cut.add_argument("--offset", type=int, required=True, help="First column (0-based)")
    p_cut.add_argument("--size", type=int, required=True, help="Number of columns")
    p_cut.add_argument("--output", default=None, help="Write cut lines to this file")
    p_cut.set_defaults(func=cmd_cut)

    # pipeline
    p_pipe = sub.add_parser("pipeline", help="Apply a JSON list of transform steps")
    p_pipe.add_argument(
        "--steps", required=True,
        help='Path to JSON step file ["half-ascii", {"transform": "full-kana"}, ...]',
    )
    _add_input_args(p_pipe)
    p_pipe.add_argument("--output", default=None, help="Write converted lines to this file")
    p_pipe.set_defaults(func=cmd_pipeline)

    # measure
    p_measure = sub.add_parser("measure", help="Export per-line width measurements")
    p_measure.add_argument("--path", required=True, help="Input file (.txt or .docx)")
    p_measure.add_argument("--output", required=True, help="Output file path")
    p_measure.add_argument(
        "--format",
        default="jsonl",
        choices=["jsonl", "csv", "tsv"],
        help="Output format (default: jsonl)",
    )
    p_measure.set_defaults(func=cmd_measure)

    return parser


def main() -> None:
    parser = build_parser()
    try:
        args = parser.parse_args()
        args.func(args)
    except SystemExit:
        raise
    except Exception as exc:
        _err({"error": str(exc)}, code=1)


if __name__ == "__main__":
    main()
