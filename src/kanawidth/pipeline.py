"""Conversion pipeline — ordered, named transform steps applied per line.

A step file is a JSON list. Each item is either a transform name or an object
``{"transform": "<name>", "description": "<label>"}``. Steps run in file
order, so ``["full-ascii", "full-kana"]`` is the same as the ``full``
composite.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .japanese import Transform, resolve_transform
from .width import get_width

logger = logging.getLogger(__name__)


@dataclass
class ConversionStep:
    """A single named transform."""

    transform: str
    description: str = ""

    def resolved(self) -> Transform:
        return resolve_transform(self.transform)

    @property
    def label(self) -> str:
        return self.description or self.transform


@dataclass
class PipelineReport:
    """Result of running a pipeline over a block of lines."""

    lines_total: int
    lines_modified: int
    width_before: int
    width_after: int
    steps_applied: list[str] = field(default_factory=list)  # labels of steps that changed something
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "lines_total": self.lines_total,
            "lines_modified": self.lines_modified,
            "width_before": self.width_before,
            "width_after": self.width_after,
            "steps_applied": self.steps_applied,
            "warnings": self.warnings,
        }


def steps_from_list(data: list) -> list[ConversionStep]:
    """Build ConversionStep list from a JSON-deserialized list.

    Raises ValueError for unknown transform names or malformed items.
    """
    if not isinstance(data, list):
        raise ValueError("Pipeline steps must be a JSON list")

    steps: list[ConversionStep] = []
    for i, item in enumerate(data):
        if isinstance(item, str):
            step = ConversionStep(transform=item)
        elif isinstance(item, dict) and isinstance(item.get("transform"), str):
            step = ConversionStep(
                transform=item["transform"],
                description=str(item.get("description", "")),
            )
        else:
            raise ValueError(
                f"Step {i}: expected a transform name or an object with a 'transform' key"
            )
        # Fail on unknown names before any text is touched
        step.resolved()
        steps.append(step)
    return steps


def load_steps(path: str | Path) -> list[ConversionStep]:
    """Read a JSON step file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Steps file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in steps file {path}: {exc}") from exc
    return steps_from_list(data)


def apply_steps(text: str, steps: Iterable[ConversionStep]) -> str:
    """Apply all steps sequentially to text. Returns the converted text."""
    for step in steps:
        text = step.resolved()(text)
    return text


def convert_lines(
    lines: list[str],
    steps: list[ConversionStep],
    run_logger: Optional[logging.Logger] = None,
) -> tuple[list[str], PipelineReport]:
    """Run the pipeline over every line.

    Returns the converted lines and a PipelineReport.
    """
    log = run_logger or logger
    transforms = [(step.label, step.resolved()) for step in steps]

    if not transforms:
        report = PipelineReport(
            lines_total=len(lines),
            lines_modified=0,
            width_before=sum(get_width(line) for line in lines),
            width_after=sum(get_width(line) for line in lines),
            warnings=["No steps given; text left unchanged"],
        )
        log.warning("Pipeline called with no steps")
        return list(lines), report

    fired: set[str] = set()
    out: list[str] = []
    modified = 0
    width_before = 0
    width_after = 0

    for n, line in enumerate(lines, 1):
        width_before += get_width(line)
        current = line
        for label, func in transforms:
            converted = func(current)
            if converted != current:
                fired.add(label)
            current = converted
        if current != line:
            modified += 1
            log.debug("Line n=%d converted", n)
        width_after += get_width(current)
        out.append(current)

    report = PipelineReport(
        lines_total=len(lines),
        lines_modified=modified,
        width_before=width_before,
        width_after=width_after,
        steps_applied=[label for label, _ in transforms if label in fired],
    )
    log.info(
        "Pipeline done: %d/%d lines modified, width %d -> %d",
        modified, len(lines), width_before, width_after,
    )
    return out, report
