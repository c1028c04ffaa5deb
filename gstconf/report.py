"""Emission of parsed action lists.

Supports JSON and human-readable text.

Usage:
    from gstconf.report import ActionReport, OutputFormat

    report = ActionReport(actions, source="gst_single.conf")
    report.emit("actions.json", OutputFormat.JSON)
    report.emit(sys.stdout, OutputFormat.TEXT)
"""

import json
import sys
from collections.abc import Sequence
from datetime import UTC, datetime
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

from gstconf.models.action_models import ActionRecord


class OutputFormat(Enum):
    """Supported output formats for parsed actions."""

    JSON = "json"
    TEXT = "text"


class ActionReport:
    """Parsed actions plus the metadata needed to report them.

    Example:
        >>> report = ActionReport(load_actions("gst.conf"), source="gst.conf")
        >>> report.emit(sys.stdout, OutputFormat.TEXT)
    """

    def __init__(
        self, actions: Sequence[ActionRecord], source: str | Path | None = None
    ) -> None:
        self._actions = tuple(actions)
        self._metadata: dict[str, Any] = {
            "source": str(source) if source is not None else None,
            "parsed_at": datetime.now(UTC).isoformat(),
            "gstconf_version": self._get_version(),
        }

    def _get_version(self) -> str:
        from gstconf import __version__

        return str(__version__)

    @property
    def actions(self) -> tuple[ActionRecord, ...]:
        return self._actions

    def to_dict(self) -> dict[str, Any]:
        """Convert the report to a dictionary for serialization."""
        return {
            "metadata": self._metadata,
            "actions": [action.model_dump() for action in self._actions],
            "summary": self._generate_summary(),
        }

    def _generate_summary(self) -> dict[str, Any]:
        return {
            "total_actions": len(self._actions),
            "parallel_actions": sum(1 for a in self._actions if a.parallel),
            "modules": sorted({a.module_name for a in self._actions if a.module_name}),
        }

    # -------------------------------------------------------------------------
    # Emission Methods
    # -------------------------------------------------------------------------

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.JSON,
        indent: int = 2,
    ) -> None:
        """Emit the report to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format.
            indent: Indentation level for JSON.
        """
        if format == OutputFormat.JSON:
            content = json.dumps(self.to_dict(), indent=indent) + "\n"
        elif format == OutputFormat.TEXT:
            content = self._to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        if isinstance(output, str | Path):
            Path(output).write_text(content)
        else:
            output.write(content)
            if output is not sys.stdout and output is not sys.stderr:
                output.flush()

    def _to_text(self) -> str:
        output = StringIO()
        summary = self._generate_summary()

        output.write("=" * 60 + "\n")
        output.write("  GST ACTIONS\n")
        output.write("=" * 60 + "\n")
        if self._metadata["source"]:
            output.write(f"Source:  {self._metadata['source']}\n")
        output.write(f"Actions: {summary['total_actions']}\n")
        output.write(f"Parallel: {summary['parallel_actions']}\n\n")

        for index, action in enumerate(self._actions, start=1):
            output.write(f"[{index}] {action.name}\n")
            output.write("-" * 40 + "\n")
            self._format_action_text(output, action)
            output.write("\n")

        output.write("=" * 60 + "\n")
        return output.getvalue()

    def _format_action_text(self, output: StringIO, action: ActionRecord) -> None:
        output.write(f"  module:        {action.module_name or '-'}\n")
        output.write(f"  devices:       {action.devices or '-'}\n")
        output.write(f"  ops_type:      {action.ops_type or '-'}\n")
        output.write(f"  count:         {action.count}\n")
        output.write(f"  duration:      {action.duration}\n")
        output.write(f"  target_stress: {action.target_stress:.2f}\n")
        a, b, c = action.matrix_dims
        output.write(f"  matrix:        {a} x {b} x {c}\n")
        output.write(f"  log_interval:  {action.log_interval}\n")
        output.write(f"  parallel:      {str(action.parallel).lower()}\n")
        output.write(f"  copy_matrix:   {str(action.copy_matrix).lower()}\n")

    def __len__(self) -> int:
        return len(self._actions)
