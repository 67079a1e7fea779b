"""Machine-readable report of diagnostics for a host."""
from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from memberaccess.diagnostics import Diagnostic


def diagnostic_to_dict(diag: Diagnostic, *, file: Path | None = None) -> dict[str, object]:
    fix: dict[str, object] | None = None
    if diag.fix is not None:
        fix = {
            "start": diag.fix.start,
            "length": diag.fix.length,
            "text": diag.fix.text,
        }
    return {
        "file": str(file) if file is not None else None,
        "start": diag.start,
        "end": diag.end,
        "rule": diag.rule_name,
        "message": diag.message,
        "fix": fix,
    }


def format_json(
    diagnostics: Iterable[tuple[Path | None, Diagnostic]],
) -> str:
    """Render ``(file, diagnostic)`` pairs as a JSON list, preserving order."""
    items: list[dict[str, object]] = [
        diagnostic_to_dict(diag, file=file) for file, diag in diagnostics
    ]
    return json.dumps(items, indent=2)
