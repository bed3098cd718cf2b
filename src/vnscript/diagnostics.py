from __future__ import annotations

from .errors import ScriptError
from .symbol import resolve


def format_location(err: ScriptError) -> str:
    start = err.span.start
    return f"{resolve(start.file)}:{start.row}:{start.col}"


def format_diagnostic(err: ScriptError, source: str | None = None) -> str:
    """Render `file:row:col: message`, the source line with a caret, and the hint."""
    out = [f"{format_location(err)}: {err.message}"]

    if source is not None:
        start, end = err.span.start, err.span.end
        lines = source.split("\n")
        if start.row <= len(lines):
            # Rows only advance on \n; a CRLF file leaves \r at the end of the line.
            line = lines[start.row - 1].rstrip("\r")
            width = 1
            if end.row == start.row and end.col > start.col:
                width = end.col - start.col + 1
            out.append(f"  {line}")
            out.append("  " + " " * (start.col - 1) + "^" * width)

    if err.hint:
        out.append(f"hint: {err.hint}")
    return "\n".join(out)
