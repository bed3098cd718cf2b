from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path

from .api import parse_expression
from .diagnostics import format_diagnostic
from .errors import ScriptError
from .format import dump_expr
from .lexer import tokenize
from .spans import Pos
from .symbol import Symbol, resolve


def _to_jsonable(obj):
    if isinstance(obj, Symbol):
        return resolve(obj)
    if isinstance(obj, Pos):
        return {"row": obj.row, "col": obj.col, "offset": obj.offset}
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj):
        out = {"node": type(obj).__name__}
        out.update({f.name: _to_jsonable(getattr(obj, f.name)) for f in fields(obj)})
        return out
    if isinstance(obj, (list, tuple)):
        return [_to_jsonable(x) for x in obj]
    return obj


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="vnscript", description="Parse .vns script expressions")
    ap.add_argument("files", nargs="+", help="Script files, one expression each")
    out = ap.add_mutually_exclusive_group()
    out.add_argument("--json", action="store_true", help="Print the AST with spans as JSON")
    out.add_argument("--tokens", action="store_true", help="Print the token stream")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    status = 0
    for name in args.files:
        p = Path(name).expanduser().resolve()
        try:
            src = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"{p}: cannot read script: {e}", file=sys.stderr)
            status = 1
            continue
        try:
            if args.tokens:
                for tok in tokenize(src, file=str(p)):
                    print(f"{tok.span!r}\t{tok.kind.name}\t{tok.lexeme!r}")
                continue
            expr = parse_expression(src, file=str(p))
        except ScriptError as e:
            print(format_diagnostic(e, src), file=sys.stderr)
            status = 1
            continue

        if args.json:
            print(json.dumps(_to_jsonable(expr), indent=2))
        else:
            print(dump_expr(expr))
    return status


if __name__ == "__main__":
    raise SystemExit(main())
