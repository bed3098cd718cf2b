from __future__ import annotations

import logging
from pathlib import Path

from .ast import Expr
from .lexer import tokenize
from .parser import Parser


logger = logging.getLogger(__name__)


def parse_expression(src: str, *, file: str = "<memory>") -> Expr:
    toks = tokenize(src, file=file)
    expr = Parser(toks).parse()
    logger.debug("parsed expression from %s (%d tokens)", file, len(toks))
    return expr


def parse_file(path: str | Path) -> Expr:
    p = Path(path).expanduser().resolve()
    src = p.read_text(encoding="utf-8")
    return parse_expression(src, file=str(p))
