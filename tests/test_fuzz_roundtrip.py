from __future__ import annotations

import os

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from vnscript import dump_expr, format_expr, parse_expression
from vnscript.ast import walk
from vnscript.ops import BinaryOp, UnaryOp
from vnscript.testing import generate_expression_sources


def _ident() -> st.SearchStrategy[str]:
    head = st.sampled_from(list("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"))
    tail = st.text(alphabet=list("abcdefghijklmnopqrstuvwxyz_0123456789"), min_size=0, max_size=8)
    return st.builds(lambda h, t: h + t, head, tail).filter(lambda s: s not in {"true", "false"})


_atoms = st.one_of(
    _ident(),
    st.integers(min_value=0, max_value=10**6).map(str),
    st.sampled_from(["true", "false", '""', '"a\\tb"', "0.5", "12.25"]),
    # Large and tiny floats: the printer must never fall back to exponent form.
    st.builds(
        lambda whole, zeros, frac: f"{whole}.{'0' * zeros}{frac}",
        st.integers(min_value=0, max_value=10**40),
        st.integers(min_value=0, max_value=30),
        st.integers(min_value=0, max_value=10**6),
    ),
)


def _extend(children: st.SearchStrategy[str]) -> st.SearchStrategy[str]:
    return st.one_of(
        st.builds(lambda e: f"({e})", children),
        st.builds(lambda op, e: f"{op.value} {e}", st.sampled_from(list(UnaryOp)), children),
        st.builds(
            lambda lhs, op, rhs: f"{lhs} {op.value} {rhs}",
            children,
            st.sampled_from(list(BinaryOp)),
            children,
        ),
    )


expressions = st.recursive(_atoms, _extend, max_leaves=24)


def _check_stable(src: str) -> None:
    ast1 = parse_expression(src, file="fuzz.vns")
    out1 = format_expr(ast1)
    ast2 = parse_expression(out1, file="fuzz.vns")
    assert dump_expr(ast2) == dump_expr(ast1)
    assert format_expr(ast2) == out1


@given(expressions)
@settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
def test_fuzz_roundtrip_stable_format(src: str) -> None:
    _check_stable(src)


@given(expressions)
@settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
def test_fuzz_spans_cover_their_source(src: str) -> None:
    # Every node's closed span slices out text that parses to the same subtree.
    ast = parse_expression(src, file="fuzz.vns")
    assert ast.span.start.offset == 0
    assert ast.span.end.offset == len(src) - 1
    for node in walk(ast):
        text = src[node.span.start.offset : node.span.end.offset + 1]
        assert dump_expr(parse_expression(text, file="fuzz.vns")) == dump_expr(node)


def test_generated_corpus_parses_and_formats_stably() -> None:
    seed = int(os.environ.get("VNSCRIPT_CORPUS_SEED", "1"))
    count = int(os.environ.get("VNSCRIPT_CORPUS_CASES", "500"))
    for src in generate_expression_sources(seed=seed, count=count):
        _check_stable(src)


@pytest.mark.parametrize(
    ("src", "expected"),
    [
        ("10000000000000000.0", "10000000000000000.0"),
        ("0.00001", "0.00001"),
        ("1.", "1.0"),
        ("100000000000000000000.0", "100000000000000000000.0"),
        ("0.000000000000000000000125", "0.000000000000000000000125"),
    ],
)
def test_floats_print_without_exponent(src: str, expected: str) -> None:
    out = format_expr(parse_expression(src, file="fuzz.vns"))
    assert out == expected
    assert "e" not in out
    _check_stable(src)
