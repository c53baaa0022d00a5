import logging

import pytest

from deptree.resolver import DependencyCycleError, resolve_build_order, try_resolve_build_order
from deptree.tree import Node


def _tree(extra_under_bc: list[Node] | None = None) -> Node:
    return Node(
        "MyLib",
        [
            Node("a", [Node("aa"), Node("ab")]),
            Node("b", [Node("ba"), Node("bc", extra_under_bc or [])]),
        ],
    )


def test_resolve_build_order_ok():
    assert resolve_build_order(_tree()) == ["aa", "ab", "a", "ba", "bc", "b"]


def test_resolve_build_order_raises_on_repeat():
    with pytest.raises(DependencyCycleError, match="'a' is declared more than once") as info:
        resolve_build_order(_tree([Node("a")]))
    assert info.value.identifier == "a"
    assert info.value.root == "MyLib"


def test_resolve_build_order_logs_failure_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="deptree"):
        with pytest.raises(DependencyCycleError):
            resolve_build_order(_tree([Node("b")]))
    assert any("'b' repeated" in rec.getMessage() for rec in caplog.records)
    assert all(rec.levelno < logging.WARNING for rec in caplog.records)


def test_try_resolve_build_order():
    assert try_resolve_build_order(_tree()) == ["aa", "ab", "a", "ba", "bc", "b"]
    assert try_resolve_build_order(_tree([Node("aa")])) is None


def test_resolve_empty_tree():
    assert resolve_build_order(Node("empty")) == []


def test_try_resolve_build_order_is_quiet(caplog):
    with caplog.at_level(logging.WARNING, logger="deptree"):
        assert try_resolve_build_order(_tree([Node("b")])) is None
    assert caplog.records == []
