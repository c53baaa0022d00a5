from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """A named dependency and the dependencies it owns, in declared order.

    Children are owned by value: a ``Node`` is never shared by two parents, so
    the structure is always a finite tree.  Identifiers are not required to be
    unique; repetition is what :func:`has_cycle` reports.
    """

    id: str
    deps: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.deps, tuple):
            object.__setattr__(self, "deps", tuple(self.deps))

    def is_leaf(self) -> bool:
        return not self.deps

    def get_dependency_list(self) -> list[str]:
        return get_dependency_list(self)

    def has_cycle(self) -> bool:
        return has_cycle(self)


def iter_post_order(root: Node) -> Iterator[Node]:
    """Yield every descendant of *root* after its own descendants.

    Children are visited in declared order and *root* itself is not yielded.
    Frames are kept on an explicit stack so depth is not bounded by the
    interpreter recursion limit.
    """
    stack: list[tuple[Node, Iterator[Node]]] = [(root, iter(root.deps))]
    while stack:
        node, children = stack[-1]
        child = next(children, None)
        if child is not None:
            stack.append((child, iter(child.deps)))
            continue
        stack.pop()
        if stack:
            yield node


def iter_pre_order(root: Node) -> Iterator[Node]:
    """Yield *root* and then each descendant before its own descendants."""
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.deps))


def get_dependency_list(root: Node) -> list[str]:
    """Return the build order for everything *root* depends on.

    Each dependency appears after all of its own dependencies, siblings keep
    their declared order, and the identifier of *root* is never included.
    """
    order = [node.id for node in iter_post_order(root)]
    logger.debug("Resolved %d dependencies for %r", len(order), root.id)
    return order


def find_duplicate(root: Node) -> str | None:
    """Return the first identifier seen twice in a pre-order walk, or None.

    The set of seen identifiers covers the whole walk and is never reduced
    when a subtree is finished, so two unrelated branches declaring the same
    identifier count as a repetition.
    """
    seen: set[str] = set()
    for node in iter_pre_order(root):
        if node.id in seen:
            logger.debug("Identifier %r repeated under %r", node.id, root.id)
            return node.id
        seen.add(node.id)
    return None


def has_cycle(root: Node) -> bool:
    return find_duplicate(root) is not None
