from __future__ import annotations

import logging

from .tree import Node, find_duplicate, get_dependency_list

logger = logging.getLogger(__name__)


class DependencyCycleError(Exception):
    """Raised when a dependency tree repeats an identifier and cannot be ordered."""

    def __init__(self, identifier: str, root: str):
        super().__init__(f"Dependency {identifier!r} is declared more than once under {root!r}")
        self.identifier = identifier
        self.root = root


def resolve_build_order(root: Node) -> list[str]:
    """Return the build order for *root* or raise DependencyCycleError.

    Unlike ``get_dependency_list`` this refuses trees in which any identifier
    appears twice, including diamond-shaped declarations.
    """
    duplicate = find_duplicate(root)
    if duplicate is not None:
        logger.debug("Dependency resolution failed for %r: %r repeated", root.id, duplicate)
        raise DependencyCycleError(duplicate, root.id)
    return get_dependency_list(root)


def try_resolve_build_order(root: Node) -> list[str] | None:
    try:
        return resolve_build_order(root)
    except DependencyCycleError:
        return None
