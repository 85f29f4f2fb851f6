"""Container tree inspection helpers.

Works on i3ipc ``Con`` objects (or anything exposing ``nodes``,
``focused``, ``layout`` and ``rect``). The tree is read-only here.
"""

from typing import Any, Optional


def find_focused_parent(node: Any) -> Optional[Any]:
    """Return the container whose direct children include the focused node.

    Depth-first, preorder: a node is returned as soon as one of its direct
    children is focused, and siblings are not explored after a match.

    Args:
        node: Root of the container tree (i3ipc Con)

    Returns:
        Parent container of the focused node, or None if nothing is focused
    """
    children = node.nodes or []
    if any(child.focused for child in children):
        return node

    for child in children:
        parent = find_focused_parent(child)
        if parent is not None:
            return parent
    return None


def is_wider_than_tall(container: Any) -> bool:
    """Return True if the container rect is strictly wider than tall."""
    return container.rect.width > container.rect.height
