from __future__ import annotations

from tagcheck.model import ROOT_NODE_TYPE, SyntaxNode

DECLARATION_FILE_SUFFIXES = (".d.ts", ".d.mts", ".d.cts")


def is_declaration_file(filename: str | None) -> bool:
    if not filename:
        return False
    return filename.endswith(DECLARATION_FILE_SUFFIXES)


def is_in_ambient_context(node: SyntaxNode | None, *, filename: str | None) -> bool:
    """Walk from ``node`` to the root looking for a ``declare`` marker.

    The root unit is ambient only when the file is a declaration file. A chain
    that ends without reaching a root is treated as non-ambient.
    """
    seen: set[int] = set()
    current = node
    while current is not None and id(current) not in seen:
        if current.type == ROOT_NODE_TYPE:
            return is_declaration_file(filename)
        if current.declare:
            return True
        seen.add(id(current))
        current = current.parent
    return False


def is_top_level_declaration(node: SyntaxNode | None, *, filename: str | None) -> bool:
    if node is None or node.parent is None:
        return False
    return node.parent.type == ROOT_NODE_TYPE and is_declaration_file(filename)
