"""
Tree interchange: JSON <-> SourceTree.

The parser collaborator dumps each analyzed file as one JSON document:

    {
      "text": "<source text>",
      "root": <node>,
      "tokens": [["PublicKeyword", 10, 16], ...]
    }

where a node is

    {"kind": "MethodDeclaration", "start": 10, "end": 25,
     "modifiers": [<node>...], "name": <node>|null, "text": "foo"|null,
     "members": [<node>...], "children": [<node>...]}

Only ``kind``, ``start`` and ``end`` are required on a node. Kind strings
outside SyntaxKind load as UNKNOWN.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from memberaccess.constants import SyntaxKind
from memberaccess.tree import Node, SourceTree, Token
from memberaccess.types import TreeFormatError


def load_tree(path: Path) -> SourceTree:
    """Read and decode a tree document from *path*."""
    try:
        raw: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TreeFormatError(f"Cannot read tree file: {e}", path=path) from e

    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"Invalid JSON: {e}", path=path) from e

    try:
        return tree_from_dict(data)
    except TreeFormatError as e:
        raise TreeFormatError(str(e), path=path) from e


def tree_from_dict(data: Any) -> SourceTree:
    if not isinstance(data, dict):
        raise TreeFormatError("tree document must be an object")
    text: Any = data.get("text", "")
    if not isinstance(text, str):
        raise TreeFormatError("'text' must be a string")
    if "root" not in data:
        raise TreeFormatError("tree document has no 'root'")

    raw_tokens: Any = data.get("tokens", [])
    if not isinstance(raw_tokens, list):
        raise TreeFormatError("'tokens' must be a list")

    return SourceTree(
        text=text,
        root=node_from_dict(data["root"]),
        tokens=tuple(_token_from_list(t) for t in raw_tokens),
    )


def node_from_dict(data: Any) -> Node:
    if not isinstance(data, dict):
        raise TreeFormatError(f"node must be an object, got {type(data).__name__}")

    kind: Any = data.get("kind")
    if not isinstance(kind, str):
        raise TreeFormatError("node 'kind' must be a string")
    start: int = _offset(data, "start")
    end: int = _offset(data, "end")
    if end < start:
        raise TreeFormatError(f"{kind} node ends before it starts ({start}..{end})")

    raw_name: Any = data.get("name")
    text: Any = data.get("text")
    return Node(
        kind=SyntaxKind.from_name(kind),
        start=start,
        end=end,
        modifiers=_node_list(data, "modifiers"),
        name=node_from_dict(raw_name) if raw_name is not None else None,
        text=text if isinstance(text, str) else None,
        members=_node_list(data, "members"),
        children=_node_list(data, "children"),
    )


def tree_to_dict(tree: SourceTree) -> dict[str, Any]:
    return {
        "text": tree.text,
        "root": node_to_dict(tree.root),
        "tokens": [[t.kind.value, t.start, t.end] for t in tree.tokens],
    }


def node_to_dict(node: Node) -> dict[str, Any]:
    result: dict[str, Any] = {
        "kind": node.kind.value,
        "start": node.start,
        "end": node.end,
    }
    if node.modifiers:
        result["modifiers"] = [node_to_dict(m) for m in node.modifiers]
    if node.name is not None:
        result["name"] = node_to_dict(node.name)
    if node.text is not None:
        result["text"] = node.text
    if node.members:
        result["members"] = [node_to_dict(m) for m in node.members]
    if node.children:
        result["children"] = [node_to_dict(c) for c in node.children]
    return result


def _offset(data: dict[str, Any], key: str) -> int:
    value: Any = data.get(key)
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise TreeFormatError(f"node '{key}' must be a non-negative integer")
    return value


def _node_list(data: dict[str, Any], key: str) -> tuple[Node, ...]:
    raw: Any = data.get(key, [])
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise TreeFormatError(f"node '{key}' must be a list")
    return tuple(node_from_dict(item) for item in raw)


def _token_from_list(raw: Any) -> Token:
    if (
        not isinstance(raw, list)
        or len(raw) != 3
        or not isinstance(raw[0], str)
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in raw[1:])
    ):
        raise TreeFormatError(f"token must be [kind, start, end], got {raw!r}")
    if raw[1] < 0 or raw[2] < raw[1]:
        raise TreeFormatError(f"token has an impossible span, got {raw!r}")
    return Token(kind=SyntaxKind.from_name(raw[0]), start=raw[1], end=raw[2])
