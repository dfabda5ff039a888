"""JSON graph parser.

Accepts one canonical shape, lowercase keys only::

    {"nodes": [{"id": "n1", "data": {"label": "Node 1"}, "width": 150, "height": 50}],
     "edges": [{"source": "n1", "target": "n2", "id": "e1"}]}

Everything except node ``id`` and edge ``source``/``target`` is optional.
"""

from __future__ import annotations

import json
from typing import Any

from layered_layout.errors import InvalidInputError
from layered_layout.ir.graph import Graph


class JsonGraphParser:
    def parse(self, src: str) -> Graph:
        try:
            data = json.loads(src)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"malformed JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e
        return graph_from_data(data)


def graph_from_data(data: Any) -> Graph:
    """Build a Graph from already-decoded JSON data."""
    if not isinstance(data, dict):
        raise InvalidInputError("top level must be an object with 'nodes' and 'edges'")
    nodes = _require_list(data, "nodes")
    edges = _require_list(data, "edges")

    graph = Graph()
    for i, entry in enumerate(nodes):
        entry = _require_object(entry, f"nodes[{i}]")
        node_id = _require_str(entry, "id", f"nodes[{i}]")
        graph.add_node(
            node_id,
            width=entry.get("width"),
            height=entry.get("height"),
            label=_node_label(entry, f"nodes[{i}]"),
        )

    for i, entry in enumerate(edges):
        entry = _require_object(entry, f"edges[{i}]")
        source = _require_str(entry, "source", f"edges[{i}]")
        target = _require_str(entry, "target", f"edges[{i}]")
        edge_id = entry.get("id")
        if edge_id is not None and not isinstance(edge_id, str):
            raise InvalidInputError(f"edges[{i}].id must be a string")
        graph.add_edge(source, target, edge_id)

    return graph


def _require_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise InvalidInputError(f"'{key}' must be an array")
    return value


def _require_object(entry: Any, where: str) -> dict[str, Any]:
    if not isinstance(entry, dict):
        raise InvalidInputError(f"{where} must be an object")
    return entry


def _require_str(entry: dict[str, Any], key: str, where: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str) or not value:
        raise InvalidInputError(f"{where}.{key} must be a non-empty string")
    return value


def _node_label(entry: dict[str, Any], where: str) -> str | None:
    data = entry.get("data")
    if data is None:
        return None
    if not isinstance(data, dict):
        raise InvalidInputError(f"{where}.data must be an object")
    label = data.get("label")
    # empty labels fall back to the node id
    if not label:
        return None
    return str(label)
