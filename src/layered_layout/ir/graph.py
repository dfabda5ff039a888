"""Graph model: the validated input to the layout engine.

Wraps a networkx DiGraph for adjacency queries and keeps the caller's edge
list (in input order, parallel edges included) so the layout result can hand
it back untouched. All validation happens here, at construction time, so the
layout phases never see a dangling reference or a duplicate id.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

import networkx as nx

from layered_layout.errors import DuplicateNodeError, InvalidInputError, UnknownNodeError

DEFAULT_NODE_WIDTH: float = 150
DEFAULT_NODE_HEIGHT: float = 50

NeighborDirection = Literal["incoming", "outgoing"]


@dataclass(frozen=True)
class NodeData:
    id: str
    width: float
    height: float
    label: str


@dataclass
class Edge:
    """A directed edge. ``id`` defaults to ``"<source>-<target>"``."""

    source: str
    target: str
    id: str | None = None

    def __post_init__(self) -> None:
        if self.id is None:
            self.id = f"{self.source}-{self.target}"

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


class Graph:
    """Nodes keyed by id (insertion order) plus the ordered edge list."""

    def __init__(self, node_width: float = DEFAULT_NODE_WIDTH, node_height: float = DEFAULT_NODE_HEIGHT) -> None:
        _check_size("node_width", node_width)
        _check_size("node_height", node_height)
        self.node_width = node_width
        self.node_height = node_height
        self.digraph: nx.DiGraph = nx.DiGraph()
        self.edges: list[Edge] = []

    def add_node(
        self,
        node_id: str,
        width: float | None = None,
        height: float | None = None,
        label: str | None = None,
    ) -> NodeData:
        if node_id in self.digraph:
            raise DuplicateNodeError(node_id)
        width = self.node_width if width is None else width
        height = self.node_height if height is None else height
        _check_size("width", width)
        _check_size("height", height)
        data = NodeData(id=node_id, width=width, height=height, label=node_id if label is None else label)
        self.digraph.add_node(node_id, data=data)
        return data

    def add_edge(self, source: str, target: str, edge_id: str | None = None) -> Edge:
        edge = Edge(source=source, target=target, id=edge_id)
        for endpoint in (source, target):
            if endpoint not in self.digraph:
                raise UnknownNodeError(edge, endpoint)
        self.edges.append(edge)
        self.digraph.add_edge(source, target)
        return edge

    def neighbors(self, node_id: str, direction: NeighborDirection) -> list[str]:
        """Adjacent node ids in edge insertion order, each listed once."""
        if node_id not in self.digraph:
            raise UnknownNodeError(None, node_id)
        if direction == "incoming":
            return list(self.digraph.predecessors(node_id))
        if direction == "outgoing":
            return list(self.digraph.successors(node_id))
        raise ValueError(f"Unknown neighbor direction '{direction}'; use incoming or outgoing")

    def node(self, node_id: str) -> NodeData:
        if node_id not in self.digraph:
            raise UnknownNodeError(None, node_id)
        return self.digraph.nodes[node_id]["data"]

    def has_node(self, node_id: str) -> bool:
        return node_id in self.digraph

    def node_ids(self) -> list[str]:
        return list(self.digraph.nodes)

    def nodes(self) -> list[NodeData]:
        return [attrs["data"] for _, attrs in self.digraph.nodes(data=True)]

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return len(self.edges)

    def in_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.in_degree(node_id)

    def out_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.out_degree(node_id)

    def is_dag(self) -> bool:
        return nx.is_directed_acyclic_graph(self.digraph)


def _check_size(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
        raise InvalidInputError(f"{name} must be a positive finite number, got {value!r}")
