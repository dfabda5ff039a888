"""Sugiyama-style layered graph layout engine.

Phases:
  1. Cycle breaking (DFS back edges)
  2. Layer assignment (longest path)
  3. Dummy node insertion
  4. Crossing minimization (median / barycenter sweeps)
  5. Coordinate assignment
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import networkx as nx

from layered_layout.config import LayoutConfig
from layered_layout.ir.graph import Graph
from layered_layout.layout.types import DUMMY_PREFIX, LayoutNode, LayoutResult, Position
from layered_layout.types import LayoutDirection

logger = logging.getLogger(__name__)


# ─── Cycle Breaking ──────────────────────────────────────────────────────────


def find_back_edges(graph: nx.DiGraph) -> list[tuple[str, str]]:
    """Return edges that reach a node still on the DFS stack.

    The traversal starts from each unvisited node in insertion order and
    follows successors in insertion order, so the result is stable for a
    given graph. Self-loops are never reported.
    """
    on_stack: set[str] = set()
    back_edges: list[tuple[str, str]] = []
    for src, tgt, kind in nx.dfs_labeled_edges(graph):
        if kind == "forward":
            on_stack.add(tgt)
        elif kind.startswith("reverse"):
            on_stack.discard(tgt)
        elif kind == "nontree" and src != tgt and tgt in on_stack:
            back_edges.append((src, tgt))
    return back_edges


def break_cycles(graph: nx.DiGraph) -> tuple[nx.DiGraph, set[tuple[str, str]]]:
    """Reverse back edges and drop self-loops. Returns (dag, reversed_edges)."""
    reversed_edges = set(find_back_edges(graph))

    dag: nx.DiGraph = nx.DiGraph()
    dag.add_nodes_from(graph.nodes)
    for src, tgt in graph.edges():
        if src == tgt:
            continue
        if (src, tgt) in reversed_edges:
            dag.add_edge(tgt, src)
        else:
            dag.add_edge(src, tgt)

    return dag, reversed_edges


# ─── Layer Assignment ────────────────────────────────────────────────────────


def assign_layers(dag: nx.DiGraph) -> dict[str, int]:
    """Longest path from the sources: layer = 1 + max(layer of predecessors)."""
    layers: dict[str, int] = {}
    for node_id in nx.topological_sort(dag):
        pred_layers = [layers[pred] for pred in dag.predecessors(node_id)]
        layers[node_id] = max(pred_layers) + 1 if pred_layers else 0
    return {node_id: layers[node_id] for node_id in dag.nodes}


# ─── Dummy Node Insertion ────────────────────────────────────────────────────


@dataclass
class DummyEdge:
    original_src: str
    original_tgt: str
    dummy_ids: list[str]


@dataclass
class AugmentedGraph:
    graph: nx.DiGraph
    layers: dict[str, int]
    layer_count: int
    dummy_edges: list[DummyEdge] = field(default_factory=list)

    @property
    def dummy_ids(self) -> set[str]:
        return {dummy_id for de in self.dummy_edges for dummy_id in de.dummy_ids}


def insert_dummy_nodes(dag: nx.DiGraph, layers: dict[str, int]) -> AugmentedGraph:
    """Split edges spanning several layers into chains through dummy nodes."""
    g: nx.DiGraph = nx.DiGraph()
    g.add_nodes_from(dag.nodes)

    aug_layers: dict[str, int] = dict(layers)
    dummy_edges: list[DummyEdge] = []
    counter = 0

    for src_id, tgt_id in list(dag.edges()):
        span = aug_layers[tgt_id] - aug_layers[src_id]
        if span <= 1:
            g.add_edge(src_id, tgt_id)
            continue

        dummy_ids: list[str] = []
        chain_prev = src_id
        for step in range(1, span):
            dummy_id = f"{DUMMY_PREFIX}{counter}"
            counter += 1
            while dummy_id in dag:
                dummy_id = f"{DUMMY_PREFIX}{counter}"
                counter += 1
            g.add_node(dummy_id)
            aug_layers[dummy_id] = aug_layers[src_id] + step
            g.add_edge(chain_prev, dummy_id)
            dummy_ids.append(dummy_id)
            chain_prev = dummy_id
        g.add_edge(chain_prev, tgt_id)

        dummy_edges.append(DummyEdge(original_src=src_id, original_tgt=tgt_id, dummy_ids=dummy_ids))

    layer_count = (max(aug_layers.values()) + 1) if aug_layers else 0
    return AugmentedGraph(graph=g, layers=aug_layers, layer_count=layer_count, dummy_edges=dummy_edges)


# ─── Crossing Minimization ───────────────────────────────────────────────────


def initial_ordering(aug: AugmentedGraph) -> list[list[str]]:
    """Bucket nodes by layer, keeping graph insertion order inside each layer."""
    ordering: list[list[str]] = [[] for _ in range(aug.layer_count)]
    for node_id in aug.graph.nodes:
        ordering[aug.layers[node_id]].append(node_id)
    return ordering


def minimise_crossings(aug: AugmentedGraph, max_iterations: int = 8, heuristic: str = "median") -> list[list[str]]:
    """Reorder layers with alternating down/up sweeps, keeping the best ordering seen.

    Stops early once there are no crossings left or a full down+up pair of
    sweeps brings no improvement.
    """
    ordering = initial_ordering(aug)
    best = count_crossings(ordering, aug.graph)
    best_ordering = [list(layer) for layer in ordering]
    stale = 0

    for iteration in range(max_iterations):
        if best == 0:
            break
        if iteration % 2 == 0:
            for layer_idx in range(1, aug.layer_count):
                ordering[layer_idx] = _sort_layer(
                    ordering[layer_idx], ordering[layer_idx - 1], aug.graph, "incoming", heuristic
                )
        else:
            for layer_idx in range(aug.layer_count - 2, -1, -1):
                ordering[layer_idx] = _sort_layer(
                    ordering[layer_idx], ordering[layer_idx + 1], aug.graph, "outgoing", heuristic
                )

        crossings = count_crossings(ordering, aug.graph)
        logger.debug("sweep %d: %d crossings (best %d)", iteration, crossings, best)
        if crossings < best:
            best = crossings
            best_ordering = [list(layer) for layer in ordering]
            stale = 0
        else:
            stale += 1
            if stale >= 2:
                break

    return best_ordering


def _sort_layer(layer: list[str], fixed: list[str], graph: nx.DiGraph, direction: str, heuristic: str) -> list[str]:
    fixed_pos: dict[str, int] = {nid: i for i, nid in enumerate(fixed)}
    keys: dict[str, float] = {}
    for current, node_id in enumerate(layer):
        neighbors = graph.predecessors(node_id) if direction == "incoming" else graph.successors(node_id)
        positions = sorted(fixed_pos[nb] for nb in neighbors if nb in fixed_pos)
        if not positions:
            keys[node_id] = float(current)
        elif heuristic == "barycenter":
            keys[node_id] = sum(positions) / len(positions)
        else:
            keys[node_id] = _median(positions)
    # sorted() is stable: equal keys keep the previous order
    return sorted(layer, key=keys.__getitem__)


def _median(positions: list[int]) -> float:
    mid = len(positions) // 2
    if len(positions) % 2:
        return float(positions[mid])
    return (positions[mid - 1] + positions[mid]) / 2


def count_crossings(ordering: list[list[str]], graph: nx.DiGraph) -> int:
    """Count pairs of edges between adjacent layers that cross.

    Edges sharing an endpoint never cross. Each layer pair is an inversion
    count over the lower positions, O(E log V).
    """
    total = 0
    for upper, lower in zip(ordering, ordering[1:]):
        lower_pos: dict[str, int] = {nid: i for i, nid in enumerate(lower)}
        edges: list[tuple[int, int]] = []
        for sp, src_id in enumerate(upper):
            for nb in graph.successors(src_id):
                if nb in lower_pos:
                    edges.append((sp, lower_pos[nb]))
        edges.sort()
        total += _count_inversions([b for _, b in edges], len(lower))
    return total


def _count_inversions(values: list[int], size: int) -> int:
    """Pairs i < j with values[i] > values[j], via a Fenwick tree over 0..size-1."""
    tree = [0] * (size + 1)
    inversions = 0
    for seen, value in enumerate(values):
        # earlier values <= value
        i = value + 1
        not_greater = 0
        while i > 0:
            not_greater += tree[i]
            i -= i & -i
        inversions += seen - not_greater
        i = value + 1
        while i <= size:
            tree[i] += 1
            i += i & -i
    return inversions


# ─── Coordinate Assignment ───────────────────────────────────────────────────


def assign_coordinates(
    ordering: list[list[str]],
    sizes: dict[str, tuple[float, float]],
    direction: LayoutDirection,
    config: LayoutConfig,
) -> list[LayoutNode]:
    """Place every node (dummies included) and return top-left positions.

    ``sizes`` maps node id to (width, height); ids missing from it are
    dummy nodes and get zero size and the smaller ``edge_gap`` spacing.
    """
    horizontal = direction.is_horizontal

    def extent(node_id: str) -> tuple[float, float]:
        # (order-axis size, rank-axis size)
        width, height = sizes.get(node_id, (0, 0))
        return (height, width) if horizontal else (width, height)

    def half_gap(node_id: str) -> float:
        gap = config.node_gap if node_id in sizes else config.edge_gap
        return gap / 2

    rank_centers: list[float] = []
    offset = 0.0
    for layer_nodes in ordering:
        thickness = max((extent(nid)[1] for nid in layer_nodes), default=0)
        rank_centers.append(offset + thickness / 2)
        offset += thickness + config.rank_gap
    rank_extent = offset - config.rank_gap if ordering else 0.0

    layer_slots: list[list[float]] = []
    layer_widths: list[float] = []
    for layer_nodes in ordering:
        slots: list[float] = []
        cursor = 0.0
        for i, node_id in enumerate(layer_nodes):
            if i > 0:
                cursor += half_gap(layer_nodes[i - 1]) + half_gap(node_id)
            size = extent(node_id)[0]
            slots.append(cursor + size / 2)
            cursor += size
        layer_slots.append(slots)
        layer_widths.append(cursor)

    max_width = max(layer_widths, default=0.0)

    nodes: list[LayoutNode] = []
    for layer_idx, layer_nodes in enumerate(ordering):
        shift = (max_width - layer_widths[layer_idx]) / 2 if config.center_layers else 0.0
        across = rank_centers[layer_idx]
        if direction.is_mirrored:
            across = rank_extent - across
        for order, node_id in enumerate(layer_nodes):
            along = layer_slots[layer_idx][order] + shift
            cx, cy = (across, along) if horizontal else (along, across)
            width, height = sizes.get(node_id, (0, 0))
            nodes.append(
                LayoutNode(
                    id=node_id,
                    layer=layer_idx,
                    order=order,
                    x=cx - width / 2,
                    y=cy - height / 2,
                    width=width,
                    height=height,
                )
            )

    return nodes


# ─── SugiyamaLayout Engine ───────────────────────────────────────────────────


class SugiyamaLayout:
    """Sugiyama layered layout engine.

    Holds only its configuration; every call to ``layout`` builds and drops
    its own working graph, so one instance can be shared freely.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config if config is not None else LayoutConfig()
        self.config.validate()

    def layout(self, graph: Graph, direction: LayoutDirection = LayoutDirection.TopToBottom) -> LayoutResult:
        edges = list(graph.edges)
        if graph.node_count() == 0:
            return LayoutResult(edges=edges, direction=direction)

        dag, reversed_edges = break_cycles(graph.digraph)
        layers = assign_layers(dag)
        logger.debug(
            "%d nodes in %d layers, %d edge(s) reversed",
            len(layers),
            max(layers.values()) + 1,
            len(reversed_edges),
        )

        aug = insert_dummy_nodes(dag, layers)
        ordering = minimise_crossings(aug, self.config.max_iterations, self.config.heuristic)

        sizes = {data.id: (data.width, data.height) for data in graph.nodes()}
        placed = {ln.id: ln for ln in assign_coordinates(ordering, sizes, direction, self.config)}

        nodes: list[LayoutNode] = []
        for data in graph.nodes():
            ln = placed[data.id]
            ln.label = data.label
            nodes.append(ln)

        min_x = min(n.x for n in nodes)
        min_y = min(n.y for n in nodes)
        for n in nodes:
            n.x -= min_x
            n.y -= min_y

        return LayoutResult(
            positions={n.id: Position(x=n.x, y=n.y) for n in nodes},
            edges=edges,
            nodes=nodes,
            direction=direction,
            width=max(n.x + n.width for n in nodes),
            height=max(n.y + n.height for n in nodes),
        )
