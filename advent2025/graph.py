"""A small directed, weighted graph of data-carrying nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

D = TypeVar("D")
W = TypeVar("W")


@dataclass(eq=False)
class Edge(Generic[D, W]):
    """An outgoing edge to ``target`` with a ``weight``."""

    target: GraphNode[D, W]
    weight: W


@dataclass(eq=False)
class GraphNode(Generic[D, W]):
    """A node holding ``data`` and its outgoing edges."""

    data: D
    edges: list[Edge[D, W]] = field(default_factory=list)


@dataclass
class Graph(Generic[D, W]):
    """A collection of nodes joined by weighted edges."""

    nodes: list[GraphNode[D, W]] = field(default_factory=list)

    def add_node(self, data: D) -> GraphNode[D, W]:
        node: GraphNode[D, W] = GraphNode(data)
        self.nodes.append(node)
        return node

    def add_edge(self, source: GraphNode[D, W], target: GraphNode[D, W], weight: W) -> None:
        source.edges.append(Edge(target, weight))

    def add_bidirectional_edge(
        self, source: GraphNode[D, W], target: GraphNode[D, W], weight: W
    ) -> None:
        source.edges.append(Edge(target, weight))
        target.edges.append(Edge(source, weight))

    def find_node(self, data: Any) -> GraphNode[D, W] | None:
        """Return the first node whose data equals ``data``, or None."""
        return next((node for node in self.nodes if node.data == data), None)